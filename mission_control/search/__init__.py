"""
Search provider clients used by the scout.
"""

from mission_control.search.brave_client import BraveSearchClient

__all__ = ["BraveSearchClient"]
