"""Utility modules."""

from mission_control.utils.logging import setup_logging

__all__ = ["setup_logging"]
