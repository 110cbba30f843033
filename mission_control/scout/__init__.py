"""
Scout - Opportunity scouting for the Mission Control dashboard.

Searches the web with a weighted query list, scores and ranks the
findings, and writes a snapshot the dashboard displays.
"""

from mission_control.scout.queries import DEFAULT_QUERIES, load_queries
from mission_control.scout.scoring import KeywordProfile, score_opportunity
from mission_control.scout.scout import dedupe, format_summary, rank, run_scout
from mission_control.scout.snapshot import load_snapshot, write_snapshot

__all__ = [
    "DEFAULT_QUERIES",
    "KeywordProfile",
    "dedupe",
    "format_summary",
    "load_queries",
    "load_snapshot",
    "rank",
    "run_scout",
    "score_opportunity",
    "write_snapshot",
]
