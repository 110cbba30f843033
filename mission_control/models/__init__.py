"""Data models for the scout engine."""

from mission_control.models.scout import (
    Opportunity,
    Query,
    ResultSnapshot,
    SearchHit,
)

__all__ = [
    "Opportunity",
    "Query",
    "ResultSnapshot",
    "SearchHit",
]
