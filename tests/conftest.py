"""
Pytest configuration and shared fixtures for the test suite.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from mission_control.models.scout import Query, SearchHit


# ============================================================================
# Queries and hits
# ============================================================================

@pytest.fixture
def make_query():
    """Factory for queries with sensible defaults."""
    def _create(
        text: str = "react developer sweden",
        category: str = "freelance",
        source: str = "web",
        weight: float = 1.0,
    ) -> Query:
        return Query(text=text, category=category, source=source, weight=weight)
    return _create


@pytest.fixture
def make_hit():
    """Factory for raw search hits."""
    def _create(
        title: str = "Plain result",
        url: str = "https://example.com/post",
        description: str = "",
        published_age=None,
    ) -> SearchHit:
        return SearchHit(
            title=title,
            url=url,
            description=description,
            published_age=published_age,
        )
    return _create


@pytest.fixture
def fixed_now():
    """Reference time for freshness calculations."""
    return datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Mock search client
# ============================================================================

@pytest.fixture
def mock_search_client():
    """
    Create a mock search client.

    Set ``client.results`` to a dict of query text -> list of hits,
    or to an Exception instance to make that query fail.
    """
    client = MagicMock()
    client.results = {}

    async def _search(query, count=5, freshness="pw"):
        outcome = client.results.get(query, [])
        if isinstance(outcome, Exception):
            raise outcome
        return outcome[:count]

    client.search = AsyncMock(side_effect=_search)
    return client


@pytest.fixture
def config_file(tmp_path):
    """Write a dashboard config file and return its path."""
    def _write(content: str):
        path = tmp_path / "mc-config.json"
        path.write_text(content, encoding="utf-8")
        return path
    return _write
