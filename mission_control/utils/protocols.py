"""
Shared Protocol definitions for type hints across the codebase.

These protocols describe the external search provider so the scout
pipeline can be driven by a real client or a test double.
"""

from typing import Protocol

from mission_control.models.scout import SearchHit


class SearchClientProtocol(Protocol):
    """Interface the scout expects from a web-search client."""

    async def search(
        self,
        query: str,
        count: int = 5,
        freshness: str = "pw",
    ) -> list[SearchHit]:
        """
        Run one search.

        Args:
            query: Search query text
            count: Maximum number of results
            freshness: Provider recency filter

        Returns:
            List of SearchHit (empty on a provider-side failure)
        """
        ...
