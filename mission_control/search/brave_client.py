"""
Brave Search client for the scout engine.

Uses the Brave Web Search API.
API documentation: https://api-dashboard.search.brave.com/app/documentation/web-search
"""

import asyncio
import logging
import os
from typing import Optional

import httpx
from pydantic import BaseModel, Field

from mission_control.config import ScoutConfigError
from mission_control.models.scout import SearchHit


logger = logging.getLogger(__name__)


class BraveWebResult(BaseModel):
    """One entry of ``web.results``. Only the fields the scout reads."""

    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    page_age: Optional[str] = None
    age: Optional[str] = None


class BraveWebResults(BaseModel):
    results: list[BraveWebResult] = Field(default_factory=list)


class BraveSearchResponse(BaseModel):
    """Top level of a web search response. Unknown keys are ignored."""

    web: Optional[BraveWebResults] = None


class BraveSearchClient:
    """
    Async client for the Brave Web Search API.

    Calls are spaced at least ``request_delay`` seconds apart. Requests
    are issued one at a time; there are no retries.
    """

    BASE_URL = "https://api.search.brave.com/res/v1/web/search"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 15.0,
        request_delay: float = 1.0,
    ):
        """
        Initialize the Brave client.

        Args:
            api_key: Subscription token. If not provided, reads BRAVE_API_KEY.
            timeout: HTTP request timeout in seconds
            request_delay: Minimum seconds between successive requests
        """
        self.api_key = api_key or os.getenv("BRAVE_API_KEY")
        if not self.api_key:
            raise ScoutConfigError(
                "Brave Search API key required. Set BRAVE_API_KEY environment variable "
                "or scout.braveApiKey in the config file."
            )
        self.timeout = timeout
        self._request_delay = request_delay
        self._last_request_time: Optional[float] = None

    async def _rate_limit(self):
        """Enforce the minimum delay between requests."""
        loop = asyncio.get_running_loop()
        if self._last_request_time is not None:
            elapsed = loop.time() - self._last_request_time
            if elapsed < self._request_delay:
                await asyncio.sleep(self._request_delay - elapsed)
        self._last_request_time = loop.time()

    def _headers(self) -> dict:
        return {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": self.api_key,
        }

    async def search(
        self,
        query: str,
        count: int = 5,
        freshness: str = "pw",
    ) -> list[SearchHit]:
        """
        Search the web for a query.

        Args:
            query: Search query text
            count: Maximum number of results to return
            freshness: Recency filter ('pd', 'pw', 'pm', 'py')

        Returns:
            List of SearchHit. Empty when the provider answers with a non-2xx status.

        Raises:
            httpx.HTTPError: On transport failures (timeouts, connection errors)
            pydantic.ValidationError: If a 2xx body does not have the expected shape
        """
        await self._rate_limit()

        params = {"q": query, "count": count, "freshness": freshness}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(
                self.BASE_URL,
                params=params,
                headers=self._headers(),
            )

        if not response.is_success:
            logger.error(f"Brave search failed ({response.status_code}): {query[:50]}")
            return []

        return self._parse_results(response.json())

    def _parse_results(self, data) -> list[SearchHit]:
        """
        Parse the web results block of a search response.

        Raises:
            pydantic.ValidationError: If the body does not have the expected shape
        """
        parsed = BraveSearchResponse.model_validate(data)
        if parsed.web is None:
            return []

        hits = []
        for result in parsed.web.results:
            if not result.url:
                continue
            hits.append(
                SearchHit(
                    title=result.title or "",
                    url=result.url,
                    description=result.description or "",
                    published_age=result.page_age or result.age,
                )
            )
        return hits
