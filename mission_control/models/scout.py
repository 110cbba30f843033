"""
Mission Control - Scout Schemas

Models for search queries, raw provider hits, scored opportunities
and the persisted result snapshot read by the dashboard.
"""

import hashlib
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def strip_query_string(url: str) -> str:
    """Return the URL with everything from the first '?' removed."""
    return url.split("?", 1)[0]


class Query(BaseModel):
    """A configured search directive with its category and source label."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(..., alias="q", min_length=1, description="Search query text")
    category: str = Field(..., min_length=1, description="Category tag, e.g. 'freelance'")
    source: str = Field(default="web", description="Where the query points, e.g. 'twitter'")
    weight: float = Field(default=1.0, gt=0.0, description="Multiplier applied to the score")


class SearchHit(BaseModel):
    """A raw result from the search provider."""

    title: str = ""
    url: str
    description: str = ""
    published_age: Optional[str] = Field(
        default=None,
        description="Provider-reported age, e.g. '2 days ago' or an ISO timestamp",
    )


class Opportunity(BaseModel):
    """A search hit scored against the query that found it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    url: str
    description: str = ""
    published: Optional[str] = None
    query: str
    category: str
    source: str
    score: int = Field(ge=5, le=100)
    scanned_at: datetime = Field(alias="scannedAt")

    @property
    def dedup_key(self) -> str:
        return strip_query_string(self.url)

    @classmethod
    def from_hit(
        cls,
        hit: SearchHit,
        query: Query,
        score: int,
        scanned_at: Optional[datetime] = None,
    ) -> "Opportunity":
        """Build an opportunity from a hit and its originating query."""
        key = strip_query_string(hit.url)
        return cls(
            id=hashlib.sha1(key.encode("utf-8")).hexdigest()[:12],
            title=hit.title,
            url=hit.url,
            description=hit.description,
            published=hit.published_age,
            query=query.text,
            category=query.category,
            source=query.source,
            score=score,
            scanned_at=scanned_at or datetime.now(timezone.utc),
        )


class ResultSnapshot(BaseModel):
    """Complete output of one scout run. Replaces the previous snapshot."""

    model_config = ConfigDict(populate_by_name=True)

    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="generatedAt",
    )
    total_queries: int = Field(default=0, ge=0, alias="totalQueries")
    total_results: int = Field(default=0, ge=0, alias="totalResults")
    opportunities: list[Opportunity] = Field(default_factory=list)

    def to_json(self) -> str:
        """Serialize with the camelCase keys the dashboard expects."""
        return self.model_dump_json(by_alias=True, indent=2)
