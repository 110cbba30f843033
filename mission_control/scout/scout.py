"""
Scout - Opportunity search, scoring and ranking.

Runs each configured query against the search provider, scores the
hits, and reduces them to a bounded, deduplicated, ranked snapshot.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

import httpx

from mission_control.models.scout import Opportunity, Query, ResultSnapshot
from mission_control.scout.scoring import KeywordProfile, score_opportunity
from mission_control.utils.protocols import SearchClientProtocol


logger = logging.getLogger(__name__)


MAX_RESULTS_PER_QUERY = 5
MIN_ADMISSION_SCORE = 35
MAX_TOTAL = 50


# =============================================================================
# DEDUP AND RANKING
# =============================================================================


def dedupe(opportunities: Iterable[Opportunity]) -> list[Opportunity]:
    """
    Drop opportunities whose URL (query string removed) was already seen.

    The first occurrence wins; order is preserved.
    """
    seen = set()
    unique = []
    for opp in opportunities:
        if opp.dedup_key in seen:
            continue
        seen.add(opp.dedup_key)
        unique.append(opp)
    return unique


def rank(opportunities: Iterable[Opportunity], max_total: int = MAX_TOTAL) -> list[Opportunity]:
    """Sort by score, highest first (ties keep their order), and truncate."""
    return sorted(opportunities, key=lambda opp: opp.score, reverse=True)[:max_total]


# =============================================================================
# SEARCH
# =============================================================================


async def scout_query(
    query: Query,
    client: SearchClientProtocol,
    min_score: int = MIN_ADMISSION_SCORE,
    profile: Optional[KeywordProfile] = None,
    results_per_query: int = MAX_RESULTS_PER_QUERY,
    freshness: str = "pw",
) -> list[Opportunity]:
    """
    Run one query and return the hits that clear the admission threshold.

    Raises:
        httpx.HTTPError: On transport failures from the client
    """
    hits = await client.search(query.text, count=results_per_query, freshness=freshness)
    logger.info(f"   {len(hits)} results found")

    admitted = []
    for hit in hits:
        score = score_opportunity(hit, query, profile)
        if score < min_score:
            logger.debug(f"   [{score}] below threshold: {hit.title[:60]}")
            continue
        admitted.append(
            Opportunity.from_hit(hit, query, score, scanned_at=datetime.now(timezone.utc))
        )
    return admitted


async def run_scout(
    queries: Sequence[Query],
    client: SearchClientProtocol,
    min_score: int = MIN_ADMISSION_SCORE,
    max_total: int = MAX_TOTAL,
    profile: Optional[KeywordProfile] = None,
    results_per_query: int = MAX_RESULTS_PER_QUERY,
    freshness: str = "pw",
) -> ResultSnapshot:
    """
    Main Scout function. Searches, scores, dedupes and ranks.

    Queries run one after another; the client spaces its calls. A query
    that fails contributes nothing and the run continues.

    Args:
        queries: Queries to run, in order
        client: Search provider client
        min_score: Admission threshold applied before ranking
        max_total: Maximum opportunities kept in the snapshot
        profile: Keyword profile for scoring
        results_per_query: Results requested per query
        freshness: Provider recency filter

    Returns:
        ResultSnapshot ready to be written
    """
    collected: list[Opportunity] = []

    for query in queries:
        logger.info(f"{query.category}: \"{query.text[:60]}...\"")
        try:
            collected.extend(
                await scout_query(
                    query,
                    client,
                    min_score=min_score,
                    profile=profile,
                    results_per_query=results_per_query,
                    freshness=freshness,
                )
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Query failed ({query.category}: \"{query.text[:50]}\"): {e}")

    unique = dedupe(collected)
    ranked = rank(unique, max_total)
    logger.info(f"Found {len(ranked)} opportunities ({len(unique)} before limit)")

    return ResultSnapshot(
        total_queries=len(queries),
        total_results=len(ranked),
        opportunities=ranked,
    )


def format_summary(snapshot: ResultSnapshot, limit: int = 5) -> str:
    """Render the top opportunities as plain text for the run log."""
    if not snapshot.opportunities:
        return "No opportunities found"

    lines = ["Top opportunities:"]
    for i, opp in enumerate(snapshot.opportunities[:limit], start=1):
        lines.append(f"{i}. [{opp.score}] {opp.title} ({opp.category})")
        lines.append(f"   {opp.url}")
    return "\n".join(lines)
