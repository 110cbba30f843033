"""
Command-line entry point for a scout run.

Usage: mission-scout [--dry-run]

Meant to be triggered by an external scheduler (cron or equivalent).
Writes the snapshot to SCOUT_RESULTS_PATH.
"""

import argparse
import asyncio
import logging
from typing import Optional, Sequence

from dotenv import load_dotenv

from mission_control.config import ScoutSettings
from mission_control.scout.queries import load_api_key_from_config, load_queries
from mission_control.scout.scoring import KeywordProfile
from mission_control.scout.scout import format_summary, run_scout
from mission_control.scout.snapshot import write_snapshot
from mission_control.search.brave_client import BraveSearchClient
from mission_control.utils.logging import setup_logging


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mission-scout",
        description="Search for opportunities and write a ranked snapshot.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load and log the query configuration without searching or writing results",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scout once. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    load_dotenv()
    setup_logging()

    settings = ScoutSettings()
    queries = load_queries(settings.config_path)

    logger.info("Scout Engine starting...")
    logger.info(f"Running {len(queries)} queries ({'DRY RUN' if args.dry_run else 'LIVE'})")

    if args.dry_run:
        logger.info(f"Config loaded successfully, queries: {[q.text for q in queries[:3]]}")
        return 0

    client = BraveSearchClient(
        api_key=settings.brave_api_key or load_api_key_from_config(settings.config_path),
        timeout=settings.request_timeout,
        request_delay=settings.request_delay,
    )
    profile = KeywordProfile.from_yaml(settings.scoring_profile_path)

    snapshot = asyncio.run(
        run_scout(
            queries,
            client,
            min_score=settings.min_score,
            max_total=settings.max_total,
            profile=profile,
            results_per_query=settings.results_per_query,
            freshness=settings.freshness,
        )
    )

    write_snapshot(snapshot, settings.results_path)
    logger.info(format_summary(snapshot))
    return 0
