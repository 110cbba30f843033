"""
Query configuration for the scout.

Queries are read once per run from the dashboard's ``mc-config.json``
(``scout.queries``). The built-in list is used whenever that file is
missing, unreadable or has no usable entries.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from mission_control.models.scout import Query


logger = logging.getLogger(__name__)


def _q(text: str, category: str, source: str, weight: float) -> Query:
    return Query(text=text, category=category, source=source, weight=weight)


DEFAULT_QUERIES: tuple[Query, ...] = (
    # OpenClaw ecosystem
    _q('site:x.com openclaw OR clawd "mission control" OR "skill" OR "built" OR "agent"', "openclaw", "twitter", 1.0),
    _q('site:x.com openclaw "new feature" OR "just shipped" OR "update" OR "tip"', "openclaw", "twitter", 1.0),
    _q('site:x.com clawd agent "my agent" "built" OR "made" OR "automated" OR "workflow"', "openclaw", "twitter", 0.95),
    _q('site:github.com openclaw skill OR plugin OR "mission control"', "openclaw-github", "github", 1.0),
    _q("site:reddit.com openclaw OR clawd agent automation", "openclaw", "reddit", 0.9),
    _q('site:youtube.com openclaw OR clawd "ai agent" tutorial OR guide OR setup', "openclaw-tutorial", "youtube", 0.9),
    _q('clawhub.com skill OR "new skill" OR automation', "openclaw-skills", "web", 1.0),
    _q('"openclaw" "discord" agent automation workflow 2026', "openclaw", "web", 0.85),
    # Freelance and jobs
    _q('"looking for" "web developer" OR "website developer" sweden OR remote 2026', "freelance", "web", 1.0),
    _q('site:x.com "hiring" OR "looking for" "react developer" OR "frontend developer" remote', "twitter-jobs", "twitter", 0.9),
    _q('site:linkedin.com "hiring" "react" OR "next.js" OR "typescript" "sweden" OR "remote"', "linkedin-jobs", "linkedin", 0.85),
    _q('site:reddit.com/r/forhire OR site:reddit.com/r/webdev "looking for" react developer', "reddit-gigs", "reddit", 0.8),
    # Edtech
    _q("site:x.com edtech AI children education startup 2026", "edtech", "twitter", 0.7),
    _q("site:linkedin.com edtech AI storytelling children learning startup", "edtech", "linkedin", 0.7),
    # Grants and competitions
    _q('"startup grant" OR "startup competition" edtech OR AI europe 2026 application deadline', "funding", "web", 0.95),
    _q('sweden "innovation grant" OR "startup funding" OR "ALMI" OR "Vinnova" 2026 open', "swedish-grants", "web", 1.0),
    # Upwork
    _q("site:upwork.com react next.js supabase developer", "upwork", "upwork", 0.8),
    # Bug bounty
    _q('site:hackerone.com "new program" OR "launched" OR "bounty" 2026', "bounty", "hackerone", 1.0),
    _q('site:x.com hackerone "new program" OR "bounty" OR "launched" OR "paying"', "bounty", "twitter", 0.95),
    _q('site:x.com "bug bounty" "high" OR "critical" OR "payout" OR "$" 2026', "bounty", "twitter", 0.9),
    _q('hackerone OR bugcrowd "new scope" OR "increased bounty" OR "bonus" 2026', "bounty", "web", 0.9),
    _q('site:reddit.com/r/bugbounty "just found" OR "payout" OR "tips" OR "methodology"', "bounty", "reddit", 0.85),
)


def _read_config(config_path: Path) -> Optional[dict]:
    """Read the dashboard config. Returns None when missing or unreadable."""
    if not config_path.exists():
        logger.info(f"No config at {config_path}")
        return None

    try:
        config = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Could not load queries from {config_path}, using defaults: {e}")
        return None

    if not isinstance(config, dict):
        logger.warning(f"Config at {config_path} is not a JSON object, using defaults")
        return None
    return config


def _scout_section(config: Optional[dict]) -> dict:
    section = (config or {}).get("scout")
    return section if isinstance(section, dict) else {}


def load_queries(config_path: Union[str, Path]) -> list[Query]:
    """
    Load the query list for one run.

    Entries that fail validation are logged and skipped. Falls back to
    DEFAULT_QUERIES when nothing usable is configured.

    Args:
        config_path: Path to the dashboard's JSON config

    Returns:
        Non-empty list of Query
    """
    config_path = Path(config_path)
    config = _read_config(config_path)

    raw_queries = _scout_section(config).get("queries")
    if isinstance(raw_queries, list) and raw_queries:
        queries = []
        for index, entry in enumerate(raw_queries):
            try:
                queries.append(Query.model_validate(entry))
            except ValidationError as e:
                logger.warning(
                    f"Skipping malformed query #{index} in {config_path}: "
                    f"{e.error_count()} validation error(s)"
                )

        if queries:
            logger.info(f"Loaded {len(queries)} queries from {config_path.name}")
            return queries

    logger.info(f"Using {len(DEFAULT_QUERIES)} default queries")
    return list(DEFAULT_QUERIES)


def load_api_key_from_config(config_path: Union[str, Path]) -> Optional[str]:
    """Return ``scout.braveApiKey`` from the dashboard config, if set."""
    config = _read_config(Path(config_path))
    api_key = _scout_section(config).get("braveApiKey")
    return api_key or None
