"""
Opportunity scoring.

A hit is scored by summing small named bonuses over its title and
description, scaling by the query weight, adding a freshness bonus and
clamping to [MIN_SCORE, MAX_SCORE]. Denylisted hits score MIN_SCORE.
"""

import logging
import math
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from mission_control.models.scout import Query, SearchHit


logger = logging.getLogger(__name__)


BASE_SCORE = 30
MIN_SCORE = 5
MAX_SCORE = 100

# Per matching keyword
PRIMARY_BONUS = 15
SECONDARY_BONUS = 10
FREELANCE_BONUS = 12
LOCAL_BONUS = 18
ECOSYSTEM_KEYWORD_BONUS = 12

# Flat, once per phrase group
ACTIONABLE_BONUS = 15
WORK_MODE_BONUS = 10
FUNDING_BONUS = 12
ECOSYSTEM_CATEGORY_BONUS = 15
SKILL_SHOWCASE_BONUS = 10
TUTORIAL_BONUS = 8
BOUNTY_PLATFORM_BONUS = 12
BOUNTY_REWARD_BONUS = 10
BOUNTY_LAUNCH_BONUS = 8
BOUNTY_CATEGORY_BONUS = 15

FRESH_UNDER_DAY_BONUS = 15
FRESH_3_DAYS_BONUS = 10
FRESH_7_DAYS_BONUS = 5

# =============================================================================
# PHRASE GROUPS
# =============================================================================

ACTIONABLE_PHRASES = ["looking for", "need", "hiring", "söker", "behöver"]
WORK_MODE_PHRASES = ["freelance", "remote", "contract"]
FUNDING_PHRASES = ["grant", "funding", "competition", "tävling"]
SKILL_SHOWCASE_PHRASES = ["new skill", "built a skill", "automation"]
TUTORIAL_PHRASES = ["tutorial", "guide", "how to"]
BOUNTY_PLATFORM_PHRASES = ["bounty", "hackerone", "bugcrowd"]
BOUNTY_REWARD_PHRASES = ["payout", "reward", "critical"]
BOUNTY_LAUNCH_PHRASES = ["new program", "new scope", "launched"]


class KeywordProfile(BaseModel):
    """Keyword sets describing what counts as a relevant opportunity."""

    primary: list[str] = Field(default_factory=lambda: [
        "website", "webbutveckling", "hemsida", "webbdesign", "web developer", "react developer",
    ])
    secondary: list[str] = Field(default_factory=lambda: [
        "edtech", "ai storytelling", "children education", "empathy", "startup funding", "swedish grant",
    ])
    freelance: list[str] = Field(default_factory=lambda: [
        "freelance developer", "react job", "supabase", "typescript developer", "nextjs developer",
    ])
    local: list[str] = Field(default_factory=lambda: [
        "småland", "kronoberg", "växjö", "åseda", "alvesta", "lenhovda",
    ])
    ecosystem: list[str] = Field(default_factory=lambda: [
        "openclaw", "clawd", "mission control", "ai agent", "skill", "sub-agent",
        "heartbeat", "cron job", "gateway",
    ])
    ecosystem_category_prefix: str = "openclaw"
    bounty_category: str = "bounty"

    denylist_domains: list[str] = Field(default_factory=lambda: ["wikipedia.org"])
    denylist_terms: list[str] = Field(default_factory=lambda: [
        "weather", "väder", "polisen", "olycka",
    ])

    @field_validator(
        "primary", "secondary", "freelance", "local", "ecosystem",
        "denylist_domains", "denylist_terms",
    )
    @classmethod
    def _lowercase_keywords(cls, keywords: list[str]) -> list[str]:
        # Matched against lowercased hit text
        return [keyword.lower() for keyword in keywords]

    @field_validator("ecosystem_category_prefix", "bounty_category")
    @classmethod
    def _lowercase_category(cls, value: str) -> str:
        return value.lower()

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "KeywordProfile":
        """Load a profile from YAML. Missing keys keep their defaults."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.info(f"No scoring profile at {path}, using built-in keywords")
            return cls()
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not read scoring profile {path}, using built-in keywords: {e}")
            return cls()

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Invalid scoring profile {path}, using built-in keywords: {e}")
            return cls()


DEFAULT_PROFILE = KeywordProfile()


# =============================================================================
# SUB-SCORERS
# =============================================================================


def hit_text(hit: SearchHit) -> str:
    """Lowercased title and description, the text all keyword checks run on."""
    return f"{hit.title} {hit.description}".lower()


def _contains_any(text: str, phrases: list[str]) -> bool:
    return any(phrase in text for phrase in phrases)


def is_denylisted(hit: SearchHit, profile: KeywordProfile = DEFAULT_PROFILE) -> bool:
    """True for reference sites, weather and incident reports."""
    url = hit.url.lower()
    if any(domain in url for domain in profile.denylist_domains):
        return True
    return _contains_any(hit_text(hit), profile.denylist_terms)


def keyword_set_bonus(text: str, profile: KeywordProfile = DEFAULT_PROFILE) -> int:
    """Sum of per-keyword bonuses over every keyword set."""
    weighted_sets = [
        (profile.primary, PRIMARY_BONUS),
        (profile.secondary, SECONDARY_BONUS),
        (profile.freelance, FREELANCE_BONUS),
        (profile.local, LOCAL_BONUS),
        (profile.ecosystem, ECOSYSTEM_KEYWORD_BONUS),
    ]
    return sum(
        bonus
        for keywords, bonus in weighted_sets
        for keyword in keywords
        if keyword in text
    )


def actionable_bonus(text: str) -> int:
    """Bonus for someone needing something, a work arrangement, or funding."""
    score = 0
    if _contains_any(text, ACTIONABLE_PHRASES):
        score += ACTIONABLE_BONUS
    if _contains_any(text, WORK_MODE_PHRASES):
        score += WORK_MODE_BONUS
    if _contains_any(text, FUNDING_PHRASES):
        score += FUNDING_BONUS
    return score


def ecosystem_bonus(text: str, category: str, profile: KeywordProfile = DEFAULT_PROFILE) -> int:
    """Flat bonuses for ecosystem queries, skill showcases and tutorials."""
    score = 0
    if category and category.startswith(profile.ecosystem_category_prefix):
        score += ECOSYSTEM_CATEGORY_BONUS
    if _contains_any(text, SKILL_SHOWCASE_PHRASES):
        score += SKILL_SHOWCASE_BONUS
    if _contains_any(text, TUTORIAL_PHRASES):
        score += TUTORIAL_BONUS
    return score


def bounty_bonus(text: str, category: str, profile: KeywordProfile = DEFAULT_PROFILE) -> int:
    """Bonuses for bug-bounty platforms, payouts and program launches."""
    score = 0
    if _contains_any(text, BOUNTY_PLATFORM_PHRASES):
        score += BOUNTY_PLATFORM_BONUS
    if _contains_any(text, BOUNTY_REWARD_PHRASES):
        score += BOUNTY_REWARD_BONUS
    if _contains_any(text, BOUNTY_LAUNCH_PHRASES):
        score += BOUNTY_LAUNCH_BONUS
    if category == profile.bounty_category:
        score += BOUNTY_CATEGORY_BONUS
    return score


# The unit must start a word, so "monday" or "today" do not read as a day
_RELATIVE_AGE = re.compile(
    r"(?:\b(\d+|an?|one)\s*)?(?<![^\W\d_])(second|minute|hour|day|week|month|year)s?\b"
)

# Any phrase in these units counts as published within the last day
_SUB_DAY_UNITS = frozenset({"second", "minute", "hour"})

_UNIT_DAYS = {
    "second": 1 / 86400,
    "minute": 1 / 1440,
    "hour": 1 / 24,
    "day": 1.0,
    "week": 7.0,
    "month": 30.0,
    "year": 365.0,
}


def _relative_age(published_age: str) -> Optional[re.Match]:
    value = published_age.strip().lower()
    if value[:4].isdigit():
        return None
    return _RELATIVE_AGE.search(value)


def age_in_days(published_age: Optional[str], now: Optional[datetime] = None) -> Optional[float]:
    """
    Convert a provider age into days.

    Understands relative phrases ("3 hours ago", "a day ago") and
    ISO-8601 timestamps. Naive timestamps are taken as UTC.

    Returns:
        Age in days, or None when the value cannot be interpreted
    """
    if not published_age:
        return None

    match = _relative_age(published_age)
    if match:
        amount = match.group(1)
        count = int(amount) if amount and amount.isdigit() else 1
        return count * _UNIT_DAYS[match.group(2)]

    try:
        published = datetime.fromisoformat(published_age.strip().replace("Z", "+00:00"))
    except ValueError:
        return None

    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return max((now - published).total_seconds() / 86400, 0.0)


def freshness_bonus(published_age: Optional[str], now: Optional[datetime] = None) -> int:
    """
    Bonus for recent results: under a day, up to 3 days, up to 7 days.

    Relative ages in seconds, minutes or hours always get the under-a-day
    bonus, so "36 hours ago" scores like "3 hours ago".
    """
    if published_age:
        match = _relative_age(published_age)
        if match and match.group(2) in _SUB_DAY_UNITS:
            return FRESH_UNDER_DAY_BONUS

    days = age_in_days(published_age, now)
    if days is None:
        return 0
    if days < 1:
        return FRESH_UNDER_DAY_BONUS
    if days <= 3:
        return FRESH_3_DAYS_BONUS
    if days <= 7:
        return FRESH_7_DAYS_BONUS
    return 0


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


# =============================================================================
# MAIN SCORER
# =============================================================================


def score_opportunity(
    hit: SearchHit,
    query: Query,
    profile: Optional[KeywordProfile] = None,
    now: Optional[datetime] = None,
) -> int:
    """
    Score a search hit against the query that produced it.

    Args:
        hit: Raw provider result
        query: Originating query (category and weight are used)
        profile: Keyword profile; the built-in one when omitted
        now: Reference time for freshness; current UTC time when omitted

    Returns:
        Integer score in [MIN_SCORE, MAX_SCORE]
    """
    profile = profile or DEFAULT_PROFILE

    if is_denylisted(hit, profile):
        return MIN_SCORE

    text = hit_text(hit)
    raw = (
        BASE_SCORE
        + keyword_set_bonus(text, profile)
        + actionable_bonus(text)
        + ecosystem_bonus(text, query.category, profile)
        + bounty_bonus(text, query.category, profile)
    )

    # Round half up
    weighted = math.floor(raw * query.weight + 0.5)

    return clamp_score(weighted + freshness_bonus(hit.published_age, now))
