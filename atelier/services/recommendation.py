"""Open call recommendation scoring.

Scores start at 50 and move with weighted signals, each of which appends a
human-readable reason:

    medium overlap       +20
    location affinity    +15
    career stage fit     +10
    theme overlap        +15
    free to apply        +10 (prefers free) / +5
    within max fee        +5
    above max fee        -10
    closing soon          +5
    featured / trusted    +5

The result is clamped to [0, 100]. Scoring is pure: given the same call,
preferences and reference time it always returns the same result.
"""

import math
from collections.abc import Iterable, Sequence
from datetime import UTC, date, datetime, time
from typing import TypeVar

from atelier.core.config import get_settings
from atelier.schemas.open_call import (
    ArtistPreferences,
    OpenCall,
    Recommendation,
    RecommendationTier,
)

settings = get_settings()

BASE_SCORE = 50
HIGHLY_RECOMMENDED_THRESHOLD = 75
RECOMMENDED_THRESHOLD = 50

CallT = TypeVar("CallT")


def _matching_mediums(call_mediums: Sequence[str], preferred: Sequence[str]) -> list[str]:
    preferred_lower = [p.lower() for p in preferred]
    return [
        medium
        for medium in call_mediums
        if any(p in medium.lower() or medium.lower() in p for p in preferred_lower)
    ]


def _is_local(call_location: str, preferred_location: str) -> bool:
    call_loc = call_location.lower()
    pref_loc = preferred_location.lower()
    return pref_loc in call_loc or call_loc.split(",")[0] in pref_loc


def _days_until(deadline: str, now: datetime) -> int | None:
    """Whole days (rounded up) from ``now`` to the deadline's UTC midnight."""
    try:
        deadline_date = date.fromisoformat(deadline[:10])
    except ValueError:
        return None
    deadline_at = datetime.combine(deadline_date, time.min, tzinfo=UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return math.ceil((deadline_at - now).total_seconds() / 86400)


def tier_for(score: int) -> RecommendationTier:
    if score >= HIGHLY_RECOMMENDED_THRESHOLD:
        return RecommendationTier.HIGHLY_RECOMMENDED
    if score >= RECOMMENDED_THRESHOLD:
        return RecommendationTier.RECOMMENDED
    return RecommendationTier.CONSIDER


def score_call(
    call: OpenCall,
    preferences: ArtistPreferences,
    *,
    now: datetime | None = None,
) -> Recommendation:
    """Score an open call against an artist's preferences.

    Args:
        call: The opportunity to score
        preferences: The artist's stored preferences
        now: Reference time for the deadline signal (defaults to current UTC)

    Returns:
        Clamped score, ordered reasons and recommendation tier
    """
    now = now or datetime.now(UTC)
    score = BASE_SCORE
    reasons: list[str] = []

    if preferences.mediums and call.mediums:
        matching = _matching_mediums(call.mediums, preferences.mediums)
        if matching:
            score += 20
            reasons.append(f"Matches your medium: {', '.join(matching)}")

    if preferences.location and call.location:
        if _is_local(call.location, preferences.location):
            score += 15
            reasons.append("Local opportunity")

    if preferences.career_stage and call.eligibility:
        eligibility = call.eligibility.lower()
        if preferences.career_stage.lower() in eligibility or "all" in eligibility:
            score += 10
            reasons.append("Matches your career stage")

    if preferences.themes and call.theme:
        theme = call.theme.lower()
        matching_themes = [t for t in preferences.themes if t.lower() in theme]
        if matching_themes:
            score += 15
            reasons.append(f"Theme aligns: {', '.join(matching_themes)}")

    if not call.entry_fee:
        if preferences.prefer_no_fee:
            score += 10
            reasons.append("No entry fee")
        else:
            score += 5
            reasons.append("Free to apply")
    elif preferences.max_entry_fee:
        if call.entry_fee <= preferences.max_entry_fee:
            score += 5
            reasons.append("Within budget")
        else:
            score -= 10
            reasons.append("Entry fee exceeds budget")

    if call.deadline:
        days_left = _days_until(call.deadline, now)
        if days_left is not None and 0 < days_left <= settings.URGENCY_WINDOW_DAYS:
            score += 5
            reasons.append("Closing soon - act fast!")

    if call.featured or call.source == settings.TRUSTED_CALL_SOURCE:
        score += 5
        reasons.append("Featured opportunity")

    score = min(100, max(0, score))
    return Recommendation(score=score, reasons=reasons, recommendation=tier_for(score))


def rank_calls(
    scored: Iterable[CallT],
    key=lambda item: item.score,
) -> list[CallT]:
    """Sort scored items by descending score, keeping input order for ties."""
    return sorted(scored, key=key, reverse=True)
