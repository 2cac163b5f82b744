"""Score aggregation and rating classification."""

from __future__ import annotations

from collections.abc import Iterable

from viralscore.engine.models import BASE_SCORE, MAX_SCORE, MIN_SCORE, Factor, Rating

# Lower bound of each band, best first. First match wins.
RATING_BANDS: tuple[tuple[int, Rating], ...] = (
    (80, Rating.excellent),
    (60, Rating.good),
    (40, Rating.fair),
)


def aggregate(factors: Iterable[Factor]) -> int:
    """Add factor impacts to the base score and clamp to [MIN_SCORE, MAX_SCORE]."""
    total = BASE_SCORE + sum(f.impact for f in factors)
    return max(MIN_SCORE, min(MAX_SCORE, total))


def classify(score: int) -> Rating:
    """Map a score to its rating band."""
    for threshold, rating in RATING_BANDS:
        if score >= threshold:
            return rating
    return Rating.needs_work
