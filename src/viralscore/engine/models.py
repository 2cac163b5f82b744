"""Data models for the virality scoring engine.

This module defines:
- FeatureSet: signals extracted from a single post
- Factor / RuleOutcome / Evaluation: what the scoring rules produce
- Rating: the four ordered score bands
- AnalysisResult: the render-agnostic output of ``analyze``
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

BASE_SCORE = 40
MIN_SCORE = 0
MAX_SCORE = 100


# =============================================================================
# Features
# =============================================================================


@dataclass(frozen=True, slots=True)
class FeatureSet:
    """Signals derived from the text of a post and its media flag.

    Attributes:
        word_count: Whitespace-separated tokens in the post.
        char_count: Code points in the post.
        has_question: Post contains a question mark.
        hashtag_count: Number of ``#tag`` tokens.
        has_hashtags: At least one hashtag.
        has_links: Post contains an http(s) URL.
        has_mention: Post mentions an ``@account``.
        has_emoji: Post contains a pictographic/symbol code point.
        has_media: Caller reported attached media.
        is_thread: Post announces or belongs to a thread.
        has_list_format: A line starts with a list marker.
        has_hook: Post opens with a known hook phrase.
        engagement_bait_detected: Post asks for likes/retweets/follows.
        excessive_caps_detected: Post shouts in ALL CAPS repeatedly.
    """

    word_count: int
    char_count: int
    has_question: bool
    hashtag_count: int
    has_hashtags: bool
    has_links: bool
    has_mention: bool
    has_emoji: bool
    has_media: bool
    is_thread: bool
    has_list_format: bool
    has_hook: bool
    engagement_bait_detected: bool
    excessive_caps_detected: bool


# =============================================================================
# Rule output
# =============================================================================


class Factor(BaseModel):
    """One scored signal."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Human-readable name of the signal")
    impact: int = Field(description="Signed points added to the base score")
    positive: bool = Field(description="True if the signal helps the post")

    @property
    def display_impact(self) -> str:
        """Impact with an explicit sign, e.g. ``+20`` or ``-25``."""
        return f"{self.impact:+d}"


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Contribution of a single rule: at most one factor, suggestion and warning."""

    factor: Factor | None = None
    suggestion: str | None = None
    warning: str | None = None


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Ordered output of all rules for one FeatureSet."""

    factors: tuple[Factor, ...] = ()
    suggestions: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


# =============================================================================
# Rating
# =============================================================================


class Rating(str, Enum):
    """Score band, best first."""

    excellent = "Excellent"
    good = "Good"
    fair = "Fair"
    needs_work = "Needs Work"

    @property
    def rating_class(self) -> str:
        """Lowercase slug used by renderers to style the band."""
        return _RATING_CLASSES[self]


_RATING_CLASSES: dict[Rating, str] = {
    Rating.excellent: "excellent",
    Rating.good: "good",
    Rating.fair: "fair",
    Rating.needs_work: "poor",
}


# =============================================================================
# Analysis result
# =============================================================================


class AnalysisResult(BaseModel):
    """Result of scoring a post.

    ``score`` always equals ``clamp(BASE_SCORE + sum(f.impact for f in factors))``.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    max_score: int = MAX_SCORE
    factors: tuple[Factor, ...] = Field(default_factory=tuple)
    suggestions: tuple[str, ...] = Field(default_factory=tuple)
    warnings: tuple[str, ...] = Field(default_factory=tuple)
    rating: Rating

    @computed_field  # type: ignore[prop-decorator]
    @property
    def rating_class(self) -> str:
        return self.rating.rating_class

    @property
    def positive_factors(self) -> tuple[Factor, ...]:
        return tuple(f for f in self.factors if f.positive)

    @property
    def negative_factors(self) -> tuple[Factor, ...]:
        return tuple(f for f in self.factors if not f.positive)
