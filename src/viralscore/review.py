"""Review gate: decides what happens when the user hits "Post".

The gate sits between a compose box and the scoring engine. It replaces the
process-wide "already analysing" flag of a browser content script with an
explicit ReviewSession owned by whoever drives one compose box:

    session = ReviewSession(ReviewSettings.from_settings(get_settings()))
    outcome = session.review(text, has_media)
    if outcome.decision is ReviewDecision.review:
        ...  # show outcome.analysis; on "Post anyway":
        session.post_anyway()
        session.review(text, has_media)  # -> ReviewDecision.post
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from viralscore.core.exceptions import EmptyPostError, PostBlockedError
from viralscore.core.logging import get_logger
from viralscore.engine import AnalysisResult, Rating, analyze
from viralscore.engine.features import trim

if TYPE_CHECKING:
    from viralscore.config import Settings

logger = get_logger(__name__)


class ReviewDecision(str, Enum):
    """What the caller should do with the post."""

    post = "post"  # Let it through without showing anything
    review = "review"  # Show the analysis, allow "post anyway"
    block = "block"  # Show the analysis, do not allow "post anyway"


@dataclass(frozen=True, slots=True)
class ReviewSettings:
    """User toggles that shape the gate."""

    enable_analysis: bool = True
    block_low_scores: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> ReviewSettings:
        return cls(
            enable_analysis=settings.enable_analysis,
            block_low_scores=settings.block_low_scores,
        )


@dataclass(frozen=True, slots=True)
class ReviewOutcome:
    """Decision plus the analysis that led to it (None when not analysed)."""

    decision: ReviewDecision
    analysis: AnalysisResult | None = None


def decide(analysis: AnalysisResult, settings: ReviewSettings) -> ReviewDecision:
    """Pick review or block for an analysed post."""
    if settings.block_low_scores and analysis.rating is Rating.needs_work:
        return ReviewDecision.block
    return ReviewDecision.review


class ReviewSession:
    """Per-compose-box review state.

    Holds a one-shot bypass so the post that follows "post anyway" is not
    intercepted again, and the last outcome shown to the user.
    """

    def __init__(self, settings: ReviewSettings | None = None) -> None:
        self.settings = settings if settings is not None else ReviewSettings()
        self._bypass = False
        self._last: ReviewOutcome | None = None

    @property
    def last_outcome(self) -> ReviewOutcome | None:
        return self._last

    @property
    def bypass_armed(self) -> bool:
        return self._bypass

    def review(self, text: str, has_media: bool = False) -> ReviewOutcome:
        """Intercept a post attempt.

        Raises:
            EmptyPostError: If the post has no text.
        """
        if not trim(text):
            raise EmptyPostError("Nothing to review: post text is empty")

        if self._bypass:
            self._bypass = False
            self._last = None
            logger.info("Post confirmed, passing through")
            return ReviewOutcome(decision=ReviewDecision.post)

        if not self.settings.enable_analysis:
            return ReviewOutcome(decision=ReviewDecision.post)

        analysis = analyze(text, has_media)
        decision = decide(analysis, self.settings)

        self._last = ReviewOutcome(decision=decision, analysis=analysis)
        logger.info(
            "Post reviewed",
            decision=decision.value,
            score=analysis.score,
            rating=analysis.rating.value,
        )
        return self._last

    def post_anyway(self) -> None:
        """Let the next post attempt through unreviewed.

        Raises:
            PostBlockedError: If the last review blocked the post.
        """
        last = self._last
        if last is not None and last.decision is ReviewDecision.block and last.analysis:
            raise PostBlockedError(
                f"Post scored {last.analysis.score}/{last.analysis.max_score} "
                "and low-scoring posts are blocked"
            )
        self._bypass = True

    def dismiss(self) -> None:
        """Close the review without posting ("Edit" or close)."""
        self._last = None
