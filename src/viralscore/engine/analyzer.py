"""Entry point of the virality scoring engine.

``analyze`` is a pure function of its inputs: extract features, evaluate the
rule table, aggregate the score and classify it. Nothing is cached or shared
between calls, so it is safe to call from any thread or event loop.
"""

from __future__ import annotations

from viralscore.core.logging import get_logger
from viralscore.engine.features import extract
from viralscore.engine.models import AnalysisResult
from viralscore.engine.rules import evaluate
from viralscore.engine.scoring import aggregate, classify

logger = get_logger(__name__)


def analyze(text: str, has_media: bool = False) -> AnalysisResult:
    """Score a post.

    Args:
        text: Raw post text. May be empty.
        has_media: Whether media is attached. Detecting attachments is the
            caller's job.

    Returns:
        AnalysisResult with score, ordered factors, suggestions, warnings and rating.
    """
    features = extract(text, has_media)
    evaluation = evaluate(features)
    score = aggregate(evaluation.factors)
    rating = classify(score)

    logger.debug(
        "Post analyzed",
        score=score,
        rating=rating.value,
        factor_count=len(evaluation.factors),
        word_count=features.word_count,
    )

    return AnalysisResult(
        score=score,
        factors=evaluation.factors,
        suggestions=evaluation.suggestions,
        warnings=evaluation.warnings,
        rating=rating,
    )
