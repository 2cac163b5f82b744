"""Virality scoring engine.

Pipeline: feature extraction -> rule evaluation -> score aggregation ->
rating classification, composed by ``analyze``.
"""

from viralscore.engine.analyzer import analyze
from viralscore.engine.features import extract
from viralscore.engine.models import (
    BASE_SCORE,
    MAX_SCORE,
    MIN_SCORE,
    AnalysisResult,
    Evaluation,
    Factor,
    FeatureSet,
    Rating,
    RuleOutcome,
)
from viralscore.engine.rules import RULES, BinaryRule, Tier, TieredRule, evaluate
from viralscore.engine.scoring import RATING_BANDS, aggregate, classify

__all__ = [
    # Entry point
    "analyze",
    # Pipeline stages
    "extract",
    "evaluate",
    "aggregate",
    "classify",
    # Models
    "AnalysisResult",
    "Evaluation",
    "Factor",
    "FeatureSet",
    "Rating",
    "RuleOutcome",
    # Rules
    "RULES",
    "BinaryRule",
    "Tier",
    "TieredRule",
    # Constants
    "BASE_SCORE",
    "MAX_SCORE",
    "MIN_SCORE",
    "RATING_BANDS",
]
