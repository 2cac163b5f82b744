"""viralscore: deterministic virality scoring for short social posts."""

from viralscore.engine import AnalysisResult, Factor, Rating, analyze

__all__ = ["AnalysisResult", "Factor", "Rating", "analyze"]
