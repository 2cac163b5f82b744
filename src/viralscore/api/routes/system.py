"""System config endpoints."""

from fastapi import APIRouter

from viralscore.core.dependencies import SettingsDep
from viralscore.engine import BASE_SCORE, MAX_SCORE, RATING_BANDS, RULES

router = APIRouter()


@router.get("/config")
async def system_config(settings: SettingsDep) -> dict[str, object]:
    return {
        "env": settings.env,
        "enable_analysis": settings.enable_analysis,
        "block_low_scores": settings.block_low_scores,
        "max_text_length": settings.max_text_length,
        "base_score": BASE_SCORE,
        "max_score": MAX_SCORE,
        "rating_bands": [
            {"min_score": threshold, "rating": rating.value, "rating_class": rating.rating_class}
            for threshold, rating in RATING_BANDS
        ],
        "rules": [rule.name for rule in RULES],
    }
