"""Post analysis endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from viralscore.core.dependencies import ReviewSettingsDep, SettingsDep
from viralscore.core.exceptions import EmptyPostError, PostBlockedError
from viralscore.core.logging import get_logger
from viralscore.engine import AnalysisResult, analyze
from viralscore.review import ReviewDecision, ReviewSession

logger = get_logger(__name__)

router = APIRouter()


class AnalyzeRequest(BaseModel):
    text: str = Field(..., description="Raw post text (may be empty)")
    has_media: bool = Field(default=False, description="Whether media is attached to the post")


class ReviewRequest(AnalyzeRequest):
    post_anyway: bool = Field(
        default=False, description="Post even if the review gate would stop it"
    )


class ReviewResponse(BaseModel):
    decision: ReviewDecision
    analysis: AnalysisResult | None = None


def _check_length(body: AnalyzeRequest, max_length: int) -> None:
    if len(body.text) > max_length:
        raise HTTPException(
            status_code=422,
            detail=f"Post text is {len(body.text)} characters, limit is {max_length}",
        )


@router.post("", response_model=AnalysisResult)
async def analyze_post(body: AnalyzeRequest, settings: SettingsDep) -> AnalysisResult:
    """Score a post."""
    _check_length(body, settings.max_text_length)
    return analyze(body.text, body.has_media)


@router.post("/review", response_model=ReviewResponse)
async def review_post(
    body: ReviewRequest,
    settings: SettingsDep,
    review_settings: ReviewSettingsDep,
) -> ReviewResponse:
    """Run a post through the review gate with the configured toggles.

    With ``post_anyway`` the user has already seen the analysis and confirmed;
    the post goes through unless low-scoring posts are blocked (409).
    """
    _check_length(body, settings.max_text_length)
    session = ReviewSession(review_settings)
    try:
        outcome = session.review(body.text, body.has_media)
    except EmptyPostError as e:
        raise HTTPException(status_code=422, detail=e.message)

    if body.post_anyway and outcome.decision is not ReviewDecision.post:
        try:
            session.post_anyway()
        except PostBlockedError as e:
            raise HTTPException(status_code=409, detail=e.message)
        confirmed = session.review(body.text, body.has_media)
        return ReviewResponse(decision=confirmed.decision, analysis=outcome.analysis)

    return ReviewResponse(decision=outcome.decision, analysis=outcome.analysis)
