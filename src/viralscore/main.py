"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from viralscore.api import api_router
from viralscore.config import get_settings
from viralscore.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging before serving."""
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "viralscore ready",
        env=settings.env,
        enable_analysis=settings.enable_analysis,
        block_low_scores=settings.block_low_scores,
    )
    yield


app = FastAPI(
    title="viralscore",
    description="Deterministic virality scoring for short social posts",
    version="0.1.0",
    lifespan=lifespan,
)

# Infrastructure (no prefix, not versioned)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check: ok whenever the process is up."""
    return {"status": "ok"}


# Domain API
app.include_router(api_router, prefix="/api/v1")
