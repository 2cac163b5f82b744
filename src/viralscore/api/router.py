"""Top-level API router, mounted under /api/v1."""

from fastapi import APIRouter

from viralscore.api.routes import analysis, system

api_router = APIRouter()
api_router.include_router(analysis.router, prefix="/analysis", tags=["analysis"])
api_router.include_router(system.router, prefix="/system", tags=["system"])
