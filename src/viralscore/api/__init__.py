"""HTTP API."""

from viralscore.api.router import api_router

__all__ = ["api_router"]
