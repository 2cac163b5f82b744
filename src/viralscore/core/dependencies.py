"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from viralscore.config import Settings, get_settings
from viralscore.review import ReviewSettings


def get_review_settings(settings: Settings = Depends(get_settings)) -> ReviewSettings:
    """Review gate toggles from application settings."""
    return ReviewSettings.from_settings(settings)


# Annotated dependencies for use in route handlers
SettingsDep = Annotated[Settings, Depends(get_settings)]
ReviewSettingsDep = Annotated[ReviewSettings, Depends(get_review_settings)]
