"""Core utilities: logging, exceptions."""

from viralscore.core.exceptions import ViralScoreError
from viralscore.core.logging import get_logger, setup_logging

__all__ = [
    "ViralScoreError",
    "get_logger",
    "setup_logging",
]
