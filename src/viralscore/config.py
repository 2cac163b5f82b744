"""Application configuration via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Core
    env: Literal["development", "staging", "production"] = Field(
        default="development", alias="VIRALSCORE_ENV"
    )
    debug: bool = Field(default=False, alias="VIRALSCORE_DEBUG")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="VIRALSCORE_LOG_LEVEL"
    )

    # Review gate (mirrors the extension's popup toggles)
    enable_analysis: bool = Field(
        default=True,
        alias="VIRALSCORE_ENABLE_ANALYSIS",
        description="Analyze posts before they go out; when off, posts pass straight through",
    )
    block_low_scores: bool = Field(
        default=False,
        alias="VIRALSCORE_BLOCK_LOW_SCORES",
        description="Refuse 'post anyway' for posts rated Needs Work",
    )

    # API
    max_text_length: int = Field(
        default=25_000,
        alias="VIRALSCORE_MAX_TEXT_LENGTH",
        description="Longest post text accepted by the HTTP API, in characters",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("max_text_length")
    @classmethod
    def validate_max_text_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_text_length must be positive")
        return v

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
