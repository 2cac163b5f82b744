"""Unit tests for Settings validators and env-var loading in config.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from viralscore.config import Settings, get_settings
from viralscore.review import ReviewSettings


# ─────────────────────────────────────────────────────────────
# Validator tests
# ─────────────────────────────────────────────────────────────


class TestNormalizeLogLevel:
    """Tests for normalize_log_level validator."""

    def test_lowercase_is_uppercased(self) -> None:
        assert Settings.normalize_log_level("debug") == "DEBUG"

    def test_whitespace_stripped(self) -> None:
        assert Settings.normalize_log_level("  warning ") == "WARNING"

    def test_env_var_lowercase_accepted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIRALSCORE_LOG_LEVEL", "error")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.log_level == "ERROR"

    def test_unknown_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIRALSCORE_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]


class TestValidateMaxTextLength:
    """Tests for validate_max_text_length validator."""

    def test_positive_passes(self) -> None:
        assert Settings.validate_max_text_length(280) == 280

    def test_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            Settings.validate_max_text_length(0)

    def test_negative_env_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIRALSCORE_MAX_TEXT_LENGTH", "-5")
        with pytest.raises(ValidationError, match="must be positive"):
            Settings(_env_file=None)  # type: ignore[call-arg]


class TestDefaults:
    """Defaults match the extension's out-of-the-box toggles."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in (
            "VIRALSCORE_ENV",
            "VIRALSCORE_ENABLE_ANALYSIS",
            "VIRALSCORE_BLOCK_LOW_SCORES",
            "VIRALSCORE_MAX_TEXT_LENGTH",
        ):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.env == "development"
        assert settings.enable_analysis is True
        assert settings.block_low_scores is False
        assert settings.max_text_length == 25_000
        assert not settings.is_production

    def test_is_production(self) -> None:
        assert Settings.model_construct(env="production").is_production

    def test_field_names_accepted(self) -> None:
        settings = Settings(_env_file=None, block_low_scores=True)  # type: ignore[call-arg]
        assert settings.block_low_scores is True

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestReviewSettingsFromSettings:
    def test_copies_toggles(self) -> None:
        s = Settings.model_construct(enable_analysis=False, block_low_scores=True)
        review = ReviewSettings.from_settings(s)
        assert review == ReviewSettings(enable_analysis=False, block_low_scores=True)


# ─────────────────────────────────────────────────────────────
# Comprehensive env-var loading test
# ─────────────────────────────────────────────────────────────

# Every Settings field mapped to (field_name, env_var_name, env_string_value, expected_value).
_ENV_FIELD_SPECS: list[tuple[str, str, str, object]] = [
    # --- Core ---
    ("env", "VIRALSCORE_ENV", "staging", "staging"),
    ("debug", "VIRALSCORE_DEBUG", "true", True),
    ("log_level", "VIRALSCORE_LOG_LEVEL", "WARNING", "WARNING"),
    # --- Review gate ---
    ("enable_analysis", "VIRALSCORE_ENABLE_ANALYSIS", "false", False),
    ("block_low_scores", "VIRALSCORE_BLOCK_LOW_SCORES", "true", True),
    # --- API ---
    ("max_text_length", "VIRALSCORE_MAX_TEXT_LENGTH", "280", 280),
]


class TestSettingsEnvLoading:
    """Verify every Settings field can be loaded from its env var."""

    def test_all_fields_loadable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Set every env var, create Settings, assert each field got the value."""
        for _field, env_var, env_val, _expected in _ENV_FIELD_SPECS:
            monkeypatch.setenv(env_var, env_val)

        # Create settings without reading .env file
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        for field_name, env_var, _env_val, expected in _ENV_FIELD_SPECS:
            actual = getattr(settings, field_name)
            assert actual == expected, (
                f"Field {field_name!r} (env={env_var}): expected {expected!r}, got {actual!r}"
            )

    def test_field_spec_covers_all_settings_fields(self) -> None:
        """Ensure _ENV_FIELD_SPECS covers every field in Settings."""
        model_fields = set(Settings.model_fields.keys())
        spec_fields = {field_name for field_name, *_ in _ENV_FIELD_SPECS}
        missing = model_fields - spec_fields
        assert not missing, (
            f"Fields missing from _ENV_FIELD_SPECS: {missing}. "
            "Add them to keep the env-loading test comprehensive."
        )
