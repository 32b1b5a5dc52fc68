"""Tests for Settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        for name in ("APP_ENV", "PORT", "PROFILE_ROOT", "RULES_FILE", "LOG_JSON"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.PORT == 3000
        assert settings.PROFILE_ROOT == "businessProfile"
        assert settings.PRODUCT_PROFILE_ROOT == "businessProfile"
        assert settings.RULES_FILE == ""
        assert settings.LOG_JSON is False

    def test_port_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).PORT == 8080

    def test_port_out_of_range(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_follows_env(self):
        assert Settings(_env_file=None, APP_ENV="development").LOG_LEVEL == "DEBUG"
        assert Settings(_env_file=None, APP_ENV="production").LOG_LEVEL == "INFO"
