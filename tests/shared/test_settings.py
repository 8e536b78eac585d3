"""Tests for runtime settings."""

import pytest
from pydantic import ValidationError

from commitgate.shared.infrastructure.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.config_file == ".commitgate.yaml"
    assert settings.log_level == "WARNING"
    assert settings.skip_env_var == "SKIP"
    assert settings.is_development


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COMMITGATE_LOG_LEVEL", "debug")
    monkeypatch.setenv("COMMITGATE_APP_ENV", "production")
    monkeypatch.setenv("COMMITGATE_DEFAULT_TIMEOUT", "60")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.is_production
    assert settings.default_timeout == 60


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("COMMITGATE_LOG_LEVEL", "loud")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
