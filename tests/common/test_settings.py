"""
Unit tests for settings.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import pytest

from nsquery.common import settings as settings_module


def test_load_settings_defaults() -> None:
    settings = settings_module.get_settings()
    assert settings.LOG_LEVEL == "INFO"
    assert settings.API_BASE_URL == "http://localhost:8000/api/v1"
    assert settings.API_TIMEOUT_SECONDS == 8


def test_load_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("API_BASE_URL", "https://tower.example.com/api/v2/")
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "15")
    settings = settings_module.load_settings(load_env=False)
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.API_BASE_URL == "https://tower.example.com/api/v2"
    assert settings.API_TIMEOUT_SECONDS == 15


def test_load_settings_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "0")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        settings_module.load_settings(load_env=False)


def test_get_settings_is_cached() -> None:
    assert settings_module.get_settings() is settings_module.get_settings()
