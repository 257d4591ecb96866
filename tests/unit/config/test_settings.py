from __future__ import annotations

import pytest

from mfnav_api.config.settings import Environment, Settings, get_settings


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("SERVICE_VERSION", "1.2.3")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("DOCS_URL", "")

    s = Settings()

    assert s.environment == Environment.PRODUCTION
    assert s.service_version == "1.2.3"
    assert s.log_level == "WARNING"
    assert not s.docs_url
    assert not s.is_test


def test_unknown_environment_variables_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "mfnav")
    s = Settings()
    assert s.service_name == "mfnav-api"
    assert s.is_test


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
