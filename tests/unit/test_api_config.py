"""
Unit tests for API configuration loading.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import pytest
from pydantic import ValidationError

from monitor_service.api.api_config import ApiConfig, load_api_config


def test_load_api_config_defaults() -> None:
    config = load_api_config(load_env=False)

    assert config.monitors_path == "/api/monitors"
    assert config.seed_enabled is True
    assert config.enable_request_logging is True
    assert config.allowed_origins == []
    assert config.environment == "test"


def test_load_api_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_MONITORS_PATH", "/v2/monitors/")
    monkeypatch.setenv("API_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("MONITOR_SEED_ENABLED", "off")

    config = load_api_config(load_env=False)

    assert config.monitors_path == "/v2/monitors"
    assert config.allowed_origins == ["http://a.test", "http://b.test"]
    assert config.seed_enabled is False


def test_load_api_config_rejects_non_boolean_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONITOR_SEED_ENABLED", "sometimes")

    with pytest.raises(ValueError, match="MONITOR_SEED_ENABLED must be boolean-like"):
        load_api_config(load_env=False)


def test_monitors_path_must_be_absolute() -> None:
    with pytest.raises(ValidationError):
        ApiConfig(monitors_path="api/monitors")
