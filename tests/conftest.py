"""
Shared test configuration.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin environment variables that change app behavior during tests."""

    defaults = {
        "PROJECT_NAME": "monitor-service-test",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
        "HOST": "0.0.0.0",
        "PORT": "3332",
    }

    for key, value in defaults.items():
        monkeypatch.setenv(key, value)
    for key in (
        "API_MONITORS_PATH",
        "API_ALLOWED_ORIGINS",
        "API_ENABLE_REQUEST_LOGGING",
        "MONITOR_SEED_ENABLED",
    ):
        monkeypatch.delenv(key, raising=False)
