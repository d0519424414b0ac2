# This file provides shared helpers for API endpoint tests.
# It exists so tests can run against a fresh in-memory store instead of process-wide state.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from monitor_service.api.api_config import ApiConfig
from monitor_service.api.app import app
from monitor_service.api.dependencies import get_config, get_monitor_service, get_monitor_store
from monitor_service.api.store import MonitorStore


def build_test_config() -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Monitor API",
        monitors_path="/api/monitors",
        environment="test",
        app_version="0.1.0",
        allowed_origins=[],
        enable_request_logging=True,
        seed_enabled=True,
    )


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    store: MonitorStore | None = None,
    monitor_service: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides.

    Each call gets its own seeded store unless one is passed in.
    """

    resolved_config = config or build_test_config()
    resolved_store = store if store is not None else MonitorStore.seeded()

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_monitor_store] = lambda: resolved_store
    if monitor_service is not None:
        app.dependency_overrides[get_monitor_service] = lambda: monitor_service

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
