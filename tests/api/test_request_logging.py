# This file tests the log output operators rely on when tailing the server.
# It covers the per-request line, the 500 traceback, and the event loop exception hook.

from __future__ import annotations

import asyncio
import logging

import pytest

from monitor_service.api.app import _log_loop_exception
from tests.api.support import api_test_client


class FailingMonitorService:
    def list_monitors(self) -> list[object]:
        raise RuntimeError("store exploded")


def test_each_request_logs_method_path_and_status(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="monitor_service.api.app")
    with api_test_client() as client:
        client.get("/api/monitors/9999")

    lines = [record.getMessage() for record in caplog.records if record.name == "monitor_service.api.app"]
    assert any(line.startswith("GET /api/monitors/9999 -> 404 (") and line.endswith(" ms)") for line in lines)


def test_unexpected_error_is_logged_with_traceback(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="monitor_service.api.error_handlers")
    with api_test_client(
        monitor_service=FailingMonitorService(),
        raise_server_exceptions=False,
    ) as client:
        client.get("/api/monitors")

    records = [
        record
        for record in caplog.records
        if record.getMessage() == "Unhandled error while serving GET /api/monitors"
    ]
    assert len(records) == 1
    assert records[0].exc_info is not None
    assert records[0].exc_info[0] is RuntimeError


def test_loop_exception_handler_logs_and_returns(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="monitor_service.api.app")
    loop = asyncio.new_event_loop()
    try:
        _log_loop_exception(
            loop,
            {"message": "Task exception was never retrieved", "exception": RuntimeError("lost task")},
        )
        _log_loop_exception(loop, {"message": "Callback failed"})
    finally:
        loop.close()

    messages = [record.getMessage() for record in caplog.records]
    assert "Task exception was never retrieved: RuntimeError('lost task')" in messages
    assert "Callback failed" in messages
    assert caplog.records[0].exc_info is not None


def test_startup_installs_loop_exception_handler() -> None:
    async def current_handler() -> object:
        return asyncio.get_running_loop().get_exception_handler()

    with api_test_client() as client:
        handler = client.portal.call(current_handler)

    assert handler is _log_loop_exception
