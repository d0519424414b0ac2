# This file tests how unexpected failures and framework errors are rendered.
# Every failure must come back as a `success: false` envelope instead of a crash.

from __future__ import annotations

from tests.api.support import api_test_client


class ExplodingMonitorService:
    def list_monitors(self) -> list[object]:
        raise RuntimeError("store exploded")


def test_unexpected_error_returns_generic_envelope() -> None:
    with api_test_client(
        monitor_service=ExplodingMonitorService(),
        raise_server_exceptions=False,
    ) as client:
        response = client.get("/api/monitors")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Something went wrong!",
        "message": "store exploded",
    }


def test_server_keeps_serving_after_unexpected_error() -> None:
    with api_test_client(
        monitor_service=ExplodingMonitorService(),
        raise_server_exceptions=False,
    ) as client:
        client.get("/api/monitors")
        response = client.get("/health")

    assert response.status_code == 200


def test_unknown_route_uses_error_envelope() -> None:
    with api_test_client() as client:
        response = client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_unsupported_method_uses_error_envelope() -> None:
    with api_test_client() as client:
        response = client.delete("/api/monitors/10")

    assert response.status_code == 405
    assert response.json()["success"] is False


def test_responses_carry_request_id_and_timing_headers() -> None:
    with api_test_client() as client:
        echoed = client.get("/api/monitors", headers={"x-request-id": "req-123"})
        generated = client.get("/api/monitors")

    assert echoed.headers["x-request-id"] == "req-123"
    assert generated.headers["x-request-id"]
    assert "x-response-time-ms" in echoed.headers
