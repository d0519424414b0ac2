# This file provides dependency factories for FastAPI routes and middleware.
# It exists so the store and service are created once and shared through dependency injection.
# Tests override these factories to run each case against a fresh store.

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends, Request

from monitor_service.api.api_config import ApiConfig, get_api_config
from monitor_service.api.error_handlers import RecordValidationError
from monitor_service.api.services.monitor_service import MonitorService
from monitor_service.api.store import MonitorStore

FORM_CONTENT_TYPES: tuple[str, ...] = (
    "application/x-www-form-urlencoded",
    "multipart/form-data",
)


@lru_cache(maxsize=1)
def get_monitor_store() -> MonitorStore:
    config = get_api_config()
    return MonitorStore.seeded() if config.seed_enabled else MonitorStore()


def get_monitor_service(
    store: Annotated[MonitorStore, Depends(get_monitor_store)],
) -> MonitorService:
    return MonitorService(store=store)


async def read_create_payload(request: Request) -> dict[str, Any]:
    """Return the create body as a mapping, from either JSON or form fields."""

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: form[key] for key in form.keys()}

    try:
        payload = await request.json()
    except ValueError as exc:
        raise RecordValidationError(
            [{"field": "body", "message": "body must be valid JSON"}]
        ) from exc
    if not isinstance(payload, dict):
        raise RecordValidationError(
            [{"field": "body", "message": "body must be a JSON object"}]
        )
    return payload


def get_config() -> ApiConfig:
    return get_api_config()
