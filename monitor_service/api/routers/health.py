# This file defines liveness and version endpoints for API operations.
# They sit outside the monitor envelope so platform checks can stay generic.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from monitor_service.api.api_config import ApiConfig
from monitor_service.api.dependencies import get_config, get_monitor_store
from monitor_service.api.schemas.health_schemas import HealthResponse, VersionResponse
from monitor_service.api.store import MonitorStore

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
StoreDep = Annotated[MonitorStore, Depends(get_monitor_store)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@router.get("/health", response_model=HealthResponse)
def health(config: ConfigDep, store: StoreDep) -> dict[str, object]:
    return {
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "monitor_count": len(store),
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(config: ConfigDep) -> dict[str, object]:
    return {
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
