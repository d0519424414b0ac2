# This file defines the monitor collection endpoints.
# Routes only translate HTTP to service calls; errors raised by the service are
# rendered by the handlers in `error_handlers.py`.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from monitor_service.api.dependencies import get_monitor_service, read_create_payload
from monitor_service.api.response_envelope import build_list_envelope, build_object_envelope
from monitor_service.api.schemas.common import ErrorResponse, ValidationErrorResponse
from monitor_service.api.schemas.monitor_schemas import MonitorListResponse, MonitorResponse
from monitor_service.api.services.monitor_service import MonitorService

router = APIRouter(tags=["monitors"])
MonitorServiceDep = Annotated[MonitorService, Depends(get_monitor_service)]
CreatePayloadDep = Annotated[dict[str, Any], Depends(read_create_payload)]


@router.get("", response_model=MonitorListResponse)
def list_monitors(service: MonitorServiceDep) -> dict[str, object]:
    return build_list_envelope(data=service.list_monitors())


@router.get(
    "/{transaction_id}",
    response_model=MonitorResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_monitor(transaction_id: str, service: MonitorServiceDep) -> dict[str, object]:
    return build_object_envelope(data=service.get_monitor(transaction_id))


@router.post(
    "",
    status_code=201,
    response_model=MonitorResponse,
    responses={400: {"model": ValidationErrorResponse}},
)
def create_monitor(
    service: MonitorServiceDep,
    payload: CreatePayloadDep,
) -> dict[str, object]:
    return build_object_envelope(data=service.create_monitor(payload))
