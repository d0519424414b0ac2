# This file implements the monitor operations behind the `/api/monitors` routes.
# It exists so routers stay thin: parsing, validation, and store access all happen here.
# Create payloads go through an explicit parse step that collects every violation
# before anything is written to the store.

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from monitor_service.api.error_handlers import (
    BadRequestError,
    RecordNotFoundError,
    RecordValidationError,
)
from monitor_service.api.schemas.monitor_schemas import (
    FIX_FLAGS,
    WEEKDAYS,
    MonitorDraft,
    MonitorRecord,
)
from monitor_service.api.store import MonitorStore

_INTEGER_RE = re.compile(r"[+-]?\d+")

REQUIRED_FIELDS: tuple[str, ...] = ("topic_id", "transaction_datetime")
OPTIONAL_INT_FIELDS: tuple[str, ...] = ("number_param", "day_param")


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _coerce_int(value: Any) -> int | None:
    """Return ``value`` as an int, or None when it is not an integer."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            # longer than the interpreter allows for str -> int
            return None
    return None


def parse_transaction_id(raw_id: str) -> int:
    """Parse a path segment into a transaction id."""

    # Path ids are taken verbatim: no whitespace stripping, unlike payload fields.
    if not _INTEGER_RE.fullmatch(raw_id):
        raise BadRequestError("Invalid transaction_id format")
    try:
        return int(raw_id)
    except ValueError as exc:
        raise BadRequestError("Invalid transaction_id format") from exc


def parse_monitor_payload(payload: Mapping[str, Any]) -> MonitorDraft:
    """Validate a create payload and return a typed draft record.

    All violations are collected before raising, so a caller sees every
    problem with the payload in a single response.
    """

    violations: list[dict[str, str]] = []

    def reject(field: str, message: str) -> None:
        violations.append({"field": field, "message": message})

    values: dict[str, Any] = {}

    for field in REQUIRED_FIELDS:
        if _is_missing(payload.get(field)):
            reject(field, f"{field} is required")

    topic_id = payload.get("topic_id")
    if not _is_missing(topic_id):
        values["topic_id"] = _coerce_int(topic_id)
        if values["topic_id"] is None:
            reject("topic_id", "topic_id must be an integer")

    transaction_datetime = payload.get("transaction_datetime")
    if not _is_missing(transaction_datetime):
        if isinstance(transaction_datetime, str):
            values["transaction_datetime"] = transaction_datetime
        else:
            reject("transaction_datetime", "transaction_datetime must be a string")

    for field in OPTIONAL_INT_FIELDS:
        raw = payload.get(field)
        if _is_missing(raw):
            values[field] = None
            continue
        values[field] = _coerce_int(raw)
        if values[field] is None:
            reject(field, f"{field} must be an integer")

    time_param = payload.get("time_param")
    if _is_missing(time_param):
        values["time_param"] = None
    elif isinstance(time_param, str):
        values["time_param"] = time_param
    else:
        reject("time_param", "time_param must be a string")

    weekday_param = payload.get("weekday_param")
    if _is_missing(weekday_param):
        values["weekday_param"] = None
    elif weekday_param in WEEKDAYS:
        values["weekday_param"] = weekday_param
    else:
        reject("weekday_param", f"weekday_param must be one of: {', '.join(WEEKDAYS)}")

    is_fix = payload.get("is_fix")
    if _is_missing(is_fix):
        values["is_fix"] = "N"
    elif is_fix in FIX_FLAGS:
        values["is_fix"] = is_fix
    else:
        reject("is_fix", "is_fix must be 'Y' or 'N'")

    if violations:
        raise RecordValidationError(violations)

    return MonitorDraft(**values)


class MonitorService:
    """List, fetch, and create operations over a ``MonitorStore``."""

    def __init__(self, *, store: MonitorStore) -> None:
        self.store = store

    def list_monitors(self) -> list[MonitorRecord]:
        return self.store.all()

    def get_monitor(self, raw_id: str) -> MonitorRecord:
        transaction_id = parse_transaction_id(raw_id)
        record = self.store.find(transaction_id)
        if record is None:
            raise RecordNotFoundError()
        return record

    def create_monitor(self, payload: Mapping[str, Any]) -> MonitorRecord:
        draft = parse_monitor_payload(payload)
        return self.store.append(draft)
