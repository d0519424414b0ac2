# This file builds success envelopes for API endpoints in a consistent format.
# The helpers return plain dictionaries that Pydantic response models validate at runtime.
# This keeps endpoint functions focused on data retrieval instead of repetitive envelope assembly.

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel


def build_list_envelope(*, data: Sequence[BaseModel]) -> dict[str, Any]:
    """Build standard list response envelope."""

    rows = [row.model_dump() for row in data]
    return {
        "success": True,
        "count": len(rows),
        "data": rows,
    }


def build_object_envelope(*, data: BaseModel) -> dict[str, Any]:
    """Build standard single-object response envelope."""

    return {
        "success": True,
        "data": data.model_dump(),
    }
