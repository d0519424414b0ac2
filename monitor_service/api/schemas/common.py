# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so the success and failure envelopes stay consistent across routes.
# These classes are also used by tests to validate response shape stability.

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class EnvelopeFields(BaseModel):
    success: Literal[True] = True


class FieldViolation(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
    message: str | None = None


class ValidationErrorResponse(BaseModel):
    success: Literal[False] = False
    errors: list[FieldViolation]
