# This file defines the API error types and the handlers that render them.
# Every failure leaves the server as a `{"success": false, ...}` envelope.
# Unexpected exceptions are logged with their traceback and surfaced as a generic 500.

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong!"


class APIError(Exception):
    """Domain error type with structured API details."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(message)

    def to_body(self) -> dict[str, Any]:
        return {"success": False, "error": self.message}


class BadRequestError(APIError):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=400, error_code="BAD_REQUEST", message=message)


class RecordNotFoundError(APIError):
    def __init__(self, message: str = "Monitor not found") -> None:
        super().__init__(status_code=404, error_code="NOT_FOUND", message=message)


class RecordValidationError(APIError):
    """Raised with every violation found in a create payload."""

    def __init__(self, violations: list[dict[str, str]]) -> None:
        super().__init__(
            status_code=400,
            error_code="VALIDATION_ERROR",
            message="Monitor payload failed validation",
            details=violations,
        )

    @property
    def violations(self) -> list[dict[str, str]]:
        return list(self.details or [])

    def to_body(self) -> dict[str, Any]:
        return {"success": False, "errors": self.violations}


def _request_body_violations(exc: RequestValidationError) -> list[dict[str, str]]:
    violations: list[dict[str, str]] = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        violations.append({"field": field, "message": f"{field}: {error.get('msg', 'invalid value')}"})
    return violations


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        if isinstance(exc, RecordValidationError):
            logger.warning(
                "%s %s rejected: %s",
                request.method,
                request.url.path,
                "; ".join(v["message"] for v in exc.violations),
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"success": False, "errors": _request_body_violations(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": INTERNAL_ERROR_MESSAGE,
                "message": str(exc),
            },
        )
