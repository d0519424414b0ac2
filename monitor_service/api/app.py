# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, and a console line per request.

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from monitor_service.api.api_config import get_api_config
from monitor_service.api.dependencies import get_monitor_store
from monitor_service.api.error_handlers import register_error_handlers
from monitor_service.api.routers.health import router as health_router
from monitor_service.api.routers.monitors import router as monitors_router
from monitor_service.api.store import MonitorStore
from monitor_service.common.logging import configure_logging
from monitor_service.common.settings import get_settings

logger = logging.getLogger(__name__)

API_HTTP_REQUESTS_TOTAL = Counter(
    "monitor_api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "monitor_api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "monitor_api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)
MONITOR_RECORDS_STORED = Gauge(
    "monitor_records_stored",
    "Number of monitor records currently held in memory.",
)


KNOWN_METHODS: frozenset[str] = frozenset(
    {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}
)
UNMATCHED_ROUTE_LABEL = "unmatched"


def _method_label(method: str) -> str:
    return method if method in KNOWN_METHODS else "OTHER"


def _route_label(request: Request) -> str:
    """Label metrics by route template so path parameters do not create new series."""

    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else UNMATCHED_ROUTE_LABEL


def _log_loop_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    exc = context.get("exception")
    message = context.get("message", "Unhandled exception in event loop")
    if exc is not None:
        logger.error("%s: %r", message, exc, exc_info=exc)
    else:
        logger.error("%s", message)


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    settings = get_settings()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description="In-memory store of monitor records with list, fetch, and create endpoints.",
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness and version metadata."},
            {"name": "monitors", "description": "List, fetch, and create monitor records."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = _method_label(request.method)
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

            if config.enable_request_logging:
                logger.info(
                    "%s %s -> %s (%.2f ms)",
                    request.method,
                    request.url.path,
                    status_code,
                    duration_ms,
                )

            return response
        finally:
            duration_s = time.perf_counter() - started
            path_label = _route_label(request)
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics(store: Annotated[MonitorStore, Depends(get_monitor_store)]) -> Response:
        MONITOR_RECORDS_STORED.set(len(store))
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    async def startup_banner() -> None:
        asyncio.get_running_loop().set_exception_handler(_log_loop_exception)
        logger.info("Server is running on port %s", settings.PORT)
        logger.info("Test the API at: http://localhost:%s%s", settings.PORT, config.monitors_path)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(monitors_router, prefix=config.monitors_path)

    return app


app = create_app()
