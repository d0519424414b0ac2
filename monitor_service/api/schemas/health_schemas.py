# This file defines response schemas for the health and version endpoints.
# Stable health schemas make liveness checks straightforward to automate.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    environment: str
    service_name: str
    monitor_count: int
    timestamp: datetime


class VersionResponse(BaseModel):
    project: str
    version: str
    timestamp: datetime
