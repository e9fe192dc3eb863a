"""Pydantic request/response models of the HTTP bridge.

Field names follow what the CPI Helper plugin and existing bridge
clients already read, hence the camelCase in places.
"""
from datetime import datetime, UTC
from typing import Any

from pydantic import BaseModel, Field


def now_iso() -> str:
    return datetime.now(tz=UTC).isoformat().replace("+00:00", "Z")


class DataRequest(BaseModel):
    data: str = ""


class DebugResponse(BaseModel):
    success: bool = True
    message: str
    data: Any = None
    files: dict[str, str] | None = None
    timestamp: str = Field(default_factory=now_iso)


class ConvertResponse(BaseModel):
    success: bool = True
    message: str
    contivaData: dict[str, Any]
    encoded: str
    encodedLength: int
    url: str
    warning: str | None = None
    timestamp: str = Field(default_factory=now_iso)


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str | None = None
    stage: str | None = None
    timestamp: str = Field(default_factory=now_iso)


class HealthResponse(BaseModel):
    status: str = "ok"
    uptime: float
    timestamp: str = Field(default_factory=now_iso)
