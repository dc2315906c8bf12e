"""Observability schemas for Discovery API requests."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field


class RequestRecord(BaseModel):
    """Record of a single GET against the Discovery API."""

    request_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    url: str = ""  # always redacted
    status_code: int | None = None  # None when no response arrived
    latency_ms: float = 0.0
    success: bool = True
    error_code: str = ""
