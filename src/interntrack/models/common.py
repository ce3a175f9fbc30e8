"""Pydantic models shared across the API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from interntrack.models.enums import Role


class ErrorDetail(BaseModel):
    """Error detail in API responses."""

    model_config = ConfigDict(extra="forbid")

    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    trace_id: str = Field(..., min_length=8, max_length=128)
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    model_config = ConfigDict(extra="forbid")

    error: ErrorDetail


class Actor(BaseModel):
    """The authenticated user performing an action, used for audit attribution."""

    uid: str
    name: str = ""
    email: str = ""
    role: Role | None = None
