"""Pydantic models for announcements."""

from pydantic import BaseModel, ConfigDict, Field

from interntrack.models.enums import AnnouncementTarget


class AnnouncementCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=20000)
    target_roles: AnnouncementTarget = AnnouncementTarget.ALL


class AnnouncementResult(BaseModel):
    success: bool
    message: str
    recipients_count: int | None = None
    email_failures: int = 0
