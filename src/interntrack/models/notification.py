"""Pydantic models for in-app notifications and dispatch results."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from interntrack.models.enums import EmailOutcome, NotificationType


class NotificationCreate(BaseModel):
    """A domain event addressed to one recipient."""

    model_config = ConfigDict(extra="forbid")

    user_id: str = Field(..., min_length=1)
    type: NotificationType
    title: str = Field(..., min_length=1, max_length=500)
    message: str = Field(..., min_length=1)
    href: str | None = None


class AppNotification(BaseModel):
    notification_id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    href: str | None
    is_read: bool
    created_at: datetime

    model_config = {"from_attributes": True}


@dataclass
class DispatchResult:
    """Outcome of a single dispatch.

    The in-app record always exists once a result is returned; ``email``
    reports what happened on the best-effort leg.
    """

    notification_id: str
    email: EmailOutcome
    error: str | None = None

    @property
    def emailed(self) -> bool:
        return self.email == EmailOutcome.SENT
