"""Pydantic models for the system settings singleton."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictBool


class NotificationToggles(BaseModel):
    """Per-event email toggles.

    Unknown keys are kept so that settings written by newer clients survive a
    round trip through older ones.
    """

    model_config = ConfigDict(extra="allow")

    newReportToLecturer: bool = True
    reportApprovedToStudent: bool = True
    reportRejectedToStudent: bool = True
    newInviteToUser: bool = True
    taskDeclaredToSupervisor: bool = True
    taskApprovedToStudent: bool = True
    taskRejectedToStudent: bool = True
    lecturerAssignedToStudent: bool = True


class SystemSettings(BaseModel):
    notifications: NotificationToggles = NotificationToggles()
    updated_at: datetime | None = None
    updated_by: str | None = None


class SettingsUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    notifications: dict[str, StrictBool]
