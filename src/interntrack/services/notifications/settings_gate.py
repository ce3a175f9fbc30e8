"""Settings gate: per-event email toggles read before every gated send."""

import logging

from pydantic import StrictBool, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from interntrack.errors.exceptions import ValidationError
from interntrack.models.enums import NotificationType
from interntrack.models.settings import NotificationToggles, SystemSettings
from interntrack.repositories.settings_repo import SystemSettingsRepository

logger = logging.getLogger(__name__)

_TOGGLE_PATCH = TypeAdapter(dict[str, StrictBool])

# NotificationType -> toggle key. Types absent here always email.
TOGGLE_FOR_TYPE: dict[NotificationType, str] = {
    NotificationType.NEW_REPORT_SUBMITTED: "newReportToLecturer",
    NotificationType.REPORT_APPROVED: "reportApprovedToStudent",
    NotificationType.REPORT_REJECTED: "reportRejectedToStudent",
    NotificationType.NEW_INVITE: "newInviteToUser",
    NotificationType.TASK_DECLARED: "taskDeclaredToSupervisor",
    NotificationType.TASK_APPROVED: "taskApprovedToStudent",
    NotificationType.TASK_REJECTED: "taskRejectedToStudent",
    NotificationType.LECTURER_ASSIGNED: "lecturerAssignedToStudent",
}


def toggles_allow(toggles: NotificationToggles, notification_type: NotificationType) -> bool:
    key = TOGGLE_FOR_TYPE.get(notification_type)
    if key is None:
        return True
    return bool(getattr(toggles, key, True))


class SettingsGate:
    """Database-backed gate over the ``global`` settings row.

    No caching: every call re-reads the row so an admin update is visible to
    the very next dispatch.
    """

    def __init__(self, session: AsyncSession):
        self.repo = SystemSettingsRepository(session)

    async def get_settings(self) -> SystemSettings:
        row = await self.repo.get()
        if row is None:
            return SystemSettings()
        return SystemSettings(
            notifications=NotificationToggles(**(row.notifications or {})),
            updated_at=row.updated_at,
            updated_by=row.updated_by,
        )

    async def update_settings(self, patch: dict[str, bool], updated_by: str | None = None) -> SystemSettings:
        """Merge ``patch`` into the stored toggles. Caller commits.

        Every value must be a real boolean; a rejected patch writes nothing.
        """
        try:
            patch = _TOGGLE_PATCH.validate_python(patch)
        except PydanticValidationError as exc:
            bad = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
            raise ValidationError("Notification toggles must be booleans", details={"keys": bad}) from exc
        unknown = sorted(set(patch) - set(NotificationToggles.model_fields))
        if unknown:
            logger.info("Storing unrecognized notification toggles: %s", ", ".join(unknown))
        await self.repo.merge_notifications(patch, updated_by=updated_by)
        return await self.get_settings()

    async def is_email_enabled(self, notification_type: NotificationType) -> bool:
        settings = await self.get_settings()
        return toggles_allow(settings.notifications, notification_type)


class StaticSettingsGate:
    """Fixed configuration, for callers that must not touch the settings row."""

    def __init__(self, toggles: NotificationToggles | None = None):
        self.toggles = toggles or NotificationToggles()

    async def get_settings(self) -> SystemSettings:
        return SystemSettings(notifications=self.toggles)

    async def is_email_enabled(self, notification_type: NotificationType) -> bool:
        return toggles_allow(self.toggles, notification_type)
