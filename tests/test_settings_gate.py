"""Tests for the notification settings gate."""

import pytest

from interntrack.errors.exceptions import ValidationError
from interntrack.models.enums import NotificationType
from interntrack.models.settings import NotificationToggles
from interntrack.repositories.settings_repo import SystemSettingsRepository
from interntrack.services.notifications.settings_gate import (
    TOGGLE_FOR_TYPE,
    SettingsGate,
    StaticSettingsGate,
    toggles_allow,
)


@pytest.mark.asyncio
async def test_defaults_when_no_row(db_session):
    """No stored settings means every toggle reads true."""
    gate = SettingsGate(db_session)
    settings = await gate.get_settings()
    assert settings.updated_at is None
    for key in NotificationToggles.model_fields:
        assert getattr(settings.notifications, key) is True
    for notification_type in NotificationType:
        assert await gate.is_email_enabled(notification_type) is True


@pytest.mark.asyncio
async def test_update_merges_and_preserves_other_keys(db_session):
    gate = SettingsGate(db_session)
    await gate.update_settings({"reportApprovedToStudent": False, "futureToggle": True}, updated_by="usr_admin")
    await db_session.commit()

    await gate.update_settings({"taskDeclaredToSupervisor": False})
    await db_session.commit()

    row = await SystemSettingsRepository(db_session).get()
    assert row.notifications == {
        "reportApprovedToStudent": False,
        "futureToggle": True,
        "taskDeclaredToSupervisor": False,
    }
    assert row.updated_at is not None

    settings = await gate.get_settings()
    assert settings.notifications.reportApprovedToStudent is False
    assert settings.notifications.taskDeclaredToSupervisor is False
    assert settings.notifications.newReportToLecturer is True


@pytest.mark.asyncio
async def test_update_is_visible_to_next_check(db_session):
    """The gate never caches: a change applies to the very next check."""
    gate = SettingsGate(db_session)
    assert await gate.is_email_enabled(NotificationType.REPORT_REJECTED) is True
    await gate.update_settings({"reportRejectedToStudent": False})
    assert await gate.is_email_enabled(NotificationType.REPORT_REJECTED) is False
    await gate.update_settings({"reportRejectedToStudent": True})
    assert await gate.is_email_enabled(NotificationType.REPORT_REJECTED) is True


@pytest.mark.asyncio
@pytest.mark.parametrize("value", ["maybe", "false", 0, None])
async def test_non_boolean_patch_writes_nothing(db_session, value):
    gate = SettingsGate(db_session)
    with pytest.raises(ValidationError) as excinfo:
        await gate.update_settings({"reportApprovedToStudent": value, "newInviteToUser": False})
    assert excinfo.value.details == {"keys": ["reportApprovedToStudent"]}

    assert await SystemSettingsRepository(db_session).get() is None
    settings = await gate.get_settings()
    assert settings.notifications.reportApprovedToStudent is True
    assert settings.notifications.newInviteToUser is True


class TestToggleMapping:
    """Type to toggle mapping."""

    def test_every_toggle_is_mapped_once(self):
        assert sorted(TOGGLE_FOR_TYPE.values()) == sorted(NotificationToggles.model_fields)

    @pytest.mark.parametrize(
        "notification_type",
        [
            NotificationType.EVALUATION_REMINDER,
            NotificationType.TERM_ENDING_REMINDER,
            NotificationType.ABUSE_REPORT_SUBMITTED,
            NotificationType.ANNOUNCEMENT,
        ],
    )
    def test_unmapped_types_always_allowed(self, notification_type):
        all_off = NotificationToggles(**{key: False for key in NotificationToggles.model_fields})
        assert toggles_allow(all_off, notification_type) is True

    def test_disabled_toggle_blocks_its_type(self):
        toggles = NotificationToggles(newInviteToUser=False)
        assert toggles_allow(toggles, NotificationType.NEW_INVITE) is False
        assert toggles_allow(toggles, NotificationType.LECTURER_ASSIGNED) is True


@pytest.mark.asyncio
async def test_static_gate():
    gate = StaticSettingsGate(NotificationToggles(taskApprovedToStudent=False))
    assert await gate.is_email_enabled(NotificationType.TASK_APPROVED) is False
    assert await gate.is_email_enabled(NotificationType.TASK_REJECTED) is True
