"""Tests for the notification dispatcher."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func, select

from interntrack.db.models.notification import NotificationRow
from interntrack.errors.exceptions import AuthorizationError, NotFoundError, ValidationError
from interntrack.models.enums import EmailOutcome, NotificationType, Role
from interntrack.models.notification import NotificationCreate
from interntrack.models.settings import NotificationToggles
from interntrack.services.notifications.dispatcher import NotificationDispatcher
from interntrack.services.notifications.settings_gate import StaticSettingsGate


def _event(user_id: str, **overrides) -> NotificationCreate:
    data = {
        "user_id": user_id,
        "type": NotificationType.REPORT_APPROVED,
        "title": "Report Approved",
        "message": "Your daily report has been approved. Comment: great work",
        "href": "/student/reports",
    }
    data.update(overrides)
    return NotificationCreate(**data)


async def _count_notifications(session) -> int:
    return (await session.execute(select(func.count()).select_from(NotificationRow))).scalar()


# ---------------------------------------------------------------------------
# Create / deliver
# ---------------------------------------------------------------------------


class TestCreateNotification:
    """create_notification persists first, then attempts gated email."""

    @pytest.mark.asyncio
    async def test_persists_and_emails(self, db_session, make_user, email_sender):
        student = await make_user(Role.STUDENT)
        dispatcher = NotificationDispatcher(db_session, email_sender, base_url="https://app.test")

        result = await dispatcher.create_notification(_event(student.user_id))

        assert result.email == EmailOutcome.SENT
        assert result.emailed
        row = await db_session.get(NotificationRow, result.notification_id)
        assert row.is_read is False
        assert row.type == "REPORT_APPROVED"

        assert len(email_sender.sent) == 1
        sent = email_sender.sent[0]
        assert sent.to == student.email
        assert sent.subject == "Report Approved"
        assert sent.text == "Your daily report has been approved. Comment: great work"
        assert "great work" in sent.html
        assert "https://app.test/student/reports" in sent.html

    @pytest.mark.asyncio
    async def test_default_link_when_no_href(self, db_session, make_user, email_sender):
        student = await make_user(Role.STUDENT)
        dispatcher = NotificationDispatcher(db_session, email_sender, base_url="https://app.test")
        await dispatcher.create_notification(_event(student.user_id, href=None))
        assert 'href="https://app.test/"' in email_sender.sent[0].html

    @pytest.mark.asyncio
    async def test_gate_disabled_skips_email_but_keeps_record(self, db_session, make_user, email_sender):
        student = await make_user(Role.STUDENT)
        gate = StaticSettingsGate(NotificationToggles(reportApprovedToStudent=False))
        dispatcher = NotificationDispatcher(db_session, email_sender, gate=gate)

        result = await dispatcher.create_notification(_event(student.user_id))

        assert result.email == EmailOutcome.DISABLED
        assert email_sender.sent == []
        assert await _count_notifications(db_session) == 1

    @pytest.mark.asyncio
    async def test_sender_failure_is_observable_not_raised(self, db_session, make_user, failing_sender):
        student = await make_user(Role.STUDENT)
        dispatcher = NotificationDispatcher(db_session, failing_sender)

        result = await dispatcher.create_notification(_event(student.user_id))

        assert result.email == EmailOutcome.FAILED
        assert "Failed to send email" in result.error
        assert failing_sender.attempts == 1
        row = await db_session.get(NotificationRow, result.notification_id)
        assert row is not None and row.is_read is False

    @pytest.mark.asyncio
    async def test_gate_failure_is_reported(self, db_session, make_user, email_sender):
        student = await make_user(Role.STUDENT)
        gate = AsyncMock()
        gate.is_email_enabled.side_effect = RuntimeError("settings store down")
        dispatcher = NotificationDispatcher(db_session, email_sender, gate=gate)

        result = await dispatcher.create_notification(_event(student.user_id))

        assert result.email == EmailOutcome.FAILED
        assert email_sender.sent == []
        assert await _count_notifications(db_session) == 1

    @pytest.mark.asyncio
    async def test_unknown_recipient_writes_nothing(self, db_session, email_sender):
        dispatcher = NotificationDispatcher(db_session, email_sender)
        with pytest.raises(ValidationError):
            await dispatcher.create_notification(_event("usr_missing"))
        assert await _count_notifications(db_session) == 0
        assert email_sender.sent == []

    @pytest.mark.asyncio
    async def test_recipient_without_email_is_skipped(self, db_session, make_user, email_sender):
        user = await make_user(Role.STUDENT, email="")
        dispatcher = NotificationDispatcher(db_session, email_sender)

        result = await dispatcher.create_notification(_event(user.user_id))

        assert result.email == EmailOutcome.SKIPPED_NO_ADDRESS
        assert email_sender.sent == []
        assert await _count_notifications(db_session) == 1

    @pytest.mark.asyncio
    async def test_send_email_false_leaves_delivery_to_caller(self, db_session, make_user):
        user = await make_user(Role.STUDENT)
        sender = AsyncMock()
        dispatcher = NotificationDispatcher(db_session, sender)

        result = await dispatcher.create_notification(
            _event(user.user_id, type=NotificationType.ANNOUNCEMENT), send_email=False
        )

        assert result.email == EmailOutcome.HANDLED_BY_CALLER
        sender.send.assert_not_awaited()

    def test_empty_title_rejected_by_model(self):
        with pytest.raises(PydanticValidationError):
            _event("usr_1", title="")


# ---------------------------------------------------------------------------
# Read side
# ---------------------------------------------------------------------------


class TestReadSide:
    """Listing, unread counts and mark-as-read."""

    @pytest.mark.asyncio
    async def test_newest_first(self, db_session, make_user, email_sender):
        user = await make_user(Role.STUDENT)
        dispatcher = NotificationDispatcher(db_session, email_sender)
        first = await dispatcher.create_notification(_event(user.user_id, title="First"))
        second = await dispatcher.create_notification(_event(user.user_id, title="Second"))

        base = datetime(2024, 5, 1, tzinfo=timezone.utc)
        (await db_session.get(NotificationRow, first.notification_id)).created_at = base
        (await db_session.get(NotificationRow, second.notification_id)).created_at = base + timedelta(minutes=5)
        await db_session.commit()

        items = await dispatcher.get_notifications(user.user_id)
        assert [n.title for n in items] == ["Second", "First"]

    @pytest.mark.asyncio
    async def test_only_own_notifications_listed(self, db_session, make_user, email_sender):
        alice = await make_user(Role.STUDENT)
        bob = await make_user(Role.STUDENT)
        dispatcher = NotificationDispatcher(db_session, email_sender)
        await dispatcher.create_notification(_event(alice.user_id))

        assert len(await dispatcher.get_notifications(alice.user_id)) == 1
        assert await dispatcher.get_notifications(bob.user_id) == []

    @pytest.mark.asyncio
    async def test_mark_read_is_idempotent(self, db_session, make_user, email_sender):
        user = await make_user(Role.STUDENT)
        dispatcher = NotificationDispatcher(db_session, email_sender)
        result = await dispatcher.create_notification(_event(user.user_id))

        await dispatcher.mark_notification_as_read(result.notification_id, user_id=user.user_id)
        await dispatcher.mark_notification_as_read(result.notification_id, user_id=user.user_id)

        row = await db_session.get(NotificationRow, result.notification_id)
        assert row.is_read is True
        assert await dispatcher.unread_count(user.user_id) == 0

    @pytest.mark.asyncio
    async def test_only_recipient_can_mark_read(self, db_session, make_user, email_sender):
        owner = await make_user(Role.STUDENT)
        other = await make_user(Role.STUDENT)
        dispatcher = NotificationDispatcher(db_session, email_sender)
        result = await dispatcher.create_notification(_event(owner.user_id))

        with pytest.raises(AuthorizationError):
            await dispatcher.mark_notification_as_read(result.notification_id, user_id=other.user_id)
        assert await dispatcher.unread_count(owner.user_id) == 1

    @pytest.mark.asyncio
    async def test_mark_unknown_raises_not_found(self, db_session, email_sender):
        dispatcher = NotificationDispatcher(db_session, email_sender)
        with pytest.raises(NotFoundError):
            await dispatcher.mark_notification_as_read("notif_missing")

    @pytest.mark.asyncio
    async def test_mark_all_and_unread_count(self, db_session, make_user, email_sender):
        user = await make_user(Role.STUDENT)
        dispatcher = NotificationDispatcher(db_session, email_sender)
        for i in range(3):
            await dispatcher.create_notification(_event(user.user_id, title=f"N{i}"))

        assert await dispatcher.unread_count(user.user_id) == 3
        assert await dispatcher.mark_all_as_read(user.user_id) == 3
        assert await dispatcher.unread_count(user.user_id) == 0
        assert await dispatcher.mark_all_as_read(user.user_id) == 0
