"""Notification dispatcher: durable in-app record plus settings-gated email.

A dispatch runs strictly in this order:

1. validate the event (recipient must exist),
2. persist and commit the in-app notification,
3. read the settings gate,
4. resolve the recipient's address,
5. hand the email to the delivery channel.

Steps 1-2 propagate errors to the caller. Steps 3-5 are best effort: every
failure there is logged and reported on the returned ``DispatchResult``.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from interntrack.config import settings
from interntrack.errors.exceptions import AuthorizationError, NotFoundError, ValidationError
from interntrack.models.enums import EmailOutcome
from interntrack.models.notification import AppNotification, DispatchResult, NotificationCreate
from interntrack.repositories.notification_repo import NotificationRepository
from interntrack.repositories.user_repo import UserRepository
from interntrack.services.email.rendering import render_notification_email
from interntrack.services.email.sender import EmailSender
from interntrack.services.id_generator import generate_id
from interntrack.services.notifications.settings_gate import SettingsGate

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    def __init__(
        self,
        session: AsyncSession,
        email_sender: EmailSender,
        gate=None,
        base_url: str | None = None,
    ):
        self.session = session
        self.email_sender = email_sender
        self.gate = gate or SettingsGate(session)
        self.base_url = base_url or settings.app_base_url
        self.notifications = NotificationRepository(session)
        self.users = UserRepository(session)

    async def create_notification(
        self, event: NotificationCreate, send_email: bool = True
    ) -> DispatchResult:
        """Persist one in-app notification and attempt its email.

        ``send_email=False`` is for callers that deliver their own email
        (announcements); the record is still written.
        """
        recipient = await self.users.get(event.user_id)
        if recipient is None:
            raise ValidationError(
                f"Notification recipient '{event.user_id}' does not exist",
                details={"user_id": event.user_id, "type": event.type},
            )

        notification_id = await self._persist(event)

        if not send_email:
            return DispatchResult(notification_id, EmailOutcome.HANDLED_BY_CALLER)
        return await self._deliver_email(notification_id, event)

    async def _persist(self, event: NotificationCreate) -> str:
        notification_id = generate_id("notif_")
        await self.notifications.create(
            notification_id=notification_id,
            user_id=event.user_id,
            type=event.type.value,
            title=event.title,
            message=event.message,
            href=event.href,
            is_read=False,
        )
        await self.session.commit()
        return notification_id

    async def _deliver_email(self, notification_id: str, event: NotificationCreate) -> DispatchResult:
        try:
            enabled = await self.gate.is_email_enabled(event.type)
        except Exception as exc:
            logger.error("Settings lookup failed for %s, skipping email: %s", event.type, exc)
            return DispatchResult(notification_id, EmailOutcome.FAILED, error=str(exc))

        if not enabled:
            logger.debug("Email for %s disabled by settings", event.type)
            return DispatchResult(notification_id, EmailOutcome.DISABLED)

        try:
            recipient = await self.users.get(event.user_id)
        except Exception as exc:
            logger.error("Recipient lookup failed for %s: %s", event.user_id, exc)
            return DispatchResult(notification_id, EmailOutcome.FAILED, error=str(exc))

        if recipient is None or not recipient.email:
            logger.warning(
                "Could not send email for notification type %s because user %s has no email address",
                event.type,
                event.user_id,
            )
            return DispatchResult(notification_id, EmailOutcome.SKIPPED_NO_ADDRESS)

        message = render_notification_email(
            to=recipient.email,
            title=event.title,
            message=event.message,
            href=event.href,
            base_url=self.base_url,
        )
        try:
            await self.email_sender.send(message)
        except Exception as exc:
            logger.error(
                "Email sending failed for user %s for notification type %s: %s",
                recipient.email,
                event.type,
                exc,
            )
            return DispatchResult(notification_id, EmailOutcome.FAILED, error=str(exc))

        return DispatchResult(notification_id, EmailOutcome.SENT)

    # ── Read side ─────────────────────────────────────────────────────────────

    async def get_notifications(self, user_id: str) -> list[AppNotification]:
        """All notifications for ``user_id``, newest first."""
        rows = await self.notifications.list_for_user(user_id)
        return [AppNotification.model_validate(row) for row in rows]

    async def unread_count(self, user_id: str) -> int:
        return await self.notifications.count_unread(user_id)

    async def mark_notification_as_read(self, notification_id: str, user_id: str | None = None) -> None:
        """Idempotent. When ``user_id`` is given only the recipient may mark it."""
        row = await self.notifications.get(notification_id)
        if row is None:
            raise NotFoundError("Notification", notification_id)
        if user_id is not None and row.user_id != user_id:
            raise AuthorizationError("Only the recipient can mark a notification as read")
        if not row.is_read:
            await self.notifications.mark_read(notification_id)
            await self.session.commit()

    async def mark_all_as_read(self, user_id: str) -> int:
        updated = await self.notifications.mark_all_read(user_id)
        await self.session.commit()
        return updated
