"""Announcement fan-out to every active user of a target audience."""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from interntrack.config import settings
from interntrack.db.models.user import UserRow
from interntrack.errors.exceptions import ValidationError
from interntrack.models.announcement import AnnouncementResult
from interntrack.models.common import Actor
from interntrack.models.enums import AnnouncementTarget, NotificationType, Role
from interntrack.models.notification import NotificationCreate
from interntrack.repositories.user_repo import UserRepository
from interntrack.services.audit import record_audit
from interntrack.services.email.rendering import render_announcement_email
from interntrack.services.email.sender import EmailSender
from interntrack.services.notifications.dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)

IN_APP_PREVIEW_LENGTH = 150

TARGET_ROLE: dict[AnnouncementTarget, Role | None] = {
    AnnouncementTarget.ALL: None,
    AnnouncementTarget.STUDENTS: Role.STUDENT,
    AnnouncementTarget.LECTURERS: Role.LECTURER,
    AnnouncementTarget.SUPERVISORS: Role.SUPERVISOR,
    AnnouncementTarget.ADMINS: Role.ADMIN,
    AnnouncementTarget.HODS: Role.HOD,
}


def preview(message: str, length: int = IN_APP_PREVIEW_LENGTH) -> str:
    if len(message) <= length:
        return message
    return message[:length] + "..."


class AnnouncementService:
    def __init__(self, session: AsyncSession, email_sender: EmailSender, base_url: str | None = None):
        self.session = session
        self.email_sender = email_sender
        self.base_url = base_url or settings.app_base_url
        self.users = UserRepository(session)
        self.dispatcher = NotificationDispatcher(session, email_sender, base_url=self.base_url)

    async def send_announcement(
        self,
        actor: Actor,
        title: str,
        message: str,
        target_roles: AnnouncementTarget | str,
    ) -> AnnouncementResult:
        try:
            target = AnnouncementTarget(target_roles)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown announcement audience '{target_roles}'",
                details={"allowed": [t.value for t in AnnouncementTarget]},
            ) from exc
        recipients = await self.users.list_active(role=TARGET_ROLE[target])

        if not recipients:
            return AnnouncementResult(
                success=False,
                message="No active users found for the selected audience.",
            )

        # In-app records share the request session, so they are written one
        # after another; the emails below are the concurrent part.
        short_message = preview(message)
        for user in recipients:
            await self.dispatcher.create_notification(
                NotificationCreate(
                    user_id=user.user_id,
                    type=NotificationType.ANNOUNCEMENT,
                    title=title,
                    message=short_message,
                    href="/dashboard",
                ),
                send_email=False,
            )

        outcomes = await asyncio.gather(
            *(self._email_one(user, title, message) for user in recipients)
        )
        email_failures = sum(1 for ok in outcomes if not ok)

        await record_audit(
            self.session,
            actor,
            action="Send Announcement",
            details=f'Sent announcement "{title}" to {target.value} ({len(recipients)} users).',
        )
        await self.session.commit()

        if email_failures:
            logger.warning(
                "Announcement %r: %d of %d emails failed", title, email_failures, len(recipients)
            )
        return AnnouncementResult(
            success=True,
            message="Announcement sent successfully.",
            recipients_count=len(recipients),
            email_failures=email_failures,
        )

    async def _email_one(self, user: UserRow, title: str, message: str) -> bool:
        if not user.email:
            logger.warning("Skipping announcement email for %s: no email address", user.user_id)
            return False
        try:
            await self.email_sender.send(
                render_announcement_email(
                    to=user.email,
                    recipient_name=user.full_name,
                    title=title,
                    message=message,
                    base_url=self.base_url,
                )
            )
            return True
        except Exception as exc:
            logger.error("Announcement email to %s failed: %s", user.email, exc)
            return False
