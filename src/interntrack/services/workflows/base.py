"""Shared plumbing for workflow services that end in a notification."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from interntrack.db.models.user import UserRow
from interntrack.errors.exceptions import NotFoundError
from interntrack.models.enums import NotificationType
from interntrack.models.notification import DispatchResult, NotificationCreate
from interntrack.repositories.user_repo import UserRepository
from interntrack.services.email.sender import EmailSender
from interntrack.services.notifications.dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)


class WorkflowService:
    """Holds the session, the user repository and a dispatcher.

    Subclasses commit their own state change first and only then call
    :meth:`notify`, so a failed email can never undo the transition.
    """

    def __init__(self, session: AsyncSession, email_sender: EmailSender, dispatcher: NotificationDispatcher | None = None):
        self.session = session
        self.email_sender = email_sender
        self.users = UserRepository(session)
        self.dispatcher = dispatcher or NotificationDispatcher(session, email_sender)

    async def _require_user(self, user_id: str) -> UserRow:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def notify(
        self,
        user_id: str | None,
        notification_type: NotificationType,
        title: str,
        message: str,
        href: str | None = None,
    ) -> DispatchResult | None:
        """Dispatch to ``user_id`` if it names an existing user.

        A trigger whose recipient has gone missing is logged and skipped:
        the state change it follows is already committed.
        """
        if not user_id:
            return None
        if await self.users.get(user_id) is None:
            logger.warning("Skipping %s notification: recipient %s does not exist", notification_type, user_id)
            return None
        return await self.dispatcher.create_notification(
            NotificationCreate(
                user_id=user_id,
                type=notification_type,
                title=title,
                message=message,
                href=href,
            )
        )
