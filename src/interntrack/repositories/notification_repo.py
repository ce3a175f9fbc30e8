"""Notification repository."""

from sqlalchemy import func, select, update

from interntrack.db.models.notification import NotificationRow
from interntrack.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[NotificationRow]):
    model = NotificationRow
    pk = "notification_id"

    async def list_for_user(self, user_id: str, limit: int | None = None) -> list[NotificationRow]:
        return await self.find(
            NotificationRow.user_id == user_id,
            order_by=NotificationRow.created_at.desc(),
            limit=limit,
        )

    async def count_unread(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(NotificationRow).where(
            NotificationRow.user_id == user_id,
            NotificationRow.is_read == False,  # noqa: E712
        )
        return (await self.session.execute(stmt)).scalar() or 0

    async def mark_read(self, notification_id: str) -> bool:
        stmt = (
            update(NotificationRow)
            .where(NotificationRow.notification_id == notification_id)
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def mark_all_read(self, user_id: str) -> int:
        stmt = (
            update(NotificationRow)
            .where(
                NotificationRow.user_id == user_id,
                NotificationRow.is_read == False,  # noqa: E712
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
