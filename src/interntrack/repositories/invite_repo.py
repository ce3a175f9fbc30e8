"""Invite repository."""

from interntrack.db.models.invite import InviteRow
from interntrack.repositories.base import BaseRepository


class InviteRepository(BaseRepository[InviteRow]):
    model = InviteRow
    pk = "invite_id"

    async def list_pending(self) -> list[InviteRow]:
        return await self.find(InviteRow.status == "pending", order_by=InviteRow.created_at.desc())

    async def get_pending_by_email(self, email: str) -> InviteRow | None:
        return await self.find_one(
            InviteRow.email == email,
            InviteRow.status == "pending",
            order_by=InviteRow.created_at.desc(),
        )
