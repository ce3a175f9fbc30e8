"""Repository for user profiles."""

from interntrack.db.models.user import UserRow
from interntrack.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserRow]):
    model = UserRow
    pk = "user_id"

    async def get_by_email(self, email: str) -> UserRow | None:
        return await self.find_one(UserRow.email == email)

    async def list_active(self, role: str | None = None) -> list[UserRow]:
        criteria = [UserRow.status == "active"]
        if role:
            criteria.append(UserRow.role == role)
        return await self.find(*criteria)
