"""Daily check-in repository."""

from datetime import date

from interntrack.db.models.check_in import CheckInRow
from interntrack.repositories.base import BaseRepository


class CheckInRepository(BaseRepository[CheckInRow]):
    model = CheckInRow
    pk = "check_in_id"

    async def get_for_day(self, student_id: str, day: date) -> CheckInRow | None:
        return await self.find_one(CheckInRow.student_id == student_id, CheckInRow.check_in_date == day)

    async def list_for_student(self, student_id: str, limit: int | None = None) -> list[CheckInRow]:
        return await self.find(
            CheckInRow.student_id == student_id,
            order_by=CheckInRow.timestamp.desc(),
            limit=limit,
        )
