"""Daily task repository."""

from datetime import datetime, time, timezone

from interntrack.db.models.task import DailyTaskRow
from interntrack.repositories.base import BaseRepository


class DailyTaskRepository(BaseRepository[DailyTaskRow]):
    model = DailyTaskRow
    pk = "task_id"

    async def list_by_date(self, student_id: str, day: datetime) -> list[DailyTaskRow]:
        """Tasks declared by a student for the calendar day containing ``day`` (UTC)."""
        start = datetime.combine(day.date(), time.min, tzinfo=timezone.utc)
        end = datetime.combine(day.date(), time.max, tzinfo=timezone.utc)
        return await self.find(
            DailyTaskRow.student_id == student_id,
            DailyTaskRow.date >= start,
            DailyTaskRow.date <= end,
            order_by=DailyTaskRow.date.desc(),
        )

    async def list_by_supervisor(self, supervisor_id: str, statuses: list[str]) -> list[DailyTaskRow]:
        return await self.find(
            DailyTaskRow.supervisor_id == supervisor_id,
            DailyTaskRow.status.in_(statuses),
            order_by=DailyTaskRow.date.desc(),
        )
