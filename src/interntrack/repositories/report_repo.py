"""Daily report repository."""

from interntrack.db.models.report import ReportRow
from interntrack.repositories.base import BaseRepository


class ReportRepository(BaseRepository[ReportRow]):
    model = ReportRow
    pk = "report_id"

    async def list_by_student(self, student_id: str) -> list[ReportRow]:
        return await self.find(ReportRow.student_id == student_id, order_by=ReportRow.report_date.desc())

    async def list_by_lecturer(self, lecturer_id: str, statuses: list[str]) -> list[ReportRow]:
        return await self.find(
            ReportRow.lecturer_id == lecturer_id,
            ReportRow.status.in_(statuses),
            order_by=ReportRow.report_date.desc(),
        )
