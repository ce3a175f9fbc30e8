"""Abuse report repository."""

from interntrack.db.models.abuse_report import AbuseReportRow
from interntrack.repositories.base import BaseRepository


class AbuseReportRepository(BaseRepository[AbuseReportRow]):
    model = AbuseReportRow
    pk = "abuse_report_id"

    async def list_newest_first(self, lecturer_id: str | None = None) -> list[AbuseReportRow]:
        criteria = [AbuseReportRow.lecturer_id == lecturer_id] if lecturer_id else []
        return await self.find(*criteria, order_by=AbuseReportRow.reported_at.desc())
