"""Internship term and profile repositories."""

from interntrack.db.models.internship import InternshipProfileRow, InternshipTermRow
from interntrack.repositories.base import BaseRepository


class InternshipTermRepository(BaseRepository[InternshipTermRow]):
    model = InternshipTermRow
    pk = "term_id"

    async def get_active(self) -> InternshipTermRow | None:
        return await self.find_one(
            InternshipTermRow.status == "Active",
            order_by=InternshipTermRow.start_date.desc(),
        )

    async def list_newest_first(self) -> list[InternshipTermRow]:
        return await self.find(order_by=InternshipTermRow.start_date.desc())


class InternshipProfileRepository(BaseRepository[InternshipProfileRow]):
    model = InternshipProfileRow
    pk = "profile_id"

    async def get_by_student(self, student_id: str) -> InternshipProfileRow | None:
        return await self.find_one(InternshipProfileRow.student_id == student_id)

    async def list_with_supervisor(self) -> list[InternshipProfileRow]:
        return await self.find(InternshipProfileRow.supervisor_id.is_not(None))
