"""Evaluation repository."""

from sqlalchemy import select

from interntrack.db.models.evaluation import EvaluationRow
from interntrack.repositories.base import BaseRepository


class EvaluationRepository(BaseRepository[EvaluationRow]):
    model = EvaluationRow
    pk = "evaluation_id"

    async def list_for_student(self, student_id: str) -> list[EvaluationRow]:
        return await self.find(
            EvaluationRow.student_id == student_id,
            order_by=EvaluationRow.created_at.desc(),
        )

    async def supervisor_evaluated_pairs(self) -> set[tuple[str, str]]:
        """Return (student_id, evaluator_id) pairs that have a supervisor evaluation."""
        stmt = select(EvaluationRow.student_id, EvaluationRow.evaluator_id).where(
            EvaluationRow.evaluator_role == "supervisor"
        )
        result = await self.session.execute(stmt)
        return {(row[0], row[1]) for row in result.all()}
