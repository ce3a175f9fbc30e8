"""Intern evaluations by supervisors and lecturers."""

from interntrack.db.models.evaluation import EvaluationRow
from interntrack.errors.exceptions import ValidationError
from interntrack.models.common import Actor
from interntrack.models.enums import Role
from interntrack.models.workflow import EvaluationCreate
from interntrack.repositories.evaluation_repo import EvaluationRepository
from interntrack.services.audit import record_audit
from interntrack.services.id_generator import generate_id
from interntrack.services.workflows.base import WorkflowService


class EvaluationService(WorkflowService):
    def __init__(self, session, email_sender, dispatcher=None):
        super().__init__(session, email_sender, dispatcher)
        self.evaluations = EvaluationRepository(session)

    async def create_evaluation(self, actor: Actor, payload: EvaluationCreate) -> EvaluationRow:
        if actor.role not in (Role.SUPERVISOR, Role.LECTURER):
            raise ValidationError("Only supervisors and lecturers submit evaluations")
        student = await self._require_user(payload.student_id)

        evaluation = await self.evaluations.create(
            evaluation_id=generate_id("eval_"),
            student_id=student.user_id,
            evaluator_id=actor.uid,
            evaluator_role=actor.role.value,
            evaluator_name=actor.name or "Unknown",
            metrics=payload.metrics.model_dump(),
            comments=payload.comments,
        )
        await record_audit(
            self.session,
            actor,
            action="Submit Evaluation",
            details=f"Submitted a {actor.role.value} evaluation for student ID {student.user_id}.",
        )
        await self.session.commit()
        return evaluation

    async def list_for_student(self, student_id: str) -> list[EvaluationRow]:
        return await self.evaluations.list_for_student(student_id)
