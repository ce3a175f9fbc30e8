"""Daily task declaration and supervisor review."""

from datetime import datetime

from interntrack.db.models.task import DailyTaskRow
from interntrack.errors.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from interntrack.models.common import Actor
from interntrack.models.enums import NotificationType, Role, TaskStatus
from interntrack.models.workflow import TaskCreate
from interntrack.repositories.task_repo import DailyTaskRepository
from interntrack.services.audit import record_audit
from interntrack.services.id_generator import generate_id
from interntrack.services.workflows.base import WorkflowService

TERMINAL_TASK_STATUSES = frozenset({TaskStatus.APPROVED, TaskStatus.REJECTED})


def _short(text: str, length: int = 60) -> str:
    return text if len(text) <= length else text[:length].rstrip() + "..."


class TaskService(WorkflowService):
    def __init__(self, session, email_sender, dispatcher=None):
        super().__init__(session, email_sender, dispatcher)
        self.tasks = DailyTaskRepository(session)

    async def declare_task(self, actor: Actor, payload: TaskCreate) -> DailyTaskRow:
        student = await self._require_user(actor.uid)
        supervisor = await self.users.get(payload.supervisor_id)
        if supervisor is None:
            raise ValidationError(
                f"Supervisor '{payload.supervisor_id}' does not exist",
                details={"supervisor_id": payload.supervisor_id},
            )

        task = await self.tasks.create(
            task_id=generate_id("task_"),
            student_id=student.user_id,
            supervisor_id=supervisor.user_id,
            internship_id=payload.internship_id,
            date=payload.date,
            description=payload.description,
            learning_objectives=payload.learning_objectives,
            status=TaskStatus.PENDING.value,
        )
        await self.session.commit()

        await self.notify(
            supervisor.user_id,
            NotificationType.TASK_DECLARED,
            title="New Task Declared",
            message=f"{student.full_name} declared a new task: {_short(payload.description)}",
            href="/supervisor/tasks",
        )
        return task

    async def update_task_status(
        self,
        actor: Actor,
        task_id: str,
        status: TaskStatus | str,
        supervisor_feedback: str | None = None,
    ) -> DailyTaskRow:
        new_status = TaskStatus(status)
        if new_status == TaskStatus.PENDING:
            raise ValidationError("A task cannot be moved back to Pending")

        task = await self.tasks.get(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        if actor.role == Role.SUPERVISOR and task.supervisor_id != actor.uid:
            raise AuthorizationError("Only the declared supervisor can review this task")
        if task.status in TERMINAL_TASK_STATUSES:
            raise ConflictError(f"Task '{task_id}' is already {task.status}")

        changes = {"status": new_status.value}
        if supervisor_feedback is not None:
            changes["supervisor_feedback"] = supervisor_feedback
        await self.tasks.update(task, **changes)
        await record_audit(
            self.session,
            actor,
            action="Update Task Status",
            details=f"Marked task {task_id} for student ID {task.student_id} as {new_status.value}.",
        )
        await self.session.commit()

        feedback = f" Feedback: {supervisor_feedback}" if supervisor_feedback else ""
        if new_status == TaskStatus.APPROVED:
            await self.notify(
                task.student_id,
                NotificationType.TASK_APPROVED,
                title="Task Approved",
                message=f'Your task "{_short(task.description)}" has been approved.{feedback}',
                href="/student/daily-tasks",
            )
        elif new_status == TaskStatus.REJECTED:
            await self.notify(
                task.student_id,
                NotificationType.TASK_REJECTED,
                title="Task Rejected",
                message=f'Your task "{_short(task.description)}" was rejected.{feedback}',
                href="/student/daily-tasks",
            )
        return task

    async def list_for_day(self, student_id: str, day: datetime) -> list[DailyTaskRow]:
        return await self.tasks.list_by_date(student_id, day)

    async def list_for_supervisor(self, supervisor_id: str, statuses: list[str] | None = None) -> list[DailyTaskRow]:
        return await self.tasks.list_by_supervisor(supervisor_id, statuses or [s.value for s in TaskStatus])
