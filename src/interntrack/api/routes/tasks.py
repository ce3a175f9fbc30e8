"""Daily task endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from interntrack.dependencies import CurrentUser, DBSession, Sender, require_role
from interntrack.errors.exceptions import ValidationError
from interntrack.models.common import Actor
from interntrack.models.enums import Role
from interntrack.models.workflow import TaskCreate, TaskResponse, TaskStatusUpdate
from interntrack.services.workflows.tasks import TaskService

router = APIRouter(tags=["Tasks"])


@router.post("/tasks", status_code=201, response_model=TaskResponse)
async def declare_task(
    body: TaskCreate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("student")),
):
    return await TaskService(db, sender).declare_task(actor, body)


@router.get("/tasks", response_model=list[TaskResponse])
async def list_tasks(
    actor: CurrentUser,
    db: DBSession,
    sender: Sender,
    date: datetime | None = None,
    student_id: str | None = None,
    status: list[str] | None = Query(default=None),
):
    service = TaskService(db, sender)
    if actor.role == Role.SUPERVISOR:
        return await service.list_for_supervisor(actor.uid, status)
    if date is None:
        raise ValidationError("date is required")
    target = actor.uid if actor.role == Role.STUDENT else (student_id or actor.uid)
    return await service.list_for_day(target, date)


@router.post("/tasks/{task_id}/status", response_model=TaskResponse)
async def update_task_status(
    task_id: str,
    body: TaskStatusUpdate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("supervisor", "admin")),
):
    return await TaskService(db, sender).update_task_status(
        actor, task_id, body.status, body.supervisor_feedback
    )
