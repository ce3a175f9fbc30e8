"""Daily check-in endpoints."""

from fastapi import APIRouter, Depends, Query

from interntrack.dependencies import CurrentUser, DBSession, Sender, require_role
from interntrack.errors.exceptions import ValidationError
from interntrack.models.common import Actor
from interntrack.models.enums import Role
from interntrack.models.workflow import CheckInCreate, CheckInResponse
from interntrack.services.workflows.check_ins import CheckInService

router = APIRouter(tags=["Check-ins"])


@router.post("/check-ins", status_code=201, response_model=CheckInResponse)
async def create_check_in(
    body: CheckInCreate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("student")),
):
    return await CheckInService(db, sender).create_check_in(actor, body)


@router.get("/check-ins/today", response_model=CheckInResponse | None)
async def get_today_check_in(
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("student")),
):
    """The caller's check-in for the current UTC day, or null."""
    return await CheckInService(db, sender).get_today_check_in(actor.uid)


@router.get("/check-ins", response_model=list[CheckInResponse])
async def list_check_ins(
    actor: CurrentUser,
    db: DBSession,
    sender: Sender,
    student_id: str | None = None,
    limit: int = Query(default=30, ge=1, le=365),
):
    if actor.role == Role.STUDENT:
        student_id = actor.uid
    elif not student_id:
        raise ValidationError("student_id is required")
    return await CheckInService(db, sender).list_for_student(student_id, limit=limit)
