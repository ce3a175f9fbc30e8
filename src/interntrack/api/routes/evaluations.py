"""Evaluation endpoints."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import CurrentUser, DBSession, Sender, require_role
from interntrack.models.common import Actor
from interntrack.models.enums import Role
from interntrack.models.workflow import EvaluationCreate, EvaluationResponse
from interntrack.services.workflows.evaluations import EvaluationService

router = APIRouter(tags=["Evaluations"])


@router.post("/evaluations", status_code=201, response_model=EvaluationResponse)
async def create_evaluation(
    body: EvaluationCreate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("supervisor", "lecturer")),
):
    return await EvaluationService(db, sender).create_evaluation(actor, body)


@router.get("/evaluations", response_model=list[EvaluationResponse])
async def list_evaluations(actor: CurrentUser, db: DBSession, sender: Sender, student_id: str | None = None):
    target = actor.uid if actor.role == Role.STUDENT or not student_id else student_id
    return await EvaluationService(db, sender).list_for_student(target)
