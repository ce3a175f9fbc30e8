"""Admin-triggered reminder runs."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import DBSession, Sender, require_role
from interntrack.models.common import Actor
from interntrack.models.workflow import ActionResult
from interntrack.services.workflows.reminders import ReminderService

router = APIRouter(tags=["Reminders"])


@router.post("/reminders/evaluations", response_model=ActionResult)
async def send_evaluation_reminders(
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin")),
):
    return await ReminderService(db, sender).send_evaluation_reminders(actor)


@router.post("/reminders/term-ending", response_model=ActionResult)
async def send_term_ending_reminders(
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin")),
):
    return await ReminderService(db, sender).send_term_ending_reminders(actor)
