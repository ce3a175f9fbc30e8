"""User administration endpoints."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import DBSession, Sender, require_role
from interntrack.models.common import Actor
from interntrack.models.workflow import LecturerAssignment, UserResponse, UserStatusUpdate
from interntrack.services.workflows.users import UserAdminService

router = APIRouter(tags=["Users"])


@router.put("/users/{student_id}/lecturer", response_model=UserResponse)
async def assign_lecturer(
    student_id: str,
    body: LecturerAssignment,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin", "hod")),
):
    return await UserAdminService(db, sender).assign_lecturer(actor, student_id, body.lecturer_id)


@router.patch("/users/{user_id}/status", response_model=UserResponse)
async def update_user_status(
    user_id: str,
    body: UserStatusUpdate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin")),
):
    return await UserAdminService(db, sender).update_user_status(actor, user_id, body.status)
