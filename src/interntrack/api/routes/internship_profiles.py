"""Internship profile endpoints."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import CurrentUser, DBSession, Sender, require_role
from interntrack.errors.exceptions import AuthorizationError
from interntrack.models.common import Actor
from interntrack.models.enums import Role
from interntrack.models.workflow import InternshipProfileResponse, InternshipProfileUpsert
from interntrack.services.workflows.internships import InternshipService

router = APIRouter(tags=["Internship Profiles"])


@router.put("/internship-profiles", response_model=InternshipProfileResponse)
async def upsert_internship_profile(
    body: InternshipProfileUpsert,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("student", "admin")),
):
    return await InternshipService(db, sender).upsert_profile(actor, body)


@router.get("/internship-profiles/{student_id}", response_model=InternshipProfileResponse)
async def get_internship_profile(student_id: str, actor: CurrentUser, db: DBSession, sender: Sender):
    if actor.role == Role.STUDENT and student_id != actor.uid:
        raise AuthorizationError("Students can only view their own internship profile")
    return await InternshipService(db, sender).get_profile(student_id)
