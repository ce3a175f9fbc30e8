"""Invite endpoints. Verification and completion are public."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import DBSession, Sender, require_role
from interntrack.models.common import Actor
from interntrack.models.workflow import (
    ActionResult,
    InviteComplete,
    InviteCreate,
    InviteEmail,
    InviteResponse,
    InviteVerify,
    UserResponse,
)
from interntrack.services.workflows.invites import InviteService

router = APIRouter(tags=["Invites"])


@router.post("/invites", status_code=201, response_model=InviteResponse)
async def create_invite(
    body: InviteCreate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin", "hod")),
):
    return await InviteService(db, sender).create_invite(actor, body)


@router.get("/invites/pending", response_model=list[InviteResponse])
async def list_pending_invites(
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin", "hod")),
):
    return await InviteService(db, sender).list_pending()


@router.post("/invites/resend-verification", response_model=ActionResult)
async def resend_verification(body: InviteEmail, db: DBSession, sender: Sender):
    return await InviteService(db, sender).resend_verification(str(body.email))


@router.post("/invites/verify", response_model=InviteResponse)
async def verify_invite(body: InviteVerify, db: DBSession, sender: Sender):
    return await InviteService(db, sender).verify_invite(str(body.email), body.code)


@router.post("/invites/{invite_id}/complete", response_model=UserResponse)
async def complete_registration(invite_id: str, body: InviteComplete, db: DBSession, sender: Sender):
    return await InviteService(db, sender).complete_registration(invite_id, body.code)
