"""Internship term administration."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import DBSession, Sender, require_role
from interntrack.models.common import Actor
from interntrack.models.workflow import TermCreate, TermResponse, TermStatusUpdate
from interntrack.services.workflows.internships import InternshipService

router = APIRouter(tags=["Internship Terms"])


@router.post("/terms", status_code=201, response_model=TermResponse)
async def create_term(
    body: TermCreate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin")),
):
    return await InternshipService(db, sender).create_term(body)


@router.get("/terms", response_model=list[TermResponse])
async def list_terms(
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin")),
):
    return await InternshipService(db, sender).list_terms()


@router.patch("/terms/{term_id}", response_model=TermResponse)
async def update_term_status(
    term_id: str,
    body: TermStatusUpdate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin")),
):
    return await InternshipService(db, sender).update_term_status(term_id, body.status)
