"""Announcement broadcast endpoint."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import DBSession, Sender, require_role
from interntrack.models.announcement import AnnouncementCreate, AnnouncementResult
from interntrack.models.common import Actor
from interntrack.services.notifications.announcements import AnnouncementService

router = APIRouter(tags=["Announcements"])


@router.post("/announcements", response_model=AnnouncementResult)
async def send_announcement(
    body: AnnouncementCreate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin")),
):
    service = AnnouncementService(db, sender)
    return await service.send_announcement(actor, body.title, body.message, body.target_roles)
