"""Confidential abuse report endpoints."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import DBSession, Sender, require_role
from interntrack.models.common import Actor
from interntrack.models.workflow import AbuseReportCreate, AbuseReportResponse, AbuseReportStatusUpdate
from interntrack.services.workflows.abuse_reports import AbuseReportService

router = APIRouter(tags=["Abuse Reports"])


@router.post("/abuse-reports", status_code=201)
async def create_abuse_report(
    body: AbuseReportCreate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("student")),
) -> dict:
    report = await AbuseReportService(db, sender).create_abuse_report(actor.uid, body.message)
    # The reporting student only gets an acknowledgement
    return {"abuse_report_id": report.abuse_report_id, "status": report.status}


@router.get("/abuse-reports", response_model=list[AbuseReportResponse])
async def list_abuse_reports(
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin", "lecturer")),
):
    return await AbuseReportService(db, sender).list_abuse_reports(actor)


@router.patch("/abuse-reports/{abuse_report_id}", response_model=AbuseReportResponse)
async def update_abuse_report_status(
    abuse_report_id: str,
    body: AbuseReportStatusUpdate,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("admin", "lecturer")),
):
    return await AbuseReportService(db, sender).update_status(actor, abuse_report_id, body.status)
