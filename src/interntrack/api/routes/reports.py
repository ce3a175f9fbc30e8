"""Daily report endpoints."""

from fastapi import APIRouter, Depends, Query

from interntrack.dependencies import CurrentUser, DBSession, Sender, get_summarizer, require_role
from interntrack.errors.exceptions import ValidationError
from interntrack.models.common import Actor
from interntrack.models.enums import Role
from interntrack.models.workflow import ReportCreate, ReportResponse, ReportReview
from interntrack.services.summarizer import ReportSummarizer
from interntrack.services.workflows.reports import REVIEWER_ROLES, ReportService

router = APIRouter(tags=["Reports"])


@router.post("/reports", status_code=201, response_model=ReportResponse)
async def submit_report(
    body: ReportCreate,
    db: DBSession,
    sender: Sender,
    summarizer: ReportSummarizer = Depends(get_summarizer),
    actor: Actor = Depends(require_role("student")),
):
    return await ReportService(db, sender, summarizer=summarizer).submit_report(actor, body)


@router.get("/reports", response_model=list[ReportResponse])
async def list_reports(
    actor: CurrentUser,
    db: DBSession,
    sender: Sender,
    student_id: str | None = None,
    lecturer_id: str | None = None,
    status: list[str] | None = Query(default=None),
):
    """Students see their own reports; staff filter by student or lecturer."""
    service = ReportService(db, sender)
    if actor.role == Role.STUDENT:
        return await service.list_for_student(actor.uid)
    if student_id:
        return await service.list_for_student(student_id)
    if lecturer_id and actor.role != Role.LECTURER:
        return await service.list_for_lecturer(lecturer_id, status)
    if actor.role in REVIEWER_ROLES:
        return await service.list_for_lecturer(actor.uid, status)
    raise ValidationError("Specify student_id or lecturer_id")


@router.post("/reports/{report_id}/approve", response_model=ReportResponse)
async def approve_report(
    report_id: str,
    body: ReportReview,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("lecturer", "hod", "admin")),
):
    return await ReportService(db, sender).approve_report(actor, report_id, body.comment)


@router.post("/reports/{report_id}/reject", response_model=ReportResponse)
async def reject_report(
    report_id: str,
    body: ReportReview,
    db: DBSession,
    sender: Sender,
    actor: Actor = Depends(require_role("lecturer", "hod", "admin")),
):
    return await ReportService(db, sender).reject_report(actor, report_id, body.comment)
