"""Daily report submission and review."""

import logging

from interntrack.db.models.report import ReportRow
from interntrack.errors.exceptions import AuthorizationError, ConflictError, NotFoundError
from interntrack.models.common import Actor
from interntrack.models.enums import NotificationType, ReportStatus, Role
from interntrack.models.workflow import ReportCreate
from interntrack.repositories.internship_repo import InternshipProfileRepository
from interntrack.repositories.report_repo import ReportRepository
from interntrack.services.audit import record_audit
from interntrack.services.id_generator import generate_id
from interntrack.services.summarizer import ReportSummarizer
from interntrack.services.workflows.base import WorkflowService

logger = logging.getLogger(__name__)

# Roles that can be assigned to a student as their reviewing lecturer
REVIEWER_ROLES = (Role.LECTURER, Role.HOD)


class ReportService(WorkflowService):
    def __init__(self, session, email_sender, summarizer: ReportSummarizer | None = None, dispatcher=None):
        super().__init__(session, email_sender, dispatcher)
        self.reports = ReportRepository(session)
        self.profiles = InternshipProfileRepository(session)
        self.summarizer = summarizer or ReportSummarizer(url=None)

    async def submit_report(self, actor: Actor, payload: ReportCreate) -> ReportRow:
        student = await self._require_user(actor.uid)

        company = payload.internship_company
        if not company:
            profile = await self.profiles.get_by_student(student.user_id)
            company = profile.company_name if profile else ""
        summary = await self.summarizer.summarize(
            daily_report=payload.full_report,
            declared_tasks=payload.declared_tasks,
            student_name=student.full_name,
            internship_company=company,
        )

        report = await self.reports.create(
            report_id=generate_id("rpt_"),
            student_id=student.user_id,
            lecturer_id=student.lecturer_id,
            internship_id=payload.internship_id,
            report_date=payload.report_date,
            declared_tasks=payload.declared_tasks,
            full_report=payload.full_report,
            summary=summary,
            status=ReportStatus.PENDING.value,
        )
        await record_audit(
            self.session,
            Actor(uid=student.user_id, name=student.full_name, email=student.email),
            action="Submit Report",
            details=f"Student {student.full_name} submitted a daily report.",
        )
        await self.session.commit()

        if student.lecturer_id:
            await self.notify(
                student.lecturer_id,
                NotificationType.NEW_REPORT_SUBMITTED,
                title="New Report Submitted",
                message=f"{student.full_name} has submitted a new daily report for your review.",
                href="/lecturer/reports",
            )
        else:
            logger.info("Report %s has no lecturer to notify", report.report_id)
        return report

    async def approve_report(self, actor: Actor, report_id: str, comment: str) -> ReportRow:
        return await self._review(actor, report_id, comment, ReportStatus.APPROVED)

    async def reject_report(self, actor: Actor, report_id: str, comment: str) -> ReportRow:
        return await self._review(actor, report_id, comment, ReportStatus.REJECTED)

    async def _review(self, actor: Actor, report_id: str, comment: str, outcome: ReportStatus) -> ReportRow:
        report = await self.reports.get(report_id)
        if report is None:
            raise NotFoundError("Report", report_id)
        if actor.role in REVIEWER_ROLES and report.lecturer_id != actor.uid:
            raise AuthorizationError("Only the student's assigned lecturer can review this report")
        if report.status != ReportStatus.PENDING:
            raise ConflictError(f"Report '{report_id}' is already {report.status}")

        await self.reports.update(report, status=outcome.value, lecturer_comment=comment)
        approved = outcome == ReportStatus.APPROVED
        await record_audit(
            self.session,
            actor,
            action="Approve Report" if approved else "Reject Report",
            details=f"{outcome.value} daily report {report_id} for student ID {report.student_id}.",
        )
        await self.session.commit()

        day = report.report_date.strftime("%Y-%m-%d")
        if approved:
            await self.notify(
                report.student_id,
                NotificationType.REPORT_APPROVED,
                title="Report Approved",
                message=f"Your daily report for {day} has been approved. Comment: {comment}",
                href="/student/reports",
            )
        else:
            await self.notify(
                report.student_id,
                NotificationType.REPORT_REJECTED,
                title="Report Rejected",
                message=f"Your daily report for {day} needs revision. Comment: {comment}",
                href="/student/reports",
            )
        return report

    async def list_for_student(self, student_id: str) -> list[ReportRow]:
        return await self.reports.list_by_student(student_id)

    async def list_for_lecturer(self, lecturer_id: str, statuses: list[str] | None = None) -> list[ReportRow]:
        return await self.reports.list_by_lecturer(lecturer_id, statuses or [s.value for s in ReportStatus])
