"""Confidential abuse reports raised by students."""

from interntrack.db.models.abuse_report import AbuseReportRow
from interntrack.errors.exceptions import AuthorizationError, NotFoundError
from interntrack.models.common import Actor
from interntrack.models.enums import AbuseReportStatus, NotificationType, Role
from interntrack.repositories.abuse_report_repo import AbuseReportRepository
from interntrack.services.audit import record_audit
from interntrack.services.id_generator import generate_id
from interntrack.services.workflows.base import WorkflowService

URGENT_TITLE = "URGENT: Abuse Report Submitted"


class AbuseReportService(WorkflowService):
    def __init__(self, session, email_sender, dispatcher=None):
        super().__init__(session, email_sender, dispatcher)
        self.abuse_reports = AbuseReportRepository(session)

    async def create_abuse_report(self, student_id: str, message: str) -> AbuseReportRow:
        student = await self._require_user(student_id)
        report = await self.abuse_reports.create(
            abuse_report_id=generate_id("abuse_"),
            student_id=student.user_id,
            student_name=student.full_name,
            message=message,
            status=AbuseReportStatus.NEW.value,
            lecturer_id=student.lecturer_id,
        )
        await record_audit(
            self.session,
            Actor(uid=student.user_id, name=student.full_name, email=student.email),
            action="Submit Abuse Report",
            details="A student submitted a confidential abuse/harassment report.",
        )
        await self.session.commit()

        if student.lecturer_id:
            await self.notify(
                student.lecturer_id,
                NotificationType.ABUSE_REPORT_SUBMITTED,
                title=URGENT_TITLE,
                message=(
                    f"A confidential report has been submitted by your student, "
                    f"{student.full_name}. Please review it immediately."
                ),
                href="/lecturer/abuse-reports",
            )
        for admin in await self.users.list_active(role=Role.ADMIN):
            await self.notify(
                admin.user_id,
                NotificationType.ABUSE_REPORT_SUBMITTED,
                title=URGENT_TITLE,
                message=f"A confidential report has been submitted by student {student.full_name}.",
                href="/admin/abuse-reports",
            )
        return report

    async def list_abuse_reports(self, actor: Actor) -> list[AbuseReportRow]:
        """Admins see every report; lecturers only those of their own students."""
        if actor.role == Role.ADMIN:
            return await self.abuse_reports.list_newest_first()
        return await self.abuse_reports.list_newest_first(lecturer_id=actor.uid)

    async def update_status(self, actor: Actor, abuse_report_id: str, status: AbuseReportStatus) -> AbuseReportRow:
        report = await self.abuse_reports.get(abuse_report_id)
        if report is None:
            raise NotFoundError("Abuse report", abuse_report_id)
        if actor.role != Role.ADMIN and report.lecturer_id != actor.uid:
            raise AuthorizationError("Not allowed to update this abuse report")
        await self.abuse_reports.update(report, status=AbuseReportStatus(status).value)
        await self.session.commit()
        return report
