"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from interntrack.db.models.user import UserRow
from interntrack.db.models.notification import NotificationRow
from interntrack.db.models.system_settings import SystemSettingsRow
from interntrack.db.models.audit_log import AuditLogRow
from interntrack.db.models.report import ReportRow
from interntrack.db.models.task import DailyTaskRow
from interntrack.db.models.invite import InviteRow
from interntrack.db.models.internship import InternshipProfileRow, InternshipTermRow
from interntrack.db.models.evaluation import EvaluationRow
from interntrack.db.models.abuse_report import AbuseReportRow
from interntrack.db.models.check_in import CheckInRow

__all__ = [
    "UserRow",
    "NotificationRow",
    "SystemSettingsRow",
    "AuditLogRow",
    "ReportRow",
    "DailyTaskRow",
    "InviteRow",
    "InternshipTermRow",
    "InternshipProfileRow",
    "EvaluationRow",
    "AbuseReportRow",
    "CheckInRow",
]
