"""String enums shared by the ORM rows, request models and services."""

from enum import StrEnum


class NotificationType(StrEnum):
    NEW_INVITE = "NEW_INVITE"
    NEW_REPORT_SUBMITTED = "NEW_REPORT_SUBMITTED"
    REPORT_APPROVED = "REPORT_APPROVED"
    REPORT_REJECTED = "REPORT_REJECTED"
    TASK_DECLARED = "TASK_DECLARED"
    TASK_APPROVED = "TASK_APPROVED"
    TASK_REJECTED = "TASK_REJECTED"
    LECTURER_ASSIGNED = "LECTURER_ASSIGNED"
    EVALUATION_REMINDER = "EVALUATION_REMINDER"
    TERM_ENDING_REMINDER = "TERM_ENDING_REMINDER"
    ANNOUNCEMENT = "ANNOUNCEMENT"
    ABUSE_REPORT_SUBMITTED = "ABUSE_REPORT_SUBMITTED"


class Role(StrEnum):
    STUDENT = "student"
    LECTURER = "lecturer"
    HOD = "hod"
    SUPERVISOR = "supervisor"
    ADMIN = "admin"


class UserStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class ReportStatus(StrEnum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class TaskStatus(StrEnum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class InviteStatus(StrEnum):
    PENDING = "pending"
    ACCEPTED = "accepted"


class TermStatus(StrEnum):
    UPCOMING = "Upcoming"
    ACTIVE = "Active"
    ARCHIVED = "Archived"


class AbuseReportStatus(StrEnum):
    NEW = "new"
    UNDER_REVIEW = "under_review"
    RESOLVED = "resolved"


class AnnouncementTarget(StrEnum):
    ALL = "all"
    STUDENTS = "students"
    LECTURERS = "lecturers"
    SUPERVISORS = "supervisors"
    ADMINS = "admins"
    HODS = "hods"


class EmailOutcome(StrEnum):
    SENT = "sent"
    DISABLED = "disabled"
    SKIPPED_NO_ADDRESS = "skipped_no_address"
    FAILED = "failed"
    HANDLED_BY_CALLER = "handled_by_caller"
