"""Request and response models for the report, task, invite and evaluation workflows."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from interntrack.models.enums import AbuseReportStatus, Role, TermStatus


# ── Reports ────────────────────────────────────────────────────────────────────

class ReportCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    report_date: datetime
    declared_tasks: str = ""
    full_report: str = Field(..., min_length=1)
    internship_id: str | None = None
    internship_company: str | None = None


class ReportReview(BaseModel):
    model_config = ConfigDict(extra="forbid")

    comment: str = Field(..., min_length=1, max_length=5000)


class ReportResponse(BaseModel):
    report_id: str
    student_id: str
    lecturer_id: str | None
    internship_id: str | None
    report_date: datetime
    declared_tasks: str
    full_report: str
    summary: str
    status: str
    lecturer_comment: str | None
    supervisor_comment: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


# ── Daily tasks ────────────────────────────────────────────────────────────────

class TaskCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    supervisor_id: str
    date: datetime
    description: str = Field(..., min_length=1)
    learning_objectives: str = ""
    internship_id: str | None = None


class TaskStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: Literal["Completed", "Approved", "Rejected"]
    supervisor_feedback: str | None = None


class TaskResponse(BaseModel):
    task_id: str
    student_id: str
    supervisor_id: str
    internship_id: str | None
    date: datetime
    description: str
    learning_objectives: str
    status: str
    supervisor_feedback: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


# ── Invites ────────────────────────────────────────────────────────────────────

class InviteCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: Role
    index_number: str | None = None
    program_of_study: str | None = None
    faculty_id: str | None = None
    department_id: str | None = None


class InviteVerify(BaseModel):
    email: EmailStr
    code: str = Field(..., pattern=r"^[0-9]{6}$")


class InviteEmail(BaseModel):
    email: EmailStr


class InviteComplete(BaseModel):
    code: str = Field(..., pattern=r"^[0-9]{6}$")


class InviteResponse(BaseModel):
    invite_id: str
    email: str
    role: str
    first_name: str
    last_name: str
    status: str
    pending_user_id: str
    created_at: datetime

    model_config = {"from_attributes": True}


# ── User administration ────────────────────────────────────────────────────────

class LecturerAssignment(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lecturer_id: str


class UserStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: Literal["active", "inactive"]


# ── Daily check-ins ────────────────────────────────────────────────────────────

class CheckInCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    is_gps_verified: bool
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    manual_reason: str | None = Field(default=None, max_length=1000)

    @model_validator(mode="after")
    def _location_or_reason(self):
        if self.is_gps_verified and (self.latitude is None or self.longitude is None):
            raise ValueError("GPS check-ins need latitude and longitude")
        if not self.is_gps_verified and not (self.manual_reason or "").strip():
            raise ValueError("Manual check-ins need a reason")
        return self


class CheckInResponse(BaseModel):
    check_in_id: str
    student_id: str
    timestamp: datetime
    is_gps_verified: bool
    latitude: float | None
    longitude: float | None
    address_resolved: str | None
    manual_reason: str | None

    model_config = {"from_attributes": True}


# ── Evaluations ────────────────────────────────────────────────────────────────

class EvaluationMetrics(BaseModel):
    model_config = ConfigDict(extra="forbid")

    technicalSkills: int = Field(..., ge=1, le=5)
    problemSolving: int = Field(..., ge=1, le=5)
    communication: int = Field(..., ge=1, le=5)
    teamwork: int = Field(..., ge=1, le=5)
    proactiveness: int = Field(..., ge=1, le=5)
    overall: int = Field(..., ge=1, le=5)


class EvaluationCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    student_id: str
    metrics: EvaluationMetrics
    comments: str = ""


# ── Abuse reports ──────────────────────────────────────────────────────────────

class AbuseReportCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    message: str = Field(..., min_length=1, max_length=10000)


class AbuseReportStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: AbuseReportStatus


# ── Terms and profiles ─────────────────────────────────────────────────────────

class TermCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=200)
    start_date: datetime
    end_date: datetime


class TermStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: TermStatus


class InternshipProfileUpsert(BaseModel):
    """Either an existing ``supervisor_id`` or the supervisor's contact, who is then invited."""

    model_config = ConfigDict(extra="forbid")

    student_id: str | None = None
    supervisor_id: str | None = None
    supervisor_name: str | None = Field(default=None, max_length=200)
    supervisor_email: EmailStr | None = None
    company_name: str = Field(..., min_length=1, max_length=200)
    company_address: str | None = Field(default=None, max_length=300)
    start_date: datetime | None = None
    end_date: datetime | None = None


class ActionResult(BaseModel):
    """Structured result for admin-triggered batch actions."""

    success: bool
    message: str
    count: int = 0


# ── Responses for supplementary records ───────────────────────────────────────

class UserResponse(BaseModel):
    user_id: str
    email: str
    full_name: str
    role: str
    status: str
    lecturer_id: str | None

    model_config = {"from_attributes": True}


class EvaluationResponse(BaseModel):
    evaluation_id: str
    student_id: str
    evaluator_id: str
    evaluator_role: str
    evaluator_name: str
    metrics: dict
    comments: str
    created_at: datetime

    model_config = {"from_attributes": True}


class AbuseReportResponse(BaseModel):
    abuse_report_id: str
    student_id: str
    student_name: str
    message: str
    status: str
    lecturer_id: str | None
    reported_at: datetime

    model_config = {"from_attributes": True}


class TermResponse(BaseModel):
    term_id: str
    name: str
    start_date: datetime
    end_date: datetime
    status: str

    model_config = {"from_attributes": True}


class InternshipProfileResponse(BaseModel):
    profile_id: str
    student_id: str
    supervisor_id: str | None
    supervisor_name: str | None
    supervisor_email: str | None
    company_name: str
    company_address: str | None
    start_date: datetime | None
    end_date: datetime | None

    model_config = {"from_attributes": True}


class AuditLogResponse(BaseModel):
    log_id: str
    user_id: str
    user_name: str
    user_email: str
    action: str
    details: str
    timestamp: datetime

    model_config = {"from_attributes": True}
