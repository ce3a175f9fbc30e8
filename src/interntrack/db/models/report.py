"""Daily report table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from interntrack.db.base import Base, TimestampMixin


class ReportRow(Base, TimestampMixin):
    __tablename__ = "reports"

    report_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    student_id: Mapped[str] = mapped_column(String(128), ForeignKey("users.user_id"), nullable=False, index=True)
    lecturer_id: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    internship_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    report_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    declared_tasks: Mapped[str] = mapped_column(Text, nullable=False, default="")
    full_report: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending", index=True)
    lecturer_comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    supervisor_comment: Mapped[str | None] = mapped_column(Text, nullable=True)
