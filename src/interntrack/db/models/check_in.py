"""Daily attendance check-in table."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from interntrack.db.base import Base, utcnow


class CheckInRow(Base):
    __tablename__ = "check_ins"
    __table_args__ = (UniqueConstraint("student_id", "check_in_date", name="uq_check_ins_student_day"),)

    check_in_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    student_id: Mapped[str] = mapped_column(String(128), ForeignKey("users.user_id"), nullable=False, index=True)
    check_in_date: Mapped[date] = mapped_column(Date, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    is_gps_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    address_resolved: Mapped[str | None] = mapped_column(String(300), nullable=True)
    manual_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
