"""Internship term and internship profile tables."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from interntrack.db.base import Base, TimestampMixin


class InternshipTermRow(Base, TimestampMixin):
    __tablename__ = "internship_terms"

    term_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Upcoming", index=True)


class InternshipProfileRow(Base, TimestampMixin):
    __tablename__ = "internship_profiles"

    profile_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    student_id: Mapped[str] = mapped_column(
        String(128), ForeignKey("users.user_id"), nullable=False, unique=True, index=True
    )
    supervisor_id: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    supervisor_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    supervisor_email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    company_address: Mapped[str | None] = mapped_column(String(300), nullable=True)
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
