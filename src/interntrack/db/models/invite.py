"""Invite table."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from interntrack.db.base import Base, TimestampMixin


class InviteRow(Base, TimestampMixin):
    __tablename__ = "invites"

    invite_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    index_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    program_of_study: Mapped[str | None] = mapped_column(String(200), nullable=True)
    faculty_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    department_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending", index=True)
    verification_code: Mapped[str] = mapped_column(String(6), nullable=False)
    pending_user_id: Mapped[str] = mapped_column(String(128), ForeignKey("users.user_id"), nullable=False)
    invited_by_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    invited_by_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
