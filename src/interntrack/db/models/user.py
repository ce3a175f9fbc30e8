"""User profile table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from interntrack.db.base import Base, TimestampMixin


class UserRow(Base, TimestampMixin):
    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending", index=True)
    lecturer_id: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    index_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    program_of_study: Mapped[str | None] = mapped_column(String(200), nullable=True)
    faculty_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    department_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
