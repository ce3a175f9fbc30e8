"""Daily task declaration table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from interntrack.db.base import Base, TimestampMixin


class DailyTaskRow(Base, TimestampMixin):
    __tablename__ = "daily_tasks"

    task_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    student_id: Mapped[str] = mapped_column(String(128), ForeignKey("users.user_id"), nullable=False, index=True)
    supervisor_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    internship_id: Mapped[str | None] = mapped_column(String(128), nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    learning_objectives: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending", index=True)
    supervisor_feedback: Mapped[str | None] = mapped_column(Text, nullable=True)
