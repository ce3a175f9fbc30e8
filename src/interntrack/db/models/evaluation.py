"""Evaluation table."""

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from interntrack.db.base import Base, TimestampMixin


class EvaluationRow(Base, TimestampMixin):
    __tablename__ = "evaluations"

    evaluation_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    student_id: Mapped[str] = mapped_column(String(128), ForeignKey("users.user_id"), nullable=False, index=True)
    evaluator_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    evaluator_role: Mapped[str] = mapped_column(String(20), nullable=False)
    evaluator_name: Mapped[str] = mapped_column(String(200), nullable=False)
    metrics: Mapped[dict] = mapped_column(JSON, nullable=False)
    comments: Mapped[str] = mapped_column(Text, nullable=False, default="")
