"""System settings singleton table."""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from interntrack.db.base import Base, TimestampMixin

GLOBAL_SETTINGS_ID = "global"


class SystemSettingsRow(Base, TimestampMixin):
    __tablename__ = "system_settings"

    settings_id: Mapped[str] = mapped_column(String(32), primary_key=True, default=GLOBAL_SETTINGS_ID)
    notifications: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    updated_by: Mapped[str | None] = mapped_column(String(128), nullable=True)
