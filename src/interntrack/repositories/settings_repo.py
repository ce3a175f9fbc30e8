"""System settings singleton repository."""

from interntrack.db.base import utcnow
from interntrack.db.models.system_settings import GLOBAL_SETTINGS_ID, SystemSettingsRow
from interntrack.repositories.base import BaseRepository


class SystemSettingsRepository(BaseRepository[SystemSettingsRow]):
    model = SystemSettingsRow
    pk = "settings_id"

    async def get(self, pk_value: str = GLOBAL_SETTINGS_ID) -> SystemSettingsRow | None:
        return await super().get(pk_value)

    async def merge_notifications(self, patch: dict, updated_by: str | None = None) -> SystemSettingsRow:
        """Merge ``patch`` into the stored toggle map, creating the row if needed."""
        existing = await self.get()
        if existing is None:
            return await self.create(
                settings_id=GLOBAL_SETTINGS_ID,
                notifications=dict(patch),
                updated_by=updated_by,
            )
        # Reassign a new dict so the JSON column is flagged dirty
        existing.notifications = {**(existing.notifications or {}), **patch}
        existing.updated_by = updated_by
        existing.updated_at = utcnow()
        await self.session.flush()
        return existing
