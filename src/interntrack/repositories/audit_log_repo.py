"""Audit log repository (append-only)."""

from interntrack.db.models.audit_log import AuditLogRow
from interntrack.repositories.base import BaseRepository


class AuditLogRepository(BaseRepository[AuditLogRow]):
    model = AuditLogRow
    pk = "log_id"

    async def append(self, **values) -> AuditLogRow:
        return await self.create(**values)

    async def list_recent(self, limit: int = 200, action: str | None = None) -> list[AuditLogRow]:
        criteria = [AuditLogRow.action == action] if action else []
        return await self.find(*criteria, order_by=AuditLogRow.timestamp.desc(), limit=limit)
