"""Audit log helpers."""

from sqlalchemy.ext.asyncio import AsyncSession

from interntrack.db.models.audit_log import AuditLogRow
from interntrack.models.common import Actor
from interntrack.repositories.audit_log_repo import AuditLogRepository
from interntrack.services.id_generator import generate_id


async def record_audit(session: AsyncSession, actor: Actor, action: str, details: str) -> AuditLogRow:
    """Append one audit entry. Flushes only; the caller owns the commit."""
    repo = AuditLogRepository(session)
    return await repo.append(
        log_id=generate_id("audit_"),
        user_id=actor.uid,
        user_name=actor.name or "Unknown",
        user_email=actor.email or "N/A",
        action=action,
        details=details,
    )
