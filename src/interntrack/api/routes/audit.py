"""Audit log read endpoint."""

from fastapi import APIRouter, Depends, Query

from interntrack.dependencies import DBSession, require_role
from interntrack.models.common import Actor
from interntrack.models.workflow import AuditLogResponse
from interntrack.repositories.audit_log_repo import AuditLogRepository

router = APIRouter(tags=["Audit"])


@router.get("/audit-logs", response_model=list[AuditLogResponse])
async def list_audit_logs(
    db: DBSession,
    limit: int = Query(default=200, ge=1, le=1000),
    action: str | None = None,
    actor: Actor = Depends(require_role("admin")),
):
    return await AuditLogRepository(db).list_recent(limit, action=action)
