"""System settings (email notification toggles)."""

import logging

from fastapi import APIRouter, Depends

from interntrack.dependencies import DBSession, require_role
from interntrack.models.common import Actor
from interntrack.models.settings import SettingsUpdate, SystemSettings
from interntrack.services.audit import record_audit
from interntrack.services.notifications.settings_gate import SettingsGate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Settings"])


@router.get("/settings", response_model=SystemSettings)
async def get_settings(db: DBSession, actor: Actor = Depends(require_role("admin"))):
    return await SettingsGate(db).get_settings()


@router.patch("/settings", response_model=SystemSettings)
async def update_settings(
    body: SettingsUpdate,
    db: DBSession,
    actor: Actor = Depends(require_role("admin")),
):
    gate = SettingsGate(db)
    updated = await gate.update_settings(body.notifications, updated_by=actor.uid)
    changed = ", ".join(f"{k}={v}" for k, v in sorted(body.notifications.items()))
    await record_audit(db, actor, action="Update Settings", details=f"Updated notification settings: {changed}.")
    await db.commit()
    logger.info("Notification settings updated by %s", actor.uid)
    return updated
