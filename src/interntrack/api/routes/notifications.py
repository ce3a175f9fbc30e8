"""In-app notification bell endpoints for the current user."""

from fastapi import APIRouter, Depends

from interntrack.dependencies import CurrentUser, get_dispatcher
from interntrack.models.notification import AppNotification
from interntrack.services.notifications.dispatcher import NotificationDispatcher

router = APIRouter(tags=["Notifications"])


@router.get("/notifications", response_model=list[AppNotification])
async def list_notifications(
    actor: CurrentUser,
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    return await dispatcher.get_notifications(actor.uid)


@router.get("/notifications/unread-count")
async def unread_count(
    actor: CurrentUser,
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> dict:
    return {"unread": await dispatcher.unread_count(actor.uid)}


@router.post("/notifications/read-all")
async def mark_all_read(
    actor: CurrentUser,
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> dict:
    updated = await dispatcher.mark_all_as_read(actor.uid)
    return {"updated": updated}


@router.post("/notifications/{notification_id}/read", status_code=204)
async def mark_read(
    notification_id: str,
    actor: CurrentUser,
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> None:
    await dispatcher.mark_notification_as_read(notification_id, user_id=actor.uid)
