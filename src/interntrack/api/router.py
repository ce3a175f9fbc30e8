"""Master API router mounted at /api/v1."""

from fastapi import APIRouter
from interntrack.api.routes import (
    abuse_reports,
    announcements,
    audit,
    check_ins,
    evaluations,
    health,
    internship_profiles,
    invites,
    notifications,
    reminders,
    reports,
    settings,
    tasks,
    terms,
    users,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(notifications.router)
api_router.include_router(settings.router)
api_router.include_router(announcements.router)
api_router.include_router(reports.router)
api_router.include_router(tasks.router)
api_router.include_router(check_ins.router)
api_router.include_router(invites.router)
api_router.include_router(users.router)
api_router.include_router(reminders.router)
api_router.include_router(abuse_reports.router)
api_router.include_router(evaluations.router)
api_router.include_router(terms.router)
api_router.include_router(internship_profiles.router)
api_router.include_router(audit.router)
