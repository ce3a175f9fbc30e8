"""Health check endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

router = APIRouter()


@router.get("/health")
async def health_check():
    """Return service health status."""
    return {"status": "healthy", "service": "interntrack-api", "version": "1.0.0"}


@router.get("/health/ready")
async def readiness(request: Request):
    """Readiness check: verifies DB connectivity."""
    try:
        async with request.app.state.db_session_factory() as session:
            await session.execute(text("SELECT 1"))
        checks = {"database": "ok"}
        ok = True
    except Exception as exc:
        checks = {"database": f"error: {exc}"}
        ok = False

    return JSONResponse(
        status_code=200 if ok else 503,
        content={"status": "ready" if ok else "not_ready", "checks": checks},
    )
