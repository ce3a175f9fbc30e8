"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interntrack.config import settings
from interntrack.db.engine import create_db_engine, create_session_factory, create_tables
from interntrack.logging_config import configure_logging
from interntrack.services.email.sender import build_email_sender
from interntrack.services.summarizer import ReportSummarizer

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=not settings.local_mode)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    engine = create_db_engine()
    if settings.auto_create_tables:
        await create_tables(engine)
        logger.info("Database tables ensured")

    app.state.db_engine = engine
    app.state.db_session_factory = create_session_factory(engine)
    app.state.email_sender = build_email_sender(settings)
    app.state.summarizer = ReportSummarizer.from_settings(settings)

    logger.info(
        "InternTrack API started (db=%s, email=%s)",
        "sqlite" if "sqlite" in settings.effective_database_url else "postgresql",
        "smtp" if settings.email_configured else "disabled",
    )
    yield

    await engine.dispose()
    logger.info("InternTrack API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="InternTrack API",
        version="1.0.0",
        description="Notification core for internship management: in-app notifications, gated email, announcements.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add middleware (order matters: last added = first executed)
    from interntrack.api.middleware.auth import AuthMiddleware
    from interntrack.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(AuthMiddleware)
    app.add_middleware(TraceIdMiddleware)

    from interntrack.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from interntrack.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
