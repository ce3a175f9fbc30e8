"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from interntrack.errors.exceptions import AuthenticationError, AuthorizationError
from interntrack.models.common import Actor
from interntrack.models.enums import Role
from interntrack.services.email.sender import DisabledEmailSender, EmailSender
from interntrack.services.notifications.dispatcher import NotificationDispatcher
from interntrack.services.summarizer import ReportSummarizer


async def get_db(request: Request) -> AsyncGenerator:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def get_email_sender(request: Request) -> EmailSender:
    return getattr(request.app.state, "email_sender", None) or DisabledEmailSender()


def get_summarizer(request: Request) -> ReportSummarizer:
    return getattr(request.app.state, "summarizer", None) or ReportSummarizer(url=None)


async def get_dispatcher(
    db: AsyncSession = Depends(get_db),
    email_sender: EmailSender = Depends(get_email_sender),
) -> NotificationDispatcher:
    return NotificationDispatcher(db, email_sender)


async def get_current_user(request: Request) -> Actor:
    """Return the authenticated caller or raise 401."""
    user = getattr(request.state, "user", {})
    if "_auth_error" in (user or {}):
        raise AuthenticationError(user["_auth_error"])
    if not user or user.get("sub") in ("anonymous", ""):
        raise AuthenticationError("Authentication required")
    role = user.get("role")
    return Actor(
        uid=user["sub"],
        name=user.get("name", ""),
        email=user.get("email", ""),
        role=Role(role) if role in {r.value for r in Role} else None,
    )


def require_role(*roles: str):
    """Return a dependency that enforces one of the given roles."""

    async def _check(actor: Actor = Depends(get_current_user)) -> Actor:
        if actor.role is None or actor.role.value not in roles:
            raise AuthorizationError(f"Requires one of: {', '.join(roles)}")
        return actor

    return _check


# Type aliases for dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUser = Annotated[Actor, Depends(get_current_user)]
Sender = Annotated[EmailSender, Depends(get_email_sender)]
