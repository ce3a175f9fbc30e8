"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from interntrack.config import settings
from interntrack.db.base import Base
# Import all models to register with Base.metadata
import interntrack.db.models  # noqa: F401
from interntrack.errors.exceptions import EmailDeliveryError
from interntrack.models.common import Actor
from interntrack.models.enums import Role
from interntrack.repositories.user_repo import UserRepository
from interntrack.services.email.sender import EmailMessage, EmailSender


class RecordingEmailSender(EmailSender):
    """Keeps every message instead of delivering it."""

    def __init__(self):
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        self.sent.append(message)


class FailingEmailSender(EmailSender):
    """Raises on every send, counting the attempts."""

    def __init__(self):
        self.attempts = 0

    async def send(self, message: EmailMessage) -> None:
        self.attempts += 1
        raise EmailDeliveryError(f"Failed to send email to {message.to}")


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def failing_sender():
    return FailingEmailSender()


@pytest.fixture
def make_user(db_session):
    """Factory inserting an active user; returns the row."""
    counter = {"n": 0}

    async def _make(role: Role = Role.STUDENT, email: str | None = None, **fields):
        counter["n"] += 1
        n = counter["n"]
        fields.setdefault("status", "active")
        user = await UserRepository(db_session).create(
            user_id=fields.pop("user_id", f"usr_{role.value}_{n}"),
            email=f"{role.value}{n}@example.com" if email is None else email,
            full_name=fields.pop("full_name", f"{role.value.title()} {n}"),
            role=role.value,
            **fields,
        )
        await db_session.commit()
        return user

    return _make


def actor_for(user) -> Actor:
    return Actor(uid=user.user_id, name=user.full_name, email=user.email, role=Role(user.role))


def make_token(sub: str, role: str, name: str = "Test User", email: str = "test@example.com") -> str:
    """Sign an access token the way the identity provider does."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": sub,
        "role": role,
        "name": name,
        "email": email,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": now + timedelta(hours=1),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def auth_headers(sub: str, role: str) -> dict:
    return {"Authorization": f"Bearer {make_token(sub, role)}"}


@pytest.fixture
def app(db_engine, email_sender):
    """Create a test application instance with in-memory DB and a recording mailer."""
    from interntrack.main import create_app
    from interntrack.services.summarizer import ReportSummarizer

    _app = create_app()
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = session_factory
    _app.state.email_sender = email_sender
    _app.state.summarizer = ReportSummarizer(url=None)
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
