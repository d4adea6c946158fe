# backend/tests/conftest.py
import os

# Must be set before inquiry_desk.core.config is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SESSION_SWEEP_ENABLED", "false")

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from inquiry_desk.models import Base
from inquiry_desk.services.notify.notifier import Notifier


class FakeClock:
    """Settable UTC clock for expiry tests."""

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta) -> None:
        self.now = self.now + delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_notifier() -> MagicMock:
    notifier = MagicMock(spec=Notifier)
    notifier.send_sms = MagicMock()
    notifier.send_email = AsyncMock(return_value=True)
    return notifier


@pytest_asyncio.fixture
async def api_client(session_factory, mock_notifier):
    """HTTP client against the app, backed by the in-memory database."""
    import httpx

    from inquiry_desk.core.database import get_session
    from inquiry_desk.core.deps import get_request_notifier
    from inquiry_desk.main import app

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_request_notifier] = lambda: mock_notifier

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="https://testserver") as client:
        yield client

    app.dependency_overrides.clear()


STAFF_EMAIL = "staff@example.com"
STAFF_PASSWORD = "correct-horse-battery"


@pytest_asyncio.fixture
async def staff_account(session_factory):
    from inquiry_desk.core.security import hash_password
    from inquiry_desk.models.account import Account

    async with session_factory() as db:
        account = Account(
            id=42,
            email=STAFF_EMAIL,
            first_name="Sam",
            last_name="Staff",
            password_hash=hash_password(STAFF_PASSWORD),
        )
        db.add(account)
        await db.commit()
        return account


@pytest_asyncio.fixture
async def staff_client(api_client, staff_account):
    """api_client logged in as the staff account."""
    response = await api_client.post("/login", json={"email": STAFF_EMAIL, "password": STAFF_PASSWORD})
    assert response.status_code == 200
    return api_client
