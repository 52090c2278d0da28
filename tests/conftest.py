from __future__ import annotations

import os

# Default to an in-memory SQLite database; export DATABASE_URL to run against PostgreSQL.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from typing import TYPE_CHECKING  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402

from leave_planner.config import get_settings  # noqa: E402
from leave_planner.db import engine_options, get_session  # noqa: E402
from leave_planner.main import app  # noqa: E402
from leave_planner.models import SQLModel  # noqa: E402
from leave_planner.services.notification import DatabaseNotificationSink, set_notification_sink  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

    from sqlalchemy.ext.asyncio import AsyncEngine


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Create an async engine with all tables.

    Each test gets a fresh schema, which for in-memory SQLite is a fresh database.
    """
    settings = get_settings()
    _engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))
    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield _engine
    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await _engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Yield a database session wrapped in a transaction that rolls back after each test."""
    async with engine.connect() as conn:
        txn = await conn.begin()
        session = AsyncSession(bind=conn, expire_on_commit=False)
        yield session
        await session.close()
        await txn.rollback()


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with the database session dependency overridden."""

    async def _override_get_session() -> AsyncIterator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_session] = _override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _reset_notification_sink() -> Iterator[None]:
    """Every test starts and ends with the database-backed notification sink."""
    set_notification_sink(DatabaseNotificationSink())
    yield
    set_notification_sink(DatabaseNotificationSink())
