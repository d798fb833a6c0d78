"""Pytest configuration and fixtures for taskdesk.

Points the app at a throwaway SQLite file (aiosqlite) before anything reads
settings, and turns rate limiting off. DB-backed fixtures create the schema
per test and drop it afterwards.
"""

import os
from collections.abc import AsyncIterator
from pathlib import Path

os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{Path(__file__).resolve().parent / 'taskdesk_test.db'}"
)
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_AUTO_CREATE"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from taskdesk.application.dtos.user import UserResult  # noqa: E402
from taskdesk.core.config import get_settings  # noqa: E402
from taskdesk.domain.enums import Role  # noqa: E402
from taskdesk.infrastructure.persistence import database  # noqa: E402
from taskdesk.infrastructure.persistence.repositories import UserRepository  # noqa: E402

get_settings.cache_clear()

from taskdesk.main import app  # noqa: E402


@pytest.fixture
async def database_schema() -> AsyncIterator[None]:
    """Create all tables for one test, then drop them and dispose the engine."""
    await database.init_models()
    yield
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.drop_all)
    await database.dispose_engine()


@pytest.fixture
async def db_session(database_schema) -> AsyncIterator[AsyncSession]:
    """Session for repository tests. Rolls back after the test."""
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def users(database_schema) -> dict[str, UserResult]:
    """Committed users: two admins, two team members and a guest in institution 1,
    plus an admin in institution 2."""
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            repo = UserRepository(session)
            return {
                "admin": await repo.create_user(
                    "admin@thaiba.com", "Admin User", Role.ADMIN, 1
                ),
                "manager": await repo.create_user(
                    "manager@thaiba.com", "Manager", Role.ADMIN, 1
                ),
                "team": await repo.create_user("john@thaiba.com", "John Doe", Role.TEAM, 1),
                "team2": await repo.create_user(
                    "jane@thaiba.com", "Jane Smith", Role.TEAM, 1
                ),
                "guest": await repo.create_user(
                    "guest1@thaiba.com", "Guest One", Role.GUEST, 1
                ),
                "other_admin": await repo.create_user(
                    "admin@other.org", "Other Admin", Role.ADMIN, 2
                ),
            }


@pytest.fixture
async def client(database_schema) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
