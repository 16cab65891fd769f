"""
Shared pytest fixtures for budget tracker tests.

Provides fixtures for:
- Database sessions (async SQLAlchemy on in-memory SQLite)
- Mock sessions for repository unit tests
- Common ids and audit actors
"""
import os
from datetime import datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock

# Test environment configuration
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DB_DSN", "sqlite+aiosqlite://")

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from budget_tracker.domain.value_objects import BudgetId, TeamId, TeamMemberId  # noqa: E402
from budget_tracker.infrastructure.database.connection import enable_sqlite_savepoints  # noqa: E402
from budget_tracker.infrastructure.database.models import Base  # noqa: E402


TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def mock_session():
    """
    Mock database session for unit tests.

    Returns an AsyncMock that can be configured per test.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    session.expunge = MagicMock()

    # begin_nested() is used as an async context manager
    savepoint = MagicMock()
    savepoint.__aenter__.return_value = savepoint
    savepoint.__aexit__.return_value = False
    session.begin_nested = MagicMock(return_value=savepoint)
    return session


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    enable_sqlite_savepoints(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Real database session for integration tests."""
    async with session_factory() as session:
        yield session


# ============================================================================
# Domain Fixtures
# ============================================================================

@pytest.fixture
def created_by():
    return "tester"


@pytest.fixture
def created_at():
    return datetime(2023, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def team_id():
    return TeamId(str(uuid4()))


@pytest.fixture
def budget_id():
    return BudgetId(str(uuid4()))


@pytest.fixture
def team_member_id():
    return TeamMemberId(str(uuid4()))
