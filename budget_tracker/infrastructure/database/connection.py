"""
Database connection management.

Provides async SQLAlchemy engine and session management.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ...config import get_settings
from .models import Base

logger = logging.getLogger(__name__)


def enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """
    Let SQLAlchemy own SQLite transactions.

    The sqlite3 driver begins transactions lazily on its own, which breaks
    SAVEPOINT handling. Turning that off and emitting BEGIN on every
    SQLAlchemy transaction makes begin_nested() roll back correctly.
    """
    @event.listens_for(engine.sync_engine, "connect")
    def disable_driver_transactions(dbapi_conn, connection_record):
        dbapi_conn.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


class DatabaseManager:
    """
    Manages database connections and sessions.

    Implements the connection pool and provides async session factory.
    """

    _engine: Optional[AsyncEngine] = None
    _session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def get_engine(cls) -> AsyncEngine:
        """Get or create the async database engine."""
        if cls._engine is None:
            settings = get_settings()
            options: Dict[str, Any] = {'echo': settings.database.echo_sql}

            if settings.database.is_sqlite:
                # One shared connection so in-memory databases survive
                options['poolclass'] = StaticPool
            else:
                options.update(
                    pool_size=settings.database.pool_size,
                    max_overflow=settings.database.max_overflow,
                    pool_pre_ping=True,  # Verify connections before use
                    pool_recycle=3600,   # Recycle connections every hour
                )

            cls._engine = create_async_engine(settings.database.url, **options)
            if settings.database.is_sqlite:
                enable_sqlite_savepoints(cls._engine)
            logger.info(f"Created database engine for {cls._engine.url.render_as_string(hide_password=True)}")

        return cls._engine

    @classmethod
    def get_session_factory(cls) -> async_sessionmaker[AsyncSession]:
        """Get or create the async session factory."""
        if cls._session_factory is None:
            cls._session_factory = async_sessionmaker(
                bind=cls.get_engine(),
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return cls._session_factory

    @classmethod
    async def close(cls) -> None:
        """Close the database engine and all connections."""
        if cls._engine is not None:
            await cls._engine.dispose()
            cls._engine = None
            cls._session_factory = None


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a transactional scope around a series of operations.

    Usage:
        async with get_db_session() as session:
            repository = SQLAlchemyBudgetRepository(session)
            await repository.insert(budget)
    """
    session_factory = DatabaseManager.get_session_factory()
    session = session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def init_db() -> None:
    """
    Initialize database tables.

    Should be called on application startup.
    """
    engine = DatabaseManager.get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def drop_db() -> None:
    """
    Drop all database tables.

    WARNING: This is destructive. Use only in development/testing.
    """
    if get_settings().is_production:
        raise RuntimeError("Cannot drop database in production")

    engine = DatabaseManager.get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("Database tables dropped")


async def health_check() -> bool:
    """
    Check database connectivity.

    Returns True if database is accessible.
    """
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Database health check failed: {e}")
        return False


def get_unit_of_work():
    """
    Get a Unit of Work instance for transaction management.

    Usage:
        async with get_unit_of_work() as uow:
            team = await uow.teams.find_by_id(team_id)
            # ... do work ...
            await uow.commit()
    """
    from .unit_of_work import SQLAlchemyUnitOfWork
    return SQLAlchemyUnitOfWork(DatabaseManager.get_session_factory())
