"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for request-scoped session injection.

Dependencies: sqlalchemy, aksara.configs
System role: Database connection lifecycle management
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from aksara.boundary.db.base import Base
from aksara.configs.database import DatabaseSettings


def get_async_engine(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    PostgreSQL gets a sized connection pool with pre-ping to detect stale
    connections. In-memory SQLite shares one connection through a static
    pool so the database survives across sessions; file-backed SQLite keeps
    one connection per session.

    Args:
        db_config: Database settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    if db_config.is_sqlite_memory:
        return create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if db_config.is_sqlite:
        return create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
        )

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    Returns async_sessionmaker bound to engine with autoflush=False for
    explicit transaction control and predictable behavior.

    Args:
        engine: Async engine to bind

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create every table registered on Base.metadata if missing."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Opens a session from the factory created at application startup and
    closes it after the route completes. Uncommitted work is rolled back
    on close.

    Yields:
        AsyncSession: Async SQLAlchemy session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @router.get("/thoughts")
        async def list_thoughts(db: AsyncSession = Depends(get_async_db)):
            return await thought_crud.list_all(db)
    """
    SessionFactory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with SessionFactory() as session:
        yield session
