"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite sessions, application settings, live app client
Dependencies: pytest, pytest-asyncio, sqlalchemy, fastapi
System role: Test infrastructure and fixture management
"""

import pytest
import pytest_asyncio


@pytest_asyncio.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from aksara.boundary.db.base import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_settings():
    """
    Settings pointing the app at a private in-memory SQLite database.

    Returns:
        Settings: Application settings for tests
    """
    from aksara.configs.database import DatabaseSettings
    from aksara.configs.settings import Settings
    from aksara.configs.store import StoreSettings

    return Settings(
        database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:"),
        store=StoreSettings(default_page_size=20, create_tables=True),
    )


@pytest.fixture
def app(test_settings):
    """FastAPI application built with test settings (lifespan not started)."""
    from aksara.main import create_app

    return create_app(test_settings)


@pytest.fixture
def live_client(app):
    """
    TestClient with the lifespan running against in-memory SQLite.

    Yields:
        TestClient: Client whose requests hit the real store
    """
    from fastapi.testclient import TestClient

    with TestClient(app) as client:
        yield client
