"""
Shared fixtures for integration tests.

Provides an engine, session factory and container backed by a real
database. Defaults to in-memory SQLite; set DATABASE_INTEGRATION_URL to run
against PostgreSQL.
"""

from __future__ import annotations

import os
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from tagwarden.config.settings import Settings
from tagwarden.container import Container
from tagwarden.db.models import Base


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Provide an engine with a fresh schema.

    Creates tables before and drops them after each test for isolation.
    """
    test_db_url = os.getenv(
        "DATABASE_INTEGRATION_URL", "sqlite+aiosqlite:///:memory:"
    )

    if test_db_url.startswith("sqlite"):
        # One shared connection so every session sees the same in-memory db
        engine = create_async_engine(
            test_db_url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(test_db_url, echo=False, pool_pre_ping=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def container(session_factory: async_sessionmaker[AsyncSession]) -> Container:
    """Container wired to the test database."""
    return Container(
        session_factory=session_factory,
        app_settings=Settings(tag_cleanup_reverify=False),
    )
