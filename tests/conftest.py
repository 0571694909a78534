"""
Pytest configuration and fixtures for tagwarden tests.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tagwarden.config.settings import Settings


@pytest.fixture
def mock_settings() -> Settings:
    """Settings pointing at an in-memory SQLite database."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        log_level="DEBUG",
        debug=False,
        development_mode=False,
    )


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock AsyncSession with async execute/flush/refresh/delete."""
    session = MagicMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    return session


def make_session_factory(session: MagicMock) -> MagicMock:
    """
    Build a mock ``async_sessionmaker`` yielding ``session``.

    Both ``factory()`` and ``factory.begin()`` work as async context
    managers, and neither suppresses exceptions.
    """
    factory = MagicMock()
    for context in (factory.return_value, factory.begin.return_value):
        context.__aenter__.return_value = session
        context.__aexit__.return_value = False
    return factory


@pytest.fixture
def mock_session_factory(mock_session: MagicMock) -> MagicMock:
    """Mock session factory bound to ``mock_session``."""
    return make_session_factory(mock_session)
