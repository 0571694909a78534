"""
Dependency Injection Container for tagwarden.

This module provides a centralized container for managing dependencies across
the application. It implements a lightweight dependency injection pattern that:

- Provides factory methods for creating repository instances (transient)
- Holds the single registration list of tag reference sources
- Manages the singleton housekeeping service via a cached property
- Enables easy mock injection for testing

Usage
-----
Basic repository access:

    >>> from tagwarden.container import container
    >>> tag_repo = container.create_tag_repository()

Running housekeeping:

    >>> report = await container.housekeeping_service.run()

Adding a tag consumer
---------------------
Implement ``TagReferenceSource`` and append an instance in
``create_tag_reference_sources()``. Nothing else changes.
"""

from __future__ import annotations

from functools import cached_property
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tagwarden.config.settings import Settings, settings
from tagwarden.housekeeping import (
    AutoTaggingTagSource,
    CleanupUnusedTags,
    Housekeeper,
    HousekeepingService,
    ReleaseProfileTagSource,
    TagReferenceSource,
)
from tagwarden.repositories import (
    AutoTagRepository,
    ReleaseProfileRepository,
    TagRepository,
)


class Container:
    """
    Dependency injection container for tagwarden.

    Parameters
    ----------
    session_factory : Optional[async_sessionmaker[AsyncSession]]
        Session factory handed to housekeepers. Defaults to the global
        database manager's factory, resolved on first use.
    app_settings : Optional[Settings]
        Settings to read housekeeping options from. Defaults to the global
        settings instance.

    Examples
    --------
    Creating repositories (transient - new instance each call):

        >>> container = Container()
        >>> repo1 = container.create_tag_repository()
        >>> repo2 = container.create_tag_repository()
        >>> repo1 is repo2
        False
    """

    def __init__(
        self,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        app_settings: Optional[Settings] = None,
    ) -> None:
        self._session_factory = session_factory
        self._settings = app_settings or settings

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Session factory used by housekeepers."""
        if self._session_factory is None:
            from tagwarden.config.database import db_manager

            self._session_factory = db_manager.get_session_factory()
        return self._session_factory

    # -------------------------------------------------------------------------
    # Repository Factory Methods (Transient - new instance per call)
    # -------------------------------------------------------------------------

    def create_tag_repository(self) -> TagRepository:
        """Create a new TagRepository instance."""
        return TagRepository()

    def create_release_profile_repository(self) -> ReleaseProfileRepository:
        """Create a new ReleaseProfileRepository instance."""
        return ReleaseProfileRepository()

    def create_auto_tag_repository(self) -> AutoTagRepository:
        """Create a new AutoTagRepository instance."""
        return AutoTagRepository()

    # -------------------------------------------------------------------------
    # Housekeeping Factory Methods (Transient - new instance per call)
    # -------------------------------------------------------------------------

    def create_tag_reference_sources(self) -> list[TagReferenceSource]:
        """
        Create every registered tag reference source.

        This is the registration list for tag consumers. Tag cleanup keeps a
        tag only if one of these sources reports it.

        Returns
        -------
        list[TagReferenceSource]
            Sources in query order.
        """
        return [
            ReleaseProfileTagSource(self.create_release_profile_repository()),
            AutoTaggingTagSource(self.create_auto_tag_repository()),
        ]

    def create_cleanup_unused_tags(self) -> CleanupUnusedTags:
        """
        Create a new CleanupUnusedTags housekeeper with wired dependencies.

        Returns
        -------
        CleanupUnusedTags
            Housekeeper over every registered tag reference source.
        """
        return CleanupUnusedTags(
            session_factory=self.session_factory,
            tag_repository=self.create_tag_repository(),
            sources=self.create_tag_reference_sources(),
            reverify=self._settings.tag_cleanup_reverify,
        )

    def create_housekeepers(self) -> list[Housekeeper]:
        """Create every housekeeper, in run order."""
        return [self.create_cleanup_unused_tags()]

    # -------------------------------------------------------------------------
    # Singleton Service Properties (Cached - same instance on repeated access)
    # -------------------------------------------------------------------------

    @cached_property
    def housekeeping_service(self) -> HousekeepingService:
        """
        Get the singleton HousekeepingService instance.

        Examples
        --------
        >>> service1 = container.housekeeping_service
        >>> service2 = container.housekeeping_service
        >>> service1 is service2
        True
        """
        return HousekeepingService(self.create_housekeepers())

    # -------------------------------------------------------------------------
    # Testing Support
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """
        Reset the container by clearing all cached singleton instances.

        Tests use this to drop injected mocks and restore a clean state.
        """
        self.__dict__.pop("housekeeping_service", None)


# Global container instance
container = Container()
