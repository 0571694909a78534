"""
Release profile repository.

Handles CRUD operations for release profiles and exposes the tag lists they
hold for tag housekeeping.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tagwarden.db.models import ReleaseProfile as ReleaseProfileDB
from tagwarden.models.release_profile import (
    ReleaseProfileCreate,
    ReleaseProfileUpdate,
)
from tagwarden.repositories.base import BaseSQLAlchemyRepository


class ReleaseProfileRepository(
    BaseSQLAlchemyRepository[
        ReleaseProfileDB,
        ReleaseProfileCreate,
        ReleaseProfileUpdate,
    ]
):
    """Repository for release profile CRUD operations."""

    def __init__(self) -> None:
        """Initialize repository with ReleaseProfile model."""
        super().__init__(ReleaseProfileDB)

    async def get_tag_lists(self, session: AsyncSession) -> list[list[Any]]:
        """
        Read the ``tags`` array of every release profile.

        Only the tag column is selected. Elements are returned as stored; a
        NULL column comes back as an empty list and a lone scalar as a
        one-element list.

        Parameters
        ----------
        session : AsyncSession
            Database session.

        Returns
        -------
        list[list[Any]]
            One tag id list per release profile, in no particular order.

        Raises
        ------
        RepositoryError
            If the underlying query fails.
        """
        result = await self._execute(
            session,
            select(ReleaseProfileDB.tags),
            operation="select",
            action="read release profile tags",
        )
        return [
            tags if isinstance(tags, list) else ([] if tags is None else [tags])
            for tags in result.scalars().all()
        ]
