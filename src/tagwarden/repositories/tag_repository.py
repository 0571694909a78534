"""
Tag repository for the tag catalog.

Handles CRUD operations for tags plus the two set-based operations that tag
housekeeping relies on: reading every identifier and deleting a batch of
identifiers in a single statement.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tagwarden.db.models import Tag as TagDB
from tagwarden.models.tag import TagCreate, TagUpdate
from tagwarden.repositories.base import BaseSQLAlchemyRepository

logger = logging.getLogger(__name__)


class TagRepository(BaseSQLAlchemyRepository[TagDB, TagCreate, TagUpdate]):
    """Repository for tag CRUD and bulk housekeeping operations."""

    def __init__(self) -> None:
        """Initialize repository with Tag model."""
        super().__init__(TagDB)

    async def get_by_ids(
        self, session: AsyncSession, ids: Iterable[int]
    ) -> list[TagDB]:
        """
        Get the tags whose identifiers are in ``ids``, ordered by id.

        Parameters
        ----------
        session : AsyncSession
            Database session.
        ids : Iterable[int]
            Tag identifiers to look up. Unknown ids are ignored.

        Returns
        -------
        list[TagDB]
            Matching tags ordered by ascending id.
        """
        id_list = sorted(set(ids))
        if not id_list:
            return []
        result = await self._execute(
            session,
            select(TagDB).where(TagDB.id.in_(id_list)).order_by(TagDB.id),
            operation="select",
            action=f"read {len(id_list)} tags",
        )
        return list(result.scalars().all())

    async def get_all_ids(self, session: AsyncSession) -> set[int]:
        """
        Read the identifier of every tag in the catalog.

        Parameters
        ----------
        session : AsyncSession
            Database session.

        Returns
        -------
        set[int]
            All tag identifiers currently stored.

        Raises
        ------
        RepositoryError
            If the underlying query fails.
        """
        result = await self._execute(
            session,
            select(TagDB.id),
            operation="select",
            action="read tag identifiers",
        )
        return set(result.scalars().all())

    async def delete_many(self, session: AsyncSession, ids: Iterable[int]) -> int:
        """
        Delete every tag whose identifier is in ``ids`` with one statement.

        Identifiers that are not present are ignored, so repeating a delete
        is harmless. An empty ``ids`` issues no statement.

        Parameters
        ----------
        session : AsyncSession
            Database session. The caller owns the transaction.
        ids : Iterable[int]
            Tag identifiers to delete.

        Returns
        -------
        int
            Number of rows removed.

        Raises
        ------
        RepositoryError
            If the delete statement fails.
        """
        id_list = sorted(set(ids))
        if not id_list:
            return 0

        result = await self._execute(
            session,
            delete(TagDB)
            .where(TagDB.id.in_(id_list))
            .execution_options(synchronize_session="fetch"),
            operation="delete",
            action=f"delete {len(id_list)} tags",
        )

        deleted = result.rowcount or 0
        logger.debug("Deleted %d of %d requested tags", deleted, len(id_list))
        return deleted
