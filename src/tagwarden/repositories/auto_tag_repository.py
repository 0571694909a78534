"""
Auto-tag repository.

Handles CRUD operations for auto-tagging rules and exposes their raw
specification lists for tag housekeeping. Specifications are returned as
stored (JSON objects) so that one malformed element cannot make the whole
read fail.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tagwarden.db.models import AutoTag as AutoTagDB
from tagwarden.models.auto_tag import AutoTagCreate, AutoTagUpdate
from tagwarden.repositories.base import BaseSQLAlchemyRepository


class AutoTagRepository(
    BaseSQLAlchemyRepository[AutoTagDB, AutoTagCreate, AutoTagUpdate]
):
    """Repository for auto-tag CRUD operations."""

    def __init__(self) -> None:
        """Initialize repository with AutoTag model."""
        super().__init__(AutoTagDB)

    async def get_specification_lists(
        self, session: AsyncSession
    ) -> list[tuple[int, list[Any]]]:
        """
        Read the raw specification list of every auto-tag.

        Parameters
        ----------
        session : AsyncSession
            Database session.

        Returns
        -------
        list[tuple[int, list[Any]]]
            ``(auto_tag_id, specifications)`` pairs ordered by id. A NULL
            column comes back as an empty list.

        Raises
        ------
        RepositoryError
            If the underlying query fails.
        """
        result = await self._execute(
            session,
            select(AutoTagDB.id, AutoTagDB.specifications).order_by(AutoTagDB.id),
            operation="select",
            action="read auto-tag specifications",
        )
        return [
            (auto_tag_id, list(specifications or []))
            for auto_tag_id, specifications in result.all()
        ]
