"""
Unused tag cleanup.

Deletes every tag that no registered ``TagReferenceSource`` references.
A pass reads all tag ids, unions the ids reported by each source, and
deletes the difference with a single statement, all inside one transaction.

The scan and the delete are not isolated from concurrent writers: a tag
attached to a record after the scan but before the delete can still be
removed. Enabling ``reverify`` re-reads the sources right before the delete,
which narrows that window without closing it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tagwarden.housekeeping.base import Housekeeper
from tagwarden.housekeeping.tag_sources import TagReferenceSource
from tagwarden.repositories.tag_repository import TagRepository

logger = logging.getLogger(__name__)


@dataclass
class TagCleanupResult:
    """Outcome of one unused-tag cleanup pass."""

    total_tags: int
    referenced_tag_ids: set[int] = field(default_factory=set)
    deleted_tag_ids: set[int] = field(default_factory=set)
    references_by_source: dict[str, int] = field(default_factory=dict)

    @property
    def deleted_count(self) -> int:
        """Number of tags removed by the pass."""
        return len(self.deleted_tag_ids)


class CleanupUnusedTags(Housekeeper):
    """
    Housekeeper that removes tags no longer referenced anywhere.

    Parameters
    ----------
    session_factory : async_sessionmaker[AsyncSession]
        Factory for the session each pass runs in.
    tag_repository : TagRepository
        The tag store under reconciliation.
    sources : Sequence[TagReferenceSource]
        Every consumer that may hold tag references. Queried in order.
    reverify : bool, optional
        Re-read the sources immediately before deleting (default False).
    """

    name = "cleanup_unused_tags"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        tag_repository: TagRepository,
        sources: Sequence[TagReferenceSource],
        *,
        reverify: bool = False,
    ) -> None:
        self._session_factory = session_factory
        self.tag_repository = tag_repository
        self._sources: tuple[TagReferenceSource, ...] = tuple(sources)
        self.reverify = reverify

    @property
    def sources(self) -> tuple[TagReferenceSource, ...]:
        """Registered tag reference sources, in query order."""
        return self._sources

    async def clean(self) -> TagCleanupResult:
        """
        Run one cleanup pass.

        Returns
        -------
        TagCleanupResult
            What was scanned and what was deleted.

        Raises
        ------
        RepositoryError
            If any read or the delete fails. The transaction is rolled back
            and no tag is deleted.
        """
        async with self._session_factory.begin() as session:
            return await self._clean(session)

    async def find_unused_tag_ids(self) -> set[int]:
        """Return the ids a cleanup pass would delete right now, without deleting."""
        async with self._session_factory() as session:
            all_ids = await self.tag_repository.get_all_ids(session)
            referenced, _ = await self._collect_referenced_ids(session)
        return all_ids - referenced

    async def _clean(self, session: AsyncSession) -> TagCleanupResult:
        all_ids = await self.tag_repository.get_all_ids(session)
        referenced, per_source = await self._collect_referenced_ids(session)
        result = TagCleanupResult(
            total_tags=len(all_ids),
            referenced_tag_ids=referenced,
            references_by_source=per_source,
        )

        unused = all_ids - referenced
        if unused and self.reverify:
            rescanned, _ = await self._collect_referenced_ids(session)
            late_references = unused & rescanned
            if late_references:
                logger.info(
                    "Keeping %d tags referenced since the first scan",
                    len(late_references),
                )
                unused -= late_references
                result.referenced_tag_ids |= late_references

        if not unused:
            logger.debug("No unused tags among %d tags", len(all_ids))
            return result

        logger.info("Removing %d unused tags", len(unused))
        await self.tag_repository.delete_many(session, unused)
        result.deleted_tag_ids = unused
        return result

    async def _collect_referenced_ids(
        self, session: AsyncSession
    ) -> tuple[set[int], dict[str, int]]:
        referenced: set[int] = set()
        per_source: dict[str, int] = {}
        for source in self._sources:
            tag_ids = await source.get_referenced_tag_ids(session)
            per_source[source.name] = len(tag_ids)
            referenced |= tag_ids
        return referenced, per_source
