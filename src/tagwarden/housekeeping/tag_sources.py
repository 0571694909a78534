"""
Tag reference sources.

A tag reference source reports which tag identifiers its records currently
point at. Tag cleanup unions the answers of every registered source and
keeps exactly those tags; adding a consumer means writing another
``TagReferenceSource`` and registering it, nothing else.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from tagwarden.housekeeping.specification_resolver import resolve_tag_ids
from tagwarden.models.release_profile import tag_id_adapter
from tagwarden.repositories.auto_tag_repository import AutoTagRepository
from tagwarden.repositories.release_profile_repository import (
    ReleaseProfileRepository,
)

logger = logging.getLogger(__name__)


class TagReferenceSource(ABC):
    """Something whose records hold tag identifiers."""

    #: Short identifier used in logs and cleanup results.
    name: str = ""

    @abstractmethod
    async def get_referenced_tag_ids(self, session: AsyncSession) -> set[int]:
        """Return every tag id currently referenced by this source's records."""
        pass


class ReleaseProfileTagSource(TagReferenceSource):
    """Tags scoped by release profiles."""

    name = "release_profiles"

    def __init__(self, release_profile_repository: ReleaseProfileRepository) -> None:
        self.release_profile_repository = release_profile_repository

    async def get_referenced_tag_ids(self, session: AsyncSession) -> set[int]:
        tag_lists = await self.release_profile_repository.get_tag_lists(session)
        tag_ids: set[int] = set()
        skipped = 0
        for tags in tag_lists:
            for element in tags:
                try:
                    tag_ids.add(tag_id_adapter.validate_python(element))
                except ValidationError:
                    skipped += 1
        if skipped:
            logger.warning(
                "Skipped %d release profile tag entries that are not tag ids",
                skipped,
            )
        logger.debug(
            "Release profiles reference %d tags across %d profiles",
            len(tag_ids),
            len(tag_lists),
        )
        return tag_ids


class AutoTaggingTagSource(TagReferenceSource):
    """Tags matched by ``TagSpecification`` entries of auto-tagging rules."""

    name = "auto_tagging"

    def __init__(self, auto_tag_repository: AutoTagRepository) -> None:
        self.auto_tag_repository = auto_tag_repository

    async def get_referenced_tag_ids(self, session: AsyncSession) -> set[int]:
        rules = await self.auto_tag_repository.get_specification_lists(session)
        tag_ids: set[int] = set()
        for auto_tag_id, specifications in rules:
            tag_ids |= resolve_tag_ids(specifications, auto_tag_id=auto_tag_id)
        logger.debug(
            "Auto-tagging specifications reference %d tags across %d rules",
            len(tag_ids),
            len(rules),
        )
        return tag_ids
