"""
Housekeeping tasks for tagwarden.

Periodic maintenance run by the housekeeping service, most notably the
removal of tags that nothing references any more.
"""

from __future__ import annotations

from .base import Housekeeper
from .cleanup_unused_tags import CleanupUnusedTags, TagCleanupResult
from .service import HousekeepingReport, HousekeepingService, HousekeepingTaskOutcome
from .tag_sources import (
    AutoTaggingTagSource,
    ReleaseProfileTagSource,
    TagReferenceSource,
)

__all__ = [
    "Housekeeper",
    "CleanupUnusedTags",
    "TagCleanupResult",
    "HousekeepingService",
    "HousekeepingReport",
    "HousekeepingTaskOutcome",
    "TagReferenceSource",
    "ReleaseProfileTagSource",
    "AutoTaggingTagSource",
]
