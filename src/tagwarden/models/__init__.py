"""
Pydantic models for tagwarden.

Validated representations of tags, release profiles and auto-tagging
rules, used at the edges of the repository layer.
"""

from __future__ import annotations

from .auto_tag import (
    AutoTag,
    AutoTagBase,
    AutoTagCreate,
    AutoTaggingSpecification,
    AutoTaggingSpecificationBase,
    AutoTagUpdate,
    GenreSpecification,
    MonitoredSpecification,
    RootFolderSpecification,
    StatusSpecification,
    TagReference,
    TagSpecification,
    specification_adapter,
)
from .enums import ArtistStatus
from .release_profile import (
    ReleaseProfile,
    ReleaseProfileBase,
    ReleaseProfileCreate,
    ReleaseProfileUpdate,
    tag_id_adapter,
)
from .tag import Tag, TagBase, TagCreate, TagUpdate

__all__ = [
    # Tags
    "Tag",
    "TagBase",
    "TagCreate",
    "TagUpdate",
    # Release profiles
    "ReleaseProfile",
    "ReleaseProfileBase",
    "ReleaseProfileCreate",
    "ReleaseProfileUpdate",
    "tag_id_adapter",
    # Auto-tagging
    "AutoTag",
    "AutoTagBase",
    "AutoTagCreate",
    "AutoTagUpdate",
    "AutoTaggingSpecification",
    "AutoTaggingSpecificationBase",
    "TagReference",
    "TagSpecification",
    "GenreSpecification",
    "RootFolderSpecification",
    "MonitoredSpecification",
    "StatusSpecification",
    "specification_adapter",
    # Enums
    "ArtistStatus",
]
