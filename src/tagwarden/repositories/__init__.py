"""
Repository layer for data access patterns.

This module provides repository interfaces and implementations following
the Repository pattern for clean separation of domain logic and data persistence.
"""

from .auto_tag_repository import AutoTagRepository
from .base import BaseSQLAlchemyRepository
from .release_profile_repository import ReleaseProfileRepository
from .tag_repository import TagRepository

__all__ = [
    "BaseSQLAlchemyRepository",
    "TagRepository",
    "ReleaseProfileRepository",
    "AutoTagRepository",
]
