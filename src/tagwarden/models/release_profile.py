"""
Release profile models.

Release profiles scope required and ignored release terms to the artists
carrying one of their tags. Only the ``tags`` field matters to tag
housekeeping; the term lists are carried as opaque strings.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


TagId = Annotated[int, Field(gt=0)]

# Validates one stored element of a profile's tags array
tag_id_adapter: TypeAdapter[int] = TypeAdapter(TagId)


def _dedupe_tag_ids(tag_ids: list[int]) -> list[int]:
    """Drop repeated tag ids while keeping first-seen order."""
    return list(dict.fromkeys(tag_ids))


class ReleaseProfileBase(BaseModel):
    """Base model for release profile data."""

    name: Optional[str] = Field(
        default=None, max_length=255, description="Optional profile name"
    )
    enabled: bool = Field(default=True, description="Whether the profile is active")
    required: list[str] = Field(
        default_factory=list, description="Terms a release must contain"
    )
    ignored: list[str] = Field(
        default_factory=list, description="Terms that reject a release"
    )
    tags: list[int] = Field(
        default_factory=list, description="Identifiers of tags this profile applies to"
    )

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: list[int]) -> list[int]:
        """Treat the tag list as an ordered set."""
        return _dedupe_tag_ids(v)

    model_config = ConfigDict(
        validate_assignment=True,
    )


class ReleaseProfileCreate(ReleaseProfileBase):
    """Model for creating release profiles."""

    pass


class ReleaseProfileUpdate(BaseModel):
    """Model for updating release profiles (PATCH-style, all fields optional)."""

    name: Optional[str] = Field(default=None, max_length=255)
    enabled: Optional[bool] = None
    required: Optional[list[str]] = None
    ignored: Optional[list[str]] = None
    tags: Optional[list[int]] = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: Optional[list[int]]) -> Optional[list[int]]:
        """Treat the tag list as an ordered set."""
        if v is None:
            return v
        return _dedupe_tag_ids(v)

    model_config = ConfigDict(
        validate_assignment=True,
    )


class ReleaseProfile(ReleaseProfileBase):
    """Full release profile model with timestamps and identifier."""

    id: int = Field(..., gt=0, description="Release profile identifier")
    created_at: datetime = Field(..., description="When the record was created")
    updated_at: datetime = Field(..., description="When the record was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )
