"""
Tag models for the tag catalog.

Defines Pydantic models for tags, the labeled catalog entries that release
profiles and auto-tagging rules refer to by identifier.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TagBase(BaseModel):
    """Base model for tag data."""

    label: str = Field(
        ..., min_length=1, max_length=255, description="Display label of the tag"
    )

    @field_validator("label")
    @classmethod
    def strip_label(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank labels."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("label must not be blank")
        return stripped

    model_config = ConfigDict(
        validate_assignment=True,
    )


class TagCreate(TagBase):
    """Model for creating tags."""

    pass


class TagUpdate(BaseModel):
    """Model for updating tags (PATCH-style, all fields optional)."""

    label: Optional[str] = Field(default=None, min_length=1, max_length=255)

    model_config = ConfigDict(
        validate_assignment=True,
    )


class Tag(TagBase):
    """Full tag model with timestamps and identifier."""

    id: int = Field(..., gt=0, description="Tag identifier assigned by the store")
    created_at: datetime = Field(..., description="When the record was created")
    updated_at: datetime = Field(..., description="When the record was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )
