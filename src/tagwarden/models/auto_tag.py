"""
Auto-tagging models.

An auto-tag is a rule that applies tags to artists matching its
specifications. Specifications form a closed set of variants discriminated
by the ``implementation`` field; every variant exposes the same
``referenced_tag_id()`` capability, and only ``TagSpecification`` carries a
tag identifier.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter

from .enums import ArtistStatus


class AutoTaggingSpecificationBase(BaseModel):
    """Fields shared by every auto-tagging specification variant."""

    name: str = Field(default="", max_length=255, description="Display name")
    negate: bool = Field(default=False, description="Invert the match result")
    required: bool = Field(
        default=False, description="Whether the rule fails when this does not match"
    )

    model_config = ConfigDict(
        validate_assignment=True,
    )

    def referenced_tag_id(self) -> Optional[int]:
        """Return the tag identifier this specification refers to, if any."""
        return None


class TagSpecification(AutoTaggingSpecificationBase):
    """Matches artists that already carry a given tag."""

    implementation: Literal["TagSpecification"] = "TagSpecification"
    value: int = Field(..., gt=0, strict=True, description="Referenced tag id")

    def referenced_tag_id(self) -> Optional[int]:
        return self.value


class TagReference(BaseModel):
    """
    The tag-carrying part of a stored ``TagSpecification``.

    Reads only ``implementation`` and ``value`` so that a bad display field
    never hides the tag id from housekeeping.
    """

    implementation: Literal["TagSpecification"]
    value: StrictInt = Field(..., gt=0)

    model_config = ConfigDict(extra="ignore")


class GenreSpecification(AutoTaggingSpecificationBase):
    """Matches artists by genre name."""

    implementation: Literal["GenreSpecification"] = "GenreSpecification"
    value: list[str] = Field(default_factory=list, description="Genre names")


class RootFolderSpecification(AutoTaggingSpecificationBase):
    """Matches artists stored under a root folder."""

    implementation: Literal["RootFolderSpecification"] = "RootFolderSpecification"
    value: str = Field(..., min_length=1, description="Root folder path")


class MonitoredSpecification(AutoTaggingSpecificationBase):
    """Matches monitored artists."""

    implementation: Literal["MonitoredSpecification"] = "MonitoredSpecification"


class StatusSpecification(AutoTaggingSpecificationBase):
    """Matches artists by lifecycle status."""

    implementation: Literal["StatusSpecification"] = "StatusSpecification"
    value: ArtistStatus = Field(..., description="Artist status to match")


AutoTaggingSpecification = Annotated[
    Union[
        TagSpecification,
        GenreSpecification,
        RootFolderSpecification,
        MonitoredSpecification,
        StatusSpecification,
    ],
    Field(discriminator="implementation"),
]

specification_adapter: TypeAdapter[AutoTaggingSpecification] = TypeAdapter(
    AutoTaggingSpecification
)


class AutoTagBase(BaseModel):
    """Base model for auto-tag data."""

    name: str = Field(..., min_length=1, max_length=255, description="Rule name")
    remove_tags_automatically: bool = Field(
        default=False,
        description="Remove the applied tags when the rule stops matching",
    )
    specifications: list[AutoTaggingSpecification] = Field(
        default_factory=list, description="Ordered, heterogeneous specification list"
    )

    model_config = ConfigDict(
        validate_assignment=True,
    )


class AutoTagCreate(AutoTagBase):
    """Model for creating auto-tags."""

    pass


class AutoTagUpdate(BaseModel):
    """Model for updating auto-tags (PATCH-style, all fields optional)."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    remove_tags_automatically: Optional[bool] = None
    specifications: Optional[list[AutoTaggingSpecification]] = None

    model_config = ConfigDict(
        validate_assignment=True,
    )


class AutoTag(AutoTagBase):
    """Full auto-tag model with timestamps and identifier."""

    id: int = Field(..., gt=0, description="Auto-tag identifier")
    created_at: datetime = Field(..., description="When the record was created")
    updated_at: datetime = Field(..., description="When the record was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )
