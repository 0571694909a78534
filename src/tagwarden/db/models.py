"""
Database models for tagwarden.

This module contains SQLAlchemy models for the tag catalog and for the
records that hold references into it (release profiles and auto-tagging
rules).
"""

from __future__ import annotations

import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in development and tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class Tag(Base):
    """Tag catalog entry referenced by other records."""

    __tablename__ = "tags"

    # Primary key, assigned by the database on insert
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Unique by convention only
    label: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class ReleaseProfile(Base):
    """Release profile with required/ignored terms, scoped by tags."""

    __tablename__ = "release_profiles"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Profile metadata
    name: Mapped[Optional[str]] = mapped_column(String(255))
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    required: Mapped[list[str]] = mapped_column(
        JSONType, default=list, nullable=False
    )  # JSON array of terms
    ignored: Mapped[list[str]] = mapped_column(
        JSONType, default=list, nullable=False
    )  # JSON array of terms

    # Tag references (JSON array of tag ids)
    tags: Mapped[list[int]] = mapped_column(JSONType, default=list, nullable=False)

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class AutoTag(Base):
    """Auto-tagging rule holding a heterogeneous list of specifications."""

    __tablename__ = "auto_tags"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Rule metadata
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    remove_tags_automatically: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    # JSON array of specification objects, discriminated by "implementation"
    specifications: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONType, default=list, nullable=False
    )

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


# Export all models
__all__ = [
    "Base",
    "JSONType",
    "Tag",
    "ReleaseProfile",
    "AutoTag",
]
