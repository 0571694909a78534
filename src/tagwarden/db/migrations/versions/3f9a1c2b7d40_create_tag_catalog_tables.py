"""create_tag_catalog_tables

Revision ID: 3f9a1c2b7d40
Revises:
Create Date: 2026-10-19 12:00:00.000000

Creates the tag catalog and the two tables that reference it.

New Tables:
1. tags - Tag catalog (integer id, label)
2. release_profiles - Required/ignored terms scoped by a JSON array of tag ids
3. auto_tags - Auto-tagging rules with a JSON array of specifications
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision = "3f9a1c2b7d40"
down_revision = None
branch_labels = None
depends_on = None

JSON_TYPE = sa.JSON().with_variant(JSONB(), "postgresql")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=True,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=True,
        ),
    ]


def upgrade() -> None:
    """Create tags, release_profiles and auto_tags."""
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("label", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tags_label", "tags", ["label"])

    op.create_table(
        "release_profiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("enabled", sa.Boolean(), nullable=False),
        sa.Column("required", JSON_TYPE, nullable=False),
        sa.Column("ignored", JSON_TYPE, nullable=False),
        sa.Column("tags", JSON_TYPE, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "auto_tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("remove_tags_automatically", sa.Boolean(), nullable=False),
        sa.Column("specifications", JSON_TYPE, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the tag catalog tables."""
    op.drop_table("auto_tags")
    op.drop_table("release_profiles")
    op.drop_index("ix_tags_label", table_name="tags")
    op.drop_table("tags")
