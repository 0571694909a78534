"""
Tests for tag Pydantic models.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tagwarden.models.tag import Tag, TagCreate, TagUpdate
from tests.factories.tag_factory import TagCreateFactory, create_tag_db


class TestTagCreate:
    """Tests for TagCreate validation."""

    def test_factory_builds_valid_model(self) -> None:
        tag = TagCreateFactory.build()

        assert isinstance(tag, TagCreate)
        assert tag.label.startswith("tag-")

    def test_label_is_stripped(self) -> None:
        assert TagCreate(label="  live  ").label == "live"

    @pytest.mark.parametrize("label", ["", "   ", "x" * 256])
    def test_invalid_labels_rejected(self, label: str) -> None:
        with pytest.raises(ValidationError):
            TagCreate(label=label)

    def test_assignment_is_validated(self) -> None:
        tag = TagCreate(label="ok")

        with pytest.raises(ValidationError):
            tag.label = "  "


class TestTagUpdate:
    """Tests for TagUpdate."""

    def test_all_fields_optional(self) -> None:
        update = TagUpdate()

        assert update.model_dump(exclude_unset=True) == {}


class TestTag:
    """Tests for the full Tag model."""

    def test_from_orm_instance(self) -> None:
        db_tag = create_tag_db(id=8, label="remaster")

        tag = Tag.model_validate(db_tag)

        assert tag.id == 8
        assert tag.label == "remaster"
        assert tag.created_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_id_must_be_positive(self) -> None:
        now = datetime.now(timezone.utc)

        with pytest.raises(ValidationError):
            Tag(id=0, label="x", created_at=now, updated_at=now)
