"""
Tests for auto-tag and specification models.

Focuses on the discriminated specification union: each ``implementation``
value selects its variant, and only tag specifications report a tag id.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tagwarden.db.models import AutoTag as AutoTagDB
from tagwarden.models.auto_tag import (
    AutoTag,
    AutoTagCreate,
    AutoTagUpdate,
    GenreSpecification,
    MonitoredSpecification,
    RootFolderSpecification,
    StatusSpecification,
    TagSpecification,
    specification_adapter,
)
from tests.factories.auto_tag_factory import (
    TagSpecificationFactory,
    create_auto_tag,
)


class TestSpecificationUnion:
    """Tests for discriminated parsing of specifications."""

    @pytest.mark.parametrize(
        ("raw", "expected_type"),
        [
            ({"implementation": "TagSpecification", "value": 1}, TagSpecification),
            (
                {"implementation": "GenreSpecification", "value": ["blues"]},
                GenreSpecification,
            ),
            (
                {"implementation": "RootFolderSpecification", "value": "/data"},
                RootFolderSpecification,
            ),
            ({"implementation": "MonitoredSpecification"}, MonitoredSpecification),
            (
                {"implementation": "StatusSpecification", "value": "continuing"},
                StatusSpecification,
            ),
        ],
    )
    def test_implementation_selects_variant(
        self, raw: dict[str, object], expected_type: type
    ) -> None:
        assert isinstance(specification_adapter.validate_python(raw), expected_type)

    def test_unknown_implementation_rejected(self) -> None:
        with pytest.raises(ValidationError):
            specification_adapter.validate_python(
                {"implementation": "YearSpecification", "value": 1999}
            )

    def test_tag_value_is_strictly_an_integer(self) -> None:
        with pytest.raises(ValidationError):
            TagSpecification(value="3")  # type: ignore[arg-type]

    def test_only_tag_specification_references_a_tag(self) -> None:
        assert TagSpecificationFactory.build(value=4).referenced_tag_id() == 4
        assert GenreSpecification(value=["pop"]).referenced_tag_id() is None
        assert MonitoredSpecification().referenced_tag_id() is None

    def test_shared_fields_default(self) -> None:
        spec = MonitoredSpecification()

        assert spec.name == ""
        assert spec.negate is False
        assert spec.required is False


class TestAutoTagCreate:
    """Tests for AutoTagCreate."""

    def test_mixed_specifications_from_dicts(self) -> None:
        auto_tag = AutoTagCreate(
            name="Ended jazz",
            specifications=[
                {"implementation": "GenreSpecification", "value": ["jazz"]},
                {"implementation": "TagSpecification", "value": 2},
            ],  # type: ignore[list-item]
        )

        assert isinstance(auto_tag.specifications[0], GenreSpecification)
        assert isinstance(auto_tag.specifications[1], TagSpecification)

    def test_dump_keeps_implementation_discriminator(self) -> None:
        auto_tag = create_auto_tag(
            specifications=[TagSpecificationFactory.build(value=6)]
        )

        dumped = auto_tag.model_dump()

        assert dumped["specifications"][0]["implementation"] == "TagSpecification"
        assert dumped["specifications"][0]["value"] == 6

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            AutoTagCreate(name="")

    def test_update_fields_optional(self) -> None:
        assert AutoTagUpdate().model_dump(exclude_unset=True) == {}


class TestAutoTag:
    """Tests for the full AutoTag model."""

    def test_from_orm_instance(self) -> None:
        now = datetime(2024, 1, 15, tzinfo=timezone.utc)
        db_obj = AutoTagDB(
            id=3,
            name="Monitored",
            remove_tags_automatically=True,
            specifications=[{"implementation": "MonitoredSpecification"}],
            created_at=now,
            updated_at=now,
        )

        auto_tag = AutoTag.model_validate(db_obj)

        assert auto_tag.id == 3
        assert auto_tag.remove_tags_automatically is True
        assert isinstance(auto_tag.specifications[0], MonitoredSpecification)
