"""
Factories for auto-tag and specification models using factory_boy.

Specification factories build each variant of the auto-tagging
specification union; ``AutoTagCreateFactory`` defaults to an empty
specification list.
"""

from __future__ import annotations

from typing import Any

import factory
from factory import LazyFunction, Sequence

from tagwarden.models.auto_tag import (
    AutoTagCreate,
    GenreSpecification,
    MonitoredSpecification,
    RootFolderSpecification,
    TagSpecification,
)


class TagSpecificationFactory(factory.Factory[TagSpecification]):
    """Factory for tag-reference specifications."""

    class Meta:
        model = TagSpecification

    name: Any = Sequence(lambda n: f"Tag spec {n}")
    negate: Any = LazyFunction(lambda: False)
    required: Any = LazyFunction(lambda: False)
    value: Any = Sequence(lambda n: n + 1)


class GenreSpecificationFactory(factory.Factory[GenreSpecification]):
    """Factory for genre specifications."""

    class Meta:
        model = GenreSpecification

    name: Any = Sequence(lambda n: f"Genre spec {n}")
    value: Any = LazyFunction(lambda: ["rock", "metal"])


class RootFolderSpecificationFactory(factory.Factory[RootFolderSpecification]):
    """Factory for root folder specifications."""

    class Meta:
        model = RootFolderSpecification

    name: Any = Sequence(lambda n: f"Root folder spec {n}")
    value: Any = LazyFunction(lambda: "/music")


class MonitoredSpecificationFactory(factory.Factory[MonitoredSpecification]):
    """Factory for monitored specifications."""

    class Meta:
        model = MonitoredSpecification

    name: Any = Sequence(lambda n: f"Monitored spec {n}")


class AutoTagCreateFactory(factory.Factory[AutoTagCreate]):
    """Factory for AutoTagCreate models."""

    class Meta:
        model = AutoTagCreate

    name: Any = Sequence(lambda n: f"Auto tag {n}")
    remove_tags_automatically: Any = LazyFunction(lambda: False)
    specifications: Any = LazyFunction(list)


def create_auto_tag(**kwargs: Any) -> AutoTagCreate:
    """Create an AutoTagCreate with keyword arguments."""
    result = AutoTagCreateFactory.build(**kwargs)
    assert isinstance(result, AutoTagCreate)
    return result
