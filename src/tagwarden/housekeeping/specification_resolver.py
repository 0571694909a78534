"""
Tag id resolution for auto-tagging specification lists.

An auto-tag's specification list mixes variants freely. Resolution asks each
variant for its ``referenced_tag_id()`` and keeps the ids that come back.
Stored elements that do not validate (unknown ``implementation``, missing or
invalid ``value``) contribute nothing, so a single corrupt rule cannot block
tag cleanup for the whole catalog. Tag specifications are judged on their
``value`` alone; a broken display field must not cost a tag its reference.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Optional

from pydantic import ValidationError

from tagwarden.models.auto_tag import (
    AutoTaggingSpecification,
    AutoTaggingSpecificationBase,
    TagReference,
    specification_adapter,
)

logger = logging.getLogger(__name__)


def parse_specification(
    raw: Any, *, auto_tag_id: Optional[int] = None
) -> Optional[AutoTaggingSpecification]:
    """
    Validate one stored specification element.

    Parameters
    ----------
    raw : Any
        A specification as stored, normally a JSON object with an
        ``implementation`` key, or an already-parsed specification model.
    auto_tag_id : Optional[int]
        Owning auto-tag, used only for log context.

    Returns
    -------
    Optional[AutoTaggingSpecification]
        The parsed variant, or ``None`` when the element is malformed.
    """
    if isinstance(raw, AutoTaggingSpecificationBase):
        return raw  # type: ignore[return-value]

    try:
        return specification_adapter.validate_python(raw)
    except ValidationError as e:
        implementation = raw.get("implementation") if isinstance(raw, dict) else None
        logger.warning(
            "Skipping malformed %s specification on auto-tag %s: %d validation error(s)",
            implementation or "unknown",
            auto_tag_id if auto_tag_id is not None else "?",
            e.error_count(),
        )
        return None


def resolve_tag_id(
    specification: Any, *, auto_tag_id: Optional[int] = None
) -> Optional[int]:
    """
    Return the tag id a single specification refers to, if any.

    Stored tag specifications are read through ``TagReference``, which looks
    at ``implementation`` and ``value`` only. A tag specification whose other
    fields are invalid still reports its tag.
    """
    if isinstance(specification, AutoTaggingSpecificationBase):
        return specification.referenced_tag_id()

    if (
        isinstance(specification, dict)
        and specification.get("implementation") == "TagSpecification"
    ):
        try:
            return TagReference.model_validate(specification).value
        except ValidationError as e:
            logger.warning(
                "Skipping TagSpecification without a valid tag id on auto-tag %s: %s",
                auto_tag_id if auto_tag_id is not None else "?",
                e.errors()[0]["msg"],
            )
            return None

    parsed = parse_specification(specification, auto_tag_id=auto_tag_id)
    if parsed is None:
        return None
    return parsed.referenced_tag_id()


def resolve_tag_ids(
    specifications: Iterable[Any], *, auto_tag_id: Optional[int] = None
) -> set[int]:
    """
    Collect the tag ids referenced by a whole specification list.

    Never raises for non-tag or malformed elements; a list without any
    tag-reference variant yields an empty set.

    Parameters
    ----------
    specifications : Iterable[Any]
        Stored or parsed specifications of one auto-tag.
    auto_tag_id : Optional[int]
        Owning auto-tag, used only for log context.

    Returns
    -------
    set[int]
        Referenced tag identifiers.
    """
    tag_ids: set[int] = set()
    for specification in specifications:
        tag_id = resolve_tag_id(specification, auto_tag_id=auto_tag_id)
        if tag_id is not None:
            tag_ids.add(tag_id)
    return tag_ids
