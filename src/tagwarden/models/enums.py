"""
Enums for tagwarden models.

Defines enumeration types used across the application for consistent
type safety and validation.
"""

from __future__ import annotations

from enum import Enum


class ArtistStatus(str, Enum):
    """Artist lifecycle status matched by status specifications."""

    CONTINUING = "continuing"
    ENDED = "ended"
