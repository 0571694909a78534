"""
Database module for tagwarden.

Contains SQLAlchemy models and migration management for the tag catalog
and the records that reference it.
"""

from __future__ import annotations

__all__: list[str] = []
