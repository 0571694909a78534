"""
CLI interface module for tagwarden.

Provides Typer-based command-line interface for running housekeeping tasks
and managing the database.
"""

from __future__ import annotations

__all__: list[str] = []
