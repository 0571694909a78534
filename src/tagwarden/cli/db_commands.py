"""
Database CLI commands for tagwarden.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from tagwarden.config.database import db_manager

console = Console()

db_app = typer.Typer(
    name="db",
    help="Database management",
    no_args_is_help=True,
)


@db_app.command("init")
def init_db() -> None:
    """Create all tables directly (development only; use Alembic otherwise)."""

    async def _run() -> None:
        try:
            await db_manager.create_tables()
        finally:
            await db_manager.close()

    asyncio.run(_run())
    console.print("[green]✓[/green] Database tables created")
