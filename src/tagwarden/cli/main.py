"""
Main CLI entry point for tagwarden.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.panel import Panel

from tagwarden import __version__
from tagwarden.cli.db_commands import db_app
from tagwarden.cli.housekeeping_commands import housekeeping_app
from tagwarden.config.settings import settings

console = Console()

app = typer.Typer(
    name="tagwarden",
    help="Tag catalog housekeeping",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Add subcommands
app.add_typer(housekeeping_app, name="housekeeping", help="Maintenance tasks")
app.add_typer(db_app, name="db", help="Database management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]tagwarden[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    tagwarden - Tag catalog housekeeping.

    Removes tags that no release profile or auto-tagging rule refers to.
    """
    if version:
        console.print(f"tagwarden v{__version__}")
        raise typer.Exit(code=0)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if ctx.invoked_subcommand is None:
        console.print("[yellow]Use 'tagwarden --help' for available commands[/yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
