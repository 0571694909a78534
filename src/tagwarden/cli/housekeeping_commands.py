"""
Housekeeping CLI commands for tagwarden.

Commands for running maintenance tasks by hand. In production the same
tasks are triggered by an external scheduler calling the housekeeping
service; these commands exist for operators and for inspecting what a pass
would do.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tagwarden.container import container
from tagwarden.housekeeping.cleanup_unused_tags import TagCleanupResult
from tagwarden.housekeeping.service import HousekeepingReport

logger = logging.getLogger(__name__)

console = Console()

housekeeping_app = typer.Typer(
    name="housekeeping",
    help="🧹 Catalog maintenance tasks",
    no_args_is_help=True,
)


def _format_ids(ids: set[int], limit: int = 20) -> str:
    """Render a sorted, truncated id list for display."""
    ordered = sorted(ids)
    shown = ", ".join(str(i) for i in ordered[:limit])
    if len(ordered) > limit:
        shown += f", … (+{len(ordered) - limit} more)"
    return shown


def _print_report(report: HousekeepingReport) -> None:
    table = Table(
        title="Housekeeping Run",
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("Task", style="cyan")
    table.add_column("Status", width=10)
    table.add_column("Duration", style="dim", justify="right")
    table.add_column("Details")

    for outcome in report.outcomes:
        status = "[green]ok[/green]" if outcome.succeeded else "[red]failed[/red]"
        if not outcome.succeeded:
            details = f"[red]{outcome.error}[/red]"
        elif isinstance(outcome.result, TagCleanupResult):
            cleanup = outcome.result
            details = f"{cleanup.deleted_count} of {cleanup.total_tags} tags removed"
        else:
            details = ""
        table.add_row(
            outcome.name, status, f"{outcome.duration_seconds:.2f}s", details
        )

    console.print(table)


@housekeeping_app.command("run")
def run_housekeeping() -> None:
    """Run every housekeeping task once."""

    async def _run() -> HousekeepingReport:
        return await container.housekeeping_service.run()

    report = asyncio.run(_run())
    _print_report(report)

    if not report.succeeded:
        console.print(
            Panel(
                f"[red]Failed tasks: {', '.join(report.failed_tasks)}[/red]\n"
                "Check the logs for details; the next run will retry.",
                title="Housekeeping Failed",
                border_style="red",
            )
        )
        raise typer.Exit(code=1)


@housekeeping_app.command("clean-tags")
def clean_tags() -> None:
    """Delete tags that no release profile or auto-tag references."""

    async def _run() -> TagCleanupResult:
        return await container.create_cleanup_unused_tags().clean()

    try:
        result = asyncio.run(_run())
    except Exception as e:
        logger.exception("Unused tag cleanup failed")
        console.print(
            Panel(
                f"[red]Error cleaning tags: {str(e)}[/red]",
                title="Error",
                border_style="red",
            )
        )
        raise typer.Exit(code=1)

    if not result.deleted_tag_ids:
        console.print(
            Panel(
                f"[green]All {result.total_tags} tags are in use[/green]",
                title="Nothing To Clean",
                border_style="green",
            )
        )
        return

    console.print(
        Panel(
            f"[bold]Removed:[/bold] {result.deleted_count} of {result.total_tags} tags\n"
            f"[bold]Ids:[/bold] {_format_ids(result.deleted_tag_ids)}",
            title="Unused Tags Removed",
            border_style="blue",
        )
    )


@housekeeping_app.command("unused-tags")
def list_unused_tags() -> None:
    """Show the tags the next cleanup would delete, without deleting them."""

    async def _run() -> list[tuple[int, str]]:
        cleanup = container.create_cleanup_unused_tags()
        unused_ids = await cleanup.find_unused_tag_ids()
        if not unused_ids:
            return []
        async with container.session_factory() as session:
            tags = await cleanup.tag_repository.get_by_ids(session, unused_ids)
        return [(tag.id, tag.label) for tag in tags]

    try:
        unused = asyncio.run(_run())
    except Exception as e:
        logger.exception("Unused tag scan failed")
        console.print(
            Panel(
                f"[red]Error scanning tags: {str(e)}[/red]",
                title="Error",
                border_style="red",
            )
        )
        raise typer.Exit(code=1)

    if not unused:
        console.print("[green]No unused tags[/green]")
        return

    table = Table(
        title=f"Unused Tags ({len(unused)})",
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("Id", style="dim", justify="right")
    table.add_column("Label", style="cyan")
    for tag_id, label in unused:
        table.add_row(str(tag_id), label)
    console.print(table)
