"""Progress reporting utilities using Rich."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from transcut.models.pipeline import PipelineStage, StageStatus

console = Console(stderr=True)

STAGE_ICONS = {
    StageStatus.pending: "[dim]○[/dim]",
    StageStatus.active: "[yellow]◑[/yellow]",
    StageStatus.completed: "[green]●[/green]",
    StageStatus.failed: "[red]✗[/red]",
}


def log(message: str, *, style: str = "bold") -> None:
    """Log a timestamped message."""
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(f"[dim]\\[{ts}][/dim] {message}", style=style, highlight=False)


def log_step(step: str, message: str) -> None:
    """Log a processing step."""
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(
        f"[dim]\\[{ts}][/dim] [bold cyan]{step}[/bold cyan] {message}",
        highlight=False,
    )


def log_success(message: str) -> None:
    log(f"[green]✓[/green] {message}", style="")


def log_warning(message: str) -> None:
    log(f"[yellow]⚠[/yellow] {message}", style="")


def log_error(message: str) -> None:
    log(f"[red]✗[/red] {message}", style="")


def stage_table(stages: Iterable[PipelineStage], *, title: str = "Pipeline Status") -> Table:
    """Render the stage list as a table."""
    table = Table(title=title, show_lines=True)
    table.add_column("Stage", style="bold")
    table.add_column("Status")
    table.add_column("Progress", justify="right")

    for stage in stages:
        icon = STAGE_ICONS.get(stage.status, "?")
        progress = "—" if stage.progress is None else f"{stage.progress * 100:.0f}%"
        table.add_row(stage.label, f"{icon} {stage.status}", progress)
    return table


def show_stage_summary(stage: str, duration_seconds: float, details: dict) -> None:
    """Show a summary panel for a completed stage."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()

    for key, value in details.items():
        table.add_row(key, str(value))

    mins = int(duration_seconds) // 60
    secs = int(duration_seconds) % 60
    table.add_row("Duration", f"{mins}m{secs:02d}s")

    console.print(Panel(table, title=f"[bold]{stage} Complete[/bold]", border_style="green"))
