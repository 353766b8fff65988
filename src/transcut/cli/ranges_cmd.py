"""transcut ranges — show the keep-ranges for a set of deletions."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.table import Table

from transcut.cli.options import config_option, delete_option, open_session
from transcut.models.config import load_settings

console = Console()


@click.command()
@click.argument("transcript", type=click.Path(exists=True, dir_okay=False))
@delete_option
@click.option("--json", "as_json", is_flag=True, help="Print the ranges as JSON pairs.")
@config_option
def ranges_cmd(
    transcript: str,
    delete_ids: tuple[str, ...],
    as_json: bool,
    config_path: str,
) -> None:
    """Print the ranges that survive after deleting words."""
    session = open_session(transcript, delete_ids, load_settings(config_path))
    ranges = session.keep_ranges

    if as_json:
        click.echo(json.dumps([[start, end] for start, end in ranges]))
        return

    table = Table(title="Keep Ranges", show_lines=True)
    table.add_column("#", justify="right")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Duration", justify="right")
    for i, keep in enumerate(ranges, start=1):
        table.add_row(str(i), f"{keep.start:.2f}", f"{keep.end:.2f}", f"{keep.duration:.2f}s")
    console.print(table)

    console.print(
        f"Deleted words: {session.deleted_count}  "
        f"Kept: {session.edited_duration:.1f}s of {session.original_duration:.1f}s"
    )
