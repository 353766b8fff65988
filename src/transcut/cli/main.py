"""Root CLI group for transcut."""

from __future__ import annotations

import click

from transcut import __version__


@click.group()
@click.version_option(version=__version__, prog_name="transcut")
def cli() -> None:
    """transcut — edit recordings by deleting words from the transcript."""


# Import and register subcommands
from transcut.cli.export_cmd import export_cmd  # noqa: E402
from transcut.cli.init_cmd import init_cmd  # noqa: E402
from transcut.cli.process_cmd import process_cmd  # noqa: E402
from transcut.cli.ranges_cmd import ranges_cmd  # noqa: E402
from transcut.cli.transcribe_cmd import transcribe_cmd  # noqa: E402

cli.add_command(init_cmd, "init")
cli.add_command(transcribe_cmd, "transcribe")
cli.add_command(ranges_cmd, "ranges")
cli.add_command(export_cmd, "export")
cli.add_command(process_cmd, "process")
