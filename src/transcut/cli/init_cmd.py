"""transcut init — write a settings file with the default values."""

from __future__ import annotations

from pathlib import Path

import click

from transcut.models.config import Settings
from transcut.utils.io import write_yaml
from transcut.utils.progress import log_error, log_success


@click.command()
@click.option(
    "--output", "-o",
    default="transcut.yaml",
    type=click.Path(dir_okay=False),
    help="Where to write the settings file.",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
def init_cmd(output: str, force: bool) -> None:
    """Write a transcut.yaml with every setting at its default."""
    path = Path(output)
    if path.exists() and not force:
        log_error(f"{path} already exists (use --force to overwrite)")
        raise SystemExit(1)

    write_yaml(path, Settings().model_dump(mode="json"))
    log_success(f"Settings: {path}")
