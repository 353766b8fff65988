"""Options shared by several commands."""

from __future__ import annotations

from pathlib import Path

import click

from transcut.editing.session import EditSession
from transcut.ingestion.module import load_transcript_file
from transcut.models.config import Settings

config_option = click.option(
    "--config", "-c", "config_path",
    default="transcut.yaml",
    type=click.Path(dir_okay=False),
    help="Settings file (YAML). Defaults are used when it does not exist.",
)

delete_option = click.option(
    "--delete", "-d", "delete_ids",
    multiple=True,
    help="Word id to delete (repeatable).",
)


def open_session(
    transcript_path: str,
    delete_ids: tuple[str, ...],
    settings: Settings,
    *,
    input_path: str | None = None,
) -> EditSession:
    """Load a transcript file into a new session and apply deletions."""
    session = EditSession(settings.editor)
    session.load_transcript(load_transcript_file(Path(transcript_path)), input_path)
    for word_id in delete_ids:
        session.delete_word(word_id)
    return session
