"""transcut transcribe — produce a word-level transcript for editing."""

from __future__ import annotations

from pathlib import Path

import click

from transcut.cli.options import config_option
from transcut.editing.session import EditSession
from transcut.ingestion.module import TranscribeController
from transcut.ingestion.transcribe import WhisperTranscriber
from transcut.models.config import load_settings
from transcut.utils.io import write_json
from transcut.utils.progress import log_error, log_success


@click.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o",
    default=None,
    type=click.Path(dir_okay=False),
    help="Transcript JSON to write (default: <input>.transcript.json).",
)
@click.option("--language", default=None, help="Language hint, e.g. 'es'. Auto-detected if omitted.")
@click.option(
    "--cleanup-key",
    envvar="TRANSCUT_CLEANUP_API_KEY",
    default=None,
    help="API key for LLM transcript cleanup (or set TRANSCUT_CLEANUP_API_KEY).",
)
@config_option
def transcribe_cmd(
    input_path: str,
    output: str | None,
    language: str | None,
    cleanup_key: str | None,
    config_path: str,
) -> None:
    """Transcribe a recording with word timestamps."""
    settings = load_settings(config_path)
    controller = TranscribeController(EditSession(settings.editor), WhisperTranscriber(settings.transcription))

    try:
        result = controller.transcribe(input_path, language=language, cleanup_api_key=cleanup_key)
    except Exception as e:
        log_error(str(e))
        raise SystemExit(1)

    output_path = Path(output) if output else Path(input_path).with_suffix(".transcript.json")
    write_json(output_path, result.model_dump(mode="json", by_alias=True))
    log_success(f"Transcript: {output_path}")
