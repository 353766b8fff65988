"""Transcribe flow: run the transcriber and seed an edit session."""

from __future__ import annotations

from pathlib import Path

from transcut.editing.session import EditSession
from transcut.ingestion.transcribe import Transcriber
from transcut.models.transcript import Transcript, TranscriptResult
from transcut.utils.io import read_json
from transcut.utils.progress import log_error, log_success


class TranscribeValidationError(ValueError):
    """Transcription request rejected before reaching the engine."""


class TranscribeController:
    """Transcribes an input and loads the result into an edit session.

    ``is_transcribing`` is cleared whatever the outcome; failures leave the
    session untouched and record a message in ``error``.
    """

    def __init__(self, session: EditSession, transcriber: Transcriber) -> None:
        self.session = session
        self.transcriber = transcriber
        self.is_transcribing = False
        self.error: str | None = None

    def transcribe(
        self,
        input_path: str | None,
        *,
        language: str | None = None,
        cleanup_api_key: str | None = None,
    ) -> TranscriptResult:
        self.error = None
        if not input_path or not input_path.strip():
            self.error = "Select a file to transcribe"
            raise TranscribeValidationError(self.error)

        self.is_transcribing = True
        try:
            result = self.transcriber.transcribe(
                input_path,
                language=language,
                cleanup_api_key=cleanup_api_key,
            )
        except Exception as e:
            self.error = f"Transcription failed: {e}"
            log_error(self.error)
            raise
        finally:
            self.is_transcribing = False

        self.session.load_transcript(result)
        log_success(f"Transcribed {input_path}: {len(result.words)} words")
        return result


def load_transcript_file(path: Path | str) -> Transcript | TranscriptResult:
    """Read a transcript JSON file written by ``transcut transcribe`` or a bare Transcript."""
    data = read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    if "input_path" in data:
        return TranscriptResult.model_validate(data)
    return Transcript.model_validate(data)
