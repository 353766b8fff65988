"""Whisper transcription with word timestamps (faster-whisper)."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Protocol

from transcut.models.config import TranscriptionConfig
from transcut.models.transcript import Segment, TranscriptResult, Word
from transcut.utils.progress import log_step


class TranscriptionError(RuntimeError):
    """The transcription engine could not produce a transcript."""


class Transcriber(Protocol):
    """Transcription collaborator."""

    def transcribe(
        self,
        input_path: str,
        *,
        language: str | None = None,
        cleanup_api_key: str | None = None,
    ) -> TranscriptResult: ...


class WhisperTranscriber:
    """Transcriber backed by faster-whisper.

    Word ids are ``w0, w1, ...`` numbered across the whole recording.
    Empty tokens and tokens without a positive duration are dropped.
    """

    def __init__(self, config: TranscriptionConfig | None = None) -> None:
        self.config = config or TranscriptionConfig()
        self._model = None

    def _load_model(self):
        if self._model is None:
            try:
                from faster_whisper import WhisperModel
            except ImportError:
                raise ImportError(
                    "faster-whisper is required for transcription. "
                    "Install with: pip install transcut[transcribe]"
                )

            compute_type = "int8" if self.config.device == "cpu" else "float16"
            log_step("Transcribe", f"Loading model: {self.config.model} ({self.config.device}, {compute_type})")
            self._model = WhisperModel(self.config.model, device=self.config.device, compute_type=compute_type)
        return self._model

    def transcribe(
        self,
        input_path: str,
        *,
        language: str | None = None,
        cleanup_api_key: str | None = None,
    ) -> TranscriptResult:
        path = Path(input_path)
        if not path.exists():
            raise TranscriptionError(f"Input not found: {path}")

        model = self._load_model()
        language = language or self.config.language
        log_step("Transcribe", f"Transcribing {path.name} (language: {language or 'auto'})")
        start_time = time.time()

        try:
            segments_gen, info = model.transcribe(
                str(path),
                beam_size=self.config.beam_size,
                word_timestamps=True,
                language=language,
            )
            segments = build_segments(segments_gen)
        except Exception as e:
            raise TranscriptionError(f"Transcription failed: {e}") from e

        if cleanup_api_key:
            from transcut.ingestion.cleanup import clean_segments

            segments = clean_segments(segments, cleanup_api_key, model=self.config.cleanup_model)

        words = [w for s in segments for w in (s.words or [])]
        log_step(
            "Transcribe",
            f"{len(segments)} segments, {len(words)} words in {time.time() - start_time:.0f}s",
        )

        return TranscriptResult(
            segments=segments,
            words=words,
            duration_seconds=float(getattr(info, "duration", 0.0) or 0.0),
            input_path=str(path),
            language=getattr(info, "language", None),
        )


def build_segments(raw_segments) -> list[Segment]:
    """Convert engine segments (with ``.words``) into Segment models."""
    segments: list[Segment] = []
    word_index = 0

    for i, seg in enumerate(raw_segments):
        words: list[Word] = []
        for w in seg.words or []:
            text = w.word.strip()
            if not text or w.start < 0 or w.end <= w.start:
                continue
            words.append(Word(id=f"w{word_index}", text=text, start=w.start, end=w.end))
            word_index += 1

        segments.append(Segment(
            id=i,
            start=seg.start,
            end=seg.end,
            text=seg.text.strip(),
            words=words,
        ))

    return segments
