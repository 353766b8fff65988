"""Export: render the session's keep-ranges and fold the outcome into a result."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from transcut.editing.ranges import total_kept
from transcut.editing.session import EditSession
from transcut.models.config import ExportConfig
from transcut.models.pipeline import PipelineCompleted, PipelineResult, TranscriptStats
from transcut.models.transcript import Transcript
from transcut.pipeline.state import PipelineState
from transcut.utils.ffmpeg import cut_and_export, edited_output_path
from transcut.utils.progress import log_error, log_step, log_success


class ExportValidationError(ValueError):
    """Export request rejected before reaching the encoder."""


class Exporter(Protocol):
    """Encoder collaborator: renders keep-ranges, returns the output path."""

    def export(
        self,
        input_path: str,
        keep_ranges: Sequence[tuple[float, float]],
        enhance_audio: bool,
    ) -> str: ...


class FFmpegExporter:
    """Exporter that cuts with ffmpeg's select/aselect filters."""

    def __init__(self, config: ExportConfig | None = None) -> None:
        self.config = config or ExportConfig()

    def export(
        self,
        input_path: str,
        keep_ranges: Sequence[tuple[float, float]],
        enhance_audio: bool,
    ) -> str:
        output_path = edited_output_path(input_path, self.config)
        cut_and_export(
            input_path,
            keep_ranges,
            output_path,
            enhance_audio=enhance_audio,
            config=self.config,
        )
        return str(output_path)


def reconcile_export(
    input_path: str | None,
    keep_ranges: Sequence[tuple[float, float]],
    enhance_audio: bool,
    *,
    exporter: Exporter,
    transcript: Transcript | None = None,
    original_duration: float = 0.0,
) -> PipelineResult:
    """Validate, invoke the exporter and compute before/after stats locally."""
    if not input_path or not input_path.strip():
        raise ExportValidationError("No input file to export")
    if not keep_ranges:
        raise ExportValidationError("Nothing to export: every word is deleted")

    ranges = [(float(start), float(end)) for start, end in keep_ranges]
    log_step("Export", f"Exporting {len(ranges)} ranges from {input_path}")
    output_path = exporter.export(input_path, ranges, enhance_audio)

    processed = total_kept(ranges)
    removed = max(original_duration - processed, 0.0)
    percentage = (removed / original_duration * 100) if original_duration > 0 else 0.0
    output = Path(output_path)
    size = output.stat().st_size if output.exists() else 0

    return PipelineResult(
        output_path=output_path,
        transcript=transcript or Transcript(),
        stats=TranscriptStats(
            original_duration=original_duration,
            original_size_bytes=size,
            processed_duration=processed,
            removed_silence_duration=removed,
            silence_percentage=percentage,
        ),
    )


class ExportController:
    """Runs an export for the current edit session.

    On success the result is delivered to the pipeline state as a
    PipelineCompleted event and the session is reset. On failure the
    session is left as it was and ``error`` holds a message for display.
    """

    def __init__(self, session: EditSession, pipeline: PipelineState, exporter: Exporter) -> None:
        self.session = session
        self.pipeline = pipeline
        self.exporter = exporter
        self.is_exporting = False
        self.error: str | None = None

    def export(self, *, enhance_audio: bool) -> PipelineResult:
        self.is_exporting = True
        self.error = None
        try:
            result = reconcile_export(
                self.session.input_path,
                self.session.keep_ranges,
                enhance_audio,
                exporter=self.exporter,
                transcript=self.session.transcript,
                original_duration=self.session.original_duration,
            )
        except Exception as e:
            self.error = f"Export failed: {e}"
            log_error(self.error)
            raise
        finally:
            self.is_exporting = False

        self.pipeline.handle_event(PipelineCompleted(result=result))
        self.session.reset()
        log_success(
            f"Exported {result.output_path}: {result.stats.removed_silence_duration:.1f}s removed "
            f"({result.stats.silence_percentage:.1f}%)"
        )
        return result
