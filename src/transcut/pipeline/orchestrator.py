"""Automatic processing run: transcribe, trim silences, enhance, export.

Progress is reported only through the ``emit`` callback as PipelineEvents,
so the caller decides where they go (usually an EventChannel).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from transcut.editing.ranges import silence_keep_ranges
from transcut.ingestion.transcribe import Transcriber
from transcut.models.config import ExportConfig, PipelineConfig
from transcut.models.pipeline import (
    PipelineCompleted,
    PipelineEvent,
    PipelineFailed,
    PipelineResult,
    StageCompleted,
    StageFailed,
    StageProgress,
    StageStarted,
    TranscriptStats,
)
from transcut.utils.ffmpeg import (
    copy_video,
    cut_and_export,
    detect_silences,
    edited_output_path,
    enhance_audio,
)
from transcut.utils.ffprobe import MediaInfo, probe_media
from transcut.utils.progress import log_step, log_success

Emit = Callable[[PipelineEvent], None]


class StageError(RuntimeError):
    """A pipeline stage failed; already reported as StageFailed."""

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage} failed: {cause}")


@contextmanager
def _stage(emit: Emit, stage: str) -> Iterator[None]:
    emit(StageStarted(stage=stage))
    try:
        yield
    except Exception as e:
        emit(StageFailed(stage=stage, error=str(e)[:500]))
        raise StageError(stage, e) from e
    emit(StageCompleted(stage=stage))


def process_video(
    input_path: str,
    config: PipelineConfig,
    *,
    emit: Emit,
    transcriber: Transcriber,
    export_config: ExportConfig | None = None,
) -> PipelineResult:
    """Run the whole job and emit its events; ends with PipelineCompleted.

    A failing stage emits StageFailed and raises StageError. Failures
    outside any stage emit PipelineFailed and propagate unchanged.
    """
    export_config = export_config or ExportConfig()
    try:
        source = probe_media(input_path)
        if not source.has_audio:
            raise ValueError(f"No audio stream found in: {input_path}")
    except Exception as e:
        emit(PipelineFailed(error=str(e)[:500]))
        raise

    log_step("Pipeline", f"Processing {input_path} ({source.duration_seconds:.1f}s)")

    try:
        result = _run_stages(input_path, source, config, export_config, emit, transcriber)
    except StageError:
        raise
    except Exception as e:
        emit(PipelineFailed(error=str(e)[:500]))
        raise

    log_success(f"Pipeline complete: {result.output_path}")
    emit(PipelineCompleted(result=result))
    return result


def _run_stages(
    input_path: str,
    source: MediaInfo,
    config: PipelineConfig,
    export_config: ExportConfig,
    emit: Emit,
    transcriber: Transcriber,
) -> PipelineResult:
    original_duration = source.duration_seconds

    with _stage(emit, "transcribe"):
        emit(StageProgress(stage="transcribe", progress=0.0))
        transcript_result = transcriber.transcribe(input_path, language=config.language)
        emit(StageProgress(stage="transcribe", progress=1.0))

    output_path = str(edited_output_path(input_path, export_config))

    with _stage(emit, "detect_silences"):
        silences = detect_silences(
            input_path,
            threshold_db=config.silence_threshold_db,
            min_duration=config.silence_min_duration,
        )
    total_silence = sum(end - start for start, end in silences)

    if config.cut_silences and silences:
        with _stage(emit, "cut_silences"):
            keep_ranges = silence_keep_ranges(silences, original_duration, cut_margin=config.cut_margin)
            log_step("Pipeline", f"Keep ranges ({len(keep_ranges)} segments)")
            cut_and_export(
                input_path,
                keep_ranges,
                output_path,
                enhance_audio=config.enhance_audio,
                config=export_config,
            )
    elif config.enhance_audio:
        with _stage(emit, "enhance_audio"):
            enhance_audio(input_path, output_path)
    else:
        with _stage(emit, "export"):
            copy_video(input_path, output_path, config=export_config)

    output = probe_media(output_path) if Path(output_path).exists() else None
    stats = TranscriptStats(
        original_duration=original_duration,
        original_size_bytes=output.size_bytes if output else 0,
        processed_duration=output.duration_seconds if output else 0.0,
        removed_silence_duration=total_silence,
        silence_percentage=(total_silence / original_duration * 100) if original_duration > 0 else 0.0,
    )
    return PipelineResult(
        output_path=output_path,
        transcript=transcript_result.to_transcript(),
        stats=stats,
    )
