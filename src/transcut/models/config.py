"""Configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from transcut.utils.io import read_yaml

# Two kept words closer than this end up in one keep-range.
GAP_THRESHOLD = 0.1
# Ticks this close to the last automatic seek never trigger another one.
SEEK_GUARD = 0.1
KEEP_EPSILON = 0.01


class EditorConfig(BaseModel):
    """Thresholds for range merging and playback skipping."""

    gap_threshold: float = Field(default=GAP_THRESHOLD, ge=0.0, le=5.0)
    seek_guard: float = Field(default=SEEK_GUARD, ge=0.0, le=5.0)
    keep_epsilon: float = Field(default=KEEP_EPSILON, gt=0.0, le=1.0)


class PipelineConfig(BaseModel):
    """Options for the automatic processing run."""

    enhance_audio: bool = True
    cut_silences: bool = True
    silence_threshold_db: float = Field(default=-30.0, ge=-90.0, le=0.0)
    silence_min_duration: float = Field(default=0.5, gt=0.0, le=30.0)
    cut_margin: float = Field(default=0.2, ge=0.0, le=5.0)
    language: str | None = None


class ExportConfig(BaseModel):
    """Encoder settings for the ffmpeg exporter."""

    video_codec: str = "libx264"
    video_bitrate: str = "8M"
    video_maxrate: str = "10M"
    video_bufsize: str = "16M"
    audio_codec: str = "aac"
    audio_bitrate: str = "192k"
    audio_sample_rate: int = 44100
    output_suffix: str = "_edited"
    output_extension: str = ".mp4"


class TranscriptionConfig(BaseModel):
    """Settings for the faster-whisper transcriber and LLM cleanup."""

    model: str = "base"
    device: str = "cpu"
    language: str | None = None
    beam_size: int = Field(default=5, ge=1, le=10)
    cleanup_model: str = "claude-sonnet-4-6"


class Settings(BaseModel):
    """All configuration sections."""

    editor: EditorConfig = Field(default_factory=EditorConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    transcription: TranscriptionConfig = Field(default_factory=TranscriptionConfig)


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from a YAML file; a missing path means defaults."""
    if path is None:
        return Settings()
    path = Path(path)
    if not path.exists():
        return Settings()
    return Settings(**read_yaml(path))
