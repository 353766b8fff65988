"""Pydantic data models for transcut."""

from transcut.models.config import (
    EditorConfig,
    ExportConfig,
    PipelineConfig,
    Settings,
    TranscriptionConfig,
)
from transcut.models.pipeline import (
    PipelineCompleted,
    PipelineEvent,
    PipelineFailed,
    PipelineResult,
    PipelineStage,
    Screen,
    StageCompleted,
    StageFailed,
    StageProgress,
    StageStarted,
    StageStatus,
    TranscriptStats,
)
from transcut.models.transcript import Segment, Transcript, TranscriptResult, Word

__all__ = [
    "EditorConfig",
    "ExportConfig",
    "PipelineCompleted",
    "PipelineConfig",
    "PipelineEvent",
    "PipelineFailed",
    "PipelineResult",
    "PipelineStage",
    "Screen",
    "Segment",
    "Settings",
    "StageCompleted",
    "StageFailed",
    "StageProgress",
    "StageStarted",
    "StageStatus",
    "Transcript",
    "TranscriptResult",
    "TranscriptStats",
    "TranscriptionConfig",
    "Word",
]
