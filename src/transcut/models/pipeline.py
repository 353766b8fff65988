"""Pipeline stage, event and result models.

Events travel as single-key mappings from the variant name to its payload,
e.g. ``{"StageStarted": {"stage": "transcribe"}}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from transcut.models.transcript import Transcript


class StageStatus(StrEnum):
    pending = "pending"
    active = "active"
    completed = "completed"
    failed = "failed"


class Screen(StrEnum):
    home = "home"
    processing = "processing"
    editor = "editor"
    done = "done"


class PipelineStage(BaseModel):
    """One step of the processing job as shown in the progress view."""

    id: str
    label: str
    status: StageStatus = StageStatus.pending
    progress: float | None = None


DEFAULT_STAGES: tuple[tuple[str, str], ...] = (
    ("transcribe", "Transcribing Audio"),
    ("detect_silences", "Detecting Silences"),
    ("cut_silences", "Cutting Silences"),
    ("enhance_audio", "Enhancing Audio"),
    ("export", "Exporting Video"),
)


def initial_stages() -> list[PipelineStage]:
    return [PipelineStage(id=stage_id, label=label) for stage_id, label in DEFAULT_STAGES]


class TranscriptStats(BaseModel):
    """Before/after numbers for a finished run."""

    original_duration: float = 0.0
    original_size_bytes: int = 0
    processed_duration: float = 0.0
    removed_silence_duration: float = 0.0
    silence_percentage: float = 0.0


class PipelineResult(BaseModel):
    output_path: str
    transcript: Transcript = Field(default_factory=Transcript)
    stats: TranscriptStats = Field(default_factory=TranscriptStats)


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: ClassVar[str] = ""


class StageStarted(_Event):
    tag: ClassVar[str] = "StageStarted"
    stage: str


class StageProgress(_Event):
    tag: ClassVar[str] = "StageProgress"
    stage: str
    progress: float


class StageCompleted(_Event):
    tag: ClassVar[str] = "StageCompleted"
    stage: str


class StageFailed(_Event):
    tag: ClassVar[str] = "StageFailed"
    stage: str
    error: str


class PipelineCompleted(_Event):
    tag: ClassVar[str] = "PipelineCompleted"
    result: PipelineResult


class PipelineFailed(_Event):
    tag: ClassVar[str] = "PipelineFailed"
    error: str


PipelineEvent = (
    StageStarted | StageProgress | StageCompleted | StageFailed | PipelineCompleted | PipelineFailed
)

_EVENT_TYPES: dict[str, type[_Event]] = {
    cls.tag: cls
    for cls in (StageStarted, StageProgress, StageCompleted, StageFailed, PipelineCompleted, PipelineFailed)
}


class EventDecodeError(ValueError):
    """Raised when a wire payload is not a valid pipeline event."""


def parse_event(payload: Mapping[str, Any]) -> PipelineEvent:
    """Decode a single-key wire mapping into its event model."""
    if not isinstance(payload, Mapping) or len(payload) != 1:
        raise EventDecodeError(f"Expected a single-key mapping, got: {payload!r}")
    (tag, body), = payload.items()
    event_type = _EVENT_TYPES.get(tag)
    if event_type is None:
        raise EventDecodeError(f"Unknown pipeline event: {tag}")
    if not isinstance(body, Mapping):
        raise EventDecodeError(f"{tag} payload must be a mapping")
    try:
        return event_type.model_validate(dict(body))  # type: ignore[return-value]
    except ValidationError as exc:
        raise EventDecodeError(f"Invalid {tag} payload: {exc}") from exc


def event_to_wire(event: PipelineEvent) -> dict[str, Any]:
    return {event.tag: event.model_dump(mode="json", by_alias=True)}
