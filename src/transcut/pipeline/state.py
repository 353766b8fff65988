"""Pipeline state: folds stage events into per-stage and overall status."""

from __future__ import annotations

from collections.abc import Callable
from itertools import count
from typing import Any

from transcut.models.config import PipelineConfig
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
    initial_stages,
)
from transcut.utils.progress import log_error, log_step, log_success, log_warning

_run_ids = count(1)


class PipelineState:
    """Single owner of the progress view's state.

    Stages follow ``pending -> active -> completed | failed``. Ordering is
    not enforced: the event stream is trusted, so e.g. a completion for a
    stage that never started is still applied.
    """

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.screen = Screen.home
        self.selected_file: str | None = None
        self.config = config or PipelineConfig()
        self.stages: list[PipelineStage] = initial_stages()
        self.result: PipelineResult | None = None
        self.error: str | None = None
        self.is_processing = False
        self.run_id: int | None = None

    def stage(self, stage_id: str) -> PipelineStage | None:
        for stage in self.stages:
            if stage.id == stage_id:
                return stage
        return None

    # -- view/config updates -------------------------------------------------

    def set_screen(self, screen: Screen) -> None:
        self.screen = screen
        self.error = None

    def set_file(self, file_path: str | None) -> None:
        self.selected_file = file_path
        self.error = None

    def update_config(self, **changes: Any) -> None:
        self.config = self.config.model_copy(update=changes)

    # -- runs ----------------------------------------------------------------

    def start_processing(self) -> int:
        """Begin a new run and return its id; earlier runs become stale."""
        self.screen = Screen.processing
        self.is_processing = True
        self.error = None
        self.stages = initial_stages()
        self.result = None
        self.run_id = next(_run_ids)
        return self.run_id

    def handler_for(self, run_id: int) -> Callable[[PipelineEvent], None]:
        """Event handler that only applies events while ``run_id`` is current."""

        def handle(event: PipelineEvent) -> None:
            if self.run_id != run_id:
                log_warning(f"Ignoring {event.tag} from superseded run {run_id}")
                return
            self.handle_event(event)

        return handle

    def handle_event(self, event: PipelineEvent) -> None:
        match event:
            case StageStarted(stage=stage_id):
                log_step("Pipeline", f"Stage started: {stage_id}")
                self._update_stage(stage_id, status=StageStatus.active, progress=0.0)
            case StageProgress(stage=stage_id, progress=progress):
                self._update_stage(stage_id, status=StageStatus.active, progress=progress)
            case StageCompleted(stage=stage_id):
                log_success(f"Stage completed: {stage_id}")
                self._update_stage(stage_id, status=StageStatus.completed, progress=1.0)
            case StageFailed(stage=stage_id, error=error):
                log_error(f"Stage failed: {stage_id}: {error}")
                self._update_stage(stage_id, status=StageStatus.failed)
                self.error = f'Stage "{stage_id}" failed: {error}'
                self.is_processing = False
            case PipelineCompleted(result=result):
                log_success(f"Pipeline completed: {result.output_path}")
                self.result = result
                self.screen = Screen.done
                self.is_processing = False
            case PipelineFailed(error=error):
                log_error(f"Pipeline failed: {error}")
                self.error = f"Pipeline failed: {error}"
                self.screen = Screen.home
                self.is_processing = False
            case _:
                raise TypeError(f"Unsupported pipeline event: {event!r}")

    def _update_stage(self, stage_id: str, **changes: Any) -> None:
        self.stages = [
            stage.model_copy(update=changes) if stage.id == stage_id else stage
            for stage in self.stages
        ]

    def reset(self) -> None:
        """Back to the initial view with default config; any run becomes stale."""
        self.screen = Screen.home
        self.selected_file = None
        self.config = PipelineConfig()
        self.stages = initial_stages()
        self.result = None
        self.error = None
        self.is_processing = False
        self.run_id = None
