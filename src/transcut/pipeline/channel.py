"""Named event channel between the processing job and its listeners."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from transcut.models.pipeline import PipelineEvent, parse_event
from transcut.pipeline.state import PipelineState
from transcut.utils.progress import log_step

PROGRESS_CHANNEL = "pipeline-progress"

Handler = Callable[[PipelineEvent], None]


class EventChannel:
    """Synchronous fan-out of pipeline events to registered handlers.

    ``listen`` returns a detach callable; detached handlers receive nothing
    further, and detaching twice is a no-op.
    """

    def __init__(self, name: str = PROGRESS_CHANNEL) -> None:
        self.name = name
        self._handlers: dict[int, Handler] = {}
        self._next_key = 0

    @property
    def listener_count(self) -> int:
        return len(self._handlers)

    def listen(self, handler: Handler) -> Callable[[], None]:
        key = self._next_key
        self._next_key += 1
        self._handlers[key] = handler

        def detach() -> None:
            self._handlers.pop(key, None)

        return detach

    def emit(self, event: PipelineEvent) -> None:
        for handler in list(self._handlers.values()):
            handler(event)

    def emit_wire(self, payload: Mapping[str, Any]) -> None:
        """Decode a wire-format event and deliver it."""
        self.emit(parse_event(payload))


def connect_pipeline(channel: EventChannel, state: PipelineState) -> Callable[[], None]:
    """Start a new run on ``state`` and route the channel's events into it.

    Returns the detach callable; call it once the run is finished or
    abandoned so late events cannot reach a newer session.
    """
    run_id = state.start_processing()
    log_step("Pipeline", f"Listening on {channel.name} (run {run_id})")
    return channel.listen(state.handler_for(run_id))
