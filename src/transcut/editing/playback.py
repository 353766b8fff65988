"""Playback sync: skip deleted words while the surface is playing."""

from __future__ import annotations

import math
from typing import Protocol

from transcut.editing.ranges import find_next_keep_time, is_time_deleted
from transcut.editing.session import EditSession


class PlaybackSurface(Protocol):
    """Anything that can be told to jump to a position, e.g. a video player."""

    def seek(self, time: float) -> None: ...


class PlaybackSync:
    """Reacts to time updates from a playback surface.

    While playing, a position inside a deleted word makes the surface jump
    past it. The position the engine last jumped to is remembered; ticks
    within ``seek_guard`` of it never trigger another jump, otherwise a
    landing that the surface rounds back into a deleted word would seek
    forever.
    """

    def __init__(
        self,
        session: EditSession,
        surface: PlaybackSurface,
        *,
        seek_guard: float | None = None,
        epsilon: float | None = None,
    ) -> None:
        self.session = session
        self.surface = surface
        self.seek_guard = session.config.seek_guard if seek_guard is None else seek_guard
        self.epsilon = session.config.keep_epsilon if epsilon is None else epsilon
        self.last_seek_time = -math.inf

    def on_time_update(self, time: float, *, is_paused: bool) -> float | None:
        """Handle one position report. Returns the skip target, if any."""
        self.session.set_current_time(time)

        if is_paused:
            return None

        deletions = self.session.deletions
        if not deletions:
            return None

        transcript = self.session.transcript
        deleted_word = is_time_deleted(transcript, deletions, time)
        if deleted_word is None:
            return None

        if abs(time - self.last_seek_time) <= self.seek_guard:
            return None

        next_time = find_next_keep_time(transcript, deletions, deleted_word.end, epsilon=self.epsilon)
        if next_time is None:
            return None

        self.last_seek_time = next_time
        self.surface.seek(next_time)
        return next_time

    def seek(self, time: float) -> None:
        """Manual seek (word click or scrub); never runs the skip logic."""
        self.surface.seek(time)
        self.session.set_current_time(time)

    def reset(self) -> None:
        self.last_seek_time = -math.inf
