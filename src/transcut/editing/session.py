"""Edit session: transcript, deleted words and playback position."""

from __future__ import annotations

from transcut.editing.ranges import KeepRange, derive_keep_ranges, total_kept
from transcut.models.config import EditorConfig
from transcut.models.transcript import Transcript, TranscriptResult, Word
from transcut.utils.progress import log_step


class EditSession:
    """Owns the mutable editing state.

    Consumers read derived values (keep ranges, active word) through the
    properties below; they are recomputed from the current state on every
    read. ``version`` increases on every mutation so callers can tell when
    something changed.
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        self.config = config or EditorConfig()
        self._transcript: Transcript | None = None
        self._deletions: set[str] = set()
        self._current_time = 0.0
        self._input_path: str | None = None
        self._duration = 0.0
        self.version = 0

    # -- state ---------------------------------------------------------------

    @property
    def transcript(self) -> Transcript | None:
        return self._transcript

    @property
    def deletions(self) -> frozenset[str]:
        return frozenset(self._deletions)

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def input_path(self) -> str | None:
        return self._input_path

    @property
    def is_loaded(self) -> bool:
        return self._transcript is not None

    # -- mutations -----------------------------------------------------------

    def load_transcript(
        self,
        transcript: Transcript | TranscriptResult,
        input_path: str | None = None,
    ) -> None:
        """Start a new session; clears deletions and rewinds to 0."""
        if isinstance(transcript, TranscriptResult):
            input_path = input_path or transcript.input_path
            self._duration = transcript.duration_seconds
            transcript = transcript.to_transcript()
        else:
            self._duration = 0.0

        self._transcript = transcript
        self._input_path = input_path
        self._deletions = set()
        self._current_time = 0.0
        self._touch()
        log_step("Edit", f"Loaded transcript: {len(transcript.words())} words")

    def toggle_word(self, word_id: str) -> bool:
        """Flip a word's deleted flag. Returns True if it is now deleted."""
        if word_id in self._deletions:
            self._deletions.discard(word_id)
            deleted = False
        else:
            self._deletions.add(word_id)
            deleted = True
        self._touch()
        log_step("Edit", f"{'Deleted' if deleted else 'Restored'} {word_id} ({len(self._deletions)} deleted)")
        return deleted

    def delete_word(self, word_id: str) -> None:
        self._deletions.add(word_id)
        self._touch()

    def restore_word(self, word_id: str) -> None:
        self._deletions.discard(word_id)
        self._touch()

    def restore_all(self) -> None:
        self._deletions = set()
        self._touch()

    def set_current_time(self, time: float) -> None:
        self._current_time = time
        self._touch()

    def reset(self) -> None:
        self._transcript = None
        self._deletions = set()
        self._current_time = 0.0
        self._input_path = None
        self._duration = 0.0
        self._touch()

    def _touch(self) -> None:
        self.version += 1

    # -- derived reads -------------------------------------------------------

    def is_deleted(self, word_id: str) -> bool:
        return word_id in self._deletions

    @property
    def deleted_count(self) -> int:
        return len(self._deletions)

    @property
    def words(self) -> list[Word]:
        return self._transcript.words() if self._transcript else []

    @property
    def keep_ranges(self) -> list[KeepRange]:
        return derive_keep_ranges(
            self._transcript,
            self._deletions,
            gap_threshold=self.config.gap_threshold,
        )

    @property
    def active_word_id(self) -> str | None:
        """Id of the first word (in transcript order) under the playhead."""
        for word in self.words:
            if word.contains(self._current_time):
                return word.id
        return None

    @property
    def original_duration(self) -> float:
        """Length of the source recording, falling back to the transcript's extent."""
        if self._duration > 0:
            return self._duration
        return self._transcript.end_time if self._transcript else 0.0

    @property
    def edited_duration(self) -> float:
        return total_kept(self.keep_ranges)
