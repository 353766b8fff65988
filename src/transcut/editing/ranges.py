"""Keep-range derivation from word deletions.

All functions here are pure: they read a transcript and a set of deleted
word ids and never mutate either.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence, Set
from typing import NamedTuple

from transcut.models.config import GAP_THRESHOLD, KEEP_EPSILON
from transcut.models.transcript import Transcript, Word


class KeepRange(NamedTuple):
    """A time span of the source recording that survives the edit."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start


def derive_keep_ranges(
    transcript: Transcript | None,
    deletions: Set[str],
    *,
    gap_threshold: float = GAP_THRESHOLD,
) -> list[KeepRange]:
    """Merge the intervals of all non-deleted words into ordered keep-ranges.

    Words are sorted by start time (stable, so ties keep transcript order).
    A word whose start lies less than ``gap_threshold`` after the end of the
    current range extends that range; otherwise it opens a new one.
    """
    if transcript is None:
        return []

    kept = [w for w in transcript.words() if w.id not in deletions]
    if not kept:
        return []

    kept.sort(key=lambda w: w.start)

    merged: list[list[float]] = []
    for word in kept:
        if merged and word.start - merged[-1][1] < gap_threshold:
            merged[-1][1] = max(merged[-1][1], word.end)
        else:
            merged.append([word.start, word.end])

    return [KeepRange(start, end) for start, end in merged]


def _deleted_words(transcript: Transcript, deletions: Set[str]) -> list[Word]:
    deleted = [w for w in transcript.words() if w.id in deletions]
    deleted.sort(key=lambda w: w.start)
    return deleted


def is_time_deleted(
    transcript: Transcript | None,
    deletions: Set[str],
    time: float,
) -> Word | None:
    """Return the deleted word covering ``time``, earliest start first."""
    if transcript is None or not deletions:
        return None
    for word in _deleted_words(transcript, deletions):
        if word.contains(time):
            return word
    return None


def find_next_keep_time(
    transcript: Transcript | None,
    deletions: Set[str],
    after_time: float,
    *,
    epsilon: float = KEEP_EPSILON,
) -> float | None:
    """Earliest time at or after ``after_time + epsilon`` outside every deleted word.

    Deleted words that touch or overlap are hopped over one after another.
    Returns None only when the transcript has no words at all.
    """
    if transcript is None or not transcript.words():
        return None

    check_time = after_time + epsilon
    for word in _deleted_words(transcript, deletions):
        if word.contains(check_time):
            check_time = word.end + epsilon
    return check_time


def silence_keep_ranges(
    silences: Iterable[tuple[float, float]],
    duration: float,
    *,
    cut_margin: float,
) -> list[KeepRange]:
    """Keep-ranges for the audible parts between detected silences.

    ``cut_margin`` seconds of each silence are kept on both sides of the
    speech so cuts do not clip word onsets or tails.
    """
    ranges: list[KeepRange] = []
    last_end = 0.0

    for silence_start, silence_end in silences:
        keep_end = min(silence_start + cut_margin, duration)
        if keep_end > last_end:
            ranges.append(KeepRange(last_end, keep_end))

        next_start = max(silence_end - cut_margin, 0.0)
        last_end = max(next_start, keep_end)

    if last_end < duration:
        ranges.append(KeepRange(last_end, duration))

    return ranges


def total_kept(ranges: Sequence[tuple[float, float]]) -> float:
    """Summed duration of a list of ranges."""
    return sum(end - start for start, end in ranges)
