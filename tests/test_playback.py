from __future__ import annotations

import pytest

from transcut.editing.playback import PlaybackSync
from transcut.editing.session import EditSession

from .helpers import abc_transcript, make_transcript


class FakeSurface:
    def __init__(self) -> None:
        self.seeks: list[float] = []

    def seek(self, time: float) -> None:
        self.seeks.append(time)


def _sync(*deleted: str) -> tuple[PlaybackSync, FakeSurface]:
    session = EditSession()
    session.load_transcript(abc_transcript(), "clip.mp4")
    for word_id in deleted:
        session.delete_word(word_id)
    surface = FakeSurface()
    return PlaybackSync(session, surface), surface


def test_skips_deleted_word_while_playing() -> None:
    sync, surface = _sync("b")

    target = sync.on_time_update(1.5, is_paused=False)

    assert target == pytest.approx(2.01)
    assert surface.seeks == [pytest.approx(2.01)]
    assert sync.last_seek_time == pytest.approx(2.01)


def test_landing_tick_does_not_retrigger() -> None:
    sync, surface = _sync("b")
    sync.on_time_update(1.5, is_paused=False)

    assert sync.on_time_update(2.01, is_paused=False) is None
    assert len(surface.seeks) == 1


def test_guard_suppresses_seek_when_landing_rounds_back_into_deleted_word() -> None:
    session = EditSession()
    session.load_transcript(make_transcript(("a", 0.0, 1.0), ("b", 1.0, 2.0), ("c", 2.0, 3.0)), "clip.mp4")
    session.delete_word("b")
    session.delete_word("c")
    surface = FakeSurface()
    sync = PlaybackSync(session, surface)

    sync.on_time_update(1.2, is_paused=False)
    assert surface.seeks == [pytest.approx(3.01)]

    # Surface reports a position slightly before where it was sent.
    assert sync.on_time_update(2.95, is_paused=False) is None
    assert len(surface.seeks) == 1


def test_no_skip_while_paused() -> None:
    sync, surface = _sync("b")

    assert sync.on_time_update(1.5, is_paused=True) is None
    assert surface.seeks == []
    assert sync.session.current_time == 1.5


def test_no_skip_without_deletions() -> None:
    sync, surface = _sync()

    assert sync.on_time_update(1.5, is_paused=False) is None
    assert surface.seeks == []


def test_no_skip_outside_deleted_words() -> None:
    sync, surface = _sync("b")

    assert sync.on_time_update(0.5, is_paused=False) is None
    assert sync.on_time_update(2.2, is_paused=False) is None
    assert surface.seeks == []


def test_later_deleted_word_still_skips_after_earlier_seek() -> None:
    sync, surface = _sync("a", "c")

    sync.on_time_update(0.2, is_paused=False)
    sync.on_time_update(2.7, is_paused=False)

    assert surface.seeks == [pytest.approx(1.01), pytest.approx(3.01)]


def test_time_updates_move_active_word() -> None:
    sync, _ = _sync()

    sync.on_time_update(2.7, is_paused=False)

    assert sync.session.active_word_id == "c"


def test_manual_seek_bypasses_skip_logic() -> None:
    sync, surface = _sync("b")

    sync.seek(1.5)

    assert surface.seeks == [1.5]
    assert sync.session.current_time == 1.5
    assert sync.session.active_word_id == "b"


def test_reset_forgets_last_seek() -> None:
    sync, surface = _sync("b")
    sync.on_time_update(1.5, is_paused=False)

    sync.reset()

    assert sync.on_time_update(1.95, is_paused=False) == pytest.approx(2.01)
    assert len(surface.seeks) == 2
