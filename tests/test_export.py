from __future__ import annotations

from collections.abc import Sequence

import pytest

from transcut.editing.export import ExportController, ExportValidationError, reconcile_export
from transcut.editing.session import EditSession
from transcut.models.pipeline import Screen
from transcut.pipeline.state import PipelineState

from .helpers import abc_transcript, make_result


class FakeExporter:
    def __init__(self, output_path: str = "/nonexistent/talk_edited.mp4", fail: Exception | None = None) -> None:
        self.output_path = output_path
        self.fail = fail
        self.calls: list[tuple[str, list[tuple[float, float]], bool]] = []

    def export(self, input_path: str, keep_ranges: Sequence[tuple[float, float]], enhance_audio: bool) -> str:
        self.calls.append((input_path, list(keep_ranges), enhance_audio))
        if self.fail is not None:
            raise self.fail
        return self.output_path


def test_blank_input_is_rejected_before_exporter_runs() -> None:
    exporter = FakeExporter()
    with pytest.raises(ExportValidationError):
        reconcile_export("  ", [(0.0, 1.0)], False, exporter=exporter)
    with pytest.raises(ExportValidationError):
        reconcile_export(None, [(0.0, 1.0)], False, exporter=exporter)
    assert exporter.calls == []


def test_empty_keep_ranges_are_rejected_before_exporter_runs() -> None:
    exporter = FakeExporter()
    with pytest.raises(ExportValidationError):
        reconcile_export("talk.mp4", [], True, exporter=exporter)
    assert exporter.calls == []


def test_stats_are_computed_from_keep_ranges(tmp_path) -> None:
    output = tmp_path / "talk_edited.mp4"
    output.write_bytes(b"x" * 128)
    exporter = FakeExporter(str(output))

    result = reconcile_export(
        "talk.mp4",
        [(0.0, 1.0), (2.5, 3.0)],
        True,
        exporter=exporter,
        original_duration=4.0,
    )

    assert exporter.calls == [("talk.mp4", [(0.0, 1.0), (2.5, 3.0)], True)]
    assert result.output_path == str(output)
    assert result.stats.original_duration == 4.0
    assert result.stats.original_size_bytes == 128
    assert result.stats.processed_duration == pytest.approx(1.5)
    assert result.stats.removed_silence_duration == pytest.approx(2.5)
    assert result.stats.silence_percentage == pytest.approx(62.5)


def test_zero_duration_gives_zero_percentage() -> None:
    result = reconcile_export("talk.mp4", [(0.0, 1.0)], False, exporter=FakeExporter())
    assert result.stats.silence_percentage == 0.0
    assert result.stats.removed_silence_duration == 0.0
    assert result.stats.original_size_bytes == 0


def _session(*deleted: str) -> EditSession:
    session = EditSession()
    session.load_transcript(make_result(abc_transcript(), duration=4.0))
    for word_id in deleted:
        session.delete_word(word_id)
    return session


def test_controller_success_completes_pipeline_and_resets_session() -> None:
    session = _session("b")
    pipeline = PipelineState()
    exporter = FakeExporter()
    controller = ExportController(session, pipeline, exporter)

    result = controller.export(enhance_audio=True)

    assert exporter.calls == [("talk.mp4", [(0.0, 1.0), (2.5, 3.0)], True)]
    assert [w.id for w in result.transcript.words()] == ["a", "b", "c"]
    assert pipeline.result == result
    assert pipeline.screen == Screen.done
    assert not session.is_loaded
    assert not controller.is_exporting
    assert controller.error is None


def test_controller_failure_keeps_session() -> None:
    session = _session("b")
    pipeline = PipelineState()
    controller = ExportController(session, pipeline, FakeExporter(fail=RuntimeError("encoder crashed")))

    with pytest.raises(RuntimeError):
        controller.export(enhance_audio=False)

    assert controller.error == "Export failed: encoder crashed"
    assert not controller.is_exporting
    assert session.is_loaded
    assert session.is_deleted("b")
    assert pipeline.result is None


def test_controller_rejects_fully_deleted_session() -> None:
    session = _session("a", "b", "c")
    exporter = FakeExporter()
    controller = ExportController(session, PipelineState(), exporter)

    with pytest.raises(ExportValidationError):
        controller.export(enhance_audio=False)

    assert exporter.calls == []
    assert controller.error is not None
    assert session.is_loaded
