from __future__ import annotations

import pytest

from transcut.models.pipeline import (
    EventDecodeError,
    PipelineCompleted,
    PipelineFailed,
    StageCompleted,
    StageFailed,
    StageProgress,
    StageStarted,
    event_to_wire,
    parse_event,
)


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"StageStarted": {"stage": "transcribe"}}, StageStarted(stage="transcribe")),
        ({"StageProgress": {"stage": "export", "progress": 0.25}}, StageProgress(stage="export", progress=0.25)),
        ({"StageCompleted": {"stage": "export"}}, StageCompleted(stage="export")),
        ({"StageFailed": {"stage": "export", "error": "disk full"}}, StageFailed(stage="export", error="disk full")),
        ({"PipelineFailed": {"error": "no ffmpeg"}}, PipelineFailed(error="no ffmpeg")),
    ],
)
def test_parse_event_variants(payload: dict, expected: object) -> None:
    assert parse_event(payload) == expected


def test_parse_pipeline_completed_carries_result() -> None:
    payload = {
        "PipelineCompleted": {
            "result": {
                "output_path": "/tmp/talk_edited.mp4",
                "transcript": {
                    "segments": [
                        {
                            "id": 0,
                            "start": 0.0,
                            "end": 1.0,
                            "text": "hello",
                            "words": [{"id": "w0", "word": "hello", "start": 0.0, "end": 1.0}],
                        }
                    ],
                    "language": "en",
                },
                "stats": {"original_duration": 10.0, "processed_duration": 8.0},
            }
        }
    }

    event = parse_event(payload)

    assert isinstance(event, PipelineCompleted)
    assert event.result.output_path == "/tmp/talk_edited.mp4"
    assert event.result.transcript.words()[0].text == "hello"
    assert event.result.stats.processed_duration == 8.0


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"StageStarted": {"stage": "a"}, "StageCompleted": {"stage": "a"}},
        {"StageExploded": {"stage": "a"}},
        {"StageStarted": "transcribe"},
        {"StageStarted": {}},
        {"StageStarted": {"stage": "a", "extra": 1}},
        {"StageProgress": {"stage": "a", "progress": "lots"}},
    ],
)
def test_parse_event_rejects_malformed_payloads(payload: dict) -> None:
    with pytest.raises(EventDecodeError):
        parse_event(payload)


def test_event_to_wire_uses_variant_tag() -> None:
    assert event_to_wire(StageFailed(stage="export", error="x")) == {
        "StageFailed": {"stage": "export", "error": "x"}
    }
    wire = event_to_wire(StageProgress(stage="transcribe", progress=0.5))
    assert parse_event(wire) == StageProgress(stage="transcribe", progress=0.5)
