from __future__ import annotations

import pytest
from pydantic import ValidationError

from transcut.models.config import SEEK_GUARD, PipelineConfig, Settings, load_settings
from transcut.utils.io import read_yaml, write_yaml


def test_missing_file_gives_defaults(tmp_path) -> None:
    assert load_settings(tmp_path / "nope.yaml") == Settings()
    assert load_settings(None) == Settings()


def test_load_settings_merges_sections(tmp_path) -> None:
    path = tmp_path / "transcut.yaml"
    write_yaml(path, {
        "editor": {"gap_threshold": 0.25},
        "pipeline": {"cut_silences": False, "language": "es"},
        "export": {"video_codec": "h264_videotoolbox"},
    })

    settings = load_settings(path)

    assert settings.editor.gap_threshold == 0.25
    assert settings.editor.seek_guard == SEEK_GUARD
    assert settings.pipeline.cut_silences is False
    assert settings.pipeline.language == "es"
    assert settings.pipeline.enhance_audio is True
    assert settings.export.video_codec == "h264_videotoolbox"
    assert settings.transcription.model == "base"


def test_yaml_round_trip(tmp_path) -> None:
    path = tmp_path / "nested" / "out.yaml"
    write_yaml(path, {"a": 1, "b": ["x", "y"]})
    assert read_yaml(path) == {"a": 1, "b": ["x", "y"]}


def test_out_of_range_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        PipelineConfig(silence_threshold_db=10.0)
    with pytest.raises(ValidationError):
        PipelineConfig(silence_min_duration=0.0)
