from __future__ import annotations

import json

from click.testing import CliRunner

from transcut import __version__
from transcut.cli.main import cli
from transcut.models.config import Settings, load_settings
from transcut.utils.io import read_yaml, write_json

from .helpers import abc_transcript, make_result


def _write_transcript(tmp_path) -> str:
    path = tmp_path / "talk.transcript.json"
    write_json(path, make_result(abc_transcript(), duration=4.0).model_dump(mode="json", by_alias=True))
    return str(path)


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_ranges_json(tmp_path) -> None:
    transcript = _write_transcript(tmp_path)

    result = CliRunner().invoke(
        cli,
        ["ranges", transcript, "--delete", "b", "--json", "--config", str(tmp_path / "none.yaml")],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output.strip().splitlines()[-1]) == [[0.0, 1.0], [2.5, 3.0]]


def test_ranges_table(tmp_path) -> None:
    transcript = _write_transcript(tmp_path)

    result = CliRunner().invoke(cli, ["ranges", transcript, "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0, result.output


def test_export_with_everything_deleted_fails(tmp_path) -> None:
    transcript = _write_transcript(tmp_path)

    result = CliRunner().invoke(
        cli,
        ["export", transcript, "-d", "a", "-d", "b", "-d", "c", "--config", str(tmp_path / "none.yaml")],
    )

    assert result.exit_code == 1


def test_init_writes_default_settings(tmp_path) -> None:
    path = tmp_path / "transcut.yaml"

    result = CliRunner().invoke(cli, ["init", "--output", str(path)])

    assert result.exit_code == 0, result.output
    assert load_settings(path) == Settings()
    assert read_yaml(path)["export"]["video_codec"] == "libx264"


def test_init_refuses_to_overwrite_without_force(tmp_path) -> None:
    path = tmp_path / "transcut.yaml"
    path.write_text("pipeline:\n  cut_silences: false\n")

    refused = CliRunner().invoke(cli, ["init", "--output", str(path)])
    assert refused.exit_code == 1
    assert load_settings(path).pipeline.cut_silences is False

    forced = CliRunner().invoke(cli, ["init", "--output", str(path), "--force"])
    assert forced.exit_code == 0
    assert load_settings(path).pipeline.cut_silences is True
