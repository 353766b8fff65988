"""transcut export — render the edited recording."""

from __future__ import annotations

import click

from transcut.cli.options import config_option, delete_option, open_session
from transcut.editing.export import ExportController, FFmpegExporter
from transcut.models.config import load_settings
from transcut.pipeline.state import PipelineState
from transcut.utils.progress import show_stage_summary


@click.command()
@click.argument("transcript", type=click.Path(exists=True, dir_okay=False))
@delete_option
@click.option(
    "--input", "input_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Source recording (default: the input recorded in the transcript).",
)
@click.option("--enhance/--no-enhance", default=True, help="Denoise and normalize the audio.")
@config_option
def export_cmd(
    transcript: str,
    delete_ids: tuple[str, ...],
    input_path: str | None,
    enhance: bool,
    config_path: str,
) -> None:
    """Export the recording without the deleted words."""
    settings = load_settings(config_path)
    session = open_session(transcript, delete_ids, settings, input_path=input_path)
    pipeline = PipelineState(settings.pipeline)
    controller = ExportController(session, pipeline, FFmpegExporter(settings.export))

    try:
        result = controller.export(enhance_audio=enhance)
    except Exception:
        raise SystemExit(1)

    stats = result.stats
    show_stage_summary(
        "Export",
        stats.processed_duration,
        {
            "Output": result.output_path,
            "Original": f"{stats.original_duration:.1f}s",
            "Removed": f"{stats.removed_silence_duration:.1f}s ({stats.silence_percentage:.1f}%)",
            "Size": f"{stats.original_size_bytes / 1_000_000:.1f} MB",
        },
    )
