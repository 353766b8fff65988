"""transcut process — automatic silence trimming and enhancement."""

from __future__ import annotations

import click
from rich.console import Console

from transcut.cli.options import config_option
from transcut.ingestion.transcribe import WhisperTranscriber
from transcut.models.config import load_settings
from transcut.pipeline.channel import EventChannel, connect_pipeline
from transcut.pipeline.orchestrator import process_video
from transcut.pipeline.state import PipelineState
from transcut.utils.progress import log_error, show_stage_summary, stage_table

console = Console()


@click.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--cut-silences/--no-cut-silences", default=None, help="Remove detected silences.")
@click.option("--enhance/--no-enhance", default=None, help="Denoise and normalize the audio.")
@click.option("--language", default=None, help="Language hint for transcription.")
@config_option
def process_cmd(
    input_path: str,
    cut_silences: bool | None,
    enhance: bool | None,
    language: str | None,
    config_path: str,
) -> None:
    """Transcribe, trim silences and enhance a recording in one run."""
    settings = load_settings(config_path)
    state = PipelineState(settings.pipeline)
    overrides = {
        key: value
        for key, value in {
            "cut_silences": cut_silences,
            "enhance_audio": enhance,
            "language": language,
        }.items()
        if value is not None
    }
    state.update_config(**overrides)
    state.set_file(input_path)

    channel = EventChannel()
    detach = connect_pipeline(channel, state)
    try:
        process_video(
            input_path,
            state.config,
            emit=channel.emit,
            transcriber=WhisperTranscriber(settings.transcription),
            export_config=settings.export,
        )
    except Exception as e:
        log_error(state.error or f"Pipeline failed: {e}")
        raise SystemExit(1)
    finally:
        detach()
        console.print(stage_table(state.stages))

    result = state.result
    if result is not None:
        stats = result.stats
        show_stage_summary(
            "Pipeline",
            stats.processed_duration,
            {
                "Output": result.output_path,
                "Original": f"{stats.original_duration:.1f}s",
                "Silence removed": f"{stats.removed_silence_duration:.1f}s ({stats.silence_percentage:.1f}%)",
                "Size": f"{stats.original_size_bytes / 1_000_000:.1f} MB",
            },
        )
