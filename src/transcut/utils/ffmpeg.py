"""FFmpeg command builder and runner."""

from __future__ import annotations

import re
import subprocess
from collections.abc import Sequence
from pathlib import Path

from transcut.models.config import ExportConfig
from transcut.utils.progress import log_step

ENHANCE_FILTER = "afftdn=nf=-25,loudnorm=I=-16:TP=-1.5:LRA=11"

_SILENCE_START = re.compile(r"silence_start:\s*(-?[\d.]+)")
_SILENCE_END = re.compile(r"silence_end:\s*(-?[\d.]+)")


class FFmpegError(Exception):
    """Raised when an FFmpeg command fails."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"FFmpeg failed (rc={returncode}): {stderr[:500]}")


def run_ffmpeg(
    args: list[str],
    *,
    check: bool = True,
    loglevel: str = "error",
) -> subprocess.CompletedProcess:
    """Run an FFmpeg command with standard options."""
    cmd = ["ffmpeg", "-y", "-hide_banner", "-loglevel", loglevel] + args
    result = subprocess.run(cmd, capture_output=True, text=True)
    if check and result.returncode != 0:
        raise FFmpegError(cmd, result.returncode, result.stderr)
    return result


def parse_silencedetect(output: str) -> list[tuple[float, float]]:
    """Pair up ``silence_start``/``silence_end`` lines from silencedetect output."""
    silences: list[tuple[float, float]] = []
    current_start: float | None = None

    for line in output.splitlines():
        start_match = _SILENCE_START.search(line)
        if start_match:
            current_start = float(start_match.group(1))
        end_match = _SILENCE_END.search(line)
        if end_match and current_start is not None:
            silences.append((current_start, float(end_match.group(1))))
            current_start = None

    return silences


def detect_silences(
    input_path: Path | str,
    *,
    threshold_db: float = -30.0,
    min_duration: float = 0.5,
) -> list[tuple[float, float]]:
    """Find silent stretches with the silencedetect filter."""
    silence_filter = f"silencedetect=noise={threshold_db}dB:d={min_duration}"
    log_step("Silence", f"Detecting silences with filter: {silence_filter}")

    result = run_ffmpeg(
        ["-i", str(input_path), "-af", silence_filter, "-f", "null", "-"],
        loglevel="info",
    )
    silences = parse_silencedetect(result.stderr)

    total = sum(end - start for start, end in silences)
    log_step("Silence", f"Found {len(silences)} silence segments totaling {total:.2f}s")
    return silences


def select_expression(keep_ranges: Sequence[tuple[float, float]]) -> str:
    """``between(t,a,b)+between(t,c,d)+...`` for the select/aselect filters."""
    return "+".join(f"between(t,{start},{end})" for start, end in keep_ranges)


def build_export_filters(
    keep_ranges: Sequence[tuple[float, float]],
    *,
    enhance_audio: bool,
) -> tuple[str, str]:
    """Video and audio filter chains that keep only ``keep_ranges``."""
    expr = select_expression(keep_ranges)
    video_filter = f"select='{expr}',setpts=N/FRAME_RATE/TB"
    audio_filter = f"aselect='{expr}',asetpts=N/SR/TB"
    if enhance_audio:
        audio_filter = f"{audio_filter},{ENHANCE_FILTER}"
    return video_filter, audio_filter


def cut_and_export(
    input_path: Path | str,
    keep_ranges: Sequence[tuple[float, float]],
    output_path: Path | str,
    *,
    enhance_audio: bool,
    config: ExportConfig | None = None,
) -> None:
    """Render only ``keep_ranges`` of the input into ``output_path``."""
    config = config or ExportConfig()
    video_filter, audio_filter = build_export_filters(keep_ranges, enhance_audio=enhance_audio)
    log_step("Export", f"{len(keep_ranges)} keep ranges, enhance={enhance_audio}")

    run_ffmpeg([
        "-i", str(input_path),
        "-vf", video_filter,
        "-af", audio_filter,
        "-c:v", config.video_codec,
        "-b:v", config.video_bitrate,
        "-maxrate", config.video_maxrate,
        "-bufsize", config.video_bufsize,
        "-c:a", config.audio_codec,
        "-b:a", config.audio_bitrate,
        "-ar", str(config.audio_sample_rate),
        "-pix_fmt", "yuv420p",
        "-movflags", "+faststart",
        str(output_path),
    ])


def enhance_audio(input_path: Path | str, output_path: Path | str) -> None:
    """Denoise and loudness-normalize the audio; video is stream-copied."""
    run_ffmpeg([
        "-i", str(input_path),
        "-af", ENHANCE_FILTER,
        "-c:v", "copy",
        str(output_path),
    ])


def copy_video(
    input_path: Path | str,
    output_path: Path | str,
    *,
    config: ExportConfig | None = None,
) -> None:
    """Copy the video stream, re-encode audio, move the index to the front."""
    config = config or ExportConfig()
    run_ffmpeg([
        "-i", str(input_path),
        "-c:v", "copy",
        "-c:a", config.audio_codec,
        "-b:a", config.audio_bitrate,
        "-ar", str(config.audio_sample_rate),
        "-movflags", "+faststart",
        str(output_path),
    ])


def edited_output_path(input_path: Path | str, config: ExportConfig | None = None) -> Path:
    """``clip.mov`` -> ``clip_edited.mp4`` next to the input."""
    config = config or ExportConfig()
    src = Path(input_path)
    return src.with_name(f"{src.stem}{config.output_suffix}{config.output_extension}")
