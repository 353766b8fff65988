"""FFprobe wrapper for media metadata."""

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass
class MediaInfo:
    """Container-level metadata extracted via FFprobe."""

    path: str
    duration_seconds: float
    size_bytes: int
    has_audio: bool


def probe_media(path: Path | str) -> MediaInfo:
    """Probe a media file with FFprobe and return metadata."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Media file not found: {path}")

    result = subprocess.run(
        [
            "ffprobe",
            "-v", "quiet",
            "-print_format", "json",
            "-show_format",
            "-show_streams",
            str(path),
        ],
        capture_output=True,
        text=True,
        check=True,
    )

    data = json.loads(result.stdout)
    streams = data.get("streams", [])
    fmt = data.get("format", {})

    return MediaInfo(
        path=str(path),
        duration_seconds=float(fmt.get("duration", 0) or 0),
        size_bytes=int(fmt.get("size", 0) or path.stat().st_size),
        has_audio=any(s.get("codec_type") == "audio" for s in streams),
    )
