from __future__ import annotations

from .ffmpeg import (
    FFmpegError,
    combine_files,
    count_subtitle_streams,
    extract_subtitle,
    run_ffmpeg,
    subtitle_codec_for,
)

__all__ = [
    "FFmpegError",
    "combine_files",
    "count_subtitle_streams",
    "extract_subtitle",
    "run_ffmpeg",
    "subtitle_codec_for",
]
