from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

FFMPEG_LOGLEVEL = "error"

# MP4 系列容器只支持 mov_text 字幕
_MOV_TEXT_CONTAINERS = {".mp4", ".m4v", ".mov", ".3gp"}
_WEBVTT_CONTAINERS = {".webm"}


class FFmpegError(RuntimeError):
    """ffmpeg / ffprobe 执行失败，output 中保留工具的原始输出。"""

    def __init__(self, message: str, output: str = "", returncode: int | None = None) -> None:
        super().__init__(message)
        self.output = output
        self.returncode = returncode


def _ffmpeg_bin() -> str:
    return os.getenv("DUALSUBS_FFMPEG", "ffmpeg")


def _ffprobe_bin() -> str:
    return os.getenv("DUALSUBS_FFPROBE", "ffprobe")


def run_ffmpeg(cmd: Sequence[str]) -> str:
    try:
        proc = subprocess.run(
            list(cmd),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise FFmpegError(f"找不到可执行文件: {cmd[0]}") from exc
    if proc.returncode:
        raise FFmpegError(
            f"{Path(cmd[0]).name} 执行失败 ({proc.returncode}):\n{proc.stdout}",
            output=proc.stdout,
            returncode=proc.returncode,
        )
    return proc.stdout


def subtitle_codec_for(path: str | Path) -> str:
    """
    根据输出容器选择字幕编码：MP4 系列使用 mov_text，
    WebM 使用 webvtt，其它（如 MKV）使用 srt。
    """
    suffix = Path(path).suffix.lower()
    if suffix in _MOV_TEXT_CONTAINERS:
        return "mov_text"
    if suffix in _WEBVTT_CONTAINERS:
        return "webvtt"
    return "srt"


def extract_subtitle(video: str | Path, output: str | Path) -> Path:
    """
    提取视频中的第一条字幕流，并转换为 SRT 文件。
    """
    video_path = Path(video).expanduser().resolve()
    if not video_path.exists():
        raise FileNotFoundError(f"输入文件不存在: {video_path}")
    output_path = Path(output).expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = [
        _ffmpeg_bin(), "-v", FFMPEG_LOGLEVEL, "-y",
        "-i", str(video_path),
        "-map", "0:s:0",
        "-c:s", "srt",
        str(output_path),
    ]
    run_ffmpeg(cmd)
    if not output_path.is_file():
        raise FFmpegError(f"未能从 {video_path} 提取字幕")
    return output_path


def count_subtitle_streams(video: str | Path) -> int:
    cmd = [
        _ffprobe_bin(), "-v", FFMPEG_LOGLEVEL,
        "-select_streams", "s",
        "-show_entries", "stream=index",
        "-of", "csv=p=0",
        str(video),
    ]
    output = run_ffmpeg(cmd)
    return sum(1 for line in output.splitlines() if line.strip())


def combine_files(
    video: str | Path,
    subtitles: Sequence[str | Path],
    output: str | Path,
    languages: Optional[Sequence[Optional[str]]] = None,
) -> Path:
    """
    将若干字幕文件封装进视频副本。

    原有的音视频与字幕流全部直接复制（-c copy），只对新增的字幕流
    按目标容器选择编码；languages 与 subtitles 一一对应，用于写入
    新字幕流的 language 元数据。
    """
    video_path = Path(video).expanduser().resolve()
    output_path = Path(output).expanduser().resolve()
    if output_path == video_path:
        raise ValueError(f"输出文件不能覆盖输入文件: {video_path}")
    if languages is not None and len(languages) != len(subtitles):
        raise ValueError("languages 的数量必须与字幕文件数量一致")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    existing = count_subtitle_streams(video_path)
    codec = subtitle_codec_for(output_path)

    cmd: List[str] = [_ffmpeg_bin(), "-v", FFMPEG_LOGLEVEL, "-y", "-i", str(video_path)]
    for sub in subtitles:
        cmd += ["-i", str(Path(sub).expanduser().resolve())]
    cmd += ["-map", "0"]
    for i in range(len(subtitles)):
        cmd += ["-map", str(i + 1)]
    cmd += ["-c", "copy"]
    for i in range(len(subtitles)):
        stream = existing + i
        cmd += [f"-c:s:{stream}", codec]
        if languages is not None and languages[i]:
            cmd += [f"-metadata:s:s:{stream}", f"language={languages[i]}"]
    cmd.append(str(output_path))

    run_ffmpeg(cmd)
    return output_path
