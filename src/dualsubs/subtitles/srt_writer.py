from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, Optional

from .types import Cue


def cue_to_srt(cue: Cue) -> str:
    """
    渲染单条字幕：序号行、时间轴行、各文本行，每行以换行结尾。
    """
    lines = [str(cue.index), cue.time_range, *cue.lines]
    return "".join(f"{line}\n" for line in lines)


def cues_to_srt(cues: Iterable[Cue]) -> str:
    # 字幕块之间以一个空行分隔，最后一条之后不再追加空行
    return "\n".join(cue_to_srt(cue) for cue in cues)


class SrtWriter:
    """
    增量写出 SRT 文件。

    Pipeline 按批次写入字幕，逐批追加的结果与一次性
    cues_to_srt(全部字幕) 完全一致。作为上下文管理器使用时，
    即使中途抛出异常也会关闭文件（已写入的部分保留在磁盘上）。
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser().resolve()
        self.count = 0
        self._fh: Optional[IO[str]] = None

    def open(self) -> "SrtWriter":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("w", encoding="utf-8", newline="\n")
        self.count = 0
        return self

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "SrtWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write(self, cue: Cue) -> None:
        if self._fh is None:
            raise RuntimeError(f"SrtWriter 未打开: {self.path}")
        if self.count:
            self._fh.write("\n")
        self._fh.write(cue_to_srt(cue))
        self.count += 1

    def write_all(self, cues: Iterable[Cue]) -> None:
        for cue in cues:
            self.write(cue)


def write_srt(cues: Iterable[Cue], path: str | Path) -> Path:
    with SrtWriter(path) as writer:
        writer.write_all(cues)
    return writer.path
