from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, List

from .types import Cue


_INDEX_PATTERN = re.compile(r"[0-9]+")


def _parse_index(line: str) -> int | None:
    text = line.lstrip("\ufeff").strip()
    if not _INDEX_PATTERN.fullmatch(text):
        return None
    index = int(text)
    return index if index > 0 else None


def iter_cues(lines: Iterable[str]) -> Iterator[Cue]:
    """
    从任意逐行数据源（列表、文件对象、网络流等）惰性解析字幕。

    每条字幕的读取步骤：
      1. 读取序号行；数据源耗尽或该行不是整数时结束（不报错）；
      2. 读取时间轴行，原样保留；
      3. 读取文本行直到遇到空行或数据源耗尽，空行被消耗但不计入文本。
    """
    source = (line.rstrip("\r\n") for line in lines)
    while True:
        line = next(source, None)
        if line is None:
            return
        index = _parse_index(line)
        if index is None:
            return

        time_range = next(source, None)
        if time_range is None:
            return

        text_lines: List[str] = []
        for text in source:
            if not text.strip():
                break
            text_lines.append(text)

        yield Cue(index=index, time_range=time_range, lines=tuple(text_lines))


def read_cues(path: str | Path) -> Iterator[Cue]:
    """
    逐条读取 SRT 文件中的字幕。

    文件在生成器内部打开，读取完毕、提前关闭或出错时都会释放句柄；
    每次调用都会重新打开文件，从头开始读取。
    """
    srt_path = Path(path).expanduser().resolve()
    with srt_path.open("r", encoding="utf-8-sig") as fh:
        yield from iter_cues(fh)
