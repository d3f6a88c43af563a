from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Sequence, Tuple


@dataclass(frozen=True)
class Cue:
    """
    单条字幕（cue），对应 SRT 中的一个时间轴块。

    - index      : 序号行，决定显示顺序；
    - time_range : 时间轴行，原样保留，不做解析；
    - lines      : 字幕文本行，可以为空。

    Cue 为不可变值对象：翻译与合并都会生成新的 Cue，
    原文轨道与译文轨道互不影响。
    """

    index: int
    time_range: str
    lines: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # 允许传入 list，统一转换为 tuple 以保持不可变
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    def with_lines(self, lines: Iterable[str]) -> "Cue":
        return replace(self, lines=tuple(lines))

    def merge(self, other: "Cue") -> "Cue":
        return merge_cues(self, other)


def merge_cues(original: Cue, translated: Cue) -> Cue:
    """
    将两条字幕按行拼接：原文行在前，译文行在后。

    只做结构上的合并，不校验两条字幕在语义上是否对应；
    序号与时间轴沿用 original。
    """
    return original.with_lines(original.lines + translated.lines)


def merge_tracks(originals: Sequence[Cue], translations: Sequence[Cue]) -> List[Cue]:
    """
    按位置逐条合并两条字幕轨道，返回双语字幕列表。

    两条轨道的序号可以不同，但条目数必须一致。
    """
    if len(originals) != len(translations):
        raise ValueError(
            f"字幕条目数不一致，无法合并: 原文 {len(originals)} 条，译文 {len(translations)} 条"
        )
    return [merge_cues(o, t) for o, t in zip(originals, translations)]
