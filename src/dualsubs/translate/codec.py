"""
字幕与翻译请求文本之间的编解码。

翻译服务以 HTML 格式接收文本，会合并、调整行之间的空白，
因此每一行字幕都包在 <span>…</span> 中，解码时依靠这些标记
恢复行边界。行内容在编码时做 HTML 转义，解码时先按标记切分，
再逐段反转义，这样文本里出现的尖括号（哪怕是 "</span>" 本身）
也不会提前截断一行。
"""

from __future__ import annotations

import html
import re
from typing import List, Sequence

from dualsubs.subtitles import Cue

from .translator import TranslationMismatchError

SPAN_OPEN = "<span>"
SPAN_CLOSE = "</span>"

_SPAN_PATTERN = re.compile(
    re.escape(SPAN_OPEN) + r"(.*?)" + re.escape(SPAN_CLOSE),
    re.DOTALL,
)


def encode_cue(cue: Cue) -> str:
    return "".join(
        f"{SPAN_OPEN}{html.escape(line, quote=False)}{SPAN_CLOSE}" for line in cue.lines
    )


def encode_cues(cues: Sequence[Cue]) -> List[str]:
    return [encode_cue(cue) for cue in cues]


_LINE_BREAKS = re.compile(r"[\r\n]+")


def decode_lines(text: str) -> List[str]:
    """
    按顺序取出每个 <span> 中的文本。

    段内换行折叠为一个空格，空段丢弃，保证写出的 SRT 中
    不会出现提前结束字幕块的空行。
    """
    lines: List[str] = []
    for match in _SPAN_PATTERN.finditer(text):
        line = _LINE_BREAKS.sub(" ", html.unescape(match.group(1))).strip()
        if line:
            lines.append(line)
    return lines


def decode_cue(original: Cue, text: str) -> Cue:
    """
    将翻译服务返回的一条文本还原为字幕。

    序号与时间轴取自 original，翻译服务不会接触时间信息。
    """
    return original.with_lines(decode_lines(text))


def decode_cues(originals: Sequence[Cue], translations: Sequence[str]) -> List[Cue]:
    if len(originals) != len(translations):
        raise TranslationMismatchError(
            f"翻译返回条数与请求不一致: 请求 {len(originals)} 条，返回 {len(translations)} 条"
        )
    return [decode_cue(cue, text) for cue, text in zip(originals, translations)]
