from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from dualsubs.subtitles import Cue


class TranslationError(RuntimeError):
    """翻译服务调用失败（网络错误、非 2xx 状态码、响应格式异常等）。"""


class TranslationMismatchError(TranslationError):
    """翻译结果条数与请求条数不一致。"""


class TranslationEngine(ABC):
    """
    翻译引擎抽象接口。

    具体实现负责把一批字幕发送给翻译服务，并返回与输入一一对应的
    译文字幕；译文字幕沿用原字幕的序号与时间轴。
    """

    @abstractmethod
    def translate_cues(
        self,
        cues: List[Cue],
        source_lang: str,
        target_lang: str,
    ) -> List[Cue]:
        """
        翻译一批字幕，返回与 cues 等长、顺序一致的新字幕列表。
        """

    def close(self) -> None:
        """释放引擎持有的连接等资源；默认无需处理。"""
