from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, TypeVar

from .config import DualSubsConfig
from .media import combine_files, extract_subtitle
from .subtitles import Cue, SrtWriter, merge_tracks, read_cues
from .translate import GoogleTranslator, TranslationEngine

T = TypeVar("T")


def batched(iterable: Iterable[T], size: int) -> Iterator[List[T]]:
    """
    将序列切分为连续、互不重叠的批次，最后一批可能不足 size 条。
    """
    if size < 1:
        raise ValueError(f"batch size 必须大于 0: {size}")
    it = iter(iterable)
    while True:
        batch = list(islice(it, size))
        if not batch:
            return
        yield batch


class DualSubsPipeline:
    """
    项目主 Pipeline：提取字幕 -> 分批翻译 -> 写出译文/双语字幕 -> 封装回视频。

    每批字幕只调用一次翻译服务，批次严格按原始顺序写出；
    任何一步失败都会中止整个流程（已写出的部分字幕文件会保留）。
    """

    def __init__(
        self,
        config: DualSubsConfig,
        engine: Optional[TranslationEngine] = None,
    ) -> None:
        self.config = config
        # 只关闭由 Pipeline 自己创建的引擎，外部传入的引擎由调用方管理
        self._owns_engine = engine is None
        if engine is None:
            engine = GoogleTranslator(
                access_token=config.access_token,
                base_url=config.translate_url,
                timeout=config.timeout,
            )
        self.engine = engine

    def extract(self) -> Path:
        print(f"提取字幕: {self.config.input_path}")
        return extract_subtitle(self.config.input_path, self.config.source_srt_path)

    def _translate_batch(self, batch: List[Cue]) -> Tuple[List[Cue], List[Cue]]:
        translated = self.engine.translate_cues(
            batch,
            source_lang=self.config.source_lang,
            target_lang=self.config.target_lang,
        )
        return batch, translated

    def _translated_batches(self) -> Iterator[Tuple[List[Cue], List[Cue]]]:
        batches = batched(read_cues(self.config.source_srt_path), self.config.batch_size)
        if self.config.concurrency <= 1:
            for batch in batches:
                yield self._translate_batch(batch)
            return

        # 并行模式：executor.map 按提交顺序返回结果，保证写出顺序不变
        with ThreadPoolExecutor(max_workers=self.config.concurrency) as executor:
            yield from executor.map(self._translate_batch, batches)

    def translate_subtitles(self) -> int:
        """
        翻译已提取的字幕，分别写出仅译文与双语两份 SRT，返回字幕条数。
        """
        total = 0
        with SrtWriter(self.config.translated_srt_path) as translated_writer, SrtWriter(
            self.config.combined_srt_path
        ) as combined_writer:
            for batch_no, (originals, translated) in enumerate(self._translated_batches(), start=1):
                translated_writer.write_all(translated)
                combined_writer.write_all(merge_tracks(originals, translated))
                total += len(originals)
                print(f"  批次 {batch_no}: 已翻译 {total} 条字幕")
        return total

    def mux(self) -> Path:
        print(f"封装字幕到视频: {self.config.output_video_path}")
        return combine_files(
            self.config.input_path,
            [self.config.translated_srt_path, self.config.combined_srt_path],
            self.config.output_video_path,
            languages=[self.config.target_lang, self.config.source_lang],
        )

    def close(self) -> None:
        if self._owns_engine:
            self.engine.close()

    def run(self) -> Path:
        try:
            self.extract()
            self.translate_subtitles()
            return self.mux()
        finally:
            self.close()
