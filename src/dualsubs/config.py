from __future__ import annotations

from dataclasses import dataclass
import os
import tempfile
from pathlib import Path
from typing import Optional


DEFAULT_BATCH_SIZE = 128
DEFAULT_TIMEOUT = 30.0


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    try:
        return int(value) if value else default
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name, "").strip()
    try:
        return float(value) if value else default
    except ValueError:
        return default


@dataclass
class DualSubsConfig:
    """
    单个视频文件的处理配置。

    所有中间字幕文件与输出视频都位于 output_dir 中。
    """

    input_path: Path
    source_lang: str
    target_lang: str
    access_token: str
    output_dir: Path
    source_srt_path: Path
    translated_srt_path: Path
    combined_srt_path: Path
    output_video_path: Path
    batch_size: int = DEFAULT_BATCH_SIZE
    # 并行翻译的批次数；1 表示严格串行
    concurrency: int = 1
    translate_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_paths(
        cls,
        input_path: str | Path,
        source_lang: str,
        target_lang: str,
        access_token: Optional[str] = None,
        output_dir: Optional[str | Path] = None,
        batch_size: Optional[int] = None,
        concurrency: Optional[int] = None,
        translate_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "DualSubsConfig":
        input_path_obj = Path(input_path).expanduser().resolve()
        if not input_path_obj.stem or not input_path_obj.suffix:
            raise ValueError(f"无法从路径中解析文件名或扩展名: {input_path}")
        if not input_path_obj.is_file():
            raise FileNotFoundError(f"输入文件不存在: {input_path_obj}")

        if not source_lang or not target_lang:
            raise ValueError("必须同时指定源语言与目标语言")

        token = access_token or os.getenv("DUALSUBS_ACCESS_TOKEN", "").strip()
        if not token:
            raise ValueError("缺少访问令牌：请使用 --access-token 或设置 DUALSUBS_ACCESS_TOKEN")

        # 输出目录：显式参数 > 环境变量 DUALSUBS_OUTPUT_DIR > 系统临时目录
        if output_dir is not None:
            output_dir_obj = Path(output_dir).expanduser().resolve()
        elif os.getenv("DUALSUBS_OUTPUT_DIR"):
            output_dir_obj = Path(os.environ["DUALSUBS_OUTPUT_DIR"]).expanduser().resolve()
        else:
            output_dir_obj = Path(tempfile.gettempdir()).resolve()

        if batch_size is None:
            batch_size_value = _env_int("DUALSUBS_BATCH_SIZE", DEFAULT_BATCH_SIZE)
            if batch_size_value < 1:
                batch_size_value = DEFAULT_BATCH_SIZE
        else:
            batch_size_value = batch_size
        if batch_size_value < 1:
            raise ValueError(f"batch_size 必须大于 0: {batch_size_value}")

        if concurrency is None:
            concurrency_value = max(1, _env_int("DUALSUBS_CONCURRENCY", 1))
        else:
            concurrency_value = max(1, concurrency)

        if timeout is None:
            timeout_value = _env_float("DUALSUBS_TIMEOUT", DEFAULT_TIMEOUT)
        else:
            timeout_value = timeout

        stem = input_path_obj.stem
        output_video = output_dir_obj / input_path_obj.name
        if output_video == input_path_obj:
            output_video = output_dir_obj / f"{stem}.{target_lang}{input_path_obj.suffix}"

        return cls(
            input_path=input_path_obj,
            source_lang=source_lang,
            target_lang=target_lang,
            access_token=token,
            output_dir=output_dir_obj,
            source_srt_path=output_dir_obj / f"{stem}.{source_lang}.srt",
            translated_srt_path=output_dir_obj / f"{stem}.{target_lang}.srt",
            combined_srt_path=output_dir_obj / f"{stem}.{source_lang}-{target_lang}.srt",
            output_video_path=output_video,
            batch_size=batch_size_value,
            concurrency=concurrency_value,
            translate_url=translate_url or os.getenv("DUALSUBS_TRANSLATE_URL") or None,
            timeout=timeout_value,
        )
