from __future__ import annotations

import argparse
import sys

from .env import load_dotenv_if_present
from .config import DualSubsConfig
from .pipeline import DualSubsPipeline


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dualsubs",
        description="dualsubs: 翻译视频字幕，并将译文字幕与双语字幕封装回视频。",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="FILE",
        help="原始视频文件路径，可指定多个，按顺序处理。",
    )
    parser.add_argument(
        "-s",
        "--source",
        type=str,
        required=True,
        metavar="LANGUAGE",
        help="源语言 ISO 639-1 代码（如: no, en）。",
    )
    parser.add_argument(
        "-t",
        "--target",
        type=str,
        required=True,
        metavar="LANGUAGE",
        help="目标语言 ISO 639-1 代码（如: en, zh）。",
    )
    parser.add_argument(
        "-a",
        "--access-token",
        type=str,
        default=None,
        metavar="TOKEN",
        help="Cloud Translation API 访问令牌（默认读取环境变量 DUALSUBS_ACCESS_TOKEN）。",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="字幕文件与输出视频的目录（默认: 系统临时目录，可通过 DUALSUBS_OUTPUT_DIR 配置）。",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="每次翻译请求包含的字幕条数（默认: 128，可通过 DUALSUBS_BATCH_SIZE 配置）。",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="同时进行的翻译请求数（默认: 1，可通过 DUALSUBS_CONCURRENCY 配置）。",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    # 确保在解析参数和使用配置之前加载 .env 中的环境变量
    load_dotenv_if_present()
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        for input_path in args.inputs:
            config = DualSubsConfig.from_paths(
                input_path=input_path,
                source_lang=args.source,
                target_lang=args.target,
                access_token=args.access_token,
                output_dir=args.output_dir,
                batch_size=args.batch_size,
                concurrency=args.concurrency,
            )
            print(f"开始处理: {config.input_path}")
            output_video = DualSubsPipeline(config).run()
            print("字幕翻译完成")
            print(f"   译文字幕: {config.translated_srt_path}")
            print(f"   双语字幕: {config.combined_srt_path}")
            print(f"   输出视频: {output_video}")
        return 0
    except KeyboardInterrupt:
        print("\n用户中断")
        return 1
    except Exception as exc:
        print(f"处理失败: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
