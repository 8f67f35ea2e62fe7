"""
文件路径：main.py

命令行入口：
- 功能：读取 JSON 描述的填字谜，排版为单页 PDF，输出到 output 目录。
- 依赖：`puzzlepdf/pdf_composer.py`、`puzzlepdf/data_handler.py`、`puzzlepdf/components`、`puzzlepdf/variables.py`。

快速使用示例：
    # 1) 使用自带示例谜题
    python main.py

    # 2) 指定输入与输出
    python main.py --input samples/sample_puzzle.json --output output/sample.pdf

    # 3) 切换字体族、提亮黑格以省墨、改用 PyMuPDF 引擎
    python main.py --font-family helvetica --lightness 0.3 --engine pymupdf

变量引用说明（来自 puzzlepdf/variables.py）：
- PATH_SAMPLE_PUZZLE_JSON, CONST_DEFAULT_OUTPUT_SUFFIX, CONST_ENGINE_DEFAULT

组件调用说明（来自 puzzlepdf/components / puzzlepdf/data_handler.py / puzzlepdf/pdf_composer.py）：
- get_logger, FileHandler.timestamped_output_path
- load_crossword_json
- PdfComposer.write
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from reportlab.lib.pagesizes import A4, LETTER

from puzzlepdf.components import (
    FileHandler,
    InvalidFormatException,
    LayoutFitError,
    get_font_family,
    get_logger,
)
from puzzlepdf.data_handler import load_crossword_json
from puzzlepdf.pdf_composer import PdfComposer
from puzzlepdf.processors.engines import available_engines
from puzzlepdf.variables import (
    PATH_SAMPLE_PUZZLE_JSON,
    CONST_DEFAULT_OUTPUT_SUFFIX,
    CONST_ENGINE_DEFAULT,
)


logger = get_logger(__name__)


_PAGE_SIZES = {"letter": LETTER, "a4": A4}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="填字谜 PDF 排版工具（单页：页眉 + 线索分栏 + 网格）")
    parser.add_argument("--input", type=Path, default=PATH_SAMPLE_PUZZLE_JSON, help="输入谜题 JSON 路径")
    parser.add_argument("--output", type=Path, default=None, help="输出 PDF 路径（可省略，自动生成）")
    parser.add_argument("--output-dir", dest="output_dir", type=Path, default=None, help="自动生成输出路径时使用的目录（默认 output/）")
    parser.add_argument(
        "--font-family",
        dest="font_family",
        type=str,
        choices=["times", "helvetica", "courier"],
        default="times",
        help="字体族：times/helvetica/courier",
    )
    parser.add_argument("--lightness", type=float, default=0.0, help="黑格/彩色格提亮比例（0~1），用于省墨打印")
    parser.add_argument(
        "--engine",
        type=str,
        choices=available_engines(),
        default=CONST_ENGINE_DEFAULT,
        help="绘制引擎：reportlab/pymupdf",
    )
    parser.add_argument("--page-size", dest="page_size", type=str, choices=sorted(_PAGE_SIZES), default="letter", help="页面尺寸")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if not 0.0 <= args.lightness <= 1.0:
        print("--lightness 必须位于 0~1 之间")
        return 2

    try:
        crossword = load_crossword_json(args.input)
    except (FileNotFoundError, InvalidFormatException) as exc:
        logger.error("谜题加载失败：%s", exc)
        print(f"谜题加载失败：{exc}")
        return 1

    output_path: Path = args.output or FileHandler.timestamped_output_path(
        args.input,
        suffix=CONST_DEFAULT_OUTPUT_SUFFIX,
        output_dir=args.output_dir,
    )
    composer = PdfComposer(
        font_family=get_font_family(args.font_family),
        black_square_lightness_adjustment=args.lightness,
        engine=args.engine,
        page_size=_PAGE_SIZES[args.page_size],
    )
    try:
        out = composer.write(crossword, output_path)
    except LayoutFitError as exc:
        # 放不下即失败，不做分页回退
        logger.error("排版失败：%s", exc)
        print(f"排版失败：{exc}")
        return 1
    print(f"排版完成，保存至：{out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
