"""
文件路径：puzzlepdf/processors/engines/__init__.py

说明：绘制引擎注册表：`reportlab`（默认）与 `pymupdf` 两种 PdfCanvas 实现，按名称创建。
"""

from __future__ import annotations

from typing import Callable, Dict, List

from ...components import ErrorHandler
from ...variables import CONST_ENGINE_PYMUPDF, CONST_ENGINE_REPORTLAB, ERR_UNKNOWN_ENGINE
from .base import DryRunCanvas, PageSize, PdfCanvas, single_line_text
from .pymupdf import PyMuPdfCanvas
from .reportlab import ReportLabCanvas


_ENGINES: Dict[str, Callable[[PageSize], PdfCanvas]] = {
    CONST_ENGINE_REPORTLAB: ReportLabCanvas,
    CONST_ENGINE_PYMUPDF: PyMuPdfCanvas,
}


def available_engines() -> List[str]:
    return sorted(_ENGINES)


def create_canvas(engine: str, page_size: PageSize) -> PdfCanvas:
    """按引擎名创建单页画布。

    异常：
        ValueError: 未知引擎名。
    """
    factory = _ENGINES.get((engine or "").strip().lower())
    if factory is None:
        raise ValueError(ErrorHandler.format_error(ERR_UNKNOWN_ENGINE, f"未知绘制引擎：{engine}（可选：{', '.join(available_engines())}）"))
    return factory(page_size)


__all__ = [
    "PdfCanvas",
    "DryRunCanvas",
    "PageSize",
    "single_line_text",
    "ReportLabCanvas",
    "PyMuPdfCanvas",
    "available_engines",
    "create_canvas",
]
