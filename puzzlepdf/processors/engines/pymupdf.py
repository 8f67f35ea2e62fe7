"""
文件路径：puzzlepdf/processors/engines/pymupdf.py

说明：基于 PyMuPDF（fitz）的 PdfCanvas 实现。
- PyMuPDF 原点在左上，本实现内部翻转 Y，对外保持左下原点契约；
- 仅支持 PDF Base-14 字体（按 ReportLab 字体名映射到 fitz 内置别名）。
"""

from __future__ import annotations

from typing import Optional, Tuple

import fitz  # PyMuPDF

from ...components import get_logger
from .base import PageSize, PdfCanvas, single_line_text


logger = get_logger(__name__)


# ReportLab / PDF 标准字体名 -> PyMuPDF 内置 Base-14 别名
_BASE14_ALIASES = {
    "Times-Roman": "tiro",
    "Times-Bold": "tibo",
    "Times-Italic": "tiit",
    "Times-BoldItalic": "tibi",
    "Helvetica": "helv",
    "Helvetica-Bold": "hebo",
    "Helvetica-Oblique": "heit",
    "Helvetica-BoldOblique": "hebi",
    "Courier": "cour",
    "Courier-Bold": "cobo",
    "Courier-Oblique": "coit",
    "Courier-BoldOblique": "cobi",
}


def to_fitz_fontname(font_name: str) -> str:
    """将标准字体名映射为 fitz 别名；未知字体回退 Helvetica。"""
    alias = _BASE14_ALIASES.get(font_name)
    if alias is None:
        logger.warning("PyMuPDF 引擎不支持字体 %s，回退 helv", font_name)
        return "helv"
    return alias


class PyMuPdfCanvas(PdfCanvas):
    """使用 PyMuPDF 生成单页 PDF。"""

    def __init__(self, page_size: PageSize) -> None:
        self._width, self._height = float(page_size[0]), float(page_size[1])
        self._doc = fitz.open()
        self._page = self._doc.new_page(width=self._width, height=self._height)
        self._shape = self._page.new_shape()
        self._font_name = "tiro"
        self._font_size = 12.0
        self._fill_color: Tuple[float, float, float] = (0.0, 0.0, 0.0)
        self._stroke_color: Tuple[float, float, float] = (0.0, 0.0, 0.0)
        self._line_width = 1.0
        # 文本状态：当前行起点与当前绘制位置（左下原点坐标）
        self._in_text = False
        self._line_x = 0.0
        self._line_y = 0.0
        self._cursor_x = 0.0
        self._result: Optional[bytes] = None

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def measure_text_width(self, text: str, font_name: str, font_size: float) -> float:
        if not text:
            return 0.0
        return float(
            fitz.get_text_length(single_line_text(text), fontname=to_fitz_fontname(font_name), fontsize=font_size)
        )

    # -----------------------------
    # 状态
    # -----------------------------
    def set_font(self, font_name: str, font_size: float) -> None:
        self._font_name = to_fitz_fontname(font_name)
        self._font_size = float(font_size)

    def set_fill_color(self, r: float, g: float, b: float) -> None:
        self._fill_color = (r, g, b)

    def set_stroke_color(self, r: float, g: float, b: float) -> None:
        self._stroke_color = (r, g, b)

    def set_line_width(self, width: float) -> None:
        self._line_width = float(width)

    # -----------------------------
    # 文本
    # -----------------------------
    def begin_text(self) -> None:
        self._in_text = True
        self._line_x = self._line_y = self._cursor_x = 0.0

    def end_text(self) -> None:
        self._in_text = False

    def move_text_cursor(self, dx: float, dy: float) -> None:
        self._require_text()
        self._line_x += dx
        self._line_y += dy
        self._cursor_x = self._line_x

    def draw_text(self, text: str) -> None:
        self._require_text()
        if not text:
            return
        text = single_line_text(text)
        # 先提交已完成的形状，保证绘制顺序（未 finish 的路径保留到 fill/stroke）
        if self._shape.totalcont and not self._shape.draw_cont:
            self._flush_shape()
        self._page.insert_text(
            fitz.Point(self._cursor_x, self._height - self._line_y),
            text,
            fontsize=self._font_size,
            fontname=self._font_name,
            color=self._fill_color,
        )
        self._cursor_x += fitz.get_text_length(text, fontname=self._font_name, fontsize=self._font_size)

    def _require_text(self) -> None:
        if not self._in_text:
            raise RuntimeError("文本操作必须位于 begin_text() 与 end_text() 之间")

    # -----------------------------
    # 形状
    # -----------------------------
    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._shape.draw_rect(fitz.Rect(x, self._height - y - height, x + width, self._height - y))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._shape.draw_line(fitz.Point(x1, self._height - y1), fitz.Point(x2, self._height - y2))

    def circle(self, x: float, y: float, radius: float) -> None:
        self._shape.draw_circle(fitz.Point(x + radius, self._height - (y + radius)), radius)

    def fill(self) -> None:
        self._shape.finish(color=None, fill=self._fill_color, width=0)
        self._flush_shape()

    def stroke(self) -> None:
        self._shape.finish(color=self._stroke_color, fill=None, width=self._line_width, closePath=False)
        self._flush_shape()

    def fill_and_stroke(self) -> None:
        self._shape.finish(color=self._stroke_color, fill=self._fill_color, width=self._line_width)
        self._flush_shape()

    def _flush_shape(self) -> None:
        self._shape.commit()
        self._shape = self._page.new_shape()

    # -----------------------------
    # 输出
    # -----------------------------
    def to_bytes(self) -> bytes:
        if self._result is None:
            self._shape.commit()
            self._result = self._doc.tobytes(deflate=True, garbage=4)
            self._doc.close()
            logger.debug("PyMuPDF 输出完成：%.1f KB", len(self._result) / 1024.0)
        return self._result


__all__ = ["PyMuPdfCanvas", "to_fitz_fontname"]
