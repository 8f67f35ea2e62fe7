"""
文件路径：puzzlepdf/processors/engines/reportlab.py

说明：基于 ReportLab canvas 的 PdfCanvas 实现（默认引擎）。
- ReportLab 原点在左下，与排版坐标一致，无需翻转；
- 文本通过 PDFTextObject 累积，moveCursor 与 PDF Td 一样相对于当前行起点。
"""

from __future__ import annotations

from io import BytesIO
from typing import Optional

from reportlab.pdfgen import canvas
from reportlab.pdfgen.textobject import PDFTextObject

from ...components import get_logger, measure_text_width
from .base import PageSize, PdfCanvas, single_line_text


logger = get_logger(__name__)


class ReportLabCanvas(PdfCanvas):
    """使用 ReportLab 生成单页 PDF。"""

    def __init__(self, page_size: PageSize) -> None:
        self._width, self._height = float(page_size[0]), float(page_size[1])
        self._buffer = BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(self._width, self._height))
        self._path = self._canvas.beginPath()
        self._text: Optional[PDFTextObject] = None
        self._result: Optional[bytes] = None

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def measure_text_width(self, text: str, font_name: str, font_size: float) -> float:
        return measure_text_width(single_line_text(text), font_name, font_size)

    # -----------------------------
    # 状态
    # -----------------------------
    def set_font(self, font_name: str, font_size: float) -> None:
        if self._text is not None:
            self._text.setFont(font_name, font_size)
        else:
            self._canvas.setFont(font_name, font_size)

    def set_fill_color(self, r: float, g: float, b: float) -> None:
        # 文本块内的颜色需写入文本对象，才能与文字保持先后顺序
        if self._text is not None:
            self._text.setFillColorRGB(r, g, b)
        else:
            self._canvas.setFillColorRGB(r, g, b)

    def set_stroke_color(self, r: float, g: float, b: float) -> None:
        self._canvas.setStrokeColorRGB(r, g, b)

    def set_line_width(self, width: float) -> None:
        self._canvas.setLineWidth(width)

    # -----------------------------
    # 文本
    # -----------------------------
    def begin_text(self) -> None:
        self._text = self._canvas.beginText(0, 0)

    def end_text(self) -> None:
        if self._text is None:
            return
        self._canvas.drawText(self._text)
        self._text = None

    def move_text_cursor(self, dx: float, dy: float) -> None:
        # ReportLab 的 moveCursor 以 dy 向下为正
        self._require_text().moveCursor(dx, -dy)

    def draw_text(self, text: str) -> None:
        self._require_text().textOut(single_line_text(text))

    def _require_text(self) -> PDFTextObject:
        if self._text is None:
            raise RuntimeError("文本操作必须位于 begin_text() 与 end_text() 之间")
        return self._text

    # -----------------------------
    # 形状
    # -----------------------------
    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._path.rect(x, y, width, height)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._path.moveTo(x1, y1)
        self._path.lineTo(x2, y2)

    def circle(self, x: float, y: float, radius: float) -> None:
        self._path.circle(x + radius, y + radius, radius)

    def fill(self) -> None:
        self._paint(stroke=0, fill=1)

    def stroke(self) -> None:
        self._paint(stroke=1, fill=0)

    def fill_and_stroke(self) -> None:
        self._paint(stroke=1, fill=1)

    def _paint(self, stroke: int, fill: int) -> None:
        self._canvas.drawPath(self._path, stroke=stroke, fill=fill)
        self._path = self._canvas.beginPath()

    # -----------------------------
    # 输出
    # -----------------------------
    def to_bytes(self) -> bytes:
        if self._result is None:
            self.end_text()
            self._canvas.showPage()
            self._canvas.save()
            self._result = self._buffer.getvalue()
            logger.debug("ReportLab 输出完成：%.1f KB", len(self._result) / 1024.0)
        return self._result


__all__ = ["ReportLabCanvas"]
