from __future__ import annotations

"""
pytest 全局配置：
- 将项目根目录加入 sys.path，确保 `from puzzlepdf...` 可被导入；
- 提供等宽度量的记录型画布 RecordingCanvas（每个字符宽 = 字号 * 0.5），用于排版断言。
"""

import sys
from pathlib import Path
from typing import List, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from puzzlepdf.processors.engines import PdfCanvas  # noqa: E402
from puzzlepdf.model import BLACK_SQUARE, Crossword, Square  # noqa: E402


CHAR_WIDTH_RATIO = 0.5


def fixed_width(text: str, font_name: str, font_size: float) -> float:
    return len(text) * font_size * CHAR_WIDTH_RATIO


class RecordingCanvas(PdfCanvas):
    """记录所有绘制调用的假画布；文本位置按 PDF Td 语义换算为绝对坐标。"""

    def __init__(self, width: float = 612.0, height: float = 792.0) -> None:
        self._width = width
        self._height = height
        self.ops: List[tuple] = []
        self.font: Tuple[str, float] = ("", 0.0)
        self.fill_color = (0.0, 0.0, 0.0)
        self.in_text = False
        self._line_x = 0.0
        self._line_y = 0.0
        self._cursor_x = 0.0

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def measure_text_width(self, text: str, font_name: str, font_size: float) -> float:
        return fixed_width(text, font_name, font_size)

    def set_font(self, font_name: str, font_size: float) -> None:
        self.font = (font_name, font_size)
        self.ops.append(("set_font", font_name, font_size))

    def set_fill_color(self, r: float, g: float, b: float) -> None:
        self.fill_color = (r, g, b)
        self.ops.append(("fill_color", (r, g, b)))

    def set_stroke_color(self, r: float, g: float, b: float) -> None:
        self.ops.append(("stroke_color", (r, g, b)))

    def set_line_width(self, width: float) -> None:
        self.ops.append(("line_width", width))

    def begin_text(self) -> None:
        self.in_text = True
        self._line_x = self._line_y = self._cursor_x = 0.0

    def end_text(self) -> None:
        self.in_text = False

    def move_text_cursor(self, dx: float, dy: float) -> None:
        assert self.in_text
        self._line_x += dx
        self._line_y += dy
        self._cursor_x = self._line_x

    def draw_text(self, text: str) -> None:
        assert self.in_text
        self.ops.append(("text", text, self._cursor_x, self._line_y, self.font))
        self._cursor_x += fixed_width(text, *self.font)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self.ops.append(("rect", x, y, width, height))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.ops.append(("line", x1, y1, x2, y2))

    def circle(self, x: float, y: float, radius: float) -> None:
        self.ops.append(("circle", x, y, radius))

    def fill(self) -> None:
        self.ops.append(("fill", self.fill_color))

    def stroke(self) -> None:
        self.ops.append(("stroke",))

    def fill_and_stroke(self) -> None:
        self.ops.append(("fill_and_stroke", self.fill_color))

    def to_bytes(self) -> bytes:
        return b"%PDF-fake"

    # 便捷查询
    def texts(self) -> List[str]:
        return [op[1] for op in self.ops if op[0] == "text"]

    def text_ops(self) -> List[tuple]:
        return [op for op in self.ops if op[0] == "text"]


def make_crossword(rows: List[str], across=None, down=None, **kwargs) -> Crossword:
    """由字符串行构建 Crossword：'#' 为黑格，'.' 为无答案白格。"""
    grid = [[BLACK_SQUARE if ch == "#" else Square(solution=None if ch == "." else ch) for ch in row] for row in rows]
    return Crossword(
        title=kwargs.pop("title", "Test Puzzle"),
        author=kwargs.pop("author", "Tester"),
        copyright=kwargs.pop("copyright", "(c) Tester"),
        grid=grid,
        across_clues=across if across is not None else {},
        down_clues=down if down is not None else {},
        **kwargs,
    )


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()
