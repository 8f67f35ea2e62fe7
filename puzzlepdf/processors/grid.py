"""
文件路径：puzzlepdf/processors/grid.py

说明：网格绘制（GridRenderer）。
- 每个格子：背景（指定色 > 黑格 > 白色）、圆圈、编号、已知答案文字、加粗边框；
- 编号：谜题同时提供 across/down 自定义单词列表时使用格子自带编号，否则使用自动顺序编号；
- 编号先用当前填充色擦出底色矩形，保证压在圆圈上时仍然可读；
- 已知答案（可为多字 rebus）超过 8 字截断为前 5 字加省略号，按每 4 字一行分行，
  再搜索能放进格子 80% 区域的最大字号，放不下则本次转换失败。
"""

from __future__ import annotations

from typing import List, Optional

from ..components import (
    PdfFontFamily,
    SolutionTextError,
    get_adjusted_color,
    get_logger,
)
from ..components.colors import RGB
from ..components.geometry import PageGeometry
from ..model import BorderDirection, Crossword, Square, for_each_square
from ..variables import (
    CONST_GRID_NUMBER_ERASE_SHRINK,
    CONST_REBUS_CHUNK_SIZE,
    CONST_REBUS_ELLIPSIS,
    CONST_REBUS_MAX_LENGTH,
    CONST_REBUS_TRUNCATED_LENGTH,
    CONST_SOLUTION_FILL_RATIO,
    CONST_SOLUTION_TEXT_MAX_SIZE,
    CONST_SOLUTION_TEXT_MIN_SIZE,
    CONST_TEXT_SIZE_DELTA,
    STYLE_BLACK_HEX,
    STYLE_BORDER_LINE_WIDTH,
    STYLE_DEFAULT_LINE_WIDTH,
    STYLE_GRID_NUMBER_X_OFFSET,
    STYLE_WHITE_HEX,
)
from .engines import PdfCanvas
from .sizing import find_best_font_size


logger = get_logger(__name__)


def prepare_solution_lines(text: str) -> List[str]:
    """截断并分行格内答案文字。

    示例：
        "ABCDEFGHI" -> ["ABCD", "E..."]
    """
    if len(text) > CONST_REBUS_MAX_LENGTH:
        text = text[:CONST_REBUS_TRUNCATED_LENGTH] + CONST_REBUS_ELLIPSIS
    return [text[i:i + CONST_REBUS_CHUNK_SIZE] for i in range(0, len(text), CONST_REBUS_CHUNK_SIZE)]


def grid_number_for(crossword: Crossword, square: Square, clue_number: Optional[int]) -> Optional[int]:
    """返回格子上应显示的编号。"""
    if crossword.uses_custom_numbering:
        return square.number
    return clue_number


class GridRenderer:
    """把填字网格绘制到画布上（坐标取自 PageGeometry）。"""

    def __init__(self, font_family: PdfFontFamily, black_square_lightness_adjustment: float = 0.0) -> None:
        self.font_family = font_family
        self.lightness_adjustment = black_square_lightness_adjustment

    def draw(self, canvas: PdfCanvas, crossword: Crossword, geometry: PageGeometry) -> None:
        """绘制整张网格。

        异常：
            SolutionTextError: 某个已知答案在任何候选字号下都放不进格子。
        """
        black = get_adjusted_color(STYLE_BLACK_HEX, self.lightness_adjustment)
        white = get_adjusted_color(STYLE_WHITE_HEX, 0.0)
        for x, y, clue_number, _is_across, _is_down, square in for_each_square(crossword.grid):
            self._draw_square(canvas, crossword, geometry, x, y, clue_number, square, black, white)

    # -----------------------------
    # 单个格子
    # -----------------------------
    def _draw_square(
        self,
        canvas: PdfCanvas,
        crossword: Crossword,
        geometry: PageGeometry,
        x: int,
        y: int,
        clue_number: Optional[int],
        square: Square,
        black: RGB,
        white: RGB,
    ) -> None:
        size = geometry.square_size
        square_x = geometry.grid_x + x * size
        square_y = geometry.grid_top - (y + 1) * size

        if square.background_color:
            background = get_adjusted_color(square.background_color, self.lightness_adjustment)
        elif square.is_black:
            background = black
        else:
            background = white
        canvas.rect(square_x, square_y, size, size)
        canvas.set_stroke_color(*black)
        canvas.set_fill_color(*background)
        canvas.fill_and_stroke()

        if not square.is_black:
            if square.is_circled:
                canvas.circle(square_x, square_y, size / 2)
                canvas.stroke()

            number = grid_number_for(crossword, square, clue_number)
            if number is not None:
                self._draw_number(canvas, geometry, x, y, number, black)

            if square.is_given:
                self._draw_solution(canvas, square, square_x, square_y, size, black)

        if square.border_directions:
            self._draw_borders(canvas, square, square_x, square_y, size)

    def _draw_number(self, canvas: PdfCanvas, geometry: PageGeometry, x: int, y: int, number: int, black: RGB) -> None:
        base = self.font_family.base
        number_size = geometry.grid_number_size
        text = str(number)
        number_x = geometry.grid_x + x * geometry.square_size + STYLE_GRID_NUMBER_X_OFFSET
        number_y = geometry.grid_top - y * geometry.square_size - number_size

        # 填充色仍为格子底色：先擦出编号区域
        canvas.rect(
            number_x,
            number_y,
            canvas.measure_text_width(text, base, number_size),
            number_size - CONST_GRID_NUMBER_ERASE_SHRINK,
        )
        canvas.fill()

        canvas.set_fill_color(*black)
        canvas.begin_text()
        canvas.move_text_cursor(number_x, number_y)
        canvas.set_font(base, number_size)
        canvas.draw_text(text)
        canvas.end_text()

    def _draw_solution(
        self,
        canvas: PdfCanvas,
        square: Square,
        square_x: float,
        square_y: float,
        size: float,
        black: RGB,
    ) -> None:
        base = self.font_family.base
        lines = prepare_solution_lines(square.solution_text)
        if not lines:
            return
        max_extent = CONST_SOLUTION_FILL_RATIO * size

        def fits(font_size: float) -> bool:
            widest = max(canvas.measure_text_width(line, base, font_size) for line in lines)
            return widest < max_extent and len(lines) * font_size < max_extent

        text_size = find_best_font_size(
            CONST_SOLUTION_TEXT_MIN_SIZE,
            CONST_SOLUTION_TEXT_MAX_SIZE,
            fits,
            step=CONST_TEXT_SIZE_DELTA,
        )
        if text_size is None:
            logger.error("[%s] 格内答案放不下：%r（格边长 %.2fpt）", SolutionTextError.code, square.solution_text, size)
            raise SolutionTextError(f"Solution text {square.solution_text!r} does not fit in a {size:.2f}pt square")
        logger.debug("格内答案 %r 字号：%.1fpt", square.solution_text, text_size)

        canvas.set_fill_color(*black)
        block_height = len(lines) * text_size
        for index, line in enumerate(lines):
            line_width = canvas.measure_text_width(line, base, text_size)
            line_x = square_x + (size - line_width) / 2
            line_y = square_y + (size - block_height) / 2 + (len(lines) - index - 1) * text_size
            canvas.begin_text()
            canvas.move_text_cursor(line_x, line_y)
            canvas.set_font(base, text_size)
            canvas.draw_text(line)
            canvas.end_text()

    @staticmethod
    def _draw_borders(canvas: PdfCanvas, square: Square, square_x: float, square_y: float, size: float) -> None:
        canvas.set_line_width(STYLE_BORDER_LINE_WIDTH)
        for direction in sorted(square.border_directions, key=lambda d: d.value):
            if direction is BorderDirection.TOP:
                canvas.line(square_x, square_y + size, square_x + size, square_y + size)
            elif direction is BorderDirection.BOTTOM:
                canvas.line(square_x, square_y, square_x + size, square_y)
            elif direction is BorderDirection.LEFT:
                canvas.line(square_x, square_y, square_x, square_y + size)
            elif direction is BorderDirection.RIGHT:
                canvas.line(square_x + size, square_y, square_x + size, square_y + size)
            canvas.stroke()
        canvas.set_line_width(STYLE_DEFAULT_LINE_WIDTH)


__all__ = ["GridRenderer", "prepare_solution_lines", "grid_number_for"]
