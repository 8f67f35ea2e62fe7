"""
文件路径：puzzlepdf/processors/clues.py

说明：线索分栏排版（ClueColumnLayout）。
- 将 ACROSS、DOWN 两组线索放入固定数量的竖栏；所有线索共用一个字号。
- 每栏的下边界：第一栏为网格底部（与网格并排），之后各栏为网格顶部（位于网格上方）。
- 线索不拆分到两栏；分区标题不会落单在栏底：首条线索的高度计入标题高度，放不下则整体换栏。
- 栏数用尽即判定当前字号失败。
- 两遍协议：同一段控制流先以 DryRunCanvas 试排（由字号搜索驱动），再以选定字号真实绘制。
- DOWN 从 ACROSS 结束处（栏号与 Y）续排，中间空一个正文字号的高度。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from ..components import (
    ClueLayoutError,
    FontChangeToken,
    LineBreakToken,
    PdfFontFamily,
    TextToken,
    count_lines,
    get_logger,
    tokenize_clue,
)
from ..variables import (
    CONST_ACROSS_HEADER,
    CONST_CLUE_TEXT_MAX_SIZE,
    CONST_CLUE_TEXT_MIN_SIZE,
    CONST_DOWN_HEADER,
    CONST_TEXT_SIZE_DELTA,
    STYLE_CLUE_HEADER_SIZE_DELTA,
    STYLE_COLUMN_PADDING,
    STYLE_LINE_SPACING,
)
from .engines import DryRunCanvas, PdfCanvas
from .sizing import find_best_font_size


logger = get_logger(__name__)


@dataclass(frozen=True)
class CluePosition:
    """排版游标：当前 Y、当前栏号、当前栏的下边界。"""

    position_y: float
    column: int
    column_bottom_y: float


@dataclass(frozen=True)
class ClueColumnFrame:
    """线索区几何。

    属性：
        column_width: 单栏宽度。
        columns: 可用栏数。
        clue_top_y: 线索区顶部（每栏首行基线）。
        grid_y, grid_height: 网格底部 Y 与网格高度。
    """

    column_width: float
    columns: int
    clue_top_y: float
    grid_y: float
    grid_height: float


@dataclass(frozen=True)
class CluePlacement:
    """一条线索的落点（首行基线位置）。"""

    header: str
    number: object
    column: int
    position_y: float


@dataclass
class ClueLayoutResult:
    fits: bool
    position: CluePosition
    placements: List[CluePlacement] = field(default_factory=list)


class ClueColumnLayout:
    """在固定栏数内排布两组线索，并搜索能放下全部线索的最大字号。"""

    def __init__(
        self,
        font_family: PdfFontFamily,
        frame: ClueColumnFrame,
        across_clues: Mapping[object, str],
        down_clues: Mapping[object, str],
        has_html_clues: bool = False,
    ) -> None:
        self.font_family = font_family
        self.frame = frame
        self.across_clues = across_clues
        self.down_clues = down_clues
        self.has_html_clues = has_html_clues

    # -----------------------------
    # 对外入口
    # -----------------------------
    def find_font_size(self, canvas: PdfCanvas) -> Optional[float]:
        """试排搜索最大可用字号；没有任何字号可行时返回 None。"""
        dry_run = DryRunCanvas(canvas)
        return find_best_font_size(
            CONST_CLUE_TEXT_MIN_SIZE,
            CONST_CLUE_TEXT_MAX_SIZE,
            lambda size: self.run(dry_run, size).fits,
            step=CONST_TEXT_SIZE_DELTA,
        )

    def layout(self, canvas: PdfCanvas) -> ClueLayoutResult:
        """选定字号并在画布上真实绘制全部线索。

        前置条件：画布处于文本块内，当前行起点位于 (栏左边界, clue_top_y)。

        异常：
            ClueLayoutError: 任何候选字号都无法把线索放入单页。
        """
        size = self.find_font_size(canvas)
        if size is None:
            logger.error(
                "[%s] 线索在 %.1f~%.1fpt 内均无法放入 %s 栏",
                ClueLayoutError.code,
                CONST_CLUE_TEXT_MIN_SIZE,
                CONST_CLUE_TEXT_MAX_SIZE,
                self.frame.columns,
            )
            raise ClueLayoutError("Clues do not fit on a single page")
        logger.info("线索字号：%.1fpt（%s 栏）", size, self.frame.columns)
        result = self.run(canvas, size)
        if not result.fits:
            # 试排与真实绘制共享同一控制流，两者结果必须一致
            raise ClueLayoutError(f"Clues stopped fitting at {size}pt during rendering")
        return result

    def run(self, canvas: PdfCanvas, clue_text_size: float) -> ClueLayoutResult:
        """以给定字号排布两组线索；canvas 为 DryRunCanvas 时即为试排。"""
        frame = self.frame
        canvas.set_font(self.font_family.base, clue_text_size)
        placements: List[CluePlacement] = []
        start = CluePosition(position_y=frame.clue_top_y, column=0, column_bottom_y=frame.grid_y)
        fits, position = self._show_clue_list(
            canvas, self.across_clues, CONST_ACROSS_HEADER, clue_text_size, start, placements
        )
        if not fits:
            return ClueLayoutResult(False, position, placements)

        canvas.move_text_cursor(0, -clue_text_size)
        position = CluePosition(
            position_y=position.position_y - clue_text_size,
            column=position.column,
            column_bottom_y=position.column_bottom_y,
        )
        fits, position = self._show_clue_list(
            canvas, self.down_clues, CONST_DOWN_HEADER, clue_text_size, position, placements
        )
        return ClueLayoutResult(fits, position, placements)

    # -----------------------------
    # 单组线索
    # -----------------------------
    def _show_clue_list(
        self,
        canvas: PdfCanvas,
        clues: Mapping[object, str],
        header: str,
        clue_text_size: float,
        position: CluePosition,
        placements: List[CluePlacement],
    ) -> Tuple[bool, CluePosition]:
        frame = self.frame
        family = self.font_family
        position_y = position.position_y
        column = position.column
        column_bottom_y = position.column_bottom_y
        header_size = clue_text_size + STYLE_CLUE_HEADER_SIZE_DELTA
        line_advance = clue_text_size * STYLE_LINE_SPACING

        for index, (clue_number, clue) in enumerate(clues.items()):
            prefix = f"{clue_number} "
            prefix_width = canvas.measure_text_width(prefix, family.base, clue_text_size)

            # 整条线索（首条另加分区标题）所需高度：线索不拆分，标题不落单在栏底
            tokens = tokenize_clue(
                clue,
                self.has_html_clues,
                family,
                clue_text_size,
                frame.column_width - prefix_width,
                measure=canvas.measure_text_width,
            )
            line_count = count_lines(tokens)
            clue_height = clue_text_size * (1 + STYLE_LINE_SPACING * (line_count - 1))
            if index == 0:
                clue_height += header_size + (STYLE_LINE_SPACING - 1) * clue_text_size

            if position_y + clue_text_size - clue_height < column_bottom_y:
                column += 1
                if column == frame.columns:
                    return False, CluePosition(position_y, column, column_bottom_y)
                canvas.move_text_cursor(frame.column_width + STYLE_COLUMN_PADDING, frame.clue_top_y - position_y)
                position_y = frame.clue_top_y
                column_bottom_y = frame.grid_y + frame.grid_height + clue_text_size

            if index == 0:
                canvas.set_font(family.bold, header_size)
                canvas.draw_text(header)
                canvas.move_text_cursor(0, -line_advance)
                canvas.set_font(family.base, clue_text_size)
                position_y -= line_advance

            placements.append(CluePlacement(header=header, number=clue_number, column=column, position_y=position_y))
            canvas.draw_text(prefix)
            canvas.move_text_cursor(prefix_width, 0)
            for token in tokens:
                if isinstance(token, TextToken):
                    canvas.draw_text(token.text)
                elif isinstance(token, LineBreakToken):
                    canvas.move_text_cursor(0, -line_advance)
                    position_y -= line_advance
                elif isinstance(token, FontChangeToken):
                    canvas.set_font(family.font_for(token.bold, token.italic), clue_text_size)
            canvas.move_text_cursor(-prefix_width, 0)

        return True, CluePosition(position_y, column, column_bottom_y)


__all__ = [
    "CluePosition",
    "ClueColumnFrame",
    "CluePlacement",
    "ClueLayoutResult",
    "ClueColumnLayout",
]
