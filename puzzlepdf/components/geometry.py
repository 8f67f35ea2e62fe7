"""
文件路径：puzzlepdf/components/geometry.py

说明：页面与网格几何计算。
- 坐标系：PDF 左下角为原点，Y 向上为正（与 ReportLab 一致）。
- 栏数、格内编号字号、网格宽度占比只由网格行数决定，为固定查表规则。
"""

from __future__ import annotations

from dataclasses import dataclass

from ..variables import (
    CONST_FOUR_COLUMN_MIN_ROWS,
    CONST_GRID_NUMBER_SIZE_LARGE,
    CONST_GRID_NUMBER_SIZE_SMALL,
    CONST_GRID_WIDTH_FRACTION_NARROW,
    CONST_GRID_WIDTH_FRACTION_WIDE,
    CONST_LARGE_NUMBER_MAX_ROWS,
    CONST_WIDE_GRID_MIN_ROWS,
    STYLE_COLUMN_PADDING,
    STYLE_COPYRIGHT_SIZE,
    STYLE_MARGIN,
)


def get_clue_columns(grid_rows: int) -> int:
    """线索栏数：15 行以下 3 栏，否则 4 栏。"""
    return 4 if grid_rows >= CONST_FOUR_COLUMN_MIN_ROWS else 3


def get_grid_number_size(grid_rows: int) -> float:
    """格内编号字号：不超过 17 行为 8pt，否则 6pt。"""
    return CONST_GRID_NUMBER_SIZE_LARGE if grid_rows <= CONST_LARGE_NUMBER_MAX_ROWS else CONST_GRID_NUMBER_SIZE_SMALL


def get_grid_width_fraction(grid_rows: int) -> float:
    """网格宽度占内容宽度的比例：15 行以下 0.6，否则 0.7。"""
    return CONST_GRID_WIDTH_FRACTION_WIDE if grid_rows >= CONST_WIDE_GRID_MIN_ROWS else CONST_GRID_WIDTH_FRACTION_NARROW


@dataclass(frozen=True)
class PageGeometry:
    """单页排版所需的全部几何量（pt）。

    属性：
        header_width: 内容宽度（页宽减去左右边距），页眉与线索栏共用。
        grid_x, grid_y: 网格左下角坐标；网格贴右边距，底部留出版权行高度。
        square_size: 单格边长。
        column_width: 每个线索栏的宽度。
        title_x, title_y: 页眉第一行基线起点。
    """

    page_width: float
    page_height: float
    header_width: float
    grid_rows: int
    grid_cols: int
    grid_width: float
    grid_height: float
    square_size: float
    grid_number_size: float
    grid_x: float
    grid_y: float
    columns: int
    column_width: float
    title_x: float
    title_y: float

    @property
    def grid_top(self) -> float:
        return self.grid_y + self.grid_height


def compute_page_geometry(page_width: float, page_height: float, grid_rows: int, grid_cols: int) -> PageGeometry:
    """由页面尺寸与网格行列数推导全部几何量。"""
    header_width = page_width - 2 * STYLE_MARGIN
    grid_width = get_grid_width_fraction(grid_rows) * header_width
    grid_height = grid_width * grid_rows / grid_cols
    columns = get_clue_columns(grid_rows)
    return PageGeometry(
        page_width=page_width,
        page_height=page_height,
        header_width=header_width,
        grid_rows=grid_rows,
        grid_cols=grid_cols,
        grid_width=grid_width,
        grid_height=grid_height,
        square_size=grid_height / grid_rows,
        grid_number_size=get_grid_number_size(grid_rows),
        grid_x=page_width - STYLE_MARGIN - grid_width,
        grid_y=STYLE_MARGIN + STYLE_COPYRIGHT_SIZE,
        columns=columns,
        column_width=(header_width - (columns - 1) * STYLE_COLUMN_PADDING) / columns,
        title_x=STYLE_MARGIN,
        title_y=page_height - STYLE_MARGIN,
    )


__all__ = [
    "get_clue_columns",
    "get_grid_number_size",
    "get_grid_width_fraction",
    "PageGeometry",
    "compute_page_geometry",
]
