"""
文件路径：puzzlepdf/model.py

模块职责：
- PDF 排版所消费的填字谜内存模型：格子 Square、谜题 Crossword；
- 自动编号：按行优先遍历网格，为每个 across/down 单词的起始白格生成连续编号。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Sequence, Tuple

from .components import InvalidFormatException
from .puzzleable import Puzzleable


class BorderDirection(Enum):
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Square:
    """网格中的一个格子。

    属性：
        is_black: 是否为黑格。
        solution: 单字符答案。
        solution_rebus: 多字符答案（rebus）；非空时优先于 solution。
        is_given: 答案是否作为已知内容直接印在格中。
        is_circled: 是否带圆圈标记。
        number: 谜题自带编号（仅在提供了自定义单词列表时使用）。
        background_color: 背景色（"#rrggbb"），空串表示未指定。
        border_directions: 需要加粗的边。
    """

    is_black: bool = False
    solution: Optional[str] = None
    solution_rebus: str = ""
    is_given: bool = False
    is_circled: bool = False
    number: Optional[int] = None
    background_color: str = ""
    border_directions: FrozenSet[BorderDirection] = frozenset()

    @property
    def solution_text(self) -> str:
        return self.solution_rebus or (self.solution or "")


BLACK_SQUARE = Square(is_black=True)

Grid = Sequence[Sequence[Square]]
# 单词：按顺序排列的 (x, y) 坐标
Word = List[Tuple[int, int]]


def _needs_across_number(grid: Grid, x: int, y: int) -> bool:
    row = grid[y]
    return (x == 0 or row[x - 1].is_black) and x + 1 < len(row) and not row[x + 1].is_black


def _needs_down_number(grid: Grid, x: int, y: int) -> bool:
    return (y == 0 or grid[y - 1][x].is_black) and y + 1 < len(grid) and not grid[y + 1][x].is_black


def for_each_square(grid: Grid) -> Iterator[Tuple[int, int, Optional[int], bool, bool, Square]]:
    """行优先遍历网格，产出 (x, y, clue_number, is_across, is_down, square)。

    clue_number 为自动生成的连续编号；不开启任何单词的格子为 None。
    """
    current_clue_number = 1
    for y, row in enumerate(grid):
        for x, square in enumerate(row):
            if square.is_black:
                yield x, y, None, False, False, square
                continue
            is_across = _needs_across_number(grid, x, y)
            is_down = _needs_down_number(grid, x, y)
            clue_number: Optional[int] = None
            if is_across or is_down:
                clue_number = current_clue_number
                current_clue_number += 1
            yield x, y, clue_number, is_across, is_down, square


@dataclass(eq=True)
class Crossword(Puzzleable):
    """填字谜：网格、两向线索与元数据。

    across_clues / down_clues 为有序映射（编号 -> 线索文本）；
    across_words / down_words 为自定义单词列表，两者均非空时网格使用格子自带编号。
    """

    title: str
    author: str
    copyright: str
    grid: List[List[Square]]
    across_clues: Dict[int, str]
    down_clues: Dict[int, str]
    notes: str = ""
    has_html_clues: bool = False
    across_words: List[Word] = field(default_factory=list)
    down_words: List[Word] = field(default_factory=list)

    def __post_init__(self) -> None:
        Puzzleable.__init__(self)
        if not self.grid or not self.grid[0]:
            raise InvalidFormatException("网格不能为空")
        width = len(self.grid[0])
        for y, row in enumerate(self.grid):
            if len(row) != width:
                raise InvalidFormatException(f"第 {y + 1} 行宽度为 {len(row)}，与首行宽度 {width} 不一致")

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])

    @property
    def uses_custom_numbering(self) -> bool:
        return bool(self.across_words) and bool(self.down_words)

    def create_puzzle(self) -> "Crossword":
        return self


__all__ = [
    "BorderDirection",
    "Square",
    "BLACK_SQUARE",
    "Grid",
    "Word",
    "for_each_square",
    "Crossword",
]
