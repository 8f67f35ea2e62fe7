"""
文件路径：puzzlepdf/processors/__init__.py

说明：
- 排版处理器包：
  - sizing.py（通用字号搜索）
  - clues.py（线索分栏两遍排版）
  - grid.py（网格绘制）
  - engines/{reportlab.py, pymupdf.py}（两种绘制引擎与试排画布）
"""

from typing import List

from .clues import ClueColumnFrame, ClueColumnLayout, ClueLayoutResult, CluePlacement, CluePosition
from .grid import GridRenderer, grid_number_for, prepare_solution_lines
from .sizing import candidate_font_sizes, find_best_font_size

__all__: List[str] = [
    "CluePosition",
    "ClueColumnFrame",
    "CluePlacement",
    "ClueLayoutResult",
    "ClueColumnLayout",
    "GridRenderer",
    "grid_number_for",
    "prepare_solution_lines",
    "candidate_font_sizes",
    "find_best_font_size",
]
