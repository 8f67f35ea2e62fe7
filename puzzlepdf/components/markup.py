"""
文件路径：puzzlepdf/components/markup.py

说明：线索富文本切分（RichTextTokenizer）。
- 输入为线索字符串（纯文本或含 <b>/<i> 行内标记，可任意嵌套），输出为扁平、有序的 token 序列：
  文本片段 TextToken、字体样式切换 FontChangeToken、显式换行 LineBreakToken；序列即绘制顺序。
- 标记模式下用 BeautifulSoup(html.parser) 解析为树，按文档顺序深度优先遍历，
  维护粗体/斜体嵌套计数；只有“生效样式”（bold>0, italic>0）真正变化时才输出字体切换。
- 相邻文本节点之间续接行宽，标记边界不会引入额外换行。
- 结束时若仍处于非基础样式（例如标记未闭合），先切回基础样式再输出结尾换行。
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple, Union

from bs4 import BeautifulSoup
from bs4.element import CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from .fonts import PdfFontFamily
from .text import MeasureFn, split_text_to_lines


@dataclass(frozen=True)
class TextToken:
    text: str


@dataclass(frozen=True)
class LineBreakToken:
    pass


@dataclass(frozen=True)
class FontChangeToken:
    """切换到指定样式；字体名由字体族按 (bold, italic) 解析。"""

    bold: bool
    italic: bool


Token = Union[TextToken, LineBreakToken, FontChangeToken]

LINE_BREAK = LineBreakToken()
BASE_STYLE: Tuple[bool, bool] = (False, False)

# 注释、声明等不属于可见文本
_INVISIBLE_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)


@dataclass(frozen=True)
class _NodeState:
    node: object
    bold_level: int
    italic_level: int


def tokenize_clue(
    raw_text: str,
    is_html: bool,
    font_family: PdfFontFamily,
    font_size: float,
    line_width: float,
    measure: Optional[MeasureFn] = None,
) -> List[Token]:
    """将线索文本切分为绘制 token，并按行宽换行。

    参数：
        raw_text: 线索原文。
        is_html: 是否包含行内标记。
        font_family: 度量各样式文本时使用的字体族。
        font_size: 字号。
        line_width: 最大行宽（pt）。
        measure: 宽度度量函数，默认 ReportLab 字体度量。

    返回：
        token 列表，总以一个 LineBreakToken 结尾；LineBreakToken 的个数即该线索占用的行数。
    """
    tokens: List[Token] = []
    active_style = BASE_STYLE
    current_line_length = 0.0

    root: object = BeautifulSoup(raw_text, "html.parser") if is_html else NavigableString(raw_text)
    stack: Deque[_NodeState] = deque([_NodeState(root, 0, 0)])
    while stack:
        state = stack.popleft()
        node = state.node
        if isinstance(node, Tag):
            child_bold = state.bold_level + (1 if node.name == "b" else 0)
            child_italic = state.italic_level + (1 if node.name == "i" else 0)
            for child in reversed(list(node.children)):
                stack.appendleft(_NodeState(child, child_bold, child_italic))
            continue
        if not isinstance(node, NavigableString) or isinstance(node, _INVISIBLE_STRINGS):
            continue

        style = (state.bold_level > 0, state.italic_level > 0)
        result = split_text_to_lines(
            str(node),
            font_family.font_for(*style),
            font_size,
            line_width,
            starting_line_length=current_line_length,
            measure=measure,
        )
        current_line_length = result.current_line_length
        for i, line in enumerate(result.lines):
            if i > 0:
                tokens.append(LINE_BREAK)
            if not line:
                continue
            if style != active_style:
                tokens.append(FontChangeToken(bold=style[0], italic=style[1]))
                active_style = style
            tokens.append(TextToken(line))

    if active_style != BASE_STYLE:
        tokens.append(FontChangeToken(bold=False, italic=False))
    tokens.append(LINE_BREAK)
    return tokens


def count_lines(tokens: List[Token]) -> int:
    """token 序列占用的行数（即换行 token 个数）。"""
    return sum(1 for t in tokens if isinstance(t, LineBreakToken))


__all__ = [
    "TextToken",
    "LineBreakToken",
    "FontChangeToken",
    "Token",
    "LINE_BREAK",
    "BASE_STYLE",
    "tokenize_clue",
    "count_lines",
]
