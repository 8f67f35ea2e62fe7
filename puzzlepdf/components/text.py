"""
文件路径：puzzlepdf/components/text.py

说明：文本度量与按宽度换行（LineWrapper）。
- 以单个空格切词；放不下的词另起一行；单词本身比整行还宽时逐字符硬换行，绝不静默溢出。
- 支持“起始行长”（carry width）：前一段内容已占用的行宽，使多段文本共享同一行宽
  （例如线索编号前缀之后紧跟线索正文，或富文本中相邻的不同字体片段）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from reportlab.pdfbase import pdfmetrics


# (text, font_name, font_size) -> 宽度（pt）
MeasureFn = Callable[[str, str, float], float]

# 已告警过的未注册字体，每个字体只告警一次
_UNKNOWN_FONTS: Set[str] = set()


def measure_text_width(text: str, font_name: str, font_size: float) -> float:
    """使用 ReportLab 字体度量计算文本宽度；字体未注册时按字符数粗略估算并记录警告。"""
    if not text:
        return 0.0
    try:
        return float(pdfmetrics.stringWidth(text, font_name, font_size))
    except KeyError:
        if font_name not in _UNKNOWN_FONTS:
            _UNKNOWN_FONTS.add(font_name)
            from . import get_logger

            get_logger(__name__).warning("字体未注册，按固定比例估算宽度：%s", font_name)
        return len(text) * float(font_size) * 0.6


@dataclass
class WrapResult:
    """换行结果。

    属性：
        lines: 按顺序排列的各行文本（第一行接在起始行长之后）。
        current_line_length: 最后一行结束时已占用的宽度，供下一段文本续接。
    """

    lines: List[str] = field(default_factory=list)
    current_line_length: float = 0.0


def split_text_to_lines(
    text: str,
    font_name: str,
    font_size: float,
    line_width: float,
    starting_line_length: float = 0.0,
    measure: Optional[MeasureFn] = None,
) -> WrapResult:
    """按最大行宽将文本拆分为多行（以空格为词分隔）。

    参数：
        text: 纯文本。
        font_name, font_size: 用于度量的字体与字号。
        line_width: 最大行宽（pt）。
        starting_line_length: 当前行已被之前内容占用的宽度。
        measure: 宽度度量函数，默认使用 ReportLab 字体度量。

    返回：
        WrapResult；行之间的连接符保持原样（行首词前为空串，其余为单个空格）。
    """
    width_of = measure or measure_text_width
    lines: List[str] = [""]
    current_length = float(starting_line_length)
    separator = ""
    for word in text.split(" "):
        separator_length = width_of(separator, font_name, font_size)
        word_length = width_of(word, font_name, font_size)
        if current_length + separator_length + word_length > line_width:
            if word_length > line_width:
                # 单词比整行还宽，只能逐字符切断
                for ch in word:
                    char_length = width_of(ch, font_name, font_size)
                    ch_separator_length = width_of(separator, font_name, font_size)
                    if current_length + ch_separator_length + char_length > line_width:
                        lines.append(ch)
                        current_length = char_length
                    else:
                        lines[-1] += separator + ch
                        current_length += ch_separator_length + char_length
                    separator = ""
            else:
                lines.append(word)
                current_length = word_length
        else:
            lines[-1] += separator + word
            current_length += separator_length + word_length
        separator = " "
    return WrapResult(lines=lines, current_line_length=current_length)


__all__ = [
    "MeasureFn",
    "measure_text_width",
    "WrapResult",
    "split_text_to_lines",
]
