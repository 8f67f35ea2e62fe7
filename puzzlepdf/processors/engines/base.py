"""
文件路径：puzzlepdf/processors/engines/base.py

说明：抽象绘制面（PdfCanvas）契约与“只度量不绘制”的试排画布。
- 坐标系：左下角为原点，单位 pt；文本光标按相对偏移移动（相对当前行起点，与 PDF Td 语义一致）。
- 形状原语先累积路径，再由 fill / stroke / fill_and_stroke 一次性绘制并清空路径。
- 画布非线程安全，同一时刻只能由一个逻辑线程驱动。
- 控制字符（换行、制表等）在度量与绘制前统一替换为空格，各引擎都按单行输出。
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Tuple


_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def single_line_text(text: str) -> str:
    """将控制字符替换为空格。"""
    return _CONTROL_CHARS.sub(" ", text)


class PdfCanvas(ABC):
    """单页 PDF 绘制面。"""

    @property
    @abstractmethod
    def width(self) -> float:
        """页面宽度（pt）。"""

    @property
    @abstractmethod
    def height(self) -> float:
        """页面高度（pt）。"""

    @abstractmethod
    def measure_text_width(self, text: str, font_name: str, font_size: float) -> float:
        """返回文本在给定字体字号下的宽度（pt）。"""

    @abstractmethod
    def set_font(self, font_name: str, font_size: float) -> None: ...

    @abstractmethod
    def set_fill_color(self, r: float, g: float, b: float) -> None: ...

    @abstractmethod
    def set_stroke_color(self, r: float, g: float, b: float) -> None: ...

    @abstractmethod
    def set_line_width(self, width: float) -> None: ...

    @abstractmethod
    def begin_text(self) -> None: ...

    @abstractmethod
    def end_text(self) -> None: ...

    @abstractmethod
    def move_text_cursor(self, dx: float, dy: float) -> None:
        """将当前行起点平移 (dx, dy)；dy 向上为正。"""

    @abstractmethod
    def draw_text(self, text: str) -> None:
        """在当前位置绘制文本，光标沿行方向前进文本宽度。"""

    @abstractmethod
    def rect(self, x: float, y: float, width: float, height: float) -> None: ...

    @abstractmethod
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    @abstractmethod
    def circle(self, x: float, y: float, radius: float) -> None:
        """添加圆形路径；(x, y) 为外接正方形的左下角。"""

    @abstractmethod
    def fill(self) -> None: ...

    @abstractmethod
    def stroke(self) -> None: ...

    @abstractmethod
    def fill_and_stroke(self) -> None: ...

    @abstractmethod
    def to_bytes(self) -> bytes:
        """结束页面并返回完整的 PDF 字节流。"""


class DryRunCanvas(PdfCanvas):
    """试排画布：度量委托给真实画布，所有绘制调用均为空操作。

    用于两遍排版中的“度量”一遍：与真实绘制共享同一控制流，但不产生任何输出。
    """

    def __init__(self, measured_by: PdfCanvas) -> None:
        self._measured_by = measured_by

    @property
    def width(self) -> float:
        return self._measured_by.width

    @property
    def height(self) -> float:
        return self._measured_by.height

    def measure_text_width(self, text: str, font_name: str, font_size: float) -> float:
        return self._measured_by.measure_text_width(text, font_name, font_size)

    def set_font(self, font_name: str, font_size: float) -> None:
        pass

    def set_fill_color(self, r: float, g: float, b: float) -> None:
        pass

    def set_stroke_color(self, r: float, g: float, b: float) -> None:
        pass

    def set_line_width(self, width: float) -> None:
        pass

    def begin_text(self) -> None:
        pass

    def end_text(self) -> None:
        pass

    def move_text_cursor(self, dx: float, dy: float) -> None:
        pass

    def draw_text(self, text: str) -> None:
        pass

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        pass

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        pass

    def circle(self, x: float, y: float, radius: float) -> None:
        pass

    def fill(self) -> None:
        pass

    def stroke(self) -> None:
        pass

    def fill_and_stroke(self) -> None:
        pass

    def to_bytes(self) -> bytes:
        return b""


PageSize = Tuple[float, float]


__all__ = ["PdfCanvas", "DryRunCanvas", "PageSize", "single_line_text"]
