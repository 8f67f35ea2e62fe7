"""
文件路径：puzzlepdf/processors/sizing.py

说明：通用字号搜索（FontSizeSearch）。
- 从 max 开始按固定步长严格递减尝试，首个通过检测的字号即返回；全部失败返回 None。
- 假设“字号越小越容易放下”（检测函数对字号单调），此处不做校验：
  若检测函数不单调，结果只是“递减方向上的首个成功值”，不一定最优。
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from ..variables import CONST_TEXT_SIZE_DELTA


def candidate_font_sizes(min_size: float, max_size: float, step: float = CONST_TEXT_SIZE_DELTA) -> Iterator[float]:
    """依次产出 max, max-step, max-2*step, ...（均 >= min）。

    以整数倍步长计算并取整到 6 位小数，避免浮点累加误差把最后一个字号挤出区间。
    """
    if step <= 0:
        raise ValueError("step 必须为正数")
    i = 0
    while True:
        size = round(max_size - i * step, 6)
        if size < min_size:
            return
        yield size
        i += 1


def find_best_font_size(
    min_size: float,
    max_size: float,
    fits: Callable[[float], bool],
    step: float = CONST_TEXT_SIZE_DELTA,
) -> Optional[float]:
    """返回区间内能通过 fits 检测的最大字号；没有则返回 None。"""
    for size in candidate_font_sizes(min_size, max_size, step):
        if fits(size):
            return size
    return None


__all__ = ["candidate_font_sizes", "find_best_font_size"]
