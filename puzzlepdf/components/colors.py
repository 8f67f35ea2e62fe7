"""
文件路径：puzzlepdf/components/colors.py

说明：颜色解析与亮度调整（用于黑格/彩色格省墨打印）。
"""

from __future__ import annotations

import colorsys
from typing import Tuple

from reportlab.lib import colors


RGB = Tuple[float, float, float]


def parse_hex_color(hex_string: str) -> RGB:
    """将 "#rrggbb" 解析为 0~1 的 RGB 三元组。"""
    c = colors.HexColor(hex_string.strip())
    return (float(c.red), float(c.green), float(c.blue))


def get_adjusted_color(hex_string: str, lightness_adjustment: float) -> RGB:
    """在 HSL 空间中提高亮度。

    参数：
        hex_string: 颜色，例如 "#000000"。
        lightness_adjustment: 0~1；0 表示不调整，1 表示完全变白。

    返回：
        调整后的 RGB（0~1，按 8 位通道取整）。
    """
    r, g, b = parse_hex_color(hex_string)
    if lightness_adjustment <= 0:
        return (r, g, b)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    lightness_pct = l * 100.0
    adjusted_pct = round(lightness_pct + (100.0 - lightness_pct) * min(1.0, lightness_adjustment))
    r2, g2, b2 = colorsys.hls_to_rgb(h, adjusted_pct / 100.0, s)
    return tuple(round(v * 255) / 255.0 for v in (r2, g2, b2))  # type: ignore[return-value]


__all__ = ["RGB", "parse_hex_color", "get_adjusted_color"]
