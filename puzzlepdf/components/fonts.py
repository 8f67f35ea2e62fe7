"""
文件路径：puzzlepdf/components/fonts.py

说明：字体族定义与注册。
- 内置三套 PDF Base-14 字体族（Times-Roman / Helvetica / Courier），无需嵌入；
- 也可通过 ReportLab TTFont 注册一套 TrueType 字体族（四个字形文件）。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .errors import ErrorHandler
from ..variables import ERR_FILE_NOT_FOUND


@dataclass(frozen=True)
class PdfFontFamily:
    """一套字体族：常规、粗体、斜体、粗斜体四个字形的字体名。"""

    base: str
    bold: str
    italic: str
    bold_italic: str

    def font_for(self, bold: bool, italic: bool) -> str:
        """按当前粗体/斜体状态选择字形。"""
        if bold and italic:
            return self.bold_italic
        if bold:
            return self.bold
        if italic:
            return self.italic
        return self.base


FONT_FAMILY_TIMES_ROMAN = PdfFontFamily(
    base="Times-Roman",
    bold="Times-Bold",
    italic="Times-Italic",
    bold_italic="Times-BoldItalic",
)

FONT_FAMILY_HELVETICA = PdfFontFamily(
    base="Helvetica",
    bold="Helvetica-Bold",
    italic="Helvetica-Oblique",
    bold_italic="Helvetica-BoldOblique",
)

FONT_FAMILY_COURIER = PdfFontFamily(
    base="Courier",
    bold="Courier-Bold",
    italic="Courier-Oblique",
    bold_italic="Courier-BoldOblique",
)

BUILTIN_FONT_FAMILIES: Dict[str, PdfFontFamily] = {
    "times": FONT_FAMILY_TIMES_ROMAN,
    "helvetica": FONT_FAMILY_HELVETICA,
    "courier": FONT_FAMILY_COURIER,
}


def get_font_family(name: Optional[str]) -> PdfFontFamily:
    """按名称获取内置字体族；空名称返回默认的 Times-Roman。"""
    if not name:
        return FONT_FAMILY_TIMES_ROMAN
    key = name.strip().lower()
    if key not in BUILTIN_FONT_FAMILIES:
        raise KeyError(f"未知字体族：{name}（可选：{', '.join(sorted(BUILTIN_FONT_FAMILIES))}）")
    return BUILTIN_FONT_FAMILIES[key]


def register_ttf_family(
    family_name: str,
    base_path: Path,
    bold_path: Optional[Path] = None,
    italic_path: Optional[Path] = None,
    bold_italic_path: Optional[Path] = None,
) -> PdfFontFamily:
    """注册一套 TrueType 字体族；缺失的字形回退到常规字形。

    说明：仅 ReportLab 引擎可使用注册后的字体名；PyMuPDF 引擎只识别 Base-14 字体。
    """
    faces = {
        "base": base_path,
        "bold": bold_path or base_path,
        "italic": italic_path or base_path,
        "bold_italic": bold_italic_path or bold_path or base_path,
    }
    names: Dict[str, str] = {}
    for face, path in faces.items():
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(ErrorHandler.format_error(ERR_FILE_NOT_FOUND, f"字体文件不存在：{p}"))
        font_name = f"{family_name}-{face}"
        pdfmetrics.registerFont(TTFont(font_name, str(p)))
        names[face] = font_name
    return PdfFontFamily(**names)


__all__ = [
    "PdfFontFamily",
    "FONT_FAMILY_TIMES_ROMAN",
    "FONT_FAMILY_HELVETICA",
    "FONT_FAMILY_COURIER",
    "BUILTIN_FONT_FAMILIES",
    "get_font_family",
    "register_ttf_family",
]
