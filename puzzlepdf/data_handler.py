"""
文件路径：puzzlepdf/data_handler.py

模块职责：
- 读取 JSON 描述的填字谜，并构建为 `Crossword` 内存模型，供 PdfComposer 使用。

JSON 结构（除 grid 外均可省略）：
    {
      "title": "...", "author": "...", "copyright": "...", "notes": "...",
      "html_clues": false,
      "grid": ["AB#C", ...]                        # 字符串行：'#' 黑格，'.' 或空格为无答案白格
            | [[{"solution": "A", "circled": true}, "#", ...], ...],
      "across": {"1": "线索", ...} | [[1, "线索"], ...],
      "down": {...},
      "across_words": [[[x, y], ...], ...], "down_words": [...]
    }

格子对象字段：black / solution / rebus / given / circled / number / background / borders（top/left/right/bottom）。

变量引用说明（来自 puzzlepdf/variables.py）：
- CONST_ENCODING, ERR_DATA_INVALID（通过 InvalidFormatException）
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

from .components import FileHandler, InvalidFormatException, get_logger, parse_hex_color
from .model import BLACK_SQUARE, BorderDirection, Crossword, Square, Word
from .variables import CONST_ENCODING


logger = get_logger(__name__)


_BLACK_CHAR = "#"
_EMPTY_CHARS = (".", " ")


def _json_loads_strip_bom(content: str):
    """解析 JSON 字符串，自动去除 UTF-8 BOM。"""
    if content.startswith("\ufeff"):
        content = content.lstrip("\ufeff")
    return json.loads(content)


def load_crossword_json(path: Path) -> Crossword:
    """从 JSON 文件加载填字谜。

    异常：
        FileNotFoundError: 文件不存在。
        InvalidFormatException: JSON 非法或结构不符合要求。
    """
    FileHandler.validate_readable_file(path)
    content = path.read_text(encoding=CONST_ENCODING)
    try:
        data = _json_loads_strip_bom(content)
    except json.JSONDecodeError as exc:
        raise InvalidFormatException(f"JSON 解析失败: {path}: {exc}") from exc
    crossword = crossword_from_dict(data)
    logger.info("已加载谜题：%s（%sx%s）", path, crossword.rows, crossword.cols)
    return crossword


def crossword_from_dict(data: Mapping[str, Any]) -> Crossword:
    """将已解析的 JSON 对象转换为 Crossword。"""
    if not isinstance(data, Mapping):
        raise InvalidFormatException("顶层必须是 JSON 对象")
    if "grid" not in data:
        raise InvalidFormatException("缺少 grid 字段")
    return Crossword(
        title=str(data.get("title") or ""),
        author=str(data.get("author") or ""),
        copyright=str(data.get("copyright") or ""),
        notes=str(data.get("notes") or ""),
        grid=_parse_grid(data["grid"]),
        across_clues=_parse_clues(data.get("across") or {}, "across"),
        down_clues=_parse_clues(data.get("down") or {}, "down"),
        has_html_clues=bool(data.get("html_clues", False)),
        across_words=_parse_words(data.get("across_words") or [], "across_words"),
        down_words=_parse_words(data.get("down_words") or [], "down_words"),
    )


# -----------------------------
# 网格
# -----------------------------
def _parse_grid(raw_grid: Any) -> List[List[Square]]:
    if not isinstance(raw_grid, list):
        raise InvalidFormatException("grid 必须是数组")
    grid: List[List[Square]] = []
    for y, raw_row in enumerate(raw_grid):
        if isinstance(raw_row, str):
            grid.append([_square_from_char(ch) for ch in raw_row])
        elif isinstance(raw_row, list):
            grid.append([_parse_square(item, x, y) for x, item in enumerate(raw_row)])
        else:
            raise InvalidFormatException(f"grid 第 {y + 1} 行必须是字符串或数组")
    return grid


def _square_from_char(ch: str) -> Square:
    if ch == _BLACK_CHAR:
        return BLACK_SQUARE
    if ch in _EMPTY_CHARS:
        return Square()
    return Square(solution=ch)


def _parse_square(item: Any, x: int, y: int) -> Square:
    if isinstance(item, str):
        if len(item) > 1:
            return Square(solution_rebus=item)
        return _square_from_char(item) if item else Square()
    if not isinstance(item, Mapping):
        raise InvalidFormatException(f"格子 ({x}, {y}) 必须是字符串或对象")
    background = _parse_background(item.get("background"), x, y)
    if item.get("black"):
        return Square(is_black=True, background_color=background)

    number = item.get("number")
    if number is not None:
        try:
            number = int(number)
        except (TypeError, ValueError) as exc:
            raise InvalidFormatException(f"格子 ({x}, {y}) 的编号非法：{number!r}") from exc

    borders = set()
    for name in item.get("borders") or []:
        try:
            borders.add(BorderDirection(str(name).strip().lower()))
        except ValueError as exc:
            raise InvalidFormatException(f"格子 ({x}, {y}) 的边框方向非法：{name!r}") from exc

    solution = item.get("solution")
    return Square(
        solution=str(solution) if solution else None,
        solution_rebus=str(item.get("rebus") or ""),
        is_given=bool(item.get("given", False)),
        is_circled=bool(item.get("circled", False)),
        number=number,
        background_color=background,
        border_directions=frozenset(borders),
    )


def _parse_background(raw: Any, x: int, y: int) -> str:
    """背景色须为 "#rrggbb"；在加载阶段校验，避免绘制时才失败。"""
    if not raw:
        return ""
    background = str(raw).strip()
    try:
        parse_hex_color(background)
    except (TypeError, ValueError) as exc:
        raise InvalidFormatException(f"格子 ({x}, {y}) 的背景色非法：{raw!r}") from exc
    return background


# -----------------------------
# 线索与单词
# -----------------------------
def _parse_clues(raw: Any, field_name: str) -> Dict[int, str]:
    """线索保持输入顺序；编号统一转为 int。"""
    if isinstance(raw, Mapping):
        pairs = list(raw.items())
    elif isinstance(raw, list):
        pairs = []
        for entry in raw:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise InvalidFormatException(f"{field_name} 中的条目必须为 [编号, 线索]")
            pairs.append((entry[0], entry[1]))
    else:
        raise InvalidFormatException(f"{field_name} 必须是对象或数组")

    clues: Dict[int, str] = {}
    for number, text in pairs:
        try:
            clues[int(number)] = "" if text is None else str(text)
        except (TypeError, ValueError) as exc:
            raise InvalidFormatException(f"{field_name} 中的编号非法：{number!r}") from exc
    return clues


def _parse_words(raw: Any, field_name: str) -> List[Word]:
    if not isinstance(raw, list):
        raise InvalidFormatException(f"{field_name} 必须是数组")
    words: List[Word] = []
    for word in raw:
        try:
            words.append([(int(cell[0]), int(cell[1])) for cell in word])
        except (TypeError, ValueError, IndexError) as exc:
            raise InvalidFormatException(f"{field_name} 中的坐标非法：{word!r}") from exc
    return words


__all__ = ["load_crossword_json", "crossword_from_dict"]
