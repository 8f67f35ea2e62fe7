"""
文件路径：puzzlepdf/variables.py

模块职责：
- 统一管理全局跨模块变量，确保模块化、无冲突、可追溯，可复用。
- 变量命名规范：{分类前缀}_{描述性名称}（全大写+下划线）。
  - PATH_：路径相关
  - STYLE_：版式相关（单位均为 pt）
  - CONST_：通用常量与布局阈值
  - ERR_：错误码

使用说明：
- 业务模块严禁定义新的全局变量，必须从本模块导入所需常量。
- 目录路径均使用 pathlib.Path 对象表示，使用时如需字符串请显式 str() 转换。
"""

from pathlib import Path
from typing import Tuple


# =============================
# 路径（PATH_）
# =============================
# 项目根目录：定位到当前文件（variables.py）的上两级目录
PATH_ROOT: Path = Path(__file__).resolve().parents[1]

PATH_OUTPUT_DIR: Path = PATH_ROOT / "output"
PATH_LOGS_DIR: Path = PATH_ROOT / "logs"
PATH_LOG_FILE: Path = PATH_LOGS_DIR / "app.log"  # 应用运行日志
PATH_SAMPLES_DIR: Path = PATH_ROOT / "samples"
PATH_SAMPLE_PUZZLE_JSON: Path = PATH_SAMPLES_DIR / "sample_puzzle.json"  # 默认输入谜题


# =============================
# 版式（STYLE_）
# =============================
STYLE_MARGIN: float = 36.0  # 上下左右页边距
STYLE_TITLE_SIZE: float = 16.0  # 标题字号
STYLE_AUTHOR_SIZE: float = 14.0  # 作者字号
STYLE_NOTES_SIZE: float = 12.0  # 备注字号
STYLE_COPYRIGHT_SIZE: float = 9.0  # 版权行字号
STYLE_HEADER_CLUES_SPACING: float = 28.0  # 页眉文字与线索区之间的间距
STYLE_COLUMN_PADDING: float = 12.0  # 相邻线索栏之间的间距
STYLE_GRID_NUMBER_X_OFFSET: float = 2.0  # 格内编号的 X 偏移（Y 偏移由字号决定）
STYLE_LINE_SPACING: float = 1.15  # 行距倍数
STYLE_CLUE_HEADER_SIZE_DELTA: float = 1.0  # 分区标题（ACROSS/DOWN）比线索正文大的字号
STYLE_BORDER_LINE_WIDTH: float = 3.0  # 格子粗边框线宽
STYLE_DEFAULT_LINE_WIDTH: float = 1.0  # 默认线宽
STYLE_BLACK_HEX: str = "#000000"
STYLE_WHITE_HEX: str = "#ffffff"


# =============================
# 常量（CONST_）
# =============================
CONST_ENCODING: str = "utf-8"  # 文件读写默认编码
CONST_PAGE_SIZE_DEFAULT: Tuple[float, float] = (612.0, 792.0)  # US Letter

# 字号搜索
CONST_CLUE_TEXT_MIN_SIZE: float = 5.0
CONST_CLUE_TEXT_MAX_SIZE: float = 11.0
CONST_SOLUTION_TEXT_MIN_SIZE: float = 3.0
CONST_SOLUTION_TEXT_MAX_SIZE: float = 16.0
CONST_TEXT_SIZE_DELTA: float = 0.1  # 每次尝试缩小的字号步长
CONST_SOLUTION_FILL_RATIO: float = 0.8  # 答案文字可占用格边长的比例

# 多字答案（rebus）截断与分行
CONST_REBUS_MAX_LENGTH: int = 8  # 超过该长度时截断
CONST_REBUS_TRUNCATED_LENGTH: int = 5  # 截断后保留的字符数
CONST_REBUS_ELLIPSIS: str = "..."
CONST_REBUS_CHUNK_SIZE: int = 4  # 每行字符数

# 网格几何查表阈值（固定规则，不可配置）
CONST_FOUR_COLUMN_MIN_ROWS: int = 15  # 行数 >= 15 时使用 4 栏线索，否则 3 栏
CONST_LARGE_NUMBER_MAX_ROWS: int = 17  # 行数 <= 17 时格内编号 8pt，否则 6pt
CONST_GRID_NUMBER_SIZE_LARGE: float = 8.0
CONST_GRID_NUMBER_SIZE_SMALL: float = 6.0
CONST_GRID_NUMBER_ERASE_SHRINK: float = 2.0  # 编号背景擦除矩形比字号矮的高度
CONST_WIDE_GRID_MIN_ROWS: int = 15  # 行数 >= 15 时网格占内容宽度 70%，否则 60%
CONST_GRID_WIDTH_FRACTION_WIDE: float = 0.7
CONST_GRID_WIDTH_FRACTION_NARROW: float = 0.6

CONST_ACROSS_HEADER: str = "ACROSS"
CONST_DOWN_HEADER: str = "DOWN"

CONST_ENGINE_REPORTLAB: str = "reportlab"
CONST_ENGINE_PYMUPDF: str = "pymupdf"
CONST_ENGINE_DEFAULT: str = CONST_ENGINE_REPORTLAB

CONST_MAX_RETRY: int = 2  # 通用重试次数，用于 IO 等可重试操作
CONST_DEFAULT_OUTPUT_SUFFIX: str = ".pdf"

# 日志格式（供 logging.basicConfig 使用）
CONST_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONST_LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


# =============================
# 错误码（ERR_）
# =============================
# 1xxx：文件/路径相关
ERR_FILE_NOT_FOUND: int = 1001  # 输入文件不存在
ERR_PATH_NOT_WRITABLE: int = 1003  # 目标路径不可写

# 2xxx：排版相关
ERR_CLUES_DO_NOT_FIT: int = 2001  # 任何字号下线索都无法放入单页
ERR_SOLUTION_DOES_NOT_FIT: int = 2002  # 答案文字无法放入格子
ERR_UNKNOWN_ENGINE: int = 2003  # 未知的绘制引擎

# 3xxx：写入相关
ERR_PDF_WRITE_FAILED: int = 3002  # PDF 写入失败

# 4xxx：数据相关
ERR_DATA_INVALID: int = 4002  # 输入数据非法


# =============================
# 导出声明
# =============================
__all__ = [
    # PATH_
    "PATH_ROOT",
    "PATH_OUTPUT_DIR",
    "PATH_LOGS_DIR",
    "PATH_LOG_FILE",
    "PATH_SAMPLES_DIR",
    "PATH_SAMPLE_PUZZLE_JSON",
    # STYLE_
    "STYLE_MARGIN",
    "STYLE_TITLE_SIZE",
    "STYLE_AUTHOR_SIZE",
    "STYLE_NOTES_SIZE",
    "STYLE_COPYRIGHT_SIZE",
    "STYLE_HEADER_CLUES_SPACING",
    "STYLE_COLUMN_PADDING",
    "STYLE_GRID_NUMBER_X_OFFSET",
    "STYLE_LINE_SPACING",
    "STYLE_CLUE_HEADER_SIZE_DELTA",
    "STYLE_BORDER_LINE_WIDTH",
    "STYLE_DEFAULT_LINE_WIDTH",
    "STYLE_BLACK_HEX",
    "STYLE_WHITE_HEX",
    # CONST_
    "CONST_ENCODING",
    "CONST_PAGE_SIZE_DEFAULT",
    "CONST_CLUE_TEXT_MIN_SIZE",
    "CONST_CLUE_TEXT_MAX_SIZE",
    "CONST_SOLUTION_TEXT_MIN_SIZE",
    "CONST_SOLUTION_TEXT_MAX_SIZE",
    "CONST_TEXT_SIZE_DELTA",
    "CONST_SOLUTION_FILL_RATIO",
    "CONST_REBUS_MAX_LENGTH",
    "CONST_REBUS_TRUNCATED_LENGTH",
    "CONST_REBUS_ELLIPSIS",
    "CONST_REBUS_CHUNK_SIZE",
    "CONST_FOUR_COLUMN_MIN_ROWS",
    "CONST_LARGE_NUMBER_MAX_ROWS",
    "CONST_GRID_NUMBER_SIZE_LARGE",
    "CONST_GRID_NUMBER_SIZE_SMALL",
    "CONST_GRID_NUMBER_ERASE_SHRINK",
    "CONST_WIDE_GRID_MIN_ROWS",
    "CONST_GRID_WIDTH_FRACTION_WIDE",
    "CONST_GRID_WIDTH_FRACTION_NARROW",
    "CONST_ACROSS_HEADER",
    "CONST_DOWN_HEADER",
    "CONST_ENGINE_REPORTLAB",
    "CONST_ENGINE_PYMUPDF",
    "CONST_ENGINE_DEFAULT",
    "CONST_MAX_RETRY",
    "CONST_DEFAULT_OUTPUT_SUFFIX",
    "CONST_LOG_FORMAT",
    "CONST_LOG_DATEFMT",
    # ERR_
    "ERR_FILE_NOT_FOUND",
    "ERR_PATH_NOT_WRITABLE",
    "ERR_CLUES_DO_NOT_FIT",
    "ERR_SOLUTION_DOES_NOT_FIT",
    "ERR_UNKNOWN_ENGINE",
    "ERR_PDF_WRITE_FAILED",
    "ERR_DATA_INVALID",
]
