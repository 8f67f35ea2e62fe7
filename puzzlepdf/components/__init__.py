"""
文件路径：puzzlepdf/components/__init__.py

说明：
- 通用组件包入口：日志、文件路径、重试机制，以及文本度量/换行、富文本切分、字体、颜色、几何等子模块的聚合导出；
- 业务模块与测试统一使用 `from puzzlepdf.components import ...` 导入。
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Iterable, Optional, Type

from ..variables import (
    PATH_LOGS_DIR,
    PATH_OUTPUT_DIR,
    PATH_LOG_FILE,
    CONST_DEFAULT_OUTPUT_SUFFIX,
    CONST_LOG_FORMAT,
    CONST_LOG_DATEFMT,
    CONST_MAX_RETRY,
    ERR_PATH_NOT_WRITABLE,
    ERR_FILE_NOT_FOUND,
)

# 聚合导出：拆分后的子模块
from .errors import (
    ErrorHandler,
    LayoutFitError,
    ClueLayoutError,
    SolutionTextError,
    InvalidFormatException,
)
from .text import MeasureFn, WrapResult, measure_text_width, split_text_to_lines
from .markup import (
    TextToken,
    LineBreakToken,
    FontChangeToken,
    Token,
    LINE_BREAK,
    tokenize_clue,
    count_lines,
)
from .fonts import (
    PdfFontFamily,
    FONT_FAMILY_TIMES_ROMAN,
    FONT_FAMILY_HELVETICA,
    FONT_FAMILY_COURIER,
    get_font_family,
    register_ttf_family,
)
from .colors import parse_hex_color, get_adjusted_color
from .geometry import (
    PageGeometry,
    compute_page_geometry,
    get_clue_columns,
    get_grid_number_size,
    get_grid_width_fraction,
)


# =============================
# 日志工具
# =============================
_LOGGER_CONFIGURED: bool = False


def get_logger(name: str) -> logging.Logger:
    """获取 logger，首次调用时配置文件与控制台双输出。

    参数：
        name: 日志记录器名称（一般使用 __name__）。

    返回：
        logging.Logger 对象。
    """
    global _LOGGER_CONFIGURED
    if not _LOGGER_CONFIGURED:
        # 确保日志目录存在
        PATH_LOGS_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(PATH_LOG_FILE, encoding="utf-8")
        console_handler = logging.StreamHandler()
        logging.basicConfig(
            level=logging.INFO,
            format=CONST_LOG_FORMAT,
            datefmt=CONST_LOG_DATEFMT,
            handlers=[file_handler, console_handler],
        )
        _LOGGER_CONFIGURED = True
    return logging.getLogger(name)


# =============================
# 文件操作
# =============================
class FileHandler:
    """文件与路径相关的通用处理器。"""

    @staticmethod
    def validate_readable_file(path: Path) -> None:
        """校验文件可读。

        异常：
            FileNotFoundError: 文件不存在或不可读。
        """
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(ErrorHandler.format_error(ERR_FILE_NOT_FOUND, f"文件不存在或不可读: {path}"))

    @staticmethod
    def ensure_parent_writable(target: Path) -> None:
        """确保目标文件的父目录可写，不存在则创建。

        异常：
            PermissionError: 目录不可写。
        """
        parent = target.parent
        parent.mkdir(parents=True, exist_ok=True)
        # Windows 上 os.access 可能不可靠，尝试创建临时文件验证
        probe = parent / f".__writable_probe_{int(time.time()*1000)}"
        try:
            with open(probe, "w", encoding="utf-8") as f:  # noqa: P103
                f.write("probe")
        except OSError as exc:
            raise PermissionError(ErrorHandler.format_error(ERR_PATH_NOT_WRITABLE, f"目录不可写: {parent}")) from exc
        else:
            probe.unlink(missing_ok=True)

    @staticmethod
    def timestamped_output_path(
        input_path: Optional[Path],
        suffix: str = CONST_DEFAULT_OUTPUT_SUFFIX,
        output_dir: Optional[Path] = None,
    ) -> Path:
        """生成带时间戳的输出路径，默认位于 output 目录。

        返回：
            输出路径，例如 output/puzzle_20240101_120000.pdf
        """
        target_dir = output_dir if output_dir is not None else PATH_OUTPUT_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y%m%d_%H%M%S")
        stem = input_path.stem if input_path is not None else "puzzle"
        return target_dir / f"{stem}_{ts}{suffix}"


# =============================
# 重试机制
# =============================
def retry_on_exception(
    retries: int = CONST_MAX_RETRY,
    exceptions: Iterable[Type[BaseException]] = (Exception,),
    delay_s: float = 0.2,
    backoff: float = 2.0,
) -> Callable[[Callable[..., object]], Callable[..., object]]:
    """装饰器：异常自动重试，含指数退避。

    参数：
        retries: 重试次数（不含首次）。
        exceptions: 触发重试的异常类型集合。
        delay_s: 初始等待秒数。
        backoff: 每次重试的等待倍数。
    """
    exc_types = tuple(exceptions)

    def decorator(func: Callable[..., object]) -> Callable[..., object]:
        def wrapper(*args, **kwargs):
            wait = delay_s
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except exc_types as exc:  # type: ignore[misc]
                    if attempt >= retries:
                        raise
                    logger = get_logger(func.__module__)
                    logger.warning("操作失败，准备重试（第 %s 次）：%s", attempt + 1, exc)
                    time.sleep(wait)
                    wait *= backoff
                    attempt += 1

        return wrapper

    return decorator


# =============================
# 导出声明
# =============================
__all__ = [
    # 日志工具
    "get_logger",
    # 文件操作
    "FileHandler",
    # 重试与错误处理
    "retry_on_exception",
    "ErrorHandler",
    "LayoutFitError",
    "ClueLayoutError",
    "SolutionTextError",
    "InvalidFormatException",
    # 文本度量与换行
    "MeasureFn",
    "WrapResult",
    "measure_text_width",
    "split_text_to_lines",
    # 富文本切分
    "TextToken",
    "LineBreakToken",
    "FontChangeToken",
    "Token",
    "LINE_BREAK",
    "tokenize_clue",
    "count_lines",
    # 字体与颜色
    "PdfFontFamily",
    "FONT_FAMILY_TIMES_ROMAN",
    "FONT_FAMILY_HELVETICA",
    "FONT_FAMILY_COURIER",
    "get_font_family",
    "register_ttf_family",
    "parse_hex_color",
    "get_adjusted_color",
    # 几何
    "PageGeometry",
    "compute_page_geometry",
    "get_clue_columns",
    "get_grid_number_size",
    "get_grid_width_fraction",
]
