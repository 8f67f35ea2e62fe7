"""
文件路径：puzzlepdf/components/errors.py

说明：统一的错误码格式化与排版失败异常类型。
- 字号搜索本身只返回 Optional[float]；由排版编排层把 None 转换为这里的类型化异常。
"""

from __future__ import annotations

from ..variables import ERR_CLUES_DO_NOT_FIT, ERR_DATA_INVALID, ERR_SOLUTION_DOES_NOT_FIT


class ErrorHandler:
    """错误处理相关工具。"""

    @staticmethod
    def format_error(err_code: int, message: str) -> str:
        """生成统一错误信息字符串。"""
        return f"[{err_code}] {message}"


class LayoutFitError(ValueError):
    """排版无法放入给定区域（致命错误，本次转换失败，无自动回退）。"""

    code: int = 0

    def __init__(self, message: str) -> None:
        super().__init__(ErrorHandler.format_error(self.code, message))
        self.detail = message


class ClueLayoutError(LayoutFitError):
    """任何候选字号下线索都无法放入单页的全部线索栏。"""

    code = ERR_CLUES_DO_NOT_FIT


class SolutionTextError(LayoutFitError):
    """格内答案文字在任何候选字号下都放不进格子 80% 的区域。"""

    code = ERR_SOLUTION_DOES_NOT_FIT


class InvalidFormatException(ValueError):
    """谜题数据无法解析为内存模型。"""

    code: int = ERR_DATA_INVALID

    def __init__(self, message: str) -> None:
        super().__init__(ErrorHandler.format_error(self.code, message))
        self.detail = message


__all__ = [
    "ErrorHandler",
    "LayoutFitError",
    "ClueLayoutError",
    "SolutionTextError",
    "InvalidFormatException",
]
