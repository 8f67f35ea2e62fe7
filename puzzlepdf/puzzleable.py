"""
文件路径：puzzlepdf/puzzleable.py

模块职责：
- 可转换为谜题模型的数据基类：`as_puzzle()` 结果按实例缓存，只计算一次；
- 并发调用通过实例级互斥锁串行化，共享同一次计算；计算失败不缓存，下一个调用者会重试。
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .model import Crossword


class Puzzleable(ABC):
    """可解析为 Crossword 模型的数据。"""

    def __init__(self) -> None:
        self._cached_puzzle_lock = threading.Lock()
        self._cached_puzzle: Optional["Crossword"] = None

    def as_puzzle(self) -> "Crossword":
        """解析并返回 Crossword；结果在多次调用之间缓存。"""
        with self._cached_puzzle_lock:
            if self._cached_puzzle is None:
                self._cached_puzzle = self.create_puzzle()
            return self._cached_puzzle

    @abstractmethod
    def create_puzzle(self) -> "Crossword":
        """解析并返回 Crossword（由子类实现，可能较耗时）。"""

    def as_pdf(self, **composer_options) -> bytes:
        """将谜题渲染为单页 PDF 字节流。

        参数：
            composer_options: 透传给 PdfComposer 的参数（font_family、engine 等）。
        """
        from .pdf_composer import PdfComposer  # 延迟导入避免循环

        return PdfComposer(**composer_options).compose(self.as_puzzle())


class DelegatingPuzzleable(Puzzleable):
    """由另一个 Puzzleable 组合而来的容器。"""

    @abstractmethod
    def get_puzzleable(self) -> Puzzleable:
        """返回被委托的 Puzzleable。"""

    def create_puzzle(self) -> "Crossword":
        return self.get_puzzleable().as_puzzle()


__all__ = ["Puzzleable", "DelegatingPuzzleable"]
