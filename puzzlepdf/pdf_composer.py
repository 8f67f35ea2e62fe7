"""
文件路径：puzzlepdf/pdf_composer.py

模块职责：
- 单页填字谜 PDF 的排版编排：计算页面几何，依次绘制页眉、线索分栏、网格与版权行，输出字节流；
- 仅通过 `puzzlepdf/components` 进行通用操作（日志、文件、重试），跨模块变量统一从 `puzzlepdf/variables.py` 引用。

版面（左下原点）：
- 页眉：标题（粗体 16pt）、作者（14pt）、备注（斜体 12pt，非空时），均按内容宽度换行，行距 1.15；
- 页眉下方空 28pt 开始线索区；网格贴右边距，底部位于下边距 + 版权行字号处；
- 版权行（9pt）与网格左边对齐，位于下边距。

异常：
- ClueLayoutError / SolutionTextError：放不下即本次转换失败，不做分页等自动回退。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .components import (
    ErrorHandler,
    FileHandler,
    FONT_FAMILY_TIMES_ROMAN,
    PdfFontFamily,
    compute_page_geometry,
    get_logger,
    retry_on_exception,
    split_text_to_lines,
)
from .components.geometry import PageGeometry
from .model import Crossword
from .processors.clues import ClueColumnFrame, ClueColumnLayout
from .processors.engines import PageSize, PdfCanvas, create_canvas
from .processors.grid import GridRenderer
from .variables import (
    CONST_ENGINE_DEFAULT,
    CONST_PAGE_SIZE_DEFAULT,
    ERR_PDF_WRITE_FAILED,
    STYLE_AUTHOR_SIZE,
    STYLE_COPYRIGHT_SIZE,
    STYLE_HEADER_CLUES_SPACING,
    STYLE_LINE_SPACING,
    STYLE_MARGIN,
    STYLE_NOTES_SIZE,
    STYLE_TITLE_SIZE,
)


logger = get_logger(__name__)


class PdfComposer:
    """把 Crossword 排版为单页 PDF。"""

    def __init__(
        self,
        font_family: PdfFontFamily = FONT_FAMILY_TIMES_ROMAN,
        black_square_lightness_adjustment: float = 0.0,
        engine: str = CONST_ENGINE_DEFAULT,
        page_size: PageSize = CONST_PAGE_SIZE_DEFAULT,
    ) -> None:
        """
        参数：
            font_family: 字体族（基础/粗体/斜体/粗斜体）。
            black_square_lightness_adjustment: 0~1，提亮黑格与彩色格以省墨；0 不调整，1 为全白。
            engine: 绘制引擎名（reportlab / pymupdf）。
            page_size: 页面尺寸（pt），默认 US Letter。
        """
        if not 0.0 <= black_square_lightness_adjustment <= 1.0:
            raise ValueError("black_square_lightness_adjustment 必须位于 [0, 1]")
        self.font_family = font_family
        self.black_square_lightness_adjustment = black_square_lightness_adjustment
        self.engine = engine
        self.page_size = page_size
        # 当前行基线 Y，仅在 compose 过程中有效
        self._position_y = 0.0

    # -----------------------------
    # 对外入口
    # -----------------------------
    def compose(self, crossword: Crossword, canvas: Optional[PdfCanvas] = None) -> bytes:
        """排版并返回 PDF 字节流。

        参数：
            crossword: 谜题模型。
            canvas: 可选的绘制面；缺省时按 engine 与 page_size 新建。
        """
        if canvas is None:
            canvas = create_canvas(self.engine, self.page_size)
        geometry = compute_page_geometry(canvas.width, canvas.height, crossword.rows, crossword.cols)
        logger.info(
            "开始排版：%r（%sx%s，%s 栏，引擎=%s）",
            crossword.title,
            crossword.rows,
            crossword.cols,
            geometry.columns,
            self.engine,
        )

        canvas.begin_text()
        canvas.move_text_cursor(geometry.title_x, geometry.title_y)
        self._position_y = geometry.title_y
        self._draw_header(canvas, crossword, geometry)
        self._new_line(canvas, STYLE_HEADER_CLUES_SPACING)

        frame = ClueColumnFrame(
            column_width=geometry.column_width,
            columns=geometry.columns,
            clue_top_y=self._position_y,
            grid_y=geometry.grid_y,
            grid_height=geometry.grid_height,
        )
        ClueColumnLayout(
            self.font_family,
            frame,
            crossword.across_clues,
            crossword.down_clues,
            has_html_clues=crossword.has_html_clues,
        ).layout(canvas)
        canvas.end_text()

        GridRenderer(self.font_family, self.black_square_lightness_adjustment).draw(canvas, crossword, geometry)
        self._draw_copyright(canvas, crossword, geometry)

        data = canvas.to_bytes()
        logger.info("排版完成：%r，%.1f KB", crossword.title, len(data) / 1024.0)
        return data

    def write(self, crossword: Crossword, output_path: Path) -> Path:
        """排版并写入文件，返回输出路径。"""
        data = self.compose(crossword)
        FileHandler.ensure_parent_writable(output_path)
        try:
            self._write_bytes(output_path, data)
        except OSError as exc:
            logger.error("[%s] PDF 写入失败：%s", ERR_PDF_WRITE_FAILED, exc)
            raise OSError(ErrorHandler.format_error(ERR_PDF_WRITE_FAILED, f"PDF 写入失败: {output_path}")) from exc
        logger.info("已输出：%s", output_path)
        return output_path

    @retry_on_exception(exceptions=(OSError,))
    def _write_bytes(self, output_path: Path, data: bytes) -> None:
        output_path.write_bytes(data)

    # -----------------------------
    # 页眉与版权
    # -----------------------------
    def _new_line(self, canvas: PdfCanvas, offset_y: float) -> None:
        canvas.move_text_cursor(0, -offset_y)
        self._position_y -= offset_y

    def _draw_multi_line_text(
        self, canvas: PdfCanvas, text: str, font_name: str, font_size: float, line_width: float
    ) -> None:
        canvas.set_font(font_name, font_size)
        wrapped = split_text_to_lines(text, font_name, font_size, line_width, measure=canvas.measure_text_width)
        for index, line in enumerate(wrapped.lines):
            if index > 0:
                self._new_line(canvas, font_size * STYLE_LINE_SPACING)
            canvas.draw_text(line)

    def _draw_header(self, canvas: PdfCanvas, crossword: Crossword, geometry: PageGeometry) -> None:
        family = self.font_family
        width = geometry.header_width
        self._draw_multi_line_text(canvas, crossword.title, family.bold, STYLE_TITLE_SIZE, width)
        self._new_line(canvas, STYLE_AUTHOR_SIZE * STYLE_LINE_SPACING)
        self._draw_multi_line_text(canvas, crossword.author, family.base, STYLE_AUTHOR_SIZE, width)
        if crossword.notes.strip():
            self._new_line(canvas, STYLE_NOTES_SIZE * STYLE_LINE_SPACING)
            self._draw_multi_line_text(canvas, crossword.notes, family.italic, STYLE_NOTES_SIZE, width)

    def _draw_copyright(self, canvas: PdfCanvas, crossword: Crossword, geometry: PageGeometry) -> None:
        # 网格绘制后填充色可能停留在格子底色上
        canvas.set_fill_color(0.0, 0.0, 0.0)
        canvas.begin_text()
        canvas.move_text_cursor(geometry.grid_x, STYLE_MARGIN)
        canvas.set_font(self.font_family.base, STYLE_COPYRIGHT_SIZE)
        canvas.draw_text(crossword.copyright)
        canvas.end_text()


__all__ = ["PdfComposer"]
