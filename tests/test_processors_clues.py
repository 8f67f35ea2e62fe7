from __future__ import annotations

import pytest

from conftest import RecordingCanvas, make_crossword
from puzzlepdf.components import FONT_FAMILY_TIMES_ROMAN, ClueLayoutError, compute_page_geometry
from puzzlepdf.pdf_composer import PdfComposer
from puzzlepdf.processors import ClueColumnFrame, ClueColumnLayout
from puzzlepdf.processors.engines import DryRunCanvas


# 字号 10 时：单行线索高 10pt，行距 11.5pt；分区标题与首条线索合计 22.5pt。
# 第一栏下边界为 grid_y=45，之后各栏下边界为网格顶部 145 + 字号。
FRAME = ClueColumnFrame(column_width=100, columns=3, clue_top_y=200, grid_y=45, grid_height=100)
LEFT_X = 36.0
NEXT_COLUMN_X = LEFT_X + 100 + 12
TWO_LINE_CLUE = "aaaa bbbb cccc dddd eeee"


def _clues(count, start=1):
    return {n: "x" for n in range(start, start + count)}


def _layout(across, down=None, frame=FRAME, html=False):
    return ClueColumnLayout(FONT_FAMILY_TIMES_ROMAN, frame, across, down or {}, has_html_clues=html)


def _render(layout, size=10.0):
    canvas = RecordingCanvas()
    canvas.begin_text()
    canvas.move_text_cursor(LEFT_X, layout.frame.clue_top_y)
    result = layout.run(canvas, size)
    canvas.end_text()
    return canvas, result


def _text_at(canvas, text):
    return [(op[2], op[3]) for op in canvas.text_ops() if op[1] == text]


class TestColumnOverflow:
    def test_first_column_holds_thirteen_single_line_clues(self):
        _, result = _render(_layout(_clues(15)))
        columns = [p.column for p in result.placements]
        assert columns == [0] * 13 + [1] * 2
        assert result.fits

    def test_overflowing_clue_starts_at_top_of_next_column(self):
        canvas, result = _render(_layout(_clues(15)))
        moved = result.placements[13]
        assert moved.number == 14
        assert moved.column == 1
        assert moved.position_y == pytest.approx(FRAME.clue_top_y)
        assert _text_at(canvas, "14 ") == [(pytest.approx(NEXT_COLUMN_X), pytest.approx(200))]

    def test_multi_line_clue_is_not_split(self):
        across = _clues(12)
        across[13] = TWO_LINE_CLUE
        canvas, result = _render(_layout(across))
        last = result.placements[-1]
        assert (last.number, last.column) == (13, 1)
        body = [op for op in canvas.text_ops() if op[1] in ("aaaa bbbb cccc", "dddd eeee")]
        assert [op[3] for op in body] == [pytest.approx(200), pytest.approx(188.5)]
        assert all(op[2] == pytest.approx(NEXT_COLUMN_X + 15) for op in body)

    def test_single_line_clue_fits_where_two_line_clue_does_not(self):
        _, result = _render(_layout(_clues(13)))
        assert result.placements[-1].column == 0

    def test_section_header_is_not_stranded(self):
        # 11 条横向线索后剩余空间只够一行，放不下“标题 + 首条线索”
        canvas, result = _render(_layout(_clues(11), _clues(2)))
        first_down = [p for p in result.placements if p.header == "DOWN"][0]
        assert first_down.column == 1
        assert _text_at(canvas, "DOWN") == [(pytest.approx(NEXT_COLUMN_X), pytest.approx(200))]
        assert first_down.position_y == pytest.approx(188.5)

    def test_down_continues_after_across_with_blank_line(self):
        canvas, result = _render(_layout(_clues(2), _clues(1, start=3)))
        across_last = [p for p in result.placements if p.header == "ACROSS"][-1]
        header_y = _text_at(canvas, "DOWN")[0][1]
        assert header_y == pytest.approx(across_last.position_y - 11.5 - 10)
        assert result.placements[-1].column == 0

    def test_running_out_of_columns_fails(self):
        _, result = _render(_layout(_clues(22)))
        assert not result.fits

    def test_capacity_limit_fits_exactly(self):
        _, result = _render(_layout(_clues(21)))
        assert result.fits
        assert [p.column for p in result.placements][-4:] == [2] * 4


class TestColumnOverflowOnPage:
    # 10 行网格（Letter）：3 栏，栏宽 172pt，网格顶部 369pt；线索区顶部 711.9pt。
    # 字号 11 时首条线索基线 699.25pt，行距 12.65pt，第一栏可容纳 52 条单行线索。
    def test_geometry_of_ten_row_grid(self):
        geometry = compute_page_geometry(612, 792, 10, 10)
        assert geometry.columns == 3
        assert geometry.column_width == pytest.approx(172)
        assert geometry.grid_top == pytest.approx(369)

    def test_overflowing_clue_moves_to_second_column(self):
        crossword = make_crossword(["." * 10] * 10, across=_clues(60))
        canvas = RecordingCanvas()
        PdfComposer().compose(crossword, canvas=canvas)
        prefixes = {op[1]: op for op in canvas.text_ops() if op[1].endswith(" ") and op[1][:-1].isdigit()}
        assert prefixes["52 "][2:4] == (pytest.approx(LEFT_X), pytest.approx(699.25 - 51 * 12.65))
        assert prefixes["53 "][2:4] == (pytest.approx(LEFT_X + 172 + 12), pytest.approx(711.9))
        assert prefixes["53 "][4] == ("Times-Roman", 11.0)
        assert prefixes["60 "][2] == pytest.approx(LEFT_X + 172 + 12)


class TestTwoPassProtocol:
    def test_dry_run_and_render_place_clues_identically(self):
        layout = _layout(_clues(15), {n: TWO_LINE_CLUE for n in range(20, 23)})
        _, rendered = _render(layout)
        dry = layout.run(DryRunCanvas(RecordingCanvas()), 10.0)
        again = layout.run(DryRunCanvas(RecordingCanvas()), 10.0)
        assert dry.placements == rendered.placements == again.placements
        assert dry.position == rendered.position

    def test_dry_run_draws_nothing(self):
        real = RecordingCanvas()
        _layout(_clues(5)).run(DryRunCanvas(real), 10.0)
        assert real.ops == []

    def test_font_size_is_largest_that_fits(self):
        layout = _layout(_clues(30))
        size = layout.find_font_size(RecordingCanvas())
        assert size is not None and 5.0 <= size < 11.0
        assert layout.run(DryRunCanvas(RecordingCanvas()), size).fits
        assert not layout.run(DryRunCanvas(RecordingCanvas()), round(size + 0.1, 6)).fits

    def test_layout_raises_when_nothing_fits(self):
        frame = ClueColumnFrame(column_width=100, columns=1, clue_top_y=100, grid_y=45, grid_height=40)
        canvas = RecordingCanvas()
        canvas.begin_text()
        with pytest.raises(ClueLayoutError) as excinfo:
            _layout(_clues(200), frame=frame).layout(canvas)
        assert "[2001]" in str(excinfo.value)

    def test_layout_renders_both_headers(self):
        canvas = RecordingCanvas()
        canvas.begin_text()
        canvas.move_text_cursor(LEFT_X, FRAME.clue_top_y)
        _layout(_clues(3), _clues(3, start=10)).layout(canvas)
        texts = canvas.texts()
        assert texts.count("ACROSS") == 1 and texts.count("DOWN") == 1
        assert texts.index("ACROSS") < texts.index("1 ") < texts.index("DOWN") < texts.index("10 ")


class TestClueRendering:
    def test_prefix_and_body_share_first_line(self):
        canvas, _ = _render(_layout({7: "Seven"}))
        ops = canvas.text_ops()
        prefix = [op for op in ops if op[1] == "7 "][0]
        body = [op for op in ops if op[1] == "Seven"][0]
        assert body[3] == pytest.approx(prefix[3])
        assert body[2] == pytest.approx(prefix[2] + 10)

    def test_every_clue_starts_at_column_left_edge(self):
        canvas, _ = _render(_layout(_clues(3)))
        xs = [op[2] for op in canvas.text_ops() if op[1] in ("1 ", "2 ", "3 ")]
        assert xs == [pytest.approx(LEFT_X)] * 3

    def test_header_is_bold_and_one_point_larger(self):
        canvas, _ = _render(_layout(_clues(1)))
        header = [op for op in canvas.text_ops() if op[1] == "ACROSS"][0]
        assert header[4] == ("Times-Bold", 11.0)

    def test_markup_switches_fonts_and_resets(self):
        canvas, _ = _render(_layout({1: "<b>bold</b> plain"}, html=True))
        fonts = {op[1]: op[4] for op in canvas.text_ops()}
        assert fonts["bold"] == ("Times-Bold", 10.0)
        assert fonts[" plain"] == ("Times-Roman", 10.0)

    def test_empty_sections_draw_no_headers(self):
        canvas, result = _render(_layout({}))
        assert result.fits
        assert canvas.texts() == []
