from __future__ import annotations

import logging
import math

import pytest
from reportlab.pdfbase import pdfmetrics

from conftest import fixed_width
from puzzlepdf.components import measure_text_width, split_text_to_lines


SENTENCE = "the quick brown fox jumps over the lazy dog"


def _wrap(text, width, start=0.0, size=10):
    # size=10 时每个字符 5pt
    return split_text_to_lines(text, "Times-Roman", size, width, starting_line_length=start, measure=fixed_width)


class TestMeasureTextWidth:
    def test_empty_text_width_is_zero(self):
        assert measure_text_width("", "Helvetica", 12) == 0.0

    def test_uses_reportlab_metrics(self):
        expected = pdfmetrics.stringWidth("Crossword", "Helvetica", 11)
        assert math.isclose(measure_text_width("Crossword", "Helvetica", 11), expected)

    def test_unknown_font_falls_back_to_ratio(self):
        assert math.isclose(measure_text_width("abc", "No-Such-Font-Face", 10), 18.0)

    def test_unknown_font_fallback_is_logged_once(self, caplog):
        with caplog.at_level(logging.WARNING):
            measure_text_width("abc", "Typo-Font-Face", 10)
            measure_text_width("abcd", "Typo-Font-Face", 10)
        warnings = [r for r in caplog.records if "Typo-Font-Face" in r.getMessage()]
        assert len(warnings) == 1

    def test_other_metric_errors_propagate(self, monkeypatch):
        def broken(*_args):
            raise TypeError("bad size")

        monkeypatch.setattr(pdfmetrics, "stringWidth", broken)
        with pytest.raises(TypeError):
            measure_text_width("abc", "Helvetica", 10)


class TestSplitTextToLines:
    def test_wraps_on_spaces(self):
        result = _wrap("aa bb cc", 25)
        assert result.lines == ["aa bb", "cc"]
        assert result.current_line_length == pytest.approx(10)

    def test_exact_fit_stays_on_line(self):
        assert _wrap("aa bb", 25).lines == ["aa bb"]

    def test_carry_width_pushes_first_word_to_next_line(self):
        result = _wrap("aa bb", 25, start=20)
        assert result.lines == ["", "aa bb"]
        assert result.current_line_length == pytest.approx(25)

    def test_carry_width_shares_first_line(self):
        result = _wrap("aa bb", 40, start=10)
        assert result.lines == ["aa bb"]
        assert result.current_line_length == pytest.approx(35)

    def test_overlong_word_is_split_by_character(self):
        result = _wrap("abcdefgh", 20)
        assert result.lines == ["abcd", "efgh"]
        assert result.current_line_length == pytest.approx(20)

    def test_overlong_word_fills_current_line_first(self):
        result = _wrap("ab abcdefgh", 20)
        assert result.lines == ["ab a", "bcde", "fgh"]

    def test_trailing_space_is_kept_on_line(self):
        result = _wrap("ab ", 100)
        assert result.lines == ["ab "]
        assert result.current_line_length == pytest.approx(15)

    def test_character_wider_than_line_gets_own_line(self):
        result = _wrap("ab", 3)
        assert result.lines == ["", "a", "b"]


class TestWrapInvariants:
    @pytest.mark.parametrize("width", [25, 30, 45, 60, 75, 100, 250])
    def test_rejoined_lines_reproduce_words(self, width):
        lines = _wrap(SENTENCE, width).lines
        assert " ".join(lines) == SENTENCE
        assert " ".join(lines).split() == SENTENCE.split()

    @pytest.mark.parametrize("width", [5, 12, 25, 33, 60])
    def test_no_line_exceeds_width(self, width):
        text = SENTENCE + " supercalifragilistic"
        for line in _wrap(text, width).lines:
            assert fixed_width(line, "Times-Roman", 10) <= width
