from __future__ import annotations

from conftest import fixed_width
from puzzlepdf.components import (
    FONT_FAMILY_TIMES_ROMAN,
    LINE_BREAK,
    FontChangeToken,
    TextToken,
    count_lines,
    tokenize_clue,
)


BOLD = FontChangeToken(bold=True, italic=False)
ITALIC = FontChangeToken(bold=False, italic=True)
BOLD_ITALIC = FontChangeToken(bold=True, italic=True)
BASE = FontChangeToken(bold=False, italic=False)


def _tokens(text, is_html=True, width=1000.0):
    return tokenize_clue(text, is_html, FONT_FAMILY_TIMES_ROMAN, 10, width, measure=fixed_width)


def _font_changes(tokens):
    return [t for t in tokens if isinstance(t, FontChangeToken)]


class TestPlainClues:
    def test_plain_text_single_line(self):
        assert _tokens("Hello world", is_html=False) == [TextToken("Hello world"), LINE_BREAK]

    def test_tags_are_literal_without_markup(self):
        assert _tokens("a <b>x</b>", is_html=False) == [TextToken("a <b>x</b>"), LINE_BREAK]

    def test_empty_clue_is_one_line(self):
        tokens = _tokens("", is_html=False)
        assert tokens == [LINE_BREAK]
        assert count_lines(tokens) == 1


class TestMarkupClues:
    def test_italic_run(self):
        assert _tokens("Feline <i>pet</i>") == [
            TextToken("Feline "),
            ITALIC,
            TextToken("pet"),
            BASE,
            LINE_BREAK,
        ]

    def test_nested_bold_italic(self):
        assert _tokens("<b>bold <i>both</i></b> plain") == [
            BOLD,
            TextToken("bold "),
            BOLD_ITALIC,
            TextToken("both"),
            BASE,
            TextToken(" plain"),
            LINE_BREAK,
        ]

    def test_adjacent_same_style_tags_do_not_repeat_font_change(self):
        assert _tokens("<b>a</b><b>b</b>") == [BOLD, TextToken("a"), TextToken("b"), BASE, LINE_BREAK]

    def test_font_changes_equal_style_runs_minus_one(self):
        # 样式段：常规 / 粗体 / 常规 / 斜体 / 常规
        tokens = _tokens("x <b>y</b> z <i>w</i> v")
        assert len(_font_changes(tokens)) == 5 - 1

    def test_unbalanced_markup_resets_to_base_style(self):
        tokens = _tokens("<b>bold never closed")
        assert tokens[-2:] == [BASE, LINE_BREAK]
        assert tokens[0] == BOLD

    def test_entities_are_decoded(self):
        assert _tokens("Tom &amp; Jerry") == [TextToken("Tom & Jerry"), LINE_BREAK]

    def test_comments_are_skipped(self):
        tokens = _tokens("a<!-- hidden -->b")
        assert [t.text for t in tokens if isinstance(t, TextToken)] == ["a", "b"]

    def test_other_tags_do_not_change_style(self):
        assert _font_changes(_tokens("<span>x</span> <u>y</u>")) == []


class TestLineWidthCarry:
    def test_carry_width_across_tag_boundary(self):
        # "abc " 占 20pt，"def" 再占 15pt，40pt 行宽内不换行
        tokens = _tokens("abc <i>def</i>", width=40)
        assert count_lines(tokens) == 1

    def test_wrap_at_tag_boundary(self):
        tokens = _tokens("abc <i>def</i>", width=30)
        assert tokens == [
            TextToken("abc "),
            LINE_BREAK,
            ITALIC,
            TextToken("def"),
            BASE,
            LINE_BREAK,
        ]
        assert count_lines(tokens) == 2

    def test_long_plain_clue_wraps(self):
        tokens = _tokens("aaaa bbbb cccc dddd eeee", is_html=False, width=85)
        assert tokens == [TextToken("aaaa bbbb cccc"), LINE_BREAK, TextToken("dddd eeee"), LINE_BREAK]
