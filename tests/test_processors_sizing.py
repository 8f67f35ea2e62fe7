from __future__ import annotations

import pytest

from puzzlepdf.processors import candidate_font_sizes, find_best_font_size


class TestCandidateFontSizes:
    def test_descending_without_float_drift(self):
        assert list(candidate_font_sizes(3, 3.3, 0.1)) == [3.3, 3.2, 3.1, 3.0]

    def test_full_clue_range_size(self):
        sizes = list(candidate_font_sizes(5, 11, 0.1))
        assert sizes[0] == 11.0 and sizes[-1] == 5.0
        assert len(sizes) == 61

    def test_non_positive_step_rejected(self):
        with pytest.raises(ValueError):
            list(candidate_font_sizes(1, 2, 0))


class TestFindBestFontSize:
    @pytest.mark.parametrize(
        "threshold, expected",
        [(7.25, 7.2), (8.0, 8.0), (11.0, 11.0), (50.0, 11.0), (5.0, 5.0)],
    )
    def test_returns_largest_size_below_threshold(self, threshold, expected):
        assert find_best_font_size(5, 11, lambda size: size <= threshold) == expected

    def test_returns_none_when_nothing_fits(self):
        assert find_best_font_size(5, 11, lambda size: size <= 4.9) is None

    def test_stops_at_first_success(self):
        tried = []

        def fits(size):
            tried.append(size)
            return size <= 10.8

        assert find_best_font_size(5, 11, fits) == 10.8
        assert tried == [11.0, 10.9, 10.8]
