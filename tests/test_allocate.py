"""Tests for csvpretty.allocate -- column width allocation."""

from __future__ import annotations

import pytest

from csvpretty.allocate import allocate, overhead, proportional_shares


# ---------------------------------------------------------------------------
# overhead
# ---------------------------------------------------------------------------


class TestOverhead:
    """Fixed per-line characters that are not cell content."""

    def test_three_per_column(self) -> None:
        assert overhead(2) == 6

    def test_gutter_adds_digits_and_separator(self) -> None:
        # "12  │" = 2 digits + 3
        assert overhead(2, gutter_width=2) == 11

    def test_zero_gutter_means_no_line_numbers(self) -> None:
        assert overhead(4, gutter_width=0) == 12


# ---------------------------------------------------------------------------
# proportional_shares
# ---------------------------------------------------------------------------


class TestProportionalShares:
    """Largest-remainder apportionment."""

    def test_exact_division(self) -> None:
        assert proportional_shares(10, [1, 4]) == [2, 8]

    def test_remainder_goes_to_largest_fraction(self) -> None:
        # 10/3 = 3.33, 20/3 = 6.67 -> the second column rounds up.
        assert proportional_shares(10, [1, 2]) == [3, 7]

    def test_tie_breaks_to_lowest_index(self) -> None:
        assert proportional_shares(10, [1, 1, 1]) == [4, 3, 3]

    def test_two_leftover_units_with_ties(self) -> None:
        assert proportional_shares(11, [1, 1, 1]) == [4, 4, 3]

    def test_minimum_share_is_one(self) -> None:
        assert proportional_shares(5, [1, 100]) == [1, 4]

    def test_minimum_share_taken_back_from_larger_columns(self) -> None:
        assert proportional_shares(3, [1, 1, 100]) == [1, 1, 1]

    def test_empty_weights(self) -> None:
        assert proportional_shares(10, []) == []

    @pytest.mark.parametrize(
        "budget,weights",
        [
            (40, [3, 17, 200]),
            (7, [1, 1, 1, 1, 1, 1, 1]),
            (100, [13, 29, 31, 7]),
            (9, [1000, 1, 1]),
        ],
    )
    def test_shares_sum_to_budget(self, budget: int, weights: list[int]) -> None:
        shares = proportional_shares(budget, weights)
        assert sum(shares) == budget
        assert min(shares) >= 1


# ---------------------------------------------------------------------------
# allocate
# ---------------------------------------------------------------------------


class TestAllocateUnbounded:
    """Without a budget columns are sized to content."""

    def test_content_sized_widths(self) -> None:
        assert allocate([1, 2], "none", None) == [1, 2]

    def test_none_mode_ignores_budget(self) -> None:
        assert allocate([30, 50], "none", 20) == [30, 50]

    def test_word_mode_without_terminal(self) -> None:
        assert allocate([30, 50], "word", None) == [30, 50]

    def test_empty_column_reserves_one(self) -> None:
        assert allocate([0, 4], "none", None) == [1, 4]

    def test_no_columns(self) -> None:
        assert allocate([], "word", 80) == []


class TestAllocateWithBudget:
    """With a budget the widths fill it exactly."""

    def test_everything_fits_spare_goes_to_last_column(self) -> None:
        assert allocate([3, 4], "word", 20) == [3, 17]

    def test_exact_fit(self) -> None:
        assert allocate([3, 4], "char", 7) == [3, 4]

    def test_proportional_split_when_too_wide(self) -> None:
        assert allocate([30, 50], "word", 40) == [15, 25]

    def test_column_under_even_split_keeps_content_width(self) -> None:
        # Proportionally column 0 would get 5; it fits the even split of 10.
        assert allocate([10, 30], "word", 20) == [10, 10]

    def test_short_name_next_to_long_comment(self) -> None:
        assert allocate([4, 200], "word", 34) == [4, 30]

    def test_rounded_share_that_fits_is_kept(self) -> None:
        # Shares are [2, 8]; column 0 fits its share and keeps it.
        assert allocate([2, 9], "word", 10) == [2, 8]

    def test_short_columns_closed_then_rest_shared(self) -> None:
        assert allocate([1, 1, 10], "word", 10) == [1, 1, 8]

    def test_empty_column_still_gets_one(self) -> None:
        widths = allocate([0, 200], "word", 34)
        assert widths == [1, 33]

    def test_budget_below_column_count_is_raised(self) -> None:
        assert allocate([5, 5, 5], "word", 2) == [1, 1, 1]

    def test_negative_budget(self) -> None:
        assert allocate([5, 5], "char", -10) == [1, 1]

    @pytest.mark.parametrize(
        "content,budget",
        [
            ([4, 200], 34),
            ([12, 8, 140, 3], 60),
            ([0, 0, 0], 10),
            ([80, 80, 80, 80, 80], 101),
            ([1, 2, 3], 6),
        ],
    )
    def test_widths_sum_to_budget(self, content: list[int], budget: int) -> None:
        widths = allocate(content, "word", budget)
        assert sum(widths) == budget
        assert all(w >= 1 for w in widths)

    def test_is_deterministic(self) -> None:
        content = [17, 3, 99, 42]
        assert allocate(content, "word", 70) == allocate(content, "word", 70)


class TestAllocateMinimumWidths:
    """A column is never narrower than its widest glyph."""

    def test_wide_glyph_column_raised_to_two(self) -> None:
        # Proportionally [1, 5]; the wide glyph needs 2.
        assert allocate([4, 200], "word", 6, min_widths=[2, 1]) == [2, 4]

    def test_units_taken_from_the_roomiest_column(self) -> None:
        assert allocate([6, 100, 50], "char", 9, min_widths=[2, 1, 1]) == [2, 4, 3]

    def test_minimums_beat_a_tiny_budget(self) -> None:
        assert allocate([4, 4], "word", 2, min_widths=[2, 2]) == [2, 2]

    def test_minimum_capped_at_content_width(self) -> None:
        assert allocate([1, 50], "word", 10, min_widths=[2, 1]) == [1, 9]

    def test_no_effect_when_shares_are_wide_enough(self) -> None:
        assert allocate([30, 50], "word", 40, min_widths=[2, 2]) == [15, 25]

    def test_none_mode_ignores_minimums(self) -> None:
        assert allocate([4, 200], "none", 6, min_widths=[2, 1]) == [4, 200]
