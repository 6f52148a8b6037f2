"""Tests for math/rounding.py."""

import pytest

from churnscope.math import percent_share, round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [(2.5, 3), (3.5, 4), (2.4999, 2), (0.5, 1), (-2.5, -2), (0.0, 0)],
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected


class TestPercentShare:
    def test_two_of_three(self):
        """round(2/3 * 100) is 67, not a truncated 66."""
        assert percent_share(2, 3) == 67

    def test_one_of_three(self):
        assert percent_share(1, 3) == 33

    def test_zero_total(self):
        assert percent_share(0, 0) == 0

    def test_full_share(self):
        assert percent_share(40, 40) == 100
