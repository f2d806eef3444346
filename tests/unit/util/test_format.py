"""Unit tests for view count formatting."""

import pytest

from debatify.util.format import format_views


@pytest.mark.parametrize(
    ("views", "expected"),
    [
        (0, "0"),
        (999, "999"),
        (1000, "1K"),
        (1500, "1.50K"),
        (12_340, "12.34K"),
        (999_999, "1000K"),
        (1_000_000, "1M"),
        (2_340_000, "2.34M"),
        (1_000_000_000, "1B"),
        (7_250_000_000, "7.25B"),
    ],
)
def test_format_views(views, expected):
    assert format_views(views) == expected
