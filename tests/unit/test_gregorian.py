"""Tests for calendar validity and range checks."""

import pytest

from bengalidate.config import DateBounds
from bengalidate.gregorian import days_in_month, is_valid_calendar_date, within_bounds


@pytest.mark.unit
@pytest.mark.parametrize(
    ("day", "month", "year"),
    [(1, 1, 2025), (31, 1, 2025), (30, 4, 2025), (29, 2, 2024), (29, 2, 2000), (31, 12, 1)],
)
def test_real_days_are_valid(day: int, month: int, year: int) -> None:
    """Test existing days pass."""
    assert is_valid_calendar_date(day, month, year)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("day", "month", "year"),
    [
        (31, 4, 2025),
        (30, 2, 2024),
        (29, 2, 2025),
        (29, 2, 1900),
        (0, 1, 2025),
        (32, 1, 2025),
        (1, 0, 2025),
        (1, 13, 2025),
        (1, 1, 0),
        (1, 1, 10000),
    ],
)
def test_nonexistent_days_are_invalid(day: int, month: int, year: int) -> None:
    """Test overflowing or impossible triples fail without raising."""
    assert not is_valid_calendar_date(day, month, year)


@pytest.mark.unit
def test_calendar_check_has_no_year_policy() -> None:
    """Test years outside the input bounds are still real days."""
    assert is_valid_calendar_date(1, 1, 1800)
    assert not within_bounds(1, 1, 1800)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("day", "month", "year", "expected"),
    [
        (1, 1, 1900, True),
        (31, 12, 2100, True),
        (31, 2, 2025, True),
        (0, 1, 2025, False),
        (32, 1, 2025, False),
        (1, 0, 2025, False),
        (1, 13, 2025, False),
        (1, 1, 1899, False),
        (1, 1, 2101, False),
    ],
)
def test_within_bounds(day: int, month: int, year: int, expected: bool) -> None:
    """Test default range policy."""
    assert within_bounds(day, month, year) is expected


@pytest.mark.unit
def test_within_custom_bounds() -> None:
    """Test year bounds come from DateBounds."""
    bounds = DateBounds(min_year=2000, max_year=2010)

    assert within_bounds(1, 1, 2005, bounds)
    assert not within_bounds(1, 1, 1999, bounds)


@pytest.mark.unit
def test_days_in_month() -> None:
    """Test month lengths including February in leap and common years."""
    assert days_in_month(2, 2024) == 29
    assert days_in_month(2, 2025) == 28
    assert days_in_month(4, 2025) == 30
    assert days_in_month(12, 2025) == 31

    with pytest.raises(ValueError, match="month"):
        days_in_month(13, 2025)
