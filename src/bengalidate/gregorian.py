"""Gregorian calendar validity and component range checks.

``is_valid_calendar_date`` answers only "does this day exist"; the day,
month and year range policy for user input lives in ``within_bounds``.
Callers apply the range policy first.
"""

import calendar
from datetime import MAXYEAR, MINYEAR, date

from bengalidate.config import DEFAULT_BOUNDS, DateBounds

__all__ = ["is_valid_calendar_date", "within_bounds", "days_in_month"]


def is_valid_calendar_date(day: int, month: int, year: int) -> bool:
    """Check that a day/month/year triple names a real Gregorian day.

    Builds a date from the triple and reads it back, so overflowing
    combinations such as 31 April or 29 February 2025 are rejected.

    Parameters
    ----------
    day : int
        Day of month.
    month : int
        Month number.
    year : int
        Gregorian year.

    Returns
    -------
    bool
        True if the triple round-trips through a calendar date.
    """
    if not MINYEAR <= year <= MAXYEAR:
        return False
    try:
        built = date(year, month, day)
    except ValueError:
        return False
    return (built.day, built.month, built.year) == (day, month, year)


def within_bounds(
    day: int,
    month: int,
    year: int,
    bounds: DateBounds = DEFAULT_BOUNDS,
) -> bool:
    """Check day 1-31, month 1-12 and the configured year range."""
    return 1 <= day <= 31 and 1 <= month <= 12 and bounds.min_year <= year <= bounds.max_year


def days_in_month(month: int, year: int) -> int:
    """Number of days in a month, honouring the leap-year rule.

    Raises
    ------
    ValueError
        If month is not in 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in [1, 12], got {month}")
    return calendar.monthrange(year, month)[1]
