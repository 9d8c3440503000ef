"""Formatting of dates into localized ``DD/MM/YYYY`` Bengali text."""

from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta

from dateutil import parser as date_parser

from bengalidate._result_types import DateParts
from bengalidate.numerals import to_ascii_numerals
from bengalidate.parse import DIGITS_RE

__all__ = [
    "format_localized_date",
    "convert_from_iso",
    "get_current_localized_date",
]

DateLike = date | datetime | str | int | float | None


def _rolled_date(day: int, month: int, year: int) -> date | None:
    """Build a date the lenient way, carrying overflow into later units.

    Years 0-99 mean 1900-1999. Months past 12 carry into the year and days
    past the end of the month carry into the next one, so ``31/02/2025``
    is 3 March 2025 and day 0 is the last day of the previous month.
    """
    if 0 <= year < 100:
        year += 1900

    carried_year, month_index = divmod(year * 12 + month - 1, 12)
    if not MINYEAR <= carried_year <= MAXYEAR:
        return None

    try:
        return date(carried_year, month_index + 1, 1) + timedelta(days=day - 1)
    except OverflowError:
        return None


def _parts_from_slashes(text: str) -> DateParts | None:
    """Read ``DD/MM/YYYY`` or ``MM/DD/YYYY``, picking the order heuristically.

    The first part is taken as the month only when it could be one and the
    second part could not (``02/13/2025``); everything else is day first.
    """
    pieces = [p.strip() for p in to_ascii_numerals(text).split("/")]
    if len(pieces) != 3 or not all(DIGITS_RE.fullmatch(p) for p in pieces):
        return None

    first, second, third = (int(p) for p in pieces)
    if first <= 12 and second > 12:
        day, month = second, first
    else:
        day, month = first, second

    rolled = _rolled_date(day, month, third)
    if rolled is None:
        return None
    return DateParts(day=rolled.day, month=rolled.month, year=rolled.year)


def _parse_with_defaults(text: str) -> datetime | None:
    """Parse with dateutil, rejecting text that names no year or month.

    The text is parsed against two defaults that differ in year and month;
    if the results disagree, one of those came from a default. A missing
    day falls back to the 1st in both.
    """
    this_year = date.today().year
    first_default = datetime(this_year, 1, 1)
    second_default = datetime(this_year - 1, 12, 1)

    try:
        parsed = date_parser.parse(text, default=first_default)
        check = date_parser.parse(text, default=second_default)
    except (ValueError, OverflowError):
        return None

    if parsed.date() != check.date():
        return None
    return parsed


def _parts_from_text(text: str) -> DateParts | None:
    """Parse free-form date text: ISO first, then dateutil."""
    text = to_ascii_numerals(text).strip()
    if not text:
        return None

    try:
        parsed: date | None = date.fromisoformat(text)
    except ValueError:
        parsed = _parse_with_defaults(text)

    if parsed is None:
        return None
    return DateParts(day=parsed.day, month=parsed.month, year=parsed.year)


def _to_parts(value: DateLike) -> DateParts | None:
    if isinstance(value, bool):
        return None

    if isinstance(value, date):
        return DateParts(day=value.day, month=value.month, year=value.year)

    if isinstance(value, int | float):
        # epoch milliseconds, local time
        try:
            moment = datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
        return DateParts(day=moment.day, month=moment.month, year=moment.year)

    if isinstance(value, str):
        if "-" not in value and "/" in value:
            return _parts_from_slashes(value)
        return _parts_from_text(value)

    return None


def format_localized_date(value: DateLike) -> str:
    """Format a date as ``DD/MM/YYYY`` in Bengali digits.

    Parameters
    ----------
    value : date | datetime | str | int | float | None
        A date or datetime, epoch milliseconds, or date text. Text with
        ``/`` separators is read as ``DD/MM/YYYY``, or as ``MM/DD/YYYY``
        when only that reading is possible. Overflowing slash dates roll
        over and two-digit slash years are 19xx. Any other text goes
        through ISO parsing and then ``dateutil``, and must name at least a
        year and a month.

    Returns
    -------
    str
        Localized date, or an empty string if no date could be read.

    Examples
    --------
        >>> format_localized_date("2025-07-07")
        '০৭/০৭/২০২৫'
        >>> format_localized_date("02/13/2025")
        '১৩/০২/২০২৫'
        >>> format_localized_date("31/02/2025")
        '০৩/০৩/২০২৫'
    """
    if not value:
        return ""

    parts = _to_parts(value)
    if parts is None:
        return ""

    return parts.to_localized()


def get_current_localized_date() -> str:
    """Today's date (local time) as localized ``DD/MM/YYYY``."""
    return format_localized_date(datetime.now())


convert_from_iso = format_localized_date
