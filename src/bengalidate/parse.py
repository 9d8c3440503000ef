"""Parsing of localized and raw date text into canonical ISO dates.

Three entry points with deliberately different strictness:

- ``is_valid_bengali_date`` / ``check_bengali_date``: exact ``DD/MM/YYYY``
  in Bengali digits, range policy and calendar check.
- ``bengali_date_to_iso``: either numeral system, eight digits once the
  separators are removed, range policy only. Days such as 30 February
  convert even though the strict validator rejects them.
- ``parse_flexible_date``: either numeral system, ``/`` or ``-`` separated
  or eight bare digits, two-digit years, range policy and calendar check.

None of them raise on bad input; failures come back as ``False``, ``""``
or ``None`` respectively.
"""

import re

from bengalidate._result_types import DateCheck, DateErrorKind, DateParts
from bengalidate.config import DEFAULT_BOUNDS, DateBounds
from bengalidate.gregorian import is_valid_calendar_date, within_bounds
from bengalidate.numerals import to_ascii_numerals

__all__ = [
    "check_bengali_date",
    "is_valid_bengali_date",
    "bengali_date_to_iso",
    "convert_to_iso",
    "parse_flexible_date",
]

# Pre-compiled regex patterns
LOCALIZED_DATE_RE = re.compile(r"[০-৯]{1,2}/[০-৯]{1,2}/[০-৯]{4}")
SEPARATOR_RE = re.compile(r"[/-]")
EIGHT_DIGITS_RE = re.compile(r"[0-9]{8}")
DIGITS_RE = re.compile(r"[0-9]+")


def _split_compact(digits: str) -> DateParts:
    """Split ``DDMMYYYY`` into its components."""
    return DateParts(day=int(digits[0:2]), month=int(digits[2:4]), year=int(digits[4:8]))


def check_bengali_date(text: str, *, bounds: DateBounds = DEFAULT_BOUNDS) -> DateCheck:
    """Validate a localized ``DD/MM/YYYY`` date and classify any failure.

    Parameters
    ----------
    text : str
        Candidate date using Bengali digits and ``/`` separators.
    bounds : DateBounds, optional
        Year range policy, by default ``DEFAULT_BOUNDS``.

    Returns
    -------
    DateCheck
        ``valid`` with the parsed parts, or the first failing
        ``DateErrorKind``.

    Examples
    --------
        >>> check_bengali_date("৩০/০২/২০২৫").error
        <DateErrorKind.CALENDAR: 'calendar'>
    """
    if not isinstance(text, str) or not text:
        return DateCheck.fail(DateErrorKind.EMPTY)

    if not LOCALIZED_DATE_RE.fullmatch(text):
        return DateCheck.fail(DateErrorKind.STRUCTURE)

    day, month, year = (int(p) for p in to_ascii_numerals(text).split("/"))
    parts = DateParts(day=day, month=month, year=year)

    if not within_bounds(day, month, year, bounds):
        return DateCheck.fail(DateErrorKind.RANGE, parts)

    if not is_valid_calendar_date(day, month, year):
        return DateCheck.fail(DateErrorKind.CALENDAR, parts)

    return DateCheck.ok(parts)


def is_valid_bengali_date(text: str, *, bounds: DateBounds = DEFAULT_BOUNDS) -> bool:
    """Check that text is a real date written as Bengali ``DD/MM/YYYY``.

    ASCII digits, mixed numeral systems and separators other than ``/``
    are rejected.
    """
    return check_bengali_date(text, bounds=bounds).valid


def bengali_date_to_iso(text: str, *, bounds: DateBounds = DEFAULT_BOUNDS) -> str:
    """Convert a ``DD/MM/YYYY`` date to ``YYYY-MM-DD``.

    Digits of either numeral system are accepted. After removing ``/`` and
    ``-`` the input must be exactly eight digits: day, month, then a
    four-digit year.

    Parameters
    ----------
    text : str
        Date text such as ``"০৭/০৭/২০২৫"`` or ``"07072025"``.
    bounds : DateBounds, optional
        Year range policy, by default ``DEFAULT_BOUNDS``.

    Returns
    -------
    str
        ISO date, or an empty string if the input has the wrong shape or a
        component is out of range.

    Notes
    -----
    Only component ranges are checked, not calendar validity, so
    ``"৩০/০২/২০২৫"`` converts to ``"2025-02-30"``. Use
    ``is_valid_bengali_date`` or ``parse_flexible_date`` when the day must
    exist.
    """
    if not isinstance(text, str) or not text:
        return ""

    digits = SEPARATOR_RE.sub("", to_ascii_numerals(text))
    if not EIGHT_DIGITS_RE.fullmatch(digits):
        return ""

    parts = _split_compact(digits)
    if not within_bounds(parts.day, parts.month, parts.year, bounds):
        return ""

    return parts.to_iso()


def parse_flexible_date(text: str, *, bounds: DateBounds = DEFAULT_BOUNDS) -> str | None:
    """Parse loosely formatted date input into ``YYYY-MM-DD``.

    Accepted shapes, tried in order:

    1. three parts separated by ``/`` or ``-``: day, month, year;
    2. exactly eight digits: ``DDMMYYYY``.

    Either numeral system is accepted. Two-digit years are expanded around
    ``bounds.two_digit_pivot`` (``25`` -> 2025, ``99`` -> 1999).

    Parameters
    ----------
    text : str
        Raw user input.
    bounds : DateBounds, optional
        Year range policy, by default ``DEFAULT_BOUNDS``.

    Returns
    -------
    str | None
        ISO date, or None if the input is not a real date within bounds.

    Examples
    --------
        >>> parse_flexible_date("৭/৭/২৫")
        '2025-07-07'
        >>> parse_flexible_date("30-02-2024") is None
        True
    """
    if not isinstance(text, str) or not text.strip():
        return None

    ascii_text = to_ascii_numerals(text.strip())

    if "/" in ascii_text or "-" in ascii_text:
        pieces = [p.strip() for p in SEPARATOR_RE.split(ascii_text)]
        if len(pieces) != 3 or not all(DIGITS_RE.fullmatch(p) for p in pieces):
            return None
        day, month, year = (int(p) for p in pieces)
    elif EIGHT_DIGITS_RE.fullmatch(ascii_text):
        parts = _split_compact(ascii_text)
        day, month, year = parts.day, parts.month, parts.year
    else:
        return None

    # zero in any component is a failed parse, not a date
    if not (day and month and year):
        return None

    year = bounds.expand_year(year)

    if not within_bounds(day, month, year, bounds):
        return None

    if not is_valid_calendar_date(day, month, year):
        return None

    return DateParts(day=day, month=month, year=year).to_iso()


convert_to_iso = bengali_date_to_iso
