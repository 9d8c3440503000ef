"""Ordering of localized dates and date-range filtering of records.

Comparison goes through ``bengali_date_to_iso`` and compares the
zero-padded ISO strings, which order the same way as the calendar days
they name. Because that conversion checks ranges only, an out-of-calendar
value such as 30 February still sorts between 28 February and 1 March.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from bengalidate._result_types import DateOrder
from bengalidate.format import format_localized_date
from bengalidate.parse import bengali_date_to_iso

__all__ = [
    "order_localized_dates",
    "compare_localized_dates",
    "filter_by_date_range",
    "get_field",
]

T = TypeVar("T")


def order_localized_dates(first: str, second: str) -> DateOrder:
    """Order two localized dates, keeping unconvertible input distinct.

    Parameters
    ----------
    first : str
        Localized ``DD/MM/YYYY`` date.
    second : str
        Localized ``DD/MM/YYYY`` date.

    Returns
    -------
    DateOrder
        LESS, EQUAL or GREATER, or INCOMPARABLE when either side does not
        convert to an ISO date.
    """
    iso_first = bengali_date_to_iso(first)
    iso_second = bengali_date_to_iso(second)

    if not iso_first or not iso_second:
        return DateOrder.INCOMPARABLE

    if iso_first < iso_second:
        return DateOrder.LESS
    if iso_first > iso_second:
        return DateOrder.GREATER
    return DateOrder.EQUAL


def compare_localized_dates(first: str, second: str) -> int:
    """Compare two localized dates as -1, 0 or 1.

    Invalid input on either side compares as 0, the same as equal dates.
    Use ``order_localized_dates`` to tell the two apart.

    Examples
    --------
        >>> compare_localized_dates("০৭/০৭/২০২৫", "০৮/০৭/২০২৫")
        -1
    """
    return order_localized_dates(first, second).as_int()


def get_field(record: Any, field: str) -> Any:
    """Read ``field`` from a mapping or an attribute, None when absent."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def filter_by_date_range(
    records: Iterable[T],
    field: str,
    start: str = "",
    end: str = "",
) -> list[T]:
    """Keep records whose date field falls within an inclusive range.

    Parameters
    ----------
    records : list | tuple
        Records as mappings or objects carrying ``field``.
    field : str
        Name of the date field. Its value may be anything
        ``format_localized_date`` accepts (ISO text, a ``date``, ...).
    start : str, optional
        Inclusive localized lower bound, by default no bound.
    end : str, optional
        Inclusive localized upper bound, by default no bound.

    Returns
    -------
    list
        Matching records in input order. Records with a missing or empty
        field are always kept. Anything other than a list or tuple yields
        an empty list.
    """
    if not isinstance(records, list | tuple):
        return []

    kept = []
    for record in records:
        value = get_field(record, field)
        if not value:
            kept.append(record)
            continue

        localized = format_localized_date(value)

        if start and compare_localized_dates(localized, start) < 0:
            continue
        if end and compare_localized_dates(localized, end) > 0:
            continue

        kept.append(record)

    return kept
