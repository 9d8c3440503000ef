"""Bengali-numeral date conversion and validation.

This package provides:
- Numerals (bengalidate.numerals) — ASCII <-> Bengali digit transliteration
- Calendar checks (bengalidate.gregorian) — Gregorian validity and ranges
- Parsing (bengalidate.parse) — localized/raw text to ISO ``YYYY-MM-DD``
- Formatting (bengalidate.format) — dates to localized ``DD/MM/YYYY``
- Comparison (bengalidate.compare) — ordering and date-range filtering
- Form field (bengalidate.field) — input state and change handler
- Configuration (bengalidate.config) — bounds and filter settings
- Audit (bengalidate.audit) — JSONL event logging
- CLI (bengalidate.cli) — command-line interface
- Public API (bengalidate.api) — JSONL record filtering
"""

__version__ = "0.3.0"
__license__ = "MIT"

from bengalidate._result_types import DateCheck, DateErrorKind, DateOrder, DateParts
from bengalidate.api import ApiError, filter_jsonl, read_jsonl, write_jsonl
from bengalidate.compare import (
    compare_localized_dates,
    filter_by_date_range,
    order_localized_dates,
)
from bengalidate.config import DEFAULT_BOUNDS, DateBounds, FilterConfig
from bengalidate.field import DateField, format_date_input, make_date_input_handler
from bengalidate.format import (
    convert_from_iso,
    format_localized_date,
    get_current_localized_date,
)
from bengalidate.gregorian import is_valid_calendar_date
from bengalidate.numerals import (
    to_ascii_numerals,
    to_bengali_numerals,
    to_english_numerals,
    to_localized_numerals,
)
from bengalidate.parse import (
    bengali_date_to_iso,
    check_bengali_date,
    convert_to_iso,
    is_valid_bengali_date,
    parse_flexible_date,
)

__all__ = [
    "__version__",
    "__license__",
    "to_localized_numerals",
    "to_ascii_numerals",
    "to_bengali_numerals",
    "to_english_numerals",
    "is_valid_calendar_date",
    "is_valid_bengali_date",
    "check_bengali_date",
    "bengali_date_to_iso",
    "convert_to_iso",
    "parse_flexible_date",
    "format_localized_date",
    "convert_from_iso",
    "get_current_localized_date",
    "compare_localized_dates",
    "order_localized_dates",
    "filter_by_date_range",
    "DateField",
    "format_date_input",
    "make_date_input_handler",
    "DateBounds",
    "DEFAULT_BOUNDS",
    "FilterConfig",
    "DateParts",
    "DateCheck",
    "DateErrorKind",
    "DateOrder",
    "ApiError",
    "read_jsonl",
    "write_jsonl",
    "filter_jsonl",
]
