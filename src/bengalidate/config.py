"""Configuration dataclasses for date bounds and record filtering."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

__all__ = ["DateBounds", "DEFAULT_BOUNDS", "FilterConfig"]


@dataclass(frozen=True)
class DateBounds:
    """Year range policy applied to user-facing date input.

    Attributes
    ----------
    min_year : int
        Smallest accepted year (default: 1900).
    max_year : int
        Largest accepted year (default: 2100).
    two_digit_pivot : int
        Two-digit years below this map to 20xx, the rest to 19xx
        (default: 50).
    """

    min_year: int = 1900
    max_year: int = 2100
    two_digit_pivot: int = 50

    def __post_init__(self) -> None:
        """Validate bounds."""
        if self.min_year < 1:
            raise ValueError(f"min_year must be >= 1, got {self.min_year}")

        if self.max_year < self.min_year:
            raise ValueError(
                f"max_year ({self.max_year}) must not be less than min_year ({self.min_year})"
            )

        if not 0 <= self.two_digit_pivot <= 100:
            raise ValueError(f"two_digit_pivot must be in [0, 100], got {self.two_digit_pivot}")

    def expand_year(self, year: int) -> int:
        """Expand a two-digit year around the pivot; other years pass through."""
        if 0 <= year < 100:
            return 2000 + year if year < self.two_digit_pivot else 1900 + year
        return year


DEFAULT_BOUNDS = DateBounds()


@dataclass
class FilterConfig:
    """Configuration for filtering a record file by a date field.

    Attributes
    ----------
    field : str
        Name of the date field on each record.
    start : str
        Inclusive lower bound as a localized date, empty for none.
    end : str
        Inclusive upper bound as a localized date, empty for none.
    output : Path | None
        Output JSONL path. If None, records are only counted.
    audit_log : Path | None
        Path of the JSONL audit event log. If None, no events are written.
    """

    field: str
    start: str = ""
    end: str = ""
    output: Path | None = None
    audit_log: Path | None = None

    def __post_init__(self) -> None:
        """Normalize paths and validate bounds."""
        from bengalidate.compare import compare_localized_dates
        from bengalidate.parse import is_valid_bengali_date

        if not self.field:
            raise ValueError("field must be a non-empty string")

        self.start = self.start or ""
        self.end = self.end or ""

        for name in ("start", "end"):
            value = getattr(self, name)
            if value and not is_valid_bengali_date(value):
                raise ValueError(f"{name} is not a valid DD/MM/YYYY Bengali date: {value!r}")

        if self.start and self.end and compare_localized_dates(self.start, self.end) > 0:
            raise ValueError(f"start ({self.start}) must not be after end ({self.end})")

        if self.output is not None:
            self.output = Path(self.output)

        if self.audit_log is not None:
            self.audit_log = Path(self.audit_log)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["output"] = str(self.output) if self.output is not None else None
        data["audit_log"] = str(self.audit_log) if self.audit_log is not None else None
        return data
