"""Result types shared by the parsing, formatting and comparison modules.

These replace bare tuples and magic values with named, typed structures.
The public conversion functions still return plain sentinels; these types
back the diagnostic and explicit-ordering variants.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

from .numerals import to_localized_numerals


@dataclass(frozen=True)
class DateParts:
    """A day/month/year triple.

    Attributes
    ----------
    day : int
        Day of month.
    month : int
        Month number (1 = January).
    year : int
        Gregorian year.
    """

    day: int
    month: int
    year: int

    def to_iso(self) -> str:
        """Render as zero-padded ``YYYY-MM-DD`` with ASCII digits."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def to_localized(self) -> str:
        """Render as zero-padded ``DD/MM/YYYY`` with Bengali digits."""
        return to_localized_numerals(f"{self.day:02d}/{self.month:02d}/{self.year:04d}")


class DateErrorKind(StrEnum):
    """Why a date string was rejected.

    Attributes
    ----------
    EMPTY : str
        Input was empty or not text.
    STRUCTURE : str
        Wrong shape: numeral system, separators, part count or digit count.
    RANGE : str
        A component fell outside day 1-31, month 1-12 or the year bounds.
    CALENDAR : str
        Components in range but the day does not exist (e.g. 30 February).
    """

    EMPTY = "empty"
    STRUCTURE = "structure"
    RANGE = "range"
    CALENDAR = "calendar"


@dataclass(frozen=True)
class DateCheck:
    """Outcome of a diagnostic date check.

    Attributes
    ----------
    valid : bool
        Whether the input denotes an accepted date.
    parts : DateParts | None
        Parsed components, present whenever the input was structurally
        sound (also for range and calendar failures).
    error : DateErrorKind | None
        Failure category, None when valid.
    """

    valid: bool
    parts: DateParts | None = None
    error: DateErrorKind | None = None

    @classmethod
    def ok(cls, parts: DateParts) -> "DateCheck":
        """Build a successful check."""
        return cls(True, parts, None)

    @classmethod
    def fail(cls, error: DateErrorKind, parts: DateParts | None = None) -> "DateCheck":
        """Build a failed check."""
        return cls(False, parts, error)


class DateOrder(Enum):
    """Three-way ordering of two dates, plus a distinct incomparable state."""

    LESS = -1
    EQUAL = 0
    GREATER = 1
    INCOMPARABLE = None

    def as_int(self) -> int:
        """Collapse to -1/0/1, treating INCOMPARABLE as 0."""
        return self.value if self.value is not None else 0
