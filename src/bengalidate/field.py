"""Form-field state for a localized date input.

A framework-neutral model of what an input widget keeps while the user
types: the localized text, the canonical ISO value it stands for, and
whether it is currently valid. Rendering and event wiring belong to the
caller.
"""

from collections.abc import Callable

from bengalidate.format import format_localized_date
from bengalidate.numerals import to_localized_numerals
from bengalidate.parse import bengali_date_to_iso, is_valid_bengali_date

__all__ = ["DateField", "format_date_input", "make_date_input_handler"]

# len("DD/MM/YYYY")
COMPLETE_INPUT_LENGTH = 10


def format_date_input(text: str, previous: str = "") -> str:
    """Keystroke formatter; input is kept exactly as typed."""
    return text


def make_date_input_handler(
    set_value: Callable[[str], None],
    on_valid_date: Callable[[str], None] | None = None,
) -> Callable[[str], None]:
    """Build a change handler for a localized date input.

    Parameters
    ----------
    set_value : Callable[[str], None]
        Receives the formatted text on every change.
    on_valid_date : Callable[[str], None] | None, optional
        Receives the ISO date once the text is a complete, valid
        ``DD/MM/YYYY`` date.

    Returns
    -------
    Callable[[str], None]
        Handler taking the new raw input text.
    """

    def handle(text: str) -> None:
        value = format_date_input(text)
        set_value(value)

        if on_valid_date is None or len(value) != COMPLETE_INPUT_LENGTH:
            return
        if is_valid_bengali_date(value):
            on_valid_date(bengali_date_to_iso(value))

    return handle


class DateField:
    """Localized date input state.

    Attributes
    ----------
    localized : str
        Text as displayed, Bengali digits.
    iso : str
        Canonical ``YYYY-MM-DD`` value, empty unless ``localized`` is valid
        (or the field was seeded from ISO).
    is_valid : bool
        Whether the current value is a usable date.
    """

    def __init__(self, initial_iso: str = "") -> None:
        """Initialize from an optional ISO date.

        Parameters
        ----------
        initial_iso : str, optional
            Canonical date used to seed the displayed text. Validity is
            only computed on the first update.
        """
        self.localized = format_localized_date(initial_iso) if initial_iso else ""
        self.iso = initial_iso
        self.is_valid = False

    def __repr__(self) -> str:
        return f"DateField(localized={self.localized!r}, iso={self.iso!r}, is_valid={self.is_valid})"

    def update(self, text: str, *, auto_convert: bool = True) -> None:
        """Take new input text and recompute the ISO value and validity.

        Parameters
        ----------
        text : str
            Raw input text.
        auto_convert : bool, optional
            Convert ASCII digits to Bengali before storing, by default True.
        """
        value = to_localized_numerals(text) if auto_convert else text
        self.localized = value
        self.is_valid = is_valid_bengali_date(value)
        self.iso = bengali_date_to_iso(value) if self.is_valid else ""

    def update_from_iso(self, iso: str) -> None:
        """Set the field from a canonical date supplied by the caller."""
        self.iso = iso
        self.localized = format_localized_date(iso)
        self.is_valid = bool(self.localized)

    def reset(self) -> None:
        """Clear the field."""
        self.localized = ""
        self.iso = ""
        self.is_valid = False
