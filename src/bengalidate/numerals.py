"""Digit transliteration between ASCII and Bengali numerals.

Only the twenty digit characters are touched; every other character,
including the ``/`` and ``-`` separators, passes through unchanged.
"""

from types import MappingProxyType

__all__ = [
    "ASCII_DIGITS",
    "BENGALI_DIGITS",
    "ASCII_TO_BENGALI",
    "BENGALI_TO_ASCII",
    "to_localized_numerals",
    "to_ascii_numerals",
    "to_bengali_numerals",
    "to_english_numerals",
]

ASCII_DIGITS = "0123456789"
BENGALI_DIGITS = "০১২৩৪৫৬৭৮৯"

ASCII_TO_BENGALI = MappingProxyType(dict(zip(ASCII_DIGITS, BENGALI_DIGITS, strict=True)))
BENGALI_TO_ASCII = MappingProxyType(dict(zip(BENGALI_DIGITS, ASCII_DIGITS, strict=True)))

_TO_BENGALI_TABLE = str.maketrans(ASCII_DIGITS, BENGALI_DIGITS)
_TO_ASCII_TABLE = str.maketrans(BENGALI_DIGITS, ASCII_DIGITS)


def to_localized_numerals(value: str | int | float | None) -> str:
    """Replace ASCII digits with Bengali digit glyphs.

    Parameters
    ----------
    value : str | int | float | None
        Text or number to transliterate. None yields an empty string.

    Returns
    -------
    str
        ``str(value)`` with every ASCII digit replaced.

    Examples
    --------
        >>> to_localized_numerals("2025")
        '২০২৫'
        >>> to_localized_numerals(7)
        '৭'
    """
    if value is None:
        return ""
    return str(value).translate(_TO_BENGALI_TABLE)


def to_ascii_numerals(value: str | None) -> str:
    """Replace Bengali digit glyphs with ASCII digits.

    Parameters
    ----------
    value : str | None
        Text to transliterate. Falsy input yields an empty string.

    Returns
    -------
    str
        Text with every Bengali digit replaced.
    """
    if not value:
        return ""
    return str(value).translate(_TO_ASCII_TABLE)


to_bengali_numerals = to_localized_numerals
to_english_numerals = to_ascii_numerals
