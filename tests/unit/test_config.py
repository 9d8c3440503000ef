"""Tests for configuration dataclasses."""

from pathlib import Path

import pytest

from bengalidate.config import DEFAULT_BOUNDS, DateBounds, FilterConfig


@pytest.mark.unit
def test_default_bounds() -> None:
    """Test defaults match the documented policy."""
    assert (DEFAULT_BOUNDS.min_year, DEFAULT_BOUNDS.max_year) == (1900, 2100)
    assert DEFAULT_BOUNDS.two_digit_pivot == 50


@pytest.mark.unit
@pytest.mark.parametrize(
    ("year", "expected"),
    [(0, 2000), (25, 2025), (49, 2049), (50, 1950), (99, 1999), (100, 100), (2025, 2025)],
)
def test_expand_year(year: int, expected: int) -> None:
    """Test two-digit expansion around the pivot."""
    assert DEFAULT_BOUNDS.expand_year(year) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"min_year": 0}, "min_year"),
        ({"min_year": 2000, "max_year": 1999}, "max_year"),
        ({"two_digit_pivot": 101}, "two_digit_pivot"),
    ],
)
def test_bounds_validation(kwargs: dict, match: str) -> None:
    """Test invalid bounds raise ValueError naming the field."""
    with pytest.raises(ValueError, match=match):
        DateBounds(**kwargs)


@pytest.mark.unit
def test_filter_config_defaults_and_paths(tmp_path: Path) -> None:
    """Test optional fields and path coercion."""
    config = FilterConfig(
        field="date",
        start="০১/০১/২০২৫",
        output=str(tmp_path / "out.jsonl"),  # type: ignore[arg-type]
    )

    assert config.end == ""
    assert isinstance(config.output, Path)
    assert config.audit_log is None
    assert config.to_dict() == {
        "field": "date",
        "start": "০১/০১/২০২৫",
        "end": "",
        "output": str(tmp_path / "out.jsonl"),
        "audit_log": None,
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"field": ""}, "field"),
        ({"field": "d", "start": "01/01/2025"}, "start"),
        ({"field": "d", "end": "৩০/০২/২০২৫"}, "end"),
        ({"field": "d", "start": "০১/০১/২০২৬", "end": "০১/০১/২০২৫"}, "after"),
    ],
)
def test_filter_config_validation(kwargs: dict, match: str) -> None:
    """Test bad fields and bounds are rejected."""
    with pytest.raises(ValueError, match=match):
        FilterConfig(**kwargs)
