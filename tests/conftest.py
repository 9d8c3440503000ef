"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Records spanning 2024-2026 plus the awkward cases."""
    return [
        {"id": "a", "date": "2024-12-31"},
        {"id": "b", "date": "2025-01-01"},
        {"id": "c", "date": "2025-07-07"},
        {"id": "d", "date": "2025-12-31"},
        {"id": "e", "date": "2026-01-01"},
        {"id": "f"},
        {"id": "g", "date": ""},
        {"id": "h", "date": "not a date"},
    ]


@pytest.fixture
def write_records(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing records to a JSONL file under tmp_path."""

    def _factory(records: list[Any], name: str = "records.jsonl") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as f:
            for record in records:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
        return path

    return _factory
