"""Tests for audit logger module."""

import json
from collections.abc import Iterator
from pathlib import Path

import jsonschema
import pytest

from bengalidate.audit import AuditLogger, ReasonCode, generate_run_id


@pytest.fixture
def logger(tmp_path: Path) -> Iterator[AuditLogger]:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open(encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_logger_init_creates_file(logger: AuditLogger) -> None:
    """Test logger creates the log file and sets initial state."""
    assert logger.log_path.exists()
    assert logger.current_stage is None
    assert logger.run_id == "test_run"


@pytest.mark.unit
def test_logger_event_writes_valid_jsonl(logger: AuditLogger) -> None:
    """Test event() writes a valid JSONL line with correct envelope."""
    logger.event("test_event", data={"key": "মান"}, level="INFO", rid="r1")

    events = _read_events(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt["run_id"] == "test_run"
    assert evt["event"] == "test_event"
    assert evt["level"] == "INFO"
    assert evt["data"] == {"key": "মান"}
    assert evt["rid"] == "r1"
    assert evt["ts"].endswith("Z")


@pytest.mark.unit
def test_logger_writes_unescaped_bengali(logger: AuditLogger) -> None:
    """Test non-ASCII payloads are written as-is."""
    logger.record_flagged("3", ReasonCode.UNPARSEABLE_DATE, value="৩০/০২")

    assert "৩০/০২" in logger.log_path.read_text(encoding="utf-8")


@pytest.mark.unit
def test_logger_stage_context_inheritance(logger: AuditLogger) -> None:
    """Test stage set via set_stage propagates to events."""
    logger.set_stage("filter")
    logger.event("ev1")
    logger.event("ev2", stage="override")
    logger.set_stage(None)
    logger.event("ev3")

    events = _read_events(logger.log_path)

    assert events[0]["stage"] == "filter"
    assert events[1]["stage"] == "override"
    assert events[2]["stage"] is None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "kwargs", "expected_event", "expected_level"),
    [
        (
            "run_started",
            {"command": ["bengalidate"], "parameters": {"k": 1}},
            "run_started",
            "INFO",
        ),
        (
            "run_finished",
            {"status": "success", "duration_seconds": 1.5, "counters": {"records_in": 2}},
            "run_finished",
            "INFO",
        ),
        (
            "record_flagged",
            {"rid": "1", "reason_code": ReasonCode.UNPARSEABLE_DATE, "value": "x"},
            "record_flagged",
            "WARN",
        ),
        ("error", {"exception_class": "ValueError", "message": "bad"}, "error", "ERROR"),
    ],
)
def test_logger_convenience_methods(
    logger: AuditLogger,
    event_schema: dict,
    method: str,
    kwargs: dict,
    expected_event: str,
    expected_level: str,
) -> None:
    """Test convenience methods produce schema-valid events of the right type."""
    getattr(logger, method)(**kwargs)

    events = _read_events(logger.log_path)

    assert len(events) == 1
    assert events[0]["event"] == expected_event
    assert events[0]["level"] == expected_level
    jsonschema.validate(instance=events[0], schema=event_schema)


@pytest.mark.unit
def test_schema_rejects_malformed_event(event_schema: dict) -> None:
    """Test the schema catches a missing envelope field and a bad reason code."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance={"ts": "x", "run_id": "x"}, schema=event_schema)

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(
            instance={
                "ts": "2026-01-01T00:00:00.000001Z",
                "run_id": "r",
                "level": "WARN",
                "event": "record_flagged",
                "data": {"reason_code": "nope"},
                "stage": None,
                "rid": "1",
            },
            schema=event_schema,
        )


@pytest.mark.unit
def test_logger_close_and_context_manager(tmp_path: Path) -> None:
    """Test close() flushes and context manager auto-closes."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="r1", log_path=log_path) as lg:
        lg.event("inside")

    # Second logger can append to same file
    with AuditLogger(run_id="r2", log_path=log_path) as lg2:
        lg2.event("second")
        lg2.close()

    events = _read_events(log_path)
    assert [e["run_id"] for e in events] == ["r1", "r2"]


@pytest.mark.unit
def test_logger_creates_parent_directories(tmp_path: Path) -> None:
    """Test logger creates nested parent directories."""
    nested = tmp_path / "a" / "b" / "events.jsonl"
    with AuditLogger(run_id="test", log_path=nested) as lg:
        lg.event("test")

    assert len(_read_events(nested)) == 1


@pytest.mark.unit
def test_generate_run_id_is_unique() -> None:
    """Test run ids carry a timestamp and differ between calls."""
    first, second = generate_run_id(), generate_run_id()

    assert first != second
    assert "Z__" in first
