"""Data models for audit logging."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

__all__ = ["LogEvent", "ReasonCode"]


class ReasonCode(StrEnum):
    """Reason codes for flagged records.

    Attributes
    ----------
    UNPARSEABLE_DATE : str
        Date field present but not readable as a date; the record is kept.
    NOT_A_RECORD : str
        Input line holds JSON that is not an object.
    """

    UNPARSEABLE_DATE = "unparseable_date"
    NOT_A_RECORD = "not_a_record"


@dataclass
class LogEvent:
    """Structured log event.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp with microseconds (UTC).
    run_id : str
        Unique run identifier.
    level : str
        Log level ("DEBUG", "INFO", "WARN", "ERROR").
    event : str
        Event type identifier.
    data : dict[str, Any]
        Event-specific data payload.
    stage : str | None
        Current stage identifier.
    rid : str | None
        Record identifier (input line number) if event is record-specific.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    stage: str | None = None
    rid: str | None = None
