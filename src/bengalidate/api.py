"""High-level API for filtering JSONL record files by a localized date range.

This module provides:
- Reading and writing JSONL record files
- Filtering a record file with audit logging of unreadable dates
"""

from __future__ import annotations

import json
import sys
import time
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from bengalidate.audit import AuditLogger, ReasonCode, generate_run_id
from bengalidate.compare import filter_by_date_range, get_field
from bengalidate.config import FilterConfig
from bengalidate.format import format_localized_date

__all__ = [
    "ApiError",
    "FilterResult",
    "read_jsonl",
    "write_jsonl",
    "filter_jsonl",
]


class ApiError(Exception):
    """Raised when a record file cannot be read."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
    ) -> None:
        """Initialize API error.

        Parameters
        ----------
        message : str
            Error message.
        line : int | None, optional
            1-based line number where the error occurred.
        """
        super().__init__(message)
        self.line = line


@dataclass
class FilterResult:
    """Outcome of a file filter run.

    Attributes
    ----------
    records_in : int
        Records read from the input file.
    records_kept : int
        Records within the date range (including those without a date).
    records_flagged : int
        Records whose date field could not be read as a date.
    output : str | None
        Path the kept records were written to, if any.
    """

    records_in: int
    records_kept: int
    records_flagged: int
    output: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def read_jsonl(path: str | Path) -> list[Any]:
    """Read one JSON value per non-blank line.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    ApiError
        If a line is not valid JSON.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    records = []
    with file_path.open(encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise ApiError(f"Invalid JSON on line {line_no}: {e.msg}", line=line_no) from e

    return records


def write_jsonl(
    records: Iterable[Any],
    path: str | Path,
    *,
    sort_keys: bool = False,
) -> int:
    """Write records to a JSONL file, one per line.

    Parameters
    ----------
    records : Iterable[Any]
        JSON-serializable records.
    path : str | Path
        Output file path. Parent directories are created.
    sort_keys : bool, optional
        Sort object keys for deterministic output, by default False.

    Returns
    -------
    int
        Number of records written.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False, sort_keys=sort_keys) + "\n")
            count += 1

    return count


def _flag_records(records: list[Any], field: str, logger: AuditLogger | None) -> int:
    """Count (and log) records whose date field cannot be read."""
    flagged = 0
    for idx, record in enumerate(records):
        rid = str(idx + 1)

        if not isinstance(record, dict):
            flagged += 1
            if logger is not None:
                logger.record_flagged(rid, ReasonCode.NOT_A_RECORD)
            continue

        value = get_field(record, field)
        if value and not format_localized_date(value):
            flagged += 1
            if logger is not None:
                logger.record_flagged(rid, ReasonCode.UNPARSEABLE_DATE, value=str(value))

    return flagged


def _run_filter(
    input_path: str | Path,
    config: FilterConfig,
    logger: AuditLogger | None,
) -> FilterResult:
    records = read_jsonl(input_path)
    flagged = _flag_records(records, config.field, logger)
    kept = filter_by_date_range(records, config.field, config.start, config.end)

    if config.output is not None:
        write_jsonl(kept, config.output)

    return FilterResult(
        records_in=len(records),
        records_kept=len(kept),
        records_flagged=flagged,
        output=str(config.output) if config.output is not None else None,
    )


def filter_jsonl(
    input_path: str | Path,
    config: FilterConfig,
    *,
    command_argv: list[str] | None = None,
) -> FilterResult:
    """Filter a JSONL record file by a localized date range.

    Records with a missing or empty date field are kept, as are records
    whose date cannot be read; the latter are reported as
    ``record_flagged`` events when ``config.audit_log`` is set.

    Parameters
    ----------
    input_path : str | Path
        JSONL file of records.
    config : FilterConfig
        Field, range bounds and output locations.
    command_argv : list[str] | None, optional
        Command line recorded in the ``run_started`` event, uses sys.argv
        if None.

    Returns
    -------
    FilterResult
        Counts and output path.

    Raises
    ------
    FileNotFoundError
        If the input file does not exist.
    ApiError
        If the input file contains invalid JSON.

    Examples
    --------
        >>> config = FilterConfig(field="date", start="০১/০১/২০২৫", output="kept.jsonl")
        >>> filter_jsonl("records.jsonl", config).records_kept
        3
    """
    if config.audit_log is None:
        return _run_filter(input_path, config, None)

    with AuditLogger(run_id=generate_run_id(), log_path=config.audit_log) as logger:
        started = time.perf_counter()
        logger.run_started(command=command_argv or sys.argv, parameters=config.to_dict())
        logger.set_stage("filter")

        try:
            result = _run_filter(input_path, config, logger)
        except Exception as e:
            logger.error(type(e).__name__, str(e))
            logger.set_stage(None)
            logger.run_finished(status="failed", duration_seconds=time.perf_counter() - started)
            raise

        logger.set_stage(None)
        logger.run_finished(
            status="success",
            duration_seconds=time.perf_counter() - started,
            counters={
                "records_in": result.records_in,
                "records_kept": result.records_kept,
                "records_flagged": result.records_flagged,
            },
        )

    return result
