"""Audit logging for bengalidate runs.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope
- ReasonCode: reason codes for flagged records
"""

from bengalidate.audit.helpers import generate_run_id
from bengalidate.audit.logger import AuditLogger
from bengalidate.audit.models import LogEvent, ReasonCode

__all__ = [
    "AuditLogger",
    "LogEvent",
    "ReasonCode",
    "generate_run_id",
]
