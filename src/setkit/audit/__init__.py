"""Audit logging for setkit containers.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: Event envelope written per line
"""

from setkit.audit.helpers import generate_run_id
from setkit.audit.logger import AuditLogger
from setkit.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
