"""Data models for the audit trail."""

from dataclasses import dataclass
from typing import Any

__all__ = ["LogEvent", "LOG_LEVELS"]

# Ordered from least to most severe.
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARN", "ERROR")


@dataclass
class LogEvent:
    """Structured log event.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp with microseconds (UTC).
    run_id : str
        Identifier shared by every event of one logger.
    level : str
        Log level ("DEBUG", "INFO", "WARN", "ERROR").
    event : str
        Event type identifier.
    data : dict[str, Any]
        Event-specific data payload.
    structure : str | None
        Class name of the container that emitted the event.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    structure: str | None = None
