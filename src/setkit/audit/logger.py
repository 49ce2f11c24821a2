"""Structured audit logger for JSONL event logging.

Containers accept an optional ``AuditLogger`` and report successful
mutations to it. Events are appended to a JSONL file through a persistent
file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from setkit.audit.helpers import describe_payload
from setkit.audit.models import LOG_LEVELS, LogEvent
from setkit.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Identifier stamped on every event.
    log_path : Path
        Path to JSONL log file.
    min_level : str
        Events below this level are dropped.
    dropped_events : int
        Events that could not be written (closed handle or I/O error).
    last_error : Exception | None
        Most recent write failure.

    Write failures are counted, never raised: containers report after the
    mutation has been applied. Check ``dropped_events`` for gaps in the
    trail.
    """

    def __init__(self, run_id: str, log_path: Path, min_level: str = "DEBUG") -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Identifier stamped on every event.
        log_path : Path
            Path to JSONL log file.
        min_level : str, optional
            Lowest level written, by default "DEBUG".

        Raises
        ------
        ValueError
            If ``min_level`` is not a known level.
        """
        if min_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {min_level}")

        self.run_id = run_id
        self.log_path = Path(log_path)
        self.min_level = min_level
        self.dropped_events = 0
        self.last_error: Exception | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        structure: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "sets_merged").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        structure : str | None, optional
            Name of the emitting container class.
        """
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        if LOG_LEVELS.index(level) < LOG_LEVELS.index(self.min_level):
            return

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data if data is not None else {},
            structure=structure,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        if self._file.closed:
            self._drop(ValueError(f"Log file {self.log_path} is closed"))
            return

        line = json.dumps(asdict(event), ensure_ascii=False, separators=(",", ":"))
        try:
            self._file.write(line + "\n")
            self._file.flush()
        except OSError as exc:
            self._drop(exc)

    def _drop(self, error: Exception) -> None:
        self.dropped_events += 1
        self.last_error = error

    def set_created(self, structure: str, element: object, partitions: int) -> None:
        """Log set_created event.

        Parameters
        ----------
        structure : str
            Emitting container class name.
        element : object
            Element that became a singleton set.
        partitions : int
            Number of partitions after the operation.
        """
        self.event(
            "set_created",
            data={"element": describe_payload(element), "partitions": partitions},
            level="DEBUG",
            structure=structure,
        )

    def sets_merged(
        self,
        structure: str,
        survivor: object,
        absorbed: object,
        cardinality: int,
        partitions: int,
    ) -> None:
        """Log sets_merged event.

        Parameters
        ----------
        structure : str
            Emitting container class name.
        survivor : object
            Representative that absorbed the other set.
        absorbed : object
            Former representative of the smaller set.
        cardinality : int
            Size of the merged set.
        partitions : int
            Number of partitions after the merge.
        """
        self.event(
            "sets_merged",
            data={
                "survivor": describe_payload(survivor),
                "absorbed": describe_payload(absorbed),
                "cardinality": cardinality,
                "partitions": partitions,
            },
            structure=structure,
        )

    def count_changed(
        self,
        structure: str,
        element: object,
        previous: int,
        current: int,
        version: int,
    ) -> None:
        """Log count_changed event.

        Parameters
        ----------
        structure : str
            Emitting container class name.
        element : object
            Payload whose count changed.
        previous : int
            Count before the change.
        current : int
            Count after the change.
        version : int
            Modification counter after the change.
        """
        self.event(
            "count_changed",
            data={
                "element": describe_payload(element),
                "previous": previous,
                "current": current,
                "version": version,
            },
            level="DEBUG",
            structure=structure,
        )

    def cleared(self, structure: str, removed: int, version: int) -> None:
        """Log cleared event.

        Parameters
        ----------
        structure : str
            Emitting container class name.
        removed : int
            Total occurrences dropped.
        version : int
            Modification counter after the clear.
        """
        self.event(
            "cleared",
            data={"removed": removed, "version": version},
            structure=structure,
        )

    def iteration_invalidated(self, structure: str, expected: int, actual: int) -> None:
        """Log iteration_invalidated event.

        Parameters
        ----------
        structure : str
            Emitting container class name.
        expected : int
            Version snapshot taken by the iterator.
        actual : int
            Live version found on advancement.
        """
        self.event(
            "iteration_invalidated",
            data={"expected_version": expected, "actual_version": actual},
            level="ERROR",
            structure=structure,
        )
