"""
Structured status events and the reporter that writes them.

Monitors never print. They build a StatusEvent carrying a semantic severity
and hand it to a StatusSink; the default sink writes one log line per event
through the standard logging stack, where the console formatter decides how
each severity is rendered.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")

STATUS_LOGGER_NAME = "device_monitor.status"


class Severity(Enum):
    """Semantic severity of a status line."""

    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def log_level(self) -> int:
        return _SEVERITY_LEVELS[self]


_SEVERITY_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.SUCCESS: SUCCESS_LEVEL,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class StatusKind(Enum):
    """What a status event reports."""

    ONLINE = "online"
    OFFLINE = "offline"
    DETECTED = "detected"
    NOT_DETECTED = "not_detected"
    UNKNOWN = "unknown"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class StatusEvent:
    """One human-readable status line with its classification."""

    kind: StatusKind
    severity: Severity
    message: str
    source: str = ""
    detail: Optional[str] = None
    previous: Optional[StatusKind] = None
    timestamp: float = field(default_factory=time.time)

    @property
    def is_transition(self) -> bool:
        """True when the emitting loop previously reported a different kind."""
        return self.previous is not None and self.previous != self.kind

    def render(self) -> str:
        return f"[{self.severity.value}] {self.message}"


class StatusSink(Protocol):
    """Anything that accepts status events."""

    def emit(self, event: StatusEvent) -> None: ...


class StatusReporter:
    """Writes status events to the ``device_monitor.status`` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(STATUS_LOGGER_NAME)

    def emit(self, event: StatusEvent) -> None:
        self.logger.log(
            event.severity.log_level,
            event.render(),
            extra={
                "status_kind": event.kind.value,
                "status_source": event.source,
                "event_timestamp": event.timestamp,
            },
        )

    def info(self, message: str, *, source: str = "") -> None:
        self.emit(StatusEvent(StatusKind.INFO, Severity.INFO, message, source=source))

    def success(self, message: str, *, source: str = "") -> None:
        self.emit(StatusEvent(StatusKind.INFO, Severity.SUCCESS, message, source=source))

    def error(self, message: str, *, source: str = "", detail: Optional[str] = None) -> None:
        self.emit(StatusEvent(StatusKind.ERROR, Severity.ERROR, message, source=source, detail=detail))


__all__ = [
    "SUCCESS_LEVEL",
    "Severity",
    "StatusKind",
    "StatusEvent",
    "StatusSink",
    "StatusReporter",
]
