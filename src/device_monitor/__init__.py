"""Remote health monitor: startup connectivity check plus concurrent heartbeat and status loops."""

from .connectivity_checker import ConnectivityChecker
from .connectivity_checker_helpers import CheckOutcome, CheckVerdict, RetryPolicy, RetryState
from .heartbeat_monitor import HeartbeatMonitor
from .orchestrator import MonitorOrchestrator
from .status_events import Severity, StatusEvent, StatusKind, StatusReporter
from .status_probe import StatusProbe

__all__ = [
    "CheckOutcome",
    "CheckVerdict",
    "ConnectivityChecker",
    "HeartbeatMonitor",
    "MonitorOrchestrator",
    "RetryPolicy",
    "RetryState",
    "Severity",
    "StatusEvent",
    "StatusKind",
    "StatusProbe",
    "StatusReporter",
]
