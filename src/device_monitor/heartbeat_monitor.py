"""Heartbeat monitor: periodic ONLINE/OFFLINE liveness reporting."""

from __future__ import annotations

import logging
from typing import Optional

from .connectivity_checker import ConnectivityChecker
from .constants import HEARTBEAT_INTERVAL_SECONDS
from .monitor_loop import PeriodicMonitor
from .status_events import Severity, StatusEvent, StatusKind, StatusSink

logger = logging.getLogger(__name__)


class HeartbeatMonitor(PeriodicMonitor):
    """Reports ONLINE when the connectivity check succeeds, OFFLINE otherwise."""

    name = "heartbeat"

    def __init__(
        self,
        checker: ConnectivityChecker,
        reporter: StatusSink,
        endpoint: Optional[str] = None,
        interval_seconds: float = HEARTBEAT_INTERVAL_SECONDS,
    ):
        super().__init__(interval_seconds, reporter)
        self.checker = checker
        self.endpoint = endpoint

    async def run_cycle(self) -> StatusEvent:
        logger.debug("Sending heartbeat")
        outcome = await self.checker.check(self.endpoint)

        if outcome.is_reachable:
            return StatusEvent(StatusKind.ONLINE, Severity.SUCCESS, "Status: ONLINE")
        return StatusEvent(StatusKind.OFFLINE, Severity.ERROR, "Status: OFFLINE", detail=outcome.reason)


__all__ = ["HeartbeatMonitor"]
