"""Base class for long-running periodic monitors."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Optional

from .network_errors import describe_error
from .status_events import Severity, StatusEvent, StatusKind, StatusSink

logger = logging.getLogger(__name__)


class PeriodicMonitor(ABC):
    """
    Runs ``run_cycle`` repeatedly until the shutdown event is set.

    Each cycle yields exactly one status event. A cycle that raises is turned
    into an ERROR event and the loop moves on to the next interval. The wait
    starts after the cycle finishes, so the effective period is the cycle
    latency plus the interval.
    """

    name = "monitor"

    def __init__(self, interval_seconds: float, reporter: StatusSink):
        self.interval_seconds = interval_seconds
        self.reporter = reporter
        self.last_status: Optional[StatusKind] = None
        self.cycles_completed = 0

    @abstractmethod
    async def run_cycle(self) -> StatusEvent:
        """Perform one check and describe its result."""

    async def run(self, shutdown_event: asyncio.Event) -> None:
        logger.info("%s loop started (interval %.0fs)", self.name, self.interval_seconds)

        while not shutdown_event.is_set():
            event = await self._run_cycle_safely()
            self._publish(event)

            if await self._wait_for_next_cycle(shutdown_event):
                break

        logger.info("%s loop stopped after %d cycles", self.name, self.cycles_completed)

    async def _run_cycle_safely(self) -> StatusEvent:
        try:
            return await self.run_cycle()
        except Exception as exc:  # a failed cycle must not end the loop
            logger.debug("%s cycle failed", self.name, exc_info=True)
            return StatusEvent(
                StatusKind.ERROR,
                Severity.ERROR,
                f"Error during {self.name} monitoring: {exc}",
                detail=describe_error(exc),
            )

    def _publish(self, event: StatusEvent) -> None:
        event = replace(event, source=self.name, previous=self.last_status)
        if event.is_transition:
            logger.debug("%s status changed: %s -> %s", self.name, event.previous.value, event.kind.value)
        self.last_status = event.kind
        self.cycles_completed += 1
        try:
            self.reporter.emit(event)
        except Exception:  # a broken sink must not end the loop
            logger.exception("%s could not publish %s status", self.name, event.kind.value)

    async def _wait_for_next_cycle(self, shutdown_event: asyncio.Event) -> bool:
        """Wait one interval; True when shutdown was requested meanwhile."""
        try:
            await asyncio.wait_for(shutdown_event.wait(), timeout=self.interval_seconds)
        except asyncio.TimeoutError:
            return shutdown_event.is_set()
        return True


__all__ = ["PeriodicMonitor"]
