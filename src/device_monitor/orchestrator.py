"""
Monitor orchestrator.

Runs the one-time startup sequence and, when the API is reachable, the two
monitoring loops as independent concurrent tasks.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from .connectivity_checker import ConnectivityChecker
from .constants import EXIT_MONITORING_STARTED, EXIT_STARTUP_FAILED
from .device_info import DeviceConfiguration, collect_device_configuration
from .monitor_loop import PeriodicMonitor
from .status_events import StatusReporter

logger = logging.getLogger(__name__)

DeviceConfigurationProvider = Callable[[], DeviceConfiguration]


class MonitorOrchestrator:
    """Startup check followed by concurrent heartbeat and status monitoring."""

    def __init__(
        self,
        checker: ConnectivityChecker,
        monitors: List[PeriodicMonitor],
        reporter: StatusReporter,
        device_configuration_provider: DeviceConfigurationProvider = collect_device_configuration,
    ):
        self.checker = checker
        self.monitors = monitors
        self.reporter = reporter
        self.device_configuration_provider = device_configuration_provider
        self.tasks: List[asyncio.Task] = []

    async def run(self, shutdown_event: Optional[asyncio.Event] = None) -> int:
        """
        Execute the startup sequence and monitor until shutdown.

        Args:
            shutdown_event: Set to stop the monitoring loops; a fresh event is
                created when omitted, so monitoring runs until cancelled

        Returns:
            EXIT_MONITORING_STARTED once the loops have stopped, or
            EXIT_STARTUP_FAILED when the startup check failed
        """
        if shutdown_event is None:
            shutdown_event = asyncio.Event()

        self.reporter.info("Starting AV Device Monitor...")
        await self.report_device_configuration()

        outcome = await self.checker.check()
        if not outcome.is_reachable:
            self.reporter.error("Failed to connect to the API.", detail=outcome.reason)
            return EXIT_STARTUP_FAILED

        self.reporter.success("Connected to the API.")
        await self.run_monitors(shutdown_event)
        return EXIT_MONITORING_STARTED

    async def report_device_configuration(self) -> None:
        self.reporter.info("Retrieving device configuration...")
        try:
            # Host name resolution and interface queries block; keep them off the loop.
            configuration = await asyncio.to_thread(self.device_configuration_provider)
        except Exception as exc:  # the report is informational only
            self.reporter.error(f"Failed to retrieve device configuration: {exc}")
            return

        for line in configuration.report_lines():
            self.reporter.info(line)

    async def run_monitors(self, shutdown_event: asyncio.Event) -> None:
        """Run every monitor as its own task; one failing never stops the others."""
        self.tasks = []
        for monitor in self.monitors:
            self.reporter.info(f"Starting {monitor.name} monitoring...")
            self.tasks.append(asyncio.create_task(monitor.run(shutdown_event), name=monitor.name))

        try:
            results = await asyncio.gather(*self.tasks, return_exceptions=True)
        except asyncio.CancelledError:
            shutdown_event.set()
            for task in self.tasks:
                task.cancel()
            raise

        for monitor, result in zip(self.monitors, results):
            if isinstance(result, BaseException):
                logger.error("%s task ended with %s", monitor.name, type(result).__name__, exc_info=result)


__all__ = ["MonitorOrchestrator"]
