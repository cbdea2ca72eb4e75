"""Wiring of the monitor components around one shared HTTP session."""

from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp

from .config import MonitorConfig
from .connectivity_checker import ConnectivityChecker
from .heartbeat_monitor import HeartbeatMonitor
from .http_utils import create_http_session
from .orchestrator import MonitorOrchestrator
from .status_events import StatusReporter
from .status_probe import StatusProbe


def build_orchestrator(
    config: MonitorConfig,
    session: aiohttp.ClientSession,
    reporter: Optional[StatusReporter] = None,
) -> MonitorOrchestrator:
    """Assemble the checker, both monitors and the orchestrator on ``session``."""
    reporter = reporter or StatusReporter()
    checker = ConnectivityChecker(session, config.connectivity_url)
    monitors = [
        HeartbeatMonitor(checker, reporter, endpoint=config.connectivity_url),
        StatusProbe(session, config.breach_lookup_url, config.test_account, reporter),
    ]
    return MonitorOrchestrator(checker, monitors, reporter)


async def run_monitor(config: MonitorConfig, shutdown_event: Optional[asyncio.Event] = None) -> int:
    """Run the monitor until shutdown; returns the process exit code."""
    async with create_http_session(config.request_timeout_seconds) as session:
        orchestrator = build_orchestrator(config, session)
        return await orchestrator.run(shutdown_event)


__all__ = ["build_orchestrator", "run_monitor"]
