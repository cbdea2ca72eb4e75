"""
Status probe: periodic breach lookup for a fixed test account.

Each cycle is a single GET with no retry. The response is classified as
DETECTED (any success status), NOT_DETECTED (404) or UNKNOWN (any other
status, or a transport failure).
"""

from __future__ import annotations

import logging

import aiohttp

from .constants import STATUS_CHECK_INTERVAL_SECONDS
from .http_utils import is_success_status
from .monitor_loop import PeriodicMonitor
from .network_errors import NETWORK_ERROR_TYPES, describe_error
from .status_events import Severity, StatusEvent, StatusKind, StatusSink

logger = logging.getLogger(__name__)

_HTTP_NOT_FOUND = 404


def classify_breach_response(status: int, account: str) -> StatusEvent:
    """Build the status event for a breach lookup answered with ``status``."""
    # Any success status counts as a detected breach, even 3xx.
    if is_success_status(status):
        return StatusEvent(
            StatusKind.DETECTED,
            Severity.SUCCESS,
            f"Status: Breached Account Detected for {account}!",
            detail=f"HTTP {status}",
        )
    if status == _HTTP_NOT_FOUND:
        return StatusEvent(
            StatusKind.NOT_DETECTED,
            Severity.WARNING,
            f"Status: No Breach Detected for {account}.",
            detail=f"HTTP {status}",
        )
    return StatusEvent(
        StatusKind.UNKNOWN,
        Severity.ERROR,
        f"Status: Unable to Determine. Response Code: {status}",
        detail=f"HTTP {status}",
    )


class StatusProbe(PeriodicMonitor):
    """Single-shot breach lookups on a short fixed interval."""

    name = "status_probe"

    def __init__(
        self,
        session: aiohttp.ClientSession,
        lookup_url: str,
        account: str,
        reporter: StatusSink,
        interval_seconds: float = STATUS_CHECK_INTERVAL_SECONDS,
    ):
        super().__init__(interval_seconds, reporter)
        self.session = session
        self.lookup_url = lookup_url
        self.account = account

    async def run_cycle(self) -> StatusEvent:
        logger.debug("Checking real-time status at %s", self.lookup_url)
        try:
            async with self.session.get(self.lookup_url) as response:
                status = response.status
        except NETWORK_ERROR_TYPES as exc:
            detail = describe_error(exc)
            logger.debug("Breach lookup transport failure: %s", detail)
            return StatusEvent(
                StatusKind.UNKNOWN,
                Severity.ERROR,
                f"Status: Unable to Determine. Request failed: {detail}",
                detail=detail,
            )

        return classify_breach_response(status, self.account)


__all__ = ["StatusProbe", "classify_breach_response"]
