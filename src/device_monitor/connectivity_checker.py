"""
Connectivity checker.

Performs one bounded-retry reachability check against an HTTP endpoint.
Transport failures (connection refused, DNS errors, timeouts and any other
exception raised while sending the request) are retried after a fixed delay
until the attempt budget runs out. A received non-success status ends the
check immediately.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from .connectivity_checker_helpers import (
    DEFAULT_RETRY_POLICY,
    CheckOutcome,
    RetryPolicy,
    classify_status,
)
from .network_errors import NETWORK_ERROR_TYPES, describe_error

logger = logging.getLogger(__name__)

__all__ = ["ConnectivityChecker", "CheckOutcome", "RetryPolicy"]


class ConnectivityChecker:
    """
    Reachability check with fixed-delay retry on transport failures.

    Holds no per-call state: every ``check`` builds its own RetryState, so
    concurrent callers sharing one checker never observe each other's attempts.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        default_endpoint: str,
        retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    ):
        """
        Initialize connectivity checker.

        Args:
            session: Shared HTTP session used for every request
            default_endpoint: URL checked when ``check`` is called without one
            retry_policy: Attempt budget and delay between attempts
        """
        self.session = session
        self.default_endpoint = default_endpoint
        self.retry_policy = retry_policy

    async def check(self, endpoint: Optional[str] = None) -> CheckOutcome:
        """
        Check whether the endpoint answers with a success status.

        Args:
            endpoint: URL to check, defaults to ``default_endpoint``

        Returns:
            Reachable or Unreachable outcome; never a transient one
        """
        url = endpoint or self.default_endpoint
        state = self.retry_policy.new_state()

        while True:
            outcome = await self._attempt(url)
            if not outcome.is_transient:
                return outcome.with_attempts(state.attempts + 1)

            state.record_failure(outcome.reason)
            if state.exhausted:
                logger.warning(
                    "Giving up on %s after %d attempts: %s",
                    url,
                    state.attempts,
                    state.last_error,
                )
                return CheckOutcome.unreachable(state.last_error or "transport failure", attempts=state.attempts)

            logger.info(
                "Retrying connection to %s in %.1fs (%d attempts left)",
                url,
                state.delay_seconds,
                state.remaining,
            )
            await asyncio.sleep(state.delay_seconds)

    async def is_reachable(self, endpoint: Optional[str] = None) -> bool:
        outcome = await self.check(endpoint)
        return outcome.is_reachable

    async def _attempt(self, url: str) -> CheckOutcome:
        try:
            async with self.session.get(url) as response:
                status = response.status
        except NETWORK_ERROR_TYPES as exc:
            logger.warning("Transport error reaching %s: %s", url, describe_error(exc))
            return CheckOutcome.transient_error(describe_error(exc))
        except Exception as exc:  # every request-time fault counts against the retry budget
            logger.warning("Unexpected error reaching %s: %s", url, describe_error(exc))
            return CheckOutcome.transient_error(describe_error(exc))

        outcome = classify_status(status)
        if outcome.is_reachable:
            logger.debug("Response from %s: %s", url, status)
        else:
            logger.warning("Error response from %s: %s", url, status)
        return outcome
