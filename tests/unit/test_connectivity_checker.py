"""Tests for ConnectivityChecker retry semantics."""

from __future__ import annotations

import asyncio

import aiohttp
import pytest

from device_monitor.connectivity_checker import ConnectivityChecker
from device_monitor.connectivity_checker_helpers import CheckVerdict, RetryPolicy
from device_monitor.constants import MAX_CONNECT_ATTEMPTS, RETRY_DELAY_SECONDS

_URL = "https://api.example.test/v2"


def _refused() -> aiohttp.ClientConnectionError:
    return aiohttp.ClientConnectionError("connection refused")


@pytest.mark.asyncio
async def test_success_on_first_attempt_is_reachable_without_retry(fake_session_factory, sleep_calls):
    session = fake_session_factory(200)
    checker = ConnectivityChecker(session, _URL)

    outcome = await checker.check()

    assert outcome.verdict is CheckVerdict.REACHABLE
    assert outcome.status_code == 200
    assert outcome.attempts == 1
    assert session.requested_urls == [_URL]
    assert sleep_calls == []


@pytest.mark.asyncio
async def test_redirect_status_counts_as_reachable(fake_session_factory, sleep_calls):
    checker = ConnectivityChecker(fake_session_factory(302), _URL)

    outcome = await checker.check()

    assert outcome.is_reachable
    assert sleep_calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 404, 500, 503])
async def test_error_status_is_unreachable_and_not_retried(fake_session_factory, sleep_calls, status):
    session = fake_session_factory(status)
    checker = ConnectivityChecker(session, _URL)

    outcome = await checker.check()

    assert outcome.verdict is CheckVerdict.UNREACHABLE
    assert outcome.status_code == status
    assert outcome.reason == f"HTTP {status}"
    assert outcome.attempts == 1
    assert len(session.requested_urls) == 1
    assert sleep_calls == []


@pytest.mark.asyncio
async def test_transport_failures_exhaust_retries_with_fixed_delay(fake_session_factory, sleep_calls):
    session = fake_session_factory(_refused(), _refused(), aiohttp.ClientConnectionError("last one"))
    checker = ConnectivityChecker(session, _URL)

    outcome = await checker.check()

    assert outcome.verdict is CheckVerdict.UNREACHABLE
    assert outcome.attempts == MAX_CONNECT_ATTEMPTS
    assert "last one" in outcome.reason
    assert outcome.status_code is None
    assert len(session.requested_urls) == MAX_CONNECT_ATTEMPTS
    assert sleep_calls == [RETRY_DELAY_SECONDS] * (MAX_CONNECT_ATTEMPTS - 1)


@pytest.mark.asyncio
async def test_recovers_when_a_retry_succeeds(fake_session_factory, sleep_calls):
    session = fake_session_factory(_refused(), _refused(), 200)
    checker = ConnectivityChecker(session, _URL)

    outcome = await checker.check()

    assert outcome.is_reachable
    assert outcome.attempts == 3
    assert sleep_calls == [RETRY_DELAY_SECONDS, RETRY_DELAY_SECONDS]


@pytest.mark.asyncio
async def test_status_error_after_transport_error_stops_retrying(fake_session_factory, sleep_calls):
    session = fake_session_factory(_refused(), 503, 200)
    checker = ConnectivityChecker(session, _URL)

    outcome = await checker.check()

    assert outcome.verdict is CheckVerdict.UNREACHABLE
    assert outcome.status_code == 503
    assert outcome.attempts == 2
    assert len(session.requested_urls) == 2
    assert sleep_calls == [RETRY_DELAY_SECONDS]


@pytest.mark.asyncio
async def test_timeout_counts_as_transport_failure(fake_session_factory, sleep_calls):
    session = fake_session_factory(asyncio.TimeoutError(), 200)
    checker = ConnectivityChecker(session, _URL)

    outcome = await checker.check()

    assert outcome.is_reachable
    assert outcome.attempts == 2
    assert sleep_calls == [RETRY_DELAY_SECONDS]


@pytest.mark.asyncio
async def test_unexpected_exception_is_retried(fake_session_factory, sleep_calls):
    session = fake_session_factory(ValueError("bad header"), ValueError("bad header"), ValueError("bad header"))
    checker = ConnectivityChecker(session, _URL)

    outcome = await checker.check()

    assert outcome.verdict is CheckVerdict.UNREACHABLE
    assert outcome.reason == "ValueError: bad header"
    assert outcome.attempts == 3


@pytest.mark.asyncio
async def test_custom_policy_bounds_attempts(fake_session_factory, sleep_calls):
    session = fake_session_factory(default=_refused())
    checker = ConnectivityChecker(session, _URL, RetryPolicy(max_attempts=5, delay_seconds=0.5))

    outcome = await checker.check()

    assert outcome.attempts == 5
    assert sleep_calls == [0.5] * 4


@pytest.mark.asyncio
async def test_single_attempt_policy_never_sleeps(fake_session_factory, sleep_calls):
    checker = ConnectivityChecker(fake_session_factory(_refused()), _URL, RetryPolicy(max_attempts=1))

    outcome = await checker.check()

    assert outcome.verdict is CheckVerdict.UNREACHABLE
    assert sleep_calls == []


@pytest.mark.asyncio
async def test_explicit_endpoint_overrides_default(fake_session_factory, sleep_calls):
    session = fake_session_factory(200)
    checker = ConnectivityChecker(session, _URL)

    assert await checker.is_reachable("https://other.example.test/") is True
    assert session.requested_urls == ["https://other.example.test/"]


@pytest.mark.asyncio
async def test_repeated_checks_share_no_retry_state(fake_session_factory, sleep_calls):
    session = fake_session_factory(default=200)
    checker = ConnectivityChecker(session, _URL)
    attributes_before = dict(vars(checker))

    outcomes = [await checker.check() for _ in range(5)]

    assert all(outcome.is_reachable and outcome.attempts == 1 for outcome in outcomes)
    assert vars(checker) == attributes_before
    assert sleep_calls == []


@pytest.mark.asyncio
async def test_concurrent_checks_count_attempts_independently(fake_session_factory, sleep_calls):
    broken = "https://broken.example.test/"
    healthy = "https://healthy.example.test/"
    session = fake_session_factory(routes={broken: [_refused()] * 3, healthy: [200]})
    checker = ConnectivityChecker(session, _URL)

    broken_outcome, healthy_outcome = await asyncio.gather(checker.check(broken), checker.check(healthy))

    assert broken_outcome.attempts == 3
    assert not broken_outcome.is_reachable
    assert healthy_outcome.attempts == 1
    assert healthy_outcome.is_reachable
