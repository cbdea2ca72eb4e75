"""End-to-end wiring of the real components on a fake shared session."""

from __future__ import annotations

import asyncio

import pytest

from device_monitor import device_info, service
from device_monitor.config import MonitorConfig
from device_monitor.connectivity_checker import ConnectivityChecker
from device_monitor.constants import EXIT_MONITORING_STARTED, EXIT_STARTUP_FAILED
from device_monitor.device_info import DeviceConfiguration
from device_monitor.heartbeat_monitor import HeartbeatMonitor
from device_monitor.service import build_orchestrator, run_monitor
from device_monitor.status_events import StatusKind
from device_monitor.status_probe import StatusProbe
from tests.helpers.recording_reporter import RecordingReporter

_CONFIG = MonitorConfig(api_base_url="https://api.example.test/v2/")
_API = "https://api.example.test/v2"
_LOOKUP = "https://api.example.test/v2/breachedaccount/test@example.com"
_DEVICE = DeviceConfiguration(ip_address="192.0.2.10", mac_address="AA:BB:CC:DD:EE:FF")


class StopWhenBothLoopsReported(RecordingReporter):
    def emit(self, event):
        super().emit(event)
        if self.kinds_from("heartbeat") and self.kinds_from("status_probe"):
            self.shutdown_event.set()


def test_components_share_one_session(fake_session_factory):
    session = fake_session_factory()

    orchestrator = build_orchestrator(_CONFIG, session, RecordingReporter())

    heartbeat, probe = orchestrator.monitors
    assert isinstance(orchestrator.checker, ConnectivityChecker)
    assert isinstance(heartbeat, HeartbeatMonitor)
    assert isinstance(probe, StatusProbe)
    assert orchestrator.checker.session is session
    assert heartbeat.checker is orchestrator.checker
    assert probe.session is session
    assert orchestrator.checker.default_endpoint == _API
    assert probe.lookup_url == _LOOKUP


@pytest.mark.asyncio
async def test_startup_then_both_loops_report(fake_session_factory, shutdown_event):
    session = fake_session_factory(routes={_API: [200, 200], _LOOKUP: [404]})
    reporter = StopWhenBothLoopsReported(shutdown_event)
    orchestrator = build_orchestrator(_CONFIG, session, reporter)
    orchestrator.device_configuration_provider = lambda: _DEVICE

    exit_code = await asyncio.wait_for(orchestrator.run(shutdown_event), timeout=5)

    assert exit_code == EXIT_MONITORING_STARTED
    assert reporter.kinds_from("heartbeat") == [StatusKind.ONLINE]
    assert reporter.kinds_from("status_probe") == [StatusKind.NOT_DETECTED]
    assert session.requested_urls.count(_API) == 2
    assert session.requested_urls.count(_LOOKUP) == 1


@pytest.mark.asyncio
async def test_startup_failure_makes_no_monitoring_requests(fake_session_factory, shutdown_event):
    session = fake_session_factory(routes={_API: [503]})
    reporter = RecordingReporter()
    orchestrator = build_orchestrator(_CONFIG, session, reporter)
    orchestrator.device_configuration_provider = lambda: _DEVICE

    exit_code = await orchestrator.run(shutdown_event)

    assert exit_code == EXIT_STARTUP_FAILED
    assert session.requested_urls == [_API]
    assert reporter.kinds_from("heartbeat") == []
    assert reporter.kinds_from("status_probe") == []
    assert all(monitor.cycles_completed == 0 for monitor in orchestrator.monitors)


@pytest.mark.asyncio
async def test_run_monitor_closes_session_after_startup_failure(fake_session_factory, monkeypatch):
    session = fake_session_factory(routes={_API: [503]})
    timeouts: list[float] = []

    def fake_create_http_session(request_timeout_seconds):
        timeouts.append(request_timeout_seconds)
        return session

    monkeypatch.setattr(service, "create_http_session", fake_create_http_session)
    monkeypatch.setattr(device_info, "get_local_ip_address", lambda: _DEVICE.ip_address)
    monkeypatch.setattr(device_info, "get_mac_address", lambda: _DEVICE.mac_address)
    config = MonitorConfig(api_base_url=_CONFIG.api_base_url, request_timeout_seconds=12.5)

    exit_code = await run_monitor(config)

    assert exit_code == EXIT_STARTUP_FAILED
    assert timeouts == [12.5]
    assert session.requested_urls == [_API]
    assert session.closed
