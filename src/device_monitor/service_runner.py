from __future__ import annotations

"""Utilities for running long-lived async services with consistent shutdown handling."""

import asyncio
import logging
import signal
from pathlib import Path
from typing import Any, Callable, Coroutine, Optional

from .logging_config import setup_logging

ServiceFactory = Callable[[], Coroutine[Any, Any, Optional[int]]]


def run_async_service(
    factory: ServiceFactory,
    *,
    service_name: str,
    logger_name: Optional[str] = None,
    configure_logging: bool = True,
    log_directory: Optional[Path] = None,
    shutdown_message: Optional[str] = None,
    ignore_sighup: bool = False,
) -> int:
    """Run an async service with consistent Ctrl+C handling.

    Args:
        factory: Callable returning the coroutine to execute.
        service_name: Identifier used for logging configuration.
        logger_name: Optional logger name override.
        configure_logging: Whether to configure logging via ``setup_logging``.
        log_directory: Directory for the service log file; console only when ``None``.
        shutdown_message: Optional custom message when interrupted.
        ignore_sighup: When ``True`` the service ignores ``SIGHUP`` so it keeps
            running after the launching terminal closes. Unsupported platforms
            (e.g. Windows) simply skip the signal tweak.

    Returns:
        The integer returned by the service coroutine, or 0 when it returned
        nothing or was interrupted.
    """

    if configure_logging:
        setup_logging(service_name, log_directory)

    logger = logging.getLogger(logger_name or f"device_monitor.{service_name}")

    if ignore_sighup:
        try:
            signal.signal(signal.SIGHUP, signal.SIG_IGN)
            logger.debug("Ignoring SIGHUP for %s", service_name)
        except AttributeError:
            # SIGHUP is not defined on all platforms (e.g., Windows).
            logger.debug("SIGHUP not available; cannot ignore for %s", service_name)
        except ValueError:
            # Raised when signals are configured outside the main thread.
            logger.warning("Failed to ignore SIGHUP for %s", service_name)

    try:
        result = asyncio.run(factory())
    except KeyboardInterrupt:
        if shutdown_message:
            logger.info(shutdown_message)
        else:
            logger.info("%s service interrupted by user", service_name)
        return 0

    return result or 0


__all__ = ["ServiceFactory", "run_async_service"]
