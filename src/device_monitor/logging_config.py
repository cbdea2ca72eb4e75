"""
Centralized logging configuration for the device monitor.

Provides a single setup_logging function that configures:
- Console output to stdout, colored by severity when attached to a terminal
- Optional file output to {log_directory}/{service_name}.log (fresh file per start)
- Quieter third-party loggers
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from .status_events import SUCCESS_LEVEL

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_RESET = "\033[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\033[37m",
    logging.INFO: "",
    SUCCESS_LEVEL: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[31;1m",
}


class SeverityColorFormatter(logging.Formatter):
    """Wraps each formatted record in the ANSI color of its level."""

    def __init__(self, fmt: str, datefmt: str, use_color: bool = True):
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.use_color:
            return message
        color = _LEVEL_COLORS.get(record.levelno, "")
        if not color:
            return message
        return f"{color}{message}{_RESET}"


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as exc:
            _MODULE_LOGGER.debug("Handler close failed: %s", exc)
    logger.handlers = []


def _build_console_handler() -> logging.Handler:
    stream = sys.stdout
    use_color = bool(getattr(stream, "isatty", lambda: False)())
    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(SeverityColorFormatter(_LOG_FORMAT, _DATE_FORMAT, use_color=use_color))
    console_handler.setLevel(logging.INFO)
    return console_handler


def _build_file_handler(service_name: str, log_directory: Path) -> logging.Handler:
    log_directory.mkdir(parents=True, exist_ok=True)
    log_path = log_directory / f"{service_name}.log"
    file_handler = logging.FileHandler(log_path, mode="w")
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.DEBUG)
    return file_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def setup_logging(service_name: str, log_directory: Optional[Path] = None) -> None:
    """Configure the root logger for the service, replacing any existing handlers."""

    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)

        root_logger.addHandler(_build_console_handler())
        if log_directory is not None:
            root_logger.addHandler(_build_file_handler(service_name, log_directory))

        root_logger.setLevel(logging.DEBUG if log_directory is not None else logging.INFO)
        _suppress_noisy_third_parties()


__all__ = ["SeverityColorFormatter", "setup_logging"]
