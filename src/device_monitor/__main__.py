"""Command-line entry point: ``python -m device_monitor``."""

import sys

from .config import ConfigurationError, MonitorConfig
from .constants import SERVICE_NAME
from .service import run_monitor
from .service_runner import run_async_service

_EXIT_BAD_CONFIGURATION = 2


def main() -> int:
    try:
        config = MonitorConfig.from_env()
    except ConfigurationError as exc:
        sys.stderr.write(f"Invalid configuration: {exc}\n")
        return _EXIT_BAD_CONFIGURATION

    return run_async_service(
        lambda: run_monitor(config),
        service_name=SERVICE_NAME,
        log_directory=config.log_directory,
        shutdown_message="Device monitor stopped by user",
        ignore_sighup=True,
    )


if __name__ == "__main__":
    sys.exit(main())
