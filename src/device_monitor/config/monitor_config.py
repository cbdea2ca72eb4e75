"""Monitor configuration assembled from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from ..constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_TEST_ACCOUNT,
)
from ..http_utils import ensure_http_url
from .errors import ConfigurationError
from .runtime import env_positive_seconds, env_str

_ENV_PREFIX = "DEVICE_MONITOR_"


@dataclass(frozen=True)
class MonitorConfig:
    """Endpoints and transport settings. Scheduling constants are not configurable."""

    api_base_url: str = DEFAULT_API_BASE_URL
    test_account: str = DEFAULT_TEST_ACCOUNT
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    log_directory: Optional[Path] = None

    def __post_init__(self) -> None:
        try:
            ensure_http_url(self.api_base_url)
        except ValueError as exc:
            raise ConfigurationError.invalid_format(
                "api_base_url", self.api_base_url, "an http(s) URL with a host"
            ) from exc
        if not self.test_account:
            raise ConfigurationError.invalid_value("test_account", self.test_account, "Must not be empty")
        if self.request_timeout_seconds <= 0:
            raise ConfigurationError.invalid_value(
                "request_timeout_seconds", self.request_timeout_seconds, "Must be greater than zero"
            )

    @property
    def connectivity_url(self) -> str:
        return self.api_base_url.rstrip("/")

    @property
    def breach_lookup_url(self) -> str:
        """Breach lookup URL for the fixed test account."""
        return f"{self.connectivity_url}/breachedaccount/{quote(self.test_account, safe='@')}"

    @classmethod
    def from_env(cls) -> "MonitorConfig":
        log_dir = env_str(f"{_ENV_PREFIX}LOG_DIR")
        return cls(
            api_base_url=env_str(f"{_ENV_PREFIX}API_BASE_URL", DEFAULT_API_BASE_URL),
            test_account=env_str(f"{_ENV_PREFIX}TEST_ACCOUNT", DEFAULT_TEST_ACCOUNT),
            request_timeout_seconds=env_positive_seconds(
                f"{_ENV_PREFIX}REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS
            ),
            log_directory=Path(log_dir).expanduser() if log_dir else None,
        )


__all__ = ["MonitorConfig"]
