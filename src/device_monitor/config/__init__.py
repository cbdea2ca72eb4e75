"""Configuration helpers for the device monitor."""

from .errors import ConfigurationError
from .monitor_config import MonitorConfig
from .runtime import env_float, env_positive_seconds, env_str, reset_default_values

__all__ = [
    "ConfigurationError",
    "MonitorConfig",
    "env_float",
    "env_positive_seconds",
    "env_str",
    "reset_default_values",
]
