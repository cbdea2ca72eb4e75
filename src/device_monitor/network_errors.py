"""
Network error detection and classification.

Separates transport-level failures (retryable) from everything else. The
connectivity checker and status probe import from here rather than
maintaining their own exception tuples.
"""

import asyncio
import socket

import aiohttp

NETWORK_ERROR_TYPES = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    socket.gaierror,
    OSError,
)


def describe_error(exception: BaseException) -> str:
    """Short human-readable description: the type name plus message when present."""
    message = str(exception)
    if message:
        return f"{type(exception).__name__}: {message}"
    return type(exception).__name__


__all__ = ["describe_error", "NETWORK_ERROR_TYPES"]
