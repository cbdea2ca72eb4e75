from __future__ import annotations

"""HTTP helper utilities shared by the connectivity checker and status probe."""

from urllib.parse import urlsplit

import aiohttp

from .constants import SERVICE_NAME

# Success covers 2xx and 3xx; anything else is an application-level rejection.
_SUCCESS_STATUS_MIN = 200
_SUCCESS_STATUS_MAX = 399


def is_success_status(status: int) -> bool:
    """Return True for 2xx/3xx HTTP status codes."""
    return _SUCCESS_STATUS_MIN <= status <= _SUCCESS_STATUS_MAX


def ensure_http_url(request_url: str) -> str:
    """Ensure the provided URL uses an allowed HTTP/HTTPS scheme."""
    parsed = urlsplit(request_url)
    scheme = parsed.scheme.lower()
    if scheme not in {"http", "https"}:
        raise ValueError(f"Unsupported URL scheme: {request_url}")
    if not parsed.netloc:
        raise ValueError(f"URL missing network location: {request_url}")
    return request_url


def create_http_session(request_timeout_seconds: float) -> aiohttp.ClientSession:
    """
    Create the HTTP session shared by every component of the monitor.

    The session pools connections and is safe to use from concurrent tasks on
    the event loop that created it. The caller owns it and must close it.
    """
    timeout = aiohttp.ClientTimeout(total=request_timeout_seconds)
    return aiohttp.ClientSession(
        timeout=timeout,
        headers={"User-Agent": f"{SERVICE_NAME}/1.0"},
        connector=aiohttp.TCPConnector(
            limit=10,
            ttl_dns_cache=300,
            use_dns_cache=True,
        ),
    )


__all__ = ["is_success_status", "ensure_http_url", "create_http_session"]
