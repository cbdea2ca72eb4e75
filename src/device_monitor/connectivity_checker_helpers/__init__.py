"""Helpers for the connectivity checker."""

from .response_classifier import classify_status
from .types import (
    DEFAULT_RETRY_POLICY,
    CheckOutcome,
    CheckVerdict,
    RetryPolicy,
    RetryState,
)

__all__ = [
    "DEFAULT_RETRY_POLICY",
    "CheckOutcome",
    "CheckVerdict",
    "RetryPolicy",
    "RetryState",
    "classify_status",
]
