"""Classification of a received HTTP status into a check outcome."""

from ..http_utils import is_success_status
from .types import CheckOutcome


def classify_status(status: int) -> CheckOutcome:
    """
    Map an HTTP status to a terminal outcome.

    Rejection statuses are not transient: the server answered, so the
    result is Unreachable and never retried.
    """
    if is_success_status(status):
        return CheckOutcome.reachable(status)
    return CheckOutcome.unreachable(f"HTTP {status}", status_code=status)
