"""Type definitions for reachability checks."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..constants import MAX_CONNECT_ATTEMPTS, RETRY_DELAY_SECONDS


class CheckVerdict(Enum):
    """Result tag of a single reachability attempt."""

    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"
    TRANSIENT_ERROR = "transient_error"


@dataclass(frozen=True)
class CheckOutcome:
    """Outcome of one attempt, or of a whole bounded-retry check."""

    verdict: CheckVerdict
    reason: Optional[str] = None
    status_code: Optional[int] = None
    attempts: int = 1

    @classmethod
    def reachable(cls, status_code: int) -> "CheckOutcome":
        return cls(CheckVerdict.REACHABLE, status_code=status_code)

    @classmethod
    def unreachable(cls, reason: str, *, status_code: Optional[int] = None, attempts: int = 1) -> "CheckOutcome":
        return cls(CheckVerdict.UNREACHABLE, reason=reason, status_code=status_code, attempts=attempts)

    @classmethod
    def transient_error(cls, reason: str) -> "CheckOutcome":
        return cls(CheckVerdict.TRANSIENT_ERROR, reason=reason)

    @property
    def is_reachable(self) -> bool:
        return self.verdict is CheckVerdict.REACHABLE

    @property
    def is_transient(self) -> bool:
        return self.verdict is CheckVerdict.TRANSIENT_ERROR

    def with_attempts(self, attempts: int) -> "CheckOutcome":
        return replace(self, attempts=attempts)


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-delay retry bounds for transport failures."""

    max_attempts: int = MAX_CONNECT_ATTEMPTS
    delay_seconds: float = RETRY_DELAY_SECONDS

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1 (got {self.max_attempts})")
        if self.delay_seconds < 0:
            raise ValueError(f"delay_seconds must be non-negative (got {self.delay_seconds})")

    def new_state(self) -> "RetryState":
        return RetryState(max_attempts=self.max_attempts, delay_seconds=self.delay_seconds)


DEFAULT_RETRY_POLICY = RetryPolicy()


@dataclass
class RetryState:
    """Attempt bookkeeping owned by exactly one check invocation."""

    max_attempts: int
    delay_seconds: float
    attempts: int = 0
    last_error: Optional[str] = None

    def record_failure(self, reason: Optional[str]) -> None:
        self.attempts += 1
        self.last_error = reason

    @property
    def exhausted(self) -> bool:
        return self.attempts >= self.max_attempts

    @property
    def remaining(self) -> int:
        return max(self.max_attempts - self.attempts, 0)
