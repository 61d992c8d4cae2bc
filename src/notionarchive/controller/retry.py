"""Retry policy for rate-limited Notion API calls."""

from __future__ import annotations

import math
from dataclasses import dataclass

from notionarchive.errors import RateLimitError

DEFAULT_MAX_ATTEMPTS: int = 5
DEFAULT_FALLBACK_DELAY_SEC: float = 5.0


@dataclass(frozen=True)
class RetryPolicy:
    """
    Which errors are retried, how often, and how long to wait in between.

    Only rate limiting is retried. `max_attempts` counts every call, so a
    policy with 5 attempts sleeps at most 4 times.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    fallback_delay_sec: float = DEFAULT_FALLBACK_DELAY_SEC

    def __post_init__(self) -> None:
        if not isinstance(self.max_attempts, int) or self.max_attempts < 1:
            raise ValueError("max_attempts must be an integer >= 1")
        if not math.isfinite(self.fallback_delay_sec) or self.fallback_delay_sec < 0:
            raise ValueError("fallback_delay_sec must be a finite number >= 0")

    def should_retry(self, exc: BaseException) -> bool:
        return isinstance(exc, RateLimitError)

    def backoff(self, exc: BaseException) -> float:
        """Seconds to sleep before retrying after `exc`."""
        if isinstance(exc, RateLimitError) and exc.retry_after is not None:
            return float(exc.retry_after)
        return self.fallback_delay_sec
