"""
Client-side token bucket rate limiter.

Tokens refill continuously at ``rate`` per second up to ``burst``. One
limiter is owned by each Client and shared by every call made through it.
"""

import logging
import threading
import time
from typing import Callable

from .errors import RequestCancelledError

logger = logging.getLogger(__name__)

DEFAULT_RATE = 150.0
DEFAULT_BURST = 1


class RateLimiter:
    """
    Thread-safe token bucket.

    Use try_acquire() first and fall back to acquire() only when it
    returns False, so the common path never sleeps.
    """

    def __init__(
        self,
        rate: float = DEFAULT_RATE,
        burst: int = DEFAULT_BURST,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the limiter with a full bucket.

        Args:
            rate: Sustained requests per second
            burst: Bucket capacity
            clock: Monotonic time source, injectable for tests

        Raises:
            ValueError: If rate or burst is not positive
        """
        if rate <= 0:
            raise ValueError("rate must be greater than 0")
        if burst <= 0:
            raise ValueError("burst must be greater than 0")

        self.rate = float(rate)
        self.burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._last_refill = clock()
        self._lock = threading.Lock()

    @property
    def tokens(self) -> float:
        """Current token count after refilling."""
        with self._lock:
            self._refill()
            return self._tokens

    def _refill(self) -> None:
        # Caller must hold self._lock.
        now = self._clock()
        elapsed = now - self._last_refill
        if elapsed > 0:
            self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate)
        self._last_refill = now

    def _take_or_delay(self) -> float:
        """Take a token and return 0.0, or return the seconds until one is free."""
        with self._lock:
            self._refill()
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return 0.0
            return (1.0 - self._tokens) / self.rate

    def try_acquire(self) -> bool:
        """Take one token if available. Never blocks."""
        return self._take_or_delay() == 0.0

    def acquire(
        self,
        cancel: threading.Event | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Block until a token is taken.

        Args:
            cancel: Event that aborts the wait when set
            timeout: Maximum seconds to wait in total

        Raises:
            RequestCancelledError: If cancel fires, or the next token
                would only be available after the timeout
        """
        deadline = None if timeout is None else self._clock() + timeout

        while True:
            if cancel is not None and cancel.is_set():
                raise RequestCancelledError("request cancelled while waiting for rate limiter")

            delay = self._take_or_delay()
            if delay == 0.0:
                return

            if deadline is not None and self._clock() + delay > deadline:
                raise RequestCancelledError("rate limiter wait would exceed the call deadline")

            logger.debug(f"Rate limited, waiting {delay:.4f}s for next token")

            # Sleep outside the lock so other callers can refill and take
            if cancel is not None:
                if cancel.wait(delay):
                    raise RequestCancelledError("request cancelled while waiting for rate limiter")
            else:
                time.sleep(delay)
