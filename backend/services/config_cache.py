"""Short-lived in-memory cache for the scoring configuration.

Owned by ScoringService. Writes must call invalidate() explicitly; the TTL
only bounds how stale a read can get when another client changed the config.
"""

import time
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class TTLCache(Generic[T]):
    """Holds a single value for ttl_seconds."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._value: T | None = None
        self._stored_at: float | None = None

    def get(self) -> T | None:
        """Cached value, or None when empty or expired."""
        if self._stored_at is None:
            return None
        if self._clock() - self._stored_at >= self.ttl_seconds:
            self.invalidate()
            return None
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        self._stored_at = self._clock()

    def invalidate(self) -> None:
        self._value = None
        self._stored_at = None

    @property
    def is_fresh(self) -> bool:
        return self.get() is not None
