"""
Assertion counter.

Every assert_that() call adds the weight of its constraint tree; an
explicit fail() adds one. Reset between tests by the owning runner.
"""

from __future__ import annotations

import threading


class AssertionCounter:
    """Thread-safe running total of assertions made."""

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def increment(self, amount: int = 1) -> None:
        with self._lock:
            self._value += amount

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> int:
        """Set the count back to zero and return the previous value."""
        with self._lock:
            previous, self._value = self._value, 0
        return previous

    def __repr__(self) -> str:
        return f"<AssertionCounter {self.value}>"
