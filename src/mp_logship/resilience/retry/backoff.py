"""Resilience – backoff strategies usable as tenacity ``wait`` callables."""
from __future__ import annotations

import abc
from typing import Any


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th failure.

    Instances are callable with a tenacity ``RetryCallState`` so they can be
    passed straight to ``tenacity.AsyncRetrying(wait=...)``.
    """

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...

    def __call__(self, retry_state: Any) -> float:
        return self.compute(retry_state.attempt_number)


class NoBackoff(BackoffStrategy):
    """Retry immediately."""

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return 0.0

    def __repr__(self) -> str:
        return "NoBackoff()"


class ExponentialBackoff(BackoffStrategy):
    """Delay grows exponentially: ``base_delay * 2^(attempt - 1)``."""

    def __init__(self, base_delay: float = 0.1, max_delay: float = 30.0) -> None:
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        return min(self._base * (2 ** max(attempt - 1, 0)), self._max)

    def __repr__(self) -> str:
        return f"ExponentialBackoff(base_delay={self._base}, max_delay={self._max})"


__all__ = ["BackoffStrategy", "ExponentialBackoff", "NoBackoff"]
