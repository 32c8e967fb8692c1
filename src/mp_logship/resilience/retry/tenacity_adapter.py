"""Resilience – TenacityRetrier, a bounded async retry loop on tenacity."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

import tenacity

from mp_logship.resilience.retry.backoff import BackoffStrategy, NoBackoff

T = TypeVar("T")


class TenacityRetrier:
    """Run an async callable up to *max_attempts* times.

    Only exceptions listed in *retry_on* are retried; anything else
    propagates on the first occurrence. When every attempt failed,
    :class:`tenacity.RetryError` is raised; its ``last_attempt`` carries the
    attempt number and the final exception.

    Parameters
    ----------
    max_attempts:
        Maximum number of call attempts (including the first call).
    backoff:
        Wait between attempts. Defaults to :class:`NoBackoff`.
    retry_on:
        Exception types that count as a retryable attempt failure.
    before_sleep:
        Optional tenacity hook called before each wait, e.g. for logging.
    """

    def __init__(
        self,
        max_attempts: int,
        backoff: BackoffStrategy | None = None,
        retry_on: tuple[type[BaseException], ...] = (Exception,),
        before_sleep: Callable[[tenacity.RetryCallState], Any] | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._max_attempts = max_attempts
        self._backoff = backoff or NoBackoff()
        self._retry_on = retry_on
        self._before_sleep = before_sleep

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def _build_async_retrying(self) -> tenacity.AsyncRetrying:
        kwargs: dict[str, Any] = {}
        if self._before_sleep is not None:
            kwargs["before_sleep"] = self._before_sleep
        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self._max_attempts),
            wait=self._backoff,
            retry=tenacity.retry_if_exception_type(self._retry_on),
            reraise=False,
            **kwargs,
        )

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Execute *func* with retry; raises :class:`tenacity.RetryError` on exhaustion."""
        async for attempt in self._build_async_retrying():
            with attempt:
                result = await func()
        return result  # type: ignore[return-value]


__all__ = ["TenacityRetrier"]
