"""Delivery – RetryPolicy, the remote delivery budget."""
from __future__ import annotations

import dataclasses

from mp_logship.config.logship import LogShipSettings
from mp_logship.config.validation import InvalidSettingValueError
from mp_logship.resilience.retry import BackoffStrategy, ExponentialBackoff, NoBackoff


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """How hard the remote sink tries before the record falls back.

    ``max_attempts`` counts every HTTP attempt, the first one included.
    ``timeout_ms`` bounds each attempt separately.
    """

    endpoint: str
    max_attempts: int = 4
    timeout_ms: int = 5000
    backoff: BackoffStrategy = dataclasses.field(default_factory=NoBackoff)

    def __post_init__(self) -> None:
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int) or self.max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", self.max_attempts, "must be a positive integer")
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, (int, float)) or self.timeout_ms <= 0:
            raise InvalidSettingValueError("timeout_ms", self.timeout_ms, "must be > 0")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def has_endpoint(self) -> bool:
        return bool(self.endpoint and self.endpoint.strip())

    @classmethod
    def from_settings(cls, settings: LogShipSettings) -> "RetryPolicy":
        backoff: BackoffStrategy = (
            ExponentialBackoff(base_delay=settings.backoff_ms / 1000)
            if settings.backoff_ms > 0
            else NoBackoff()
        )
        return cls(
            endpoint=settings.endpoint,
            max_attempts=settings.max_attempts,
            timeout_ms=settings.timeout_ms,
            backoff=backoff,
        )


__all__ = ["RetryPolicy"]
