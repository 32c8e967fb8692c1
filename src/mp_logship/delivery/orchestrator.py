"""Delivery – DeliveryOrchestrator, remote first then local fallback.

Per submission::

    start ──send──▶ DELIVERED
      │ RemoteDeliveryError
      ▼
    fallback ──save──▶ DEGRADED_DELIVERED
      │ LocalPersistenceError
      ▼
    LoggingUnavailableError (raised)

Nothing is carried across submissions: no queue, no buffer, and the remote
sink is never retried once the record has fallen back.
"""
from __future__ import annotations

import dataclasses
from enum import Enum

from mp_logship.delivery.policy import RetryPolicy
from mp_logship.delivery.ports import LocalSink, RemoteSink
from mp_logship.kernel.errors import LocalPersistenceError, LoggingUnavailableError, RemoteDeliveryError
from mp_logship.observability.logging import get_logger
from mp_logship.records import LogRecord

logger = get_logger(__name__)


class DeliveryOutcome(str, Enum):
    """Terminal states of a successful submission."""

    DELIVERED = "delivered"
    DEGRADED_DELIVERED = "degraded_delivered"


@dataclasses.dataclass(frozen=True)
class DeliveryReceipt:
    """What happened to a submitted record.

    ``remote_error`` is set only for degraded deliveries.
    """

    outcome: DeliveryOutcome
    record: LogRecord
    remote_error: RemoteDeliveryError | None = None

    @property
    def degraded(self) -> bool:
        return self.outcome is DeliveryOutcome.DEGRADED_DELIVERED


class DeliveryOrchestrator:
    """Coordinates the remote sink and the local fallback sink."""

    def __init__(self, remote: RemoteSink, local: LocalSink, policy: RetryPolicy) -> None:
        self._remote = remote
        self._local = local
        self._policy = policy

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def submit(self, record: LogRecord) -> DeliveryReceipt:
        """Deliver *record*; raise :class:`LoggingUnavailableError` if both sinks fail."""
        try:
            await self._remote.send(record, self._policy)
        except RemoteDeliveryError as remote_exc:
            logger.warning(
                "delivery.fallback",
                severity=record.severity.value,
                attempts=remote_exc.attempts,
                error=remote_exc.message,
            )
            try:
                await self._local.save(record)
            except LocalPersistenceError as local_exc:
                logger.critical(
                    "delivery.failed",
                    severity=record.severity.value,
                    remote_error=remote_exc.message,
                    local_error=local_exc.message,
                )
                raise LoggingUnavailableError(remote_exc, local_exc) from local_exc
            return DeliveryReceipt(DeliveryOutcome.DEGRADED_DELIVERED, record, remote_exc)
        return DeliveryReceipt(DeliveryOutcome.DELIVERED, record)

    async def aclose(self) -> None:
        await self._remote.aclose()


__all__ = ["DeliveryOrchestrator", "DeliveryOutcome", "DeliveryReceipt"]
