"""Delivery – sink ports."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from mp_logship.delivery.policy import RetryPolicy
from mp_logship.records import LogRecord


@runtime_checkable
class RemoteSink(Protocol):
    """Port: ship a record to the primary (remote) collector."""

    async def send(self, record: LogRecord, policy: RetryPolicy) -> None:
        """Return once the record is accepted; raise ``RemoteDeliveryError`` otherwise."""
        ...

    async def aclose(self) -> None: ...


@runtime_checkable
class LocalSink(Protocol):
    """Port: durably persist a record when the remote sink is unavailable."""

    async def save(self, record: LogRecord) -> None:
        """Return once the record is persisted; raise ``LocalPersistenceError`` otherwise."""
        ...


__all__ = ["LocalSink", "RemoteSink"]
