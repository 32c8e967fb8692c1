"""LogShipper – the object application code logs through."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_logship.delivery import DeliveryOrchestrator, DeliveryReceipt
from mp_logship.records import LogRecordFactory, Severity


class LogShipper:
    """Builds records and submits them through a :class:`DeliveryOrchestrator`.

    Usage::

        async with create_shipper() as shipper:
            await shipper.error("disk full", {"code": 28})

    Each call resolves before returning. A :class:`ValidationError` is raised
    for malformed input and :class:`LoggingUnavailableError` when the record
    could not be stored anywhere.
    """

    def __init__(self, factory: LogRecordFactory, orchestrator: DeliveryOrchestrator) -> None:
        self._factory = factory
        self._orchestrator = orchestrator

    @property
    def source(self) -> str:
        return self._factory.source

    async def log(
        self,
        message: str,
        payload: Mapping[str, Any] | None = None,
        severity: Severity | str = Severity.INFO,
    ) -> DeliveryReceipt:
        record = self._factory.build(severity, message, payload)
        return await self._orchestrator.submit(record)

    async def debug(self, message: str, payload: Mapping[str, Any] | None = None) -> DeliveryReceipt:
        return await self.log(message, payload, Severity.DEBUG)

    async def info(self, message: str, payload: Mapping[str, Any] | None = None) -> DeliveryReceipt:
        return await self.log(message, payload, Severity.INFO)

    async def warn(self, message: str, payload: Mapping[str, Any] | None = None) -> DeliveryReceipt:
        return await self.log(message, payload, Severity.WARN)

    # common alias
    warning = warn

    async def error(self, message: str, payload: Mapping[str, Any] | None = None) -> DeliveryReceipt:
        return await self.log(message, payload, Severity.ERROR)

    async def aclose(self) -> None:
        await self._orchestrator.aclose()

    async def __aenter__(self) -> "LogShipper":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


__all__ = ["LogShipper"]
