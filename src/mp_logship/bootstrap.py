"""Composition root – wires settings into a ready :class:`LogShipper`."""
from __future__ import annotations

from mp_logship.config import LogShipSettings, load_settings
from mp_logship.delivery import (
    DeliveryOrchestrator,
    FileFallbackSink,
    HttpRemoteSink,
    LocalSink,
    RemoteSink,
    RetryPolicy,
)
from mp_logship.kernel.time import Clock
from mp_logship.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger
from mp_logship.records import LogRecordFactory
from mp_logship.shipper import LogShipper

logger = get_logger(__name__)


def configure_logging(settings: LogShipSettings) -> None:
    """Route the pipeline's own diagnostics through structlog as JSON."""
    JsonLoggerFactory.configure(
        level=settings.log_level,
        sensitive_fields=settings.redact_fields or None,
        service=settings.source,
    )


def create_shipper(
    settings: LogShipSettings | None = None,
    *,
    remote: RemoteSink | None = None,
    local: LocalSink | None = None,
    clock: Clock | None = None,
) -> LogShipper:
    """Build a :class:`LogShipper` from *settings* (read from the environment if omitted).

    *remote*, *local* and *clock* replace the default HTTP sink, fallback file
    and system clock.
    """
    settings = settings or load_settings()
    redactor = SensitiveFieldsFilter(settings.redact_fields) if settings.redact_fields else None
    factory = LogRecordFactory(settings.source, clock=clock, redactor=redactor)
    policy = RetryPolicy.from_settings(settings)
    orchestrator = DeliveryOrchestrator(
        remote=remote or HttpRemoteSink(),
        local=local or FileFallbackSink(settings.log_directory, settings.fallback_filename, fsync=settings.fsync),
        policy=policy,
    )
    if not policy.has_endpoint:
        logger.warning("bootstrap.endpoint_missing", fallback=str(settings.fallback_path))
    return LogShipper(factory, orchestrator)


__all__ = ["configure_logging", "create_shipper"]
