"""
mp_logship – log delivery with a durable local fallback.

Import path convention::

    from mp_logship import create_shipper
    from mp_logship.records import LogRecordFactory, Severity
    from mp_logship.delivery import DeliveryOrchestrator, HttpRemoteSink, FileFallbackSink
    from mp_logship.kernel.errors import LoggingUnavailableError
"""

from mp_logship.bootstrap import configure_logging, create_shipper
from mp_logship.delivery import DeliveryOrchestrator, DeliveryOutcome, DeliveryReceipt, RetryPolicy
from mp_logship.kernel.errors import LoggingUnavailableError, ValidationError
from mp_logship.records import LogRecord, LogRecordFactory, Severity, build_record
from mp_logship.shipper import LogShipper

__version__ = "0.1.0"
__all__ = [
    "DeliveryOrchestrator",
    "DeliveryOutcome",
    "DeliveryReceipt",
    "LogRecord",
    "LogRecordFactory",
    "LogShipper",
    "LoggingUnavailableError",
    "RetryPolicy",
    "Severity",
    "ValidationError",
    "__version__",
    "build_record",
    "configure_logging",
    "create_shipper",
]
