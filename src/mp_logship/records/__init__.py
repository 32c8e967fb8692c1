"""Records – the LogRecord value object and its builder."""
from mp_logship.records.severity import Severity
from mp_logship.records.record import LogRecord
from mp_logship.records.factory import LogRecordFactory, build_record

__all__ = ["LogRecord", "LogRecordFactory", "Severity", "build_record"]
