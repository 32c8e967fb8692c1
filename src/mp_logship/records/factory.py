"""Records – LogRecordFactory and build_record.

The factory is the single place where a :class:`LogRecord` is validated and
assembled. ``source`` is fixed per factory (it comes from configuration),
so callers only ever pass severity, message and payload.
"""
from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from mp_logship.kernel.errors import ValidationError
from mp_logship.kernel.time import Clock, SystemClock
from mp_logship.observability.logging import SensitiveFieldsFilter
from mp_logship.records.record import LogRecord
from mp_logship.records.severity import Severity


class LogRecordFactory:
    """Validates input and builds immutable :class:`LogRecord` instances.

    Parameters
    ----------
    source:
        Identifier of the emitting service/environment stamped on every record.
    clock:
        Source of ``created_at``. Defaults to :class:`SystemClock`.
    redactor:
        Optional filter applied to the payload before the record is frozen.
    """

    def __init__(
        self,
        source: str,
        clock: Clock | None = None,
        redactor: SensitiveFieldsFilter | None = None,
    ) -> None:
        if not isinstance(source, str) or not source.strip():
            raise ValidationError.for_field("source", "must be a non-empty string")
        if not _is_utf8(source):
            raise ValidationError.for_field("source", "must be encodable as UTF-8")
        self._source = source
        self._clock = clock or SystemClock()
        self._redactor = redactor

    @property
    def source(self) -> str:
        return self._source

    def build(
        self,
        severity: Severity | str,
        message: str,
        payload: Mapping[str, Any] | None = None,
    ) -> LogRecord:
        """Return a new record; raises :class:`ValidationError` on bad input."""
        if severity is None:
            raise ValidationError.for_field("severity", "is required")
        level = Severity.parse(severity)
        if not isinstance(message, str) or not message.strip():
            raise ValidationError.for_field("message", "must be a non-empty string")
        if not _is_utf8(message):
            raise ValidationError.for_field("message", "must be encodable as UTF-8")
        data = self._prepare_payload(payload)
        return LogRecord(
            severity=level,
            message=message,
            source=self._source,
            created_at=self._clock.now(),
            payload=MappingProxyType(data),
        )

    def _prepare_payload(self, payload: Mapping[str, Any] | None) -> dict[str, Any]:
        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            raise ValidationError.for_field("payload", f"expected a mapping, got {type(payload).__name__}")
        bad_keys = [k for k in payload if not isinstance(k, str)]
        if bad_keys:
            raise ValidationError.for_field("payload", f"keys must be strings, got {bad_keys!r}")
        try:
            json.dumps(dict(payload), ensure_ascii=False, default=str).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as exc:
            raise ValidationError.for_field("payload", f"not serializable as JSON: {exc}") from exc
        data = copy.deepcopy(dict(payload))
        if self._redactor is not None:
            data = self._redactor.redact_deep(data)
        return data


def _is_utf8(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def build_record(
    severity: Severity | str,
    message: str,
    payload: Mapping[str, Any] | None = None,
    *,
    source: str,
    clock: Clock | None = None,
) -> LogRecord:
    """One-shot form of :meth:`LogRecordFactory.build`."""
    return LogRecordFactory(source, clock=clock).build(severity, message, payload)


__all__ = ["LogRecordFactory", "build_record"]
