"""Records – LogRecord value object and its serialized form."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from mp_logship.records.severity import Severity


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """One structured log entry, immutable once built.

    Prefer :class:`~mp_logship.records.factory.LogRecordFactory` over calling
    this constructor directly: the factory validates input and stamps
    ``source`` and ``created_at``.
    """

    severity: Severity
    message: str
    source: str
    created_at: datetime
    payload: Mapping[str, Any] = dataclasses.field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self) -> dict[str, Any]:
        """Wire representation; key order is part of the format."""
        return {
            "severity": self.severity.value,
            "message": self.message,
            "payload": _thaw(self.payload),
            "source": self.source,
            "createdAt": self.created_at.isoformat(),
        }

    def to_json(self) -> str:
        """Compact single-line JSON; unknown types are rendered with ``str``."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False, default=str)


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(v) for v in value]
    return value


__all__ = ["LogRecord"]
