"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "credit_card", "card_number", "cvv", "ssn",
})


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``.

    Key matching is case-insensitive.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: Iterable[str] | None = None) -> None:
        fields = DEFAULT_SENSITIVE_FIELDS if sensitive_fields is None else sensitive_fields
        self._fields = frozenset(f.lower() for f in fields)

    @property
    def fields(self) -> frozenset[str]:
        return self._fields

    def redact_deep(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Recursively redact nested mappings (and mappings inside lists)."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if isinstance(k, str) and k.lower() in self._fields:
                result[k] = self.REDACTED
            else:
                result[k] = self._redact_value(v)
        return result

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return [self._redact_value(v) for v in value]
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
