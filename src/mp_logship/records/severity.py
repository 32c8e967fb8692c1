"""Records – Severity enum."""
from __future__ import annotations

from enum import Enum

from mp_logship.kernel.errors import ValidationError

_ALIASES = {"WARNING": "WARN"}


class Severity(str, Enum):
    """Recognised log severities."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: "Severity | str") -> "Severity":
        """Return the member for *value*; names are matched case-insensitively.

        Raises :class:`ValidationError` for anything unrecognised.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValidationError.for_field("severity", f"expected a severity name, got {type(value).__name__}")
        name = value.strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise ValidationError.for_field(
                "severity", f"{value!r} is not one of {[m.value for m in cls]}"
            ) from None


__all__ = ["Severity"]
