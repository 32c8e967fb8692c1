"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator

import pytest
import structlog

from mp_logship.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    ServiceContextProcessor,
    get_logger,
)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"password": "s3cr3t", "name": "alice"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["name"] == "alice"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        data = {field: "value" for field in DEFAULT_SENSITIVE_FIELDS}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        result = SensitiveFieldsFilter({"Secret_Key"}).redact_deep({"SECRET_KEY": "a", "other": "b"})
        assert result == {"SECRET_KEY": SensitiveFieldsFilter.REDACTED, "other": "b"}

    def test_custom_fields_replace_defaults(self) -> None:
        result = SensitiveFieldsFilter(["ssn_last4"]).redact_deep({"ssn_last4": "1234", "password": "keep"})
        assert result["password"] == "keep"

    def test_redact_deep_nested_and_lists(self) -> None:
        data: dict[str, Any] = {
            "user": "alice",
            "credentials": {"token": "abc"},
            "attempts": [{"password": "x"}, {"ok": True}],
        }
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["user"] == "alice"
        assert result["credentials"]["token"] == SensitiveFieldsFilter.REDACTED
        assert result["attempts"] == [{"password": SensitiveFieldsFilter.REDACTED}, {"ok": True}]
        assert data["credentials"]["token"] == "abc"


# ---------------------------------------------------------------------------
# Processors / get_logger
# ---------------------------------------------------------------------------


class TestServiceContextProcessor:
    def test_adds_service(self) -> None:
        event = ServiceContextProcessor("billing_dev")(None, "info", {"event": "x"})
        assert event["service"] == "billing_dev"

    def test_does_not_override_explicit_service(self) -> None:
        event = ServiceContextProcessor("billing")(None, "info", {"event": "x", "service": "other"})
        assert event["service"] == "other"


class TestGetLogger:
    def test_returns_bindable_logger(self) -> None:
        log = get_logger("mp_logship.test", component="delivery")
        assert hasattr(log, "info")
        assert hasattr(log, "bind")


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonLoggerFactory:
    def test_renders_json_with_service_and_redaction(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        JsonLoggerFactory.configure(level="INFO", sensitive_fields={"token"}, service="billing")
        structlog.get_logger("mp_logship.test").warning("delivery.fallback", token="abc", attempts=3)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        data = json.loads(line)
        assert data["event"] == "delivery.fallback"
        assert data["service"] == "billing"
        assert data["token"] == SensitiveFieldsFilter.REDACTED
        assert data["attempts"] == 3
        assert data["level"] == "warning"

    def test_sets_root_level(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.ERROR)
        assert logging.getLogger().level == logging.ERROR
        assert len(logging.getLogger().handlers) == 1
