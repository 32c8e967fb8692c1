"""Unit tests – LogShipper facade and the create_shipper composition root."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Iterator

import httpx
import pytest
import respx
import structlog
import structlog.testing

from mp_logship import (
    DeliveryOutcome,
    LogShipper,
    LoggingUnavailableError,
    Severity,
    ValidationError,
    configure_logging,
    create_shipper,
)
from mp_logship.config import LogShipSettings
from mp_logship.testing import FakeClock, InMemoryLocalSink, ScriptedRemoteSink

ENDPOINT = "http://collector.local/logs"


def _settings(tmp_path: Path, **kwargs) -> LogShipSettings:
    kwargs.setdefault("endpoint", ENDPOINT)
    kwargs.setdefault("max_attempts", 2)
    return LogShipSettings(log_directory=str(tmp_path), fsync=False, **kwargs)


class TestLogShipperHelpers:
    @pytest.mark.parametrize(
        ("method", "severity"),
        [("debug", Severity.DEBUG), ("info", Severity.INFO), ("warn", Severity.WARN),
         ("warning", Severity.WARN), ("error", Severity.ERROR)],
    )
    def test_helpers_set_severity(self, tmp_path: Path, method: str, severity: Severity) -> None:
        remote = ScriptedRemoteSink()
        shipper = create_shipper(_settings(tmp_path), remote=remote, local=InMemoryLocalSink())
        receipt = asyncio.run(getattr(shipper, method)("hello", {"k": 1}))
        assert receipt.record.severity is severity
        assert remote.delivered[0].payload["k"] == 1

    def test_log_defaults_to_info(self, tmp_path: Path) -> None:
        shipper = create_shipper(_settings(tmp_path), remote=ScriptedRemoteSink(), local=InMemoryLocalSink())
        receipt = asyncio.run(shipper.log("plain"))
        assert receipt.record.severity is Severity.INFO

    def test_validation_error_before_any_io(self, tmp_path: Path) -> None:
        remote, local = ScriptedRemoteSink(), InMemoryLocalSink()
        shipper = create_shipper(_settings(tmp_path), remote=remote, local=local)
        with pytest.raises(ValidationError):
            asyncio.run(shipper.log("", severity="INFO"))
        with pytest.raises(ValidationError):
            asyncio.run(shipper.log("m", severity="LOUD"))
        assert remote.attempts == 0
        assert local.saved == []

    def test_total_failure_propagates(self, tmp_path: Path) -> None:
        shipper = create_shipper(
            _settings(tmp_path), remote=ScriptedRemoteSink(failures=None), local=InMemoryLocalSink(fail=True)
        )
        with pytest.raises(LoggingUnavailableError):
            asyncio.run(shipper.error("lost"))

    def test_context_manager_closes_remote(self, tmp_path: Path) -> None:
        remote = ScriptedRemoteSink()

        async def run() -> None:
            async with create_shipper(_settings(tmp_path), remote=remote, local=InMemoryLocalSink()) as shipper:
                await shipper.info("m")

        asyncio.run(run())
        assert remote.closed is True


class TestCreateShipper:
    def test_source_from_settings(self, tmp_path: Path) -> None:
        shipper = create_shipper(_settings(tmp_path, service_name="billing", dev=True))
        assert isinstance(shipper, LogShipper)
        assert shipper.source == "billing_dev"

    def test_reads_environment_when_settings_omitted(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("LOGSHIP_SERVICE_NAME", "orders")
        monkeypatch.setenv("LOGSHIP_LOG_DIRECTORY", str(tmp_path))
        assert create_shipper().source == "orders"

    def test_clock_is_injected(self, tmp_path: Path) -> None:
        clock = FakeClock()
        shipper = create_shipper(_settings(tmp_path), remote=ScriptedRemoteSink(), local=InMemoryLocalSink(), clock=clock)
        receipt = asyncio.run(shipper.info("m"))
        assert receipt.record.created_at == clock.now()

    @respx.mock
    def test_http_and_file_wiring(self, tmp_path: Path) -> None:
        route = respx.post(ENDPOINT).mock(return_value=httpx.Response(503))

        async def run():
            async with create_shipper(_settings(tmp_path, redact_fields=["password"])) as shipper:
                return await shipper.error("disk full", {"code": 28, "password": "hunter2"})

        receipt = asyncio.run(run())
        assert receipt.outcome is DeliveryOutcome.DEGRADED_DELIVERED
        assert route.call_count == 2
        (line,) = (tmp_path / "fallback-logs.json").read_text().splitlines()
        data = json.loads(line)
        assert data["severity"] == "ERROR"
        assert data["payload"] == {"code": 28, "password": "[REDACTED]"}
        assert data["source"] == "configuration-service"

    def test_missing_endpoint_goes_straight_to_file(self, tmp_path: Path) -> None:
        async def run():
            async with create_shipper(_settings(tmp_path, endpoint="")) as shipper:
                return await shipper.info("no collector")

        receipt = asyncio.run(run())
        assert receipt.degraded
        assert receipt.remote_error.attempts == 0
        assert json.loads((tmp_path / "fallback-logs.json").read_text())["message"] == "no collector"


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_diagnostics_carry_source_and_redaction(
        self, restore_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        settings = LogShipSettings(service_name="billing", dev=True, log_level="debug", redact_fields=["token"])
        configure_logging(settings)
        assert logging.getLogger().level == logging.DEBUG
        structlog.get_logger("mp_logship.shipper_test").debug("remote.retry", token="abc", attempt=1)
        data = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert data["service"] == "billing_dev"
        assert data["token"] == "[REDACTED]"
        assert data["event"] == "remote.retry"

    def test_whitespace_endpoint_counts_as_missing(self, tmp_path: Path) -> None:
        with structlog.testing.capture_logs() as logs:
            shipper = create_shipper(_settings(tmp_path, endpoint="   "), local=InMemoryLocalSink())
        assert [e["event"] for e in logs] == ["bootstrap.endpoint_missing"]
        receipt = asyncio.run(shipper.info("m"))
        assert receipt.degraded
        assert receipt.remote_error.attempts == 0
