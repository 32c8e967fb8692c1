"""Config – LogShipSettings, the pipeline's environment-driven configuration."""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, ClassVar

from mp_logship.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsFactory
from mp_logship.config.validation import InvalidSettingValueError

DEV_SOURCE_SUFFIX = "_dev"
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class LogShipSettings(Settings):
    """Settings read from ``LOGSHIP_*`` environment variables.

    ``endpoint`` may be left empty: records then go straight to the
    fallback file.  ``backoff_ms`` of ``0`` retries immediately; any
    positive value enables exponential backoff starting at that delay.
    """

    _prefix: ClassVar[str] = "LOGSHIP"

    service_name: str = "configuration-service"
    dev: bool = False
    endpoint: str = ""
    max_attempts: int = 4
    timeout_ms: int = 5000
    backoff_ms: int = 0
    log_directory: str = "logs"
    fallback_filename: str = "fallback-logs.json"
    fsync: bool = True
    redact_fields: list[str] = dataclasses.field(default_factory=list)
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.service_name.strip():
            raise InvalidSettingValueError("service_name", self.service_name, "must not be blank")
        if self.max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", self.max_attempts, "must be >= 1")
        if self.timeout_ms <= 0:
            raise InvalidSettingValueError("timeout_ms", self.timeout_ms, "must be > 0")
        if self.backoff_ms < 0:
            raise InvalidSettingValueError("backoff_ms", self.backoff_ms, "must be >= 0")
        if not self.fallback_filename or Path(self.fallback_filename).name != self.fallback_filename:
            raise InvalidSettingValueError(
                "fallback_filename", self.fallback_filename, "must be a bare file name"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, f"must be one of {sorted(_LOG_LEVELS)}")

    @property
    def source(self) -> str:
        """Value stamped on every record: service name, ``_dev`` in dev mode."""
        return self.service_name + (DEV_SOURCE_SUFFIX if self.dev else "")

    @property
    def fallback_path(self) -> Path:
        return Path(self.log_directory) / self.fallback_filename


def load_settings(
    env_file: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> LogShipSettings:
    """Build :class:`LogShipSettings` from the environment.

    When *env_file* is given it is loaded first (without overriding
    variables already set in the process environment).
    """
    loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
    return SettingsFactory.create(LogShipSettings, loaders=[loader], overrides=overrides)


__all__ = ["DEV_SOURCE_SUFFIX", "LogShipSettings", "load_settings"]
