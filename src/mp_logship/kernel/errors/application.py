"""Application-layer errors – what the caller of the pipeline sees."""

from __future__ import annotations

from typing import Any

from mp_logship.kernel.errors.base import BaseError
from mp_logship.kernel.errors.infrastructure import LocalPersistenceError, RemoteDeliveryError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class LoggingUnavailableError(ApplicationError):
    """Both the remote collector and the local fallback file failed.

    The record is lost. ``__cause__`` is the local failure; both failures
    are available as ``remote_error`` / ``local_error``.
    """

    default_code = "logging_unavailable"

    def __init__(
        self,
        remote_error: RemoteDeliveryError,
        local_error: LocalPersistenceError,
        message: str = "Logging unavailable: remote delivery and local fallback both failed",
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("cause", local_error)
        super().__init__(message, **kwargs)
        self.remote_error = remote_error
        self.local_error = local_error
        self.detail.setdefault("remote", remote_error.to_dict())
        self.detail.setdefault("local", local_error.to_dict())

    @property
    def causes(self) -> tuple[RemoteDeliveryError, LocalPersistenceError]:
        return (self.remote_error, self.local_error)


__all__ = ["ApplicationError", "LoggingUnavailableError"]
