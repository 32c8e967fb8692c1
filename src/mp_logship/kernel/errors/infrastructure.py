"""Infrastructure errors – I/O failures of the delivery sinks."""

from __future__ import annotations

from typing import Any

from mp_logship.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a validation problem."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to reach the remote collector."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class RemoteDeliveryError(InfrastructureError):
    """The remote collector did not accept a record within the retry budget.

    ``cause`` is the failure of the last attempt; ``attempts`` is how many
    HTTP attempts were actually made (``0`` when no endpoint is configured).
    """

    default_code = "remote_delivery_failed"

    def __init__(
        self,
        endpoint: str,
        *,
        attempts: int,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Remote delivery to '{endpoint}' failed after {attempts} attempt(s)",
            **kwargs,
        )
        self.endpoint = endpoint
        self.attempts = attempts
        self.detail.setdefault("endpoint", endpoint)
        self.detail.setdefault("attempts", attempts)


class LocalPersistenceError(InfrastructureError):
    """A record could not be appended to the local fallback file."""

    default_code = "local_persistence_failed"

    def __init__(
        self,
        path: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not persist log record to '{path}'", **kwargs)
        self.path = path
        self.detail.setdefault("path", path)


__all__ = [
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "LocalPersistenceError",
    "RemoteDeliveryError",
    "TimeoutError",
]
