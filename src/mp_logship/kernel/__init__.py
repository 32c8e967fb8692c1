"""Kernel – framework-agnostic building blocks (errors, clock)."""

from mp_logship.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    LocalPersistenceError,
    LoggingUnavailableError,
    RemoteDeliveryError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "LocalPersistenceError",
    "LoggingUnavailableError",
    "RemoteDeliveryError",
    "ValidationError",
]
