"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    ├── ApplicationError         (application.py)
    │   └── LoggingUnavailableError
    └── InfrastructureError      (infrastructure.py)
        ├── ConnectionError
        ├── TimeoutError
        ├── ExternalServiceError
        ├── RemoteDeliveryError
        └── LocalPersistenceError
"""

from mp_logship.kernel.errors.application import ApplicationError, LoggingUnavailableError
from mp_logship.kernel.errors.base import BaseError
from mp_logship.kernel.errors.domain import DomainError, ValidationError
from mp_logship.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    LocalPersistenceError,
    RemoteDeliveryError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "LocalPersistenceError",
    "LoggingUnavailableError",
    "RemoteDeliveryError",
    "TimeoutError",
    "ValidationError",
]
