"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (tablekit.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── StorageError
        └── SerializationError

The filtering, search and column-ordering functions never raise for the
data they are handed; these errors belong to configuration and to the
stores behind :mod:`tablekit.persistence`.
"""

from tablekit.kernel.errors.application import ApplicationError
from tablekit.kernel.errors.base import BaseError
from tablekit.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
    StorageError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SerializationError",
    "StorageError",
]
