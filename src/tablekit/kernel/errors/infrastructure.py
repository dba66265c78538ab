"""Infrastructure errors – failures of the key-value stores backing table state."""

from __future__ import annotations

import os

from tablekit.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not caused by the caller's data."""

    default_code = "infrastructure_error"


class StorageError(InfrastructureError):
    """A key-value store could not be read or written.

    ``storage_key`` names the table-state key being accessed when the
    failing operation was for a single key.
    """

    default_code = "storage_error"

    def __init__(
        self,
        message: str,
        *,
        path: str | os.PathLike[str] | None = None,
        storage_key: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            cause=cause,
            path=os.fspath(path) if path is not None else None,
            storage_key=storage_key,
        )

    @property
    def storage_key(self) -> str | None:
        return self.detail.get("storage_key")


class SerializationError(InfrastructureError):
    """A store's backing file exists but does not hold a JSON object."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        path: str | os.PathLike[str] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message, cause=cause, path=os.fspath(path) if path is not None else None
        )

    @property
    def path(self) -> str | None:
        return self.detail.get("path")


__all__ = ["InfrastructureError", "SerializationError", "StorageError"]
