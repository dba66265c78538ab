"""Application-layer errors."""

from __future__ import annotations

from tablekit.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Misuse of the library or invalid caller-supplied configuration."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
