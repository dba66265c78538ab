"""Kernel errors – BaseError, the root every tablekit error derives from."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the tablekit error hierarchy.

    ``code`` is a stable slug naming the failure. Keyword context passed to
    the constructor (a storage key, a setting name, a payload type) lands in
    ``detail``; ``None`` values are dropped. :meth:`log_fields` flattens both
    into keyword arguments for a structlog event, which is how the
    persistence layer reports a failure it has chosen not to raise.
    """

    default_code: str = "tablekit_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        cause: BaseException | None = None,
        **detail: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = {k: v for k, v in detail.items() if v is not None}
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def log_fields(self) -> dict[str, Any]:
        """Event fields for this error: ``error_code``, ``error`` and the detail."""
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        fields.update(self.detail)
        if self.__cause__ is not None:
            fields["cause"] = repr(self.__cause__)
        return fields

    def __str__(self) -> str:
        if not self.detail:
            return self.message
        context = ", ".join(f"{k}={v!r}" for k, v in self.detail.items())
        return f"{self.message} ({context})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
