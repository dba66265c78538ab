"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields are read from ``{_prefix}_{FIELD}`` variables.

    Every field carries a default, so an unset variable keeps it. Subclasses
    check their values in :meth:`_validate` and raise
    :class:`~tablekit.config.validation.InvalidSettingValueError`.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``TABLEKIT_DEFAULT_PAGE_SIZE``."""
        return "_".join(part for part in (cls._prefix, field_name) if part).upper()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
