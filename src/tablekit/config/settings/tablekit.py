"""Config settings – TableKitSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from tablekit.columns.ordering import ColumnOrderMode
from tablekit.config.settings.base import Settings
from tablekit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class TableKitSettings(Settings):
    """Defaults applied when no table state has been persisted yet.

    Read from ``TABLEKIT_*`` environment variables by
    :class:`~tablekit.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "TABLEKIT"

    default_page_size: int = 10
    default_order_mode: str = ColumnOrderMode.DEFINITION.value

    def _validate(self) -> None:
        if self.default_page_size <= 0:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, "must be positive"
            )
        if self.default_order_mode not in set(ColumnOrderMode):
            raise InvalidSettingValueError(
                "default_order_mode",
                self.default_order_mode,
                f"expected one of {[m.value for m in ColumnOrderMode]}",
            )

    @property
    def order_mode(self) -> ColumnOrderMode:
        return ColumnOrderMode(self.default_order_mode)


__all__ = ["TableKitSettings"]
