"""Columns – display order of columns under the three ordering modes."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from tablekit.kernel.collation import collation_key

__all__ = [
    "ColumnDef",
    "ColumnOrderMode",
    "column_id",
    "column_label",
    "next_order_mode",
    "order_columns",
]

C = TypeVar("C")


class ColumnOrderMode(StrEnum):
    DEFINITION = "definition"
    UI = "ui"
    ALPHABETICAL = "alphabetical"


_MODE_CYCLE: tuple[ColumnOrderMode, ...] = tuple(ColumnOrderMode)


def next_order_mode(mode: ColumnOrderMode | str) -> ColumnOrderMode:
    """definition -> ui -> alphabetical -> definition; unknown modes restart the cycle."""
    try:
        current = _MODE_CYCLE.index(ColumnOrderMode(mode))
    except (TypeError, ValueError):
        return ColumnOrderMode.DEFINITION
    return _MODE_CYCLE[(current + 1) % len(_MODE_CYCLE)]


@dataclass(frozen=True)
class ColumnDef:
    """Minimal column definition; plain mappings in table-library shape work too."""

    accessor_key: str | None = None
    id: str | None = None
    header: Any = None


def _attr(column: Any, *names: str) -> Any:
    for name in names:
        value = column.get(name) if isinstance(column, Mapping) else getattr(column, name, None)
        if value:
            return value
    return None


def column_id(column: Any) -> str:
    """Accessor key, else explicit id, else ``""``."""
    key = _attr(column, "accessorKey", "accessor_key")
    if key:
        return str(key)
    return str(_attr(column, "id") or "")


def column_label(column: Any) -> str:
    """Header text, else the column id."""
    header = _attr(column, "header")
    return str(header) if header else column_id(column)


def order_columns(
    columns: Sequence[C],
    mode: ColumnOrderMode | str,
    ui_order: Sequence[str] = (),
) -> list[C]:
    """Return a new list of *columns* ordered per *mode*; the input is left untouched.

    ``ui`` mode places columns by their position in *ui_order*; columns it
    does not mention follow, in their original relative order.
    """
    match mode:
        case ColumnOrderMode.ALPHABETICAL:
            return sorted(columns, key=lambda c: collation_key(column_label(c)))
        case ColumnOrderMode.UI:
            positions: dict[str, int] = {}
            for index, ident in enumerate(ui_order):
                positions.setdefault(ident, index)
            missing = len(ui_order)
            return sorted(columns, key=lambda c: positions.get(column_id(c), missing))
        case _:
            return list(columns)
