"""Config – TableConfig value objects, presets and merging."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Literal

from tablekit.filtering.types import FilterCondition

__all__ = [
    "PRESETS",
    "PaginationConfig",
    "SortConfig",
    "TableConfig",
    "merge_configs",
    "validate_table_config",
]


@dataclass(frozen=True)
class SortConfig:
    column_id: str
    direction: Literal["asc", "desc"] = "asc"

    def to_dict(self) -> dict[str, Any]:
        return {"columnId": self.column_id, "direction": self.direction}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SortConfig:
        direction = data.get("direction", "asc")
        if direction not in ("asc", "desc"):
            raise ValueError(f"Unknown sort direction {direction!r}")
        return cls(column_id=str(data["columnId"]), direction=direction)


@dataclass(frozen=True)
class PaginationConfig:
    page_size: int
    page_size_options: tuple[int, ...] = ()


@dataclass(frozen=True)
class TableConfig:
    """Declarative defaults for one table.

    ``None`` means "not set" so that :func:`merge_configs` can layer partial
    configs on top of each other.
    """

    id: str = ""
    version: str = "1.0.0"
    default_visible_columns: tuple[str, ...] | None = None
    default_column_order: tuple[str, ...] | None = None
    default_column_sizing: dict[str, int] | None = None
    pinned_left: tuple[str, ...] | None = None
    pinned_right: tuple[str, ...] | None = None
    default_filters: tuple[FilterCondition, ...] | None = None
    default_sorting: tuple[SortConfig, ...] | None = None
    pagination: PaginationConfig | None = None
    extra: dict[str, Any] = field(default_factory=dict)


PRESETS: dict[str, TableConfig] = {
    "dashboard": TableConfig(
        id="dashboard",
        pagination=PaginationConfig(page_size=10, page_size_options=(10, 25, 50)),
    ),
    "data_grid": TableConfig(
        id="data-grid",
        pagination=PaginationConfig(page_size=50, page_size_options=(25, 50, 100, 200)),
    ),
    "readonly": TableConfig(
        id="readonly",
        pagination=PaginationConfig(page_size=25, page_size_options=(25, 50, 100)),
    ),
}


def merge_configs(*configs: TableConfig) -> TableConfig:
    """Layer *configs* left to right; a later config's set fields win.

    The result is identified as ``merged`` unless one of the configs sets
    an id. ``extra`` mappings are merged key by key.
    """
    merged = TableConfig(id="merged")
    for config in configs:
        changes: dict[str, Any] = {}
        for f in dataclasses.fields(config):
            value = getattr(config, f.name)
            if f.name == "extra":
                changes["extra"] = {**merged.extra, **value}
            elif value is not None and value != "":
                changes[f.name] = value
        merged = dataclasses.replace(merged, **changes)
    return merged


def validate_table_config(config: TableConfig) -> bool:
    """A usable config carries an id and, if paginated, a positive page size."""
    if not config.id:
        return False
    return config.pagination is None or config.pagination.page_size > 0
