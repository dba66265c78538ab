"""Persistence – load/save UI table state under a caller-supplied storage key.

Every load falls back to its documented default when the stored value is
missing, unreadable or of the wrong shape; the problem is logged as a
warning and never raised. Failed saves are logged as errors.
"""
from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from tablekit.columns.ordering import ColumnOrderMode
from tablekit.config.settings import TableKitSettings
from tablekit.config.table import SortConfig
from tablekit.filtering.types import FilterCondition
from tablekit.kernel.errors import InfrastructureError
from tablekit.observability.logging import get_logger
from tablekit.persistence.store import KeyValueStore

__all__ = ["STATE_SUFFIXES", "TableStatePersistence"]

T = TypeVar("T")

STATE_SUFFIXES: tuple[str, ...] = (
    "column_visibility",
    "column_sizing",
    "column_filters",
    "column_order",
    "sorting",
    "pagination",
    "filter_column_order_mode",
)

_log = get_logger(__name__)


def _mapping_of(*value_types: type) -> Callable[[Any], dict[str, Any]]:
    names = "/".join(t.__name__ for t in value_types)

    def decode(data: Any) -> dict[str, Any]:
        if not isinstance(data, dict) or not all(isinstance(v, value_types) for v in data.values()):
            raise ValueError(f"expected an object of {names} values")
        return data
    return decode


def _string_list(data: Any) -> list[str]:
    if not isinstance(data, list) or not all(isinstance(v, str) for v in data):
        raise ValueError("expected a list of strings")
    return data


def _filters(data: Any) -> list[FilterCondition]:
    if not isinstance(data, list):
        raise ValueError("expected a list of conditions")
    return [FilterCondition.from_dict(item) for item in data]


def _sorting(data: Any) -> list[SortConfig]:
    if not isinstance(data, list):
        raise ValueError("expected a list of sort entries")
    return [SortConfig.from_dict(item) for item in data]


def _pagination(data: Any) -> dict[str, int]:
    if not isinstance(data, dict):
        raise ValueError("expected an object")
    page_index, page_size = data.get("pageIndex"), data.get("pageSize")
    if not isinstance(page_index, int) or not isinstance(page_size, int) or page_size <= 0:
        raise ValueError("expected integer pageIndex and positive pageSize")
    return {"pageIndex": page_index, "pageSize": page_size}


class TableStatePersistence:
    """Round-trips one table's UI state through a :class:`KeyValueStore`.

    Values are stored as JSON text under ``f"{storage_key}_{suffix}"``.
    """

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: str,
        settings: TableKitSettings | None = None,
    ) -> None:
        self._store = store
        self._storage_key = storage_key
        self._settings = settings or TableKitSettings()

    def key_for(self, suffix: str) -> str:
        return f"{self._storage_key}_{suffix}"

    # -- generic -----------------------------------------------------------

    def _load(self, suffix: str, default: T, decode: Callable[[Any], T]) -> T:
        key = self.key_for(suffix)
        try:
            raw = self._store.get_item(key)
        except InfrastructureError as exc:
            _log.warning("table_state.load_failed", key=key, **exc.log_fields())
            return default
        if not raw:
            return default
        try:
            return decode(json.loads(raw))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            _log.warning("table_state.invalid_value", key=key, error=str(exc))
            return default

    def _save(self, suffix: str, value: Any) -> None:
        key = self.key_for(suffix)
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as exc:
            _log.error("table_state.encode_failed", key=key, error=str(exc))
            return
        try:
            self._store.set_item(key, payload)
        except InfrastructureError as exc:
            _log.error("table_state.save_failed", key=key, **exc.log_fields())

    # -- column visibility / sizing / order ----------------------------------

    def load_column_visibility(self) -> dict[str, bool]:
        return self._load("column_visibility", {}, _mapping_of(bool))

    def save_column_visibility(self, state: dict[str, bool]) -> None:
        self._save("column_visibility", state)

    def load_column_sizing(self) -> dict[str, float]:
        return self._load("column_sizing", {}, _mapping_of(int, float))

    def save_column_sizing(self, state: dict[str, float]) -> None:
        self._save("column_sizing", state)

    def load_column_order(self) -> list[str]:
        return self._load("column_order", [], _string_list)

    def save_column_order(self, state: Sequence[str]) -> None:
        self._save("column_order", list(state))

    # -- filters / sorting / pagination --------------------------------------

    def load_column_filters(self) -> list[FilterCondition]:
        return self._load("column_filters", [], _filters)

    def save_column_filters(self, conditions: Sequence[FilterCondition]) -> None:
        self._save("column_filters", [c.to_dict() for c in conditions])

    def load_sorting(self) -> list[SortConfig]:
        return self._load("sorting", [], _sorting)

    def save_sorting(self, sorting: Sequence[SortConfig]) -> None:
        self._save("sorting", [s.to_dict() for s in sorting])

    def load_pagination(self) -> dict[str, int]:
        default = {"pageIndex": 0, "pageSize": self._settings.default_page_size}
        return self._load("pagination", default, _pagination)

    def save_pagination(self, state: dict[str, int]) -> None:
        self._save("pagination", state)

    # -- filter column picker order mode --------------------------------------

    def load_filter_column_order_mode(self) -> ColumnOrderMode:
        return self._load("filter_column_order_mode", self._settings.order_mode, ColumnOrderMode)

    def save_filter_column_order_mode(self, mode: ColumnOrderMode | str) -> None:
        """Raises ``ValueError`` for a mode outside :class:`ColumnOrderMode`."""
        self._save("filter_column_order_mode", str(ColumnOrderMode(mode)))

    def clear(self) -> None:
        """Remove every stored value for this table."""
        for suffix in STATE_SUFFIXES:
            key = self.key_for(suffix)
            try:
                self._store.remove_item(key)
            except InfrastructureError as exc:
                _log.error("table_state.clear_failed", key=key, **exc.log_fields())
