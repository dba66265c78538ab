"""Unit tests for TableStatePersistence."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from tablekit.columns import ColumnOrderMode
from tablekit.config import SortConfig, TableKitSettings
from tablekit.filtering import FilterCondition, FilterOperator
from tablekit.kernel.errors import StorageError
from tablekit.persistence import (
    STATE_SUFFIXES,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    TableStatePersistence,
)


class BrokenStore:
    """Store whose every operation fails like an unreachable backend."""

    def get_item(self, key: str) -> str | None:
        raise StorageError("backend down", storage_key=key)

    def set_item(self, key: str, value: str) -> None:
        raise StorageError("backend down", storage_key=key)

    def remove_item(self, key: str) -> None:
        raise StorageError("backend down", storage_key=key)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def state(store: InMemoryKeyValueStore) -> TableStatePersistence:
    return TableStatePersistence(store, "users")


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_empty_store(self, state: TableStatePersistence) -> None:
        assert state.load_column_visibility() == {}
        assert state.load_column_sizing() == {}
        assert state.load_column_order() == []
        assert state.load_column_filters() == []
        assert state.load_sorting() == []
        assert state.load_pagination() == {"pageIndex": 0, "pageSize": 10}
        assert state.load_filter_column_order_mode() is ColumnOrderMode.DEFINITION

    def test_settings_drive_defaults(self, store: InMemoryKeyValueStore) -> None:
        settings = TableKitSettings(default_page_size=25, default_order_mode="alphabetical")
        state = TableStatePersistence(store, "users", settings)
        assert state.load_pagination() == {"pageIndex": 0, "pageSize": 25}
        assert state.load_filter_column_order_mode() is ColumnOrderMode.ALPHABETICAL

    def test_key_layout(self, state: TableStatePersistence) -> None:
        assert state.key_for("sorting") == "users_sorting"


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------


class TestRoundTrips:
    def test_column_visibility(self, state: TableStatePersistence, store: InMemoryKeyValueStore) -> None:
        state.save_column_visibility({"email": False, "name": True})
        assert json.loads(store.get_item("users_column_visibility")) == {"email": False, "name": True}
        assert state.load_column_visibility() == {"email": False, "name": True}

    def test_column_sizing(self, state: TableStatePersistence) -> None:
        state.save_column_sizing({"name": 200, "email": 150.5})
        assert state.load_column_sizing() == {"name": 200, "email": 150.5}

    def test_column_order(self, state: TableStatePersistence) -> None:
        state.save_column_order(("status", "name"))
        assert state.load_column_order() == ["status", "name"]

    def test_column_filters(self, state: TableStatePersistence) -> None:
        conditions = [
            FilterCondition("f1", "name", FilterOperator.CONTAINS, "ali"),
            FilterCondition("f2", "email", FilterOperator.IS_EMPTY),
        ]
        state.save_column_filters(conditions)
        assert state.load_column_filters() == conditions

    def test_sorting(self, state: TableStatePersistence, store: InMemoryKeyValueStore) -> None:
        state.save_sorting([SortConfig("created", "desc")])
        assert json.loads(store.get_item("users_sorting")) == [
            {"columnId": "created", "direction": "desc"}
        ]
        assert state.load_sorting() == [SortConfig("created", "desc")]

    def test_pagination(self, state: TableStatePersistence) -> None:
        state.save_pagination({"pageIndex": 3, "pageSize": 50})
        assert state.load_pagination() == {"pageIndex": 3, "pageSize": 50}

    @pytest.mark.parametrize("mode", ["definition", "ui", ColumnOrderMode.ALPHABETICAL])
    def test_filter_column_order_mode(self, state: TableStatePersistence, mode) -> None:
        state.save_filter_column_order_mode(mode)
        assert state.load_filter_column_order_mode() == mode

    def test_invalid_order_mode_is_rejected(self, state: TableStatePersistence) -> None:
        with pytest.raises(ValueError):
            state.save_filter_column_order_mode("sideways")

    def test_tables_do_not_share_state(self, store: InMemoryKeyValueStore) -> None:
        TableStatePersistence(store, "users").save_column_order(["a"])
        assert TableStatePersistence(store, "orders").load_column_order() == []


# ---------------------------------------------------------------------------
# Corrupt values fall back to defaults
# ---------------------------------------------------------------------------


class TestCorruptValues:
    @pytest.mark.parametrize(
        ("suffix", "raw", "loader", "expected"),
        [
            ("column_visibility", "not json", "load_column_visibility", {}),
            ("column_visibility", '{"a": "yes"}', "load_column_visibility", {}),
            ("column_sizing", '["wide"]', "load_column_sizing", {}),
            ("column_order", '["a", 1]', "load_column_order", []),
            ("column_filters", '[{"id": "x"}]', "load_column_filters", []),
            ("column_filters", '["name"]', "load_column_filters", []),
            ("sorting", '[{"columnId": "a", "direction": "up"}]', "load_sorting", []),
            ("pagination", '{"pageIndex": 0, "pageSize": 0}', "load_pagination",
             {"pageIndex": 0, "pageSize": 10}),
            ("filter_column_order_mode", '"sideways"', "load_filter_column_order_mode",
             ColumnOrderMode.DEFINITION),
        ],
    )
    def test_falls_back_and_warns(
        self,
        state: TableStatePersistence,
        store: InMemoryKeyValueStore,
        suffix: str,
        raw: str,
        loader: str,
        expected: object,
    ) -> None:
        store.set_item(state.key_for(suffix), raw)
        with capture_logs() as logs:
            assert getattr(state, loader)() == expected
        assert logs[0]["event"] == "table_state.invalid_value"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["key"] == f"users_{suffix}"

    def test_empty_string_is_default_without_warning(
        self, state: TableStatePersistence, store: InMemoryKeyValueStore
    ) -> None:
        store.set_item("users_column_order", "")
        with capture_logs() as logs:
            assert state.load_column_order() == []
        assert logs == []


# ---------------------------------------------------------------------------
# Failing stores
# ---------------------------------------------------------------------------


class TestFailingStore:
    def test_load_returns_default(self) -> None:
        state = TableStatePersistence(BrokenStore(), "users")
        with capture_logs() as logs:
            assert state.load_sorting() == []
        assert logs[0]["event"] == "table_state.load_failed"
        assert logs[0]["error_code"] == "storage_error"
        assert logs[0]["storage_key"] == "users_sorting"

    def test_save_logs_error(self) -> None:
        state = TableStatePersistence(BrokenStore(), "users")
        with capture_logs() as logs:
            state.save_column_order(["a"])
        assert logs[0]["event"] == "table_state.save_failed"
        assert logs[0]["log_level"] == "error"

    def test_unencodable_value_logs_error(self, state: TableStatePersistence) -> None:
        with capture_logs() as logs:
            state.save_column_sizing({"a": object()})  # type: ignore[dict-item]
        assert logs[0]["event"] == "table_state.encode_failed"

    def test_clear_logs_each_failure(self) -> None:
        state = TableStatePersistence(BrokenStore(), "users")
        with capture_logs() as logs:
            state.clear()
        assert [entry["event"] for entry in logs] == ["table_state.clear_failed"] * len(STATE_SUFFIXES)


# ---------------------------------------------------------------------------
# clear
# ---------------------------------------------------------------------------


class TestClear:
    def test_removes_every_key(self, state: TableStatePersistence, store: InMemoryKeyValueStore) -> None:
        state.save_column_order(["a"])
        state.save_sorting([SortConfig("a")])
        state.save_pagination({"pageIndex": 1, "pageSize": 20})
        state.save_filter_column_order_mode("ui")
        store.set_item("orders_sorting", "[]")
        state.clear()
        assert store.keys() == ["orders_sorting"]


# ---------------------------------------------------------------------------
# Corrupt store file
# ---------------------------------------------------------------------------


class TestCorruptStoreFile:
    @pytest.mark.parametrize("contents", ["{not json", "[1, 2]"])
    def test_saves_recover_after_corruption(self, tmp_path: Path, contents: str) -> None:
        path = tmp_path / "state.json"
        path.write_text(contents, encoding="utf-8")
        state = TableStatePersistence(JsonFileKeyValueStore(path), "users")

        with capture_logs() as logs:
            assert state.load_column_order() == []
        assert logs[0]["event"] == "table_state.load_failed"
        assert logs[0]["error_code"] == "serialization_error"

        state.save_column_order(["a"])
        assert state.load_column_order() == ["a"]

    def test_other_tables_keep_saving(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileKeyValueStore(path)
        TableStatePersistence(store, "users").save_sorting([SortConfig("name")])
        TableStatePersistence(store, "orders").save_pagination({"pageIndex": 2, "pageSize": 20})
        assert TableStatePersistence(store, "users").load_sorting() == [SortConfig("name")]
        assert TableStatePersistence(store, "orders").load_pagination() == {
            "pageIndex": 2, "pageSize": 20,
        }
