"""Persistence – key-value stores and per-table UI state round-tripping."""
from tablekit.persistence.store import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from tablekit.persistence.table_state import STATE_SUFFIXES, TableStatePersistence

__all__ = [
    "STATE_SUFFIXES",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "TableStatePersistence",
]
