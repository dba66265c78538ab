"""Persistence – KeyValueStore port and its in-memory and JSON-file adapters."""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Protocol, runtime_checkable

from tablekit.kernel.errors import SerializationError, StorageError
from tablekit.observability.logging import get_logger

__all__ = ["InMemoryKeyValueStore", "JsonFileKeyValueStore", "KeyValueStore"]

_log = get_logger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """String-to-string store, the shape of a browser's ``localStorage``."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class InMemoryKeyValueStore:
    """Dict-backed store for tests and single-process use."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class JsonFileKeyValueStore:
    """All keys kept in one JSON object file, rewritten on every change.

    The file is replaced atomically so a crash mid-write leaves the previous
    contents intact. Reading a file that is not a JSON object raises
    :class:`SerializationError`; writing to one moves it aside to
    ``<name>.corrupt`` and starts a fresh object, so a damaged file costs
    the values it held but never blocks later saves.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def corrupt_path(self) -> Path:
        return self._path.with_name(self._path.name + ".corrupt")

    def _read(self, key: str | None = None) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageError(
                f"Cannot read {self._path}", path=self._path, storage_key=key, cause=exc
            ) from exc
        try:
            data = json.loads(raw) if raw.strip() else {}
        except ValueError as exc:
            raise SerializationError(
                f"{self._path} is not valid JSON", path=self._path, cause=exc
            ) from exc
        if not isinstance(data, dict):
            raise SerializationError(
                f"{self._path} does not hold a JSON object", path=self._path
            )
        return data

    def _read_for_update(self, key: str) -> dict[str, str]:
        try:
            return self._read(key)
        except SerializationError as exc:
            _log.warning(
                "store.corrupt_file_replaced",
                corrupt_path=str(self.corrupt_path),
                **exc.log_fields(),
            )
            try:
                os.replace(self._path, self.corrupt_path)
            except OSError as move_exc:
                raise StorageError(
                    f"Cannot move aside {self._path}",
                    path=self._path,
                    storage_key=key,
                    cause=move_exc,
                ) from move_exc
            return {}

    def _write(self, data: dict[str, str], key: str) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            raise StorageError(
                f"Cannot write {self._path}", path=self._path, storage_key=key, cause=exc
            ) from exc

    def get_item(self, key: str) -> str | None:
        with self._lock:
            value = self._read(key).get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_for_update(key)
            data[key] = value
            self._write(data, key)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._read_for_update(key)
            if data.pop(key, None) is not None:
                self._write(data, key)
