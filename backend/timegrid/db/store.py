from __future__ import annotations

from copy import deepcopy
from typing import Any, Protocol

from sqlalchemy.orm import Session

from timegrid.models.kv_entry import KeyValueEntry


class KeyValueStore(Protocol):
    def load(self, key: str) -> Any | None: ...

    def save(self, key: str, value: Any) -> None: ...


class SqlKeyValueStore:
    """JSON documents keyed by name in the ``kv_entries`` table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def load(self, key: str) -> Any | None:
        entry = self.db.get(KeyValueEntry, key)
        if entry is None:
            return None
        return entry.payload

    def save(self, key: str, value: Any) -> None:
        entry = self.db.get(KeyValueEntry, key)
        if entry is None:
            self.db.add(KeyValueEntry(key=key, payload=value))
        else:
            entry.payload = value
        self.db.commit()


class InMemoryKeyValueStore:
    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def load(self, key: str) -> Any | None:
        if key not in self._data:
            return None
        return deepcopy(self._data[key])

    def save(self, key: str, value: Any) -> None:
        self._data[key] = deepcopy(value)
