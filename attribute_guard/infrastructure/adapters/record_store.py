"""In-memory record store backing TrackedModel persistence.

Stores a dump of each saved record keyed by model type and id. Ids are
assigned per model type, starting at 1.

Usage:
    store = RecordStore()
    record_id = store.next_id(Account)
    store.put(Account, record_id, {"id": record_id, "owner_id": 1})
    store.get(Account, record_id)  # {"id": 1, "owner_id": 1}

    # Reset for next test
    store.clear()
"""

from __future__ import annotations

import threading
from copy import deepcopy
from typing import Any


class RecordStore:
    """Thread-safe in-memory storage of record dumps."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._rows: dict[type, dict[Any, dict[str, Any]]] = {}
        self._sequences: dict[type, int] = {}
        self._mutex = threading.Lock()

    def next_id(self, model: type) -> int:
        """Allocate the next id for a model type."""
        with self._mutex:
            self._sequences[model] = self._sequences.get(model, 0) + 1
            return self._sequences[model]

    def put(self, model: type, record_id: Any, data: dict[str, Any]) -> None:
        """Insert or replace the stored dump for a record."""
        with self._mutex:
            self._rows.setdefault(model, {})[record_id] = deepcopy(data)

    def get(self, model: type, record_id: Any) -> dict[str, Any] | None:
        """Return a copy of the stored dump, or None if absent."""
        with self._mutex:
            data = self._rows.get(model, {}).get(record_id)
            return deepcopy(data) if data is not None else None

    def count(self, model: type) -> int:
        """Return the number of stored records of a model type."""
        with self._mutex:
            return len(self._rows.get(model, {}))

    def clear(self) -> None:
        """Clear all rows and id sequences for test isolation."""
        with self._mutex:
            self._rows.clear()
            self._sequences.clear()


DEFAULT_RECORD_STORE = RecordStore()
