"""Request statistics: a write-through cache layered on durable storage.

Reads go to the cache first, then to the file, then fall back to an empty
table. Every increment invalidates the cached table, refills it with the new
version and persists the whole table to the file.

The read-modify-write cycle holds a process-local lock, so threads of one
process never lose increments. Separate processes sharing the same file are
still last-write-wins on the whole table.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Mapping, Optional, Union

from .core.fingerprint import fingerprint
from .core.models import ParameterSet, ParameterValue, StatEntry
from .storage import JsonFileStorage, MemoryCacheStorage, StatisticsStorage, StatsTable

logger = logging.getLogger(__name__)

Parameters = Union[ParameterSet, Mapping[str, ParameterValue]]


class StatisticsRepository:
    """Counts how often each parameter set was requested."""

    def __init__(self, cache: StatisticsStorage, storage: StatisticsStorage):
        self._cache = cache
        self._storage = storage
        self._lock = threading.RLock()

    @classmethod
    def from_path(cls, path: Path | str, cache_ttl_seconds: float = 3600) -> "StatisticsRepository":
        return cls(MemoryCacheStorage(cache_ttl_seconds), JsonFileStorage(path))

    def increment(self, params: Parameters) -> StatEntry:
        """Add one occurrence of ``params`` and persist the table. Returns the updated entry."""
        parameters = params.to_dict() if isinstance(params, ParameterSet) else dict(params)
        key = fingerprint(parameters)

        with self._lock:
            table = dict(self._load())
            entry = table.get(key)
            if entry is None:
                entry = {"parameters": parameters, "count": 0}
            else:
                entry = dict(entry)
            entry["count"] += 1
            table[key] = entry
            self._save(table)

        logger.debug("Recorded request %s (count=%d)", key, entry["count"])
        return StatEntry.model_validate(entry)

    def most_frequent(self) -> Optional[StatEntry]:
        """Return the entry with the highest count, or None if nothing was recorded.

        Ties go to the entry that was created first.
        """
        with self._lock:
            table = self._load()

        best: Optional[dict] = None
        for entry in table.values():
            if best is None or entry["count"] > best["count"]:
                best = entry

        if best is None:
            return None
        return StatEntry.model_validate(best)

    def all_entries(self) -> dict[str, StatEntry]:
        with self._lock:
            table = self._load()
        return {key: StatEntry.model_validate(entry) for key, entry in table.items()}

    def invalidate(self) -> None:
        """Drop the cached table; the next access reloads it from storage."""
        with self._lock:
            self._cache.delete()

    def _load(self) -> StatsTable:
        table = self._cache.load()
        if table is not None:
            return table

        table = self._storage.load()
        if table is None:
            table = {}
        self._cache.save(table)
        return table

    def _save(self, table: StatsTable) -> None:
        # the cache only ever holds what the file holds
        self._cache.delete()
        self._storage.save(table)
        self._cache.save(table)
