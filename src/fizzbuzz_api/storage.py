"""Storage backends for the statistics table.

Two implementations share one interface:

- ``MemoryCacheStorage`` keeps the table in process memory for a limited time.
- ``JsonFileStorage`` persists it as a single pretty-printed JSON file,
  creating the parent directory on demand.

The table is a plain ``{fingerprint: {"parameters": {...}, "count": n}}``
mapping; the repository owns its meaning.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)

StatsTable = dict[str, dict]


class StatisticsStorageError(RuntimeError):
    """Raised when the statistics table cannot be read or written."""


class StatisticsStorage(ABC):
    """Somewhere the statistics table can be kept."""

    @abstractmethod
    def load(self) -> Optional[StatsTable]:
        """Return the stored table, or None when nothing is stored."""

    @abstractmethod
    def save(self, table: StatsTable) -> None:
        """Replace the stored table."""

    @abstractmethod
    def delete(self) -> None:
        """Forget the stored table."""


class MemoryCacheStorage(StatisticsStorage):
    """In-process cache whose content expires ``ttl_seconds`` after it was saved."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self._ttl = ttl_seconds
        self._clock = clock
        self._table: Optional[StatsTable] = None
        self._expires_at = 0.0

    def load(self) -> Optional[StatsTable]:
        if self._table is None:
            return None
        if self._clock() >= self._expires_at:
            logger.debug("Statistics cache expired")
            self._table = None
            return None
        return self._table

    def save(self, table: StatsTable) -> None:
        self._table = table
        self._expires_at = self._clock() + self._ttl

    def delete(self) -> None:
        self._table = None
        self._expires_at = 0.0


class JsonFileStorage(StatisticsStorage):
    """Durable storage in a single JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Optional[StatsTable]:
        if not self.path.exists():
            return None
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StatisticsStorageError(f"Cannot read statistics file {self.path}: {exc}") from exc
        if not content.strip():
            return {}
        try:
            table = json.loads(content)
        except json.JSONDecodeError as exc:
            raise StatisticsStorageError(f"Statistics file {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(table, dict):
            raise StatisticsStorageError(f"Statistics file {self.path} does not contain a JSON object")
        logger.debug("Loaded %d statistics entries from %s", len(table), self.path)
        return table

    def save(self, table: StatsTable) -> None:
        """Write the table to a temporary file and move it into place."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(table, fh, indent=4)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise StatisticsStorageError(f"Cannot write statistics file {self.path}: {exc}") from exc
        logger.debug("Persisted %d statistics entries to %s", len(table), self.path)

    def delete(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise StatisticsStorageError(f"Cannot delete statistics file {self.path}: {exc}") from exc
