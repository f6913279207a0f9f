"""Environment-driven settings.

Statistics are stored in ~/.fizzbuzz-api/statistics.json by default.
Every value can be overridden with an environment variable.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_DATA_DIR = os.path.expanduser("~/.fizzbuzz-api")
DEFAULT_STATS_FILENAME = "statistics.json"
DEFAULT_CACHE_TTL_SECONDS = 3600

PRODUCTION_ENVIRONMENTS = {"prod", "production"}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


class Settings(BaseModel):
    """Runtime configuration for the API and the statistics store."""

    environment: str = "prod"
    data_dir: Path = Field(default_factory=lambda: Path(DEFAULT_DATA_DIR))
    stats_file: Optional[Path] = None
    cache_ttl_seconds: float = Field(default=DEFAULT_CACHE_TTL_SECONDS, ge=0)
    record_statistics: bool = True
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in PRODUCTION_ENVIRONMENTS

    @property
    def stats_path(self) -> Path:
        """Location of the durable statistics file."""
        if self.stats_file is not None:
            return self.stats_file
        return self.data_dir / DEFAULT_STATS_FILENAME

    @classmethod
    def from_env(cls) -> "Settings":
        stats_file = os.environ.get("STATS_FILE")
        return cls(
            environment=os.environ.get("APP_ENV", "prod"),
            data_dir=Path(os.environ.get("DATA_DIR", DEFAULT_DATA_DIR)),
            stats_file=Path(stats_file) if stats_file else None,
            cache_ttl_seconds=float(os.environ.get("STATS_CACHE_TTL", str(DEFAULT_CACHE_TTL_SECONDS))),
            record_statistics=_env_flag("RECORD_STATISTICS", True),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
