"""
Time-boxed on-disk snapshot of a tenant's endpoint list.

A snapshot is served only to the tenant that produced it and only while it is
less than one whole hour old. Every other outcome is a plain miss.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from pydantic import ValidationError

from sophos_dashboard.core.exceptions import StorageIOError
from sophos_dashboard.core.paths import AppPaths
from sophos_dashboard.schemas import CacheSnapshot, Endpoint
from sophos_dashboard.utils.files import (
    read_text_if_exists,
    remove_if_exists,
    write_json_atomic,
)

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600


class EndpointCacheStore:
    """Load, save and clear the endpoint snapshot file."""

    FRESHNESS_HOURS = 1

    def __init__(self, paths: AppPaths, *, clock: Callable[[], float] = time.time) -> None:
        self._paths = paths
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._paths.cache_file

    def _now(self) -> int:
        return int(self._clock())

    def age_hours(self, timestamp: int) -> Optional[int]:
        """Whole hours elapsed since ``timestamp``; ``None`` if it lies in the future."""
        now = self._now()
        if timestamp > now:
            return None
        return (now - timestamp) // SECONDS_PER_HOUR

    def is_fresh(self, timestamp: int) -> bool:
        age = self.age_hours(timestamp)
        return age is not None and age < self.FRESHNESS_HOURS

    def load(self, tenant_id: str) -> Optional[List[Endpoint]]:
        """Return cached endpoints for ``tenant_id`` or ``None`` on any miss."""
        try:
            raw = read_text_if_exists(self.path)
        except OSError as exc:
            logger.warning("Failed to read cache: %s", exc)
            return None
        except UnicodeDecodeError as exc:
            logger.warning("Cache file is not valid UTF-8: %s", exc)
            return None

        if raw is None:
            logger.info("No cache file found")
            return None

        try:
            snapshot = CacheSnapshot.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Failed to parse cache: %s", exc)
            return None

        if snapshot.tenant_id != tenant_id:
            logger.info("Cache tenant mismatch, ignoring cache")
            return None

        if not self.is_fresh(snapshot.timestamp):
            logger.info("Cache expired, will fetch fresh data")
            return None

        logger.info(
            "Using cached data (%d endpoints, %s hours old)",
            len(snapshot.endpoints),
            self.age_hours(snapshot.timestamp),
        )
        return list(snapshot.endpoints)

    def save(self, endpoints: Sequence[Endpoint], tenant_id: str) -> None:
        """Replace the snapshot. Failures are logged, never raised."""
        snapshot = CacheSnapshot(
            endpoints=list(endpoints),
            timestamp=self._now(),
            tenant_id=tenant_id,
        )
        try:
            self._paths.ensure_data_dir()
            write_json_atomic(self.path, snapshot.to_wire())
        except OSError as exc:
            logger.error("Failed to save cache: %s", exc)
            return
        logger.info("Data cached successfully (%d endpoints)", len(snapshot.endpoints))

    def clear(self) -> bool:
        """Delete the snapshot; return ``False`` if there was none."""
        try:
            removed = remove_if_exists(self.path)
        except OSError as exc:
            raise StorageIOError(str(exc)) from exc
        if removed:
            logger.info("Cache cleared")
        return removed


__all__ = ["EndpointCacheStore", "SECONDS_PER_HOUR"]
