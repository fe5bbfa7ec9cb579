"""Time-bounded in-memory cache for the manifest."""

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from logging_setup import get_logger
from manifest import Manifest

logger = get_logger("cache")

CACHE_KEY = "ActorMappingCache"


@dataclass(frozen=True)
class CacheEntry:
    value: Manifest
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


class ManifestCache:
    """Single-slot manifest cache checked against an injected clock.

    A miss replaces the slot wholesale. Concurrent misses may each fetch;
    the last one to finish wins.
    """

    def __init__(
        self,
        ttl: timedelta,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._clock = clock
        self._entry: CacheEntry | None = None

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def invalidate(self) -> None:
        self._entry = None

    async def get_or_fetch(
        self, fetcher: Callable[[], Awaitable[Manifest]]
    ) -> Manifest:
        """Return the cached manifest, calling ``fetcher`` on a miss."""
        entry = self._entry
        if entry is not None and entry.is_valid(self._clock()):
            logger.debug("Cache hit for %s", CACHE_KEY)
            return entry.value

        logger.debug("Cache miss for %s, fetching", CACHE_KEY)
        manifest = await fetcher()
        self._entry = CacheEntry(
            value=manifest,
            expires_at=self._clock() + self.ttl.total_seconds(),
        )
        return manifest
