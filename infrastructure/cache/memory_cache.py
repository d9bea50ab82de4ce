from datetime import timedelta

from domain.models.currency import CacheEntry, RateTable
from infrastructure.cache.base import Clock, utcnow


class InMemoryRateCache:
    """Process-wide rate-table cache.

    Stale entries are skipped on read but never removed; the only way an entry
    changes is being overwritten by a fresh provider answer for the same key.
    """

    def __init__(self, ttl: timedelta = timedelta(minutes=5), clock: Clock = utcnow):
        self.rate_ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    async def get_rates(self, key: str) -> CacheEntry | None:
        entry = self._entries.get(key)
        if entry is None or not entry.is_fresh(self._clock(), self.rate_ttl):
            return None
        return entry

    async def set_rates(self, key: str, rates: RateTable) -> CacheEntry:
        entry = CacheEntry(key=key, timestamp=self._clock(), rates=dict(rates))
        self._entries[key] = entry
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
