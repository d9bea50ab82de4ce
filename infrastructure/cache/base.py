from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from domain.models.currency import CacheEntry, RateTable

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


def make_cache_key(base: str, targets: tuple[str, ...]) -> str:
    # Targets keep the order they were requested in, so USD,EUR and EUR,USD are separate entries
    return f"{base}|{','.join(targets)}"


class RateCache(Protocol):
    async def get_rates(self, key: str) -> CacheEntry | None:
        """Return the entry for ``key`` only while it is younger than the TTL."""
        ...

    async def set_rates(self, key: str, rates: RateTable) -> CacheEntry:
        """Overwrite the entry for ``key`` stamped with the current time."""
        ...
