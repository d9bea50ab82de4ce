import json
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError
from domain.models.currency import CacheEntry, RateTable
from infrastructure.cache.base import Clock, utcnow


class RedisRateCache:
    """Rate-table cache shared through Redis.

    Entries are written without an expiry so a stale table stays in place until
    overwritten, matching the in-memory cache; freshness is checked on read.
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        ttl: timedelta = timedelta(minutes=5),
        clock: Clock = utcnow,
    ):
        self.redis = redis_client
        self.rate_ttl = ttl
        self._clock = clock

    def _make_redis_key(self, key: str) -> str:
        return f"rates:{key}"

    async def get_rates(self, key: str) -> CacheEntry | None:
        try:
            data = await self.redis.get(self._make_redis_key(key))
        except RedisError as e:
            raise CacheError(f"Redis read failed for {key}: {e.__class__.__name__}") from e

        if not data:
            return None

        try:
            payload = json.loads(data)
            entry = CacheEntry(
                key=key,
                timestamp=datetime.fromisoformat(payload["timestamp"]),
                rates={code: Decimal(rate) for code, rate in payload["rates"].items()},
            )
        except (ValueError, KeyError, TypeError, AttributeError, InvalidOperation) as e:
            raise CacheError(f"Invalid json data for {key}") from e

        if not entry.is_fresh(self._clock(), self.rate_ttl):
            return None
        return entry

    async def set_rates(self, key: str, rates: RateTable) -> CacheEntry:
        entry = CacheEntry(key=key, timestamp=self._clock(), rates=dict(rates))
        payload = {
            "timestamp": entry.timestamp.isoformat(),
            "rates": {code: str(rate) for code, rate in entry.rates.items()},
        }
        try:
            await self.redis.set(self._make_redis_key(key), json.dumps(payload))
        except RedisError as e:
            raise CacheError(f"Redis write failed for {key}: {e.__class__.__name__}") from e
        return entry
