import logging

from domain.exceptions.currency import AllProvidersExhaustedError, CacheError
from domain.models.currency import (
    CACHE_SOURCE,
    ConversionRequest,
    ProviderFailureReason,
    RateFetchResult,
    RateLookup,
    RateTable,
)
from infrastructure.cache.base import RateCache, make_cache_key
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
    """Finds a rate table for a request: cache first, then providers in order.

    Providers are tried one at a time and the first one that yields at least one
    requested rate wins. Provider failures never escape this class; only total
    exhaustion does.
    """

    def __init__(self, providers: list[ExchangeRateProvider], cache: RateCache):
        self.providers = providers
        self.cache = cache

    async def get_rates(self, request: ConversionRequest) -> RateLookup:
        key = make_cache_key(request.base, request.targets)

        cached = await self._check_cache(key)
        if cached is not None:
            return cached

        attempts: list[RateFetchResult] = []
        for provider in self.providers:
            result = await self._try_provider(provider, request)
            if result.was_successful:
                await self._update_cache(key, result.rates)
                logger.info(f"Rates for {key} served by {result.provider_name}")
                return RateLookup(rates=result.rates, source=result.provider_name)
            attempts.append(result)

        summary = ", ".join(f"{a.provider_name}={a.failure.value}" for a in attempts)
        logger.error(f"All providers failed for {key}: {summary}")
        raise AllProvidersExhaustedError("Bad response from currency provider.")

    async def _try_provider(
        self, provider: ExchangeRateProvider, request: ConversionRequest
    ) -> RateFetchResult:
        result = await provider.fetch_rates(request.base, request.targets)
        if result.failure is None:
            result = self._project(result, request.targets)

        if not result.was_successful:
            logger.warning(
                f"Provider {result.provider_name} failed ({result.failure.value}): {result.error_message}"
            )
        return result

    @staticmethod
    def _project(result: RateFetchResult, targets: tuple[str, ...]) -> RateFetchResult:
        """Keep only the requested targets, in request order."""
        table = result.rates or {}
        projected: RateTable = {code: table[code] for code in targets if code in table}
        if not projected:
            return RateFetchResult.failed(
                result.provider_name,
                ProviderFailureReason.EMPTY_INTERSECTION,
                f"None of {','.join(targets)} present in response",
            )
        return RateFetchResult.success(result.provider_name, projected)

    async def _check_cache(self, key: str) -> RateLookup | None:
        try:
            entry = await self.cache.get_rates(key)
        except CacheError as e:
            logger.warning(f"Cache read failed for {key}, treating as miss: {e}")
            return None

        if entry is None:
            logger.debug(f"Cache MISS for {key}")
            return None

        logger.debug(f"Cache HIT for {key}")
        return RateLookup(rates=entry.rates, source=CACHE_SOURCE, cached_at=entry.timestamp)

    async def _update_cache(self, key: str, rates: RateTable) -> None:
        try:
            await self.cache.set_rates(key, rates)
        except CacheError as e:
            logger.warning(f"Cache write failed for {key}: {e}")
