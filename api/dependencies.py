import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import (
	ConversionService,
	CurrencyService,
	QuoteService,
	RateService,
	WeatherService,
)
from config.settings import Settings, get_settings
from infrastructure.cache.base import RateCache
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.cache.redis_cache import RedisRateCache
from infrastructure.providers import (
	ExchangeRateHostProvider,
	ExchangeRateProvider,
	FrankfurterProvider,
	OpenERAPIProvider,
)
from infrastructure.weather.open_meteo import OpenMeteoClient

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	redis_client: Redis | None = None
	rate_cache: RateCache | None = None
	providers: list[ExchangeRateProvider] | None = None
	weather_client: OpenMeteoClient | None = None
	quote_service: QuoteService | None = None


deps = AppDependencies()


def build_rate_cache(settings: Settings) -> RateCache:
	ttl = timedelta(seconds=settings.RATE_CACHE_TTL_SECONDS)
	if settings.CACHE_BACKEND == 'redis':
		deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
		logger.info(f'Using Redis rate cache at {settings.REDIS_URL}')
		return RedisRateCache(deps.redis_client, ttl=ttl)
	logger.info('Using in-memory rate cache')
	return InMemoryRateCache(ttl=ttl)


def build_providers(settings: Settings) -> list[ExchangeRateProvider]:
	timeout = settings.PROVIDER_TIMEOUT_SECONDS
	# Order matters: this is the fallback order
	return [
		ExchangeRateHostProvider(settings.EXCHANGERATE_HOST_URL, timeout=timeout),
		FrankfurterProvider(settings.FRANKFURTER_URL, timeout=timeout),
		OpenERAPIProvider(settings.OPEN_ER_API_URL, timeout=timeout),
	]


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.rate_cache = build_rate_cache(settings)
	deps.providers = build_providers(settings)
	deps.weather_client = OpenMeteoClient(
		geocoding_url=settings.GEOCODING_URL,
		forecast_url=settings.FORECAST_URL,
		timeout=settings.WEATHER_TIMEOUT_SECONDS,
	)
	deps.quote_service = QuoteService()
	logger.info(f'Providers in fallback order: {", ".join(p.name for p in deps.providers)}')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.providers:
		for provider in deps.providers:
			await provider.close()
	if deps.weather_client:
		await deps.weather_client.close()
	if deps.redis_client:
		await deps.redis_client.aclose()

	deps.redis_client = None
	deps.rate_cache = None
	deps.providers = None
	deps.weather_client = None
	deps.quote_service = None
	logger.info('Cleanup complete')


def get_rate_cache() -> RateCache:
	if deps.rate_cache is None:
		raise RuntimeError('Rate cache not initialized')
	return deps.rate_cache


def get_providers() -> list[ExchangeRateProvider]:
	if deps.providers is None:
		raise RuntimeError('Providers not initialized')
	return deps.providers


def get_currency_service() -> CurrencyService:
	settings = get_settings()
	return CurrencyService(
		default_base=settings.DEFAULT_BASE, default_symbols=settings.DEFAULT_SYMBOLS
	)


def get_rate_service(
	providers: Annotated[list[ExchangeRateProvider], Depends(get_providers)],
	cache: Annotated[RateCache, Depends(get_rate_cache)],
) -> RateService:
	return RateService(providers=providers, cache=cache)


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service, currency_service=currency_service)


def get_weather_service() -> WeatherService:
	if deps.weather_client is None:
		raise RuntimeError('Weather client not initialized')
	return WeatherService(client=deps.weather_client, default_city=get_settings().DEFAULT_CITY)


def get_quote_service() -> QuoteService:
	if deps.quote_service is None:
		raise RuntimeError('Quote service not initialized')
	return deps.quote_service
