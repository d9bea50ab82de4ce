from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import (
    build_providers,
    build_rate_cache,
    cleanup_dependencies,
    deps,
)
from api.main import app
from config.settings import Settings
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.cache.redis_cache import RedisRateCache
from infrastructure.providers import ExchangeRateProvider
from infrastructure.weather.open_meteo import OpenMeteoClient


@pytest.fixture
def reset_deps():
    yield
    deps.redis_client = None
    deps.rate_cache = None
    deps.providers = None
    deps.weather_client = None
    deps.quote_service = None


def test_providers_built_in_fallback_order():
    providers = build_providers(Settings(PROVIDER_TIMEOUT_SECONDS=3.0))

    assert [p.name for p in providers] == ['exchangerate.host', 'frankfurter', 'open.er-api.com']
    assert all(p.timeout == 3.0 for p in providers)


def test_provider_urls_come_from_settings():
    providers = build_providers(Settings(
        EXCHANGERATE_HOST_URL='http://primary.test/',
        FRANKFURTER_URL='http://secondary.test',
        OPEN_ER_API_URL='http://tertiary.test/v6',
    ))

    assert [p.base_url for p in providers] == [
        'http://primary.test', 'http://secondary.test', 'http://tertiary.test/v6'
    ]


def test_memory_cache_is_default(reset_deps):
    cache = build_rate_cache(Settings(CACHE_BACKEND='memory', RATE_CACHE_TTL_SECONDS=90))

    assert isinstance(cache, InMemoryRateCache)
    assert cache.rate_ttl == timedelta(seconds=90)
    assert deps.redis_client is None


def test_redis_backend_selected(reset_deps):
    cache = build_rate_cache(Settings(
        CACHE_BACKEND='redis', REDIS_URL='redis://cache.test:6379', RATE_CACHE_TTL_SECONDS=120
    ))

    assert isinstance(cache, RedisRateCache)
    assert cache.rate_ttl == timedelta(seconds=120)
    assert cache.redis is deps.redis_client


@pytest.mark.asyncio
async def test_cleanup_closes_clients(reset_deps):
    providers = [AsyncMock(spec=ExchangeRateProvider) for _ in range(3)]
    weather_client = AsyncMock(spec=OpenMeteoClient)
    redis_client = AsyncMock()
    deps.providers = providers
    deps.weather_client = weather_client
    deps.redis_client = redis_client
    deps.rate_cache = InMemoryRateCache()

    await cleanup_dependencies()

    for provider in providers:
        provider.close.assert_awaited_once()
    weather_client.close.assert_awaited_once()
    redis_client.aclose.assert_awaited_once()
    assert deps.providers is None
    assert deps.rate_cache is None
    assert deps.redis_client is None


def test_lifespan_wires_and_releases_dependencies(reset_deps):
    with TestClient(app) as client:
        assert isinstance(deps.rate_cache, InMemoryRateCache)
        assert [p.name for p in deps.providers] == ['exchangerate.host', 'frankfurter', 'open.er-api.com']
        assert deps.weather_client is not None
        assert deps.quote_service is not None

        response = client.get('/api/quote')
        assert response.status_code == 200

    assert deps.providers is None
    assert deps.weather_client is None
    assert deps.rate_cache is None
