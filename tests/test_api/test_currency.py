from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_providers, get_rate_cache
from api.main import app
from infrastructure.cache.memory_cache import InMemoryRateCache
from infrastructure.providers import ExchangeRateHostProvider, FrankfurterProvider, OpenERAPIProvider
from tests.helpers import make_json_response


@pytest.fixture
def http_clients():
    return {
        'exchangerate.host': AsyncMock(spec=httpx.AsyncClient),
        'frankfurter': AsyncMock(spec=httpx.AsyncClient),
        'open.er-api.com': AsyncMock(spec=httpx.AsyncClient),
    }


@pytest.fixture
def rate_cache(clock):
    return InMemoryRateCache(clock=clock)


@pytest.fixture
def client(http_clients, rate_cache):
    providers = [
        ExchangeRateHostProvider(client=http_clients['exchangerate.host']),
        FrankfurterProvider(client=http_clients['frankfurter']),
        OpenERAPIProvider(client=http_clients['open.er-api.com']),
    ]
    app.dependency_overrides[get_providers] = lambda: providers
    app.dependency_overrides[get_rate_cache] = lambda: rate_cache
    yield TestClient(app)
    app.dependency_overrides.clear()


def all_providers_down(http_clients):
    for mock_client in http_clients.values():
        mock_client.get.side_effect = httpx.ConnectError('Connection refused')


def test_convert_cold_cache_primary_healthy(client, http_clients):
    http_clients['exchangerate.host'].get.return_value = make_json_response({
        'rates': {'USD': 0.012, 'EUR': 0.011}
    })

    response = client.get('/api/currency', params={'amount': '100', 'base': 'INR', 'symbols': 'USD,EUR'})

    assert response.status_code == 200
    data = response.json()
    assert data['base'] == 'INR'
    assert data['amount'] == 100
    assert data['source'] == 'exchangerate.host'
    assert set(data['conversions']) == {'USD', 'EUR'}
    assert data['conversions']['USD'] == pytest.approx(1.2)
    assert data['conversions']['EUR'] == pytest.approx(1.1)
    assert all(value > 0 for value in data['conversions'].values())
    assert 'cachedAt' not in data

    http_clients['frankfurter'].get.assert_not_called()
    http_clients['open.er-api.com'].get.assert_not_called()


def test_convert_defaults(client, http_clients):
    http_clients['exchangerate.host'].get.return_value = make_json_response({
        'rates': {'USD': 0.012, 'EUR': 0.011}
    })

    response = client.get('/api/currency')

    assert response.status_code == 200
    data = response.json()
    assert data['base'] == 'INR'
    assert data['amount'] == 1
    assert data['conversions'] == {'USD': 0.012, 'EUR': 0.011}


def test_convert_second_request_served_from_cache(client, http_clients, clock):
    http_clients['exchangerate.host'].get.return_value = make_json_response({
        'rates': {'USD': 0.012, 'EUR': 0.011}
    })
    params = {'amount': '250', 'base': 'INR', 'symbols': 'USD,EUR'}

    first = client.get('/api/currency', params=params).json()
    clock.advance(minutes=1)
    second = client.get('/api/currency', params=params).json()

    assert second['source'] == 'cache'
    assert second['conversions'] == first['conversions']
    assert 'cachedAt' in second
    http_clients['exchangerate.host'].get.assert_called_once()


def test_convert_after_ttl_hits_providers_again(client, http_clients, clock):
    http_clients['exchangerate.host'].get.return_value = make_json_response({'rates': {'USD': 0.012}})
    params = {'symbols': 'USD'}

    client.get('/api/currency', params=params)
    clock.advance(minutes=6)
    response = client.get('/api/currency', params=params)

    assert response.json()['source'] == 'exchangerate.host'
    assert http_clients['exchangerate.host'].get.call_count == 2


def test_convert_falls_back_to_frankfurter(client, http_clients):
    http_clients['exchangerate.host'].get.side_effect = httpx.ReadTimeout('timed out')
    http_clients['frankfurter'].get.return_value = make_json_response({'rates': {'USD': 0.0121}})

    response = client.get('/api/currency', params={'symbols': 'USD'})

    assert response.status_code == 200
    assert response.json()['source'] == 'frankfurter'
    http_clients['open.er-api.com'].get.assert_not_called()


def test_convert_falls_back_to_open_er_api_full_table(client, http_clients):
    http_clients['exchangerate.host'].get.return_value = make_json_response({'success': False})
    http_clients['frankfurter'].get.return_value = make_json_response({'rates': {}})
    http_clients['open.er-api.com'].get.return_value = make_json_response({
        'result': 'success',
        'rates': {'INR': 1, 'USD': 0.012, 'EUR': 0.011, 'JPY': 1.78}
    })

    response = client.get('/api/currency', params={'amount': '10', 'symbols': 'JPY'})

    assert response.status_code == 200
    data = response.json()
    assert data['source'] == 'open.er-api.com'
    assert data['conversions'] == {'JPY': 17.8}


def test_base_never_in_conversions(client, http_clients):
    http_clients['exchangerate.host'].get.return_value = make_json_response({
        'rates': {'INR': 1, 'USD': 0.012}
    })

    response = client.get('/api/currency', params={'base': 'inr', 'symbols': 'inr,usd'})

    assert response.status_code == 200
    assert response.json()['conversions'] == {'USD': 0.012}
    assert http_clients['exchangerate.host'].get.call_args[1]['params']['symbols'] == 'USD'


def test_unknown_symbols_dropped(client, http_clients):
    http_clients['exchangerate.host'].get.return_value = make_json_response({'rates': {'USD': 0.012}})

    response = client.get('/api/currency', params={'symbols': 'XYZ,USD,ABC'})

    assert response.status_code == 200
    assert list(response.json()['conversions']) == ['USD']


def test_only_unknown_symbols_is_400(client, http_clients):
    response = client.get('/api/currency', params={'amount': '100', 'base': 'INR', 'symbols': 'XYZ'})

    assert response.status_code == 400
    assert response.json() == {'error': 'No valid target currencies were provided.'}
    for mock_client in http_clients.values():
        mock_client.get.assert_not_called()


def test_unsupported_base_is_400(client, http_clients):
    response = client.get('/api/currency', params={'base': 'ZZZ', 'symbols': 'USD'})

    assert response.status_code == 400
    assert response.json() == {'error': "Base currency 'ZZZ' not supported."}
    http_clients['exchangerate.host'].get.assert_not_called()


@pytest.mark.parametrize('amount', ['abc', '-1'])
def test_invalid_amount_is_400(client, amount):
    response = client.get('/api/currency', params={'amount': amount})

    assert response.status_code == 400
    assert 'Invalid amount' in response.json()['error']


def test_all_providers_failing_is_502(client, http_clients, rate_cache):
    all_providers_down(http_clients)

    response = client.get('/api/currency', params={'amount': '100', 'symbols': 'USD,EUR'})

    assert response.status_code == 502
    assert response.json() == {'error': 'Bad response from currency provider.'}
    assert len(rate_cache) == 0
    for mock_client in http_clients.values():
        mock_client.get.assert_called_once()


@pytest.fixture
def failing_client():
    failing_cache = AsyncMock()
    failing_cache.get_rates.side_effect = RuntimeError('boom')
    app.dependency_overrides[get_providers] = lambda: []
    app.dependency_overrides[get_rate_cache] = lambda: failing_cache
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def test_unexpected_failure_is_500(failing_client):
    response = failing_client.get('/api/currency')

    assert response.status_code == 500
    assert response.json() == {'error': 'Internal server error.'}
    assert 'boom' not in response.text


def test_convert_very_large_amount(client, http_clients):
    http_clients['exchangerate.host'].get.return_value = make_json_response({
        'rates': {'IDR': 190.5, 'USD': 0.012}
    })

    response = client.get('/api/currency', params={'amount': '1e21', 'base': 'INR', 'symbols': 'IDR,USD'})

    assert response.status_code == 200
    conversions = response.json()['conversions']
    assert conversions['IDR'] == pytest.approx(1.905e23)
    assert conversions['USD'] == pytest.approx(1.2e19)


def test_convert_overflowing_amount_is_400(client, http_clients):
    http_clients['exchangerate.host'].get.return_value = make_json_response({'rates': {'IDR': 16500}})

    response = client.get('/api/currency', params={'amount': '1e305', 'base': 'USD', 'symbols': 'IDR'})

    assert response.status_code == 400
    assert response.json() == {'error': 'Amount is too large to convert.'}


def test_negative_zero_amount_is_zero(client, http_clients):
    http_clients['exchangerate.host'].get.return_value = make_json_response({'rates': {'USD': 0.012}})

    response = client.get('/api/currency', params={'amount': '-0', 'symbols': 'USD'})

    data = response.json()
    assert str(data['amount']) == '0.0'
    assert str(data['conversions']['USD']) == '0.0'


def test_supported_currencies(client):
    response = client.get('/api/currencies')

    assert response.status_code == 200
    currencies = response.json()['currencies']
    assert len(currencies) == 27
    assert 'INR' in currencies
