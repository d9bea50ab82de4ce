import logging
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from domain.models.currency import ProviderFailureReason, RateFetchResult, RateTable

logger = logging.getLogger(__name__)


class ExchangeRateProvider(ABC):
    """A rate-table source reachable over HTTP.

    Subclasses describe how to build the request and where the rate table
    lives in the response body; transport and decoding failures are turned
    into a failed ``RateFetchResult`` here so callers never see httpx errors.
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None, timeout: float = 8.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def _build_request(self, base: str, targets: tuple[str, ...]) -> tuple[str, dict[str, str]]:
        """Return the URL and query parameters for a latest-rates lookup."""

    def _extract_rates(self, data: Any) -> dict[str, Any] | None:
        """Return the raw rates object, or None when the body is not usable."""
        if not isinstance(data, dict):
            return None
        rates = data.get("rates")
        return rates if isinstance(rates, dict) else None

    async def fetch_rates(self, base: str, targets: tuple[str, ...]) -> RateFetchResult:
        url, params = self._build_request(base, targets)
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return self._failure(
                ProviderFailureReason.TRANSPORT_FAILURE,
                f"HTTP {e.response.status_code}: {e.response.text[:200]}",
            )
        except httpx.HTTPError as e:
            return self._failure(
                ProviderFailureReason.TRANSPORT_FAILURE, f"Request failed: {e.__class__.__name__}"
            )

        try:
            data = response.json()
        except ValueError as e:
            return self._failure(ProviderFailureReason.MALFORMED_RESPONSE, f"Invalid JSON body: {e}")

        raw_rates = self._extract_rates(data)
        if raw_rates is None:
            return self._failure(ProviderFailureReason.MALFORMED_RESPONSE, "Response has no rates table")

        return RateFetchResult.success(self.name, self._coerce_rates(raw_rates))

    def _failure(self, reason: ProviderFailureReason, message: str) -> RateFetchResult:
        return RateFetchResult.failed(self.name, reason, message)

    @staticmethod
    def _coerce_rates(raw_rates: dict[str, Any]) -> RateTable:
        rates: RateTable = {}
        for code, value in raw_rates.items():
            if isinstance(value, bool) or not isinstance(value, (int, float, str)):
                continue
            try:
                rate = Decimal(str(value))
            except InvalidOperation:
                continue
            if rate.is_finite() and rate > 0:
                rates[str(code).upper()] = rate
        return rates

    async def close(self) -> None:
        await self._client.aclose()
