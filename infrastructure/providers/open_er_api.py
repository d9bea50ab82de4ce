from typing import Any

import httpx

from infrastructure.providers.base import ExchangeRateProvider


class OpenERAPIProvider(ExchangeRateProvider):
    """open.er-api.com returns the full table for the base; targets are not sent."""

    BASE_URL = "https://open.er-api.com/v6"

    def __init__(self, base_url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 8.0):
        super().__init__(base_url, client=client, timeout=timeout)

    @property
    def name(self) -> str:
        return "open.er-api.com"

    def _build_request(self, base: str, targets: tuple[str, ...]) -> tuple[str, dict[str, str]]:
        return f"{self.base_url}/latest/{base}", {}

    def _extract_rates(self, data: Any) -> dict[str, Any] | None:
        if not isinstance(data, dict) or data.get("result") != "success":
            return None
        return super()._extract_rates(data)
