import httpx

from infrastructure.providers.base import ExchangeRateProvider


class ExchangeRateHostProvider(ExchangeRateProvider):
    BASE_URL = "https://api.exchangerate.host"

    def __init__(self, base_url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 8.0):
        super().__init__(base_url, client=client, timeout=timeout)

    @property
    def name(self) -> str:
        return "exchangerate.host"

    def _build_request(self, base: str, targets: tuple[str, ...]) -> tuple[str, dict[str, str]]:
        return f"{self.base_url}/latest", {"base": base, "symbols": ",".join(targets)}
