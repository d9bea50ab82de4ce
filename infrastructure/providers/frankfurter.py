import httpx

from infrastructure.providers.base import ExchangeRateProvider


class FrankfurterProvider(ExchangeRateProvider):
    BASE_URL = "https://api.frankfurter.app"

    def __init__(self, base_url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 8.0):
        super().__init__(base_url, client=client, timeout=timeout)

    @property
    def name(self) -> str:
        return "frankfurter"

    def _build_request(self, base: str, targets: tuple[str, ...]) -> tuple[str, dict[str, str]]:
        # Same semantics as exchangerate.host, different parameter names
        return f"{self.base_url}/latest", {"from": base, "to": ",".join(targets)}
