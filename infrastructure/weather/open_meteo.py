from typing import Any

import httpx

from domain.exceptions.weather import WeatherFetchError

CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,apparent_temperature,weather_code"
DAILY_FIELDS = "weathercode,temperature_2m_max,temperature_2m_min,precipitation_probability_mean"


class OpenMeteoClient:
    GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
    FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        geocoding_url: str = GEOCODING_URL,
        forecast_url: str = FORECAST_URL,
        timeout: float = 8.0,
    ):
        self.geocoding_url = geocoding_url
        self.forecast_url = forecast_url
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def name(self) -> str:
        return "open-meteo"

    async def _request(self, url: str, params: dict[str, Any]) -> dict:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise WeatherFetchError(
                f"Open-Meteo HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            raise WeatherFetchError(f"Open-Meteo request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            raise WeatherFetchError(f"Open-Meteo response parsing error: {e}") from e

        if not isinstance(data, dict):
            raise WeatherFetchError("Open-Meteo response is not a JSON object")
        return data

    async def geocode(self, city: str) -> dict | None:
        """Return the best match for ``city`` or None when nothing matches."""
        data = await self._request(
            self.geocoding_url,
            {"name": city, "count": 1, "language": "en", "format": "json"},
        )
        results = data.get("results") or []
        if not isinstance(results, list):
            raise WeatherFetchError("Open-Meteo geocoding results are not a list")
        if not results:
            return None

        place = results[0]
        if not isinstance(place, dict) or not all(
            isinstance(place.get(field), (int, float)) for field in ("latitude", "longitude")
        ):
            raise WeatherFetchError("Open-Meteo geocoding result has no coordinates")
        return place

    async def forecast(self, latitude: float, longitude: float) -> dict:
        return await self._request(
            self.forecast_url,
            {
                "latitude": latitude,
                "longitude": longitude,
                "current": CURRENT_FIELDS,
                "daily": DAILY_FIELDS,
                "timezone": "auto",
            },
        )

    async def close(self) -> None:
        await self._client.aclose()
