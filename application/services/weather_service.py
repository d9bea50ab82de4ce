import logging

from domain.exceptions.weather import CityNotFoundError, InvalidCityError, WeatherUnavailableError
from domain.models.weather import CurrentConditions, Location, TodaySummary, WeatherToday
from infrastructure.weather.open_meteo import OpenMeteoClient

logger = logging.getLogger(__name__)

WMO_GROUPS: list[tuple[frozenset[int], str]] = [
    (frozenset({0}), "Clear"),
    (frozenset({1, 2, 3}), "Partly cloudy"),
    (frozenset({45, 48}), "Fog"),
    (frozenset({51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82}), "Rain"),
    (frozenset({71, 73, 75, 77, 85, 86}), "Snow"),
    (frozenset({95, 96, 99}), "Thunderstorm"),
]


def wmo_to_text(code: int | None) -> str:
    for codes, text in WMO_GROUPS:
        if code in codes:
            return text
    return "Clouds"


def _round(value) -> int | None:
    if value is None:
        return None
    return int(round(value))


def _first(series) -> float | int | None:
    if isinstance(series, list) and series:
        return series[0]
    return None


class WeatherService:
    def __init__(self, client: OpenMeteoClient, default_city: str = "London"):
        self.client = client
        self.default_city = default_city

    async def today(self, city_raw: str | None) -> WeatherToday:
        city = (self.default_city if city_raw is None else city_raw).strip()
        if not city:
            raise InvalidCityError("City is required.")

        place = await self.client.geocode(city)
        if not place:
            raise CityNotFoundError("City not found.")

        forecast = await self.client.forecast(place["latitude"], place["longitude"])
        current = forecast.get("current")
        daily = forecast.get("daily")
        if not current or not daily:
            logger.warning(f"Forecast for {city} is missing current or daily data")
            raise WeatherUnavailableError("Could not fetch today weather.")

        code = current.get("weather_code")
        return WeatherToday(
            location=Location(
                city=place.get("name", city),
                country_code=(place.get("country_code") or "").upper(),
            ),
            current=CurrentConditions(
                temp_c=_round(current.get("temperature_2m")),
                feels_like=_round(current.get("apparent_temperature")),
                humidity=current.get("relative_humidity_2m"),
                condition=wmo_to_text(code),
                wmo=code,
            ),
            today=TodaySummary(
                tmax=_round(_first(daily.get("temperature_2m_max"))),
                tmin=_round(_first(daily.get("temperature_2m_min"))),
                pop=_first(daily.get("precipitation_probability_mean")),
                wmo=_first(daily.get("weathercode")),
            ),
        )
