from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    city: str
    country_code: str


@dataclass(frozen=True)
class CurrentConditions:
    temp_c: int | None
    feels_like: int | None
    humidity: float | None
    condition: str
    wmo: int | None


@dataclass(frozen=True)
class TodaySummary:
    tmax: int | None
    tmin: int | None
    pop: float | None
    wmo: int | None


@dataclass(frozen=True)
class WeatherToday:
    location: Location
    current: CurrentConditions
    today: TodaySummary
