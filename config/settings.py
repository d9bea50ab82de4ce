from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Rate cache
	CACHE_BACKEND: Literal['memory', 'redis'] = 'memory'
	REDIS_URL: str = 'redis://localhost:6379'
	RATE_CACHE_TTL_SECONDS: int = 300

	# Currency providers, tried in this order
	EXCHANGERATE_HOST_URL: str = 'https://api.exchangerate.host'
	FRANKFURTER_URL: str = 'https://api.frankfurter.app'
	OPEN_ER_API_URL: str = 'https://open.er-api.com/v6'
	PROVIDER_TIMEOUT_SECONDS: float = 8.0

	DEFAULT_BASE: str = 'INR'
	DEFAULT_SYMBOLS: str = 'USD,EUR'

	# Weather
	GEOCODING_URL: str = 'https://geocoding-api.open-meteo.com/v1/search'
	FORECAST_URL: str = 'https://api.open-meteo.com/v1/forecast'
	WEATHER_TIMEOUT_SECONDS: float = 8.0
	DEFAULT_CITY: str = 'London'

	# Application
	APP_NAME: str = 'InfoHub API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False
	CORS_ORIGINS: list[str] = ['*']
	HOST: str = '0.0.0.0'
	PORT: int = 3001

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
