from .requests import ConversionQuery
from .responses import (
	ConversionResponse,
	ErrorResponse,
	QuoteResponse,
	SupportedCurrenciesResponse,
	WeatherTodayResponse,
)

__all__ = [
	'ConversionQuery',
	'ConversionResponse',
	'ErrorResponse',
	'QuoteResponse',
	'SupportedCurrenciesResponse',
	'WeatherTodayResponse',
]
