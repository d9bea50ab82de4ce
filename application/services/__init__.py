from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .quote_service import QuoteService
from .rate_service import RateService
from .weather_service import WeatherService

__all__ = ['ConversionService', 'CurrencyService', 'QuoteService', 'RateService', 'WeatherService']
