from .base import ExchangeRateProvider
from .exchangerate_host import ExchangeRateHostProvider
from .frankfurter import FrankfurterProvider
from .open_er_api import OpenERAPIProvider

__all__ = ['ExchangeRateProvider', 'ExchangeRateHostProvider', 'FrankfurterProvider', 'OpenERAPIProvider']
