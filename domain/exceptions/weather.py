from domain.exceptions.base import InfoHubError, InvalidRequestError, NotFoundError, UpstreamError


class WeatherException(InfoHubError):
    pass


class InvalidCityError(InvalidRequestError, WeatherException):
    pass


class CityNotFoundError(NotFoundError, WeatherException):
    pass


class WeatherUnavailableError(UpstreamError, WeatherException):
    pass


class WeatherFetchError(WeatherException):
    """Transport or decoding failure while talking to the weather service."""
