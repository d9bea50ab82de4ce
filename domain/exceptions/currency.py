from domain.exceptions.base import InfoHubError, InvalidRequestError, UpstreamError


class CurrencyException(InfoHubError):
    pass


class InvalidAmountError(InvalidRequestError, CurrencyException):
    pass


class UnsupportedBaseError(InvalidRequestError, CurrencyException):
    pass


class NoValidTargetsError(InvalidRequestError, CurrencyException):
    pass


class AllProvidersExhaustedError(UpstreamError, CurrencyException):
    pass


class CacheError(CurrencyException):
    pass
