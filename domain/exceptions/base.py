class InfoHubError(Exception):
    pass


class InvalidRequestError(InfoHubError):
    """Client input that is rejected before any upstream call."""


class NotFoundError(InfoHubError):
    pass


class UpstreamError(InfoHubError):
    """An upstream data source could not produce a usable answer."""
