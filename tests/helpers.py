from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import httpx


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 11, 5, 10, 30, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def make_json_response(data) -> Mock:
    response = Mock()
    response.json.return_value = data
    response.raise_for_status = Mock()
    return response


def make_http_status_error(status_code: int, text: str = "error") -> httpx.HTTPStatusError:
    error_response = Mock()
    error_response.status_code = status_code
    error_response.text = text
    return httpx.HTTPStatusError("HTTP error", request=Mock(), response=error_response)
