from unittest.mock import AsyncMock

import httpx
import pytest

from tests.helpers import FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mock_client():
    return AsyncMock(spec=httpx.AsyncClient)
