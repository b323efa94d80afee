import pytest

from weather.config import WeatherContext
from weather.models import FetchFailed

BASE_URL = "https://nws.test"


class StubFetch:
    """Replays canned results per URL and records every URL it was asked for."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    async def __call__(self, url, context):
        self.calls.append(url)
        result = self.responses.get(url)
        if result is None:
            return FetchFailed("no stub for url")
        return result


@pytest.fixture
def context():
    return WeatherContext(base_url=BASE_URL, user_agent="weather-tests/1.0", timeout=1.0)


@pytest.fixture
def stub_fetch():
    return StubFetch()
