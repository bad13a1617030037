"""Shared test fixtures."""

import random

import pytest

from config import Settings
from producers.schemas import City, RawWeatherData
from producers.source import FetchError, WeatherSource


class ScriptedSource(WeatherSource):
    """Replays a per-city script: a RawWeatherData is returned, an exception raised."""

    def __init__(self, script: dict):
        self._script = script
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, city: City) -> RawWeatherData:
        self.calls.append(city.name)
        outcome = self._script.get(city.name)
        if outcome is None:
            raise FetchError(city.name, "no scripted reading")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self):
        self.closed = True


@pytest.fixture
def settings():
    """Test settings with no pacing between fetches."""
    return Settings(fetch_interval_ms=0, log_level="WARNING")


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def cities():
    return [
        City(name="London", latitude=51.5074, longitude=-0.1278),
        City(name="Tokyo", latitude=35.6762, longitude=139.6503),
        City(name="Paris", latitude=48.8566, longitude=2.3522),
    ]


@pytest.fixture
def make_raw():
    def _make(city: str, temperature: float = 20.0, weather_code: int = 0) -> RawWeatherData:
        return RawWeatherData(
            city=city,
            temperature=temperature,
            humidity=55.0,
            pressure=1012.0,
            weather_code=weather_code,
        )
    return _make


@pytest.fixture
def scripted_source():
    return ScriptedSource
