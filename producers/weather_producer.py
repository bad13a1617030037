"""Weather observation producer with paced per-city fetches and synthetic fallback."""

import asyncio
import random
from typing import AsyncIterator, Sequence

from config import Settings, configure_logging
from producers.fallback import generate_fallback
from producers.mapper import map_reading
from producers.schemas import City, WeatherData
from producers.source import WeatherSource


class WeatherObserver:
    """
    Streams one normalized reading per city, in catalog order.

    A failed fetch never ends the stream: the failure is logged and a
    fallback reading for that city is emitted in its place. Fetches are
    spaced by ``fetch_interval_ms``; no pause follows the last city.
    """

    def __init__(
        self,
        source: WeatherSource,
        settings: Settings,
        rng: random.Random | None = None,
    ):
        self._source = source
        self._interval = settings.fetch_interval_ms / 1000.0
        self._rng = rng or random.Random()
        self.log = configure_logging("weather-observer", settings.log_level)

    async def observe(self, cities: Sequence[City]) -> AsyncIterator[WeatherData]:
        cities = list(cities)
        fallbacks = 0
        self.log.info("observation_started", cities=len(cities))

        for index, city in enumerate(cities):
            try:
                raw = await self._source.fetch(city)
            except Exception as e:
                fallbacks += 1
                self.log.warning(
                    "weather_fetch_failed",
                    city=city.name,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                raw = generate_fallback(city.name, self._rng)
                self.log.info(
                    "fallback_generated",
                    city=city.name,
                    temperature=raw.temperature,
                    weather_code=raw.weather_code,
                )

            yield map_reading(raw)

            if index < len(cities) - 1:
                await asyncio.sleep(self._interval)

        self.log.info("observation_complete", emitted=len(cities), fallbacks=fallbacks)
