"""Weather pipeline — orchestrates ingestion, fan-out, analysis, and console output."""

import asyncio
import random
from contextlib import aclosing
from dataclasses import dataclass
from typing import Callable, Sequence

import httpx

from config import Settings, configure_logging
from processor.analysis import TemperatureAnalyzer, WindowStats
from processor.broadcast import StreamBroadcaster
from processor.display import print_analysis, print_weather
from producers.catalog import get_supported_cities
from producers.schemas import City, WeatherData
from producers.source import OpenMeteoSource, WeatherSource
from producers.weather_producer import WeatherObserver


@dataclass
class PipelineResult:
    readings: int
    analyses: int


class WeatherPipeline:
    """
    Wires together: WeatherSource → WeatherObserver → broadcaster → display
                                                              └→ temperatures → TemperatureAnalyzer → display

    Both consumers run as concurrent tasks over their own copy of the
    reading stream; ``run()`` returns once both have finished.
    """

    def __init__(
        self,
        settings: Settings,
        source: WeatherSource,
        cities: Sequence[City] | None = None,
        on_weather: Callable[[WeatherData], None] = print_weather,
        on_analysis: Callable[[WindowStats], None] = print_analysis,
        rng: random.Random | None = None,
    ):
        self.settings = settings
        self.log = configure_logging("weather-pipeline", settings.log_level)
        self._source = source
        self._cities = list(cities) if cities is not None else get_supported_cities()
        self._observer = WeatherObserver(source, settings, rng=rng)
        self._analyzer = TemperatureAnalyzer(settings)
        self._on_weather = on_weather
        self._on_analysis = on_analysis

    async def run(self) -> PipelineResult:
        self.log.info("pipeline_started", cities=[c.name for c in self._cities])
        broadcaster = StreamBroadcaster(
            self._observer.observe(self._cities), log_level=self.settings.log_level
        )
        weather_feed = broadcaster.subscribe("display")
        analysis_feed = broadcaster.subscribe("analysis")

        tasks = [
            asyncio.ensure_future(broadcaster.run()),
            asyncio.ensure_future(self._consume_weather(weather_feed)),
            asyncio.ensure_future(self._consume_analysis(analysis_feed)),
        ]
        try:
            _, readings, analyses = await asyncio.gather(*tasks)
        except Exception as e:
            self.log.error("pipeline_failed", error_type=type(e).__name__, error=str(e))
            raise
        finally:
            # Cancel whatever is still running.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        self.log.info("pipeline_stopped", readings=readings, analyses=analyses)
        return PipelineResult(readings=readings, analyses=analyses)

    async def _consume_weather(self, feed) -> int:
        count = 0
        async with aclosing(feed) as readings:
            async for weather in readings:
                self._on_weather(weather)
                count += 1
        return count

    async def _consume_analysis(self, feed) -> int:
        count = 0
        async with aclosing(feed) as readings:
            temperatures = (weather.temperature async for weather in readings)
            async with aclosing(self._analyzer.analyze(temperatures)) as analyses:
                async for stats in analyses:
                    self._on_analysis(stats)
                    count += 1
        return count

    async def close(self):
        await self._source.close()


async def run_pipeline(settings: Settings) -> PipelineResult:
    client = httpx.AsyncClient(timeout=settings.request_timeout_sec)
    source = OpenMeteoSource(client, base_url=settings.open_meteo_url)
    pipeline = WeatherPipeline(settings, source)
    try:
        return await pipeline.run()
    finally:
        await pipeline.close()


def main():
    settings = Settings()
    print("=== Weather Calculator Demo ===")
    print()
    print("--- Real-time Weather Data Analysis ---")
    print("Collecting weather data from multiple cities...")
    print()
    asyncio.run(run_pipeline(settings))
    print("Weather data collection complete!")


if __name__ == "__main__":
    main()
