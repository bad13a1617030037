"""Weather sources: the capability the ingestion stream fetches readings through."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable

import httpx
from pydantic import BaseModel, ValidationError

from producers.schemas import City, RawWeatherData


class FetchError(Exception):
    """A source could not produce a reading for ``city``."""

    def __init__(self, city: str, message: str):
        super().__init__(f"{city}: {message}")
        self.city = city


class WeatherSource(ABC):
    @abstractmethod
    async def fetch(self, city: City) -> RawWeatherData:
        """Return the current reading for ``city`` or raise FetchError."""

    async def close(self):
        """Release any transport held by the source."""


class CurrentWeather(BaseModel):
    temperature: float
    windspeed: float
    weathercode: int
    time: str


class HourlyData(BaseModel):
    time: list[str]
    relativehumidity_2m: list[float]
    surface_pressure: list[float]


class OpenMeteoResponse(BaseModel):
    current_weather: CurrentWeather
    hourly: HourlyData


class OpenMeteoSource(WeatherSource):
    """
    Open-Meteo forecast API source.

    Temperature and weather code come from ``current_weather``; humidity and
    pressure are read from the hourly series at the current local hour.
    The HTTP client is injected and owned by the caller until ``close()``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "https://api.open-meteo.com/v1/forecast",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._client = client
        self._base_url = base_url
        self._clock = clock

    async def fetch(self, city: City) -> RawWeatherData:
        params = {
            "latitude": city.latitude,
            "longitude": city.longitude,
            "current_weather": "true",
            "hourly": "relativehumidity_2m,surface_pressure",
            "timezone": "auto",
        }
        try:
            resp = await self._client.get(self._base_url, params=params)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(city.name, "request timed out") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(city.name, f"HTTP status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(city.name, f"network error: {e}") from e

        try:
            payload = OpenMeteoResponse.model_validate_json(resp.content)
        except ValidationError as e:
            raise FetchError(city.name, f"malformed response: {e.error_count()} error(s)") from e

        hour = self._clock().hour
        try:
            humidity = payload.hourly.relativehumidity_2m[hour]
            pressure = payload.hourly.surface_pressure[hour]
        except IndexError as e:
            raise FetchError(city.name, f"hourly series has no entry for hour {hour}") from e

        return RawWeatherData(
            city=city.name,
            temperature=payload.current_weather.temperature,
            humidity=humidity,
            pressure=pressure,
            weather_code=payload.current_weather.weathercode,
        )

    async def close(self):
        await self._client.aclose()
