"""Maps raw readings into the normalized form consumed downstream."""

from typing import Iterable

from producers.schemas import RawWeatherData, WeatherData

UNKNOWN_DESCRIPTION = "Unknown"

WEATHER_DESCRIPTIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Drizzle",
    53: "Drizzle",
    55: "Drizzle",
    61: "Rain",
    63: "Rain",
    65: "Rain",
    71: "Snow",
    73: "Snow",
    75: "Snow",
    77: "Snow grains",
    80: "Rain showers",
    81: "Rain showers",
    82: "Rain showers",
    85: "Snow showers",
    86: "Snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Thunderstorm",
}


def describe_weather_code(code: int) -> str:
    return WEATHER_DESCRIPTIONS.get(code, UNKNOWN_DESCRIPTION)


def map_reading(raw: RawWeatherData) -> WeatherData:
    return WeatherData(
        city=raw.city,
        temperature=raw.temperature,
        humidity=raw.humidity,
        pressure=raw.pressure,
        description=describe_weather_code(raw.weather_code),
    )


def map_readings(raws: Iterable[RawWeatherData]) -> list[WeatherData]:
    return [map_reading(raw) for raw in raws]
