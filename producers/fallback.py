"""Synthetic readings substituted when the real weather source is unavailable."""

import random

from producers.schemas import RawWeatherData

BASE_TEMPERATURES = {
    "London": 15.0,
    "New York": 20.0,
    "Tokyo": 25.0,
    "Paris": 18.0,
    "Sydney": 22.0,
}
DEFAULT_BASE_TEMPERATURE = 20.0

# Inclusive integer ranges
TEMPERATURE_VARIATION = (-5, 5)
HUMIDITY_RANGE = (40, 80)
PRESSURE_RANGE = (1000, 1030)
WEATHER_CODE_RANGE = (0, 3)  # clear sky .. overcast


def generate_fallback(city_name: str, rng: random.Random | None = None) -> RawWeatherData:
    """Build a plausible reading for ``city_name``.

    Pass a seeded ``random.Random`` for reproducible output.
    """
    rng = rng or random.Random()
    base = BASE_TEMPERATURES.get(city_name, DEFAULT_BASE_TEMPERATURE)
    return RawWeatherData(
        city=city_name,
        temperature=base + rng.randint(*TEMPERATURE_VARIATION),
        humidity=float(rng.randint(*HUMIDITY_RANGE)),
        pressure=float(rng.randint(*PRESSURE_RANGE)),
        weather_code=rng.randint(*WEATHER_CODE_RANGE),
    )
