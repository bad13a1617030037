"""Console presentation of readings and analysis snapshots."""

import math

from processor.analysis import WindowStats
from processor.conversions import celsius_to_fahrenheit
from producers.schemas import WeatherData


def whole_degrees(value: float) -> str:
    """Round half up, e.g. 16.5 -> 17 and -0.4 -> 0. NaN and infinities print as-is."""
    if not math.isfinite(value):
        return f"{value:.0f}"
    return str(math.floor(value + 0.5))


def trend_label(trend: float) -> str:
    if trend > 0:
        return "↗ Rising"
    if trend < 0:
        return "↘ Falling"
    return "→ Stable"


def format_weather(weather: WeatherData) -> str:
    lines = [
        f"Weather in {weather.city}:",
        f"  Temperature: {weather.temperature}°C "
        f"({celsius_to_fahrenheit(weather.temperature):.1f}°F)",
        f"  Description: {weather.description}",
        f"  Humidity: {weather.humidity}%",
        f"  Pressure: {weather.pressure} hPa",
    ]
    return "\n".join(lines) + "\n"


def format_analysis(stats: WindowStats) -> str:
    lines = [
        "Temperature Analysis:",
        f"  Average: {whole_degrees(stats.average)}°C",
        f"  Range: {whole_degrees(stats.min)}°C - {whole_degrees(stats.max)}°C",
        f"  Trend: {trend_label(stats.trend)}",
        "  Recommendations:",
    ]
    lines.extend(f"    - {rec}" for rec in stats.recommendations)
    return "\n".join(lines) + "\n"


def print_weather(weather: WeatherData):
    print(format_weather(weather))


def print_analysis(stats: WindowStats):
    print(format_analysis(stats))
