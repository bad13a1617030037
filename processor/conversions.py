"""Temperature unit conversions."""

from typing import AsyncIterable, AsyncIterator


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32.0) * 5.0 / 9.0


def temperature_difference(base: float, current: float) -> float:
    return current - base


async def observe_fahrenheit(celsius: AsyncIterable[float]) -> AsyncIterator[float]:
    async for value in celsius:
        yield celsius_to_fahrenheit(value)
