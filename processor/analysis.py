"""Rolling temperature analysis over an ever-growing window of samples."""

from dataclasses import dataclass
from typing import AsyncIterable, AsyncIterator, Sequence

from config import Settings


@dataclass(frozen=True)
class WindowStats:
    average: float
    min: float
    max: float
    trend: float  # > 0 rising, < 0 falling
    recommendations: tuple[str, ...]


def calculate_average(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def calculate_trend(values: Sequence[float]) -> float:
    """
    Mean of the second half minus mean of the first half.

    The first half holds ``len // 2`` values, so with an odd count the
    middle value belongs to the second half.
    """
    if len(values) < 2:
        return 0.0
    half = len(values) // 2
    return calculate_average(values[half:]) - calculate_average(values[:half])


class TemperatureAnalyzer:
    """
    Emits a WindowStats snapshot for every sample once ``min_samples`` are seen.

    average/min/max cover every sample so far; ``trend`` covers the last
    ``trend_window`` samples and the trend advice the last
    ``recommendation_trend_window`` samples.
    """

    COLD = "It's cold! Wear warm clothes."
    COOL = "Cool weather. Bring a jacket."
    PLEASANT = "Nice temperature. Perfect for outdoor activities!"
    HOT = "It's hot! Stay hydrated and wear light clothes."
    RISING = "Temperature is rising."
    FALLING = "Temperature is dropping."
    STABLE = "Temperature is stable."

    def __init__(self, settings: Settings | None = None):
        settings = settings or Settings()
        self.min_samples = settings.analysis_min_samples
        self.trend_window = settings.trend_window_size
        self.recommendation_trend_window = settings.recommendation_trend_window
        self.trend_threshold = settings.trend_threshold

    async def analyze(self, temperatures: AsyncIterable[float]) -> AsyncIterator[WindowStats]:
        history: list[float] = []
        async for value in temperatures:
            history.append(value)
            if len(history) >= self.min_samples:
                yield self.compute(history)

    def compute(self, history: Sequence[float]) -> WindowStats:
        return WindowStats(
            average=calculate_average(history),
            min=min(history),
            max=max(history),
            trend=calculate_trend(history[-self.trend_window:]),
            recommendations=self.recommend(history),
        )

    def recommend(self, history: Sequence[float]) -> tuple[str, ...]:
        avg = calculate_average(history)
        if avg < 10.0:
            comfort = self.COLD
        elif avg < 20.0:
            comfort = self.COOL
        elif avg < 30.0:
            comfort = self.PLEASANT
        else:
            comfort = self.HOT

        # Recomputed over a shorter tail than WindowStats.trend
        trend = calculate_trend(history[-self.recommendation_trend_window:])
        if trend > self.trend_threshold:
            direction = self.RISING
        elif trend < -self.trend_threshold:
            direction = self.FALLING
        else:
            direction = self.STABLE

        return (comfort, direction)
