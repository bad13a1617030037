"""Canonical weather schemas — single source of truth for data shapes across the pipeline."""

from pydantic import BaseModel, ConfigDict, Field


class City(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float
    longitude: float


class RawWeatherData(BaseModel):
    """One sampled or synthesized observation, before code-to-text mapping."""

    model_config = ConfigDict(frozen=True)

    city: str
    temperature: float = Field(description="Degrees Celsius")
    humidity: float = Field(description="Relative humidity in percent")
    pressure: float = Field(description="Surface pressure in hPa")
    weather_code: int = Field(description="WMO weather interpretation code")


class WeatherData(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    temperature: float
    humidity: float
    pressure: float
    description: str
