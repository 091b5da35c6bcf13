"""Value types shared by the station and its widgets"""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Measurement(str, Enum):
    """Measurement kinds, in the order the station draws them"""
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    PRESSURE = "pressure"


class WeatherRecord(BaseModel):
    """One temperature, humidity and pressure reading.

    A record built without arguments is the zero placeholder used before any
    reading has arrived.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    temperature: int = 0
    humidity: int = 0
    pressure: int = 0

    def value(self, measurement: Measurement) -> int:
        return getattr(self, Measurement(measurement).value)


class Statistic(BaseModel):
    """Min, max and sum over a window of readings"""
    model_config = ConfigDict(frozen=True)

    minimum: int
    maximum: int
    total: int
    count: int

    @property
    def average(self) -> float:
        return float(self.total) / float(self.count)


__all__ = ["Measurement", "WeatherRecord", "Statistic"]
