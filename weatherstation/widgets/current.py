"""Widget showing the most recent weather record"""
import logging

from weatherstation.models import WeatherRecord
from weatherstation.observer import DisplayWidget, Listener

logger = logging.getLogger(__name__)


class CurrentReadingView(Listener, DisplayWidget):
    """Stores the latest record and prints it on every update"""

    def __init__(self, name: str):
        self.name = name
        self.current = WeatherRecord()

    @property
    def listener_id(self) -> str:
        return self.name

    def on_update(self, record: WeatherRecord) -> None:
        self.current = record.model_copy()
        self.display()

    def render(self) -> str:
        return "\n".join([
            self.name,
            f"\tTemperature\t: {self.current.temperature}",
            f"\tHumidity\t: {self.current.humidity}",
            f"\tPressure\t: {self.current.pressure}",
        ])
