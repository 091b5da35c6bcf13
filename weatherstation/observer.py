"""Subject and listener interfaces for the observer pattern"""
from abc import ABC, abstractmethod

from weatherstation.models import WeatherRecord


class Listener(ABC):
    """Receives weather records pushed by a subject"""

    @property
    @abstractmethod
    def listener_id(self) -> str:
        """Self-declared id the subject registers this listener under"""

    @abstractmethod
    def on_update(self, record: WeatherRecord) -> None:
        """Called synchronously by the subject for every new record"""


class Subject(ABC):
    """Keeps a set of listeners and pushes records to them"""

    @abstractmethod
    def register(self, listener: Listener) -> str:
        ...

    @abstractmethod
    def remove(self, listener_id: str) -> None:
        ...

    @abstractmethod
    def notify(self, record: WeatherRecord) -> None:
        ...


class DisplayWidget(ABC):
    """A listener that can render its state to the console"""

    @abstractmethod
    def render(self) -> str:
        ...

    def display(self) -> None:
        print(self.render())


__all__ = ["Listener", "Subject", "DisplayWidget"]
