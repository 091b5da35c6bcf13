import itertools
from unittest.mock import MagicMock

import pytest

from weatherstation.models import WeatherRecord
from weatherstation.observer import Listener
from weatherstation.station import WeatherStation


class RecordingListener(Listener):
    """Listener that keeps every record it receives."""

    def __init__(self, name: str):
        self.name = name
        self.records = []

    @property
    def listener_id(self) -> str:
        return self.name

    def on_update(self, record: WeatherRecord) -> None:
        self.records.append(record)


@pytest.fixture
def mock_collector():
    """Metrics collector stand-in so tests do not touch the global registry."""
    return MagicMock()


@pytest.fixture
def make_station(mock_collector):
    """Build a station fed from fixed sequences."""

    def _make(temperatures=(10,), humidity=50, pressure=750, strict=False):
        return WeatherStation(
            temperature=iter(temperatures),
            humidity=itertools.repeat(humidity),
            pressure=itertools.repeat(pressure),
            strict=strict,
            collector=mock_collector,
        )

    return _make


@pytest.fixture
def recording_listener():
    return RecordingListener
