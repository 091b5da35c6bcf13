"""Weather station subject: draws synthetic readings and pushes them to listeners"""
import logging
from typing import Dict, Iterator, Optional, Tuple

from weatherstation.data_sources.random_range import RandomRangeGenerator
from weatherstation.exceptions import DuplicateListener
from weatherstation.models import WeatherRecord
from weatherstation.monitoring.metrics import MetricsCollector, get_collector
from weatherstation.observer import Listener, Subject

logger = logging.getLogger(__name__)

# Default (base, delta) ranges for the synthetic sensors
DEFAULT_RANGES = {
    'temperature': (10, 10),
    'humidity': (40, 60),
    'pressure': (700, 90),
}


class WeatherStation(Subject):
    """Holds the latest weather record and notifies registered listeners"""

    def __init__(
        self,
        temperature: Optional[Iterator[int]] = None,
        humidity: Optional[Iterator[int]] = None,
        pressure: Optional[Iterator[int]] = None,
        strict: bool = False,
        collector: Optional[MetricsCollector] = None,
    ):
        """
        Initialize a weather station

        Args:
            temperature: Source of temperature values, a random range generator by default
            humidity: Source of humidity values, a random range generator by default
            pressure: Source of pressure values, a random range generator by default
            strict: Reject a listener whose id is already registered instead of replacing it
            collector: Metrics collector, the shared one if omitted
        """
        self._temperature = temperature if temperature is not None else RandomRangeGenerator(*DEFAULT_RANGES['temperature'])
        self._humidity = humidity if humidity is not None else RandomRangeGenerator(*DEFAULT_RANGES['humidity'])
        self._pressure = pressure if pressure is not None else RandomRangeGenerator(*DEFAULT_RANGES['pressure'])
        self._observers: Dict[str, Listener] = {}
        self.strict = strict
        self.latest: Optional[WeatherRecord] = None
        self.metrics = collector or get_collector()
        logger.info(f"Weather station initialized (strict={strict})")

    @classmethod
    def from_config(cls, generator_config: Dict[str, Dict[str, int]], **kwargs) -> "WeatherStation":
        """Build a station whose generators use the given base/delta settings"""
        return cls(
            temperature=RandomRangeGenerator(**generator_config['temperature']),
            humidity=RandomRangeGenerator(**generator_config['humidity']),
            pressure=RandomRangeGenerator(**generator_config['pressure']),
            **kwargs,
        )

    @property
    def listener_ids(self) -> Tuple[str, ...]:
        return tuple(self._observers)

    def register(self, listener: Listener) -> str:
        listener_id = listener.listener_id
        if listener_id in self._observers:
            if self.strict:
                raise DuplicateListener(listener_id)
            logger.warning(f"Listener {listener_id!r} is already registered, replacing it")
        self._observers[listener_id] = listener
        self.metrics.track_listeners(len(self._observers))
        logger.debug(f"Registered listener {listener_id!r}")
        return listener_id

    def remove(self, listener_id: str) -> None:
        if self._observers.pop(listener_id, None) is None:
            logger.debug(f"Listener {listener_id!r} is not registered, nothing to remove")
            return
        self.metrics.track_listeners(len(self._observers))
        logger.debug(f"Removed listener {listener_id!r}")

    def notify(self, record: WeatherRecord) -> None:
        """Deliver a copy of the record to every registered listener.

        A listener that raises aborts the pass; the error propagates to the caller.
        """
        for listener_id, listener in list(self._observers.items()):
            try:
                listener.on_update(record.model_copy())
            except Exception:
                logger.error(f"Listener {listener_id!r} failed to process {record}", exc_info=True)
                self.metrics.track_notification(listener_id, status="error")
                raise
            self.metrics.track_notification(listener_id)

    def refresh(self) -> WeatherRecord:
        """Draw one new reading from each sensor and notify listeners"""
        record = WeatherRecord(
            temperature=next(self._temperature),
            humidity=next(self._humidity),
            pressure=next(self._pressure),
        )
        self.latest = record
        self.metrics.track_refresh(record)
        logger.debug(f"Measurements changed: {record}")
        self.notify(record)
        return record
