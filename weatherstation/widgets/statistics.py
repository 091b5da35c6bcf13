"""Widget showing rolling min/max/average statistics"""
import logging
from collections import deque
from typing import Deque, Dict, Iterable, List

from weatherstation.exceptions import EmptyHistory, InvalidConfiguration
from weatherstation.models import Measurement, Statistic, WeatherRecord
from weatherstation.observer import DisplayWidget, Listener

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LENGTH = 10

LABELS = {
    Measurement.TEMPERATURE: "Temperature",
    Measurement.HUMIDITY: "Humidity",
    Measurement.PRESSURE: "Pressure",
}


def summarize(values: Iterable[int]) -> Statistic:
    """Compute min, max and sum over the values in a single pass"""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptyHistory("cannot compute statistics over an empty history") from None

    minimum = maximum = total = first
    count = 1
    for value in iterator:
        if value < minimum:
            minimum = value
        if value > maximum:
            maximum = value
        total += value
        count += 1
    return Statistic(minimum=minimum, maximum=maximum, total=total, count=count)


class StatisticsView(Listener, DisplayWidget):
    """Keeps a bounded history per measurement and prints its statistics"""

    def __init__(self, name: str, history_length: int = DEFAULT_HISTORY_LENGTH):
        """
        Initialize a statistics view

        Args:
            name: Id the view registers under and the title it prints
            history_length: Number of most recent readings kept per measurement
        """
        if isinstance(history_length, bool) or not isinstance(history_length, int) or history_length < 1:
            raise InvalidConfiguration(f"history_length must be a positive integer, got {history_length!r}")
        self.name = name
        self.history_length = history_length
        self._histories: Dict[Measurement, Deque[int]] = {
            measurement: deque() for measurement in Measurement
        }

    @property
    def listener_id(self) -> str:
        return self.name

    def on_update(self, record: WeatherRecord) -> None:
        for measurement, history in self._histories.items():
            history.append(record.value(measurement))
        self._strip_histories()
        self.display()

    def _strip_histories(self) -> None:
        # Each history is trimmed on its own; they only stay aligned because on_update feeds all three.
        for history in self._histories.values():
            while len(history) > self.history_length:
                history.popleft()

    def history(self, measurement: Measurement) -> List[int]:
        """Retained values for one measurement, oldest first"""
        return list(self._histories[Measurement(measurement)])

    def statistics(self) -> Dict[Measurement, Statistic]:
        return {measurement: summarize(history) for measurement, history in self._histories.items()}

    def render(self) -> str:
        lines = [self.name]
        for measurement, stat in self.statistics().items():
            lines.append(
                f"\t{LABELS[measurement]} (min/max/avg)\t: "
                f"{stat.minimum} / {stat.maximum} / {stat.average:.2f}"
            )
        return "\n".join(lines)
