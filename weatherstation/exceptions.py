"""Error taxonomy for the weather station"""


class WeatherStationError(RuntimeError):
    """Base weather station error."""


class InvalidConfiguration(WeatherStationError, ValueError):
    """Raised when a generator, widget or setting is configured with an unusable value."""


class EmptyHistory(WeatherStationError):
    """Raised when statistics are requested before any reading was recorded."""


class DuplicateListener(WeatherStationError):
    """Raised by a strict station when a listener id is already registered."""

    def __init__(self, listener_id: str):
        super().__init__(f"listener {listener_id!r} is already registered")
        self.listener_id = listener_id


__all__ = ["WeatherStationError", "InvalidConfiguration", "EmptyHistory", "DuplicateListener"]
