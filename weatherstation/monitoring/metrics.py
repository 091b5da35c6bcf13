"""Metrics collection for the weather station"""
import logging
from typing import Optional

from prometheus_client import start_http_server, Counter, Gauge

from weatherstation.models import WeatherRecord, Measurement

logger = logging.getLogger(__name__)

# Create Prometheus metrics
REFRESHES_TOTAL = Counter(
    'weatherstation_refreshes_total',
    'Total number of measurement refreshes'
)

NOTIFICATIONS_TOTAL = Counter(
    'weatherstation_notifications_total',
    'Total number of records delivered to listeners',
    ['listener_id', 'status']
)

READING_VALUE = Gauge(
    'weatherstation_reading_value',
    'Latest synthetic reading',
    ['measurement']
)

LISTENERS_REGISTERED = Gauge(
    'weatherstation_listeners_registered',
    'Number of listeners currently registered with the station'
)


class MetricsCollector:
    """Records station activity in Prometheus metrics"""

    def __init__(self):
        self.server_port: Optional[int] = None

    def track_refresh(self, record: WeatherRecord) -> None:
        """Track a refresh and the readings it produced"""
        REFRESHES_TOTAL.inc()
        for measurement in Measurement:
            READING_VALUE.labels(measurement=measurement.value).set(record.value(measurement))

    def track_notification(self, listener_id: str, status: str = "success") -> None:
        """Track delivery of a record to one listener"""
        NOTIFICATIONS_TOTAL.labels(listener_id=listener_id, status=status).inc()

    def track_listeners(self, count: int) -> None:
        LISTENERS_REGISTERED.set(count)

    def start_server(self, port: int) -> None:
        """Expose the metrics over HTTP"""
        if self.server_port is not None:
            logger.warning(f"Metrics server is already running on port {self.server_port}")
            return
        start_http_server(port)
        self.server_port = port
        logger.info(f"Prometheus metrics server started on port {port}")


# Singleton instance
_collector_instance = None


def get_collector() -> MetricsCollector:
    """Get or create the metrics collector instance"""
    global _collector_instance
    if _collector_instance is None:
        _collector_instance = MetricsCollector()
    return _collector_instance


def start_metrics_server(port: int) -> MetricsCollector:
    """Start the Prometheus exporter and return the shared collector"""
    collector = get_collector()
    try:
        collector.start_server(port)
    except OSError as e:
        logger.error(f"Failed to start metrics server on port {port}: {e}")
        raise
    return collector
