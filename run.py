#!/usr/bin/env python3
"""Main entry point for the weather station demo"""
import sys
import argparse
import logging
from typing import List, Optional

from weatherstation.config import get_generator_config, get_widget_config, get_metrics_port, get_log_level
from weatherstation.exceptions import InvalidConfiguration
from weatherstation.monitoring.metrics import start_metrics_server
from weatherstation.station import WeatherStation
from weatherstation.widgets.current import CurrentReadingView
from weatherstation.widgets.statistics import StatisticsView

logger = logging.getLogger(__name__)


def build_station(history_length: int, strict: bool = False) -> WeatherStation:
    """Create a station with the current-reading and statistics widgets registered"""
    station = WeatherStation.from_config(get_generator_config(), strict=strict)
    registered = []
    registered.append(station.register(CurrentReadingView("Current Widget")))
    registered.append(station.register(StatisticsView("Statistic Widget", history_length=history_length)))
    logger.info(f"Registered listeners: {', '.join(registered)}")
    return station


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for running the weather station"""
    parser = argparse.ArgumentParser(description='Run the observer-pattern weather station demo')
    parser.add_argument('--cycles', type=int, default=None, help='Number of refresh cycles to run')
    parser.add_argument('--history-length', type=int, default=None,
                        help='Readings kept by the statistics widget')
    parser.add_argument('--strict', action='store_true', help='Reject listeners registered under an existing id')
    parser.add_argument('--metrics-port', type=int, default=None, help='Expose Prometheus metrics on this port')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], default=None,
                       help='Set the logging level')

    args = parser.parse_args(argv)

    try:
        # Configure logging level
        logging.getLogger().setLevel(getattr(logging, args.log_level or get_log_level()))

        widget_config = get_widget_config()
        cycles = args.cycles if args.cycles is not None else widget_config['refresh_cycles']
        history_length = args.history_length if args.history_length is not None else widget_config['history_length']
        if cycles < 0:
            raise InvalidConfiguration(f"cycles must not be negative, got {cycles}")

        metrics_port = args.metrics_port if args.metrics_port is not None else get_metrics_port()
        if metrics_port is not None:
            start_metrics_server(metrics_port)

        station = build_station(history_length, strict=args.strict)
    except InvalidConfiguration as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logger.info(f"Running {cycles} refresh cycle(s)")
    for _ in range(cycles):
        station.refresh()

    return 0


if __name__ == "__main__":
    sys.exit(main())
