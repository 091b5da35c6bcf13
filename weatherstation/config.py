"""Centralized configuration for the weather station"""
import os
import logging
from typing import Dict, Optional

from weatherstation.exceptions import InvalidConfiguration

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def _get_int(name: str, default: int) -> int:
    """Read an integer environment variable"""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}") from e


# Generator configuration
def get_generator_config() -> Dict[str, Dict[str, int]]:
    """Get base/delta pairs for each synthetic measurement"""
    return {
        'temperature': {
            'base': _get_int('TEMPERATURE_BASE', 10),
            'delta': _get_int('TEMPERATURE_DELTA', 10),
        },
        'humidity': {
            'base': _get_int('HUMIDITY_BASE', 40),
            'delta': _get_int('HUMIDITY_DELTA', 60),
        },
        'pressure': {
            'base': _get_int('PRESSURE_BASE', 700),
            'delta': _get_int('PRESSURE_DELTA', 90),
        },
    }


# Widget configuration
def get_widget_config() -> Dict[str, int]:
    """Get statistics widget and runner settings"""
    return {
        'history_length': _get_int('HISTORY_LENGTH', 10),
        'refresh_cycles': _get_int('REFRESH_CYCLES', 10),
    }


# Monitoring configuration
def get_metrics_port() -> Optional[int]:
    """Get the Prometheus exporter port, None when the exporter is disabled"""
    if not os.environ.get('METRICS_PORT'):
        return None
    return _get_int('METRICS_PORT', 0)


def get_log_level() -> str:
    """Get the configured log level name"""
    level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR'):
        raise InvalidConfiguration(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, got {level!r}")
    return level
