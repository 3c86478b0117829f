"""Core infrastructure utilities."""

from .config import MapsSettings, get_settings, load_settings
from .logging_config import configure_logging, get_logger

__all__ = [
    "MapsSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "load_settings",
]
