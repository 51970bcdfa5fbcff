"""Configuration for neo-organizations."""

from .settings import Settings, get_settings
from .logging_config import LoggingConfig, LogFormat, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "setup_logging",
]
