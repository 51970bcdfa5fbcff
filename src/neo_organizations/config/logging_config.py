"""Centralized logging configuration for neo-organizations.

Configures the standard library logging tree once at startup. Modules log
through ``logging.getLogger(__name__)``.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import Settings, get_settings


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMATS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Noisy third-party loggers kept at WARNING unless running at DEBUG
    QUIET_MODULES = [
        "asyncpg",
        "uvicorn.access",
    ]

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]

    @classmethod
    def build_config(cls, settings: Settings) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping from settings."""
        level = settings.log_level
        try:
            format_string = FORMATS[LogFormat(settings.log_format.lower())]
        except ValueError:
            format_string = FORMATS[LogFormat.SIMPLE]

        config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        for module in cls.QUIET_MODULES:
            config["loggers"][module] = {
                "level": "WARNING" if level != "DEBUG" else "DEBUG",
                "handlers": ["console"],
                "propagate": False,
            }

        for module in cls.ERROR_ONLY_MODULES:
            config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return config

    @classmethod
    def configure(cls, settings: Optional[Settings] = None) -> None:
        """Configure logging from settings (defaults to the cached settings)."""
        settings = settings or get_settings()
        logging.config.dictConfig(cls.build_config(settings))

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={settings.log_level}, format={settings.log_format}")


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Setup logging configuration.

    This is the main entry point for configuring logging in the application.
    It should be called once at application startup.
    """
    LoggingConfig.configure(settings)
