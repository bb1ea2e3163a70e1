"""Centralized logging configuration for wakatime-charts.

Configures structured JSON logging for CI/production runs
and human-readable logging for interactive CLI usage.
"""

import copy
import logging
import logging.config
from typing import Any


# Default logging configuration
LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
        "console": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
        "json_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json",
            "filename": "logs/wakatime_charts.log",
            "maxBytes": 5242880,  # 5MB
            "backupCount": 3,
        },
    },
    "loggers": {
        "wakatime_charts": {
            "level": "DEBUG",
            "handlers": ["console", "json_file"],
            "propagate": False,
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        json_output: If True, use JSON formatter for console output (for CI logs)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    import os

    # Create logs directory if it doesn't exist
    os.makedirs("logs", exist_ok=True)

    config = copy.deepcopy(LOGGING_CONFIG)

    if json_output:
        config["handlers"]["console"]["formatter"] = "json"

    if log_level:
        level = log_level.upper()
        config["handlers"]["console"]["level"] = level
        config["loggers"]["wakatime_charts"]["level"] = level

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Rendering chart", extra={"theme": "dark", "rows": 5})
    """
    return logging.getLogger(name)
