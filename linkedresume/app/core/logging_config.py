"""
Logging configuration for the application.

setup_logging() configures the root handler and the package logger level;
uvicorn_log_config() routes the server's own loggers through the same format
so access lines and scraper lines read alike.
"""
import logging
import sys

from linkedresume.app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "linkedresume"


def _level(level: str | None) -> int:
    return getattr(logging, (level or settings.log_level).upper(), logging.INFO)


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure application logging. Returns the package logger."""
    level_val = _level(level)
    logging.basicConfig(
        level=level_val,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level_val)
    return logger


def uvicorn_log_config(level: str | None = None) -> dict:
    """dictConfig for uvicorn.run(log_config=...), using the application format."""
    level_name = logging.getLevelName(_level(level))
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level_name, "propagate": False},
            "uvicorn.error": {"level": level_name},
            "uvicorn.access": {"handlers": ["default"], "level": level_name, "propagate": False},
        },
    }


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
