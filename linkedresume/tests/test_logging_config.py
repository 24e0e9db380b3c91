"""Tests for logging setup and the uvicorn log config"""
import logging
import logging.config

from linkedresume.app.core.logging_config import (
    LOG_FORMAT,
    get_logger,
    setup_logging,
    uvicorn_log_config,
)


def test_get_logger_is_namespaced():
    assert get_logger("services.document_fetcher").name == "linkedresume.services.document_fetcher"


def test_setup_logging_sets_package_level():
    """Package logger follows the requested level, independent of the root default."""
    logger = setup_logging("debug")
    try:
        assert logger.name == "linkedresume"
        assert logger.level == logging.DEBUG
        assert get_logger("api.resume").isEnabledFor(logging.DEBUG)
    finally:
        logger.setLevel(logging.NOTSET)


def test_uvicorn_log_config_uses_app_format():
    """uvicorn loggers get the application format and the configured level."""
    cfg = uvicorn_log_config("warning")
    assert cfg["formatters"]["default"]["format"] == LOG_FORMAT
    assert cfg["loggers"]["uvicorn.access"]["level"] == "WARNING"
    assert cfg["loggers"]["uvicorn"]["handlers"] == ["default"]
    assert cfg["disable_existing_loggers"] is False


def test_uvicorn_log_config_is_valid_dictconfig():
    logging.config.dictConfig(uvicorn_log_config("info"))
    assert logging.getLogger("uvicorn.access").level == logging.INFO
    assert logging.getLogger("uvicorn.access").propagate is False
