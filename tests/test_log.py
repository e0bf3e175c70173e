"""
Tests for the logging setup.
"""

import logging
from unittest.mock import patch

import pytest

from chargex.config import Config, LoggingConfig
from chargex.log import DATE_FORMAT, LOG_FORMAT, configure_logging, get_logger, resolve_level


@pytest.mark.parametrize(
    "name,expected",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), ("Warning", logging.WARNING)],
)
def test_resolve_level(name, expected):
    """Test level names are case-insensitive."""
    assert resolve_level(name) == expected


def test_resolve_level_invalid():
    """Test an unknown level name."""
    with pytest.raises(ValueError) as excinfo:
        resolve_level("LOUD")

    assert "Invalid log level: LOUD" in str(excinfo.value)


def test_get_logger():
    """Test module loggers."""
    logger = get_logger("chargex.statutes")
    assert logger.name == "chargex.statutes"


@patch("chargex.log.logging.basicConfig")
def test_configure_logging_from_config(mock_basicConfig):
    """Test the configured level is used."""
    configure_logging(Config(logging=LoggingConfig(level="ERROR")))

    mock_basicConfig.assert_called_once_with(level=logging.ERROR, format=LOG_FORMAT, datefmt=DATE_FORMAT)


@patch("chargex.log.logging.basicConfig")
def test_configure_logging_without_config(mock_basicConfig):
    """Test INFO is used without configuration."""
    configure_logging()

    assert mock_basicConfig.call_args[1]["level"] == logging.INFO


@patch("chargex.log.logging.basicConfig")
def test_configure_logging_level_override(mock_basicConfig):
    """Test an explicit level wins over the configured one."""
    configure_logging(Config(logging=LoggingConfig(level="ERROR")), "DEBUG")

    assert mock_basicConfig.call_args[1]["level"] == logging.DEBUG


@patch("chargex.log.logging.basicConfig")
def test_configure_logging_quiets_driver(mock_basicConfig):
    """Test the MongoDB driver stays at WARNING in debug mode."""
    configure_logging(level="DEBUG")
    assert logging.getLogger("pymongo").level == logging.WARNING

    configure_logging(level="ERROR")
    assert logging.getLogger("pymongo").level == logging.ERROR


@patch("chargex.log.logging.basicConfig")
def test_configure_logging_invalid_level(mock_basicConfig):
    """Test an invalid configured level."""
    with pytest.raises(ValueError):
        configure_logging(Config(logging=LoggingConfig(level="INVALID")))

    mock_basicConfig.assert_not_called()
