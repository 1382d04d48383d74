"""
Tests for logging setup.
"""

import logging

import pytest

from natcmp.infrastructure import get_logger, setup_logging


def test_setup_logging_sets_level():
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_custom_format():
    setup_logging("INFO", format_string="%(levelname)s:%(message)s")
    handler = logging.getLogger().handlers[0]
    assert handler.formatter._fmt == "%(levelname)s:%(message)s"


def test_setup_logging_invalid_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        setup_logging("LOUD")


def test_get_logger():
    logger = get_logger("natcmp.test")
    assert logger.name == "natcmp.test"
