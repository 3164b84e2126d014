"""
Tests for pocketkit/utils/base.py and pocketkit/utils/log.py
"""

import logging
import re
from datetime import date, datetime

import pytest

from pocketkit.config.settings import LoggingSettings
from pocketkit.errors import PocketkitAssertionError
from pocketkit.utils.base import assert_that, get_type_name, noop
from pocketkit.utils.log import PACKAGE_LOGGER_NAME, configure_logging


def test_assert_that_passes_and_fails():
    """A true condition is silent; a false one raises with the message."""
    assert_that(True, "never shown")

    with pytest.raises(PocketkitAssertionError, match="must be positive"):
        assert_that(False, "must be positive")


def test_assert_that_error_is_an_assertion_error():
    with pytest.raises(AssertionError):
        assert_that(1 > 2, "nope")


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "boolean"),
        (3, "number"),
        (2.5, "number"),
        ("x", "string"),
        (b"x", "bytes"),
        ([1], "list"),
        ((1, 2), "list"),
        ({"a": 1}, "dict"),
        ({1}, "set"),
        (date(2020, 1, 1), "date"),
        (datetime(2020, 1, 1), "date"),
        (re.compile("a"), "regexp"),
        (len, "function"),
        (ValueError("boom"), "valueerror"),
    ],
)
def test_get_type_name(value, expected):
    assert get_type_name(value) == expected


def test_noop_accepts_anything():
    assert noop() is None
    assert noop(1, 2, key="value") is None


def test_configure_logging_installs_single_handler():
    """Repeated calls replace the pocketkit handler instead of stacking."""
    logger = configure_logging(LoggingSettings(level="DEBUG"))
    configure_logging(LoggingSettings(level="info"))

    ours = [h for h in logger.handlers if getattr(h, "_pocketkit_handler", False)]
    assert logger.name == PACKAGE_LOGGER_NAME
    assert len(ours) == 1
    assert logger.level == logging.INFO

    # Leave the package logger quiet for other tests
    for handler in ours:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
