"""
Tests for pocketkit/config/settings.py

Environment variables are set with monkeypatch so each test sees a clean
environment.
"""

import os

import pytest

from pocketkit.config.settings import (
    LoggingSettings,
    PoolSettings,
    RetrySettings,
    Settings,
    get_settings,
    reset_settings,
)
from pocketkit.errors import ValidationError

ENV_VARS = (
    "POCKETKIT_RETRY_ATTEMPTS",
    "POCKETKIT_RETRY_DELAY_SECONDS",
    "POCKETKIT_POOL_CONCURRENCY",
    "POCKETKIT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_defaults():
    """With no environment, every subsystem gets its documented default."""
    settings = Settings.from_env()

    assert settings.retry == RetrySettings(attempts=3, delay_seconds=1.0)
    assert settings.pool.concurrency == 4
    assert settings.logging.level == "WARNING"


def test_from_env_reads_variables(monkeypatch):
    monkeypatch.setenv("POCKETKIT_RETRY_ATTEMPTS", "5")
    monkeypatch.setenv("POCKETKIT_RETRY_DELAY_SECONDS", "0.25")
    monkeypatch.setenv("POCKETKIT_POOL_CONCURRENCY", "8")
    monkeypatch.setenv("POCKETKIT_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.retry.attempts == 5
    assert settings.retry.delay_seconds == 0.25
    assert settings.pool.concurrency == 8
    assert settings.logging.level_number == 10


def test_non_numeric_variable_is_rejected(monkeypatch):
    monkeypatch.setenv("POCKETKIT_RETRY_ATTEMPTS", "three")

    with pytest.raises(ValidationError, match="POCKETKIT_RETRY_ATTEMPTS must be an integer"):
        RetrySettings.from_env()


@pytest.mark.parametrize(
    "factory, message",
    [
        (lambda: RetrySettings(attempts=0), "attempts must be a positive integer"),
        (lambda: RetrySettings(delay_seconds=-1), "delay_seconds must be non-negative"),
        (lambda: PoolSettings(concurrency=0), "concurrency must be a positive integer"),
        (lambda: LoggingSettings(level="LOUD"), "Unknown log level"),
    ],
)
def test_out_of_range_values_fail_fast(factory, message):
    with pytest.raises(ValidationError, match=message):
        factory()


def test_settings_are_frozen():
    settings = RetrySettings()
    with pytest.raises(Exception):
        settings.attempts = 10


def test_get_settings_caches_until_reset(monkeypatch):
    """get_settings loads once; reset_settings forces a reload."""
    first = get_settings()
    monkeypatch.setenv("POCKETKIT_POOL_CONCURRENCY", "16")

    assert get_settings() is first
    assert get_settings().pool.concurrency == 4

    reset_settings()
    assert get_settings().pool.concurrency == 16


@pytest.fixture
def isolated_environ(monkeypatch):
    """Give the test a private copy of os.environ so .env loading cannot leak."""
    monkeypatch.setattr(os, "environ", os.environ.copy())


def test_dotenv_loaded_from_working_directory(tmp_path, monkeypatch, isolated_environ):
    """Settings.from_env reads a .env in the working directory; real variables win."""
    (tmp_path / ".env").write_text(
        "POCKETKIT_POOL_CONCURRENCY=7\nPOCKETKIT_RETRY_ATTEMPTS=9\n"
    )
    monkeypatch.chdir(tmp_path)
    os.environ["POCKETKIT_RETRY_ATTEMPTS"] = "2"

    assert PoolSettings.from_env().concurrency == 4

    settings = Settings.from_env()

    assert settings.pool.concurrency == 7
    assert settings.retry.attempts == 2
