"""
Default settings for the async helpers and logging.

**Conceptual**: Helpers never read the environment themselves. Callers who
want environment-driven defaults load a settings object here and pass it
in (retry_with_settings, async_pool(concurrency=None, settings=...),
configure_logging). Values are validated at load time so a bad
environment fails at startup rather than mid-run.

This module uses python-dotenv to load an optional .env file (found from
the current working directory, only when Settings.from_env() runs) and
frozen dataclasses for type safety.

**Environment variables**:
  - POCKETKIT_RETRY_ATTEMPTS (default 3)
  - POCKETKIT_RETRY_DELAY_SECONDS (default 1.0)
  - POCKETKIT_POOL_CONCURRENCY (default 4)
  - POCKETKIT_LOG_LEVEL (default WARNING)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from pocketkit.errors import ValidationError


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer, got: {raw}")


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a number, got: {raw}")


@dataclass(frozen=True)
class RetrySettings:
    """
    Defaults for retry_with_settings.

    Attributes:
        attempts: Maximum number of invocations (>= 1).
        delay_seconds: Wait between consecutive attempts (>= 0).
    """
    attempts: int = 3
    delay_seconds: float = 1.0

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.attempts < 1:
            raise ValidationError(
                f"attempts must be a positive integer, got: {self.attempts}"
            )
        if self.delay_seconds < 0:
            raise ValidationError(
                f"delay_seconds must be non-negative, got: {self.delay_seconds}"
            )

    @classmethod
    def from_env(cls) -> "RetrySettings":
        """
        Load retry settings from POCKETKIT_RETRY_ATTEMPTS and
        POCKETKIT_RETRY_DELAY_SECONDS.

        Raises:
            ValidationError: If a variable is not a number or is out of range.
        """
        return cls(
            attempts=_read_int("POCKETKIT_RETRY_ATTEMPTS", "3"),
            delay_seconds=_read_float("POCKETKIT_RETRY_DELAY_SECONDS", "1.0"),
        )


@dataclass(frozen=True)
class PoolSettings:
    """
    Defaults for async_pool.

    Attributes:
        concurrency: Number of logical workers (>= 1).
    """
    concurrency: int = 4

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.concurrency < 1:
            raise ValidationError(
                f"concurrency must be a positive integer, got: {self.concurrency}"
            )

    @classmethod
    def from_env(cls) -> "PoolSettings":
        """Load pool settings from POCKETKIT_POOL_CONCURRENCY."""
        return cls(concurrency=_read_int("POCKETKIT_POOL_CONCURRENCY", "4"))


@dataclass(frozen=True)
class LoggingSettings:
    """
    Settings for configure_logging.

    Attributes:
        level: Standard logging level name (DEBUG, INFO, WARNING, ...).
        format: Format string for the stream handler.
    """
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def __post_init__(self):
        """Validate settings after initialization."""
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ValidationError(f"Unknown log level: {self.level}")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level.upper())

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """Load logging settings from POCKETKIT_LOG_LEVEL."""
        return cls(level=os.getenv("POCKETKIT_LOG_LEVEL", "WARNING"))


@dataclass(frozen=True)
class Settings:
    """
    Top-level settings aggregating every subsystem.

    **Usage pattern**:
      ```python
      from pocketkit.config.settings import Settings

      settings = Settings.from_env()
      result = await retry_with_settings(fetch, settings.retry)
      ```

    Attributes:
        retry: Defaults for retry_with_settings.
        pool: Defaults for async_pool.
        logging: Settings for configure_logging.
    """
    retry: RetrySettings = field(default_factory=RetrySettings)
    pool: PoolSettings = field(default_factory=PoolSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load every subsystem's settings from the environment.

        A .env file found from the current working directory is loaded first;
        variables already set in the environment win.

        Raises:
            ValidationError: If any variable is malformed or out of range.
        """
        load_dotenv(find_dotenv(usecwd=True), override=False)
        return cls(
            retry=RetrySettings.from_env(),
            pool=PoolSettings.from_env(),
            logging=LoggingSettings.from_env(),
        )


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the settings singleton, loading it from the environment on first use.

    Tests should build Settings(...) directly or call reset_settings() after
    changing environment variables.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()
    return _default_settings


def reset_settings() -> None:
    """Clear the cached singleton so the next get_settings() reloads it."""
    global _default_settings
    _default_settings = None
