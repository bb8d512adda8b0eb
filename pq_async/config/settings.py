"""
Configuration settings for the pq_async utility layer.

**Conceptual**: The utilities themselves are pure functions, but two pieces of
ambient context influence how they behave in a running process: which numeric
locale drives digit grouping in `num_to_str`, and how chatty the package
logger is. This module turns those into strongly-typed, validated objects
loaded from environment variables (via .env files), so the rest of the code
receives them explicitly instead of reading process state on its own.

**Environment variables** (all optional):
  - PQ_ASYNC_NUMERIC_LOCALE: locale name used for number formatting.
    Empty (default) means "whatever LC_NUMERIC the process is running with";
    "C" or "POSIX" means the classic locale (no grouping, "." decimal point).
  - PQ_ASYNC_NUMERIC_GROUPING: default grouping flag ("true"/"false").
  - PQ_ASYNC_LOG_LEVEL: logging level name (default WARNING).
  - PQ_ASYNC_LOG_FORMAT: logging format string.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (dev/local environments); a missing file is a no-op
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(
        f"{name} must be one of {_TRUE_VALUES + _FALSE_VALUES}, got: {raw!r}"
    )


@dataclass(frozen=True)
class FormatSettings:
    """
    Configuration for numeric text formatting.

    **Conceptual**: `num_to_str` groups digits according to a numeric locale.
    Rather than letting every call consult the process-wide locale, the
    locale is named here once and resolved into a `NumericLocale` by the
    caller (see `NumericLocale.from_settings`).

    Attributes:
        locale_name: Locale to read grouping/decimal point from. Empty string
                     means the process's active LC_NUMERIC; "C"/"POSIX" mean
                     the classic locale.
        grouping: Default grouping flag for callers that do not pass one.
    """
    locale_name: str = ""
    grouping: bool = True

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.locale_name != self.locale_name.strip():
            raise ValueError(
                f"PQ_ASYNC_NUMERIC_LOCALE must not have surrounding whitespace, "
                f"got: {self.locale_name!r}"
            )

    @property
    def is_classic(self) -> bool:
        """True when the configured locale is the "C" locale."""
        return self.locale_name in ("C", "POSIX")

    @classmethod
    def from_env(cls) -> "FormatSettings":
        """
        Load format settings from environment variables.

        **Environment variables**:
          - PQ_ASYNC_NUMERIC_LOCALE (optional): locale name, default "".
          - PQ_ASYNC_NUMERIC_GROUPING (optional): default "true".

        Returns:
            FormatSettings object with values loaded from environment.

        Raises:
            ValueError: If PQ_ASYNC_NUMERIC_GROUPING is not a boolean string.
        """
        locale_name = os.getenv("PQ_ASYNC_NUMERIC_LOCALE", "")
        grouping = _parse_bool(
            "PQ_ASYNC_NUMERIC_GROUPING",
            os.getenv("PQ_ASYNC_NUMERIC_GROUPING", "true"),
        )
        return cls(locale_name=locale_name, grouping=grouping)


@dataclass(frozen=True)
class LoggingSettings:
    """
    Configuration for the package logger.

    Attributes:
        level: Standard logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format: `logging` format string used by `configure_logging`.
    """
    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"PQ_ASYNC_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {self.level!r}"
            )
        if not self.format:
            raise ValueError("PQ_ASYNC_LOG_FORMAT must not be empty.")

    @property
    def level_number(self) -> int:
        """Numeric logging level (e.g. logging.WARNING)."""
        return logging.getLevelName(self.level)

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """
        Load logging settings from environment variables.

        **Environment variables**:
          - PQ_ASYNC_LOG_LEVEL (optional): default "WARNING" (case-insensitive).
          - PQ_ASYNC_LOG_FORMAT (optional): default DEFAULT_LOG_FORMAT.

        Raises:
            ValueError: If the level is not a standard level name.
        """
        level = os.getenv("PQ_ASYNC_LOG_LEVEL", "WARNING").strip().upper()
        log_format = os.getenv("PQ_ASYNC_LOG_FORMAT", DEFAULT_LOG_FORMAT)
        return cls(level=level, format=log_format)


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the utility layer.

    **Usage pattern**:
      ```python
      from pq_async.config.settings import Settings

      settings = Settings.from_env()
      numeric_locale = NumericLocale.from_settings(settings.formatting)
      ```

    Attributes:
        formatting: Numeric formatting settings.
        logging: Package logging settings.
    """
    formatting: FormatSettings = field(default_factory=FormatSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Raises:
            ValueError: If any subsystem setting is invalid.
        """
        return cls(
            formatting=FormatSettings.from_env(),
            logging=LoggingSettings.from_env(),
        )


def get_settings() -> Settings:
    """
    Convenience accessor that loads settings from the environment.

    Not cached: tests and long-running hosts that change the environment see
    the new values on the next call.
    """
    return Settings.from_env()
