"""Settings and logging setup for gcf-calculator.

Settings come from environment variables, optionally seeded from a ``.env``
file:

    GCF_CLEAR_SCREEN   Clear the terminal before the intro (default: true)
    GCF_LOG_LEVEL      Logging level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Environment variable names
ENV_CLEAR_SCREEN = "GCF_CLEAR_SCREEN"
ENV_LOG_LEVEL = "GCF_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class CalculatorSettings(BaseModel):
    """Runtime settings for the calculator."""

    # Whether to clear the terminal before showing the intro banner
    clear_screen: bool = True

    # Level for the gcf_calculator logger
    log_level: str = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().upper()
            if value not in _LOG_LEVELS:
                raise ValueError(
                    f"log level must be one of {', '.join(sorted(_LOG_LEVELS))}"
                )
        return value


def load_settings(
    env: Mapping[str, str] | None = None,
    dotenv_path: Path | str | None = None,
) -> CalculatorSettings:
    """
    Build settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to os.environ, after loading
            a .env file (existing variables are not overridden).
        dotenv_path: Explicit .env file to load when env is not given

    Returns:
        Validated CalculatorSettings

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    if env is None:
        load_dotenv(dotenv_path)
        env = os.environ

    values: dict[str, str] = {}
    if ENV_CLEAR_SCREEN in env:
        values["clear_screen"] = env[ENV_CLEAR_SCREEN]
    if ENV_LOG_LEVEL in env:
        values["log_level"] = env[ENV_LOG_LEVEL]

    return CalculatorSettings(**values)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Calling this more than once replaces the previous handler.
    """
    logger = logging.getLogger("gcf_calculator")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
