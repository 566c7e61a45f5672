"""Pytest configuration and fixtures for gcf-calculator tests."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from gcf_calculator.cli.session import calculator_theme
from gcf_calculator.core.config import ENV_CLEAR_SCREEN, ENV_LOG_LEVEL


def _recording_console() -> Console:
    return Console(
        file=io.StringIO(),
        theme=calculator_theme,
        width=100,
        force_terminal=False,
        color_system=None,
    )


@pytest.fixture
def output_console() -> Console:
    """Create a console that writes plain text to an in-memory buffer."""
    return _recording_console()


@pytest.fixture
def error_console() -> Console:
    """Create a second recording console for error output."""
    return _recording_console()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove calculator variables from the environment for the test."""
    for name in (ENV_CLEAR_SCREEN, ENV_LOG_LEVEL):
        # setenv first so teardown restores the original state
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def no_dotenv(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Stop load_settings from reading a .env file."""
    fake = MagicMock(return_value=False)
    monkeypatch.setattr("gcf_calculator.core.config.load_dotenv", fake)
    return fake
