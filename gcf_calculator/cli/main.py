"""CLI entry point for gcf-calculator.

Asks for two numbers and prints their greatest common factor.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from gcf_calculator import __version__
from gcf_calculator.cli.session import GcfSession, create_console
from gcf_calculator.core.config import configure_logging, load_settings
from gcf_calculator.core.types import InputClosedError

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_INPUT_CLOSED = 1
EXIT_BAD_SETTINGS = 2
EXIT_INTERRUPTED = 130


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gcf-calculator",
        description="Compute the greatest common factor of two non-negative integers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start an interactive session
  gcf-calculator

Environment Variables:
  GCF_CLEAR_SCREEN: Clear the terminal before starting (default: true)
  GCF_LOG_LEVEL: Logging level written to stderr (default: WARNING)
        """,
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(
    argv: list[str] | None = None,
    console: Console | None = None,
    error_console: Console | None = None,
    stream: TextIO | None = None,
) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parser.parse_args(argv)

    error_console = error_console or create_console(stderr=True)

    try:
        settings = load_settings()
    except ValidationError as e:
        error_console.print(f"[error]✗ Invalid settings:[/error] {escape(str(e))}")
        return EXIT_BAD_SETTINGS

    configure_logging(settings.log_level)

    session = GcfSession(console=console, settings=settings, stream=stream)
    try:
        session.run()
    except InputClosedError as e:
        logger.info("Session aborted: %s", e)
        error_console.print(f"[error]✗ {escape(str(e))}[/error]")
        return EXIT_INPUT_CLOSED
    except KeyboardInterrupt:
        error_console.print("\n[warning]Interrupted[/warning]")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
