"""Interactive calculator session."""

from __future__ import annotations

import logging
from typing import TextIO

from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

from gcf_calculator.cli.prompts import prompt_for_integer
from gcf_calculator.core.config import CalculatorSettings
from gcf_calculator.core.gcf import compute
from gcf_calculator.core.types import GcfResult

logger = logging.getLogger(__name__)

INTRO_TITLE = "Greatest Common Factor Calculator"
FIRST_PROMPT = "Enter the first number"
SECOND_PROMPT = "Enter the second number"

# Smallest operand the prompts accept
MINIMUM_OPERAND = 0

calculator_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "prompt": "bold",
    "prompt.invalid": "red",
})


def create_console(stderr: bool = False, **kwargs) -> Console:
    """Create a console using the calculator theme."""
    return Console(theme=calculator_theme, stderr=stderr, **kwargs)


class GcfSession:
    """One run of the calculator: intro, two prompts, result."""

    def __init__(
        self,
        console: Console | None = None,
        settings: CalculatorSettings | None = None,
        stream: TextIO | None = None,
    ):
        """
        Initialize the session.

        Args:
            console: Console for all output. Defaults to a themed console.
            settings: Runtime settings. Defaults to CalculatorSettings().
            stream: Input stream for the prompts; the terminal when None
        """
        self.console = console or create_console()
        self.settings = settings or CalculatorSettings()
        self.stream = stream

    def intro(self) -> None:
        if self.settings.clear_screen:
            self.console.clear()
        self.console.print(Panel.fit(INTRO_TITLE, border_style="cyan"))

    def outro(self, result: GcfResult) -> None:
        self.console.print(f"[success]✓[/success] {result.message}")

    def ask_operand(self, message: str) -> int:
        return prompt_for_integer(
            self.console,
            message,
            minimum=MINIMUM_OPERAND,
            stream=self.stream,
        )

    def run(self) -> GcfResult:
        """
        Run the session once.

        Returns:
            The computed GcfResult

        Raises:
            InputClosedError: If input ends before both numbers are read
        """
        self.intro()
        first = self.ask_operand(FIRST_PROMPT)
        second = self.ask_operand(SECOND_PROMPT)
        logger.info("Operands accepted: %d, %d", first, second)

        result = compute(first, second)
        self.outro(result)
        return result
