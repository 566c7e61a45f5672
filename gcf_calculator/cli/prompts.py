"""Interactive number prompts built on rich.

Provides the "ask until valid" input loop the calculator session uses.
"""

from __future__ import annotations

import logging
from typing import Any, TextIO

from rich.console import Console
from rich.prompt import IntPrompt, InvalidResponse
from rich.text import TextType

from gcf_calculator.core.types import InputClosedError

logger = logging.getLogger(__name__)


class NumberPrompt(IntPrompt):
    """Integer prompt with an optional lower bound.

    Invalid text and values below ``minimum`` print a retry message and ask
    again. End of input raises EOFError instead of re-prompting forever.
    """

    below_minimum_message = (
        "[prompt.invalid]Please enter a number greater than or equal to {minimum}"
    )

    def __init__(
        self,
        prompt: TextType = "",
        *,
        minimum: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(prompt, **kwargs)
        self.minimum = minimum

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: TextType,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        value = super().get_input(console, prompt, password, stream=stream)
        # readline() returns "" only at end of stream
        if stream is not None and value == "":
            raise EOFError
        return value

    def process_response(self, value: str) -> int:
        number = super().process_response(value)
        if self.minimum is not None and number < self.minimum:
            raise InvalidResponse(
                self.below_minimum_message.format(minimum=self.minimum)
            )
        return number

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        logger.debug("Rejected input %r", value)
        super().on_validate_error(value, error)


def prompt_for_integer(
    console: Console,
    message: str,
    minimum: int | None = 0,
    stream: TextIO | None = None,
) -> int:
    """
    Ask for an integer until a valid one is entered.

    Args:
        console: Console used for the prompt and retry messages
        message: Prompt text
        minimum: Smallest accepted value, or None for no bound
        stream: Optional input stream; reads from the terminal when None

    Returns:
        The accepted integer

    Raises:
        InputClosedError: If input ends before a valid number is entered
    """
    prompt = NumberPrompt(message, console=console, minimum=minimum)
    try:
        return prompt(stream=stream)
    except EOFError as e:
        raise InputClosedError(message) from e
