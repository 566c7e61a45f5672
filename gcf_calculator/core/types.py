"""Core type definitions for gcf-calculator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GcfCalculatorError(Exception):
    """Base class for all calculator errors."""


class InvalidOperandError(GcfCalculatorError, ValueError):
    """Raised when an operand is negative or not an integer."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(
            f"{name} must be a non-negative integer, got {value!r}"
        )


class InputClosedError(GcfCalculatorError, EOFError):
    """Raised when input ends before a valid number was entered."""

    def __init__(self, prompt: str = ""):
        self.prompt = prompt
        message = "Input closed before a valid number was entered"
        if prompt:
            message += f" (while asking: {prompt!r})"
        super().__init__(message)


class GcfResult(BaseModel):
    """The greatest common factor of two operands."""

    model_config = ConfigDict(frozen=True)

    first: int = Field(ge=0)
    second: int = Field(ge=0)
    gcf: int = Field(ge=0)

    @property
    def message(self) -> str:
        """Human-readable result line."""
        return f"The GCF for {self.first} and {self.second} is {self.gcf}"

    def __str__(self) -> str:
        return self.message
