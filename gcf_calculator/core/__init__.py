"""Core module for gcf-calculator."""

from gcf_calculator.core.config import CalculatorSettings, load_settings
from gcf_calculator.core.gcf import calculate_gcf, compute
from gcf_calculator.core.types import (
    GcfCalculatorError,
    GcfResult,
    InputClosedError,
    InvalidOperandError,
)

__all__ = [
    "CalculatorSettings",
    "GcfCalculatorError",
    "GcfResult",
    "InputClosedError",
    "InvalidOperandError",
    "calculate_gcf",
    "compute",
    "load_settings",
]
