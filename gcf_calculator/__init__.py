"""GCF Calculator - greatest common factor of two numbers from the terminal."""

from gcf_calculator.core.gcf import calculate_gcf, compute
from gcf_calculator.core.types import (
    GcfCalculatorError,
    GcfResult,
    InputClosedError,
    InvalidOperandError,
)

__version__ = "0.1.0"

__all__ = [
    "GcfCalculatorError",
    "GcfResult",
    "InputClosedError",
    "InvalidOperandError",
    "calculate_gcf",
    "compute",
]
