"""CLI module for gcf-calculator.

Provides the interactive prompt loop and the command-line entry point.
"""

from gcf_calculator.cli.prompts import NumberPrompt, prompt_for_integer
from gcf_calculator.cli.session import GcfSession

__all__ = ["GcfSession", "NumberPrompt", "prompt_for_integer"]
