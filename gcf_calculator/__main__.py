"""Allow running the calculator with ``python -m gcf_calculator``."""

import sys

from gcf_calculator.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
