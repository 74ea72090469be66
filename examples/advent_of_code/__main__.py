from __future__ import annotations

import sys

from aocrunner import main

from . import YEAR, solutions

if __name__ == "__main__":
    sys.exit(main(solutions, YEAR))
