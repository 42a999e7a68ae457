"""Main entry point for running smartcalc_pkg as a module.

This allows running SmartCalc with:
    python -m smartcalc_pkg
    python -m smartcalc_pkg -e "2 + 2"

This is equivalent to running:
    python -m smartcalc_pkg.cli
    python smartcalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
