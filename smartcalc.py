#!/usr/bin/env python3
"""
SmartCalc - Integer Calculator

Main entry point for the SmartCalc interactive calculator.
This file serves as a thin wrapper that delegates all functionality
to the smartcalc_pkg package.

Usage:
    python smartcalc.py                     # Read lines from stdin
    python smartcalc.py -e "2 + 3 * 4"      # Evaluate one line
    python smartcalc.py --help              # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for SmartCalc.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from smartcalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import smartcalc_pkg: {e}")
        print("Please ensure the package is installed: pip install -e .")
        return 1
    except Exception as e:
        print(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
