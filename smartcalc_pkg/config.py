"""Centralized configuration for SmartCalc.

This module defines:
- The operator precedence table and paren symbols
- Regex patterns for tokenizing and operand resolution
- Logging and output defaults
- Fixed user-facing texts (help, exit)

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with SMARTCALC_)
"""

import os
import re
from types import MappingProxyType

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("smartcalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

OPERATOR_PRECEDENCE = MappingProxyType(
    {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
        "^": 3,
    }
)

LEFT_PAREN = "("
RIGHT_PAREN = ")"

# Logging and output defaults
LOG_LEVEL = os.getenv("SMARTCALC_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("SMARTCALC_LOG_FILE") or None
OUTPUT_FORMAT = os.getenv("SMARTCALC_OUTPUT_FORMAT", "human").lower()

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("SMARTCALC_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_RESULT_BITS = int(
    os.getenv("SMARTCALC_MAX_RESULT_BITS", "10000")
)  # bit length of any literal, intermediate value or result (~3000 digits)

COMMAND_PREFIX = "/"
EXIT_MESSAGE = "Bye!"

HELP_TEXT = """This program supports basic arithmetic operations: addition and subtraction, and variable assignment.
Enter an expression to calculate its value or use one of the commands:
- /help to display this message.
- /exit to quit the program."""

INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

WHITESPACE_REGEX = re.compile(r"\s+")
SIGN_RUN_REGEX = re.compile(r"[+-]{2,}")
OPERATOR_SPLIT_REGEX = re.compile(r"([+\-*/^()])")
