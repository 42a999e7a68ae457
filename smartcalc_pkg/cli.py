"""Command-line interface: read loop, command dispatch and argument parsing."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, TextIO

from .api import process_input
from .config import (
    COMMAND_PREFIX,
    EXIT_MESSAGE,
    HELP_TEXT,
    LOG_FILE,
    LOG_LEVEL,
    OUTPUT_FORMAT,
    VERSION,
)
from .logging_config import get_logger, setup_logging
from .store import VariableStore
from .types import CalcError, ErrorKind, EvalResult

logger = get_logger("cli")


def print_help_text() -> None:
    """Print help text for REPL commands."""
    print(HELP_TEXT)


def print_result(res: EvalResult, output_format: str = "human") -> None:
    """Print the outcome of one processed line.

    In human format a successful assignment prints nothing.
    """
    if output_format == "json":
        print(json.dumps(res.to_dict()))
        return
    if not res.ok:
        print(res.error)
    elif res.result is not None:
        print(res.result)


def _exit_command() -> bool:
    print(EXIT_MESSAGE)
    return False


def _help_command() -> bool:
    print_help_text()
    return True


REPL_COMMANDS: dict[str, Callable[[], bool]] = {
    "/exit": _exit_command,
    "/help": _help_command,
}


def handle_line(
    line: str, store: VariableStore, output_format: str = "human"
) -> tuple[bool, bool]:
    """Dispatch one non-empty input line.

    Returns:
        Tuple of (keep_running, ok); ok is False when an error was printed
    """
    if line.startswith(COMMAND_PREFIX):
        command = REPL_COMMANDS.get(line)
        if command is not None:
            logger.debug("Command %s", line)
            return command(), True
        print_result(
            EvalResult.from_error(CalcError(ErrorKind.UNKNOWN_COMMAND)), output_format
        )
        return True, False

    res = process_input(line, store)
    print_result(res, output_format)
    return True, res.ok


def repl_loop(
    store: VariableStore | None = None,
    output_format: str = "human",
    stream: TextIO | None = None,
) -> None:
    """Read lines until /exit or end of input, printing one answer per line."""
    if store is None:
        store = VariableStore()
    if stream is None:
        stream = sys.stdin

    while True:
        try:
            raw = stream.readline()
        except KeyboardInterrupt:
            print()
            break
        if not raw:
            logger.debug("End of input")
            break
        line = raw.rstrip("\r\n")
        if not line:
            continue
        keep_running, _ = handle_line(line, store, output_format)
        if not keep_running:
            break


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for SmartCalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="smartcalc",
        description="Integer calculator with variables, parentheses and + - * / ^.",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Process one line and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default=OUTPUT_FORMAT if OUTPUT_FORMAT in ("json", "human") else "human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level or LOG_LEVEL, log_file=args.log_file or LOG_FILE
    )

    if args.version:
        print(VERSION)
        return 0

    # Results are bounded by MAX_RESULT_BITS, not by the interpreter's
    # int/str conversion limit (Python 3.11+)
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    store = VariableStore()
    if args.eval_expr is not None:
        line = args.eval_expr.rstrip("\r\n")
        if not line:
            return 0
        _, ok = handle_line(line, store, args.format)
        return 0 if ok else 1

    repl_loop(store, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
