"""Handling of `name = value` lines."""

from __future__ import annotations

from .evaluator import is_valid_variable, resolve_operand
from .logging_config import get_logger, preview
from .store import VariableStore
from .types import CalcError, ErrorKind

logger = get_logger("assignment")


def handle_assignment(input_str: str, store: VariableStore) -> str:
    """Assign a single operand (literal or existing variable) to a variable.

    The right-hand side is not an expression: `x = 1 + 2` is rejected.

    Args:
        input_str: Raw line containing '='
        store: Variable store to update

    Returns:
        The name that was assigned

    Raises:
        CalcError: INVALID_ASSIGNMENT for every failure, whatever the cause.
    """
    parts = input_str.split("=")
    if len(parts) != 2:
        raise CalcError(ErrorKind.INVALID_ASSIGNMENT)

    name = parts[0].strip()
    if not is_valid_variable(name):
        raise CalcError(ErrorKind.INVALID_ASSIGNMENT)

    try:
        value = resolve_operand(parts[1].strip(), store)
    except CalcError as e:
        logger.debug("Right-hand side of %s rejected: %s", preview(input_str), e)
        raise CalcError(ErrorKind.INVALID_ASSIGNMENT) from e

    store.assign(name, value)
    return name
