"""Public API for SmartCalc - returns structured objects without side effects."""

from __future__ import annotations

from .assignment import handle_assignment
from .config import MAX_INPUT_LENGTH
from .evaluator import evaluate_postfix
from .logging_config import get_logger, preview
from .parser import is_balanced, to_postfix, tokenize
from .store import VariableStore
from .types import CalcError, ErrorKind, EvalResult

logger = get_logger("api")


def _check_input(line: str) -> None:
    if len(line) > MAX_INPUT_LENGTH:
        logger.debug("Input of %d characters exceeds %d", len(line), MAX_INPUT_LENGTH)
        raise CalcError(ErrorKind.INVALID_EXPRESSION)
    if not is_balanced(line):
        raise CalcError(ErrorKind.INVALID_EXPRESSION)


def _evaluate_expression(expression: str, store: VariableStore) -> int:
    postfix = to_postfix(tokenize(expression))
    return evaluate_postfix(postfix, store)


def process_input(line: str, store: VariableStore) -> EvalResult:
    """Process one non-command input line.

    Lines containing '=' are assignments, everything else is evaluated as an
    expression. Errors are returned, never raised.

    Args:
        line: Raw input line (e.g., "2 + 3 * 4", "x = 5")
        store: Session variable store, updated by assignments

    Returns:
        EvalResult with the integer result, the assigned name, or the error
    """
    try:
        _check_input(line)
        if "=" in line:
            return EvalResult(ok=True, assigned=handle_assignment(line, store))
        return EvalResult(ok=True, result=_evaluate_expression(line, store))
    except CalcError as e:
        logger.debug("Input %s failed: %s (%s)", preview(line), e, e.code)
        return EvalResult.from_error(e)


def evaluate(expression: str, store: VariableStore | None = None) -> EvalResult:
    """Evaluate an expression without assignment support.

    Args:
        expression: Expression string (e.g., "2 + 2", "(a + 1) * b")
        store: Variables to resolve names against (empty when omitted)

    Returns:
        EvalResult with the integer result or the error

    Example:
        >>> from smartcalc_pkg.api import evaluate
        >>> evaluate("2 ^ 3 ^ 2").result
        64
    """
    if store is None:
        store = VariableStore()
    try:
        _check_input(expression)
        return EvalResult(ok=True, result=_evaluate_expression(expression, store))
    except CalcError as e:
        logger.debug("Expression %s failed: %s (%s)", preview(expression), e, e.code)
        return EvalResult.from_error(e)


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression's structure without evaluating it.

    Checks length, paren balance and that the expression converts to postfix.
    Operands are not resolved, so unknown variables pass.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from smartcalc_pkg.api import validate_expression
        >>> validate_expression(")1 + 2(")
        (False, 'invalid expression')
    """
    try:
        _check_input(expression)
        to_postfix(tokenize(expression))
        return True, None
    except CalcError as e:
        return False, str(e)
