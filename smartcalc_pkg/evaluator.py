"""Postfix evaluation and operand resolution."""

from __future__ import annotations

from typing import Callable

from .config import INTEGER_RE, MAX_RESULT_BITS
from .logging_config import get_logger
from .store import VariableStore
from .types import CalcError, ErrorKind, Token, TokenKind

logger = get_logger("evaluator")


def is_valid_variable(text: str) -> bool:
    """Return True if text is made only of letters and/or whitespace, with at least one letter."""
    return bool(text.strip()) and all(ch.isalpha() or ch.isspace() for ch in text)


def resolve_operand(text: str, store: VariableStore) -> int:
    """Resolve an operand to an integer.

    Variable-shaped text is looked up in the store; anything else must be a
    decimal integer literal with an optional sign.

    Raises:
        CalcError: UNKNOWN_VARIABLE or INVALID_IDENTIFIER.
    """
    if is_valid_variable(text):
        name = text.strip()
        if name not in store:
            raise CalcError(ErrorKind.UNKNOWN_VARIABLE)
        return store[name]
    literal = text.strip()
    if not INTEGER_RE.fullmatch(literal):
        raise CalcError(ErrorKind.INVALID_IDENTIFIER)
    try:
        value = int(literal)
    except ValueError as e:
        # Longer than the interpreter's int/str conversion limit
        raise CalcError(ErrorKind.INVALID_IDENTIFIER) from e
    if value.bit_length() > MAX_RESULT_BITS:
        raise CalcError(ErrorKind.INVALID_IDENTIFIER)
    return value


def check_size(value: int) -> int:
    """Reject values wider than MAX_RESULT_BITS."""
    if value.bit_length() > MAX_RESULT_BITS:
        logger.debug(
            "Value of %d bits exceeds the %d bit limit",
            value.bit_length(),
            MAX_RESULT_BITS,
        )
        raise CalcError(ErrorKind.INVALID_EXPRESSION)
    return value


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise CalcError(ErrorKind.DIVISION_BY_ZERO)
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def integer_power(a: int, b: int) -> int:
    """Raise a to the power b; negative exponents truncate toward zero.

    Powers that would certainly exceed MAX_RESULT_BITS are rejected before
    being computed.
    """
    if b < 0:
        if a == 0:
            raise CalcError(ErrorKind.DIVISION_BY_ZERO)
        if abs(a) == 1:
            return a if b % 2 else 1
        # 1 / a**n truncates to zero for |a| >= 2
        return 0
    if abs(a) > 1 and (abs(a).bit_length() - 1) * b > MAX_RESULT_BITS:
        raise CalcError(ErrorKind.INVALID_EXPRESSION)
    return a ** b


BINARY_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": truncating_div,
    "^": integer_power,
}


def evaluate_postfix(postfix: list[Token], store: VariableStore) -> int:
    """Evaluate postfix tokens against the store.

    Operators pop their right operand first. Exactly one value must be left
    once every token has been consumed.

    Raises:
        CalcError: on malformed input, unresolvable operands or division by zero.
    """
    stack: list[int] = []

    for token in postfix:
        if token.kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise CalcError(ErrorKind.INVALID_EXPRESSION)
            b = stack.pop()
            a = stack.pop()
            operation = BINARY_OPERATIONS.get(token.text)
            if operation is None:
                raise CalcError(ErrorKind.INVALID_OPERATOR, token.text)
            stack.append(check_size(operation(a, b)))
        elif token.kind is TokenKind.OPERAND:
            stack.append(resolve_operand(token.text, store))
        else:
            # Parens never survive conversion
            raise CalcError(ErrorKind.INVALID_EXPRESSION)

    if len(stack) != 1:
        raise CalcError(ErrorKind.INVALID_EXPRESSION)
    logger.debug("Result: %d", stack[0])
    return stack[0]
