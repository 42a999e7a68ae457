"""Input parsing module.

This module handles:
- Parenthesis count checks on raw input
- Normalization of a raw line (whitespace removal, sign-run collapsing)
- Tokenization into classified tokens
- Infix to postfix conversion (shunting-yard)
"""

from __future__ import annotations

import re

from .config import (
    LEFT_PAREN,
    OPERATOR_PRECEDENCE,
    OPERATOR_SPLIT_REGEX,
    RIGHT_PAREN,
    SIGN_RUN_REGEX,
    WHITESPACE_REGEX,
)
from .logging_config import get_logger, preview
from .types import CalcError, ErrorKind, Token, TokenKind

logger = get_logger("parser")


def is_balanced(input_str: str) -> bool:
    """Check that a line has as many '(' as ')'.

    Only counts are compared; ordering problems such as ')1+2(' are caught
    later by the converter.
    """
    return input_str.count(LEFT_PAREN) == input_str.count(RIGHT_PAREN)


def _collapse_sign_run(match: re.Match) -> str:
    return "-" if match.group(0).count("-") % 2 else "+"


def normalize(input_str: str) -> str:
    """Normalize a raw expression line into a space-separated token string.

    All whitespace is removed, then every run of two or more '+'/'-' signs is
    collapsed to a single sign by the parity of its '-' count ('--' -> '+',
    '---' -> '-'), then each operator and paren is padded with spaces.

    Args:
        input_str: Raw expression text (e.g., "5 - -3")

    Returns:
        Normalized text (e.g., "5 + 3" padded with spaces)
    """
    text = WHITESPACE_REGEX.sub("", input_str)
    text = SIGN_RUN_REGEX.sub(_collapse_sign_run, text)
    return OPERATOR_SPLIT_REGEX.sub(r" \1 ", text)


def classify(text: str) -> Token:
    """Classify one piece of normalized text as a token."""
    if text == LEFT_PAREN:
        return Token(TokenKind.LPAREN, text)
    if text == RIGHT_PAREN:
        return Token(TokenKind.RPAREN, text)
    if text in OPERATOR_PRECEDENCE:
        return Token(TokenKind.OPERATOR, text)
    return Token(TokenKind.OPERAND, text)


def tokenize(input_str: str) -> list[Token]:
    """Turn a raw expression line into classified tokens.

    Never fails: malformed input surfaces as a conversion or evaluation error.
    """
    tokens = [classify(piece) for piece in normalize(input_str).split()]
    logger.debug("Tokens for %s: %s", preview(input_str), " ".join(map(str, tokens)))
    return tokens


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Convert infix tokens to postfix order using the shunting-yard algorithm.

    All operators are left-associative, '^' included: an operator already on
    the stack with equal or higher precedence is output first.

    Raises:
        CalcError: INVALID_EXPRESSION when a '(' is never closed.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.LPAREN:
            stack.append(token)
        elif token.kind is TokenKind.RPAREN:
            while stack and stack[-1].kind is not TokenKind.LPAREN:
                output.append(stack.pop())
            # A ')' without a matching '(' is tolerated here
            if stack:
                stack.pop()
        elif token.kind is TokenKind.OPERATOR:
            precedence = OPERATOR_PRECEDENCE[token.text]
            while (
                stack
                and stack[-1].kind is TokenKind.OPERATOR
                and OPERATOR_PRECEDENCE[stack[-1].text] >= precedence
            ):
                output.append(stack.pop())
            stack.append(token)
        else:
            output.append(token)

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.LPAREN:
            raise CalcError(ErrorKind.INVALID_EXPRESSION)
        output.append(top)

    logger.debug("Postfix: %s", " ".join(map(str, output)))
    return output
