"""Type definitions: tokens, error kinds and result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenKind(Enum):
    """Closed set of token classes produced by the tokenizer."""

    OPERAND = "operand"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True)
class Token:
    """A classified token. Operator tokens carry their symbol in ``text``."""

    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return self.text


class ErrorKind(Enum):
    """Every failure the calculator can report, with its user-facing message."""

    INVALID_EXPRESSION = "invalid expression"
    DIVISION_BY_ZERO = "division by zero"
    INVALID_OPERATOR = "invalid operator %s"
    UNKNOWN_VARIABLE = "unknown variable"
    INVALID_IDENTIFIER = "invalid identifier"
    INVALID_ASSIGNMENT = "Invalid assignment"
    UNKNOWN_COMMAND = "Unknown command"

    def render(self, detail: str | None = None) -> str:
        if "%s" in self.value:
            return self.value % (detail or "")
        return self.value


class CalcError(Exception):
    """Raised by the core when a line cannot be evaluated or assigned."""

    def __init__(self, kind: ErrorKind, detail: str | None = None):
        self.kind = kind
        self.detail = detail
        self.code = kind.name
        self.message = kind.render(detail)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass
class EvalResult:
    """Result of processing one input line."""

    ok: bool
    result: int | None = None
    error: str | None = None
    error_code: str | None = None
    assigned: str | None = None

    @classmethod
    def from_error(cls, exc: CalcError) -> EvalResult:
        return cls(ok=False, error=exc.message, error_code=exc.code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.assigned is not None:
            result_dict["assigned"] = self.assigned
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.assigned is not None:
            parts.append(f"assigned={self.assigned!r}")
        return f"EvalResult({', '.join(parts)})"
