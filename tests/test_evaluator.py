"""Tests for operand resolution and postfix evaluation."""

import pytest

from smartcalc_pkg.evaluator import (
    evaluate_postfix,
    integer_power,
    is_valid_variable,
    resolve_operand,
    truncating_div,
)
from smartcalc_pkg.parser import classify
from smartcalc_pkg.store import VariableStore
from smartcalc_pkg.types import CalcError, ErrorKind, Token, TokenKind


def postfix(*pieces):
    return [classify(piece) for piece in pieces]


@pytest.fixture
def store():
    return VariableStore({"a": 10, "b": -3, "Big": 7})


class TestValidVariable:
    """Test the letters-and-spaces variable shape."""

    def test_letters(self):
        assert is_valid_variable("x")
        assert is_valid_variable("total")
        assert is_valid_variable("my var")
        assert is_valid_variable("ñandú")

    def test_rejects_digits_and_punctuation(self):
        assert not is_valid_variable("x1")
        assert not is_valid_variable("a_b")
        assert not is_valid_variable("12")
        assert not is_valid_variable("")
        assert not is_valid_variable("   ")


class TestResolveOperand:
    """Test literal parsing and variable lookup."""

    def test_literals(self, store):
        assert resolve_operand("42", store) == 42
        assert resolve_operand("-7", store) == -7
        assert resolve_operand("+7", store) == 7
        assert resolve_operand(" 12 ", store) == 12
        assert resolve_operand("007", store) == 7

    def test_variables(self, store):
        assert resolve_operand("a", store) == 10
        assert resolve_operand("b", store) == -3
        assert resolve_operand(" Big ", store) == 7

    def test_variables_are_case_sensitive(self, store):
        with pytest.raises(CalcError) as exc:
            resolve_operand("big", store)
        assert exc.value.kind is ErrorKind.UNKNOWN_VARIABLE

    def test_unknown_variable(self, store):
        with pytest.raises(CalcError) as exc:
            resolve_operand("y", store)
        assert str(exc.value) == "unknown variable"

    @pytest.mark.parametrize("text", ["3.5", "1_000", "5abc", "x1", "0x10", "--1", ""])
    def test_invalid_identifier(self, store, text):
        with pytest.raises(CalcError) as exc:
            resolve_operand(text, store)
        assert exc.value.kind is ErrorKind.INVALID_IDENTIFIER
        assert str(exc.value) == "invalid identifier"


class TestArithmetic:
    """Test integer operations."""

    def test_truncating_division(self):
        assert truncating_div(7, 2) == 3
        assert truncating_div(-7, 2) == -3
        assert truncating_div(7, -2) == -3
        assert truncating_div(-7, -2) == 3
        assert truncating_div(6, 3) == 2

    def test_division_by_zero(self):
        with pytest.raises(CalcError) as exc:
            truncating_div(1, 0)
        assert exc.value.kind is ErrorKind.DIVISION_BY_ZERO

    def test_power(self):
        assert integer_power(2, 10) == 1024
        assert integer_power(-2, 3) == -8
        assert integer_power(0, 0) == 1
        assert integer_power(5, 0) == 1

    def test_negative_exponent_truncates(self):
        assert integer_power(2, -1) == 0
        assert integer_power(1, -5) == 1
        assert integer_power(-1, -3) == -1
        assert integer_power(-1, -2) == 1

    def test_zero_to_negative_power(self):
        with pytest.raises(CalcError) as exc:
            integer_power(0, -1)
        assert exc.value.kind is ErrorKind.DIVISION_BY_ZERO


class TestEvaluatePostfix:
    """Test the value stack machine."""

    def test_simple(self, store):
        assert evaluate_postfix(postfix("2", "3", "4", "*", "+"), store) == 14

    def test_right_operand_popped_first(self, store):
        assert evaluate_postfix(postfix("10", "4", "-"), store) == 6
        assert evaluate_postfix(postfix("9", "2", "/"), store) == 4
        assert evaluate_postfix(postfix("2", "3", "^"), store) == 8

    def test_variables(self, store):
        assert evaluate_postfix(postfix("a", "b", "*"), store) == -30

    def test_single_operand(self, store):
        assert evaluate_postfix(postfix("5"), store) == 5

    def test_missing_operand(self, store):
        with pytest.raises(CalcError) as exc:
            evaluate_postfix(postfix("5", "-"), store)
        assert exc.value.kind is ErrorKind.INVALID_EXPRESSION

    def test_leftover_values(self, store):
        with pytest.raises(CalcError) as exc:
            evaluate_postfix(postfix("1", "2"), store)
        assert exc.value.kind is ErrorKind.INVALID_EXPRESSION

    def test_empty(self, store):
        with pytest.raises(CalcError) as exc:
            evaluate_postfix([], store)
        assert str(exc.value) == "invalid expression"

    def test_unknown_operator_symbol(self, store):
        tokens = postfix("5", "2") + [Token(TokenKind.OPERATOR, "%")]
        with pytest.raises(CalcError) as exc:
            evaluate_postfix(tokens, store)
        assert exc.value.kind is ErrorKind.INVALID_OPERATOR
        assert exc.value.detail == "%"
        assert str(exc.value) == "invalid operator %"

    def test_operand_error_propagates(self, store):
        with pytest.raises(CalcError) as exc:
            evaluate_postfix(postfix("1", "zz", "+"), store)
        assert exc.value.kind is ErrorKind.UNKNOWN_VARIABLE

    def test_division_by_zero(self, store):
        with pytest.raises(CalcError) as exc:
            evaluate_postfix(postfix("10", "0", "/"), store)
        assert str(exc.value) == "division by zero"
