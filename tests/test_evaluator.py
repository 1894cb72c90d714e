"""Tests for the RPN stack machine."""

import math

import pytest

from rpn_calc.errors import EvaluationException, ArityException
from rpn_calc.evaluator import evaluate, divide, modulo, power
from rpn_calc.tokens import (
    NumberToken, IdentToken, OperatorToken, UnaryToken, PunctuationToken, Tag, IMPLICIT_MUL,
)


class TestStackMachine:
    """Evaluation of hand-built RPN sequences."""

    def test_operand_order(self) -> None:
        rpn = [NumberToken(7), NumberToken(2), OperatorToken("-")]
        assert evaluate(rpn) == 5

    def test_implicit_multiplication(self) -> None:
        rpn = [NumberToken(3), NumberToken(4), OperatorToken(IMPLICIT_MUL)]
        assert evaluate(rpn) == 12

    def test_unary_signs(self) -> None:
        rpn = [NumberToken(2), UnaryToken("-"), UnaryToken("+")]
        assert evaluate(rpn) == -2

    def test_variables(self) -> None:
        rpn = [IdentToken("life"), NumberToken(4), OperatorToken("/")]
        assert evaluate(rpn, {"life": 42}) == 10.5

    def test_function_arguments_in_source_order(self) -> None:
        rpn = [NumberToken(10), NumberToken(4), IdentToken("sub", argc=2)]
        assert evaluate(rpn, {"sub": lambda a, b: a - b}) == 6

    def test_zero_arity_function(self) -> None:
        rpn = [IdentToken("seven", argc=0)]
        assert evaluate(rpn, {"seven": lambda: 7}) == 7.0

    def test_result_is_float(self) -> None:
        assert isinstance(evaluate([IdentToken("n")], {"n": 3}), float)


class TestFailures:
    """Stack underflow, leftovers and arity mismatches."""

    @pytest.mark.parametrize(
        "rpn",
        [
            [],
            [UnaryToken("-")],
            [NumberToken(1), OperatorToken("+")],
            [NumberToken(1), NumberToken(2)],
            [PunctuationToken(Tag.PAREN_OPEN)],
        ],
    )
    def test_invalid_expression(self, rpn: list) -> None:
        with pytest.raises(EvaluationException) as exc:
            evaluate(rpn)
        assert exc.value.message == "invalid expression"

    def test_too_few_values_for_function(self, variables: dict) -> None:
        with pytest.raises(ArityException):
            evaluate([NumberToken(1), IdentToken("sqdist")], variables)

    def test_argument_count_mismatch(self, variables: dict) -> None:
        rpn = [NumberToken(2), NumberToken(3), IdentToken("inc", argc=2)]
        with pytest.raises(ArityException) as exc:
            evaluate(rpn, variables)
        assert exc.value.message == "'inc' takes 1 argument(s), 2 given"

    def test_function_errors_propagate(self) -> None:
        def boom(x):
            raise KeyError(x)

        with pytest.raises(KeyError):
            evaluate([NumberToken(1), IdentToken("boom", argc=1)], {"boom": boom})


class TestArithmetic:
    """IEEE-754 results instead of Python arithmetic errors."""

    def test_division_by_zero(self) -> None:
        assert divide(1.0, 0.0) == math.inf
        assert divide(-1.0, 0.0) == -math.inf
        assert divide(1.0, -0.0) == -math.inf
        assert math.isnan(divide(0.0, 0.0))

    def test_modulo_follows_dividend(self) -> None:
        assert modulo(10.0, 3.0) == 1.0
        assert modulo(-10.0, 3.0) == -1.0
        assert math.isnan(modulo(1.0, 0.0))
        assert math.isnan(modulo(math.inf, 2.0))

    def test_power_edge_cases(self) -> None:
        assert power(2.0, -2.0) == 0.25
        assert power(10.0, 400.0) == math.inf
        assert power(-10.0, 401.0) == -math.inf
        assert power(0.0, -1.0) == math.inf
        assert math.isnan(power(-8.0, 1 / 3))
