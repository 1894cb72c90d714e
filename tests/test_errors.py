"""Tests for diagnostic rendering."""

import pytest

from rpn_calc import eval_float
from rpn_calc.errors import (
    CalcException, LexException, SyntaxException, BindingException,
    EvaluationException, ArityException,
)


class TestRendering:
    """Caret diagnostics."""

    def test_bad_character(self) -> None:
        expected = "calc: bad character ':'\n      1:5\n       ^"
        with pytest.raises(LexException) as exc:
            eval_float("1:5")
        assert str(exc.value) == expected

    def test_caret_under_bad_number(self) -> None:
        with pytest.raises(LexException) as exc:
            eval_float("2 * .")
        lines = str(exc.value).split("\n")
        assert lines[0] == "calc: bad number '.'"
        assert lines[2].index("^") - len("calc: ") == 4

    def test_without_offset(self) -> None:
        assert str(SyntaxException("bad comma")) == "calc: bad comma"

    def test_attributes(self) -> None:
        error = LexException("bad character '$'", "1$", 1)
        assert (error.message, error.expression, error.offset) == ("bad character '$'", "1$", 1)


class TestHierarchy:
    """Every diagnostic is a CalcException."""

    @pytest.mark.parametrize(
        "cls",
        [LexException, SyntaxException, BindingException, EvaluationException, ArityException],
    )
    def test_subclass(self, cls: type) -> None:
        assert issubclass(cls, CalcException)

    def test_arity_is_an_evaluation_error(self) -> None:
        assert issubclass(ArityException, EvaluationException)
