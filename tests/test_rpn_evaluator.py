"""
Unit tests for the RPN evaluator and the operator implementations.
"""

import math

import pytest

from core import (
    eval_rpn, to_rpn, tokenize, EvalError, Operators, Token, TokenType
)
from core.token_system import number_token, operator_token, function_token, LEFT_PAREN


def run(expression):
    return eval_rpn(to_rpn(tokenize(expression)))


class TestRPNEvaluator:

    def test_binary_operation(self):
        rpn = (number_token(2), number_token(3), operator_token('+'))
        assert eval_rpn(rpn) == 5.0

    def test_operand_order(self):
        rpn = (number_token(10), number_token(4), operator_token('-'))
        assert eval_rpn(rpn) == 6.0
        rpn = (number_token(1), number_token(4), operator_token('/'))
        assert eval_rpn(rpn) == 0.25

    def test_function_application(self):
        rpn = (number_token(16), function_token('sqrt'))
        assert eval_rpn(rpn) == 4.0

    def test_operator_underflow(self):
        with pytest.raises(EvalError, match="invalid expression"):
            eval_rpn((number_token(2), operator_token('+')))

    def test_function_without_argument(self):
        with pytest.raises(EvalError, match="invalid function argument"):
            eval_rpn((function_token('sin'),))

    def test_leftover_operands(self):
        with pytest.raises(EvalError, match="invalid expression"):
            eval_rpn((number_token(1), number_token(2)))

    def test_empty_sequence(self):
        with pytest.raises(EvalError, match="invalid expression"):
            eval_rpn(())

    def test_grouping_token_is_rejected(self):
        with pytest.raises(EvalError, match="invalid expression"):
            eval_rpn((number_token(1), LEFT_PAREN))

    def test_division_by_zero(self):
        with pytest.raises(EvalError, match="division by zero"):
            run("5/0")
        with pytest.raises(EvalError, match="division by zero"):
            run("5/(1-1)")

    def test_truncating_remainder(self):
        assert run("7%3") == 1.0
        assert run("-7%3") == -1.0
        assert run("7%-3") == 1.0
        assert run("5.5%2") == 1.5

    def test_power(self):
        assert run("2^10") == 1024.0
        assert run("2^-1") == 0.5
        assert run("4^0.5") == 2.0

    def test_overflow_is_returned_as_infinity(self):
        assert math.isinf(run("10^400"))

    def test_domain_errors(self):
        with pytest.raises(EvalError, match="invalid sqrt"):
            run("sqrt(-1)")
        with pytest.raises(EvalError, match="invalid ln"):
            run("ln(0)")
        with pytest.raises(EvalError, match="invalid ln"):
            run("ln(-2)")
        with pytest.raises(EvalError, match="invalid log"):
            run("log10(0)")

    def test_function_values(self):
        assert run("sin(0)") == 0.0
        assert run("cos(0)") == 1.0
        assert run("tan(0)") == 0.0
        assert run("ln(1)") == 0.0
        assert run("log10(1000)") == pytest.approx(3.0)
        assert run("sqrt(0)") == 0.0


class TestOperators:

    def test_results_are_python_floats(self):
        assert type(Operators.add(1.0, 2.0)) is float
        assert type(Operators.sin(1.0)) is float

    def test_mod_by_zero_is_nan(self):
        assert math.isnan(Operators.mod(5.0, 0.0))

    def test_div_by_negative_zero(self):
        with pytest.raises(EvalError, match="division by zero"):
            Operators.div(1.0, -0.0)

    def test_token_constructors_validate(self):
        with pytest.raises(ValueError):
            operator_token('&')
        with pytest.raises(ValueError):
            function_token('exp')
        assert operator_token('^') == Token(TokenType.OPERATOR, '^')
