"""Tests for core.rpn_evaluator, core.operators and RPNValidator."""

import logging
import math
import warnings

import numpy as np
import pytest

from core import (
    DivisionByZero, MalformedExpression, Operators, RPNEvaluator, RPNValidator,
    StackUnderflow,
)
from core.token_system import number_token, operator_token, paren_token


def _seq(*items):
    """'3 4 +' 风格的简写构造RPN序列"""
    tokens = []
    for pos, item in enumerate(items):
        if isinstance(item, str):
            tokens.append(operator_token(item, pos))
        else:
            tokens.append(number_token(item, str(item), pos))
    return tokens


@pytest.mark.parametrize("items,expected", [
    ((3, 4, "+"), 7.0),
    ((10, 4, "-"), 6.0),
    ((3, 5, "*"), 15.0),
    ((8, 2, "/"), 4.0),
    ((3, 4, 2, "*", "+"), 11.0),
    ((10, 4, "-", 3, "-"), 3.0),
    ((5,), 5.0),
])
def test_evaluate(items, expected):
    result = RPNEvaluator.evaluate(_seq(*items))
    assert result == expected
    assert isinstance(result, float)


def test_operand_order():
    # 先出栈的是右操作数：2 8 / == 2 / 8
    assert RPNEvaluator.evaluate(_seq(2, 8, "/")) == 0.25
    assert RPNEvaluator.evaluate(_seq(2, 8, "-")) == -6.0


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        RPNEvaluator.evaluate(_seq(10, 0, "/"))
    with pytest.raises(DivisionByZero):
        RPNEvaluator.evaluate(_seq(1, 2, 2, "-", "/"))


@pytest.mark.parametrize("items", [
    ("+",),
    (1, "+"),
    (1, 2, "+", "*"),
])
def test_stack_underflow(items):
    with pytest.raises(StackUnderflow):
        RPNEvaluator.evaluate(_seq(*items))


@pytest.mark.parametrize("items", [
    (),
    (1, 2),
    (1, 2, 3, "+"),
])
def test_malformed_expression(items):
    with pytest.raises(MalformedExpression):
        RPNEvaluator.evaluate(_seq(*items))


def test_parenthesis_in_rpn_is_malformed():
    with pytest.raises(MalformedExpression):
        RPNEvaluator.evaluate([paren_token("(", 0)] + _seq(1))


def test_stack_size():
    assert RPNValidator.calculate_stack_size(_seq(1, 2, "+")) == 1
    assert RPNValidator.calculate_stack_size(_seq(1, 2)) == 2
    assert RPNValidator.calculate_stack_size(_seq(1, "+")) is None
    assert RPNValidator.calculate_stack_size([]) == 0
    assert RPNValidator.is_complete_expression(_seq(1, 2, 3, "*", "+"))
    assert not RPNValidator.is_complete_expression(_seq(1, 2))


def test_operators_float64():
    assert isinstance(Operators.add(1, 2), np.float64)
    assert Operators.apply('mul', 1.5, 4) == 6.0
    assert np.isinf(Operators.mul(1e308, 10))
    with pytest.raises(DivisionByZero):
        Operators.div(1, -0.0)
    with pytest.raises(AttributeError):
        Operators.apply('pow', 2, 3)


def test_incomplete_rpn_logs_stack_size(caplog):
    with caplog.at_level(logging.DEBUG, logger="core.rpn_evaluator"):
        with pytest.raises(MalformedExpression):
            RPNEvaluator.evaluate(_seq(1, 2))
    assert "simulated stack size: 2" in caplog.text


def test_complete_rpn_does_not_log_incomplete(caplog):
    with caplog.at_level(logging.DEBUG, logger="core.rpn_evaluator"):
        assert RPNEvaluator.evaluate(_seq(1, 2, "+")) == 3.0
    assert "Incomplete RPN expression" not in caplog.text


@pytest.mark.parametrize("op", ["+", "-"])
def test_infinite_operands_do_not_warn(op):
    # inf - inf 与 inf + (-inf) 都得到 nan，不应触发 RuntimeWarning
    left = number_token(float("inf"), "inf", 0)
    right = number_token(float("inf") if op == "-" else float("-inf"), "inf", 1)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = RPNEvaluator.evaluate([left, right, operator_token(op, 2)])
    assert math.isnan(result)
