import math

import pytest

from cc232.expression import (
    EvaluationResult,
    ExpressionError,
    apply_binary,
    apply_unary,
    evaluate_expression,
    evaluate_only,
    factorial_int,
    format_number,
    is_unary_minus,
    remove_spaces,
    to_rpn,
)


def test_public_expression():
    result = evaluate_expression("(0!+1)*2^(3!+4)-(5!-67-(8+9))")
    assert result.rpn == "0 ! 1 + 2 3 ! 4 + ^ * 5 ! 67 - 8 9 + - -"
    assert math.isclose(result.value, 2012.0, abs_tol=1e-9)


def test_internal_expressions():
    r1 = evaluate_expression("3+4*2")
    assert r1.rpn == "3 4 2 * +"
    assert math.isclose(r1.value, 11.0, abs_tol=1e-9)

    r2 = evaluate_expression("5!+2^3")
    assert r2.rpn == "5 ! 2 3 ^ +"
    assert math.isclose(r2.value, 128.0, abs_tol=1e-9)

    r3 = evaluate_expression("-3+5")
    assert math.isclose(r3.value, 2.0, abs_tol=1e-9)


def test_result_is_dataclass_value():
    assert evaluate_expression("3+4*2") == EvaluationResult(11.0, "3 4 2 * +")


def test_spaces_are_ignored():
    assert remove_spaces(" 3 +\t4 ") == "3+4"
    assert evaluate_expression("3 + 4 * 2") == evaluate_expression("3+4*2")


def test_shortcuts():
    assert to_rpn("3+4*2") == "3 4 2 * +"
    assert evaluate_only("5!+2^3") == pytest.approx(128.0)


def test_fractional_numbers():
    result = evaluate_expression("1/2")
    assert result.rpn == "1 2 /"
    assert result.value == pytest.approx(0.5)


def test_unary_minus_detection():
    assert is_unary_minus("-3", 0)
    assert is_unary_minus("(-3)", 1)
    assert not is_unary_minus("3-4", 1)
    assert not is_unary_minus("-", 0)


def test_factorial_helpers():
    assert factorial_int(5) == 120
    assert apply_unary("!", 5.0) == 120.0
    with pytest.raises(ExpressionError):
        factorial_int(-1)
    with pytest.raises(ExpressionError):
        apply_unary("!", 2.5)
    with pytest.raises(ExpressionError):
        apply_unary("?", 2.0)


def test_binary_helpers():
    assert apply_binary(2.0, "^", 3.0) == 8.0
    with pytest.raises(ExpressionError):
        apply_binary(1.0, "/", 0.0)
    with pytest.raises(ExpressionError):
        apply_binary(1.0, "%", 2.0)


def test_format_number():
    assert format_number(3.0) == "3"
    assert format_number(-3.0) == "-3"
    assert format_number(0.5) == "0.5"


@pytest.mark.parametrize(
    "expr",
    ["1/0", "(3+4", "3+", "3a", "2.5!", "(0-1)!", "", "3)"],
)
def test_invalid_expressions_raise(expr):
    with pytest.raises(ExpressionError):
        evaluate_expression(expr)


def test_expression_error_is_value_error():
    with pytest.raises(ValueError):
        evaluate_expression("1/0")