"""Infix expression evaluation with simultaneous RPN generation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .linear import Stack
from .operator_priority import order_between

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_BINARY_BEFORE_SIGN = "(+-*/^"


class ExpressionError(ValueError):
    """Raised when an expression cannot be evaluated."""


@dataclass(frozen=True)
class EvaluationResult:
    value: float
    rpn: str


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in _DIGITS


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def remove_spaces(expr: str) -> str:
    """Drop ASCII whitespace from the expression."""
    return "".join(ch for ch in expr if ch not in _WHITESPACE)


def is_unary_minus(expr: str, i: int) -> bool:
    """True when the '-' at position i starts a negative literal."""
    if expr[i] != "-":
        return False
    if i + 1 >= len(expr):
        return False
    following = expr[i + 1]
    if not (_is_digit(following) or following == "."):
        return False
    if i == 0:
        return True
    return expr[i - 1] in _BINARY_BEFORE_SIGN


def factorial_int(n: int) -> int:
    if n < 0:
        raise ExpressionError("el factorial no se define para enteros negativos")
    return math.factorial(n)


def apply_binary(a: float, op: str, b: float) -> float:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0.0:
            raise ExpressionError("division entre cero")
        return a / b
    if op == "^":
        try:
            return math.pow(a, b)
        except OverflowError:
            return math.inf
        except ValueError:
            return math.inf if a == 0.0 else math.nan
    raise ExpressionError("operador binario no soportado")


def apply_unary(op: str, b: float) -> float:
    if op == "!":
        rounded = _round_half_away(b)
        if not math.isfinite(b) or abs(b - rounded) > 1e-9:
            raise ExpressionError("el factorial requiere un operando entero")
        return float(factorial_int(int(rounded)))
    raise ExpressionError("operador unario no soportado")


def format_number(value: float) -> str:
    """Integers without a fraction, other values with 12 significant digits."""
    rounded = _round_half_away(value)
    if math.isfinite(value) and abs(value - rounded) < 1e-9:
        return str(int(rounded))
    return f"{value:.12g}"


def _read_number(expr: str, i: int) -> tuple[float, int]:
    start = i
    if expr[i] == "-":
        i += 1
    while i < len(expr) and _is_digit(expr[i]):
        i += 1
    if i < len(expr) and expr[i] == ".":
        i += 1
        while i < len(expr) and _is_digit(expr[i]):
            i += 1
    text = expr[start:i]
    try:
        return float(text), i
    except ValueError:
        raise ExpressionError(f"numero invalido: {text!r}") from None


def evaluate_expression(raw_expr: str) -> EvaluationResult:
    """Evaluate an infix expression and return its value and RPN form."""
    expr = remove_spaces(raw_expr) + "\0"

    operands: Stack[float] = Stack()
    operators: Stack[str] = Stack()
    operators.push("\0")
    rpn: list[str] = []
    i = 0

    while not operators.empty():
        if i >= len(expr):
            raise ExpressionError("fin inesperado de la expresion")

        current = expr[i]
        if _is_digit(current) or current == "." or is_unary_minus(expr, i):
            number, i = _read_number(expr, i)
            operands.push(number)
            rpn.append(format_number(number))
            continue

        try:
            relation = order_between(operators.top(), current)
        except ValueError as exc:
            raise ExpressionError(str(exc)) from exc

        if relation == "<":
            operators.push(current)
            i += 1
        elif relation == "=":
            operators.pop()
            i += 1
        elif relation == ">":
            op = operators.pop()
            rpn.append(op)
            if op == "!":
                if operands.empty():
                    raise ExpressionError("falta operando para factorial")
                operands.push(apply_unary(op, operands.pop()))
            else:
                if len(operands) < 2:
                    raise ExpressionError("faltan operandos para el operador binario")
                right = operands.pop()
                left = operands.pop()
                operands.push(apply_binary(left, op, right))
        else:
            raise ExpressionError("orden de operadores invalido")

    if len(operands) != 1:
        raise ExpressionError("la expresion no se redujo a un unico valor")

    return EvaluationResult(operands.pop(), " ".join(rpn))


def to_rpn(expr: str) -> str:
    return evaluate_expression(expr).rpn


def evaluate_only(expr: str) -> float:
    return evaluate_expression(expr).value