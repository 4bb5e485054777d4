"""Conversion of non-negative integers to bases 2..16 using a stack."""

from __future__ import annotations

from .linear import Stack

_DIGITS = "0123456789ABCDEF"


def validate_base(base: int) -> None:
    """Raise ValueError unless 2 <= base <= 16."""
    if base < 2 or base > 16:
        raise ValueError("la base debe estar entre 2 y 16")


def _check_number(n: int) -> None:
    if n < 0:
        raise ValueError("el numero debe ser no negativo")


def _push_recursive(stack: Stack[str], n: int, base: int) -> None:
    if n > 0:
        stack.push(_DIGITS[n % base])
        _push_recursive(stack, n // base, base)


def _push_iterative(stack: Stack[str], n: int, base: int) -> None:
    while n > 0:
        stack.push(_DIGITS[n % base])
        n //= base


def _drain(stack: Stack[str]) -> str:
    out = []
    while not stack.empty():
        out.append(stack.pop())
    return "".join(out)


def to_base_recursive(n: int, base: int) -> str:
    """Digits of n in the given base, produced recursively."""
    validate_base(base)
    _check_number(n)
    if n == 0:
        return "0"
    stack: Stack[str] = Stack()
    _push_recursive(stack, n, base)
    return _drain(stack)


def to_base_iterative(n: int, base: int) -> str:
    """Digits of n in the given base, produced iteratively."""
    validate_base(base)
    _check_number(n)
    if n == 0:
        return "0"
    stack: Stack[str] = Stack()
    _push_iterative(stack, n, base)
    return _drain(stack)