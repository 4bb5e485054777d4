"""Bracket matching checks, recursive and stack based."""

from __future__ import annotations

from .linear import Stack

_OPENERS = {")": "(", "]": "[", "}": "{"}


def _trim(expr: str, lo: int, hi: int) -> tuple[int, int]:
    while lo <= hi and expr[lo] not in "()":
        lo += 1
    while lo <= hi and expr[hi] not in "()":
        hi -= 1
    return lo, hi


def _divide(expr: str, lo: int, hi: int) -> int:
    mi = lo
    depth = 1
    while depth > 0:
        mi += 1
        if mi >= hi:
            break
        if expr[mi] == "(":
            depth += 1
        elif expr[mi] == ")":
            depth -= 1
    return mi


def _paren_range(expr: str, lo: int, hi: int) -> bool:
    lo, hi = _trim(expr, lo, hi)
    if lo > hi:
        return True
    if expr[lo] != "(" or expr[hi] != ")":
        return False
    mi = _divide(expr, lo, hi)
    if mi > hi:
        return False
    return _paren_range(expr, lo + 1, mi - 1) and _paren_range(expr, mi + 1, hi)


def paren_recursive(expr: str) -> bool:
    """Check round parentheses by divide and conquer."""
    if not expr:
        return True
    return _paren_range(expr, 0, len(expr) - 1)


def paren_iterative(expr: str) -> bool:
    """Check (), [] and {} nesting with a stack."""
    stack: Stack[str] = Stack()
    for ch in expr:
        if ch in "([{":
            stack.push(ch)
        elif ch in _OPENERS:
            if stack.empty() or stack.pop() != _OPENERS[ch]:
                return False
    return stack.empty()