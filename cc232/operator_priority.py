"""Operator ranks and the precedence table used by the evaluator."""

from __future__ import annotations

from enum import IntEnum


class Operator(IntEnum):
    ADD = 0
    SUB = 1
    MUL = 2
    DIV = 3
    POW = 4
    FAC = 5
    L_P = 6
    R_P = 7
    EOE = 8


# Row: operator on top of the stack; column: current operator.
_PRIORITY = (
    ">><<<<<>>",
    ">><<<<<>>",
    ">>>><<<>>",
    ">>>><<<>>",
    ">>>>><<>>",
    ">>>>>> >>",
    "<<<<<<<= ",
    "         ",
    "<<<<<<< =",
)

_RANKS = {
    "+": Operator.ADD,
    "-": Operator.SUB,
    "*": Operator.MUL,
    "/": Operator.DIV,
    "^": Operator.POW,
    "!": Operator.FAC,
    "(": Operator.L_P,
    ")": Operator.R_P,
    "\0": Operator.EOE,
}


def optr_to_rank(op: str) -> Operator:
    """Map an operator symbol to its rank; raise ValueError if unknown."""
    try:
        return _RANKS[op]
    except KeyError:
        raise ValueError("operador desconocido") from None


def order_between(op1: str, op2: str) -> str:
    """Return '<', '>', '=' or ' ' for stack-top op1 against current op2."""
    return _PRIORITY[optr_to_rank(op1)][optr_to_rank(op2)]