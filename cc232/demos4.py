"""Demonstrations of stacks, queues and their applications."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, Sequence

from .bank import simulate
from .base_conversion import to_base_iterative, to_base_recursive
from .expression import evaluate_expression
from .linear import Queue, Stack
from .maze import Maze, find_path
from .nqueens import place_queens
from .parentheses import paren_iterative

_EXPRESSION = "(0!+1)*2^(3!+4)-(5!-67-(8+9))"
_MAZE_LAYOUT = ("#####", "#...#", "#.#.#", "#...#", "#####")


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _lines(lines: List[str]) -> str:
    return "".join(line + "\n" for line in lines)


def demo_stack_queue() -> str:
    stack: Stack[int] = Stack()
    for value in (5, 7, 9):
        stack.push(value)
    queue: Queue[int] = Queue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    return _lines([
        f"Tope de la pila = {stack.top()}",
        f"Elemento desapilado = {stack.pop()}",
        f"Frente de la cola = {queue.front()}",
        f"Elemento desencolado = {queue.dequeue()}",
    ])


def demo_base_conversion() -> str:
    n = 12345
    return _lines([
        f"12345 en base 8 (recursivo) = {to_base_recursive(n, 8)}",
        f"12345 en base 8 (iterativo) = {to_base_iterative(n, 8)}",
    ])


def demo_paren_rpn() -> str:
    evaluated = evaluate_expression(_EXPRESSION)
    return _lines([
        f"Parentesis balanceados (iterativo) = {_bool_text(paren_iterative(_EXPRESSION))}",
        f"Expresion en RPN = {evaluated.rpn}",
        f"Valor de la expresion = {evaluated.value:g}",
    ])


def demo_nqueens() -> str:
    result = place_queens(4)
    lines = [f"N = {result.n}, soluciones = {result.solutions}, verificaciones = {result.checks}"]
    lines.extend("".join(f"{col} " for col in placement) for placement in result.placements)
    return _lines(lines)


def demo_maze() -> str:
    path = find_path(Maze(_MAZE_LAYOUT), 1, 1, 3, 3)
    return _lines([
        f"Medida del camino = {len(path)}",
        "".join(f"({x},{y}) " for x, y in path),
    ])


def demo_bank() -> str:
    result = simulate(3, 10, 12345)
    lines = [f"Llegadas = {result.total_arrivals}, atendidos = {result.total_served}"]
    for step in result.timeline:
        queues = "".join(" [" + ",".join(str(t) for t in q) + "]" for q in step.queues)
        lines.append(f"t={step.now}:{queues}")
    return _lines(lines)


def demo_panorama() -> str:
    stack: Stack[int] = Stack()
    stack.push(1)
    stack.push(2)
    queue: Queue[int] = Queue()
    queue.enqueue(10)
    queue.enqueue(20)

    evaluated = evaluate_expression(_EXPRESSION)
    queens = place_queens(4)
    path = find_path(Maze(_MAZE_LAYOUT), 1, 1, 3, 3)
    bank = simulate(2, 6, 2024)

    return _lines([
        "Semana 4 cargada correctamente",
        f"Tope de la pila = {stack.top()}",
        f"Frente de la cola = {queue.front()}",
        f"12345 en base 8 = {to_base_iterative(12345, 8)}",
        f"Parentesis balanceados = {_bool_text(paren_iterative('a+(b*[c])'))}",
        f"Expresion en RPN = {evaluated.rpn}",
        f"Valor = {evaluated.value:g}",
        f"Soluciones de N-Reinas(4) = {queens.solutions}",
        f"Longitud del camino en el laberinto = {len(path)}",
        f"Llegadas al banco = {bank.total_arrivals}, atendidos = {bank.total_served}",
    ])


_DEMOS: Dict[str, Callable[[], str]] = {
    "stack_queue": demo_stack_queue,
    "base_conversion": demo_base_conversion,
    "paren_rpn": demo_paren_rpn,
    "nqueens": demo_nqueens,
    "maze": demo_maze,
    "bank": demo_bank,
    "panorama": demo_panorama,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the named demos, or all of them when none is named."""
    parser = argparse.ArgumentParser(description="Demos de pilas y colas.")
    parser.add_argument("demos", nargs="*", metavar="DEMO",
                        help="one of: " + ", ".join(_DEMOS))
    args = parser.parse_args(argv)
    unknown = [name for name in args.demos if name not in _DEMOS]
    if unknown:
        parser.error(f"demo desconocida: {', '.join(unknown)}")
    for name in args.demos or list(_DEMOS):
        sys.stdout.write(_DEMOS[name]())
    return 0


if __name__ == "__main__":
    sys.exit(main())