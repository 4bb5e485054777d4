"""Minimal timing helpers and three introductory list benchmarks."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

DEFAULT_TRIALS = 5


def measure_us(fn: Callable[[], object]) -> int:
    """Run fn once and return the elapsed whole microseconds."""
    start = time.perf_counter_ns()
    fn()
    end = time.perf_counter_ns()
    return (end - start) // 1000


def average_us(trials: int, fn: Callable[[], object]) -> float:
    """Mean of measure_us over the given number of runs."""
    if trials < 1:
        raise ValueError("trials must be at least 1")
    total = sum(measure_us(fn) for _ in range(trials))
    return total / trials


def format_header(title: str, n: int, trials: int) -> str:
    return f"{title}\nn = {n}, repeticiones = {trials}\n"


def format_result(label: str, avg_us: float) -> str:
    return f"{label:<30}: {avg_us:.2f} us\n"


def _report(title: str, n: int, trials: int, rows: List[Tuple[str, float]]) -> str:
    return format_header(title, n, trials) + "".join(
        format_result(label, avg) for label, avg in rows
    )


def bench_vector_growth(n: int = 300000, trials: int = DEFAULT_TRIALS) -> str:
    """Appending one by one against filling a preallocated list."""

    def without_reserve() -> int:
        values: List[int] = []
        for i in range(n):
            values.append(i)
        return sum(values)

    def with_reserve() -> int:
        values = [0] * n
        for i in range(n):
            values[i] = i
        return sum(values)

    return _report(
        "Benchmark inicial: crecimiento de vector",
        n,
        trials,
        [
            ("push_back sin reserve", average_us(trials, without_reserve)),
            ("push_back con reserve", average_us(trials, with_reserve)),
        ],
    )


def bench_vector_ops(n: int = 20000, trials: int = DEFAULT_TRIALS) -> str:
    """Appending at the end against inserting at the front or middle."""

    def push_back() -> int:
        values: List[int] = []
        for i in range(n):
            values.append(i)
        return sum(values)

    def insert_begin() -> int:
        values: List[int] = []
        for i in range(n):
            values.insert(0, i)
        return sum(values)

    def insert_middle() -> int:
        values: List[int] = []
        for i in range(n):
            values.insert(len(values) // 2, i)
        return sum(values)

    return _report(
        "Benchmark inicial: vector push_back vs insert",
        n,
        trials,
        [
            ("push_back al final", average_us(trials, push_back)),
            ("insert en begin()", average_us(trials, insert_begin)),
            ("insert en el medio", average_us(trials, insert_middle)),
        ],
    )


class _Link:
    __slots__ = ("value", "next")

    def __init__(self, value: int, nxt: Optional["_Link"]) -> None:
        self.value = value
        self.next = nxt


def bench_cache_effects(n: int = 2000000, trials: int = DEFAULT_TRIALS) -> str:
    """Sequential, shuffled-index and linked-node traversals."""
    values = list(range(1, n + 1))
    order = list(range(n))
    random.Random(232).shuffle(order)

    head: Optional[_Link] = None
    for value in reversed(values):
        head = _Link(value, head)

    def sequential() -> int:
        total = 0
        for value in values:
            total += value
        return total

    def random_access() -> int:
        total = 0
        for index in order:
            total += values[index]
        return total

    def linked() -> int:
        total = 0
        node = head
        while node is not None:
            total += node.value
            node = node.next
        return total

    return _report(
        "Benchmark inicial: conceptos basicos de cache/localidad",
        n,
        trials,
        [
            ("recorrido secuencial de vector", average_us(trials, sequential)),
            ("acceso aleatorio en vector", average_us(trials, random_access)),
            ("recorrido de std::list", average_us(trials, linked)),
        ],
    )


_BENCHES: Dict[str, Callable[..., str]] = {
    "growth": bench_vector_growth,
    "ops": bench_vector_ops,
    "cache": bench_cache_effects,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the named benchmarks, or all of them when none is named."""
    parser = argparse.ArgumentParser(description="Benchmarks introductorios de listas.")
    parser.add_argument("benches", nargs="*", metavar="BENCH",
                        help="one of: " + ", ".join(_BENCHES))
    parser.add_argument("--n", type=int, default=None, help="tamano del problema")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS,
                        help="repeticiones por caso")
    args = parser.parse_args(argv)
    unknown = [name for name in args.benches if name not in _BENCHES]
    if unknown:
        parser.error(f"benchmark desconocido: {', '.join(unknown)}")
    if args.trials < 1:
        parser.error("--trials debe ser al menos 1")
    if args.n is not None and args.n < 0:
        parser.error("--n no puede ser negativo")

    for name in args.benches or list(_BENCHES):
        bench = _BENCHES[name]
        if args.n is None:
            sys.stdout.write(bench(trials=args.trials))
        else:
            sys.stdout.write(bench(args.n, args.trials))
    return 0


if __name__ == "__main__":
    sys.exit(main())