"""N-queens placement by iterative backtracking on an explicit stack."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .linear import Stack


@dataclass(frozen=True)
class Queen:
    """A queen at row x, column y."""

    x: int = 0
    y: int = 0

    def conflicts(self, other: "Queen") -> bool:
        """True if both queens share a row, a column or a diagonal."""
        return (
            self.x == other.x
            or self.y == other.y
            or self.x + self.y == other.x + other.y
            or self.x - self.y == other.x - other.y
        )


@dataclass
class NQueensResult:
    n: int = 0
    solutions: int = 0
    checks: int = 0
    placements: List[List[int]] = field(default_factory=list)


def place_queens(n: int, collect_placements: bool = True) -> NQueensResult:
    """Count (and optionally collect) every placement of n non-attacking queens.

    Each placement lists the column of the queen in each row. ``checks``
    counts the pairwise conflict tests made during the search.
    """
    result = NQueensResult(n=n)
    if n <= 0:
        return result

    solution: Stack[Queen] = Stack()
    q = Queen(0, 0)

    def conflicts_with_any(candidate: Queen) -> bool:
        for placed in solution:
            result.checks += 1
            if candidate.conflicts(placed):
                return True
        return False

    while True:
        if len(solution) >= n or q.y >= n:
            if solution.empty():
                break
            q = solution.pop()
            q = Queen(q.x, q.y + 1)
        else:
            while q.y < n and conflicts_with_any(q):
                q = Queen(q.x, q.y + 1)

            if q.y < n:
                solution.push(q)
                if len(solution) >= n:
                    result.solutions += 1
                    if collect_placements:
                        result.placements.append([queen.y for queen in solution])
                q = Queen(q.x + 1, 0)

        if not (q.x > 0 or q.y < n):
            break

    return result