"""Small list helpers contrasting read-only use, mutation and copying."""

from __future__ import annotations

import argparse
import sys
from itertools import pairwise
from typing import Iterable, List, MutableSequence, Optional, Sequence


def sum_readonly(values: Iterable[int]) -> int:
    """Sum the values without touching the container."""
    return sum(values)


def append_in_place(values: MutableSequence[int], x: int) -> None:
    """Append x to the caller's list."""
    values.append(x)


def appended_copy(values: Iterable[int], x: int) -> List[int]:
    """Return a new list with x appended; the argument is left unchanged."""
    copy = list(values)
    copy.append(x)
    return copy


def count_greater_than(values: Iterable[int], limit: int) -> int:
    return sum(1 for value in values if value > limit)


def is_strictly_increasing(values: Sequence[int]) -> bool:
    return all(a < b for a, b in pairwise(values))


def _braced(values: Iterable[int]) -> str:
    return "{" + ", ".join(str(v) for v in values) + "}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show how in-place changes and copies affect the original list."""
    parser = argparse.ArgumentParser(
        description="Muestra lectura, modificacion en sitio y copia de listas."
    )
    parser.parse_args(argv)

    original = [1, 2, 3]
    out = [f"original = {_braced(original)}"]
    out.append(f"suma_lectura(original) = {sum_readonly(original)}")
    append_in_place(original, 4)
    out.append(f"despues de append_in_place(original, 4): {_braced(original)}")
    copied = appended_copy(original, 99)
    out.append(f"despues de appended_copy(original, 99), original = {_braced(original)}")
    out.append(f"copia = {_braced(copied)}")
    sys.stdout.write("".join(line + "\n" for line in out))
    return 0


if __name__ == "__main__":
    sys.exit(main())