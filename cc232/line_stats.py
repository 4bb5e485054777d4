"""Summary statistics over a sequence of text lines."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class LineSummary:
    total_lines: int = 0
    nonempty_lines: int = 0
    total_chars: int = 0
    longest_line_length: int = 0


def summarize_lines(lines: Sequence[str]) -> LineSummary:
    """Count lines, non-empty lines, characters and the longest length."""
    lengths = [len(line) for line in lines]
    return LineSummary(
        total_lines=len(lengths),
        nonempty_lines=sum(1 for n in lengths if n),
        total_chars=sum(lengths),
        longest_line_length=max(lengths, default=0),
    )


def count_lines_longer_than(lines: Iterable[str], limit: int) -> int:
    """Number of lines whose length is strictly greater than limit."""
    return sum(1 for line in lines if len(line) > limit)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read lines from standard input and print their summary."""
    parser = argparse.ArgumentParser(
        description="Resume las lineas leidas de la entrada estandar."
    )
    parser.parse_args(argv)

    lines = [line.removesuffix("\n") for line in sys.stdin]
    summary = summarize_lines(lines)
    sys.stdout.write(
        f"total_lineas={summary.total_lines}\n"
        f"lineas_no_vacias={summary.nonempty_lines}\n"
        f"total_caracteres={summary.total_chars}\n"
        f"longitud_linea_mas_larga={summary.longest_line_length}\n"
        f"lineas_mayores_a_10={count_lines_longer_than(lines, 10)}\n"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())