"""Command line entry point printing the answer for every solved day."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from aoc2025 import day01, day02, day03, day04, day05, day06

Solver = Callable[[str], int]

_SOLVERS: tuple[tuple[int, tuple[Solver, ...]], ...] = (
    (1, (day01.solve, day01.solve_2)),
    (2, (day02.solve, day02.solve_2)),
    (3, (day03.solve, day03.solve_2)),
    (4, (day04.solve, day04.solve_2)),
    (5, (day05.solve, day05.solve_2)),
    (6, (day06.solve,)),
)


def run(input_dir: str | Path) -> list[str]:
    """Solve every day from ``day_NN.txt`` files in ``input_dir``; return report lines."""
    directory = Path(input_dir)
    lines = []
    for day, solvers in _SOLVERS:
        text = (directory / f"day_{day:02d}.txt").read_text(encoding="utf-8")
        lines.extend(f"day {day:02d}: {solver(text)}" for solver in solvers)
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Print the answers for all days; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="aoc2025", description="Print the puzzle answers for every day."
    )
    parser.add_argument(
        "input_dir",
        nargs="?",
        default="input",
        help="directory holding day_01.txt, day_02.txt, ... (default: input)",
    )
    args = parser.parse_args(argv)
    try:
        lines = run(args.input_dir)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())