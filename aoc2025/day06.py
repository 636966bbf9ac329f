"""Day 6: a worksheet of column-wise arithmetic problems."""

from __future__ import annotations

import math
from typing import NamedTuple

OPERATORS = ("+", "*")


class Problem(NamedTuple):
    """One column of the worksheet: an operator and its operands."""

    operator: str
    operands: tuple[int, ...]

    def evaluate(self) -> int:
        """Add or multiply the operands."""
        if self.operator == "+":
            return sum(self.operands)
        return math.prod(self.operands)


def _parse_number(field: str) -> int:
    digits = field.removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid number {field!r}")
    return int(digits)


def parse_worksheet(text: str) -> list[Problem]:
    """Parse rows of numbers followed by a row of operators, one per column."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("the worksheet is empty")
    operators = lines[-1].split()
    if not operators:
        raise ValueError("the worksheet has no operators")
    unknown = [op for op in operators if op not in OPERATORS]
    if unknown:
        raise ValueError(f"unknown operator {unknown[0]!r}")
    numbers = [_parse_number(field) for line in lines[:-1] for field in line.split()]
    width = len(operators)
    if len(numbers) % width:
        raise ValueError(
            f"{len(numbers)} numbers do not fill {width} columns evenly"
        )
    return [
        Problem(operator, tuple(numbers[column::width]))
        for column, operator in enumerate(operators)
    ]


def solve(text: str) -> int:
    """Sum the answers of every problem on the worksheet."""
    return sum(problem.evaluate() for problem in parse_worksheet(text))