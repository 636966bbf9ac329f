"""Day 3: picking the largest joltage from banks of battery digits."""

from __future__ import annotations

_DIGITS = "0123456789"


def parse_banks(text: str) -> list[list[int]]:
    """Parse one bank per line, each character a single decimal digit."""
    banks = []
    for line in text.strip().splitlines():
        bad = [c for c in line if c not in _DIGITS]
        if bad:
            raise ValueError(f"non-digit {bad[0]!r} in bank {line!r}")
        banks.append([int(c) for c in line])
    return banks


def max_joltage(bank: list[int], digits: int) -> int:
    """Return the largest number formed by ``digits`` batteries kept in order."""
    if len(bank) < digits:
        raise ValueError(f"bank of {len(bank)} batteries cannot supply {digits}")
    total = 0
    start = 0
    for remaining in range(digits, 0, -1):
        window = bank[start : len(bank) - remaining + 1]
        best = max(window)
        start += window.index(best) + 1
        total = total * 10 + best
    return total


def solve(text: str) -> int:
    """Sum the best two-battery joltage of every bank."""
    return sum(max_joltage(bank, 2) for bank in parse_banks(text))


def solve_2(text: str) -> int:
    """Sum the best twelve-battery joltage of every bank."""
    return sum(max_joltage(bank, 12) for bank in parse_banks(text))