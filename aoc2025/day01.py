"""Day 1: a dial of 100 positions, turned left and right from position 50."""

from __future__ import annotations

from typing import NamedTuple

DIAL_SIZE = 100
START_POSITION = 50


class Rotation(NamedTuple):
    """One turn of the dial: a direction (``"L"`` or ``"R"``) and a distance."""

    direction: str
    distance: int


def _trunc_div(value: int) -> int:
    """Divide by the dial size, rounding toward zero."""
    quotient = abs(value) // DIAL_SIZE
    return quotient if value >= 0 else -quotient


def _trunc_rem(value: int) -> int:
    """Remainder by the dial size, taking the sign of ``value``."""
    return value - DIAL_SIZE * _trunc_div(value)


def _turn(position: int, rotation: Rotation) -> int:
    turns = _trunc_rem(rotation.distance)
    if rotation.direction == "L":
        return _trunc_rem(position - turns + DIAL_SIZE)
    return _trunc_rem(position + turns)


def parse_rotations(text: str) -> list[Rotation]:
    """Parse one rotation per line, such as ``L68`` or ``R14``."""
    rotations = []
    for line in text.splitlines():
        direction, distance = line[:1], line[1:]
        if direction not in ("L", "R"):
            raise ValueError(f"unknown direction in rotation {line!r}")
        rotations.append(Rotation(direction, int(distance)))
    return rotations


def solve(text: str) -> int:
    """Count the rotations that leave the dial pointing at zero."""
    position = START_POSITION
    hits = 0
    for rotation in parse_rotations(text):
        position = _turn(position, rotation)
        if position == 0:
            hits += 1
    return hits


def solve_2(text: str) -> int:
    """Count every time the dial points at zero, including during a rotation."""
    position = START_POSITION
    total = 0
    for rotation in parse_rotations(text):
        if rotation.direction == "L":
            reached = position - rotation.distance
            passes = 1 if reached <= 0 and position != 0 else 0
            passes += abs(_trunc_div(reached))
        else:
            passes = _trunc_div(position + rotation.distance)
        position = _turn(position, rotation)
        total += passes
    return total