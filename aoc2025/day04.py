"""Day 4: finding paper rolls that a forklift can reach."""

from __future__ import annotations

from collections.abc import Set

ROLL = "@"
CROWD_LIMIT = 4

_NEIGHBOURS = tuple(
    (d_row, d_col)
    for d_row in (-1, 0, 1)
    for d_col in (-1, 0, 1)
    if (d_row, d_col) != (0, 0)
)

Position = tuple[int, int]


def parse_grid(text: str) -> frozenset[Position]:
    """Parse a rectangular map and return the (row, column) of every roll."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("the grid is empty")
    width = len(lines[0])
    rolls: set[Position] = set()
    for row, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(
                f"row {row} has {len(line)} cells, expected {width}"
            )
        rolls.update((row, col) for col, cell in enumerate(line) if cell == ROLL)
    return frozenset(rolls)


def _crowd(grid: Set[Position], position: Position) -> int:
    row, col = position
    return sum((row + d_row, col + d_col) in grid for d_row, d_col in _NEIGHBOURS)


def accessible_rolls(grid: Set[Position]) -> frozenset[Position]:
    """Return the rolls with fewer than four rolls among their eight neighbours."""
    return frozenset(
        position for position in grid if _crowd(grid, position) < CROWD_LIMIT
    )


def solve(text: str) -> int:
    """Count the rolls that can be reached right away."""
    return len(accessible_rolls(parse_grid(text)))


def solve_2(text: str) -> int:
    """Count the rolls removed by taking away reachable rolls until none are left."""
    rolls = set(parse_grid(text))
    removed = 0
    while reachable := accessible_rolls(rolls):
        rolls -= reachable
        removed += len(reachable)
    return removed