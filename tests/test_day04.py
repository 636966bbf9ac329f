import pytest

from aoc2025.day04 import accessible_rolls, parse_grid, solve, solve_2

EXAMPLE = "\n".join(
    [
        "..@@.@@@@.",
        "@@@.@@@.@@",
        "@@@@@.@.@@",
        "@.@@@@..@.",
        "@@.@@@@.@@",
        ".@@@@@@@.@",
        ".@.@.@.@@@",
        "@.@@@.@@@@",
        ".@@@@@@@@.",
        "@.@.@@@.@.",
    ]
)

FULL_BLOCK = "@@@\n@@@\n@@@"


def test_parse_grid_positions():
    assert parse_grid("@.\n.@") == frozenset({(0, 0), (1, 1)})


def test_parse_grid_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_grid("@@@\n@@")


def test_parse_grid_rejects_empty_text():
    with pytest.raises(ValueError):
        parse_grid("")


def test_accessible_rolls_are_rolls():
    grid = parse_grid(EXAMPLE)
    assert accessible_rolls(grid) <= grid


def test_isolated_rolls_are_all_accessible():
    grid = parse_grid("@.@\n...\n@.@")
    assert accessible_rolls(grid) == grid


def test_full_block_only_corners_accessible():
    grid = parse_grid(FULL_BLOCK)
    assert accessible_rolls(grid) == frozenset({(0, 0), (0, 2), (2, 0), (2, 2)})


def test_full_block_is_removed_entirely():
    assert solve_2(FULL_BLOCK) == len(parse_grid(FULL_BLOCK))


def test_solve_matches_accessible_count():
    assert solve(FULL_BLOCK) == len(accessible_rolls(parse_grid(FULL_BLOCK)))


def test_removal_bounds():
    first = solve(EXAMPLE)
    total = solve_2(EXAMPLE)
    assert first <= total <= len(parse_grid(EXAMPLE))