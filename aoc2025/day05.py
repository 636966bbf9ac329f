"""Day 5: checking ingredient ids against ranges of fresh ids."""

from __future__ import annotations

from typing import NamedTuple

IdRange = tuple[int, int]


class Database(NamedTuple):
    """Inclusive fresh-id ranges and the ids of the available ingredients."""

    ranges: list[IdRange]
    ids: list[int]


def _parse_id(field: str) -> int:
    digits = field.removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid ingredient id {field!r}")
    return int(digits)


def parse_database(text: str) -> Database:
    """Parse the range lines, a blank line, then one available id per line."""
    range_block, separator, id_block = text.strip().partition("\n\n")
    if not separator:
        raise ValueError("the database has no blank line between ranges and ids")
    ranges = []
    for line in range_block.splitlines():
        start, dash, end = line.partition("-")
        if not dash:
            raise ValueError(f"range {line!r} has no '-'")
        ranges.append((_parse_id(start), _parse_id(end)))
    ids = [_parse_id(line) for line in id_block.splitlines()]
    return Database(ranges, ids)


def merge(ranges: list[IdRange]) -> list[IdRange]:
    """Merge overlapping inclusive ranges, returning them sorted by start."""
    if not ranges:
        raise ValueError("no ranges to merge")
    first, *rest = sorted(ranges, key=lambda id_range: id_range[0])
    merged = [first]
    for start, end in rest:
        last_start, last_end = merged[-1]
        if last_end < start:
            merged.append((start, end))
        else:
            merged[-1] = (last_start, max(last_end, end))
    return merged


def solve(text: str) -> int:
    """Count the available ids that fall inside some fresh range."""
    database = parse_database(text)
    return sum(
        any(start <= food_id <= end for start, end in database.ranges)
        for food_id in database.ids
    )


def solve_2(text: str) -> int:
    """Count every id covered by at least one fresh range."""
    return sum(end - start + 1 for start, end in merge(parse_database(text).ranges))