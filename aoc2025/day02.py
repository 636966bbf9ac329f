"""Day 2: finding product ids made of repeated digit sequences."""

from __future__ import annotations


def _parse_id(field: str) -> int:
    if not (field.isascii() and field.lstrip("+").isdigit()):
        raise ValueError(f"invalid product id {field!r}")
    return int(field)


def parse_ranges(text: str) -> list[range]:
    """Parse comma-separated inclusive ranges such as ``11-22``."""
    ranges = []
    for field in text.strip().split(","):
        start, separator, end = field.partition("-")
        if not separator:
            raise ValueError(f"range {field!r} has no '-'")
        ranges.append(range(_parse_id(start), _parse_id(end) + 1))
    return ranges


def is_doubled(product_id: int) -> bool:
    """Tell whether the id's digits are one sequence written twice."""
    digits = str(product_id)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def is_repeated(product_id: int) -> bool:
    """Tell whether the id's digits are one sequence written two or more times."""
    digits = str(product_id)
    length = len(digits)
    return any(
        length % size == 0 and digits == digits[:size] * (length // size)
        for size in range(1, length // 2 + 1)
    )


def solve(text: str) -> int:
    """Sum the ids in all ranges whose digits are a sequence written twice."""
    return sum(
        product_id
        for ids in parse_ranges(text)
        for product_id in ids
        if is_doubled(product_id)
    )


def solve_2(text: str) -> int:
    """Sum the ids in all ranges whose digits repeat a sequence."""
    return sum(
        product_id
        for ids in parse_ranges(text)
        for product_id in ids
        if is_repeated(product_id)
    )