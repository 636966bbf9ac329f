import pytest

from aoc2025.day03 import max_joltage, parse_banks, solve, solve_2

EXAMPLE = (
    "987654321111111\n"
    "811111111111119\n"
    "234234234234278\n"
    "818181911112111\n"
)


def _is_subsequence(needle, haystack):
    remaining = iter(haystack)
    return all(item in remaining for item in needle)


def test_example_part_one():
    assert solve(EXAMPLE) == 357


def test_example_part_two():
    assert solve_2(EXAMPLE) == 3121910778619


def test_parse_banks_reads_digits():
    assert parse_banks("120\n93\n") == [[1, 2, 0], [9, 3]]


@pytest.mark.parametrize("text", ["12a", "1 2", "98\n7x6"])
def test_non_digit_raises(text):
    with pytest.raises(ValueError):
        parse_banks(text)


def test_short_bank_raises():
    with pytest.raises(ValueError):
        max_joltage([9], 2)
    with pytest.raises(ValueError):
        solve_2("12345")


def test_using_every_battery_keeps_the_bank():
    assert max_joltage([3, 1, 4], 3) == 314


@pytest.mark.parametrize("digits", [1, 2, 5, 12])
def test_result_is_an_ordered_choice_of_batteries(digits):
    for bank in parse_banks(EXAMPLE):
        result = max_joltage(bank, digits)
        chosen = [int(c) for c in str(result)]
        assert len(chosen) == digits
        assert _is_subsequence(chosen, bank)


@pytest.mark.parametrize("digits", [1, 2, 5, 12])
def test_result_beats_leading_and_trailing_runs(digits):
    for bank in parse_banks(EXAMPLE):
        result = max_joltage(bank, digits)
        leading = int("".join(map(str, bank[:digits])))
        trailing = int("".join(map(str, bank[-digits:])))
        assert result >= leading
        assert result >= trailing


def test_single_battery_is_the_maximum():
    for bank in parse_banks(EXAMPLE):
        assert max_joltage(bank, 1) == max(bank)


def test_more_batteries_never_lower_the_joltage():
    for bank in parse_banks(EXAMPLE):
        assert max_joltage(bank, 12) > max_joltage(bank, 2)