# aoc2025

Solutions to the first six days of the 2025 Advent of Code puzzles.

## Installing

    pip install .

## Running

Put your puzzle inputs in one directory, with one file for each day:

    input/day_01.txt
    input/day_02.txt
    ...
    input/day_06.txt

Then run:

    aoc2025 input

The directory argument is optional and defaults to `input`. Each answer is printed on its own line, in the form `day 01: 1234`. Days 1 to 5 have two answers each. Day 6 has one. If a file is missing or cannot be parsed, the command prints `error: ...` to standard error and exits with status 1.

## Using it from Python

Each day has its own module, `aoc2025.day01` to `aoc2025.day06`. Each module has a `solve(text)` function. It takes the puzzle text and returns the answer as an integer. Days 1 to 5 also have `solve_2(text)` for the second part.

    from aoc2025 import day01, day05

    with open("input/day_01.txt", encoding="utf-8") as f:
        text = f.read()
    print(day01.solve(text), day01.solve_2(text))

    print(day05.merge([(3, 5), (10, 14), (16, 20), (12, 18)]))
    # [(3, 5), (10, 20)]

The modules also have smaller helpers:

- `day01.parse_rotations`
- `day02.parse_ranges`, `day02.is_doubled`, `day02.is_repeated`
- `day03.parse_banks`, `day03.max_joltage(bank, digits)`
- `day04.parse_grid`, `day04.accessible_rolls`
- `day05.parse_database`, `day05.merge`
- `day06.parse_worksheet`, which returns `Problem` tuples that each have an `evaluate()` method

Malformed input raises `ValueError`.

To get every answer at once, call `aoc2025.cli.run(input_dir)`. It returns the report lines without printing them.

## What it does not do

- It does not download puzzle inputs, and no inputs are included. You must supply them yourself.
- Day 6 has only the first part. It has no `solve_2`.
- Days after day 6 are not covered.

## Testing

    pip install .[test]
    pytest