import io

import pytest

from mrv_sudoku.grid import RulesState, Uniqueness
from mrv_sudoku.text import (
    format_errors,
    format_grid,
    parse_grid,
    print_errors,
    print_grid,
    read_grid,
)

CANONICAL = """\
1 . . . . 7 . 9 .
. 3 . . 2 . . . 8
. . 9 6 . . 5 . .
. . 5 3 . . 9 . .
. 1 . . 8 . . . 2
6 . . . . 4 . . .
3 . . . . . . 1 .
. 4 . . . . . . 7
. . 7 . . . 3 . .
"""


def test_round_trip_of_canonical_text():
    out = io.StringIO()
    print_grid(read_grid(io.StringIO(CANONICAL)), out)
    assert out.getvalue() == CANONICAL


def test_parse_sets_flags():
    grid = parse_grid(CANONICAL)
    assert grid.format_ok
    assert grid.rules_ok is RulesState.UNKNOWN
    assert grid.unique is Uniqueness.UNKNOWN
    assert not grid.initialized
    assert grid.value(0, 0) == 1
    assert grid.value(0, 1) == 0


def test_zero_reads_as_empty_and_prints_as_dot():
    text = CANONICAL.replace(".", "0")
    grid = parse_grid(text)
    assert grid.format_ok
    assert format_grid(grid) + "\n" == CANONICAL


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\n".join(CANONICAL.split("\n")[:8]),
        CANONICAL.replace("1 . . . . 7", "x . . . . 7"),
        CANONICAL.replace("1 . . . . 7", "10 . . . . 7"),
        CANONICAL.replace("1 . . . . 7", "1 . . . . . 7"),
        CANONICAL.replace(". 3 . . 2", "3 . . 2"),
    ],
)
def test_malformed_input(text):
    assert not parse_grid(text).format_ok


def test_format_errors_lists_conflicts_and_empty_cells():
    text = CANONICAL.replace("1 . . . . 7 . 9 .", "1 6 . . . 7 . 9 6")
    lines = format_errors(parse_grid(text), rules_only=False)
    assert lines[0] == "In row 1, number 6 appears in columns 2 9"
    assert lines[1].startswith("Empty cells: (1,3) (1,4) (1,5) (1,7) (2,1)")
    assert not any(line.startswith("In ") for line in lines[1:])


def test_format_errors_rules_only_skips_empty_cells():
    assert format_errors(parse_grid(CANONICAL), rules_only=True) == []


def test_format_errors_reports_cells_without_choices():
    rows = ["1 2 3 4 5 6 7 8 .", ". . . . . . . . 9"] + [" ".join("." * 9)] * 7
    out = io.StringIO()
    print_errors(parse_grid("\n".join(rows) + "\n"), rules_only=False, stream=out)
    lines = out.getvalue().splitlines()
    assert lines[0].endswith("[71]")
    assert lines[1] == "Empty cells with no choices: (1,9) [1]"
