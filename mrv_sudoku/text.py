"""
Plain text input and output of grids.

The accepted format is 9 lines of 9 cells separated by a space char. Empty
cells are denoted by a dot (a zero is accepted too). Example::

    1 . . . . 7 . 9 .
    . 3 . . 2 . . . 8
    . . 9 6 . . 5 . .
    . . 5 3 . . 9 . .
    . 1 . . 8 . . . 2
    6 . . . . 4 . . .
    3 . . . . . . 1 .
    . 4 . . . . . . 7
    . . 7 . . . 3 . .

Grids are printed in the same format, with dots for empty cells.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .grid import SIZE, Grid, Pos
from .rules import dead_ends, errors_empty, find_conflicts

EMPTY_TOKENS = {".", "0"}


def parse_grid(text: str) -> Grid:
    """Parse text into a grid; format_ok is False if it is malformed."""
    grid = Grid()
    lines = text.split("\n")
    if len(lines) < SIZE:
        return grid
    for r, line in enumerate(lines[:SIZE]):
        tokens = line.split()
        if len(tokens) != SIZE:
            return grid
        for c, tok in enumerate(tokens):
            if tok in EMPTY_TOKENS:
                continue
            if len(tok) != 1 or not "1" <= tok <= "9":
                return grid
            grid.update_value(r, c, int(tok))
    grid.format_ok = True
    return grid


def read_grid(stream: Optional[TextIO] = None) -> Grid:
    return parse_grid((stream or sys.stdin).read())


def format_grid(grid: Grid) -> str:
    return str(grid)


def print_grid(grid: Grid, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    out.write(format_grid(grid) + "\n")


def _cell_list(title: str, cells: List[Pos]) -> str:
    where = " ".join(f"({r + 1},{c + 1})" for r, c in cells)
    return f"{title}: {where} [{len(cells)}]"


def format_errors(grid: Grid, rules_only: bool) -> List[str]:
    """
    Diagnostics for grid: repeated digits per column, row and block, then,
    unless rules_only, empty cells with and without candidates left.
    """
    lines = [str(conflict) for conflict in find_conflicts(grid)]
    if rules_only:
        return lines

    stuck = dead_ends(grid)
    open_cells = [pos for pos in errors_empty(grid) if pos not in stuck]
    if open_cells:
        lines.append(_cell_list("Empty cells", open_cells))
    if stuck:
        lines.append(_cell_list("Empty cells with no choices", stuck))
    return lines


def print_errors(grid: Grid, rules_only: bool, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    for line in format_errors(grid, rules_only):
        out.write(line + "\n")
