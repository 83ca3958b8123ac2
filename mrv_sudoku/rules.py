from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .constraints import init_choices
from .grid import BSIZE, DIGITS, SIZE, Grid, Pos, RulesState


class Line(Enum):
    """A row, column or block, with the word used for positions inside it."""

    COLUMN = ("column", "rows")
    ROW = ("row", "columns")
    BLOCK = ("block", "cells")

    def __init__(self, label: str, members: str) -> None:
        self.label = label
        self.members = members


def line_cells(index: int, line: Line) -> List[Pos]:
    """Cells of line ``index`` (0-based) in scan order."""
    assert 0 <= index < SIZE, f"Line index {index} out of range"
    if line is Line.ROW:
        return [(index, i) for i in range(SIZE)]
    if line is Line.COLUMN:
        return [(i, index) for i in range(SIZE)]
    br = (index // BSIZE) * BSIZE
    bc = (index % BSIZE) * BSIZE
    return [(br + i // BSIZE, bc + i % BSIZE) for i in range(SIZE)]


@dataclass(frozen=True)
class LineConflict:
    """A digit that appears more than once in a line (1-based numbering)."""

    line: Line
    index: int
    value: int
    positions: Tuple[int, ...]

    def __str__(self) -> str:
        where = " ".join(str(p) for p in self.positions)
        return (
            f"In {self.line.label} {self.index}, number {self.value} "
            f"appears in {self.line.members} {where}"
        )


def errors_in_line(
    grid: Grid, index: int, line: Line, report: bool = True
) -> List[LineConflict]:
    """
    Duplicate digits in one row, column or block.

    With report=False the scan stops at the first conflict, so the result
    is only good for an existence check.
    """
    cells = line_cells(index, line)
    conflicts: List[LineConflict] = []
    for k in DIGITS:
        found = tuple(
            i + 1 for i, (r, c) in enumerate(cells) if grid.cells[r][c].value == k
        )
        if len(found) > 1:
            conflicts.append(LineConflict(line, index + 1, k, found))
            if not report:
                return conflicts
    return conflicts


def find_conflicts(grid: Grid) -> List[LineConflict]:
    """Every conflict in the grid: columns, then rows, then blocks."""
    conflicts: List[LineConflict] = []
    for line in (Line.COLUMN, Line.ROW, Line.BLOCK):
        for k in range(SIZE):
            conflicts.extend(errors_in_line(grid, k, line))
    return conflicts


def set_rules(grid: Grid) -> None:
    """Resolve ``rules_ok`` to OK or VIOLATED."""
    assert isinstance(grid, Grid), "set_rules needs a Grid"
    for k in range(SIZE):
        if (
            errors_in_line(grid, k, Line.COLUMN, report=False)
            or errors_in_line(grid, k, Line.ROW, report=False)
            or errors_in_line(grid, k, Line.BLOCK, report=False)
        ):
            grid.rules_ok = RulesState.VIOLATED
            return
    grid.rules_ok = RulesState.OK


def errors_empty(grid: Grid, report: bool = True) -> List[Pos]:
    """Empty cells in raster order; only the first one when report=False."""
    empty: List[Pos] = []
    for r, c in grid.positions():
        if not grid.cells[r][c].value:
            empty.append((r, c))
            if not report:
                break
    return empty


def is_correct(grid: Grid, rules_only: bool) -> bool:
    """
    True if the grid breaks no rule and, unless rules_only, has no empty
    cell. The argument is never modified.
    """
    assert isinstance(grid, Grid), "is_correct needs a Grid"
    if grid.rules_ok is RulesState.UNKNOWN:
        grid = grid.copy()
        set_rules(grid)
    if grid.rules_ok is RulesState.VIOLATED:
        return False
    if not rules_only and errors_empty(grid, report=False):
        return False
    return True


def dead_ends(grid: Grid) -> List[Pos]:
    """Empty cells left without any candidate."""
    if not grid.initialized:
        grid = grid.copy()
        init_choices(grid)
    return [(r, c) for r, c in errors_empty(grid) if not grid.cells[r][c].count]
