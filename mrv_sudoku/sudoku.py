from __future__ import annotations

from .generator import generate
from .grid import SIZE, Grid, RulesState, Uniqueness, check_pos
from .rules import is_correct
from .solver import solve

# --------------------------
# Public API
# --------------------------


def format_is_correct(grid: Grid) -> bool:
    """True if the grid was read from well-formed input."""
    return grid.format_ok


def has_unique_solution(grid: Grid) -> Uniqueness:
    """
    Whether grid has a unique choice solution, i.e. one reached through
    forced moves only. UNKNOWN until the grid has been solved or generated.
    """
    assert isinstance(grid, Grid), "has_unique_solution needs a Grid"
    return grid.unique


def _invalidate(grid: Grid) -> None:
    grid.initialized = False
    grid.rules_ok = RulesState.UNKNOWN
    grid.unique = Uniqueness.UNKNOWN


def insert_value(grid: Grid, row: int, col: int, val: int) -> None:
    """Set (row, col) to val in place. Candidates and flags become stale."""
    assert isinstance(grid, Grid), "insert_value needs a Grid"
    check_pos(row, col)
    assert 1 <= val <= SIZE, f"Value {val} out of range"
    grid.update_value(row, col, val)
    _invalidate(grid)


def delete_value(grid: Grid, row: int, col: int) -> None:
    """Empty (row, col) in place. Candidates and flags become stale."""
    assert isinstance(grid, Grid), "delete_value needs a Grid"
    check_pos(row, col)
    grid.update_value(row, col, 0)
    _invalidate(grid)


__all__ = [
    "delete_value",
    "format_is_correct",
    "generate",
    "has_unique_solution",
    "insert_value",
    "is_correct",
    "solve",
]
