from mrv_sudoku.grid import Cell, Grid, RulesState, Uniqueness
from mrv_sudoku.rules import Line, LineConflict
from mrv_sudoku.sudoku import (
    delete_value,
    format_is_correct,
    generate,
    has_unique_solution,
    insert_value,
    is_correct,
    solve,
)

__all__ = [
    "Cell",
    "Grid",
    "Line",
    "LineConflict",
    "RulesState",
    "Uniqueness",
    "delete_value",
    "format_is_correct",
    "generate",
    "has_unique_solution",
    "insert_value",
    "is_correct",
    "solve",
]
