from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Sequence, Set, Tuple

SIZE = 9  # grid size 9x9
BSIZE = 3  # block size 3x3
DIGITS = range(1, SIZE + 1)

Pos = Tuple[int, int]
Board = List[List[int]]


# --------------------------
# Tri-state flags
# --------------------------


class RulesState(Enum):
    UNKNOWN = -1
    VIOLATED = 0
    OK = 1


class Uniqueness(Enum):
    UNKNOWN = -1
    NO = 0
    YES = 1


def block_start(i: int) -> int:
    """Largest multiple of BSIZE not greater than i."""
    return (i // BSIZE) * BSIZE


def check_pos(row: int, col: int) -> None:
    assert 0 <= row < SIZE, f"Row index {row} out of range"
    assert 0 <= col < SIZE, f"Column index {col} out of range"


# --------------------------
# Cells and grid
# --------------------------


@dataclass
class Cell:
    """
    One grid cell. A value of 0 means the cell is empty.

    The candidate set is only meaningful for empty cells of an
    initialized grid; filled cells keep it empty.
    """

    value: int = 0
    candidates: Set[int] = field(default_factory=set)

    @property
    def count(self) -> int:
        return len(self.candidates)

    def copy(self) -> "Cell":
        return Cell(self.value, set(self.candidates))


def _empty_cells() -> List[List[Cell]]:
    return [[Cell() for _ in range(SIZE)] for _ in range(SIZE)]


@dataclass
class Grid:
    """
    A 9x9 sudoku puzzle plus its puzzle-level flags.

    Grids are used as values: every search branch or tentative change
    works on ``copy()`` and never on a shared instance.
    """

    cells: List[List[Cell]] = field(default_factory=_empty_cells)
    format_ok: bool = False
    rules_ok: RulesState = RulesState.UNKNOWN
    unique: Uniqueness = Uniqueness.UNKNOWN
    initialized: bool = False  # candidates reflect the current values

    @classmethod
    def from_board(cls, board: Sequence[Sequence[int]]) -> "Grid":
        assert len(board) == SIZE, f"Board must have {SIZE} rows"
        grid = cls()
        for r, row in enumerate(board):
            assert len(row) == SIZE, f"Row {r} must have {SIZE} cells"
            for c, v in enumerate(row):
                grid.update_value(r, c, v)
        grid.format_ok = True
        return grid

    @staticmethod
    def empty() -> "Grid":
        return Grid.from_board([[0] * SIZE for _ in range(SIZE)])

    def copy(self) -> "Grid":
        return Grid(
            [[cell.copy() for cell in row] for row in self.cells],
            self.format_ok,
            self.rules_ok,
            self.unique,
            self.initialized,
        )

    # --------------------------
    # Values
    # --------------------------

    def value(self, row: int, col: int) -> int:
        check_pos(row, col)
        return self.cells[row][col].value

    def update_value(self, row: int, col: int, n: int) -> None:
        check_pos(row, col)
        assert 0 <= n <= SIZE, f"Value {n} out of range"
        self.cells[row][col].value = n

    def board(self) -> Board:
        return [[cell.value for cell in row] for row in self.cells]

    def positions(self) -> Iterator[Pos]:
        for r in range(SIZE):
            for c in range(SIZE):
                yield r, c

    def empty_positions(self) -> List[Pos]:
        return [(r, c) for r, c in self.positions() if not self.cells[r][c].value]

    def filled(self) -> int:
        return SIZE * SIZE - len(self.empty_positions())

    # --------------------------
    # Candidates
    # --------------------------

    def count(self, row: int, col: int) -> int:
        check_pos(row, col)
        return self.cells[row][col].count

    def choice_is_valid(self, row: int, col: int, n: int) -> bool:
        check_pos(row, col)
        return n in self.cells[row][col].candidates

    def set_choice(self, row: int, col: int, n: int) -> None:
        check_pos(row, col)
        assert 1 <= n <= SIZE, f"Candidate {n} out of range"
        self.cells[row][col].candidates.add(n)

    def remove_choice(self, row: int, col: int, n: int) -> None:
        """Drop n from the candidates of (row, col); a no-op for 0 or absent n."""
        check_pos(row, col)
        assert 0 <= n <= SIZE, f"Candidate {n} out of range"
        self.cells[row][col].candidates.discard(n)

    def fill_choices(self, row: int, col: int) -> None:
        check_pos(row, col)
        self.cells[row][col].candidates = set(DIGITS)

    def clear_choices(self, row: int, col: int) -> None:
        check_pos(row, col)
        self.cells[row][col].candidates = set()

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(cell.value or ".") for cell in row) for row in self.cells
        )
