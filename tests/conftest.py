# tests/conftest.py
import random

import pytest

from mrv_sudoku.grid import BSIZE, SIZE, Grid

PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


def grid_from_digits(digits):
    """Build a grid from 81 digits, 0 for empty cells."""
    return Grid.from_board(
        [[int(ch) for ch in digits[r * SIZE:(r + 1) * SIZE]] for r in range(SIZE)]
    )


def is_solved_board(board):
    """Every row, column and block is a permutation of 1..9."""
    full = set(range(1, SIZE + 1))
    for i in range(SIZE):
        if set(board[i]) != full:
            return False
        if {board[r][i] for r in range(SIZE)} != full:
            return False
        br, bc = (i // BSIZE) * BSIZE, (i % BSIZE) * BSIZE
        block = {board[br + r][bc + c] for r in range(BSIZE) for c in range(BSIZE)}
        if block != full:
            return False
    return True


class FixedRng:
    """Stands in for random.Random; randrange returns scripted values in order."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        val = self.values.pop(0)
        assert 0 <= val < stop, f"scripted value {val} out of range({stop})"
        return val


@pytest.fixture
def from_digits():
    return grid_from_digits


@pytest.fixture
def solved_board():
    return is_solved_board


@pytest.fixture
def puzzle():
    return grid_from_digits(PUZZLE)


@pytest.fixture
def solution():
    return grid_from_digits(SOLUTION)


@pytest.fixture
def solution_board():
    return grid_from_digits(SOLUTION).board()


@pytest.fixture
def rng():
    return random.Random(1234)
