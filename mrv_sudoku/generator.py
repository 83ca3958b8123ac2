from __future__ import annotations

import logging
import random
from typing import Optional

from .constraints import init_choices, place
from .grid import BSIZE, SIZE, Grid, RulesState, Uniqueness
from .rules import is_correct
from .selector import try_next
from .solver import solve

log = logging.getLogger(__name__)

COMPLETE_ATTEMPTS = 10


def _generated_grid() -> Grid:
    grid = Grid.empty()
    grid.rules_ok = RulesState.OK
    grid.unique = Uniqueness.YES
    return grid


def fallback_grid() -> Grid:
    """A fixed, always valid, fully completed grid."""
    grid = _generated_grid()
    for r, c in grid.positions():
        grid.update_value(r, c, (c + r * BSIZE + r // BSIZE) % SIZE + 1)
    return grid


def generate_complete(
    rng: Optional[random.Random] = None, attempts: int = COMPLETE_ATTEMPTS
) -> Grid:
    """
    Generate a random valid grid with no empty cell.

    Each attempt fills an empty grid cell by cell, most constrained cell
    first, committing a random candidate without ever backtracking. If no
    attempt completes the grid, ``fallback_grid()`` is returned.
    """
    for attempt in range(attempts):
        grid = _generated_grid()
        for r, c in grid.positions():
            grid.fill_choices(r, c)

        while True:
            choice = try_next(grid, rng)
            if choice is None:
                break
            place(grid, *choice)

        if is_correct(grid, rules_only=False):
            log.debug("Complete grid found on attempt %d", attempt + 1)
            return grid
        log.debug("Attempt %d reached a dead end", attempt + 1)

    log.debug("No complete grid after %d attempts, using the fallback", attempts)
    return fallback_grid()


def generate(nelts: int, rng: Optional[random.Random] = None) -> Grid:
    """
    Generate a random puzzle with nelts filled cells.

    1) Generate a random fully completed grid.
    2) Clear a random cell on a copy and solve the copy. If it still has
       a unique choice solution, keep the copy and repeat.
    3) If not, try another cell. Once every filled cell has been tried
       without success, keep clearing random cells without checking until
       nelts filled cells remain.

    The returned grid has unique=YES only if the whole reduction kept a
    unique choice solution.
    """
    assert 0 <= nelts <= SIZE * SIZE, "nelts must be between 0 and 81"
    rng = rng or random
    to_remove = SIZE * SIZE - nelts

    # tried[r][c]: clearing (r, c) broke the unique choice solution
    tried = [[False] * SIZE for _ in range(SIZE)]
    still_unique = True

    grid = generate_complete(rng)

    while to_remove > 0:
        row = rng.randrange(SIZE)
        col = rng.randrange(SIZE)
        if not grid.value(row, col):
            continue

        if not still_unique:
            grid.update_value(row, col, 0)
            grid.initialized = False
            to_remove -= 1
            continue

        if tried[row][col]:
            continue

        scratch = grid.copy()
        scratch.update_value(row, col, 0)
        init_choices(scratch)
        scratch.initialized = True

        if solve(scratch, rng).unique is Uniqueness.YES:
            grid = scratch
            to_remove -= 1
            tried = [[False] * SIZE for _ in range(SIZE)]
            continue

        tried[row][col] = True
        if not any(
            grid.value(r, c) and not tried[r][c] for r, c in grid.positions()
        ):
            log.debug(
                "Unique choice solution lost with %d cells filled", grid.filled()
            )
            still_unique = False

    if not still_unique:
        grid.unique = Uniqueness.NO
    return grid
