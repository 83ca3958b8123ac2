from __future__ import annotations

import random
from typing import Optional, Tuple

from .grid import SIZE, Grid

Choice = Tuple[int, int, int]  # (row, col, value)


def try_next(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Choice]:
    """
    Minimum Remaining Values (MRV) heuristic.

    Scans all cells in raster order starting from a random cell, wrapping
    around, and keeps the first empty cell with the fewest candidates.
    Returns (row, col, value) with a random candidate of that cell, or None
    when the grid is complete or some empty cell has no candidate left.
    """
    rng = rng or random
    start = rng.randrange(SIZE) * SIZE + rng.randrange(SIZE)

    best = None
    count_min = SIZE + 1
    for step in range(SIZE * SIZE):
        r, c = divmod((start + step) % (SIZE * SIZE), SIZE)
        cell = grid.cells[r][c]
        if cell.value:
            continue
        # dead end: the partial assignment cannot be completed
        if cell.count == 0:
            return None
        if cell.count < count_min:
            best = (r, c)
            count_min = cell.count

    if best is None:
        return None

    r, c = best
    val = rng.randrange(SIZE) + 1
    while not grid.choice_is_valid(r, c, val):
        val = val % SIZE + 1
    return r, c, val
