from __future__ import annotations

import logging
import random
from typing import Optional

from .constraints import init_choices, place
from .grid import Grid, RulesState, Uniqueness
from .rules import is_correct, set_rules
from .selector import try_next

log = logging.getLogger(__name__)


def solve(grid: Grid, rng: Optional[random.Random] = None) -> Grid:
    """
    Solve a copy of grid by MRV backtracking and return it.

    - A grid that breaks a rule comes back unchanged with unique=NO.
    - Forced moves (one candidate left) never clear ``unique``; the first
      branch point does.
    - The first branch that completes the grid wins, so when several
      solutions exist one of them is returned.
    - With no solution, the returned grid is the dead end that was
      reached; check ``is_correct(result, False)`` to tell.
    """
    assert isinstance(grid, Grid), "solve needs a Grid"
    return _search(grid.copy(), rng, 0)


def _search(grid: Grid, rng: Optional[random.Random], depth: int) -> Grid:
    if grid.rules_ok is RulesState.UNKNOWN:
        set_rules(grid)
    if grid.rules_ok is RulesState.VIOLATED:
        grid.unique = Uniqueness.NO
        return grid

    if not grid.initialized:
        init_choices(grid)
        grid.initialized = True

    # optimistic until a branch point is met
    if grid.unique is Uniqueness.UNKNOWN:
        grid.unique = Uniqueness.YES

    while True:
        choice = try_next(grid, rng)
        if choice is None:
            break
        row, col, val = choice

        if grid.count(row, col) == 1:
            place(grid, row, col, val)
            continue

        grid.unique = Uniqueness.NO
        log.debug(
            "Branching at depth %d: (%d,%d)=%d of %d choices",
            depth, row, col, val, grid.count(row, col),
        )
        branch = grid.copy()
        place(branch, row, col, val)
        branch = _search(branch, rng, depth + 1)
        if is_correct(branch, rules_only=False):
            return branch
        grid.remove_choice(row, col, val)

    if grid.unique is Uniqueness.YES and not is_correct(grid, rules_only=False):
        grid.unique = Uniqueness.NO
    return grid
