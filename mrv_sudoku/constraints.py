from __future__ import annotations

from typing import Dict, List, Set

from .grid import BSIZE, SIZE, Grid, Pos, block_start, check_pos


def _build_peers() -> Dict[Pos, List[Pos]]:
    """
    All cells sharing a row, column or block with each cell
    (the cell itself excluded).
    """
    table: Dict[Pos, List[Pos]] = {}
    for r in range(SIZE):
        for c in range(SIZE):
            nbs: Set[Pos] = set()
            for k in range(SIZE):
                nbs.add((r, k))
                nbs.add((k, c))
            br, bc = block_start(r), block_start(c)
            for dr in range(BSIZE):
                for dc in range(BSIZE):
                    nbs.add((br + dr, bc + dc))
            nbs.discard((r, c))
            table[(r, c)] = sorted(nbs)
    return table


_PEERS = _build_peers()


def peers(row: int, col: int) -> List[Pos]:
    check_pos(row, col)
    return _PEERS[(row, col)]


def used_in_peers(grid: Grid, row: int, col: int) -> Set[int]:
    """Digits placed in the row, column or block of (row, col)."""
    vals = set()
    for rr, cc in peers(row, col):
        v = grid.cells[rr][cc].value
        if v:
            vals.add(v)
    return vals


def init_choices(grid: Grid) -> None:
    """
    Recompute the candidates of every cell from scratch.

    Filled cells get an empty candidate set; empty cells get every digit
    not already used in their row, column and block. Does not touch the
    ``initialized`` flag, callers mark it.
    """
    assert isinstance(grid, Grid), "init_choices needs a Grid"
    for r, c in grid.positions():
        if grid.cells[r][c].value:
            grid.clear_choices(r, c)
            continue
        grid.fill_choices(r, c)
        for v in used_in_peers(grid, r, c):
            grid.remove_choice(r, c, v)


def place(grid: Grid, row: int, col: int, val: int) -> None:
    """
    Commit val at (row, col) and strip it from the candidates of
    every peer (forward checking).
    """
    assert isinstance(grid, Grid), "place needs a Grid"
    assert 1 <= val <= SIZE, f"Value {val} out of range"
    grid.update_value(row, col, val)
    grid.clear_choices(row, col)
    for rr, cc in peers(row, col):
        grid.remove_choice(rr, cc, val)
