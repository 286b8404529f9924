# -*- coding: utf-8 -*-
import logging
import time
from typing import Optional

from sudoku.grid import Grid

log = logging.getLogger(__name__)


def solve(grid: Grid, in_place: bool = False) -> Optional[Grid]:
    """
    Fills in the empty cells by depth-first search, trying candidates in ascending order.
    Returns the first complete valid grid found or None if the puzzle has no solution.
    The passed grid is never modified.

    With in_place=True a single working grid is mutated and each assignment is reverted
    after an unsuccessful branch, instead of copying the grid for every branch.
    The result is the same.
    """
    time_start = time.time()

    if not grid.is_consistent():
        log.debug("Givens repeat a digit in a row, column or block")
        return None

    working = grid.copy()
    if in_place:
        res = working if _solve_in_place(working) else None
    else:
        res = _solve0(working)

    log.debug("%s in %.1f ms", "Solved" if res is not None else "No solution",
              (time.time() - time_start) * 1000)
    return res


def _solve0(grid: Grid) -> Optional[Grid]:
    cur_cell = grid.first_empty()

    # If all cells are filled:
    if cur_cell is None:
        if grid.is_valid():
            return grid
        return None

    for v in grid.candidates(cur_cell):
        grid_next = grid.copy()
        grid_next.set(cur_cell, v)

        res = _solve0(grid_next)
        if res is not None:
            return res

    return None


def _solve_in_place(grid: Grid) -> bool:
    cur_cell = grid.first_empty()

    if cur_cell is None:
        return grid.is_valid()

    for v in grid.candidates(cur_cell):
        grid.set(cur_cell, v)
        if _solve_in_place(grid):
            return True
        grid.clear(cur_cell)

    return False
