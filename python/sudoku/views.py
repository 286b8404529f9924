# -*- coding: utf-8 -*-
import numpy as np

from sudoku import FIELD_SIDE, BOX_SIDE, CELL_COUNT

_ALL = np.arange(CELL_COUNT).reshape(FIELD_SIDE, FIELD_SIDE)

# ROWS[r], COLS[c] and BLOCKS[b] hold the linear indices of the row, column and block.
ROWS = _ALL.copy()
COLS = _ALL.T.copy()
BLOCKS = np.array([
    _ALL[box_row * BOX_SIDE:(box_row + 1) * BOX_SIDE,
         box_col * BOX_SIDE:(box_col + 1) * BOX_SIDE].reshape(-1)
    for box_row in range(BOX_SIDE)
    for box_col in range(BOX_SIDE)
])
UNITS = np.vstack([ROWS, COLS, BLOCKS])

for _table in (ROWS, COLS, BLOCKS, UNITS):
    _table.setflags(write=False)


def _check_index(i: int):
    if not 0 <= i < CELL_COUNT:
        raise IndexError(f"cell index {i} is out of range [0, {CELL_COUNT})")


def row_of_cell(i: int) -> int:
    _check_index(i)
    return i // FIELD_SIDE


def col_of_cell(i: int) -> int:
    _check_index(i)
    return i % FIELD_SIDE


def block_of_cell(i: int) -> int:
    box_row = row_of_cell(i) // BOX_SIDE
    box_col = col_of_cell(i) // BOX_SIDE
    return box_row * BOX_SIDE + box_col


def row_indices(i: int) -> np.ndarray:
    return ROWS[row_of_cell(i)]


def col_indices(i: int) -> np.ndarray:
    return COLS[col_of_cell(i)]


def block_indices(i: int) -> np.ndarray:
    return BLOCKS[block_of_cell(i)]
