# -*- coding: utf-8 -*-
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from sudoku import CELL_COUNT, DIGITS, EMPTY, FIELD_SIDE, ParseError, cell_to_token, token_to_cell
from sudoku.views import UNITS, block_indices, col_indices, row_indices

_PERMUTATION = np.arange(1, FIELD_SIDE + 1)

TextSource = Union[str, bytes, Iterable[Union[str, bytes]]]


def _decoded_lines(source: Iterable[Union[str, bytes]]) -> Iterator[Tuple[int, str]]:
    """
    Yields (line number, text) pairs.
    Text streams decode while being iterated, so decoding errors are caught around next().
    """
    lines = iter(source)
    line_no = 0
    while True:
        line_no += 1
        try:
            line = next(lines)
        except StopIteration:
            return
        except UnicodeDecodeError:
            raise ParseError("not an ASCII line", line=line_no) from None
        if isinstance(line, bytes):
            try:
                line = line.decode('ascii')
            except UnicodeDecodeError:
                raise ParseError("not an ASCII line", line=line_no) from None
        yield line_no, line


class Grid:
    """
    A 9x9 field of cells addressed by linear index 0..80 in row-major order.
    Empty cells hold EMPTY, filled ones a digit 1-9.
    """

    def __init__(self, cells=None):
        if cells is None:
            self._cells = np.full(CELL_COUNT, EMPTY, dtype=np.uint8)
            return
        values = np.array(cells).reshape(-1)
        if values.shape != (CELL_COUNT,):
            raise ValueError(f"expected {CELL_COUNT} cells, got {values.shape[0]}")
        try:
            cells = values.astype(int)
        except (TypeError, ValueError):
            raise ValueError("cell values must be integers") from None
        if not np.array_equal(values, cells):
            raise ValueError("cell values must be integers")
        if np.any((cells < EMPTY) | (cells > FIELD_SIDE)):
            raise ValueError(f"cell values must be in [{EMPTY}, {FIELD_SIDE}]")
        self._cells = cells.astype(np.uint8)

    @classmethod
    def from_text(cls, source: TextSource) -> 'Grid':
        """
        Parses whitespace-separated single-character tokens, row by row:
        a digit 1-9 for a filled cell, '*' for an empty one.
        Exactly 81 tokens are expected.
        """
        if isinstance(source, (str, bytes)):
            source = source.splitlines()

        cells = []
        line_no = 0
        for line_no, line in _decoded_lines(source):
            for token in line.split():
                if len(token) != 1:
                    raise ParseError(f"expected a single character, got {token!r}", line=line_no, token=token)
                cell = token_to_cell(token)
                if cell is None:
                    raise ParseError(f"expected a digit 1-9 or '*', got {token!r}", line=line_no, token=token)
                if len(cells) == CELL_COUNT:
                    raise ParseError(f"more than {CELL_COUNT} cells", line=line_no, token=token)
                cells.append(cell)

        if len(cells) != CELL_COUNT:
            raise ParseError(f"expected {CELL_COUNT} cells, got {len(cells)}", line=line_no or None)
        return cls(cells)

    def cell_at(self, i: int) -> int:
        self._check_index(i)
        return int(self._cells[i])

    def set(self, i: int, digit: int):
        """
        Fills in the cell in place.
        """
        self._check_index(i)
        if digit not in DIGITS:
            raise ValueError(f"digit must be in [1, {FIELD_SIDE}], got {digit}")
        self._cells[i] = digit

    def clear(self, i: int):
        self._check_index(i)
        self._cells[i] = EMPTY

    def row_of(self, i: int) -> np.ndarray:
        return self._gather(row_indices(i))

    def col_of(self, i: int) -> np.ndarray:
        return self._gather(col_indices(i))

    def block_of(self, i: int) -> np.ndarray:
        return self._gather(block_indices(i))

    def first_empty(self) -> Optional[int]:
        empty = np.flatnonzero(self._cells == EMPTY)
        if empty.size == 0:
            return None
        return int(empty[0])

    def candidates(self, i: int) -> List[int]:
        """
        Digits not present in the row, column and block of the cell, ascending.
        """
        used = np.zeros(FIELD_SIDE + 1, dtype=bool)
        used[self.row_of(i)] = True
        used[self.col_of(i)] = True
        used[self.block_of(i)] = True
        # Index 0 is the EMPTY marker, not a digit.
        return [int(d) for d in np.flatnonzero(~used[1:]) + 1]

    def is_valid(self) -> bool:
        units = np.sort(self._cells[UNITS], axis=1)
        return bool(np.all(units == _PERMUTATION))

    def is_consistent(self) -> bool:
        """
        True if no row, column or block repeats a filled-in digit.
        Empty cells are ignored, so a partially filled grid may be consistent.
        """
        units = self._cells[UNITS]
        # counts[u, d - 1] is how many times digit d occurs in unit u.
        counts = np.sum(units[:, :, np.newaxis] == _PERMUTATION, axis=1)
        return bool(np.all(counts <= 1))

    def cells(self) -> List[int]:
        return [int(c) for c in self._cells]

    def copy(self) -> 'Grid':
        return Grid(self._cells)

    def _gather(self, indices: np.ndarray) -> np.ndarray:
        view = self._cells[indices]
        view.setflags(write=False)
        return view

    @staticmethod
    def _check_index(i: int):
        if not 0 <= i < CELL_COUNT:
            raise IndexError(f"cell index {i} is out of range [0, {CELL_COUNT})")

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __str__(self):
        lines = []
        for row in self._cells.reshape(FIELD_SIDE, FIELD_SIDE):
            lines.append(' '.join(cell_to_token(int(c)) for c in row))
        return '\n'.join(lines) + '\n'

    def __repr__(self):
        return f"Grid.from_text({' '.join(cell_to_token(c) for c in self.cells())!r})"
