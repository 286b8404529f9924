# -*- coding: utf-8 -*-
from typing import Optional

FIELD_SIDE = 9
BOX_SIDE = 3
CELL_COUNT = FIELD_SIDE * FIELD_SIDE

# Cells are stored as plain integers, 0 stands for an empty cell.
EMPTY = 0
DIGITS = range(1, FIELD_SIDE + 1)

BLANK = '*'
DIGIT_TOKENS = '123456789'


class ParseError(ValueError):
    def __init__(self, message: str, line: Optional[int] = None, token: Optional[str] = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
        self.token = token


def cell_to_token(cell: int) -> str:
    if cell == EMPTY:
        return BLANK
    return str(cell)


def token_to_cell(token: str) -> Optional[int]:
    """
    Returns the cell value for a single-character token,
    or None if the token isn't a digit 1-9 or the blank marker.
    """
    if token == BLANK:
        return EMPTY
    if len(token) == 1 and token in DIGIT_TOKENS:
        return int(token)
    return None
