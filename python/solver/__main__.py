#!/usr/bin/env python
# -*- coding: utf-8 -*-
import argparse
import logging
import sys
from typing import List, Optional

from sudoku import ParseError
from sudoku.grid import Grid
from solver import solve

log = logging.getLogger("solver")

EXIT_PARSE_ERROR = 1
EXIT_UNSOLVABLE = 2


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m solver",
        description="Solves a 9x9 sudoku. The puzzle is 81 whitespace-separated cells, "
                    "a digit 1-9 or '*' for an empty cell, one row per line.")
    parser.add_argument("filename", nargs="?", default=None,
                        help="read the puzzle from this file instead of standard input")
    parser.add_argument("--in-place", action="store_true",
                        help="search with a single grid reverting assignments instead of copying it")
    parser.add_argument("-v", "--verbose", action="store_true", help="be verbose")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr)

    try:
        if args.filename is None:
            grid = Grid.from_text(sys.stdin.buffer)
        else:
            log.debug("Reading %s", args.filename)
            with open(args.filename, "rb") as f:
                grid = Grid.from_text(f)
    except OSError as e:
        log.error("Can't read the puzzle: %s", e)
        return EXIT_PARSE_ERROR
    except ParseError as e:
        log.error("Can't parse the puzzle: %s", e)
        return EXIT_PARSE_ERROR

    log.debug("Solving:\n%s", grid)
    solved = solve(grid, in_place=args.in_place)
    if solved is None:
        log.error("The puzzle has no solution")
        return EXIT_UNSOLVABLE

    sys.stdout.write(str(solved))
    return 0


if __name__ == '__main__':
    sys.exit(main())
