"""Game of Life board: cell storage, evolution rules and map loading."""

from __future__ import annotations

import random
import re
from collections.abc import Iterable, Iterator
from os import PathLike

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_STRICT_INT = re.compile(r"[+-]?[0-9]+")
_NEIGHBOUR_OFFSETS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class Board:
    """A bounded rectangular grid of live and dead cells."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"board dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells = [[False] * width for _ in range(height)]

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})"

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} board")

    def is_alive(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, alive: bool) -> None:
        self._check(x, y)
        self._cells[y][x] = bool(alive)

    def toggle(self, x: int, y: int) -> bool:
        """Flip a cell and return its new state."""
        self._check(x, y)
        self._cells[y][x] = not self._cells[y][x]
        return self._cells[y][x]

    def count_neighbors(self, x: int, y: int) -> int:
        """Count live cells among the eight neighbours; the edges do not wrap."""
        return sum(
            1
            for dx, dy in _NEIGHBOUR_OFFSETS
            if 0 <= x + dx < self.width
            and 0 <= y + dy < self.height
            and self._cells[y + dy][x + dx]
        )

    def step(self) -> None:
        """Advance the board by one generation."""
        new_cells = []
        for y, row in enumerate(self._cells):
            new_row = []
            for x, alive in enumerate(row):
                neighbours = self.count_neighbors(x, y)
                new_row.append(neighbours in (2, 3) if alive else neighbours == 3)
            new_cells.append(new_row)
        self._cells = new_cells

    def living(self) -> Iterator[tuple[int, int]]:
        """Yield the coordinates of live cells, row by row."""
        for y, row in enumerate(self._cells):
            for x, alive in enumerate(row):
                if alive:
                    yield (x, y)


def parse_int(text: str) -> int:
    """Parse a whole string as a 32-bit signed integer, rejecting anything else."""
    if not text.isascii() or not _STRICT_INT.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_size(text: str) -> int:
    """Parse a grid size: a strict, non-negative integer."""
    value = parse_int(text)
    if value < 0:
        raise ValueError(f"size must be non-negative: {text!r}")
    return value


def create_board(width: int, height: int, padding: int) -> Board:
    """Create an empty board with ``padding`` blank cells on every side."""
    return Board(width + 2 * padding, height + 2 * padding)


def _tokens(line: str) -> list[str]:
    return [token for token in line.split(" ") if token]


def _atoi(token: str) -> int:
    match = re.match(r"[ \t\n\v\f\r]*([+-]?[0-9]+)", token)
    return int(match.group(1)) if match else 0


def parse_board(lines: Iterable[str], padding: int) -> Board:
    """Build a padded board from rows of space-separated numbers.

    The width is taken from the first row; a non-zero number is a live cell.
    """
    rows = list(lines)
    width = len(_tokens(rows[0])) if rows else 0
    board = create_board(width, len(rows), padding)
    for y, line in enumerate(rows, start=padding):
        for x, token in enumerate(_tokens(line)):
            column = padding + x
            if x >= board.width or column >= board.width:
                break
            board.set(column, y, _atoi(token) != 0)
    return board


def load_board(path: str | PathLike[str], padding: int) -> Board:
    """Read a board from a text file; see :func:`parse_board`."""
    with open(path, encoding="utf-8") as handle:
        return parse_board(handle, padding)


def randomize(board: Board, padding: int, rng: random.Random | None = None) -> None:
    """Fill the area inside the padding with random live and dead cells."""
    rng = rng if rng is not None else random.Random()
    for y in range(padding, board.height - padding):
        for x in range(padding, board.width - padding):
            board.set(x, y, rng.randrange(2) == 1)