"""Game board for naval battle: cells, ship placement and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

BOARD_SIZE = 10
SHIP_LENGTH = 3

_COLOR_RESET = "\x1b[0m"


class Direction(IntEnum):
    """Orientation of a ship laid out from its starting cell."""

    HORIZONTAL = 0
    VERTICAL = 1
    DIAGONAL_DESC = 2  # top-left to bottom-right
    DIAGONAL_ASC = 3  # bottom-left to top-right


class Cell(IntEnum):
    """Contents of a board cell."""

    WATER = 0
    SHIP = 3
    ABILITY_AREA = 5
    HIT_SHIP = 8


_CELL_COLORS = {
    Cell.WATER: "\x1b[34m",
    Cell.SHIP: "\x1b[33m",
    Cell.ABILITY_AREA: "\x1b[35m",
    Cell.HIT_SHIP: "\x1b[31m",
}


class PlacementError(ValueError):
    """Raised when a ship cannot be placed at the requested position."""


_STEPS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DESC: (1, 1),
    Direction.DIAGONAL_ASC: (-1, 1),
}


def ship_cells(row, col, direction, length=SHIP_LENGTH):
    """Return the coordinates a ship of ``length`` occupies from (row, col)."""
    d_row, d_col = _STEPS[Direction(direction)]
    return [(row + d_row * k, col + d_col * k) for k in range(length)]


@dataclass
class Board:
    """A square grid of cells, initially all water."""

    size: int = BOARD_SIZE
    _cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"board size must be positive, got {self.size}")
        self._cells = [[Cell.WATER] * self.size for _ in range(self.size)]

    def _contains(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, position):
        row, col = position
        if not self._contains(row, col):
            raise IndexError(f"position {position} is outside the board")
        return row, col

    def __getitem__(self, position):
        row, col = self._check(position)
        return self._cells[row][col]

    def __setitem__(self, position, value):
        row, col = self._check(position)
        self._cells[row][col] = Cell(value)

    def __iter__(self):
        return (list(row) for row in self._cells)

    def can_place(self, row, col, direction):
        """Tell whether a ship fits on water starting at (row, col)."""
        if not self._contains(row, col):
            return False
        try:
            cells = ship_cells(row, col, direction)
        except ValueError:
            return False
        return all(
            self._contains(r, c) and self._cells[r][c] == Cell.WATER
            for r, c in cells
        )

    def place_ship(self, row, col, direction):
        """Place a ship starting at (row, col); raise PlacementError if it does not fit."""
        if not self.can_place(row, col, direction):
            raise PlacementError(
                f"cannot place ship at ({row}, {col}) facing {direction!r}"
            )
        cells = ship_cells(row, col, direction)
        for r, c in cells:
            self._cells[r][c] = Cell.SHIP
        return cells

    def copy(self):
        """Return an independent copy of this board."""
        other = Board(self.size)
        other._cells = [list(row) for row in self._cells]
        return other

    def render(self):
        """Render the board as plain text with row and column indices."""
        lines = ["", "  " + "".join(f"{j} " for j in range(self.size))]
        for i, row in enumerate(self._cells):
            lines.append(f"{i} " + "".join(f"{int(cell)} " for cell in row))
        return "\n".join(lines) + "\n"

    def render_colored(self):
        """Render the board with ANSI colours for each kind of cell."""
        lines = ["", "  " + "".join(f"{j:2d}" for j in range(self.size))]
        for i, row in enumerate(self._cells):
            parts = [f"{i:2d}"]
            for cell in row:
                color = _CELL_COLORS.get(cell)
                if color is None:
                    parts.append(" ?")
                else:
                    parts.append(f"{color} {int(cell)}{_COLOR_RESET}")
            lines.append("".join(parts))
        return "\n".join(lines) + "\n"