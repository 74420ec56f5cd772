"""Special abilities: area-of-effect patterns and their application to a board."""

from __future__ import annotations

from enum import IntEnum

from navalbattle.board import Board, Cell

ABILITY_SIZE = 5


class Ability(IntEnum):
    """Kinds of special ability."""

    CONE = 0
    CROSS = 1
    OCTAHEDRON = 2


def _empty(size):
    if size <= 0:
        raise ValueError(f"pattern size must be positive, got {size}")
    return [[0] * size for _ in range(size)]


def cone(size=ABILITY_SIZE):
    """Return a cone pattern that widens downwards from the top centre."""
    pattern = _empty(size)
    for i, row in enumerate(pattern):
        width = 2 * i + 1
        start = int((size - width) / 2)
        for j in range(max(start, 0), min(start + width, size)):
            row[j] = 1
    return pattern


def cross(size=ABILITY_SIZE):
    """Return a cross pattern centred in the grid."""
    pattern = _empty(size)
    center = size // 2
    pattern[center] = [1] * size
    for row in pattern:
        row[center] = 1
    return pattern


def octahedron(size=ABILITY_SIZE):
    """Return a diamond pattern centred in the grid."""
    pattern = _empty(size)
    center = size // 2
    for i, row in enumerate(pattern):
        width = size - 2 * abs(i - center)
        if width > 0:
            start = (size - width) // 2
            for j in range(start, start + width):
                row[j] = 1
    return pattern


_BUILDERS = {
    Ability.CONE: cone,
    Ability.CROSS: cross,
    Ability.OCTAHEDRON: octahedron,
}


def pattern_for(ability, size=ABILITY_SIZE):
    """Return the pattern of the given ability."""
    return _BUILDERS[Ability(ability)](size)


def apply_ability(board: Board, pattern, row, col):
    """Mark the pattern on ``board`` centred at (row, col), in place.

    Water under the pattern becomes ability area, ships become hit ships;
    parts of the pattern outside the board are ignored.
    """
    center = len(pattern) // 2
    for i, pattern_row in enumerate(pattern):
        for j, active in enumerate(pattern_row):
            if active != 1:
                continue
            r, c = row - center + i, col - center + j
            if not (0 <= r < board.size and 0 <= c < board.size):
                continue
            cell = board[r, c]
            if cell == Cell.SHIP:
                board[r, c] = Cell.HIT_SHIP
            elif cell == Cell.WATER:
                board[r, c] = Cell.ABILITY_AREA
    return board


def render_pattern(pattern, name):
    """Render an ability pattern as text under a titled header."""
    size = len(pattern)
    lines = ["", f"Matriz da habilidade {name} ({size}x{size}):"]
    lines.extend("".join(f"{value} " for value in row) for row in pattern)
    return "\n".join(lines) + "\n"