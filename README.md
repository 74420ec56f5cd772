# navalbattle

A small Battleship toolkit. It provides a square board of water cells and ships of length three. Ships can be placed horizontally, vertically or along either diagonal. Three area-of-effect abilities (cone, cross and octahedron) can be stamped onto a board.

## Cell values

| Value | `Cell` member  | Meaning                |
|-------|----------------|------------------------|
| 0     | `WATER`        | Water                  |
| 3     | `SHIP`         | Ship                   |
| 5     | `ABILITY_AREA` | Area hit by an ability |
| 8     | `HIT_SHIP`     | Ship hit by an ability |

## Installing

```
pip install .
```

## Command line

```
navalbattle [novice|adventurer|master]
```

The command prints a demonstration board for the chosen level. It uses `master` when no level is given.

- `novice`: one horizontal ship and one vertical ship, shown as plain digits.
- `adventurer`: two straight ships and two diagonal ships.
- `master`: four ships, followed by the 5x5 patterns of the three abilities. After that it prints each ability applied to its own copy of the board, rendered with ANSI colours.

The exit status is 0. If a ship cannot be placed, the command prints the error message and exits with status 1. Run `navalbattle --help` for the usage text.

## Library use

```python
from navalbattle.board import Board, Direction, PlacementError
from navalbattle.abilities import Ability, pattern_for, apply_ability, render_pattern

board = Board(10)
board.place_ship(1, 3, Direction.HORIZONTAL)
board.place_ship(7, 2, Direction.DIAGONAL_ASC)

try:
    board.place_ship(1, 4, Direction.VERTICAL)   # overlaps the first ship
except PlacementError as err:
    print(err)

print(board.render())

pattern = pattern_for(Ability.CROSS, 5)
print(render_pattern(pattern, "Cross"))

hit = board.copy()
apply_ability(hit, pattern, 5, 5)
print(hit.render_colored())
```

### `navalbattle.board`

- `Board(size=10)` is a square grid that starts as all water.
  - Cells are read and written with `board[row, col]`. Positions off the board raise `IndexError`.
  - Iterating over a board yields its rows as lists.
- `Board.can_place(row, col, direction)` reports whether a ship fits on water. It does not change the board.
- `Board.place_ship(row, col, direction)` marks the ship and returns its cells. It raises `PlacementError`, a subclass of `ValueError`, if the ship leaves the board or overlaps another ship.
- `Board.copy()` returns an independent board.
- `Board.render()` gives a plain-text view with row and column indices.
- `Board.render_colored()` gives the same view with ANSI colours.
- `ship_cells(row, col, direction, length=3)` lists the coordinates a ship would take.
- `Direction` has four members:
  - `HORIZONTAL`
  - `VERTICAL`
  - `DIAGONAL_DESC`, running down and to the right
  - `DIAGONAL_ASC`, running up and to the right

### `navalbattle.abilities`

- `cone(size=5)`, `cross(size=5)` and `octahedron(size=5)` build 0/1 patterns.
- `pattern_for(ability, size=5)` builds the pattern for an `Ability` member.
- `apply_ability(board, pattern, row, col)` centres the pattern on `(row, col)` and changes the board in place:
  - water under the pattern becomes 5;
  - ships under the pattern become 8;
  - parts of the pattern that fall outside the board are ignored.
- `render_pattern(pattern, name)` renders a pattern as text under a title.

## What it does not do

The package sets up boards and shows ability effects. It does not play a game: there are no turns, no shots chosen by a player, no opponent and no saved games.

## Running the tests

```
pip install .[test]
pytest
```