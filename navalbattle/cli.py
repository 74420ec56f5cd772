"""Command-line output for the three game levels."""

from __future__ import annotations

import argparse
import sys

from navalbattle.abilities import Ability, apply_ability, pattern_for, render_pattern
from navalbattle.board import Board, Direction, PlacementError

_BLUE = "\x1b[34m"
_YELLOW = "\x1b[33m"
_MAGENTA = "\x1b[35m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"

_TITLE = "Batalha Naval - Oceanic Games"


def _place(board, row, col, direction, message):
    try:
        board.place_ship(row, col, direction)
    except PlacementError as exc:
        raise PlacementError(message) from exc


def novice_report():
    """Board with one horizontal and one vertical ship."""
    board = Board()
    _place(board, 2, 3, Direction.HORIZONTAL,
           "Erro ao posicionar o navio horizontal! Coordenadas inválidas.")
    _place(board, 5, 7, Direction.VERTICAL,
           "Erro ao posicionar o navio vertical! "
           "Coordenadas inválidas ou sobreposição.")
    return f"{_TITLE}\nLegenda: 0 = Agua, 3 = Navio\n" + board.render()


def adventurer_report():
    """Board with two straight and two diagonal ships."""
    board = Board()
    placements = [
        (1, 3, Direction.HORIZONTAL, "horizontal", "Coordenadas inválidas."),
        (5, 8, Direction.VERTICAL, "vertical",
         "Coordenadas inválidas ou sobreposição."),
        (3, 1, Direction.DIAGONAL_DESC, "diagonal descendente",
         "Coordenadas inválidas ou sobreposição."),
        (7, 2, Direction.DIAGONAL_ASC, "diagonal ascendente",
         "Coordenadas inválidas ou sobreposição."),
    ]
    for row, col, direction, label, detail in placements:
        _place(board, row, col, direction,
               f"Erro ao posicionar o navio {label}! {detail}")
    return (
        f"{_TITLE}\n"
        "Legenda: 0 = Agua 3 = Navio\n"
        "Posicionamento de navios: 2 retilieos e 2 diagonais\n"
        + board.render()
    )


_MASTER_SHIPS = [
    (1, 3, Direction.HORIZONTAL),
    (5, 8, Direction.VERTICAL),
    (3, 1, Direction.DIAGONAL_DESC),
    (7, 2, Direction.DIAGONAL_ASC),
]

_MASTER_ABILITIES = [
    (Ability.CONE, "Cone", "CONE", (2, 4)),
    (Ability.CROSS, "Cruz", "CRUZ", (5, 5)),
    (Ability.OCTAHEDRON, "Octaedro", "OCTAEDRO", (8, 7)),
]


def master_report():
    """Board with four ships and each special ability applied in turn."""
    board = Board()
    for number, (row, col, direction) in enumerate(_MASTER_SHIPS, start=1):
        _place(board, row, col, direction,
               f"Erro ao posicionar navio {number}! Verifique as coordenadas.")

    parts = [
        f"{_TITLE} (Nível Mestre)\n",
        "Legenda:\n",
        f"{_BLUE}0 = Agua{_RESET}, ",
        f"{_YELLOW}3 = Navio{_RESET}, ",
        f"{_MAGENTA}5 = Area de Habilidade{_RESET}, ",
        f"{_RED}8 = Navio Afetado\n\n{_RESET}",
        "Tabuleiro inicial com quatro navios:\n",
        board.render_colored(),
    ]
    patterns = [(pattern_for(ability), name) for ability, name, _, _ in _MASTER_ABILITIES]
    parts.extend(render_pattern(pattern, name) for pattern, name in patterns)

    for (pattern, _), (_, _, title, (row, col)) in zip(patterns, _MASTER_ABILITIES):
        affected = apply_ability(board.copy(), pattern, row, col)
        parts.append(
            f"\n\nTabuleiro com habilidade {title} aplicada (origem: {row},{col}):"
        )
        parts.append(affected.render_colored())
    return "".join(parts)


_REPORTS = {
    "novice": novice_report,
    "adventurer": adventurer_report,
    "master": master_report,
}


def main(argv=None):
    """Print the boards of the chosen level and give back the exit status."""
    parser = argparse.ArgumentParser(prog="navalbattle", description=_TITLE)
    parser.add_argument("level", nargs="?", default="master", choices=sorted(_REPORTS))
    args = parser.parse_args(argv)
    try:
        text = _REPORTS[args.level]()
    except PlacementError as exc:
        print(exc)
        return 1
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())