import pytest

from navalbattle.abilities import apply_ability, cone, cross, octahedron, render_pattern
from navalbattle.board import Board, Cell, Direction
from navalbattle.cli import adventurer_report, main, master_report, novice_report


def _count_ship_cells(text):
    rows = text.strip("\n").split("\n")[1:]
    return sum(line.split()[1:].count("3") for line in rows)


def test_novice_report_header_and_board():
    report = novice_report()
    assert report.startswith("Batalha Naval - Oceanic Games\nLegenda: 0 = Agua, 3 = Navio\n")
    board = Board()
    board.place_ship(2, 3, Direction.HORIZONTAL)
    board.place_ship(5, 7, Direction.VERTICAL)
    assert report.endswith(board.render())


def test_novice_report_has_two_ships():
    board_text = novice_report().split("Navio\n", 1)[1]
    assert _count_ship_cells(board_text) == 6


def test_adventurer_report_board():
    report = adventurer_report()
    assert "Posicionamento de navios: 2 retilieos e 2 diagonais\n" in report
    board = Board()
    board.place_ship(1, 3, Direction.HORIZONTAL)
    board.place_ship(5, 8, Direction.VERTICAL)
    board.place_ship(3, 1, Direction.DIAGONAL_DESC)
    board.place_ship(7, 2, Direction.DIAGONAL_ASC)
    assert report.endswith(board.render())
    assert _count_ship_cells(board.render()) == 12


def _master_board():
    board = Board()
    board.place_ship(1, 3, Direction.HORIZONTAL)
    board.place_ship(5, 8, Direction.VERTICAL)
    board.place_ship(3, 1, Direction.DIAGONAL_DESC)
    board.place_ship(7, 2, Direction.DIAGONAL_ASC)
    return board


def test_master_report_contains_initial_board_and_patterns():
    report = master_report()
    board = _master_board()
    assert "Tabuleiro inicial com quatro navios:\n" + board.render_colored() in report
    assert render_pattern(cone(), "Cone") in report
    assert render_pattern(cross(), "Cruz") in report
    assert render_pattern(octahedron(), "Octaedro") in report


@pytest.mark.parametrize(
    "title, pattern, row, col",
    [
        ("CONE", cone(), 2, 4),
        ("CRUZ", cross(), 5, 5),
        ("OCTAEDRO", octahedron(), 8, 7),
    ],
)
def test_master_report_applies_each_ability(title, pattern, row, col):
    board = apply_ability(_master_board(), pattern, row, col)
    expected = (
        f"\n\nTabuleiro com habilidade {title} aplicada (origem: {row},{col}):"
        + board.render_colored()
    )
    assert expected in master_report()


def test_master_abilities_hit_ships():
    board = apply_ability(_master_board(), cross(), 5, 5)
    hits = sum(cell == Cell.HIT_SHIP for row in board for cell in row)
    assert hits >= 1


def test_main_prints_chosen_report(capsys):
    assert main(["novice"]) == 0
    assert capsys.readouterr().out == novice_report()
    assert main(["adventurer"]) == 0
    assert capsys.readouterr().out == adventurer_report()


def test_main_defaults_to_master(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == master_report()


def test_main_rejects_unknown_level():
    with pytest.raises(SystemExit) as info:
        main(["expert"])
    assert info.value.code == 2