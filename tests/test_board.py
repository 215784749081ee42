import io

import pytest

from termtetris.board import Board, Cell, MapError
from termtetris.screen import Color, Screen
from termtetris.tetrominoes import EXPLOSIVE, TETROMINOES

O_PIECE = 3

MAP_LINES = ["|       |"] * 5 + ["---------"]


def make_board():
    return Board.from_lines(MAP_LINES)


def test_from_lines_dimensions_and_colours():
    board = make_board()
    assert board.height == len(MAP_LINES)
    assert board.width == len(MAP_LINES[0])
    assert board.rows[0][0] == Cell("|", Color.LIGHTGRAY)
    assert board.rows[0][1] == Cell(" ", Color.WHITE)
    assert board.rows[-1][3].char == "-"


def test_from_lines_strips_line_endings():
    board = Board.from_lines(["| |\r\n", "---\n"])
    assert [[c.char for c in row] for row in board.rows] == [["|", " ", "|"], ["-", "-", "-"]]


def test_irregular_columns_raise():
    with pytest.raises(MapError):
        Board.from_lines(["|   |", "|  |"])


def test_too_many_lines_raise():
    with pytest.raises(MapError):
        Board.from_lines(["| |"] * 25)


def test_max_lines_accepted():
    assert Board.from_lines(["| |"] * 24).height == 24


def test_load_round_trip(tmp_path):
    path = tmp_path / "mapa.txt"
    path.write_text("\n".join(MAP_LINES) + "\n")
    loaded = Board.load(path)
    assert loaded.rows == make_board().rows


def test_load_missing_file(tmp_path):
    with pytest.raises(MapError):
        Board.load(tmp_path / "missing.txt")


def test_blank_is_empty():
    board = Board.blank(3, 4)
    assert board.height == 3 and board.width == 4
    assert all(cell.is_empty for row in board.rows for cell in row)


def test_fits_on_empty_field():
    board = make_board()
    assert board.fits(O_PIECE, 0, 0, 0)


def test_does_not_fit_into_wall_or_floor():
    board = make_board()
    assert not board.fits(O_PIECE, 0, -1, 0)
    assert not board.fits(O_PIECE, 0, 0, board.height - 2)


def test_does_not_fit_outside_board():
    board = Board.blank(4, 4)
    assert not board.fits(O_PIECE, 0, 0, -2)
    assert not board.fits(O_PIECE, 0, 3, 0)


def test_place_marks_cells_and_blocks_fit():
    board = make_board()
    board.place(O_PIECE, 0, 2, 1)
    piece = TETROMINOES[O_PIECE]
    for dx, dy in piece.cells(0):
        assert board.rows[1 + dy][2 + dx] == Cell(piece.symbol, piece.color)
    assert not board.fits(O_PIECE, 0, 2, 1)


def test_place_drops_cells_outside():
    board = Board.blank(2, 2)
    board.place(O_PIECE, 0, 0, 0)
    assert board.rows[1][1].char == TETROMINOES[O_PIECE].symbol
    assert board.rows[0][0].is_empty


def test_explode_spares_walls_and_floor():
    board = make_board()
    for y in range(board.height - 1):
        for x in range(1, board.width - 1):
            board.rows[y][x] = Cell("#", Color.BLUE)
    board.explode(2, 3)
    assert board.rows[3][0].char == "|"
    assert board.rows[5][2].char == "-"
    assert board.rows[3][2] == Cell(" ", Color.RED)
    assert board.rows[1][4].is_empty
    assert board.rows[0][2].char == "#"
    assert board.rows[3][5].char == "#"


def test_clear_full_lines_shifts_rows_down():
    board = make_board()
    for x in range(1, board.width - 1):
        board.rows[4][x] = Cell("#", Color.BLUE)
    board.rows[3][2] = Cell("#", Color.GREEN)
    assert board.clear_full_lines() == 1
    assert board.rows[4][2] == Cell("#", Color.GREEN)
    assert all(board.rows[4][x].is_empty for x in range(1, board.width - 1) if x != 2)
    assert all(board.rows[0][x].is_empty for x in range(1, board.width - 1))
    assert board.rows[4][0].char == "|"


def test_clear_full_lines_counts_several_rows():
    board = make_board()
    for y in (2, 4):
        for x in range(1, board.width - 1):
            board.rows[y][x] = Cell("#", Color.BLUE)
    assert board.clear_full_lines() == 2
    assert all(cell.is_empty for row in board.rows[:5] for cell in row[1:-1])


def test_clear_full_lines_none():
    board = make_board()
    before = [row[:] for row in board.rows]
    assert board.clear_full_lines() == 0
    assert board.rows == before


def test_draw_overlays_piece():
    out = io.StringIO()
    board = make_board()
    board.draw(Screen(out), EXPLOSIVE, 0, 1, 0)
    text = out.getvalue()
    assert text.count("@") == len(list(TETROMINOES[EXPLOSIVE].cells(0)))
    assert text.count("|") == 2 * 5