import io
import random

import pytest

from termtetris.screen import Color, Screen
from termtetris.tetrominoes import (
    EXPLOSIVE,
    TETROMINOES,
    draw_lines_cleared,
    draw_next_piece,
    random_piece,
    rotate,
)


@pytest.mark.parametrize(
    "x, y, rotation, index",
    [
        (0, 0, 0, 0),
        (3, 3, 0, 15),
        (0, 0, 1, 12),
        (3, 0, 1, 0),
        (0, 0, 2, 15),
        (0, 0, 3, 3),
        (0, 3, 3, 0),
    ],
)
def test_rotate_matches_documented_tables(x, y, rotation, index):
    assert rotate(x, y, rotation) == index


@pytest.mark.parametrize("rotation", range(4))
def test_rotate_is_permutation(rotation):
    indices = sorted(rotate(x, y, rotation) for y in range(4) for x in range(4))
    assert indices == list(range(16))


def test_full_turn_is_identity():
    for y in range(4):
        for x in range(4):
            assert rotate(x, y, 4) == rotate(x, y, 0)
            assert rotate(x, y, 5) == rotate(x, y, 1)


@pytest.mark.parametrize("index", range(9))
@pytest.mark.parametrize("rotation", range(4))
def test_every_piece_has_four_cells(index, rotation):
    cells = list(TETROMINOES[index].cells(rotation))
    assert len(cells) == 4
    assert len(set(cells)) == 4


def test_explosive_piece():
    bomb = TETROMINOES[EXPLOSIVE]
    assert bomb.symbol == "@"
    assert bomb.color == Color.RED
    assert list(bomb.cells()) == list(TETROMINOES[7].cells())


def test_i_piece_cells():
    assert list(TETROMINOES[0].cells(0)) == [(0, 1), (1, 1), (2, 1), (3, 1)]


def test_random_piece_covers_all_indices():
    rng = random.Random(1234)
    seen = {random_piece(rng) for _ in range(2000)}
    assert seen == set(range(len(TETROMINOES)))


def test_random_piece_default_rng_in_range():
    assert 0 <= random_piece() < len(TETROMINOES)


@pytest.mark.parametrize("index", [0, EXPLOSIVE])
def test_draw_next_piece_draws_four_symbols(index):
    out = io.StringIO()
    draw_next_piece(Screen(out), index)
    text = out.getvalue()
    assert text.count(TETROMINOES[index].symbol) == 4
    assert "+---Proxima--+" in text
    assert text.endswith("+------------+")


def test_draw_lines_cleared_shows_total():
    out = io.StringIO()
    draw_lines_cleared(Screen(out), 12)
    text = out.getvalue()
    assert "+---Linhas---+" in text
    assert text.endswith("  12")