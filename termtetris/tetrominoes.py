"""Piece shapes, rotation and the side panels that show the next piece and cleared lines."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

from termtetris.screen import Color, Screen

WALL = "|"
FLOOR = "-"

ORIGIN_X = 5
ORIGIN_Y = 5
FIELD_WIDTH = 9
FIELD_HEIGHT = 18
PANEL_X = ORIGIN_X + FIELD_WIDTH + 6

EMPTY_MARK = "."


def rotate(x: int, y: int, rotation: int) -> int:
    """Return the index into a 4x4 shape of cell (x, y) after rotating by rotation quarter turns."""
    turn = rotation % 4
    if turn == 0:
        return y * 4 + x
    if turn == 1:
        return 12 + y - x * 4
    if turn == 2:
        return 15 - y * 4 - x
    return 3 - y + x * 4


@dataclass(frozen=True)
class Tetromino:
    """A 4x4 piece shape, its colour and the character it is drawn with."""

    shape: str
    color: Color
    symbol: str = "#"

    def is_filled(self, x: int, y: int, rotation: int = 0) -> bool:
        return self.shape[rotate(x, y, rotation)] != EMPTY_MARK

    def cells(self, rotation: int = 0) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) offsets of the filled cells, row by row."""
        for y in range(4):
            for x in range(4):
                if self.is_filled(x, y, rotation):
                    yield x, y


TETROMINOES: tuple[Tetromino, ...] = (
    Tetromino("....XXXX........", Color.CYAN),
    Tetromino("..X...X..XX.....", Color.BLUE),
    Tetromino(".X...X...XX.....", Color.BLUE),
    Tetromino(".....XX..XX.....", Color.YELLOW),
    Tetromino("......XX.XX.....", Color.GREEN),
    Tetromino(".....XX...XX....", Color.GREEN),
    Tetromino("......X..XXX....", Color.MAGENTA),
    Tetromino(".....XXX..X.....", Color.LIGHTMAGENTA),
    Tetromino(".....XXX..X.....", Color.RED, "@"),
)

EXPLOSIVE = 8


def random_piece(rng: random.Random | None = None) -> int:
    """Return the index of a randomly chosen piece."""
    return (rng or random).randrange(len(TETROMINOES))


def draw_next_piece(screen: Screen, piece: int) -> None:
    """Draw the panel that previews the next piece."""
    tetromino = TETROMINOES[piece]
    screen.set_color(Color.BLUE, Color.BLACK)
    screen.goto_xy(PANEL_X, ORIGIN_Y + 12)
    screen.write("+---Proxima--+")

    for y in range(4):
        screen.set_color(Color.BLUE, Color.BLACK)
        screen.goto_xy(PANEL_X, ORIGIN_Y + 13 + y)
        screen.write("|    ")
        for x in range(4):
            if tetromino.is_filled(x, y):
                screen.set_color(tetromino.color, Color.BLACK)
                screen.write(tetromino.symbol)
                screen.set_color(Color.WHITE, Color.BLACK)
            else:
                screen.write(" ")
        screen.set_color(Color.BLUE, Color.BLACK)
        screen.write("    |")

    screen.goto_xy(PANEL_X, ORIGIN_Y + 17)
    screen.set_color(Color.BLUE, Color.BLACK)
    screen.write("+------------+")


def draw_lines_cleared(screen: Screen, total: int) -> None:
    """Draw the panel showing how many lines have been cleared."""
    for offset, text in ((8, "+---Linhas---+"), (9, "|            |"), (10, "+------------+")):
        screen.goto_xy(PANEL_X, ORIGIN_Y + offset)
        screen.set_color(Color.MAGENTA, Color.BLACK)
        screen.write(text)

    screen.goto_xy(PANEL_X + 3, ORIGIN_Y + 9)
    screen.set_color(Color.LIGHTRED, Color.BLACK)
    screen.write(f"{total:4d}")