"""The playing field: loading it from a text map, fitting, placing and clearing pieces."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable

from termtetris.screen import Color, Screen
from termtetris.tetrominoes import (
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FLOOR,
    ORIGIN_X,
    ORIGIN_Y,
    TETROMINOES,
    WALL,
)

DEFAULT_COLOR = Color.WHITE
MAX_ROWS = 24
MAX_COLUMNS = 40
EMPTY = " "


class MapError(Exception):
    """Raised when a map file cannot be read or is malformed."""


@dataclass(frozen=True)
class Cell:
    """One square of the board: the character shown there and its colour."""

    char: str = EMPTY
    color: Color = DEFAULT_COLOR

    @property
    def is_empty(self) -> bool:
        return self.char == EMPTY


class Board:
    """A grid of cells, indexed as rows[y][x]."""

    def __init__(self, rows: list[list[Cell]]) -> None:
        self.rows = rows

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @classmethod
    def blank(cls, height: int, width: int) -> Board:
        """Return a board of the given size with every cell empty."""
        return cls([[Cell() for _ in range(width)] for _ in range(height)])

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Board:
        """Build a board from map text lines; spaces are empty, anything else is a fixed block."""
        rows: list[list[Cell]] = []
        width: int | None = None
        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if width is None:
                width = len(line)
            if len(line) != width or len(line) > MAX_COLUMNS:
                raise MapError(f"map has irregular columns (line {number})")
            if len(rows) >= MAX_ROWS:
                raise MapError("map exceeds the maximum number of lines")
            rows.append(
                [Cell(ch, DEFAULT_COLOR if ch == EMPTY else Color.LIGHTGRAY) for ch in line]
            )
        return cls(rows)

    @classmethod
    def load(cls, path: str | PathLike) -> Board:
        """Read a board from a map file."""
        try:
            with open(path, encoding="utf-8") as handle:
                return cls.from_lines(handle)
        except OSError as error:
            raise MapError(f"could not open map: {error}") from error

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def fits(self, piece: int, rotation: int, x: int, y: int) -> bool:
        """Return True if the piece at (x, y) lies within the board on empty cells only."""
        for dx, dy in TETROMINOES[piece].cells(rotation):
            gx, gy = x + dx, y + dy
            if not self._inside(gx, gy) or not self.rows[gy][gx].is_empty:
                return False
        return True

    def place(self, piece: int, rotation: int, x: int, y: int) -> None:
        """Fix the piece onto the board; cells falling outside are dropped."""
        tetromino = TETROMINOES[piece]
        for dx, dy in tetromino.cells(rotation):
            gx, gy = x + dx, y + dy
            if self._inside(gx, gy):
                self.rows[gy][gx] = Cell(tetromino.symbol, tetromino.color)

    def explode(self, cx: int, cy: int) -> None:
        """Empty the 5x5 area centred on (cx, cy) inside the field, sparing walls and floor."""
        max_x = min(FIELD_WIDTH, self.width)
        max_y = min(FIELD_HEIGHT, self.height)
        for y in range(cy - 2, cy + 3):
            for x in range(cx - 2, cx + 3):
                if 0 <= x < max_x and 0 <= y < max_y:
                    if self.rows[y][x].char not in (WALL, FLOOR):
                        self.rows[y][x] = Cell(EMPTY, Color.RED)

    def clear_full_lines(self) -> int:
        """Remove every full row above the floor, shifting the rows above down; return the count."""
        inner = range(1, self.width - 1)
        if not inner:
            return 0
        removed = 0
        y = self.height - 2
        while y >= 0:
            if all(not self.rows[y][x].is_empty for x in inner):
                for above in range(y, 0, -1):
                    for x in inner:
                        self.rows[above][x] = self.rows[above - 1][x]
                for x in inner:
                    self.rows[0][x] = Cell()
                removed += 1
            else:
                y -= 1
        return removed

    def draw(self, screen: Screen, piece: int, rotation: int, x: int, y: int) -> None:
        """Draw the board with the falling piece overlaid at (x, y)."""
        tetromino = TETROMINOES[piece]
        for row_y, row in enumerate(self.rows):
            for col_x, cell in enumerate(row):
                screen.goto_xy(ORIGIN_X + col_x, ORIGIN_Y + row_y)
                rel_x, rel_y = col_x - x, row_y - y
                if 0 <= rel_x < 4 and 0 <= rel_y < 4 and tetromino.is_filled(rel_x, rel_y, rotation):
                    screen.set_color(tetromino.color, Color.BLACK)
                    screen.write(tetromino.symbol)
                    continue
                screen.set_color(cell.color, Color.BLACK)
                screen.write(cell.char)
        screen.set_color(Color.WHITE, Color.BLACK)