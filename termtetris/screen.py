"""ANSI terminal output: cursor movement, colours and box drawing."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

ESC = "\033"
NORMAL_TEXT = "[0m"
BOLD_TEXT = "[1m"
ITALIC_TEXT = "[3m"
BLINK_TEXT = "[5m"
REVERSE_TEXT = "[7m"
HOME_CURSOR = "[f"
SHOW_CURSOR = "[?25h"
HIDE_CURSOR = "[?25l"
CLEAR_SCREEN = "[2J"

BOX_ENABLE = "(0"
BOX_DISABLE = "(B"
BOX_VLINE = chr(0x78)
BOX_HLINE = chr(0x71)
BOX_UPLEFT = chr(0x6C)
BOX_UPRIGHT = chr(0x6B)
BOX_DWNLEFT = chr(0x6D)
BOX_DWNRIGHT = chr(0x6A)
BOX_CROSS = chr(0x6E)
BOX_TLEFT = chr(0x74)
BOX_TRIGHT = chr(0x75)
BOX_TUP = chr(0x77)
BOX_TDOWN = chr(0x76)
BOX_DIAMOND = chr(0x60)
BOX_BLOCK = chr(0x61)
BOX_DOT = chr(0x7E)

SCRSTARTX = 3
SCRENDX = 75
SCRSTARTY = 1
SCRENDY = 23

MINX = 1
MINY = 1
MAXX = 80
MAXY = 24


class Color(IntEnum):
    """The sixteen terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTRED = 9
    LIGHTGREEN = 10
    YELLOW = 11
    LIGHTBLUE = 12
    LIGHTMAGENTA = 13
    LIGHTCYAN = 14
    WHITE = 15


def color_sequence(fg: Color, bg: Color) -> str:
    """Return the escape sequence that selects foreground and background colours."""
    fg = Color(fg)
    bg = Color(bg)
    bright = 1 if fg > Color.LIGHTGRAY else 0
    code = fg - 8 if bright else int(fg)
    return f"{ESC}[{bright};{code + 30};{int(bg) + 40}m"


def goto_sequence(x: int, y: int) -> str:
    """Return the escape sequence that moves the cursor to column x, row y."""
    x = max(0, min(x, MAXX - 1))
    y = max(0, min(y, MAXY))
    return f"{ESC}[f{ESC}[{y}B{ESC}[{x}C"


class Screen:
    """Writes terminal control sequences and text to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def home_cursor(self) -> None:
        self.write(ESC + HOME_CURSOR)

    def show_cursor(self) -> None:
        self.write(ESC + SHOW_CURSOR)

    def hide_cursor(self) -> None:
        self.write(ESC + HIDE_CURSOR)

    def clear(self) -> None:
        self.home_cursor()
        self.write(ESC + CLEAR_SCREEN)

    def update(self) -> None:
        self.stream.flush()

    def set_normal(self) -> None:
        self.write(ESC + NORMAL_TEXT)

    def set_bold(self) -> None:
        self.write(ESC + BOLD_TEXT)

    def set_blink(self) -> None:
        self.write(ESC + BLINK_TEXT)

    def set_reverse(self) -> None:
        self.write(ESC + REVERSE_TEXT)

    def box_enable(self) -> None:
        self.write(ESC + BOX_ENABLE)

    def box_disable(self) -> None:
        self.write(ESC + BOX_DISABLE)

    def draw_borders(self) -> None:
        """Clear the screen and draw a box around the whole drawable area."""
        self.clear()
        self.box_enable()

        self.goto_xy(MINX, MINY)
        self.write(BOX_UPLEFT)
        for x in range(MINX + 1, MAXX):
            self.goto_xy(x, MINY)
            self.write(BOX_HLINE)
        self.goto_xy(MAXX, MINY)
        self.write(BOX_UPRIGHT)

        for y in range(MINY + 1, MAXY):
            self.goto_xy(MINX, y)
            self.write(BOX_VLINE)
            self.goto_xy(MAXX, y)
            self.write(BOX_VLINE)

        self.goto_xy(MINX, MAXY)
        self.write(BOX_DWNLEFT)
        for x in range(MINX + 1, MAXX):
            self.goto_xy(x, MAXY)
            self.write(BOX_HLINE)
        self.goto_xy(MAXX, MAXY)
        self.write(BOX_DWNRIGHT)

        self.box_disable()

    def init(self, draw_borders: bool = False) -> None:
        """Clear the screen, optionally draw borders, and hide the cursor."""
        self.clear()
        if draw_borders:
            self.draw_borders()
        self.home_cursor()
        self.hide_cursor()

    def destroy(self) -> None:
        """Reset colours and modes, clear the screen and show the cursor."""
        self.write(f"{ESC}[0;39;49m")
        self.set_normal()
        self.clear()
        self.home_cursor()
        self.show_cursor()

    def goto_xy(self, x: int, y: int) -> None:
        self.write(goto_sequence(x, y))

    def set_color(self, fg: Color, bg: Color = Color.BLACK) -> None:
        self.write(color_sequence(fg, bg))