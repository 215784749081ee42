"""Title and game-over banners, frames and the return-to-menu prompt."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO

from termtetris.screen import (
    BOX_DWNLEFT,
    BOX_DWNRIGHT,
    BOX_HLINE,
    BOX_UPLEFT,
    BOX_UPRIGHT,
    BOX_VLINE,
    Color,
    Screen,
)

USABLE_WIDTH = 68
USABLE_HEIGHT = 22

_TITLE_ROWS = (
    (" ___ ", " ___ ", " ___ ", " ___ ", " _ ", " ___ "),
    ("|_ _|", "| __>", "|_ _|", "| . \\", "| |", "/ __>"),
    (" | | ", "| _> ", " | | ", "|   /", "| |", "\\__ \\"),
    (" |_| ", "|___>", " |_| ", "|_\\_\\", "|_|", "<___/"),
)
_TITLE_COLORS = (Color.RED, Color.YELLOW, Color.GREEN, Color.CYAN, Color.BLUE, Color.MAGENTA)

_GAME_OVER_ROWS = (
    " ___   ___  __ __  ___   ___  _ _  ___  ___ ",
    "/  _> | . ||  \\  \\| __> | . || | || __>| . \\",
    "| <_/\\|   ||     || _>  | | || ' || _> |   /",
    "\\____/|_|_||_|_|_||___> \\___/|__/ |___>|_\\_\\",
)

MENU_OPTIONS = ("[1] INICIAR JOGO", "[2] VER RANKING", "[3] SAIR")
RETURN_PROMPT = "Pressione 0 para voltar ao menu principal."


def draw_title_banner(screen: Screen) -> None:
    """Draw the coloured title and the main menu options."""
    banner_x = (USABLE_WIDTH - 29) // 2 + 2
    banner_y = (USABLE_HEIGHT - 5) // 2 + 2

    for offset, parts in enumerate(_TITLE_ROWS):
        screen.goto_xy(banner_x, banner_y + offset)
        for color, part in zip(_TITLE_COLORS, parts):
            screen.set_color(color, Color.BLACK)
            screen.write(part)
    screen.goto_xy(banner_x, banner_y + 4)
    screen.set_color(Color.WHITE, Color.BLACK)
    screen.write(" " * 29)

    screen.goto_xy(26, 16)
    screen.set_color(Color.YELLOW, Color.BLACK)
    screen.write("Selecione uma opcao: ")
    screen.set_color(Color.LIGHTBLUE, Color.BLACK)
    for offset, option in enumerate(MENU_OPTIONS):
        screen.goto_xy(26, 17 + offset)
        screen.write(option)


def draw_game_over_banner(screen: Screen, keyboard, stream: TextIO | None = None) -> None:
    """Draw the game-over banner and wait for the player to return to the menu."""
    banner_x = (USABLE_WIDTH - 43) // 2 + 2
    banner_y = (USABLE_HEIGHT - 4) // 2 + 2

    screen.goto_xy(banner_x, banner_y)
    screen.set_color(Color.LIGHTRED, Color.BLACK)
    for offset, row in enumerate(_GAME_OVER_ROWS):
        screen.goto_xy(banner_x, banner_y + offset)
        screen.write(row)
    screen.set_color(Color.WHITE, Color.BLACK)

    screen.goto_xy(14, 16)
    wait_for_menu_return(screen, keyboard, stream)


def show_title_banner(
    screen: Screen, keyboard, pause: Callable[[float], None] = time.sleep
) -> None:
    """Show the title screen with its frame, then pause for three seconds."""
    keyboard.restore()
    screen.init(True)
    menu_frame(screen)
    draw_title_banner(screen)
    screen.update()
    pause(3)


def show_game_over_banner(screen: Screen, keyboard, stream: TextIO | None = None) -> None:
    """Show the game-over screen and wait for the player to return to the menu."""
    menu_frame(screen)
    draw_game_over_banner(screen, keyboard, stream)
    screen.update()


def custom_borders(screen: Screen, min_x: int, max_x: int, min_y: int, max_y: int) -> None:
    """Clear the screen and draw a box with the given corners."""
    screen.clear()
    screen.box_enable()

    screen.goto_xy(min_x, min_y)
    screen.write(BOX_UPLEFT)
    for x in range(min_x + 1, max_x):
        screen.goto_xy(x, min_y)
        screen.write(BOX_HLINE)
    screen.goto_xy(max_x, min_y)
    screen.write(BOX_UPRIGHT)

    for y in range(min_y + 1, max_y):
        screen.goto_xy(min_x, y)
        screen.write(BOX_VLINE)
        screen.goto_xy(max_x, y)
        screen.write(BOX_VLINE)

    screen.goto_xy(min_x, max_y)
    screen.write(BOX_DWNLEFT)
    for x in range(min_x + 1, max_x):
        screen.goto_xy(x, max_y)
        screen.write(BOX_HLINE)
    screen.goto_xy(max_x, max_y)
    screen.write(BOX_DWNRIGHT)

    screen.box_disable()


def menu_frame(screen: Screen) -> None:
    """Draw the wide frame used by the menu, ranking and game-over screens."""
    screen.set_color(Color.CYAN, Color.BLACK)
    custom_borders(screen, 2, 70, 2, 24)


def game_frame(screen: Screen) -> None:
    """Draw the narrower frame used while playing."""
    screen.set_color(Color.CYAN, Color.BLACK)
    custom_borders(screen, 2, 36, 2, 24)


def wait_for_menu_return(screen: Screen, keyboard, stream: TextIO | None = None) -> None:
    """Prompt in line mode until the player enters a line starting with 0."""
    source = stream if stream is not None else sys.stdin
    keyboard.restore()

    screen.set_color(Color.YELLOW, Color.BLACK)
    screen.write(RETURN_PROMPT + "\n")
    screen.update()

    while True:
        line = source.readline()
        if not line:
            raise EOFError("input ended before returning to the menu")
        if line.startswith("0"):
            break

    keyboard.enable_raw()