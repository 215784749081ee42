"""Score keeping, the ranking file and the panels that show them."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, TextIO

from termtetris.screen import Color, Screen
from termtetris.tetrominoes import ORIGIN_Y, PANEL_X
from termtetris.ui import menu_frame

TOP_SCORES = 5
PLAYER_LIMIT = 50

LINE_POINTS = 75
PIECE_POINTS = 25
EXPLOSION_PENALTY = 50

NAME_LENGTH = 29
NAME_FIELD_WIDTH = 30
NAME_FIELD_X = (2 + 70 - NAME_FIELD_WIDTH) // 2
NAME_FIELD_Y = 6

_ENTRY = re.compile(r"\s*([^|]{1,25})\s*\|\s*([+-]?\d+)")


@dataclass(frozen=True)
class Player:
    """A name and the score it reached."""

    name: str
    score: int


def update_score(score: int, lines: int, explosive: bool) -> int:
    """Return the score after a piece locks, clearing `lines` rows."""
    if explosive:
        return max(score - EXPLOSION_PENALTY, 0)
    score += PIECE_POINTS
    if lines > 0:
        score += lines * LINE_POINTS
    return score


def save_score(path: str | PathLike, name: str, score: int) -> None:
    """Append one `name | score` entry to the ranking file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{name} | {score}\n")


def load_scores(path: str | PathLike, limit: int = PLAYER_LIMIT) -> list[Player]:
    """Read up to `limit` entries from the ranking file, stopping at the first malformed one."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()

    players: list[Player] = []
    pos = 0
    while len(players) < limit:
        match = _ENTRY.match(text, pos)
        if match is None:
            break
        players.append(Player(match.group(1).rstrip(), int(match.group(2))))
        pos = match.end()
    return players


def rank_players(players: Iterable[Player]) -> list[Player]:
    """Return the players ordered from the highest score to the lowest."""
    return sorted(players, key=lambda player: player.score, reverse=True)


def draw_score(screen: Screen, score: int) -> None:
    """Draw the panel with the current score."""
    for offset, text in ((0, "+---Pontos---+"), (1, "|            |"), (2, "+------------+")):
        screen.set_color(Color.GREEN, Color.BLACK)
        screen.goto_xy(PANEL_X, ORIGIN_Y + offset)
        screen.write(text)

    screen.set_color(Color.LIGHTRED, Color.BLACK)
    screen.goto_xy(PANEL_X + 3, ORIGIN_Y + 1)
    screen.write(f"{score:4d}")


def draw_name_field(screen: Screen, name: str) -> None:
    """Draw the box in which the player types a name."""
    screen.goto_xy(NAME_FIELD_X + 7, NAME_FIELD_Y + 5)
    screen.set_color(Color.YELLOW, Color.BLACK)
    screen.write("Informe seu nome")

    screen.goto_xy(NAME_FIELD_X, NAME_FIELD_Y + 6)
    screen.write("-" * NAME_FIELD_WIDTH)
    screen.goto_xy(NAME_FIELD_X, NAME_FIELD_Y + 7)
    screen.write("|" + " " * (NAME_FIELD_WIDTH - 2) + "|")
    screen.goto_xy(NAME_FIELD_X, NAME_FIELD_Y + 8)
    screen.write("-" * NAME_FIELD_WIDTH)

    screen.goto_xy(NAME_FIELD_X, NAME_FIELD_Y + 9)
    screen.set_color(Color.LIGHTMAGENTA, Color.BLACK)
    screen.write("Pressione ENTER para continuar")

    screen.goto_xy(NAME_FIELD_X, NAME_FIELD_Y + 7)
    screen.write(name)


def prompt_player_name(screen: Screen, keyboard, stream: TextIO | None = None) -> str:
    """Ask for the player's name in line mode and return it, at most 29 characters."""
    source = stream if stream is not None else sys.stdin
    screen.clear()
    menu_frame(screen)
    draw_name_field(screen, "")

    screen.goto_xy(NAME_FIELD_X + 2, NAME_FIELD_Y + 7)
    screen.show_cursor()
    screen.update()

    keyboard.restore()
    line = source.readline()[:NAME_LENGTH]
    keyboard.enable_raw()

    screen.hide_cursor()
    return line.removesuffix("\n")


def show_ranking(screen: Screen, path: str | PathLike) -> list[Player]:
    """Draw the best scores from the ranking file and return the players shown."""
    try:
        players = load_scores(path)
    except OSError:
        screen.write("arquivo nao disponivel.\n")
        players = []

    screen.set_color(Color.LIGHTRED, Color.BLACK)
    screen.goto_xy(26, 9)
    screen.write("+-- RANKING --+\n")

    top: list[Player] = []
    if not players:
        screen.goto_xy(26, 7)
        screen.set_color(Color.LIGHTRED, Color.BLACK)
        screen.write("Nenhuma pontuacao disponivel =//\n")
    else:
        top = rank_players(players)[:TOP_SCORES]
        for place, player in enumerate(top, start=1):
            screen.goto_xy(22, 10 + place)
            if place == 1:
                screen.set_color(Color.LIGHTGREEN, Color.BLACK)
                screen.write(f"{place}. ★ {player.name} - {player.score} pontos")
            else:
                screen.set_color(Color.LIGHTGRAY, Color.BLACK)
                screen.write(f"{place}. {player.name} - {player.score} pontos")

    screen.goto_xy(10, 13 + max(len(players), 1))
    return top