"""The game loop, its input handling and the main menu."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import TextIO

from termtetris.audio import Sound, load_audio
from termtetris.board import Board, MapError
from termtetris.keyboard import Keyboard
from termtetris.scoring import (
    draw_score,
    prompt_player_name,
    save_score,
    show_ranking,
    update_score,
)
from termtetris.screen import Color, Screen
from termtetris.tetrominoes import (
    EXPLOSIVE,
    FIELD_WIDTH,
    ORIGIN_X,
    ORIGIN_Y,
    PANEL_X,
    draw_lines_cleared,
    draw_next_piece,
    random_piece,
)
from termtetris.timer import Timer
from termtetris.ui import (
    game_frame,
    menu_frame,
    show_game_over_banner,
    show_title_banner,
    wait_for_menu_return,
)

SPAWN_X = FIELD_WIDTH // 2 - 2
START_SPEED_MS = 1000
SOFT_DROP_MS = 500
LINES_PER_LEVEL = 5
SPEED_STEP_MS = 100
MIN_SPEED_MS = 100
FRAME_PAUSE = 0.005
EXPLOSION_PAUSE = 0.1
MUSIC_VOLUME = 64

_KEY_FIELDS = {"d": "right", "a": "left", "s": "down", "w": "rotate"}


@dataclass(frozen=True)
class Keys:
    """Which game keys were pressed during one frame."""

    right: bool = False
    left: bool = False
    down: bool = False
    rotate: bool = False


def read_keys(keyboard) -> Keys:
    """Read at most one waiting key and report which game action it stands for."""
    if not keyboard.key_hit():
        return Keys()
    field = _KEY_FIELDS.get(keyboard.read_char().lower())
    return Keys(**{field: True}) if field else Keys()


@dataclass
class ActivePiece:
    """The falling piece: its kind, rotation and position on the board."""

    piece: int
    rotation: int = 0
    x: int = SPAWN_X
    y: int = 0
    can_rotate: bool = True

    def apply_keys(self, keys: Keys, board: Board, timer: Timer | None = None) -> None:
        """Move or rotate the piece where it fits; rotation needs the key released in between."""
        if keys.right and board.fits(self.piece, self.rotation, self.x + 1, self.y):
            self.x += 1
        if keys.left and board.fits(self.piece, self.rotation, self.x - 1, self.y):
            self.x -= 1
        if keys.down and board.fits(self.piece, self.rotation, self.x, self.y + 1):
            self.y += 1
            if timer is not None:
                timer.reset(SOFT_DROP_MS)
        if keys.rotate:
            if self.can_rotate and board.fits(self.piece, self.rotation + 1, self.x, self.y):
                self.rotation += 1
            self.can_rotate = False
        else:
            self.can_rotate = True


def read_menu_option(stream: TextIO | None = None) -> str:
    """Return the first character of the next non-empty line."""
    source = stream if stream is not None else sys.stdin
    while True:
        line = source.readline()
        if not line:
            raise EOFError("input ended while reading a menu option")
        if line != "\n":
            return line[0]


def is_game_over(board: Board, piece: int, rotation: int, x: int, y: int) -> bool:
    """Return True when a freshly spawned piece has no room."""
    return not board.fits(piece, rotation, x, y)


def level_up(level: int, total_lines: int, speed: int) -> tuple[int, int, bool]:
    """Return (level, speed, changed) after `total_lines` lines in all have been cleared."""
    new_level = total_lines // LINES_PER_LEVEL + 1
    if new_level > level:
        speed = speed - SPEED_STEP_MS if speed > MIN_SPEED_MS else MIN_SPEED_MS
        return new_level, speed, True
    return level, speed, False


def draw_level(screen: Screen, level: int) -> None:
    """Draw the panel with the current level."""
    for offset, text in ((4, "+---Nivel----+"), (5, "|            |"), (6, "+------------+")):
        screen.goto_xy(PANEL_X, ORIGIN_Y + offset)
        screen.set_color(Color.YELLOW, Color.BLACK)
        screen.write(text)

    screen.goto_xy(PANEL_X + 3, ORIGIN_Y + 5)
    screen.set_color(Color.LIGHTRED, Color.BLACK)
    screen.write(f"{level:4d}")


class Game:
    """One round of play on a board loaded from the asset directory."""

    def __init__(
        self,
        screen: Screen,
        keyboard,
        audio=None,
        assets: str | PathLike = "assets",
        rng: random.Random | None = None,
    ) -> None:
        self.screen = screen
        self.keyboard = keyboard
        self.audio = audio
        self.assets = Path(assets)
        self.rng = rng
        self.map_path = self.assets / "ascii-arts" / "mapa.txt"
        self.ranking_path = self.assets / "ranking.txt"
        self.input_stream: TextIO | None = None
        self.pause = time.sleep
        self.clock = time.monotonic
        self.board: Board | None = None

    def _effect(self, sound: Sound, volume: int) -> None:
        if self.audio is not None:
            self.audio.play_effect(sound, volume)

    def _music(self, sound: Sound, loops: int) -> None:
        if self.audio is not None:
            self.audio.play_music(sound, loops, MUSIC_VOLUME)

    def run(self, name: str) -> int:
        """Play until a new piece has no room, save the score and return it."""
        screen = self.screen
        board = Board.load(self.map_path)
        self.board = board
        game_frame(screen)
        timer = Timer(SOFT_DROP_MS, self.clock)

        score = 0
        speed = START_SPEED_MS
        total_lines = 0
        level = 1

        upcoming = random_piece(self.rng)
        active = ActivePiece(upcoming)
        upcoming = random_piece(self.rng)

        draw_score(screen, score)
        draw_lines_cleared(screen, total_lines)
        draw_next_piece(screen, upcoming)
        draw_level(screen, level)

        over = False
        while not over:
            fall = timer.time_over()
            active.apply_keys(read_keys(self.keyboard), board, timer)

            below_free = board.fits(active.piece, active.rotation, active.x, active.y + 1)
            if fall and below_free:
                active.y += 1
                timer.reset(speed)
            elif not below_free:
                board.place(active.piece, active.rotation, active.x, active.y)
                self._effect(Sound.DROP, 40)

                explosive = active.piece == EXPLOSIVE
                if explosive:
                    self._effect(Sound.EXPLOSION, 64)
                    screen.set_color(Color.RED, Color.BLACK)
                    board.explode(active.x + 1, active.y + 1)
                    screen.update()
                    self.pause(EXPLOSION_PAUSE)

                lines = board.clear_full_lines()
                if lines > 0:
                    self._effect(Sound.LINE, 50)
                total_lines += lines
                draw_lines_cleared(screen, total_lines)

                level, speed, changed = level_up(level, total_lines, speed)
                if changed:
                    self._effect(Sound.LEVEL, 50)
                    draw_level(screen, level)

                score = update_score(score, lines, explosive)
                draw_score(screen, score)

                active = ActivePiece(upcoming, can_rotate=active.can_rotate)
                upcoming = random_piece(self.rng)

                if is_game_over(board, active.piece, active.rotation, active.x, active.y):
                    over = True
                    self._music(Sound.GAME_OVER, 1)
                    screen.goto_xy(ORIGIN_X, ORIGIN_Y + board.height // 2)
                    show_game_over_banner(screen, self.keyboard, self.input_stream)

            board.draw(screen, active.piece, active.rotation, active.x, active.y)
            draw_next_piece(screen, upcoming)
            screen.update()
            self.pause(FRAME_PAUSE)

        try:
            save_score(self.ranking_path, name, score)
        except OSError:
            screen.write("Erro ao abrir o arquivo para salvar pontuação.\n")

        self._music(Sound.TETRIS, -1)
        return score


def main(argv: list[str] | None = None) -> int:
    """Run the main menu until the player chooses to quit."""
    parser = argparse.ArgumentParser(prog="termtetris", description="Tetris in the terminal.")
    parser.add_argument("--assets", default="assets", help="directory holding maps, music and the ranking")
    args = parser.parse_args(argv)
    assets = Path(args.assets)

    screen = Screen()
    keyboard = Keyboard()
    keyboard.enable_raw()
    audio = load_audio(assets / "musicas")
    audio.play_music(Sound.TETRIS, -1)
    game = Game(screen, keyboard, audio, assets)

    try:
        while True:
            screen.init(True)
            screen.clear()
            menu_frame(screen)
            show_title_banner(screen, keyboard)

            keyboard.restore()
            screen.hide_cursor()
            screen.update()

            option = read_menu_option()
            if option == "1":
                keyboard.enable_raw()
                screen.clear()
                name = prompt_player_name(screen, keyboard)
                game.run(name)
            elif option == "2":
                screen.clear()
                menu_frame(screen)
                show_ranking(screen, game.ranking_path)
                screen.goto_xy(14, 19)
                wait_for_menu_return(screen, keyboard)
            elif option == "3":
                screen.clear()
                screen.update()
                return 0
            else:
                screen.clear()
                screen.goto_xy(25, 18)
                screen.write("Opcao invalida.\n")
                screen.update()
                time.sleep(1)
    except MapError as error:
        print(f"Erro ao abrir o mapa: {error}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        return 0
    finally:
        audio.close()
        keyboard.restore()
        screen.update()


if __name__ == "__main__":
    sys.exit(main())