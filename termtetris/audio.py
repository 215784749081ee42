"""Background music and sound effects, disabled gracefully when no audio device is available."""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

DEFAULT_ASSET_DIR = Path("assets") / "musicas"
MAX_VOLUME = 128


class Sound(Enum):
    """The game's sounds, named by their asset files."""

    TETRIS = "tetris.ogg"
    GAME_OVER = "gameover.ogg"
    LINE = "clear.wav"
    LEVEL = "levelup.wav"
    DROP = "drop.wav"
    EXPLOSION = "explosion.wav"

    @property
    def is_music(self) -> bool:
        return self in (Sound.TETRIS, Sound.GAME_OVER)


class Audio:
    """Owns the mixer and the loaded sounds; every call is a no-op when audio is disabled."""

    def __init__(self, asset_dir: str | os.PathLike = DEFAULT_ASSET_DIR) -> None:
        self.asset_dir = Path(asset_dir)
        self.enabled = True
        self._effects: dict[Sound, pygame.mixer.Sound] = {}
        self._music: dict[Sound, Path] = {}

        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as error:
            print(f"Audio desativado: {error}", file=sys.stderr)
            self.enabled = False
            return

        for sound in Sound:
            path = self.asset_dir / sound.value
            if sound.is_music:
                if path.is_file():
                    self._music[sound] = path
                continue
            try:
                self._effects[sound] = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError):
                continue

    def __enter__(self) -> Audio:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def play_effect(self, sound: Sound, volume: int = MAX_VOLUME) -> bool:
        """Play a sound effect at a volume from 0 to 128; return whether it was played."""
        effect = self._effects.get(sound) if self.enabled else None
        if effect is None:
            return False
        effect.set_volume(max(0, min(volume, MAX_VOLUME)) / MAX_VOLUME)
        effect.play()
        return True

    def play_music(self, sound: Sound, loops: int = -1, volume: int | None = None) -> bool:
        """Play a music track `loops` times (-1 for forever); return whether it started."""
        path = self._music.get(sound) if self.enabled else None
        if path is None:
            return False
        try:
            pygame.mixer.music.load(str(path))
            if volume is not None:
                pygame.mixer.music.set_volume(max(0, min(volume, MAX_VOLUME)) / MAX_VOLUME)
            pygame.mixer.music.play(-1 if loops < 0 else max(loops - 1, 0))
        except pygame.error:
            return False
        return True

    def close(self) -> None:
        """Stop everything and shut the mixer down."""
        if not self.enabled:
            return
        pygame.mixer.music.stop()
        pygame.mixer.stop()
        pygame.mixer.quit()
        self._effects.clear()
        self._music.clear()
        self.enabled = False


def load_audio(asset_dir: str | os.PathLike = DEFAULT_ASSET_DIR) -> Audio:
    """Open the mixer and load all sounds, reporting on stderr when audio is unavailable."""
    audio = Audio(asset_dir)
    if not audio.enabled:
        print("Audio desativado, seguindo sem som", file=sys.stderr)
    return audio