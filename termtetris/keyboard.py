"""Non-blocking single-key input from a terminal."""

from __future__ import annotations

import copy
import os
import select
import termios

_LFLAG = 3
_CC = 6


class Keyboard:
    """Reads single characters from a file descriptor, with one character of look-ahead."""

    def __init__(self, fd: int = 0) -> None:
        self.fd = fd
        self._initial: list | None = None
        self._raw: list | None = None
        self._peek: str | None = None

    def enable_raw(self) -> None:
        """Turn off line buffering, echo and signal keys on the terminal."""
        try:
            current = termios.tcgetattr(self.fd)
        except termios.error:
            return
        if self._initial is None:
            self._initial = current
        raw = copy.deepcopy(current)
        raw[_LFLAG] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        raw[_CC][termios.VMIN] = 1
        raw[_CC][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSANOW, raw)
        self._raw = raw

    def restore(self) -> None:
        """Put the terminal back into the mode it had before enable_raw."""
        if self._initial is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._initial)
        self._raw = None

    def __enter__(self) -> Keyboard:
        self.enable_raw()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def _poll_raw(self) -> bytes:
        raw = self._raw
        raw[_CC][termios.VMIN] = 0
        termios.tcsetattr(self.fd, termios.TCSANOW, raw)
        try:
            return os.read(self.fd, 1)
        finally:
            raw[_CC][termios.VMIN] = 1
            termios.tcsetattr(self.fd, termios.TCSANOW, raw)

    def _poll(self) -> bytes:
        ready, _, _ = select.select([self.fd], [], [], 0)
        return os.read(self.fd, 1) if ready else b""

    def key_hit(self) -> bool:
        """Return True if a character is waiting, without consuming it."""
        if self._peek is not None:
            return True
        data = self._poll_raw() if self._raw is not None else self._poll()
        if data:
            self._peek = data.decode("latin-1")
            return True
        return False

    def read_char(self) -> str:
        """Return the next character, blocking until one arrives; '' at end of input."""
        if self._peek is not None:
            ch, self._peek = self._peek, None
            return ch
        return os.read(self.fd, 1).decode("latin-1")