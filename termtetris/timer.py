"""A millisecond countdown used to pace falling pieces."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Reports when more than delay_ms milliseconds have passed since the last restart."""

    def __init__(self, delay_ms: int = -1, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.delay_ms = delay_ms
        self._start = clock()

    def reset(self, delay_ms: int) -> None:
        """Set a new delay and restart counting from now."""
        self.delay_ms = delay_ms
        self._start = self._clock()

    def elapsed_ms(self) -> int:
        return int((self._clock() - self._start) * 1000)

    def time_over(self) -> bool:
        """Return True and restart if the delay has been exceeded."""
        if self.elapsed_ms() > self.delay_ms:
            self._start = self._clock()
            return True
        return False

    def stop(self) -> None:
        self.delay_ms = -1

    def __str__(self) -> str:
        return f"Timer:  {self.elapsed_ms()}"