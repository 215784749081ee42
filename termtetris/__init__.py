"""A falling-block puzzle game for the terminal, with levels, an explosive piece and a score ranking."""

__version__ = "0.1.0"