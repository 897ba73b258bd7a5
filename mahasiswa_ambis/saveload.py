"""Persistence of the best score in a small text file."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

DEFAULT_PATH = "savedata.txt"

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class HighscoreStore:
    """The highest score reached, kept as a single integer in a file."""

    def __init__(self, path: str | PathLike = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self.highscore = 0

    def load(self) -> int:
        """Read the stored highscore; a missing file keeps the current value."""
        try:
            text = self.path.read_text()
        except FileNotFoundError:
            return self.highscore
        match = _INTEGER.match(text)
        self.highscore = int(match.group(1)) if match else 0
        return self.highscore

    def save(self, score: float) -> int:
        """Store ``score`` if it beats the stored highscore; return the highscore."""
        self.load()
        if score > self.highscore:
            self.highscore = int(score)
        self.path.write_text(str(self.highscore))
        return self.highscore