"""Side-scrolling campus platformer on pygame, with a pure-Python GIF loader."""

__version__ = "0.1.0"