"""Tile maps read from whitespace-separated text and drawn from a tile sheet."""

from __future__ import annotations

import os
import re
from os import PathLike
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

BLOCK_SIZE = 32

SOLID_TILE = (160, 160, BLOCK_SIZE, BLOCK_SIZE)
OPEN_TILE = (128, 32, BLOCK_SIZE, BLOCK_SIZE)

_INTEGER = re.compile(r"\s*([+-]?\d+)")

Rect = tuple[int, int, int, int]


def _to_int(value: str) -> int:
    match = _INTEGER.match(value)
    return int(match.group(1)) if match else 0


def parse_map(text: str) -> list[list[int]]:
    """Split ``text`` into rows of integers separated by single spaces.

    Values that are not numbers read as 0; a trailing newline adds an
    empty last row.
    """
    return [
        [_to_int(value) for value in line.split(" ") if value]
        for line in text.split("\n")
    ]


def load_map(path: str | PathLike) -> list[list[int]]:
    """Read and parse the map file at ``path``."""
    return parse_map(Path(path).read_text())


def tile_regions(tiles: list[list[int]]) -> list[tuple[Rect, tuple[int, int]]]:
    """Sheet region and screen position of every tile; 1 is solid ground."""
    return [
        (SOLID_TILE if value == 1 else OPEN_TILE, (col * BLOCK_SIZE, row * BLOCK_SIZE))
        for row, line in enumerate(tiles)
        for col, value in enumerate(line)
    ]


def draw_map(surface: pygame.Surface, tiles: list[list[int]], tile_image: pygame.Surface) -> None:
    """Draw ``tiles`` onto ``surface`` using regions of ``tile_image``."""
    for region, position in tile_regions(tiles):
        surface.blit(tile_image, position, area=pygame.Rect(region))