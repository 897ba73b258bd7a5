"""Level screen: camera, backgrounds, heads-up display and object placement."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .animation import RenderedAnimation, load_animation  # noqa: E402
from .entities import Cat, Enemy, World  # noqa: E402
from .gif import GifError  # noqa: E402
from .player import Student  # noqa: E402

SCREEN_WIDTH = 700
SCREEN_HEIGHT = 512

HUD_WIDTH = 300
HUD_MIN_X = 100
HUD_FONT_SIZE = 20
BOSS_Y = 375

MENU_COLOUR = (122, 113, 143)
ENTER_COLOUR = (0, 0, 0)
WHITE = (255, 255, 255)

FONT_FILE = "font.ttf"

BACKGROUNDS = {1: "mapp.png", 2: "DESIGN/maplevel2.png"}
TOOLTIPS = ("tooltip.png", "tooltip2.png", "tooltip3.png", "tooltip4.png")

# Where the level's end pins the camera: past this x it shows the last screen.
_LEVEL_ENDS = {1: (3695, 4096), 2: (2670, 3072)}

Point = tuple[int, int]

_LEVEL_OBJECTS: dict[int, dict[str, tuple[Point, ...]]] = {
    1: {
        "snacks": ((1500, 250), (2900, 150)),
        "tooltips": ((550, 350), (1450, 325), (1540, 165), (140, 200)),
        "cats": ((500, 415), (1100, 415), (2250, 415), (1950, 415), (2100, 415)),
        "enemies": ((1380, 375),),
        "books": (
            (100, 300), (140, 300), (180, 300),
            (1000, 270), (1040, 270), (1080, 270),
            (2100, 200), (2200, 200), (2300, 200), (2400, 200),
            (3000, 250), (3040, 250), (3080, 250),
            (3500, 300), (3540, 300),
        ),
        "coins": ((1300, 300), (1800, 300), (3300, 300), (400, 210)),
    },
    2: {
        "bosses": ((1500, 250), (2900, 150)),
        "snacks": ((620, 210), (2900, 150)),
        "cats": ((620, 410), (745, 410), (900, 410), (1580, 410), (1785, 410)),
        "enemies": ((1350, 370),),
        "books": (
            (100, 235), (145, 220), (185, 205),
            (1000, 270), (1040, 270), (1080, 270),
            (1485, 160),
            (2100, 200), (2200, 200), (2300, 200),
            (1660, 100),
        ),
        "coins": ((1300, 300), (1800, 300), (900, 195), (270, 210)),
    },
}

# HUD icon and counter placement at the end of a level (icon, text) per item.
_FIXED_HUD: dict[int, tuple[tuple[str, Point, str, Point], ...]] = {
    1: (
        ("Coin.gif", (3515, 5), "coins", (3575, 30)),
        ("Book.gif", (3605, 5), "score", (3665, 30)),
        ("life.gif", (3695, 20), "lives", (3755, 30)),
    ),
    2: (
        ("Coin.gif", (2490, 5), "coins", (2550, 30)),
        ("Book.gif", (2580, 5), "score", (2640, 30)),
        ("life.gif", (2670, 20), "lives", (2750, 30)),
    ),
}
_FIXED_ORIGINS = {1: 3575, 2: 2550}


def camera_update(x: float, y: float, width: int, height: int, level: int) -> tuple[float, float]:
    """Camera offset that centres a ``width`` by ``height`` box at (x, y)."""
    cam_x = -(SCREEN_WIDTH // 2) + (x + width // 2)
    cam_y = -(SCREEN_HEIGHT // 2) + (y + height // 2)
    cam_x = max(cam_x, 0)
    cam_y = max(cam_y, 0)
    end = _LEVEL_ENDS.get(level)
    if end is not None and x > end[0]:
        cam_x = end[1] - SCREEN_WIDTH
    return float(cam_x), float(cam_y)


def _fixed_hud(x: float, level: int) -> bool:
    end = _LEVEL_ENDS.get(level)
    return end is not None and x > end[0]


def hud_origin(x: float, level: int) -> int:
    """The x of the coin counter, which the other HUD items are placed from."""
    if _fixed_hud(x, level):
        return _FIXED_ORIGINS[level]
    return max(-(SCREEN_WIDTH // 2) + (int(x) + HUD_WIDTH // 2), HUD_MIN_X)


def _hud_items(x: float, level: int) -> tuple[tuple[str, Point, str, Point], ...]:
    if _fixed_hud(x, level):
        return _FIXED_HUD[level]
    origin = hud_origin(x, level)
    return (
        ("Coin.gif", (origin - 60, 5), "coins", (origin, 30)),
        ("Book.gif", (origin + 30, 5), "score", (origin + 90, 30)),
        ("life.gif", (origin + 110, 7), "lives", (origin + 170, 30)),
    )


def object_positions(level: int) -> dict[str, list[Point]]:
    """Where each kind of object is drawn on ``level``, in drawing order."""
    return {kind: list(points) for kind, points in _LEVEL_OBJECTS.get(level, {}).items()}


class _AssetCache:
    """Loads images, animation frames and fonts once; missing files give None."""

    def __init__(self, asset_dir: str | PathLike) -> None:
        self.asset_dir = Path(asset_dir)
        self._images: dict[str, pygame.Surface | None] = {}
        self._animations: dict[str, RenderedAnimation | None] = {}
        self._frames: dict[tuple[str, int], pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    def image(self, name: str) -> pygame.Surface | None:
        if name not in self._images:
            try:
                self._images[name] = pygame.image.load(str(self.asset_dir / name))
            except (pygame.error, FileNotFoundError):
                self._images[name] = None
        return self._images[name]

    def frame(self, name: str, now: float) -> pygame.Surface | None:
        if name not in self._animations:
            try:
                self._animations[name] = load_animation(self.asset_dir / name)
            except (OSError, GifError):
                self._animations[name] = None
        animation = self._animations[name]
        if animation is None or not animation.frames:
            return None
        data = animation.frame_at(now)
        key = (name, id(data))
        if key not in self._frames:
            self._frames[key] = pygame.image.frombuffer(
                data, (animation.width, animation.height), "RGBA"
            )
        return self._frames[key]

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                self._fonts[size] = pygame.font.Font(str(self.asset_dir / FONT_FILE), size)
            except (pygame.error, OSError):
                self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]


class GameScreen:
    """Draws a level in world coordinates shifted by ``camera``."""

    def __init__(self, asset_dir: str | PathLike = ".") -> None:
        self.assets = _AssetCache(asset_dir)
        self.camera: tuple[float, float] = (0.0, 0.0)

    def _blit(self, surface: pygame.Surface, image: pygame.Surface | None, pos: Point) -> None:
        if image is not None:
            surface.blit(image, (pos[0] - self.camera[0], pos[1] - self.camera[1]))

    def _text(self, surface: pygame.Surface, text: str, pos: Point, centred: bool) -> None:
        rendered = self.assets.font(HUD_FONT_SIZE).render(text, True, ENTER_COLOUR)
        x = pos[0] - self.camera[0]
        if centred:
            x -= rendered.get_width() / 2
        surface.blit(rendered, (x, pos[1] - self.camera[1]))

    def draw_background(self, surface: pygame.Surface, level: int) -> None:
        name = BACKGROUNDS.get(level)
        if name is not None:
            self._blit(surface, self.assets.image(name), (0, 0))

    def draw_hud(
        self, surface: pygame.Surface, x: float, student: Student, level: int, now: float
    ) -> None:
        """Draw the coin, score and life counters near the player at ``x``."""
        values = {
            "coins": student.coins,
            "score": int(student.score),
            "lives": student.lives,
        }
        centred = _fixed_hud(int(x), level)
        for sprite, icon_pos, key, text_pos in _hud_items(int(x), level):
            self._blit(surface, self.assets.frame(sprite, now), icon_pos)
            self._text(surface, f"{values[key]} ", text_pos, centred)

    def draw_objects(
        self, surface: pygame.Surface, world: World, level: int, now: float
    ) -> None:
        """Draw every object of ``level``; bosses take a patrol step as they are drawn."""
        positions = object_positions(level)
        for boss, pos in zip(world.bosses, positions.get("bosses", ())):
            boss.patrol()
            if boss.active:
                self._blit(surface, self.assets.frame(boss.sprite, now), (boss.xreal, BOSS_Y))
            else:
                self._blit(surface, self.assets.frame(boss.dead_sprite, now), pos)
        for kind in ("snacks", "tooltips", "cats", "enemies", "books", "coins"):
            points = positions.get(kind, ())
            if kind == "tooltips":
                for name, pos in zip(TOOLTIPS, points):
                    self._blit(surface, self.assets.image(name), pos)
                continue
            for obj, pos in zip(getattr(world, kind), points):
                if isinstance(obj, Enemy):
                    sprite = obj.sprite if obj.active else obj.dead_sprite
                elif obj.active or isinstance(obj, Cat):
                    sprite = obj.sprite
                else:
                    continue
                self._blit(surface, self.assets.frame(sprite, now), pos)