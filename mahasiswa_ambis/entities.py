"""Game objects of the campus levels: pickups, enemies, bosses and their set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

SPRITE_SIZE = 64
GROUND_Y = 466
STANDING_Y = GROUND_Y - SPRITE_SIZE
FALL_STEP = 15

# Horizontal ranges (exclusive) where an enemy drops through the floor.
ENEMY_PITS: tuple[tuple[int, int], ...] = ((400, 450), (1790, 1820))


@dataclass
class GameObject:
    """Position, sprite-sheet offset and motion shared by every object."""

    x: float = 10.0
    y: float = float(STANDING_Y)
    source_x: float = 0.0
    source_y: float = 0.0
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    gravity: float = 0.0

    def move_by(self, dx: float, dy: float) -> None:
        """Shift the object by ``dx`` and ``dy``."""
        self.x += dx
        self.y += dy


@dataclass
class Pickup(GameObject):
    """A stationary object that is active until the player touches it."""

    sprite: ClassVar[str] = ""
    active: bool = True

    def reset(self) -> None:
        """Make the pickup active again, as at the start of a game."""
        self.active = True


@dataclass
class Book(Pickup):
    """A book that raises the score."""

    sprite: ClassVar[str] = "Book.gif"


@dataclass
class Snack(Pickup):
    """A fried snack that trades coins for a life."""

    sprite: ClassVar[str] = "Gor.gif"


@dataclass
class Coin(Pickup):
    """A coin that adds to the player's purse."""

    sprite: ClassVar[str] = "Coin.gif"


@dataclass
class Cat(Pickup):
    """A cat that costs a life; it is drawn whether active or not."""

    sprite: ClassVar[str] = "Kucing.gif"


@dataclass
class Enemy(GameObject):
    """A rival student who can be stomped on and falls into pits."""

    sprite: ClassVar[str] = "musuh.gif"
    dead_sprite: ClassVar[str] = "musuh_mati.gif"

    source_x: float = 64.0
    gravity: float = 1.0
    move_speed: float = 2.5
    jump_speed: float = 15.0
    on_ground: bool = False
    active: bool = True

    def reset(self) -> None:
        """Restore the starting position, motion and liveness."""
        self.move_speed = 2.5
        self.x = 10.0
        self.y = float(STANDING_Y)
        self.source_x = 64.0
        self.source_y = 0.0
        self.on_ground = False
        self.jump_speed = 15.0
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.gravity = 1.0
        self.active = True

    def move_forward(self) -> None:
        self.velocity_x = self.move_speed

    def move_back(self) -> None:
        self.velocity_x = -self.move_speed

    def step(self) -> None:
        """Apply gravity and velocity for one tick, then land or fall."""
        if self.on_ground:
            self.velocity_y = 0.0
        else:
            self.velocity_y += self.gravity

        self.x += self.velocity_x
        self.y += self.velocity_y

        if self.y >= STANDING_Y and any(
            left < self.x < right for left, right in ENEMY_PITS
        ):
            self.y += FALL_STEP
            return

        self.on_ground = self.y + SPRITE_SIZE >= GROUND_Y
        if self.on_ground:
            self.y = float(STANDING_Y)


@dataclass
class Boss(Enemy):
    """An enemy that patrols between two fixed points on level two."""

    PATROL_LEFT: ClassVar[int] = 2500
    PATROL_RIGHT: ClassVar[int] = 2700

    xreal: int = PATROL_LEFT
    direction: int = 0

    def reset(self, xreal: int) -> None:  # type: ignore[override]
        """Restore the starting state with the patrol position ``xreal``."""
        super().reset()
        self.xreal = xreal

    def patrol(self) -> None:
        """Advance one patrol step, turning at either end point."""
        if self.xreal == self.PATROL_LEFT:
            self.direction = 1
        elif self.xreal == self.PATROL_RIGHT:
            self.direction = -1
        self.xreal += self.direction


def _many(kind: type, count: int) -> list:
    return [kind() for _ in range(count)]


@dataclass
class World:
    """Every object of a level, in the numbers the levels place them."""

    BOSS_STARTS: ClassVar[tuple[int, int]] = (2500, 2700)

    snacks: list[Snack] = field(default_factory=lambda: _many(Snack, 2))
    enemies: list[Enemy] = field(default_factory=lambda: _many(Enemy, 2))
    coins: list[Coin] = field(default_factory=lambda: _many(Coin, 4))
    books: list[Book] = field(default_factory=lambda: _many(Book, 15))
    cats: list[Cat] = field(default_factory=lambda: _many(Cat, 5))
    bosses: list[Boss] = field(
        default_factory=lambda: [Boss(xreal=start) for start in World.BOSS_STARTS]
    )

    def reset(self) -> None:
        """Reactivate every object, as after a game over or a level change."""
        for pickup in (*self.books, *self.snacks, *self.coins, *self.cats):
            pickup.reset()
        for enemy in self.enemies:
            enemy.reset()
        for boss, start in zip(self.bosses, self.BOSS_STARTS):
            boss.reset(start)