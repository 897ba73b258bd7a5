"""The player character: movement, jumping, falling and score keeping."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import ClassVar

from .entities import FALL_STEP, GROUND_Y, SPRITE_SIZE, STANDING_Y, GameObject, World
from .sound import Sound, SoundManager

KNOCKBACK = 130
ENEMY_TOP = 360
STOMP_BOUNCE = -20.0
ENEMY_ZONE = (1350, 1450)
BOSS_REACH = 50
MAX_X = 4000

# Horizontal ranges (exclusive) where the floor has a hole, per level.
PITS: dict[int, tuple[tuple[int, int], ...]] = {
    1: ((328, 440), (1711, 1852), (2270, 2450), (2850, 2935), (3530, 3690)),
    2: ((245, 325), (465, 535), (1910, 2080), (2145, 2270)),
}


class MenuState(IntEnum):
    """The screen the menu shows."""

    MAIN = 0
    PAUSED = 1
    GAME_OVER = 2
    CREDITS = 3
    STAGE_COMPLETE = 4
    HIGHSCORE = 5


@dataclass
class Student(GameObject):
    """The ambitious student the player steers through the campus."""

    sprite: ClassVar[str] = "Mahasiswa.png"

    x: float = 10.0
    y: float = 10.0
    source_x: float = 64.0
    gravity: float = 1.0
    move_speed: float = 5.0
    on_ground: bool = False
    double_jump_ready: bool = False
    jump_speed: float = 15.0
    jump_speed_double: float = 23.0
    lives: int = 3
    score: float = 0.0
    coins: int = 0
    total_score_stage: float = 0.0
    best_score: float = 0.0
    sound: SoundManager = field(
        default_factory=lambda: SoundManager(audio=False), repr=False, compare=False
    )

    def reset(self) -> None:
        """Restore the state of a new game, keeping the sound manager."""
        fresh = type(self)(sound=self.sound)
        for item in fields(self):
            setattr(self, item.name, getattr(fresh, item.name))

    def jump(self) -> None:
        self.velocity_y = -self.jump_speed
        self.on_ground = False
        self.sound.play(Sound.JUMP)

    def double_jump(self) -> None:
        self.velocity_y = -self.jump_speed_double
        self.on_ground = False
        self.sound.play(Sound.JUMP)

    def stop(self) -> float:
        """Halt horizontal motion."""
        self.velocity_x = 0.0
        return self.velocity_x

    def lose_life(self) -> bool:
        """Take a life; return True when it was the last one and the game is over."""
        if self.lives > 1:
            self.lives -= 1
            return False
        return True

    def _walk(
        self, world: World, level: int, direction: int, limited: bool
    ) -> MenuState | None:
        if level not in PITS:
            return None
        if ENEMY_ZONE[0] <= self.x <= ENEMY_ZONE[1] and self.y >= ENEMY_TOP:
            if world.enemies[0].active:
                self.x -= direction * KNOCKBACK
                return MenuState.GAME_OVER if self.lose_life() else None
            self.velocity_x = direction * self.move_speed
            return None
        if not limited or self.x < MAX_X:
            self.velocity_x = direction * self.move_speed
        return None

    def move_forward(self, world: World, level: int) -> MenuState | None:
        """Walk right; bumping a live enemy knocks the student back."""
        return self._walk(world, level, 1, limited=True)

    def move_back(self, world: World, level: int) -> MenuState | None:
        """Walk left; bumping a live enemy knocks the student forward."""
        return self._walk(world, level, -1, limited=level == 2)

    def _land(self) -> None:
        self.on_ground = self.y + SPRITE_SIZE >= GROUND_Y
        self.double_jump_ready = self.on_ground
        if self.on_ground:
            self.y = float(STANDING_Y)

    def _check_bosses(self, world: World) -> MenuState | None:
        for boss in world.bosses[:2]:
            if boss.xreal <= self.x <= boss.xreal + BOSS_REACH and self.y >= ENEMY_TOP:
                if boss.active:
                    self.x -= KNOCKBACK
                    return MenuState.GAME_OVER if self.lose_life() else None
                self.velocity_x = self.move_speed
                return None
        return None

    def _settle(self, world: World, level: int) -> None:
        if self.y >= STANDING_Y and any(
            left < self.x < right for left, right in PITS[level]
        ):
            self.y += FALL_STEP
            return
        if ENEMY_ZONE[0] < self.x < ENEMY_ZONE[1] and self.y >= ENEMY_TOP:
            enemy = world.enemies[0]
            if enemy.active:
                self.velocity_y = STOMP_BOUNCE
                self.y = float(ENEMY_TOP - SPRITE_SIZE)
            else:
                self.on_ground = self.y + SPRITE_SIZE >= GROUND_Y
                self.double_jump_ready = self.on_ground
            enemy.active = False
            return
        self._land()

    def update(self, world: World, level: int) -> MenuState | None:
        """Advance one tick: gravity, motion, bosses, pits, stomping and landing."""
        if self.on_ground:
            self.velocity_y = 0.0
        else:
            self.velocity_y += self.gravity
        self.x += self.velocity_x
        self.y += self.velocity_y

        if level not in PITS:
            return None
        outcome = self._check_bosses(world) if level == 2 else None
        self._settle(world, level)
        return outcome

    def total_score(self, divisor: float) -> float:
        """The stage score as the collected score divided by ``divisor``."""
        self.total_score_stage = self.score / divisor
        return self.total_score_stage

    def highscore(self) -> float:
        """Combine score, coins and remaining lives into the best score."""
        self.best_score = self.score + self.coins + self.lives * 2
        return self.best_score