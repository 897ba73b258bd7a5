"""Collision checks between the student and the objects placed in each level."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .entities import Book, Cat, Coin, Enemy, Snack
from .player import MenuState, Student
from .sound import Sound

SNACK_PRICE = 2
FULL_LIVES = 3


@dataclass(frozen=True)
class _Zone:
    """An open rectangle that triggers the object at ``index``."""

    left: int
    right: int
    top: int
    bottom: int
    index: int
    points: float = 0.0
    checked: int | None = None  # object whose state decides the outcome
    needs_room: bool = True  # snack only eaten below full lives

    def contains(self, student: Student) -> bool:
        return self.left < student.x < self.right and self.top < student.y < self.bottom

    @property
    def gate(self) -> int:
        return self.index if self.checked is None else self.checked


def _first_hit(zones: Sequence[_Zone], student: Student) -> _Zone | None:
    return next((zone for zone in zones if zone.contains(student)), None)


_SNACK_ZONES: dict[int, tuple[_Zone, ...]] = {
    1: (
        _Zone(1490, 1520, 220, 280, 0, needs_room=False),
        _Zone(2890, 2920, 120, 180, 1),
    ),
    2: (
        _Zone(1490, 1520, 220, 280, 0, needs_room=False),
        _Zone(2890, 2920, 120, 180, 1),
        _Zone(3290, 3320, 270, 330, 2),
    ),
}

_COIN_ZONES: dict[int, tuple[_Zone, ...]] = {
    1: (
        _Zone(1290, 1315, 270, 330, 0),
        _Zone(1790, 1815, 270, 330, 1),
        _Zone(3290, 3315, 270, 330, 2),
        _Zone(390, 415, 180, 240, 3),
    ),
    2: (
        _Zone(1290, 1315, 270, 330, 0),
        _Zone(1790, 1815, 270, 330, 1),
        _Zone(890, 915, 165, 225, 2),
        _Zone(260, 285, 190, 240, 3),
    ),
}

_BOOK_ZONES: dict[int, tuple[_Zone, ...]] = {
    1: (
        _Zone(90, 115, 270, 330, 0, 4),
        _Zone(130, 155, 270, 330, 1, 4),
        _Zone(170, 195, 270, 330, 2, 4),
        _Zone(990, 1015, 240, 300, 3, 4),
        _Zone(1030, 1055, 240, 300, 4, 4),
        _Zone(1070, 1095, 240, 300, 5, 4),
        _Zone(2090, 2115, 170, 230, 6, 4),
        _Zone(2190, 2215, 170, 230, 7, 4),
        _Zone(2270, 2315, 170, 230, 8, 4),
        _Zone(2390, 2415, 170, 230, 9, 4),
        _Zone(2990, 3015, 220, 280, 10, 4),
        _Zone(3030, 3055, 220, 280, 11, 4),
        _Zone(3070, 3095, 220, 280, 12, 4),
        _Zone(3490, 3515, 270, 330, 13, 4),
        _Zone(3530, 3555, 270, 330, 14, 4),
    ),
    2: (
        _Zone(90, 115, 70, 265, 0, 4),
        _Zone(135, 160, 190, 250, 1, 4),
        _Zone(175, 200, 175, 235, 2, 4),
        _Zone(990, 1015, 240, 300, 3, 4),
        _Zone(1030, 1055, 240, 300, 4, 4),
        # This book's pickup is decided by the previous book's state.
        _Zone(1070, 1095, 240, 300, 5, 5, checked=4),
        _Zone(1470, 1495, 130, 190, 6, 5),
        _Zone(2090, 2115, 170, 230, 7, 5),
        _Zone(2190, 2215, 170, 230, 8, 5),
        _Zone(2290, 2310, 170, 230, 9, 5),
        _Zone(1650, 1675, 70, 130, 10, 5),
    ),
}

_ENEMY_ZONES: dict[int, _Zone] = {
    1: _Zone(1350, 1435, 351, 479, 0),
    2: _Zone(1340, 1405, 351, 474, 0),
}

_CAT_ZONES: dict[int, tuple[_Zone, ...]] = {
    1: (
        _Zone(468, 535, 351, 479, 0),
        _Zone(1070, 1140, 351, 479, 1),
        _Zone(1920, 1990, 351, 479, 2),
        _Zone(2070, 2135, 351, 479, 3),
        _Zone(588, 655, 338, 466, 4),
    ),
    2: (
        _Zone(595, 660, 351, 479, 0),
        _Zone(713, 785, 338, 466, 1),
        _Zone(868, 935, 338, 466, 2),
        _Zone(1550, 1620, 251, 379, 3),
        _Zone(1755, 1820, 338, 466, 4),
    ),
}


def check_snacks(student: Student, snacks: Sequence[Snack], level: int) -> int | None:
    """Trade coins for a life at a snack; return the index of the snack eaten."""
    zone = _first_hit(_SNACK_ZONES.get(level, ()), student)
    if zone is None:
        return None
    snack = snacks[zone.index]
    if not snack.active:
        return None
    has_room = student.lives < FULL_LIVES or not zone.needs_room
    if not (has_room and student.coins >= SNACK_PRICE):
        return None
    student.sound.play(Sound.EAT)
    snack.active = False
    student.lives += 1
    student.coins -= SNACK_PRICE
    return zone.index


def check_coins(student: Student, coins: Sequence[Coin], level: int) -> int | None:
    """Collect a coin the student touches; return its index if one was gained."""
    zone = _first_hit(_COIN_ZONES.get(level, ()), student)
    if zone is None:
        return None
    coin = coins[zone.index]
    gained = coin.active
    if gained:
        student.sound.play(Sound.COIN)
        student.coins += 1
    coin.active = False
    return zone.index if gained else None


def check_books(student: Student, books: Sequence[Book], level: int) -> int | None:
    """Collect a book the student touches; return its index if score was added."""
    zone = _first_hit(_BOOK_ZONES.get(level, ()), student)
    if zone is None:
        return None
    gained = books[zone.gate].active
    if gained:
        student.sound.play(Sound.BOOK)
        student.score += zone.points
    books[zone.index].active = False
    return zone.index if gained else None


def check_enemy(student: Student, enemies: Sequence[Enemy], level: int) -> bool:
    """Run into the first enemy; return True when it cost the student."""
    zone = _ENEMY_ZONES.get(level)
    if zone is None or not zone.contains(student):
        return False
    enemy = enemies[zone.index]
    if not enemy.active:
        return False
    student.lose_life()
    enemy.active = False
    return True


def check_cats(student: Student, cats: Sequence[Cat], level: int) -> MenuState | None:
    """Bump into a cat; away from every cat they all become dangerous again.

    Returns ``MenuState.GAME_OVER`` when a cat took the last life.
    """
    zones = _CAT_ZONES.get(level)
    if zones is None:
        return None
    zone = _first_hit(zones, student)
    if zone is None:
        for cat in cats[: len(zones)]:
            cat.active = True
        return None
    cat = cats[zone.index]
    if not cat.active:
        return None
    game_over = student.lose_life()
    student.sound.play(Sound.CAT)
    cat.active = False
    return MenuState.GAME_OVER if game_over else None