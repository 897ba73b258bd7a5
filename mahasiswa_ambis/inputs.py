"""Keyboard state tracking and key event tests."""

from __future__ import annotations

import os
from collections.abc import Iterable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402


class InputManager:
    """Remembers which keys are held and answers questions about key events."""

    def __init__(self) -> None:
        self._held: frozenset[int] = frozenset()

    def update(self, pressed: Iterable[int]) -> None:
        """Record the key codes currently held down."""
        self._held = frozenset(pressed)

    def is_key_pressed(self, event, key: int) -> bool:
        """Whether ``event`` is the press of ``key``."""
        return event.type == pygame.KEYDOWN and getattr(event, "key", None) == key

    def is_key_down(self, key: int) -> bool:
        """Whether ``key`` was held at the last update."""
        return key in self._held

    def is_key_released(self, event, key: int) -> bool:
        """Whether ``event`` is the release of ``key``."""
        return event.type == pygame.KEYUP and getattr(event, "key", None) == key