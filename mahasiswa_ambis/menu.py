"""Menu screens: main menu, pause, credits, highscore, game over and stage end."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from os import PathLike

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .player import MenuState, Student  # noqa: E402
from .saveload import HighscoreStore  # noqa: E402
from .screen import (  # noqa: E402
    ENTER_COLOUR,
    MENU_COLOUR,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WHITE,
    _AssetCache,
)
from .sound import Sound, SoundManager  # noqa: E402

MENU_SLOTS = 4
FINAL_LEVEL = 3
MENU_FONT_SIZE = 50

CREDITS = ("Created by: ", "The development team")

_CENTRE_X = SCREEN_WIDTH // 2
_CENTRE_Y = SCREEN_HEIGHT // 2

_ENTRIES: dict[MenuState, tuple[tuple[str, int], ...]] = {
    MenuState.MAIN: (("Start", -80), ("Highscore", -10), ("Credits", 60), ("Exit", 130)),
    MenuState.PAUSED: (("New Game", -170), ("Resume Game", -100), ("Exit", -30)),
}
_CREDIT_OFFSETS = (-175, -110, -40, 30, 100, 165)

_BACKGROUNDS = {
    MenuState.GAME_OVER: "GameOver.png",
    MenuState.STAGE_COMPLETE: "map.png",
}
_DEFAULT_BACKGROUND = "main_menu.png"


class MenuAction(Enum):
    """What the player chose when the menu closes."""

    START = "start"
    NEW_GAME = "new_game"
    RESUME = "resume"
    CONTINUE = "continue"
    EXIT = "exit"


@dataclass
class MenuController:
    """Which menu screen is shown and which entry is selected."""

    state: MenuState = MenuState.MAIN
    selection: int = 0
    restart_pending: bool = False

    def handle_key(self, key: int, level: int) -> MenuAction | None:
        """React to a key press; return the action when the menu closes."""
        if key == pygame.K_RETURN:
            return self._enter(level)
        if key == pygame.K_DOWN:
            self.selection = (self.selection + 1) % MENU_SLOTS
        elif key == pygame.K_UP:
            self.selection = (self.selection - 1) % MENU_SLOTS
        elif key == pygame.K_ESCAPE and self.state in (MenuState.CREDITS, MenuState.HIGHSCORE):
            self.state = MenuState.MAIN
        return None

    def _enter(self, level: int) -> MenuAction | None:
        if self.state is MenuState.GAME_OVER:
            self.state = MenuState.MAIN
            self.restart_pending = True
            return None
        if self.state is MenuState.STAGE_COMPLETE:
            self.state = MenuState.MAIN
            self.restart_pending = True
            return None if level == FINAL_LEVEL else MenuAction.CONTINUE
        if self.state is MenuState.MAIN:
            if self.selection == 0:
                return MenuAction.NEW_GAME if self.restart_pending else MenuAction.START
            if self.selection == 1:
                self.state = MenuState.HIGHSCORE
            elif self.selection == 2:
                self.state = MenuState.CREDITS
            elif self.selection == 3:
                return MenuAction.EXIT
            return None
        if self.state is MenuState.PAUSED:
            return {
                0: MenuAction.NEW_GAME,
                1: MenuAction.RESUME,
                2: MenuAction.EXIT,
            }.get(self.selection)
        return None

    def items(self) -> list[tuple[str, bool]]:
        """The lines of a list screen, each with whether it is highlighted."""
        if self.state in _ENTRIES:
            return [
                (label, index == self.selection)
                for index, (label, _) in enumerate(_ENTRIES[self.state])
            ]
        if self.state is MenuState.CREDITS:
            return [(line, False) for line in CREDITS]
        return []


def _cue_sounds(sound: SoundManager, state: MenuState) -> None:
    if state is MenuState.GAME_OVER:
        sound.play(Sound.GAMEOVER)
        sound.stop(Sound.MENU)
    elif state is MenuState.MAIN:
        sound.stop(Sound.GAMEOVER)
        sound.stop(Sound.COMPLETE)
        sound.play(Sound.MENU)
    elif state is MenuState.PAUSED:
        sound.stop(Sound.GAMEOVER)
        sound.play(Sound.MENU)
    elif state is MenuState.STAGE_COMPLETE:
        sound.stop(Sound.GAMEOVER)
        sound.stop(Sound.MENU)
        sound.play(Sound.COMPLETE)


class GameMenu:
    """Draws the menu screens and runs the menu until the player chooses."""

    def __init__(
        self, asset_dir: str | PathLike = ".", store: HighscoreStore | None = None
    ) -> None:
        self.assets = _AssetCache(asset_dir)
        self.store = store if store is not None else HighscoreStore()

    def _text(
        self,
        surface: pygame.Surface,
        text: str,
        pos: tuple[int, int],
        colour: tuple[int, int, int],
        centred: bool = True,
    ) -> None:
        rendered = self.assets.font(MENU_FONT_SIZE).render(text, True, colour)
        x = pos[0] - rendered.get_width() / 2 if centred else pos[0]
        surface.blit(rendered, (x, pos[1]))

    def _blit(self, surface: pygame.Surface, image: pygame.Surface | None, pos) -> None:
        if image is not None:
            surface.blit(image, pos)

    def draw(
        self,
        surface: pygame.Surface,
        controller: MenuController,
        student: Student,
        level: int,
        now: float,
    ) -> None:
        """Draw the screen ``controller`` is on."""
        state = controller.state
        background = _BACKGROUNDS.get(state, _DEFAULT_BACKGROUND)
        self._blit(surface, self.assets.image(background), (0, 0))

        if state is MenuState.GAME_OVER:
            self._text(surface, "Game Over", (_CENTRE_X, _CENTRE_Y - 50), WHITE)
        elif state in _ENTRIES:
            if state is MenuState.MAIN:
                self._blit(
                    surface, self.assets.image("logo.png"), (_CENTRE_X - 115, _CENTRE_Y - 200)
                )
            for (label, highlighted), (_, offset) in zip(controller.items(), _ENTRIES[state]):
                colour = ENTER_COLOUR if highlighted else MENU_COLOUR
                self._text(surface, label, (_CENTRE_X, _CENTRE_Y + offset), colour)
        elif state is MenuState.CREDITS:
            for (line, _), offset in zip(controller.items(), _CREDIT_OFFSETS):
                self._text(surface, line, (_CENTRE_X, _CENTRE_Y + offset), MENU_COLOUR)
        elif state is MenuState.STAGE_COMPLETE:
            title = "STAGE COMPLETED!" if level == 1 else "GAME COMPLETED!"
            self._text(surface, title, (_CENTRE_X, _CENTRE_Y - 200), ENTER_COLOUR)
            rows = (
                ("coins.gif", (170, 85), student.coins, (400, 140)),
                ("life x150.gif", (170, 168), student.lives, (400, 210)),
                ("Books.gif", (170, 225), int(student.score), (400, 280)),
            )
            for sprite, icon_pos, value, text_pos in rows:
                self._blit(surface, self.assets.frame(sprite, now), icon_pos)
                self._text(surface, f"{value} ", text_pos, ENTER_COLOUR, centred=False)
            self._text(surface, "Total Score", (_CENTRE_X, _CENTRE_Y + 100), MENU_COLOUR)
            self._text(
                surface, f"{int(student.highscore())} ", (330, 420), ENTER_COLOUR, centred=False
            )
        elif state is MenuState.HIGHSCORE:
            self._text(surface, "Highscore", (_CENTRE_X, _CENTRE_Y - 100), MENU_COLOUR)
            self._text(surface, str(self.store.load()), (_CENTRE_X, _CENTRE_Y), MENU_COLOUR)

    def run(
        self,
        surface: pygame.Surface,
        controller: MenuController,
        student: Student,
        sound: SoundManager,
        level: int,
    ) -> MenuAction:
        """Show the menu until the player picks an action, and return it."""
        controller.restart_pending = False
        student.highscore()
        while True:
            _cue_sounds(sound, controller.state)
            self.draw(surface, controller, student, level, pygame.time.get_ticks() / 1000.0)
            pygame.display.flip()
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return MenuAction.EXIT
            if event.type != pygame.KEYDOWN:
                continue
            action = controller.handle_key(event.key, level)
            if action is MenuAction.CONTINUE:
                sound.play(Sound.MENU)
            if action is not None:
                return action