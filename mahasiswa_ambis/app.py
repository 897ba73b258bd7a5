"""The game loop: level ticks, sprite animation, menus and drawing."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable
from os import PathLike

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .entities import SPRITE_SIZE, World  # noqa: E402
from .inputs import InputManager  # noqa: E402
from .menu import GameMenu, MenuAction, MenuController  # noqa: E402
from .player import MenuState, Student  # noqa: E402
from .collisions import check_books, check_cats, check_coins, check_snacks  # noqa: E402
from .saveload import DEFAULT_PATH, HighscoreStore  # noqa: E402
from .screen import SCREEN_HEIGHT, SCREEN_WIDTH, GameScreen, camera_update  # noqa: E402
from .sound import Sound, SoundManager  # noqa: E402

TITLE = "Mahasiswa Ambis"
FPS = 60
FRAME_FPS = 15
ANIMATION_DIVISOR = FPS // FRAME_FPS

START_POSITION = (10.0, 10.0)
LEFT_EDGE = 10.0
FALL_LIMIT = 500
SCORE_DIVISOR = 15.0

# Past this x the level is finished.
FINISH_LINES = {1: 3900, 2: 2895}

CONTROL_KEYS = (pygame.K_UP, pygame.K_SPACE, pygame.K_RIGHT, pygame.K_LEFT, pygame.K_ESCAPE)


class Game:
    """One running game: the student, the level's objects and the menus."""

    def __init__(
        self,
        asset_dir: str | PathLike = ".",
        save_path: str | PathLike = DEFAULT_PATH,
        audio: bool = True,
        sprite_width: int | None = None,
    ) -> None:
        self.sound = SoundManager(asset_dir, audio=audio)
        self.store = HighscoreStore(save_path)
        self.input = InputManager()
        self.screen = GameScreen(asset_dir)
        self.menu = GameMenu(asset_dir, store=self.store)
        self.controller = MenuController()
        self.student = Student(sound=self.sound)
        self.world = World()
        self._sprite_width = sprite_width
        self.level = 1
        self.xcu = 0.0
        self.camera: tuple[float, float] = (0.0, 0.0)
        self.active = False
        self.done = False
        self.menu_state: MenuState | None = None
        self._opened: MenuState | None = None
        self.new_game()
        self._open(MenuState.MAIN)

    @property
    def sprite_width(self) -> int:
        """Width of the student's sprite sheet."""
        if self._sprite_width is None:
            image = self.screen.assets.image(Student.sprite)
            self._sprite_width = image.get_width() if image is not None else SPRITE_SIZE
        return self._sprite_width

    def new_game(self) -> None:
        """Start over on level one with a fresh student and fresh objects."""
        self.student.reset()
        self.world.reset()
        self.level = 1
        self.xcu = 0.0
        self.active = False
        self.menu_state = None
        self._update_camera()

    def _open(self, state: MenuState | None) -> None:
        if state is None:
            return
        self.menu_state = state
        self.controller.state = state
        self.xcu = 0.0
        self._opened = state

    def _update_camera(self) -> None:
        self.camera = camera_update(self.xcu, 0, SPRITE_SIZE, 0, self.level)

    def _advance(self) -> bool:
        """Handle falling out and finishing; otherwise step the student.

        Returns whether the tick goes on to its own work.
        """
        student = self.student
        if student.y > FALL_LIMIT:
            student.x, student.y = START_POSITION
            self.level = 1
            self._open(MenuState.GAME_OVER)
            return False
        finish = FINISH_LINES.get(self.level)
        if finish is not None and student.x > finish:
            self.store.save(student.highscore())
            student.x, student.y = START_POSITION
            self.level += 1
            self.world.reset()
            self._open(MenuState.STAGE_COMPLETE)
            return False
        self.xcu = student.x
        self._open(student.update(self.world, self.level))
        return True

    def _steer(self) -> None:
        student = self.student
        held = self.input.is_key_down
        self.active = True
        if held(pygame.K_UP) and student.on_ground:
            student.jump()
        if held(pygame.K_SPACE) and student.on_ground:
            student.double_jump()
            self.sound.stop(Sound.GAMEOVER)
        elif held(pygame.K_RIGHT):
            self._open(student.move_forward(self.world, self.level))
        elif held(pygame.K_LEFT):
            if student.x >= LEFT_EDGE:
                self._open(student.move_back(self.world, self.level))
            if student.x < LEFT_EDGE:
                student.x = LEFT_EDGE
        elif held(pygame.K_ESCAPE):
            self._open(MenuState.PAUSED)
        else:
            student.stop()
            self.active = False

    def _collide(self) -> None:
        student, world = self.student, self.world
        check_snacks(student, world.snacks, self.level)
        check_books(student, world.books, self.level)
        check_coins(student, world.coins, self.level)
        self._open(check_cats(student, world.cats, self.level))
        student.total_score(SCORE_DIVISOR)

    def tick(self, keys: Iterable[int]) -> MenuState | None:
        """Run one game tick with ``keys`` held; return the menu it opened, if any."""
        self._opened = None
        self.input.update(keys)
        if self._advance():
            self._steer()
            self._collide()
        self._update_camera()
        return self._opened

    def animate(self) -> MenuState | None:
        """Run one animation tick: step the student and advance its sprite frame."""
        self._opened = None
        if self._advance():
            student = self.student
            if self.active:
                student.source_x += SPRITE_SIZE
            else:
                student.source_x = float(SPRITE_SIZE)
            if student.source_x >= self.sprite_width:
                student.source_x = 0.0
        self._update_camera()
        return self._opened

    def _apply(self, action: MenuAction) -> None:
        if action is MenuAction.EXIT:
            self.done = True
        elif action is MenuAction.NEW_GAME:
            self.new_game()
        else:
            self.menu_state = None

    def _draw_student(self, surface: pygame.Surface, flipped: bool) -> None:
        image = self.screen.assets.image(Student.sprite)
        if image is None:
            return
        student = self.student
        region = pygame.Rect(int(student.source_x), 0, SPRITE_SIZE, SPRITE_SIZE)
        sprite = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE), pygame.SRCALPHA)
        sprite.blit(image, (0, 0), area=region)
        if flipped:
            sprite = pygame.transform.flip(sprite, True, False)
        surface.blit(sprite, (student.x - self.camera[0], student.y - self.camera[1]))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the level, its objects, the HUD and the student."""
        now = pygame.time.get_ticks() / 1000.0
        self.screen.camera = self.camera
        self.screen.draw_background(surface, self.level)
        self.screen.draw_hud(surface, self.student.x, self.student, self.level, now)
        self.screen.draw_objects(surface, self.world, self.level, now)
        self._draw_student(surface, self.input.is_key_down(pygame.K_LEFT))
        pygame.display.flip()
        surface.fill((0, 0, 0))

    def run(self) -> None:
        """Open the window and play until the player exits."""
        os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "200,200")
        pygame.init()
        try:
            surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            frame = 0
            while not self.done:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.done = True
                if self.done:
                    break
                pressed = pygame.key.get_pressed()
                self.tick(key for key in CONTROL_KEYS if pressed[key])
                frame += 1
                if frame % ANIMATION_DIVISOR == 0:
                    self.animate()
                if self.menu_state is not None:
                    action = self.menu.run(
                        surface, self.controller, self.student, self.sound, self.level
                    )
                    self._apply(action)
                    if self.done:
                        break
                self.draw(surface)
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(
        prog="mahasiswa-ambis", description="A side-scrolling campus platformer."
    )
    parser.add_argument("--assets", default=".", help="directory holding images, fonts and sounds")
    parser.add_argument("--save", default=DEFAULT_PATH, help="file keeping the highscore")
    parser.add_argument("--mute", action="store_true", help="play without sound")
    args = parser.parse_args(argv)
    Game(asset_dir=args.assets, save_path=args.save, audio=not args.mute).run()
    return 0