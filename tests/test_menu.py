import pygame
import pytest

from mahasiswa_ambis.menu import (
    CREDITS,
    MENU_SLOTS,
    MenuAction,
    MenuController,
    _cue_sounds,
)
from mahasiswa_ambis.player import MenuState
from mahasiswa_ambis.sound import Sound, SoundManager


def test_down_wraps_around():
    controller = MenuController()
    seen = []
    for _ in range(MENU_SLOTS + 1):
        controller.handle_key(pygame.K_DOWN, 1)
        seen.append(controller.selection)
    assert seen == [1, 2, 3, 0, 1]


def test_up_wraps_to_last_slot():
    controller = MenuController()
    controller.handle_key(pygame.K_UP, 1)
    assert controller.selection == MENU_SLOTS - 1


def test_start_from_main_menu():
    controller = MenuController()
    assert controller.handle_key(pygame.K_RETURN, 1) is MenuAction.START


def test_start_after_game_over_is_new_game():
    controller = MenuController(state=MenuState.GAME_OVER)
    assert controller.handle_key(pygame.K_RETURN, 1) is None
    assert controller.state is MenuState.MAIN
    assert controller.restart_pending
    assert controller.handle_key(pygame.K_RETURN, 1) is MenuAction.NEW_GAME


@pytest.mark.parametrize(
    "selection,state",
    [(1, MenuState.HIGHSCORE), (2, MenuState.CREDITS)],
)
def test_main_menu_sub_screens_and_escape(selection, state):
    controller = MenuController(selection=selection)
    assert controller.handle_key(pygame.K_RETURN, 1) is None
    assert controller.state is state
    controller.handle_key(pygame.K_ESCAPE, 1)
    assert controller.state is MenuState.MAIN


def test_exit_from_main_menu():
    controller = MenuController(selection=3)
    assert controller.handle_key(pygame.K_RETURN, 1) is MenuAction.EXIT


def test_escape_in_main_menu_stays():
    controller = MenuController(selection=2)
    assert controller.handle_key(pygame.K_ESCAPE, 1) is None
    assert controller.state is MenuState.MAIN
    assert controller.selection == 2


@pytest.mark.parametrize(
    "selection,action",
    [(0, MenuAction.NEW_GAME), (1, MenuAction.RESUME), (2, MenuAction.EXIT), (3, None)],
)
def test_pause_menu_choices(selection, action):
    controller = MenuController(state=MenuState.PAUSED, selection=selection)
    assert controller.handle_key(pygame.K_RETURN, 1) is action


def test_stage_complete_continues_before_final_level():
    controller = MenuController(state=MenuState.STAGE_COMPLETE)
    assert controller.handle_key(pygame.K_RETURN, 2) is MenuAction.CONTINUE
    assert controller.state is MenuState.MAIN


def test_stage_complete_after_final_level_returns_to_menu():
    controller = MenuController(state=MenuState.STAGE_COMPLETE)
    assert controller.handle_key(pygame.K_RETURN, 3) is None
    assert controller.state is MenuState.MAIN
    assert controller.handle_key(pygame.K_RETURN, 3) is MenuAction.NEW_GAME


def test_main_items_highlight_selection():
    controller = MenuController(selection=2)
    items = controller.items()
    assert [label for label, _ in items] == ["Start", "Highscore", "Credits", "Exit"]
    assert [flag for _, flag in items] == [False, False, True, False]


def test_pause_items():
    controller = MenuController(state=MenuState.PAUSED)
    assert controller.items() == [
        ("New Game", True),
        ("Resume Game", False),
        ("Exit", False),
    ]


def test_credit_items_not_highlighted():
    controller = MenuController(state=MenuState.CREDITS)
    assert controller.items() == [(line, False) for line in CREDITS]


def test_game_over_has_no_items():
    assert MenuController(state=MenuState.GAME_OVER).items() == []


def test_game_over_sounds():
    sound = SoundManager(audio=False)
    sound.play(Sound.MENU)
    _cue_sounds(sound, MenuState.GAME_OVER)
    assert Sound.GAMEOVER in sound.playing
    assert Sound.MENU not in sound.playing


def test_main_menu_sounds_loop_menu_music():
    sound = SoundManager(audio=False)
    _cue_sounds(sound, MenuState.MAIN)
    _cue_sounds(sound, MenuState.MAIN)
    assert sound.history.count(Sound.MENU) == 1
    assert Sound.MENU in sound.playing