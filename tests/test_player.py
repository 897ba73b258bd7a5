import pytest

from mahasiswa_ambis.entities import FALL_STEP, SPRITE_SIZE, STANDING_Y, World
from mahasiswa_ambis.player import (
    ENEMY_TOP,
    KNOCKBACK,
    MAX_X,
    STOMP_BOUNCE,
    MenuState,
    Student,
)
from mahasiswa_ambis.sound import Sound


@pytest.fixture
def world():
    return World()


def test_reset_restores_a_new_game():
    student = Student()
    student.x, student.lives, student.coins, student.score = 900.0, 1, 4, 20.0
    student.reset()
    assert student == Student()


def test_jump_sets_upward_velocity_and_plays_sound():
    student = Student(on_ground=True)
    student.jump()
    assert student.velocity_y == -student.jump_speed
    assert not student.on_ground
    assert student.sound.history == [Sound.JUMP]


def test_double_jump_is_stronger():
    student = Student()
    student.double_jump()
    assert student.velocity_y == -student.jump_speed_double
    assert student.jump_speed_double > student.jump_speed


def test_stop_halts_horizontal_motion():
    student = Student(velocity_x=5.0)
    assert student.stop() == 0.0
    assert student.velocity_x == 0.0


def test_move_forward_sets_speed(world):
    student = Student(x=100.0)
    assert student.move_forward(world, 1) is None
    assert student.velocity_x == student.move_speed


def test_move_forward_stops_at_the_edge(world):
    student = Student(x=float(MAX_X))
    student.move_forward(world, 1)
    assert student.velocity_x == 0.0


def test_move_back_limit_depends_on_level(world):
    first = Student(x=float(MAX_X))
    first.move_back(world, 1)
    assert first.velocity_x == -first.move_speed
    second = Student(x=float(MAX_X))
    second.move_back(world, 2)
    assert second.velocity_x == 0.0


def test_walking_into_live_enemy_knocks_back(world):
    student = Student(x=1400.0, y=400.0)
    assert student.move_forward(world, 1) is None
    assert student.x == 1400.0 - KNOCKBACK
    assert student.lives == Student().lives - 1


def test_walking_into_enemy_on_last_life_ends_the_game(world):
    student = Student(x=1400.0, y=400.0, lives=1)
    assert student.move_back(world, 2) is MenuState.GAME_OVER
    assert student.lives == 1


def test_walking_past_dead_enemy(world):
    world.enemies[0].active = False
    student = Student(x=1400.0, y=400.0)
    student.move_forward(world, 1)
    assert student.x == 1400.0
    assert student.velocity_x == student.move_speed


def test_lose_life():
    student = Student(lives=2)
    assert student.lose_life() is False
    assert student.lives == 1
    assert student.lose_life() is True
    assert student.lives == 1


def test_gravity_pulls_the_student_down(world):
    student = Student(x=100.0, y=10.0)
    student.update(world, 1)
    assert student.velocity_y == student.gravity
    assert student.y == 10.0 + student.gravity
    assert not student.on_ground


def test_landing_snaps_to_the_ground(world):
    student = Student(x=100.0, y=STANDING_Y - 1.0)
    student.update(world, 1)
    assert student.on_ground
    assert student.double_jump_ready
    assert student.y == STANDING_Y


def test_falling_into_a_pit(world):
    student = Student(x=350.0, y=float(STANDING_Y), on_ground=True)
    student.update(world, 1)
    assert student.y == STANDING_Y + FALL_STEP


def test_stomping_the_enemy(world):
    student = Student(x=1400.0, y=400.0)
    student.update(world, 1)
    assert student.velocity_y == STOMP_BOUNCE
    assert student.y == ENEMY_TOP - SPRITE_SIZE
    assert not world.enemies[0].active


def test_running_into_a_boss(world):
    boss_x = world.bosses[0].xreal
    student = Student(x=boss_x + 10.0, y=float(STANDING_Y), on_ground=True)
    assert student.update(world, 2) is None
    assert student.x == boss_x + 10.0 - KNOCKBACK
    assert student.lives == Student().lives - 1


def test_boss_on_last_life_ends_the_game(world):
    boss_x = world.bosses[1].xreal
    student = Student(x=boss_x + 10.0, y=float(STANDING_Y), on_ground=True, lives=1)
    assert student.update(world, 2) is MenuState.GAME_OVER


def test_unknown_level_only_moves(world):
    student = Student(x=100.0, y=STANDING_Y - 1.0)
    student.update(world, 3)
    assert student.y == STANDING_Y
    assert not student.on_ground


def test_total_score_divides_score():
    student = Student(score=45.0)
    assert student.total_score(1.0) == student.score
    assert student.total_score_stage == student.score


def test_highscore_of_a_new_game():
    assert Student().highscore() == 6


def test_highscore_counts_coins():
    student = Student()
    before = student.highscore()
    student.coins += 1
    assert student.highscore() == before + 1
    assert student.best_score == before + 1