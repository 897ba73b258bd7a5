import pytest

from mahasiswa_ambis.entities import (
    Book,
    Boss,
    Cat,
    Coin,
    Enemy,
    GameObject,
    Snack,
    World,
)


def test_move_by_shifts_position():
    obj = GameObject(x=5.0, y=7.0)
    obj.move_by(3.0, -2.0)
    assert (obj.x, obj.y) == (8.0, 5.0)


@pytest.mark.parametrize("kind", [Book, Snack, Coin, Cat])
def test_pickup_reset_reactivates(kind):
    pickup = kind()
    assert pickup.active is True
    pickup.active = False
    pickup.reset()
    assert pickup.active is True


@pytest.mark.parametrize(
    "kind, sprite",
    [(Book, "Book.gif"), (Coin, "Coin.gif"), (Cat, "Kucing.gif")],
)
def test_pickup_sprites_from_source(kind, sprite):
    pickup = kind()
    assert pickup.sprite == sprite


def test_enemy_starts_standing_on_ground_line():
    enemy = Enemy()
    assert (enemy.x, enemy.y) == (10.0, 402.0)
    assert enemy.move_speed == 2.5


def test_enemy_lands_after_first_step():
    enemy = Enemy()
    enemy.step()
    assert enemy.on_ground is True
    assert enemy.y == 402.0
    enemy.step()
    assert enemy.velocity_y == 0.0
    assert enemy.y == 402.0


def test_enemy_move_forward_and_back():
    enemy = Enemy()
    enemy.move_forward()
    enemy.step()
    assert enemy.x == 10.0 + enemy.move_speed
    enemy.move_back()
    enemy.step()
    assert enemy.x == 10.0


def test_enemy_falls_into_pit():
    enemy = Enemy(x=420.0)
    enemy.step()
    assert enemy.y > 402.0
    assert enemy.on_ground is False
    before = enemy.y
    enemy.step()
    assert enemy.y > before


def test_enemy_reset_restores_state():
    enemy = Enemy()
    enemy.x = 999.0
    enemy.y = 600.0
    enemy.velocity_x = 4.0
    enemy.active = False
    enemy.reset()
    assert (enemy.x, enemy.y, enemy.velocity_x, enemy.active) == (10.0, 402.0, 0.0, True)


def test_boss_patrols_right_then_turns():
    boss = Boss(xreal=2500)
    boss.patrol()
    assert boss.xreal == 2501
    for _ in range(199):
        boss.patrol()
    assert boss.xreal == 2700
    boss.patrol()
    assert boss.xreal == 2699


def test_boss_starting_at_right_end_moves_left():
    boss = Boss(xreal=2700)
    boss.patrol()
    assert boss.xreal == 2699


def test_boss_reset_sets_patrol_position():
    boss = Boss(xreal=2600)
    boss.active = False
    boss.reset(2700)
    assert boss.xreal == 2700
    assert boss.active is True


def test_world_counts():
    world = World()
    assert [len(world.snacks), len(world.enemies), len(world.coins),
            len(world.books), len(world.cats), len(world.bosses)] == [2, 2, 4, 15, 5, 2]
    assert [boss.xreal for boss in world.bosses] == [2500, 2700]


def test_world_reset_reactivates_everything():
    world = World()
    for group in (world.snacks, world.enemies, world.coins, world.books,
                  world.cats, world.bosses):
        for item in group:
            item.active = False
    world.bosses[0].xreal = 2612
    world.bosses[1].xreal = 2555
    world.reset()
    everything = [*world.snacks, *world.enemies, *world.coins, *world.books,
                  *world.cats, *world.bosses]
    assert all(item.active for item in everything)
    assert [boss.xreal for boss in world.bosses] == [2500, 2700]


def test_world_objects_are_distinct():
    world = World()
    world.books[0].active = False
    assert world.books[1].active is True
    assert World().books[0].active is True