import random

import pytest

from cub3d.doors import (
    check_cross_pattern,
    count_neighbor_walls,
    find_nearest_door,
    get_door_at_position,
    interact_with_door,
    is_door_blocking,
    max_door_count,
    place_doors_randomly,
    reset_doors,
    update_doors,
)
from cub3d.model import (
    DOOR_ANIM_SPEED,
    DOOR_FRAMES,
    MAX_DOORS,
    MIN_DOOR_DISTANCE,
    Door,
    DoorState,
    Game,
    MapData,
)

SPLIT = ["11111", "10101", "11111"]


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def make_game(grid, x=0.0, y=0.0):
    game = Game(map=MapData(grid=list(grid), width=max(map(len, grid))))
    game.player.x = x
    game.player.y = y
    return game


def test_get_door_and_blocking():
    game = make_game(SPLIT)
    game.door_sys.doors = [Door(x=1, y=1), Door(x=3, y=1, state=DoorState.OPEN)]
    assert get_door_at_position(game, 3, 1) == 1
    assert get_door_at_position(game, 2, 1) is None
    assert is_door_blocking(game, 1, 1) is True
    assert is_door_blocking(game, 3, 1) is False
    assert is_door_blocking(game, 2, 1) is False


def test_reset_doors():
    game = make_game(SPLIT)
    game.door_sys.doors = [Door(x=1, y=1)]
    game.door_sys.textures_loaded = True
    reset_doors(game)
    assert game.door_sys.doors == []
    assert game.door_sys.textures_loaded is False


def test_find_nearest_door_picks_closest_in_range():
    game = make_game(SPLIT, x=1.5, y=1.5)
    game.door_sys.doors = [Door(x=3, y=1), Door(x=2, y=1)]
    assert find_nearest_door(game) == 1
    game.player.x = 30.0
    assert find_nearest_door(game) is None


def test_interact_opens_and_closes():
    game = make_game(SPLIT, x=1.5, y=1.5)
    door = Door(x=2, y=1)
    game.door_sys.doors = [door]
    interact_with_door(game)
    assert door.state is DoorState.OPENING
    assert door.frame == 0
    door.state = DoorState.OPEN
    interact_with_door(game)
    assert door.state is DoorState.CLOSING
    assert door.frame == DOOR_FRAMES - 1


def test_interact_out_of_range_does_nothing():
    game = make_game(SPLIT, x=40.5, y=40.5)
    door = Door(x=2, y=1)
    game.door_sys.doors = [door]
    interact_with_door(game)
    assert door.state is DoorState.CLOSED


def test_opening_animation_completes():
    game = make_game(SPLIT)
    door = Door(x=2, y=1, state=DoorState.OPENING)
    game.door_sys.doors = [door]
    for _ in range(DOOR_ANIM_SPEED * DOOR_FRAMES - 1):
        update_doors(game)
    assert door.state is DoorState.OPENING
    update_doors(game)
    assert door.state is DoorState.OPEN
    assert door.frame == DOOR_FRAMES - 1


def test_closing_animation_completes():
    game = make_game(SPLIT)
    door = Door(x=2, y=1, state=DoorState.CLOSING, frame=DOOR_FRAMES - 1)
    game.door_sys.doors = [door]
    for _ in range(DOOR_ANIM_SPEED * (DOOR_FRAMES - 1)):
        update_doors(game)
    assert door.state is DoorState.CLOSED
    assert door.frame == 0


def test_check_cross_pattern():
    game = make_game(SPLIT)
    assert check_cross_pattern(game, 2, 1) is True
    assert check_cross_pattern(game, 0, 1) is False
    assert check_cross_pattern(game, 1, 1) is False
    assert check_cross_pattern(game, 9, 9) is False


def test_vertical_cross_pattern():
    game = make_game(["111", "101", "111", "101", "111"])
    assert check_cross_pattern(game, 1, 2) is True


def test_count_neighbor_walls():
    game = make_game(SPLIT)
    assert count_neighbor_walls(game, 2, 1) == 2
    assert count_neighbor_walls(game, 1, 1) == 4


def test_max_door_count_bounds():
    assert max_door_count(make_game(SPLIT)) == 1
    big = ["0" * 100] * 15
    assert max_door_count(make_game(big)) == MAX_DOORS


def test_place_doors_always_accepting():
    game = make_game(SPLIT)
    place_doors_randomly(game, FixedRng(0))
    assert len(game.door_sys.doors) == 1
    door = game.door_sys.doors[0]
    assert (door.x, door.y) == (2, 1)
    assert door.state is DoorState.CLOSED
    assert door.is_vertical is False
    assert game.map.grid[1] == "10D01"


def test_place_doors_always_rejecting():
    game = make_game(SPLIT)
    place_doors_randomly(game, FixedRng(99))
    assert game.door_sys.doors == []
    assert game.map.grid == SPLIT


def test_place_doors_invariants():
    rows = ["1" * 21]
    for y in range(1, 20):
        rows.append("1" + ("01" * 10)[: 19] + "1" if y % 2 else "1" * 21)
    rows.append("1" * 21)
    game = make_game(rows)
    before = make_game(rows)
    place_doors_randomly(game, random.Random(3))
    doors = game.door_sys.doors
    assert 1 <= len(doors) <= max_door_count(before)
    for door in doors:
        assert game.map.grid[door.y][door.x] == "D"
        assert check_cross_pattern(before, door.x, door.y)
    for i, a in enumerate(doors):
        for b in doors[i + 1:]:
            assert abs(a.x - b.x) + abs(a.y - b.y) >= MIN_DOOR_DISTANCE


@pytest.mark.parametrize("state, blocking", [
    (DoorState.CLOSED, True),
    (DoorState.OPENING, False),
    (DoorState.OPEN, False),
    (DoorState.CLOSING, True),
])
def test_blocking_by_state(state, blocking):
    game = make_game(SPLIT)
    game.door_sys.doors = [Door(x=2, y=1, state=state)]
    assert is_door_blocking(game, 2, 1) is blocking