"""Doors: placement on the map, interaction and animation."""

from __future__ import annotations

import math
import random
from typing import Optional

from .model import (
    DOOR_ANIM_SPEED,
    DOOR_FRAMES,
    MAX_DOORS,
    MIN_DOOR_DISTANCE,
    Door,
    DoorState,
    Game,
)

_INTERACT_RANGE = 2.0


def _cell(grid: list[str], x: int, y: int, default: str = "") -> str:
    if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[y]):
        return default
    return grid[y][x]


def reset_doors(game: Game) -> None:
    """Remove every door and mark the door textures as not loaded."""
    game.door_sys.doors = []
    game.door_sys.textures_loaded = False


def find_nearest_door(game: Game) -> Optional[int]:
    """Index of the closest door within reach of the player, or None."""
    nearest = None
    best = _INTERACT_RANGE
    px, py = game.player.x, game.player.y
    for index, door in enumerate(game.door_sys.doors):
        dx = door.x + 0.5 - px
        dy = door.y + 0.5 - py
        dist = math.sqrt(dx * dx + dy * dy)
        if dist < best:
            best = dist
            nearest = index
    return nearest


def interact_with_door(game: Game) -> None:
    """Start opening a closed door, or closing an open one, near the player."""
    index = find_nearest_door(game)
    if index is None:
        return
    door = game.door_sys.doors[index]
    if door.state is DoorState.CLOSED:
        door.state = DoorState.OPENING
        door.frame = 0
        door.anim_counter = 0
    elif door.state is DoorState.OPEN:
        door.state = DoorState.CLOSING
        door.frame = DOOR_FRAMES - 1
        door.anim_counter = 0


def _advance(door: Door) -> None:
    door.anim_counter += 1
    if door.anim_counter < DOOR_ANIM_SPEED:
        return
    door.anim_counter = 0
    if door.state is DoorState.OPENING:
        door.frame += 1
        if door.frame >= DOOR_FRAMES:
            door.state = DoorState.OPEN
            door.frame = DOOR_FRAMES - 1
    else:
        door.frame -= 1
        if door.frame <= 0:
            door.state = DoorState.CLOSED
            door.frame = 0


def update_doors(game: Game) -> None:
    """Advance the animation of every door that is opening or closing."""
    for door in game.door_sys.doors:
        if door.state in (DoorState.OPENING, DoorState.CLOSING):
            _advance(door)


def get_door_at_position(game: Game, x: int, y: int) -> Optional[int]:
    """Index of the door on a cell, or None."""
    for index, door in enumerate(game.door_sys.doors):
        if door.x == x and door.y == y:
            return index
    return None


def is_door_blocking(game: Game, x: int, y: int) -> bool:
    """Tell whether a cell holds a door that is closed or closing."""
    index = get_door_at_position(game, x, y)
    if index is None:
        return False
    return game.door_sys.doors[index].state in (DoorState.CLOSED, DoorState.CLOSING)


def count_neighbor_walls(game: Game, x: int, y: int) -> int:
    """Count the walls directly above, below, left and right of a cell."""
    grid = game.map.grid
    neighbours = ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y))
    return sum(1 for nx, ny in neighbours if _cell(grid, nx, ny) == "1")


def check_cross_pattern(game: Game, x: int, y: int) -> bool:
    """Tell whether a wall cell separates two floor cells in a straight line."""
    grid = game.map.grid
    if y < 0 or x < 0 or y >= len(grid) or x >= len(grid[y]):
        return False
    if grid[y][x] != "1":
        return False
    up = _cell(grid, x, y - 1, "1")
    down = _cell(grid, x, y + 1, "1")
    left = _cell(grid, x - 1, y, "1")
    right = _cell(grid, x + 1, y, "1")
    if up == "0" and down == "0" and left == "1" and right == "1":
        return True
    return left == "0" and right == "0" and up == "1" and down == "1"


def max_door_count(game: Game) -> int:
    """One door per fifteen floor cells, between 1 and MAX_DOORS."""
    floor = sum(row.count("0") for row in game.map.grid)
    return min(max(floor // 15, 1), MAX_DOORS)


def _far_from_doors(game: Game, x: int, y: int) -> bool:
    return all(
        abs(door.x - x) + abs(door.y - y) >= MIN_DOOR_DISTANCE
        for door in game.door_sys.doors
    )


def _add_door(game: Game, x: int, y: int) -> None:
    grid = game.map.grid
    vertical = not (y > 0 and _cell(grid, x, y - 1) == "1")
    game.door_sys.doors.append(Door(x=x, y=y, is_vertical=vertical))
    grid[y] = grid[y][:x] + "D" + grid[y][x + 1:]


def place_doors_randomly(game: Game, rng: Optional[random.Random] = None) -> None:
    """Turn some walls between floor cells into closed doors."""
    rng = rng if rng is not None else random.Random()
    grid = game.map.grid
    limit = max_door_count(game)
    doors = game.door_sys.doors
    tries = 0
    y = 1
    while y + 1 < len(grid) and len(doors) < limit and tries < 1000:
        x = 1
        while x + 1 < len(grid[y]) and len(doors) < limit:
            tries += 1
            if check_cross_pattern(game, x, y) and _far_from_doors(game, x, y):
                if rng.randrange(100) < 50:
                    _add_door(game, x, y)
            x += 1
        y += 1