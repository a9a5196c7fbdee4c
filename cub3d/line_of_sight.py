"""Grid line-of-sight tests and enemy footprint collision."""

from __future__ import annotations

import math
from typing import Sequence

from .model import ENEMY_SIZE, DoorState, Game


def is_line_of_sight_clear(
    game: Game, start: Sequence[float], end: Sequence[float]
) -> bool:
    """Tell whether no wall cell lies on the segment from ``start`` to ``end``.

    Leaving the map counts as blocked; doors do not block sight.
    """
    x0, y0 = start[0], start[1]
    dx = end[0] - x0
    dy = end[1] - y0
    dist = math.sqrt(dx * dx + dy * dy)
    if dist <= 0.0:
        return True
    map_x = math.floor(x0)
    map_y = math.floor(y0)
    delta_x = 1e30 if dx == 0 else abs(1.0 / (dx / dist))
    delta_y = 1e30 if dy == 0 else abs(1.0 / (dy / dist))
    if dx < 0:
        step_x, side_x = -1, (x0 - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - x0) * delta_x
    if dy < 0:
        step_y, side_y = -1, (y0 - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - y0) * delta_y

    grid = game.map.grid
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            if side_x - delta_x >= dist:
                return True
        else:
            side_y += delta_y
            map_y += step_y
            if side_y - delta_y >= dist:
                return True
        if map_y < 0 or map_x < 0 or map_y >= len(grid):
            return False
        if map_x >= len(grid[map_y]):
            return False
        if grid[map_y][map_x] == "1":
            return False


def _first_door_closed(game: Game) -> bool:
    # Door cells are judged by the state of the first door in the list.
    doors = game.door_sys.doors
    return doors[0].state is DoorState.CLOSED if doors else True


def _touches_solid(game: Game, x: float, y: float, tx: int, ty: int) -> bool:
    cell = game.map.grid[ty][tx]
    if not (cell == "1" or (cell == "D" and _first_door_closed(game))):
        return False
    cx = min(max(x, float(tx)), float(tx + 1))
    cy = min(max(y, float(ty)), float(ty + 1))
    return math.hypot(x - cx, y - cy) < ENEMY_SIZE


def is_walkable_at(game: Game, x: float, y: float) -> bool:
    """Tell whether an enemy centred on (x, y) overlaps no wall or closed door."""
    grid = game.map.grid
    last_x = math.floor(x + ENEMY_SIZE)
    last_y = math.floor(y + ENEMY_SIZE)
    for ty in range(math.floor(y - ENEMY_SIZE), last_y + 1):
        if ty < 0 or ty >= len(grid):
            return False
        for tx in range(math.floor(x - ENEMY_SIZE), last_x + 1):
            if tx < 0 or tx >= len(grid[ty]):
                return False
            if _touches_solid(game, x, y, tx, ty):
                return False
    return True