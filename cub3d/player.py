"""Player placement, movement and rotation."""

from __future__ import annotations

import math

from .doors import is_door_blocking
from .model import Game

_ANGLES = {
    "N": 3 * math.pi / 2,
    "S": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
}


def angle_for_direction(direction: str) -> float:
    """Heading in radians for a map start letter; 0 for anything else."""
    return _ANGLES.get(direction, 0.0)


def find_player_position(game: Game) -> bool:
    """Place the player on the first start letter and clear that cell."""
    grid = game.map.grid
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            if ch in _ANGLES:
                game.player.x = x + 0.5
                game.player.y = y + 0.5
                game.player.angle = angle_for_direction(ch)
                grid[y] = row[:x] + "0" + row[x + 1:]
                return True
    return False


def is_wall(game: Game, x: float, y: float) -> bool:
    """Tell whether a point is blocked by a wall, a closed door or the edge."""
    map_x = int(x)
    map_y = int(y)
    grid = game.map.grid
    if map_y < 0 or map_x < 0 or map_y >= len(grid) or map_x >= len(grid[map_y]):
        return True
    if is_door_blocking(game, map_x, map_y):
        return True
    return grid[map_y][map_x] == "1"


def _try_move(game: Game, nx: float, ny: float) -> None:
    player = game.player
    if not is_wall(game, nx, player.y):
        player.x = nx
    if not is_wall(game, player.x, ny):
        player.y = ny


def move_forward_backward(game: Game, direction: int) -> None:
    """Step along the heading: 1 forward, -1 backward."""
    p = game.player
    nx = p.x + math.cos(p.angle) * p.move_speed * direction
    ny = p.y + math.sin(p.angle) * p.move_speed * direction
    _try_move(game, nx, ny)


def move_strafe(game: Game, direction: int) -> None:
    """Step sideways: 1 to the right, -1 to the left."""
    p = game.player
    nx = p.x - math.sin(p.angle) * p.move_speed * direction
    ny = p.y + math.cos(p.angle) * p.move_speed * direction
    _try_move(game, nx, ny)


def rotate_player(game: Game, direction: int) -> None:
    """Turn by the rotation speed and keep the angle within one turn."""
    p = game.player
    p.angle += p.rot_speed * direction
    if p.angle < 0:
        p.angle += 2 * math.pi
    if p.angle > 2 * math.pi:
        p.angle -= 2 * math.pi