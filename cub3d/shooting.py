"""Hit detection for the player's shots."""

from __future__ import annotations

import math
from typing import Optional

from .model import WIN_H, WIN_W, Game
from .weapon import current_time_ms

_PLANE = 0.66


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _transform(game: Game, rel_x: float, rel_y: float) -> tuple[float, float]:
    dir_x = math.cos(game.player.angle)
    dir_y = math.sin(game.player.angle)
    plane_x = -dir_y * _PLANE
    plane_y = dir_x * _PLANE
    inv_det = 1.0 / (plane_x * dir_y - dir_x * plane_y)
    return (
        inv_det * (dir_y * rel_x - dir_x * rel_y),
        inv_det * (-plane_y * rel_x + plane_x * rel_y),
    )


def _covers_center(center_x: int, transform_x: float, transform_y: float) -> bool:
    ratio = transform_x / transform_y
    height = WIN_H / transform_y
    if not (math.isfinite(ratio) and math.isfinite(height)):
        return False
    screen_x = int((WIN_W // 2) * (1 + ratio))
    width = abs(int(height))
    start = _trunc_div(-width, 2) + screen_x
    end = _trunc_div(width, 2) + screen_x
    return start <= center_x <= end


def check_enemy_hit(game: Game) -> Optional[int]:
    """Kill the nearest active enemy under the crosshair, closer than the wall.

    Returns the index of the enemy hit, or None.
    """
    center_x = WIN_W // 2
    shot_range = game.z_buffer[center_x]
    px, py = game.player.x, game.player.y
    candidates = sorted(
        (
            (math.hypot(px - enemy.x, py - enemy.y), index)
            for index, enemy in enumerate(game.enemy_sys.enemies)
            if enemy.active
        ),
        key=lambda item: item[0],
    )
    for distance, index in candidates:
        if distance >= shot_range:
            continue
        enemy = game.enemy_sys.enemies[index]
        transform_x, transform_y = _transform(game, enemy.x - px, enemy.y - py)
        if transform_y <= 0.0:
            continue
        if _covers_center(center_x, transform_x, transform_y):
            enemy.active = False
            game.win_game += 1
            return index
    return None


def handle_shoot(game: Game, now: Optional[int] = None) -> Optional[int]:
    """Fire unless already firing; return the index of an enemy hit, if any."""
    weapon = game.weapon
    if weapon.is_firing:
        return None
    weapon.is_firing = True
    weapon.current_frame = 1
    weapon.last_frame_time = now if now is not None else current_time_ms()
    return check_enemy_hit(game)