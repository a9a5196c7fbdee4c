"""The circular minimap in the top-left corner and the player marker on it."""

from __future__ import annotations

import math
from typing import Sequence

from .framebuffer import put_pixel
from .model import (
    MINIMAP_RADIUS,
    MINIMAP_SCALE,
    MINIMAP_X,
    MINIMAP_Y,
    WIN_H,
    WIN_W,
    Game,
)

WALL_COLOR = 0x333333
FLOOR_COLOR = 0xCCCCCC
BORDER_COLOR = 0x000000
ENEMY_COLOR = 0xFF0000
PLAYER_COLOR = 0x008000
HEADING_COLOR = 0xFFFF00

_BORDER_WIDTH = 2
_FADE_RADIUS_SQ = (MINIMAP_RADIUS - 5) ** 2
_MARKER_RADIUS = 2
_PLAYER_RADIUS = 4
_HEADING_LENGTH = 15


def is_inside_circle(x: int, y: int, center: Sequence[int], radius: int) -> bool:
    """Tell whether a point lies in or on a circle."""
    dx = x - center[0]
    dy = y - center[1]
    return dx * dx + dy * dy <= radius * radius


def _is_solid(game: Game, map_x: int, map_y: int) -> bool:
    grid = game.map.grid
    if map_y < 0 or map_x < 0 or map_y >= len(grid):
        return True
    row = grid[map_y]
    if map_x >= len(row):
        return True
    return row[map_x] in "1 \t"


def get_minimap_color(game: Game, world_x: float, world_y: float) -> int:
    """Wall colour for walls, blanks and off-map points, floor colour otherwise."""
    if _is_solid(game, int(world_x), int(world_y)):
        return WALL_COLOR
    return FLOOR_COLOR


def calc_pixel_color(game: Game, dx: int, dy: int) -> int:
    """Colour of the minimap pixel at an offset from its centre; dimmed near the rim."""
    wx = game.player.x + dx / MINIMAP_SCALE
    wy = game.player.y + dy / MINIMAP_SCALE
    color = get_minimap_color(game, wx, wy)
    if dx * dx + dy * dy > _FADE_RADIUS_SQ:
        return (color >> 1) & 0x7F7F7F
    return color


def draw_enemy_marker(game: Game, cx: int, cy: int, color: int) -> None:
    """Draw a small filled disc centred on a screen point."""
    r = _MARKER_RADIUS
    for x in range(-r, r + 1):
        for y in range(-r, r + 1):
            if x * x + y * y <= r * r:
                px, py = cx + x, cy + y
                if 0 <= px < WIN_W and 0 <= py < WIN_H:
                    put_pixel(game.screen, px, py, color)


def _draw_background(game: Game) -> None:
    center = (MINIMAP_X, MINIMAP_Y)
    r = MINIMAP_RADIUS
    for sy in range(MINIMAP_Y - r, MINIMAP_Y + r + 1):
        for sx in range(MINIMAP_X - r, MINIMAP_X + r + 1):
            if is_inside_circle(sx, sy, center, r):
                color = calc_pixel_color(game, sx - MINIMAP_X, sy - MINIMAP_Y)
                put_pixel(game.screen, sx, sy, color)


def _draw_border(game: Game) -> None:
    outer = MINIMAP_RADIUS + _BORDER_WIDTH
    outer_sq = outer * outer
    inner_sq = MINIMAP_RADIUS * MINIMAP_RADIUS
    for sy in range(MINIMAP_Y - outer, MINIMAP_Y + outer + 1):
        for sx in range(MINIMAP_X - outer, MINIMAP_X + outer + 1):
            dist_sq = (sx - MINIMAP_X) ** 2 + (sy - MINIMAP_Y) ** 2
            if inner_sq <= dist_sq <= outer_sq:
                put_pixel(game.screen, sx, sy, BORDER_COLOR)


def _draw_enemies(game: Game) -> None:
    center = (MINIMAP_X, MINIMAP_Y)
    for enemy in game.enemy_sys.enemies:
        if not enemy.active:
            continue
        mx = MINIMAP_X + int((enemy.x - game.player.x) * MINIMAP_SCALE)
        my = MINIMAP_Y + int((enemy.y - game.player.y) * MINIMAP_SCALE)
        if is_inside_circle(mx, my, center, MINIMAP_RADIUS):
            draw_enemy_marker(game, mx, my, ENEMY_COLOR)


def draw_minimap(game: Game) -> None:
    """Draw the map around the player, its border and the active enemies."""
    _draw_background(game)
    _draw_border(game)
    _draw_enemies(game)


def draw_player(game: Game) -> None:
    """Draw the player dot at the minimap centre and a heading line."""
    r = _PLAYER_RADIUS
    for j in range(-r, r + 1):
        for i in range(-r, r + 1):
            if i * i + j * j <= r * r:
                put_pixel(game.screen, MINIMAP_X + i, MINIMAP_Y + j, PLAYER_COLOR)
    cos_a = math.cos(game.player.angle)
    sin_a = math.sin(game.player.angle)
    for k in range(_HEADING_LENGTH):
        lx = MINIMAP_X + int(cos_a * k)
        ly = MINIMAP_Y + int(sin_a * k)
        put_pixel(game.screen, lx, ly, HEADING_COLOR)