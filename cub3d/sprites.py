"""Projection and drawing of billboard sprites: enemies and doors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .framebuffer import put_pixel
from .model import (
    DOOR_FRAMES,
    WIN_H,
    WIN_W,
    DoorState,
    Enemy,
    Game,
    Image,
    Sprite,
    SpriteKind,
)

_PLANE = 0.66


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def is_transparent(color: int) -> bool:
    """Black and magenta, ignoring the alpha byte, are see-through."""
    return (color & 0x00FFFFFF) in (0x000000, 0xFF00FF)


@dataclass
class _Projection:
    transform_y: float
    screen_x: int
    size: int


def _project(game: Game, x: float, y: float) -> Optional[_Projection]:
    """Camera-space projection of a world point, or None if behind or unusable."""
    rel_x = x - game.player.x
    rel_y = y - game.player.y
    dir_x = math.cos(game.player.angle)
    dir_y = math.sin(game.player.angle)
    plane_x = -dir_y * _PLANE
    plane_y = dir_x * _PLANE
    inv_det = 1.0 / (plane_x * dir_y - dir_x * plane_y)
    transform_x = inv_det * (dir_y * rel_x - dir_x * rel_y)
    transform_y = inv_det * (-plane_y * rel_x + plane_x * rel_y)
    if transform_y <= 0:
        return None
    ratio = transform_x / transform_y
    height = WIN_H / transform_y
    if not (math.isfinite(ratio) and math.isfinite(height)):
        return None
    screen_x = int((WIN_W // 2) * (1 + ratio))
    return _Projection(transform_y, screen_x, abs(int(height)))


def _distance(game: Game, x: float, y: float) -> float:
    return math.hypot(x - game.player.x, y - game.player.y)


def collect_sprites(game: Game) -> list[Sprite]:
    """Active enemies and all doors, sorted from farthest to nearest."""
    sprites = [
        Sprite(SpriteKind.ENEMY, enemy.x, enemy.y,
               _distance(game, enemy.x, enemy.y), index)
        for index, enemy in enumerate(game.enemy_sys.enemies)
        if enemy.active
    ]
    for index, door in enumerate(game.door_sys.doors):
        x, y = door.x + 0.5, door.y + 0.5
        sprites.append(
            Sprite(SpriteKind.DOOR, x, y, _distance(game, x, y), index)
        )
    sprites.sort(key=lambda sprite: sprite.distance, reverse=True)
    return sprites


def _pick(items: list, index: int) -> Optional[Image]:
    if 0 <= index < len(items):
        return items[index]
    return None


def sprite_texture(game: Game, sprite: Sprite) -> Optional[Image]:
    """The texture a sprite shows now, or None if it is not loaded."""
    if sprite.kind is SpriteKind.DOOR:
        door = game.door_sys.doors[sprite.index]
        if door.state is DoorState.CLOSED:
            return _pick(game.door_sys.closed_textures, 0)
        if door.state in (DoorState.OPENING, DoorState.CLOSING):
            return _pick(game.door_sys.opening_textures, door.frame)
        return _pick(game.door_sys.opening_textures, DOOR_FRAMES - 1)
    enemy = game.enemy_sys.enemies[sprite.index]
    if not 0 <= enemy.enemy_type < len(game.enemy_sys.textures):
        return None
    return _pick(game.enemy_sys.textures[enemy.enemy_type], enemy.current_frame)


def _draw_sprite_column(
    game: Game, proj: _Projection, tex: Image, x: int, tex_x: int
) -> None:
    line_h = proj.size
    first = max(_trunc_div(-line_h, 2) + WIN_H // 2, 0)
    stop = min(_trunc_div(line_h, 2) + WIN_H // 2, WIN_H)
    for y in range(first, stop):
        d = y * 256 - WIN_H * 128 + line_h * 128
        tex_y = _trunc_div(_trunc_div(d * tex.height, line_h), 256)
        if 0 <= tex_y < tex.height and 0 <= tex_x < tex.width:
            color = tex.pixels[tex_y * tex.width + tex_x]
            if color & 0x00FFFFFF:
                put_pixel(game.screen, x, y, color)


def render_all_sprites(game: Game) -> None:
    """Draw enemies and doors back to front, hidden by nearer walls."""
    for sprite in collect_sprites(game):
        proj = _project(game, sprite.x, sprite.y)
        if proj is None:
            continue
        tex = sprite_texture(game, sprite)
        if tex is None or tex.width <= 0 or tex.height <= 0:
            continue
        width = proj.size
        left = _trunc_div(-width, 2) + proj.screen_x
        start_x = max(left, 0)
        end_x = min(_trunc_div(width, 2) + proj.screen_x, WIN_W - 1)
        for stripe in range(start_x, end_x):
            tex_x = _trunc_div(256 * (stripe - left) * tex.width, width) // 256
            if proj.transform_y < game.z_buffer[stripe]:
                _draw_sprite_column(game, proj, tex, stripe, tex_x)


def render_enemy_sprite(game: Game, enemy: Enemy, texture: Image) -> None:
    """Draw one enemy billboard, skipping transparent texels."""
    proj = _project(game, enemy.x, enemy.y)
    if proj is None or texture.width <= 0 or texture.height <= 0:
        return
    size = proj.size
    start_y = max(_trunc_div(-size, 2) + WIN_H // 2, 0)
    end_y = min(_trunc_div(size, 2) + WIN_H // 2, WIN_H - 1)
    left = _trunc_div(-size, 2) + proj.screen_x
    start_x = max(left, 0)
    end_x = min(_trunc_div(size, 2) + proj.screen_x, WIN_W - 1)
    for stripe in range(start_x, end_x):
        if not 0 <= stripe < WIN_W:
            continue
        if proj.transform_y >= game.z_buffer[stripe]:
            continue
        tex_x = _trunc_div((stripe - left) * texture.width, size)
        if not 0 <= tex_x < texture.width:
            continue
        for y in range(start_y, end_y):
            d = y * 256 - WIN_H * 128 + size * 128
            tex_y = _trunc_div(_trunc_div(d * texture.height, size), 256)
            tex_y = min(max(tex_y, 0), texture.height - 1)
            color = texture.pixels[tex_y * texture.width + tex_x]
            if not is_transparent(color):
                put_pixel(game.screen, stripe, y, color)


def render_enemies(game: Game) -> None:
    """Draw every active enemy back to front using its own frames."""
    if game.enemy_sys.game_over:
        return
    active = [
        (_distance(game, enemy.x, enemy.y), enemy)
        for enemy in game.enemy_sys.enemies
        if enemy.active
    ]
    active.sort(key=lambda item: item[0], reverse=True)
    for _, enemy in active:
        texture = _pick(enemy.frames, enemy.current_frame)
        if texture is not None:
            render_enemy_sprite(game, enemy, texture)