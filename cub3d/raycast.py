"""Ray casting and wall drawing for the 3D view."""

from __future__ import annotations

import math

from .framebuffer import put_pixel
from .model import WIN_H, WIN_W, Game, Image, Ray


def _c_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def is_wall_at(game: Game, x: int, y: int) -> bool:
    """Tell whether a map cell is a wall; cells off the map count as walls."""
    grid = game.map.grid
    if y < 0 or x < 0:
        return True
    if y >= len(grid):
        return True
    if x >= len(grid[y]):
        return True
    return grid[y][x] == "1"


def cast_ray(game: Game, angle: float) -> Ray:
    """Walk the grid from the player along ``angle`` until a wall is hit."""
    px, py = game.player.x, game.player.y
    map_x, map_y = int(px), int(py)
    dir_x, dir_y = math.cos(angle), math.sin(angle)
    delta_x = abs(1 / dir_x) if dir_x != 0 else 1e30
    delta_y = abs(1 / dir_y) if dir_y != 0 else 1e30
    if dir_x < 0:
        step_x, side_x = -1, (px - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - px) * delta_x
    if dir_y < 0:
        step_y, side_y = -1, (py - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - py) * delta_y
    side = 0
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if is_wall_at(game, map_x, map_y):
            break
    if side == 0:
        distance = side_x - delta_x
        wall_x = py + distance * dir_y
    else:
        distance = side_y - delta_y
        wall_x = px + distance * dir_x
    wall_x -= math.floor(wall_x)
    return Ray(ray_angle=angle, distance=distance, hit_vertical=side == 0,
               wall_x=wall_x)


def select_texture(game: Game, ray: Ray, angle: float) -> Image:
    """Pick the wall texture for the face the ray hit."""
    if ray.hit_vertical:
        return game.textures["east" if math.cos(angle) > 0 else "west"]
    return game.textures["south" if math.sin(angle) > 0 else "north"]


def draw_wall_stripe(game: Game, x: int, ray: Ray) -> None:
    """Draw ceiling, textured wall and floor for one screen column."""
    corrected = ray.distance * math.cos(ray.ray_angle - game.player.angle)
    if corrected < 0.0001:
        corrected = 0.0001
    wall_height = int(WIN_H / corrected)
    draw_start = _c_div(WIN_H - wall_height, 2)
    draw_end = draw_start + wall_height
    if draw_start < 0:
        draw_start = 0
    if draw_end >= WIN_H:
        draw_end = WIN_H - 1
    tex = select_texture(game, ray, ray.ray_angle)
    tex_x = min(max(int(ray.wall_x * tex.width), 0), tex.width - 1)
    if wall_height:
        step = tex.height / wall_height
        tex_pos = (draw_start - (WIN_H - wall_height) / 2.0) * step
    else:
        step, tex_pos = 0.0, 0.0

    screen = game.screen
    ceiling = game.ceiling_color()
    for y in range(1, draw_start + 1):
        put_pixel(screen, x, y, ceiling)
    for y in range(draw_start + 1, draw_end + 1):
        tex_y = min(max(int(tex_pos), 0), tex.height - 1)
        put_pixel(screen, x, y, tex.pixels[tex_y * tex.width + tex_x])
        tex_pos += step
    floor = game.floor_color()
    for y in range(max(draw_end, 0) + 1, WIN_H + 1):
        put_pixel(screen, x, y, floor)


def render_3d_view(game: Game) -> None:
    """Cast one ray per column, draw it and record its depth."""
    fov = math.pi / 3
    ray_angle = game.player.angle - fov / 2
    for x in range(WIN_W):
        ray = cast_ray(game, ray_angle)
        draw_wall_stripe(game, x, ray)
        game.z_buffer[x] = ray.distance
        ray_angle += fov / WIN_W