"""Weapon animation and drawing of the weapon overlay."""

from __future__ import annotations

import math
import time
from typing import Optional

from .framebuffer import put_pixel
from .model import WEAPON_FRAMES, WIN_H, WIN_W, Game

_FRAME_DELAY_MS = 80
_WIDTH_RATIO = 0.4
_BOTTOM_OVERHANG = 20


def current_time_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return int(time.time() * 1000)


def _is_transparent(color: int) -> bool:
    return (color & 0x00FFFFFF) in (0x000000, 0xFF00FF)


def update_weapon_animation(game: Game, now: Optional[int] = None) -> None:
    """Advance the firing animation; reset to the idle frame when done."""
    weapon = game.weapon
    if not weapon.is_firing:
        weapon.current_frame = 0
        return
    if now is None:
        now = current_time_ms()
    if now - weapon.last_frame_time > _FRAME_DELAY_MS:
        weapon.last_frame_time = now
        weapon.current_frame += 1
        if weapon.current_frame >= WEAPON_FRAMES:
            weapon.current_frame = 0
            weapon.is_firing = False


def render_weapon(game: Game) -> None:
    """Scale the current weapon frame and draw it at the bottom centre."""
    weapon = game.weapon
    if not 0 <= weapon.current_frame < len(weapon.textures):
        return
    tex = weapon.textures[weapon.current_frame]
    if tex.width <= 0 or tex.height <= 0:
        return
    w = int(WIN_W * _WIDTH_RATIO)
    h = int(tex.height * (w / tex.width))
    if h <= 0:
        return
    x_off = WIN_W // 2 - w // 2
    y_off = WIN_H - h + _BOTTOM_OVERHANG
    s_x = tex.width / w
    s_y = tex.height / h
    for y_dest in range(h):
        y_src = math.floor(y_dest * s_y)
        if y_src < 0 or y_src >= tex.height:
            continue
        row = y_src * tex.width
        for x_dest in range(w):
            x_src = math.floor(x_dest * s_x)
            if 0 <= x_src < tex.width:
                color = tex.pixels[row + x_src]
                if not _is_transparent(color):
                    put_pixel(game.screen, x_dest + x_off, y_dest + y_off, color)