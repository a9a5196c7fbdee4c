import time

from cub3d.framebuffer import get_pixel, new_image
from cub3d.model import WEAPON_FRAMES, WIN_H, WIN_W, Game
from cub3d.weapon import current_time_ms, render_weapon, update_weapon_animation

BACKGROUND = 0x123456


def make_game(texture_color=None):
    game = Game()
    game.screen = new_image(WIN_W, WIN_H, BACKGROUND)
    if texture_color is not None:
        game.weapon.textures = [
            new_image(10, 10, texture_color) for _ in range(WEAPON_FRAMES)
        ]
    return game


def test_current_time_ms_tracks_clock():
    before = int(time.time() * 1000)
    value = current_time_ms()
    after = int(time.time() * 1000)
    assert before <= value <= after


def test_idle_weapon_resets_frame():
    game = make_game()
    game.weapon.current_frame = 3
    update_weapon_animation(game, now=1000)
    assert game.weapon.current_frame == 0


def test_firing_advances_after_delay():
    game = make_game()
    game.weapon.is_firing = True
    game.weapon.current_frame = 1
    game.weapon.last_frame_time = 1000
    update_weapon_animation(game, now=1081)
    assert game.weapon.current_frame == 2
    assert game.weapon.last_frame_time == 1081


def test_firing_waits_for_delay():
    game = make_game()
    game.weapon.is_firing = True
    game.weapon.current_frame = 1
    game.weapon.last_frame_time = 1000
    update_weapon_animation(game, now=1080)
    assert game.weapon.current_frame == 1
    assert game.weapon.last_frame_time == 1000


def test_last_frame_ends_firing():
    game = make_game()
    game.weapon.is_firing = True
    game.weapon.current_frame = WEAPON_FRAMES - 1
    game.weapon.last_frame_time = 0
    update_weapon_animation(game, now=5000)
    assert game.weapon.current_frame == 0
    assert game.weapon.is_firing is False


def test_render_draws_bottom_centre():
    game = make_game(0xFF0000)
    render_weapon(game)
    assert get_pixel(game.screen, WIN_W // 2, WIN_H - 1) == 0xFF0000
    assert get_pixel(game.screen, WIN_W // 2, 0) == BACKGROUND
    assert get_pixel(game.screen, 0, WIN_H - 1) == BACKGROUND


def test_transparent_texture_leaves_screen():
    for color in (0x000000, 0xFF00FF):
        game = make_game(color)
        render_weapon(game)
        assert set(game.screen.pixels) == {BACKGROUND}


def test_render_without_textures_does_nothing():
    game = make_game()
    render_weapon(game)
    assert set(game.screen.pixels) == {BACKGROUND}