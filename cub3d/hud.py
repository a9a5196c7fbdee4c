"""End-of-game screens and the on-screen enemy counter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .framebuffer import clear_image
from .model import WIN_H, WIN_W, Game

_CHAR_WIDTH = 10
_RED = 0xFF0000
_GREEN = 0x00FF00
_WHITE = 0xFFFFFF


@dataclass(frozen=True)
class TextItem:
    """A line of text to draw over the frame at a window position."""

    x: int
    y: int
    color: int
    text: str


def centered_x(text: str) -> int:
    """Left edge that centres a text horizontally in the window."""
    return int((WIN_W - len(text) * _CHAR_WIDTH) / 2)


def _centered(text: str, y: int, color: int) -> TextItem:
    return TextItem(centered_x(text), y, color, text)


def _end_screen(game: Game, title: str, color: int) -> list[TextItem]:
    clear_image(game.screen, 0x000000)
    return [
        _centered(title, WIN_H // 2 - 50, color),
        _centered("Press ESC to exit", WIN_H // 2 + 20, _WHITE),
    ]


def draw_game_over(game: Game) -> list[TextItem]:
    """Black out the screen and return the game-over texts, if the game is lost."""
    if not game.enemy_sys.game_over:
        return []
    return _end_screen(game, "GAME OVER", _RED)


def draw_game_win(game: Game) -> list[TextItem]:
    """Black out the screen and return the victory texts."""
    return _end_screen(game, "Winner !!!!", _GREEN)


def enemy_counter(game: Game) -> Optional[TextItem]:
    """The count of living enemies, or None once the game is lost."""
    if game.enemy_sys.game_over:
        return None
    alive = sum(1 for enemy in game.enemy_sys.enemies if enemy.active)
    return TextItem(10, WIN_H - 20, _WHITE, f"Enemies: {alive}")