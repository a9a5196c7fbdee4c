from cub3d.framebuffer import new_image
from cub3d.hud import (
    TextItem,
    centered_x,
    draw_game_over,
    draw_game_win,
    enemy_counter,
)
from cub3d.model import WIN_H, WIN_W, Enemy, Game


def _game():
    game = Game()
    game.screen = new_image(WIN_W, WIN_H, 0x777777)
    return game


def test_centered_x_centres_text():
    text = "GAME OVER"
    x = centered_x(text)
    assert abs(2 * x + len(text) * 10 - WIN_W) <= 1


def test_centered_x_empty_text_is_middle():
    assert centered_x("") == WIN_W // 2


def test_game_over_does_nothing_while_playing():
    game = _game()
    assert draw_game_over(game) == []
    assert set(game.screen.pixels) == {0x777777}


def test_game_over_clears_screen_and_returns_texts():
    game = _game()
    game.enemy_sys.game_over = True
    texts = draw_game_over(game)
    assert set(game.screen.pixels) == {0}
    assert [t.text for t in texts] == ["GAME OVER", "Press ESC to exit"]
    assert texts[0].color == 0xFF0000
    assert texts[0].y < texts[1].y


def test_game_win_texts():
    game = _game()
    texts = draw_game_win(game)
    assert set(game.screen.pixels) == {0}
    assert texts[0].text == "Winner !!!!"
    assert texts[0].color == 0x00FF00
    assert texts[1].x == centered_x("Press ESC to exit")


def test_enemy_counter_counts_active():
    game = _game()
    game.enemy_sys.enemies = [Enemy(active=True), Enemy(active=False),
                              Enemy(active=True)]
    item = enemy_counter(game)
    assert isinstance(item, TextItem)
    assert item.text == "Enemies: 2"
    assert item.y == WIN_H - 20


def test_enemy_counter_hidden_after_game_over():
    game = _game()
    game.enemy_sys.game_over = True
    assert enemy_counter(game) is None