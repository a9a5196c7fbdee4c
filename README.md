# cub3d

The core of a small first-person shooter drawn with raycasting, written in
plain Python with no third-party dependencies. It holds the game state and
draws every frame into an in-memory image: walls seen through a grid map,
enemy and door billboards, the weapon overlay and a circular minimap. It
also handles player movement, doors that open and close, and shooting.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Modules

- `cub3d.model` – the state: `Game`, `Player`, `MapData`, `Image`, `Door`,
  `DoorState`, `DoorSystem`, `Enemy`, `EnemySystem`, `Weapon`, `Ray`,
  `Sprite`, `SpriteKind`, the window and gameplay constants (`WIN_W` = 800,
  `WIN_H` = 600, ...), `rgb_to_int` and `rgb_to_hex`.
- `cub3d.framebuffer` – `new_image`, `put_pixel`, `get_pixel`,
  `clear_image`. Images are row-major lists of `0xRRGGBB` integers; writes
  outside the 800×600 window are ignored.
- `cub3d.player` – `find_player_position` places the player on the first
  `N`, `S`, `E` or `W` in the grid and turns that cell into floor;
  `move_forward_backward`, `move_strafe` and `rotate_player` move the
  player, stopped by walls and by doors that are closed or closing.
- `cub3d.raycast` – `cast_ray`, `draw_wall_stripe` and `render_3d_view`,
  which draws ceiling, textured walls and floor and fills `Game.z_buffer`.
  Wall textures are read from `Game.textures` under the keys `"north"`,
  `"south"`, `"east"` and `"west"`.
- `cub3d.doors` – `place_doors_randomly` turns walls that sit between two
  floor cells into closed doors (marked `D` in the grid);
  `interact_with_door` opens or closes the nearest door within 2 cells;
  `update_doors` advances their animation by one tick.
- `cub3d.line_of_sight` – `is_line_of_sight_clear` and `is_walkable_at`.
- `cub3d.sprites` – `collect_sprites`, `render_all_sprites` and
  `render_enemies` draw billboards back to front, hidden behind nearer walls.
- `cub3d.shooting` – `handle_shoot` starts the firing animation and
  `check_enemy_hit` kills the nearest living enemy under the crosshair that
  is closer than the wall; both return the index of the enemy hit, or `None`.
- `cub3d.weapon` – `update_weapon_animation` and `render_weapon`.
- `cub3d.minimap` – `draw_minimap` and `draw_player`.
- `cub3d.hud` – `draw_game_over`, `draw_game_win` and `enemy_counter`
  return `TextItem` values (position, colour, text) for the caller to draw
  over the frame.

## Example

```python
import random

from cub3d.framebuffer import new_image
from cub3d.model import Enemy, Game, MapData
from cub3d.player import find_player_position, move_forward_backward
from cub3d.raycast import render_3d_view
from cub3d.minimap import draw_minimap, draw_player
from cub3d.shooting import handle_shoot
from cub3d.doors import place_doors_randomly

game = Game(map=MapData(
    grid=["1111111", "1000001", "10N0001", "1000001", "1111111"],
    floor_rgb=[220, 100, 0],
    ceiling_rgb=[225, 30, 0],
))
game.textures = {
    side: new_image(64, 64, 0x808080)
    for side in ("north", "south", "east", "west")
}
find_player_position(game)
place_doors_randomly(game, random.Random(1))
game.enemy_sys.enemies.append(Enemy(x=2.5, y=1.5, active=True))

move_forward_backward(game, 1)
render_3d_view(game)
draw_minimap(game)
draw_player(game)
hit = handle_shoot(game, now=0)
```

`game.screen` now holds the finished frame as an `Image`.

## What the package does not do

It has no command and opens no window: it does not read keyboard or mouse
input and does not show frames on screen. It does not read or validate
`.cub` map files and does not load textures from image files; the caller
fills `Game.map` and the texture fields. Enemies are not spawned, moved or
checked for collision with the player here; the caller adds them to
`Game.enemy_sys.enemies` and sets `enemy_sys.game_over` itself.