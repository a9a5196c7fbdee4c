"""Core game state shared by parsing, simulation and rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

WIN_W = 800
WIN_H = 600
TILE_SIZE = 20

MINIMAP_RADIUS = 80
MINIMAP_SCALE = 15
MINIMAP_X = 100
MINIMAP_Y = 100

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_E = 101
KEY_ESC = 65307
KEY_LEFT = 65361
KEY_RIGHT = 65363
MOUSE_SENS = 0.002
MOUSE_DEAD_ZONE = 1

PATH_MAX = 4096

WEAPON_FRAMES = 5

MAX_ENEMIES = 50
ENEMY_TYPES = 5
FRAMES_PER_ENEMY = 5
COLLISION_DISTANCE = 0.5
ENEMY_SIZE = 0.3
ENEMY_SPEED = 0.001
ENEMY_ANIM_SPEED = 100

MAX_DOORS = 50
DOOR_FRAMES = 8
DOOR_ANIM_SPEED = 3
MIN_DOOR_DISTANCE = 2


def rgb_to_int(r: int, g: int, b: int) -> int:
    """Pack red, green and blue channels into a 0xRRGGBB integer."""
    return (r << 16) | (g << 8) | b


def rgb_to_hex(r: int, g: int, b: int) -> int:
    """Clamp each channel to 0..255 and combine them; green is not shifted."""
    r, g, b = (min(max(channel, 0), 255) for channel in (r, g, b))
    return (r << 16) | g | b


@dataclass
class Image:
    """A row-major grid of 0xRRGGBB pixels."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError(
                f"expected {size} pixels, got {len(self.pixels)}"
            )


@dataclass
class Player:
    """Position and heading of the player in map units and radians."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    move_speed: float = 0.02
    rot_speed: float = 0.01


@dataclass
class MapData:
    """Everything read from a scene description file."""

    grid: list[str] = field(default_factory=list)
    no_texture: Optional[str] = None
    so_texture: Optional[str] = None
    we_texture: Optional[str] = None
    ea_texture: Optional[str] = None
    floor_color: Optional[str] = None
    ceiling_color: Optional[str] = None
    floor_rgb: list[int] = field(default_factory=lambda: [-1, -1, -1])
    ceiling_rgb: list[int] = field(default_factory=lambda: [-1, -1, -1])
    start_x: int = -1
    start_y: int = -1
    start: int = 0
    last_map_line: int = 0
    end: int = 0
    has_duplicates: bool = False
    width: int = 0
    height: int = 0
    player_found: bool = False


class DoorState(enum.Enum):
    CLOSED = 0
    OPENING = 1
    OPEN = 2
    CLOSING = 3


@dataclass
class Door:
    x: int = -1
    y: int = -1
    state: DoorState = DoorState.CLOSED
    frame: int = 0
    anim_counter: int = 0
    is_vertical: bool = False


@dataclass
class DoorSystem:
    doors: list[Door] = field(default_factory=list)
    closed_textures: list[Image] = field(default_factory=list)
    opening_textures: list[Image] = field(default_factory=list)
    textures_loaded: bool = False


@dataclass
class Enemy:
    x: float = 0.0
    y: float = 0.0
    enemy_type: int = 0
    active: bool = False
    current_frame: int = 0
    last_frame_time: int = 0
    frames: list[Optional[Image]] = field(
        default_factory=lambda: [None] * FRAMES_PER_ENEMY
    )


def _empty_enemy_textures() -> list[list[Optional[Image]]]:
    return [[None] * FRAMES_PER_ENEMY for _ in range(ENEMY_TYPES)]


@dataclass
class EnemySystem:
    enemies: list[Enemy] = field(default_factory=list)
    game_over: bool = False
    textures: list[list[Optional[Image]]] = field(
        default_factory=_empty_enemy_textures
    )

    @property
    def enemy_count(self) -> int:
        """Number of enemies spawned, dead or alive."""
        return len(self.enemies)


@dataclass
class Weapon:
    textures: list[Image] = field(default_factory=list)
    is_firing: bool = False
    current_frame: int = 0
    last_frame_time: int = 0


@dataclass
class Ray:
    ray_angle: float = 0.0
    distance: float = 0.0
    hit_vertical: bool = False
    wall_x: float = 0.0
    is_door: bool = False


class SpriteKind(enum.Enum):
    ENEMY = 0
    DOOR = 1


@dataclass
class Sprite:
    kind: SpriteKind
    x: float
    y: float
    distance: float
    index: int


@dataclass
class Game:
    """The whole state of a running game."""

    map: MapData = field(default_factory=MapData)
    player: Player = field(default_factory=Player)
    textures: dict[str, Image] = field(default_factory=dict)
    weapon: Weapon = field(default_factory=Weapon)
    enemy_sys: EnemySystem = field(default_factory=EnemySystem)
    door_sys: DoorSystem = field(default_factory=DoorSystem)
    screen: Image = field(default_factory=lambda: Image(WIN_W, WIN_H))
    z_buffer: list[float] = field(default_factory=lambda: [0.0] * WIN_W)
    keys: set[int] = field(default_factory=set)
    key_left: bool = False
    key_right: bool = False
    win_game: int = 0

    def ceiling_color(self) -> int:
        return rgb_to_int(*self.map.ceiling_rgb)

    def floor_color(self) -> int:
        return rgb_to_int(*self.map.floor_rgb)