"""Game data: entities, the input snapshot for one frame and the whole game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

FPS = 25
WINDOW_WIDTH = 768
WINDOW_HEIGHT = 576
ENEMY_SPEED = 5
MAX_SHOTS = 10
REDIMENSION = 3
BITSIZE = 8 * REDIMENSION
GROUND_Y = 500

KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_UP = "up"
KEY_SPACE = "space"
KEY_ESCAPE = "escape"


class Mode(IntEnum):
    """Which screen the game is showing."""

    MENU = 0
    ONE_PLAYER = 1
    TWO_PLAYERS = 2
    ONE_PLAYER_JOYSTICK = -1
    TWO_PLAYERS_JOYSTICK = -2


@dataclass
class Vec2:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Color:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass
class Enemy:
    pos: Vec2 = field(default_factory=Vec2)
    type: int = 0
    points: int = 0
    alive: bool = True
    color: Color = field(default_factory=Color)
    hori: int = 0
    vert: int = 0
    death_counter: int = 0


@dataclass
class Platform:
    px: int
    py: int
    px2: int
    py2: int


@dataclass
class Player:
    """The jetman; a new player starts where the game places it at start-up."""

    px: int = 400
    py: int = 400
    px2: int = 442
    py2: int = 466
    vel_x: int = 10
    vel_y: int = 10
    direction: int = 1
    animation: int = 0
    explosion_timer: int = 0
    count_shoots: int = 0
    death_timer: int = 0
    lives: int = 4
    score: int = 0
    in_ground: bool = True
    in_air: bool = False
    exploding: bool = False
    is_playing: bool = False
    alive: bool = False


@dataclass
class PlayerShot:
    px: int = 0
    aux_px: int = 0
    py: int = 0
    px2: int = 0
    second_px: int = 0
    second_px2: int = 0
    max_width: int = 400
    direction: int = 0
    speed: int = 30
    width: int = 0
    second_width: int = 0
    shooting: bool = False
    border: bool = False
    color: Color = field(default_factory=Color)


@dataclass
class Powerup:
    px: int = 0
    py: int = 0
    px2: int = 0
    py2: int = 0
    appearance: int = 0
    platform: int = 0
    animation: int = 0
    alive: bool = False
    carry: bool = False
    destination: bool = False
    fuel: bool = False
    air: bool = False


@dataclass
class Ship:
    """The rocket: its assembled position, the two loose parts and the fuel level."""

    px: int = 24 * 22
    py: int = 353
    level: int = 1
    fill: int = 0
    head_x: int = 24 * 7
    head_y: int = 24 * 10 - 49
    body_x: int = 24 * 17
    body_y: int = 24 * 13 - 49
    time: float = 0.0
    in_position: bool = True
    sprite: int = 0
    first_part: bool = False
    second_part: bool = False
    body_taken: bool = False
    head_taken: bool = False
    stop: bool = False
    player_in: bool = False


@dataclass
class StageItem:
    """A coloured rectangle of the scene, optionally tiled with platform sprites."""

    index: int
    position: Vec2 = field(default_factory=Vec2)
    color: Color = field(default_factory=Color)
    width: int = 0
    height: int = 0
    points: int = 4
    size: int = 24


@dataclass(frozen=True)
class Keys:
    """Keys held during this frame and keys that went down during this frame."""

    pressed: frozenset[str] = frozenset()
    down: frozenset[str] = frozenset()

    def __init__(self, pressed: Iterable[str] = (), down: Iterable[str] = ()):
        object.__setattr__(self, "pressed", frozenset(pressed))
        object.__setattr__(self, "down", frozenset(down))

    def is_pressed(self, key: str) -> bool:
        return key in self.pressed

    def is_down(self, key: str) -> bool:
        return key in self.down


def _new_players() -> list[Player]:
    return [Player(), Player()]


def _new_shots() -> list[PlayerShot]:
    return [PlayerShot() for _ in range(MAX_SHOTS)]


@dataclass
class GameState:
    """Everything that changes while the game runs."""

    mode: Mode = Mode.MENU
    level: int = 1
    difficulty: int = 0
    frame_count: int = 0
    enemies_speed: int = ENEMY_SPEED
    enemy_animation_index: int = 0
    current_player: int = 0
    players: list[Player] = field(default_factory=_new_players)
    shots: list[PlayerShot] = field(default_factory=_new_shots)
    platforms: list[Platform] = field(default_factory=list)
    enemies: list = field(default_factory=list)
    powerup: Powerup = field(default_factory=Powerup)
    ship: Ship = field(default_factory=Ship)
    stage: list[StageItem] = field(default_factory=list)
    player_selection: int = 1
    move_selection: int = 1
    blink: int = 0
    fps: int = FPS

    def player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.current_player]

    @property
    def num_enemies(self) -> int:
        return len(self.enemies)