"""Aliens: spawning, movement, behaviour per level, collisions and drawing."""

from __future__ import annotations

import random
from typing import Iterable, Iterator

import pygame

from .player import initialize_players
from .sprites import SpriteSet
from .state import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Color,
    Enemy,
    GameState,
    Mode,
    Platform,
    Player,
    PlayerShot,
    Vec2,
)

ENEMY_SIZE = 50
SHOT_HEIGHT = 5
SLOW_VERTICAL_SPEED = 0.5
SPAWN_X = -50
SCREEN_TOP = 72
SCREEN_BOTTOM = 552
DEATH_FRAMES = 11
ENEMY_TYPES = range(1, 9)

# Enemy type and points for levels 1 to 8; levels 9 to 16 repeat them.
_LEVEL_ENEMIES = {
    1: (1, 25),
    2: (2, 80),
    3: (3, 40),
    4: (4, 55),
    5: (5, 50),
    6: (6, 60),
    7: (7, 25),
    8: (8, 50),
}

ENEMY_COLORS = (
    (0, 255, 0),
    (255, 0, 0),
    (255, 0, 255),
    (0, 255, 255),
)

_SLOW_VERTICAL_TYPES = {1, 4, 7}
_FAST_VERTICAL_TYPES = {2, 3, 5, 6, 8}


class EnemyList:
    """The enemies on screen, newest first."""

    def __init__(self, enemies: Iterable[Enemy] = ()):
        self._enemies = list(enemies)

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self._enemies)

    def __len__(self) -> int:
        return len(self._enemies)

    def __getitem__(self, index: int) -> Enemy:
        return self._enemies[index]

    def insert(self, enemy: Enemy) -> None:
        """Add an enemy at the front of the list."""
        self._enemies.insert(0, enemy)

    def remove_first_dead(self) -> Enemy | None:
        """Remove the first dead enemy and return it, or None if all are alive."""
        for index, enemy in enumerate(self._enemies):
            if not enemy.alive:
                return self._enemies.pop(index)
        return None

    def kill_all(self) -> None:
        for enemy in self._enemies:
            enemy.alive = False

    def describe(self) -> str:
        """One line per enemy: position, type, points, directions and whether alive."""
        lines = [
            f"{float(enemy.pos.x):f},\t{float(enemy.pos.y):f},\t{enemy.type},\t"
            f"{enemy.points}\t{enemy.hori}\t{enemy.vert}\t{int(enemy.alive)}\n"
            for enemy in self._enemies
        ]
        return "".join(lines) + "\n"


def _enemy_list(state: GameState) -> EnemyList:
    if not isinstance(state.enemies, EnemyList):
        state.enemies = EnemyList(state.enemies)
    return state.enemies


def enemy_type_and_points(level: int) -> tuple[int, int]:
    """The enemy type and the points it is worth on a level from 1 to 16."""
    if not 1 <= level <= 16:
        raise ValueError(f"no enemies for level {level}")
    return _LEVEL_ENEMIES[(level - 1) % 8 + 1]


def select_color(rng: random.Random) -> Color:
    return Color(*ENEMY_COLORS[rng.randrange(4)])


def new_enemy(level: int, rng: random.Random) -> Enemy:
    """A fresh enemy just off the left edge, at a random height and heading."""
    y = rng.randrange(WINDOW_HEIGHT - 250 + 100)
    enemy_type, points = enemy_type_and_points(level)
    color = select_color(rng)
    hori = rng.randrange(2)
    vert = rng.randrange(3)
    return Enemy(
        pos=Vec2(SPAWN_X, y),
        type=enemy_type,
        points=points,
        alive=True,
        color=color,
        hori=hori,
        vert=vert,
        death_counter=0,
    )


def generate_enemies(state: GameState, rng: random.Random) -> None:
    """Add an enemy once a second while there are fewer than the difficulty allows."""
    enemies = _enemy_list(state)
    if len(enemies) < 5 * (1 + state.difficulty) and state.frame_count % state.fps == 0:
        enemies.insert(new_enemy(state.level, rng))
    state.frame_count += 1


def move_enemy(enemy: Enemy, speed: float) -> None:
    if enemy.hori == 0:
        enemy.pos.x -= speed
    elif enemy.hori == 1:
        enemy.pos.x += speed

    if enemy.type in _SLOW_VERTICAL_TYPES:
        step = SLOW_VERTICAL_SPEED
    elif enemy.type in _FAST_VERTICAL_TYPES:
        step = speed
    else:
        return
    if enemy.vert == 1:
        enemy.pos.y += step
    elif enemy.vert == 2:
        enemy.pos.y -= step


def wrap_enemy(enemy: Enemy) -> None:
    """Bring an enemy that left the screen back in on the other side."""
    x = enemy.pos.x
    if x < -70:
        enemy.pos.x = WINDOW_WIDTH
    elif x > WINDOW_WIDTH + 50:
        enemy.pos.x = 0
    elif -30 <= x < -5:
        enemy.pos.x = WINDOW_WIDTH


def collide(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """True when a corner of the first rectangle lies inside the second."""

    def inside(x: float, y: float) -> bool:
        return x2 <= x <= x2 + w2 and y2 <= y <= y2 + h2

    return (
        inside(x1, y1)
        or inside(x1 + w1, y1)
        or inside(x1 + w1, y1 + h1)
        or inside(x1, y1 + h1)
    )


def enemy_bullet_collision(enemy: Enemy, shots: list[PlayerShot], player: Player) -> None:
    """Kill the enemy when one of the player's shots reaches it, scoring its points."""
    for shot in shots[: player.count_shoots]:
        if shot.direction == 0:
            front, wrapped = shot.px2, shot.second_px2
        elif shot.direction == 1:
            front, wrapped = shot.px, shot.second_px
        else:
            continue
        hits_front = collide(
            front, shot.py, shot.width, SHOT_HEIGHT,
            enemy.pos.x, enemy.pos.y, ENEMY_SIZE, ENEMY_SIZE,
        )
        # The wrapped part of a shot counts even when the main test does not apply.
        hits_wrapped = collide(
            wrapped, shot.py, shot.width, SHOT_HEIGHT,
            enemy.pos.x, enemy.pos.y, ENEMY_SIZE, ENEMY_SIZE,
        )
        if (enemy.alive and shot.shooting and hits_front) or hits_wrapped:
            enemy.alive = False
            player.score += enemy.points


def enemy_player_collision(state: GameState, enemy: Enemy) -> bool:
    """Handle an enemy touching the current player; return True when it did.

    The player loses a life and every enemy dies. In a two player game the
    turn passes on; when nobody has lives left the game goes back to the menu.
    """
    player = state.player()
    if not (
        enemy.alive
        and player.alive
        and collide(
            enemy.pos.x, enemy.pos.y, ENEMY_SIZE, ENEMY_SIZE,
            player.px, player.py, player.px2 - player.px, player.py2 - player.py,
        )
    ):
        return False

    _enemy_list(state).kill_all()
    enemy.alive = False
    player.alive = False
    player.lives -= 1

    if state.mode == Mode.ONE_PLAYER and player.lives < 0:
        _game_over(state)
    if state.mode == Mode.TWO_PLAYERS:
        if state.current_player == 0 and state.players[1].lives > 0:
            state.current_player = 1
        elif state.current_player == 1 and player.lives > 0:
            state.current_player = 0
        else:
            _game_over(state)
    return True


def _game_over(state: GameState) -> None:
    state.mode = Mode.MENU
    initialize_players(state)
    state.ship.level = 1


def collides_with_platform(enemy: Enemy, platform: Platform) -> bool:
    return collide(
        enemy.pos.x, enemy.pos.y, ENEMY_SIZE, ENEMY_SIZE,
        float(platform.px), float(platform.py),
        float(platform.px2 - platform.px), float(platform.py2 - platform.py),
    )


def side_collision(enemy: Enemy, platform: Platform) -> int:
    """Which side of the platform the enemy hits: 1 left, 2 right, 3 top, 4 bottom, 0 none."""
    if not collides_with_platform(enemy, platform):
        return 0
    x, y = enemy.pos.x, enemy.pos.y
    overlaps_rows = y < platform.py2 or y + ENEMY_SIZE > platform.py
    overlaps_columns = x < platform.px2 or x + ENEMY_SIZE > platform.px
    if x + 45 < platform.px and overlaps_rows:
        return 1
    if x + 5 > platform.px2 and overlaps_rows:
        return 2
    if y + 45 < platform.py and overlaps_columns:
        return 3
    if y + 5 > platform.py2 and overlaps_columns:
        return 4
    return 0


def hits_screen_border(enemy: Enemy) -> bool:
    return enemy.pos.y <= SCREEN_TOP or enemy.pos.y + ENEMY_SIZE >= SCREEN_BOTTOM


def enemy_exploding(enemy: Enemy, platforms: Iterable[Platform]) -> None:
    """Enemies that blow up when they touch a platform or the top or bottom."""
    for platform in platforms:
        if collides_with_platform(enemy, platform) or hits_screen_border(enemy):
            enemy.alive = False


def enemy_bouncing(enemy: Enemy, platforms: Iterable[Platform]) -> None:
    """Enemies that bounce off platforms and the top and bottom of the screen."""
    for platform in platforms:
        side = side_collision(enemy, platform)
        if side == 1:
            enemy.hori = 0
        elif side == 2:
            enemy.hori = 1
        elif side == 3:
            enemy.vert = 2
        elif side == 4:
            enemy.vert = 1
    if hits_screen_border(enemy):
        if enemy.pos.y < 75:
            enemy.vert = 1
        elif enemy.pos.y > 500:
            enemy.vert = 2


def enemy_following(enemy: Enemy, player: Player) -> None:
    """Steer towards the player; fighters keep their horizontal heading."""
    if enemy.type != 4:
        if enemy.pos.x < player.px:
            enemy.hori = 1
        elif enemy.pos.x > player.px:
            enemy.hori = 0
    if enemy.pos.y < player.py:
        enemy.vert = 1
    elif enemy.pos.y > player.py:
        enemy.vert = 2
    else:
        enemy.vert = 0


def enemy_behaviour(enemy: Enemy, player: Player, platforms: Iterable[Platform]) -> None:
    platforms = list(platforms)
    if enemy.type in (1, 7):
        enemy_exploding(enemy, platforms)
    elif enemy.type in (2, 3, 6):
        enemy_bouncing(enemy, platforms)
    elif enemy.type == 4:
        enemy_exploding(enemy, platforms)
        enemy_following(enemy, player)
    elif enemy.type in (5, 8):
        enemy_following(enemy, player)


def _advance_death(enemy: Enemy) -> int | None:
    """Step a dead enemy's explosion; return the explosion frame to show, if any."""
    if enemy.death_counter < DEATH_FRAMES:
        enemy.death_counter += 1
    if enemy.death_counter < 4:
        return 0
    if enemy.death_counter < 8:
        return 1
    if enemy.death_counter < DEATH_FRAMES:
        return 2
    return None


def draw_enemy(state: GameState, enemy: Enemy, surface: pygame.Surface, sprites: SpriteSet) -> None:
    """Draw a live enemy on its coloured square, or the next step of its explosion."""
    first_frame = (state.enemy_animation_index // state.fps) % 2 == 0
    position = (int(enemy.pos.x), int(enemy.pos.y))
    if enemy.alive:
        rect = pygame.Rect(position[0], position[1], ENEMY_SIZE, ENEMY_SIZE)
        pygame.draw.rect(surface, enemy.color.rgb(), rect)
        if enemy.type in ENEMY_TYPES:
            image = sprites.enemy(enemy.type, enemy.hori == 0, not first_frame)
            surface.blit(image, position)
    else:
        frame = _advance_death(enemy)
        if frame is not None:
            surface.blit(sprites.explosion[frame], position)
    state.enemy_animation_index += 1


def update_enemies(
    state: GameState, rng: random.Random, surface: pygame.Surface, sprites: SpriteSet
) -> None:
    """Run one frame of the enemies: spawn, move, collide, draw and clear away the dead."""
    generate_enemies(state, rng)
    enemies = _enemy_list(state)
    for enemy in enemies:
        if enemy.alive:
            move_enemy(enemy, state.enemies_speed)
            enemy_behaviour(enemy, state.player(), state.platforms)
            wrap_enemy(enemy)
            enemy_player_collision(state, enemy)
            enemy_bullet_collision(enemy, state.shots, state.player())
        draw_enemy(state, enemy, surface, sprites)
    enemies.remove_first_dead()