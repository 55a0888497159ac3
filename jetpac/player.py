"""The jetman: start position, movement, gravity, platform collisions and drawing."""

from __future__ import annotations

from typing import Iterable

import pygame

from .sprites import SpriteSet
from .state import (
    BITSIZE,
    FPS,
    GROUND_Y,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    WINDOW_WIDTH,
    GameState,
    Keys,
    Platform,
    Player,
)

START_X = 400
START_Y = 400
GROUND_WIDTH = 42
GROUND_HEIGHT = 66
AIR_WIDTH = 48
AIR_HEIGHT = 72
START_LIVES = 4
START_SPEED = 10
ANIMATION_FRAMES = 4
EXPLOSION_FRAMES = 3
SMOKE_OFFSET = 60
FLY_BOOST = 7
DOWN_MARGIN = 10
LEFT_MARGIN = 10
RIGHT_MARGIN = 15


def _reset_position(player: Player) -> None:
    player.px = START_X
    player.py = START_Y
    player.px2 = player.px + GROUND_WIDTH
    player.py2 = player.py + GROUND_HEIGHT
    player.direction = 1
    player.in_ground = True
    player.in_air = False
    player.animation = 0
    player.count_shoots = 0
    player.exploding = False
    player.explosion_timer = 0


def initialize_players(state: GameState) -> None:
    """Put both players at the start with full lives and no score.

    Both players start dead; they appear once their death timer runs out.
    """
    for player in state.players:
        _reset_position(player)
        player.vel_x = START_SPEED
        player.vel_y = START_SPEED
        player.score = 0
        player.alive = False
        player.lives = START_LIVES


def restart_player_position(player: Player) -> None:
    """Bring a player back to the start position, alive."""
    _reset_position(player)
    player.alive = True


def animate_player(player: Player) -> None:
    player.animation = player.animation + 1 if player.animation < ANIMATION_FRAMES - 1 else 0


def apply_gravity(player: Player, platforms: Iterable[Platform]) -> None:
    """Decide whether the player stands on something; let it fall if not."""
    if player.py2 < GROUND_Y:
        player.in_air = True
        player.in_ground = False

    if any(
        player.py2 >= GROUND_Y
        or (
            platform.py <= player.py2 < platform.py2
            and player.px2 > platform.px
            and player.px < platform.px2
        )
        for platform in platforms
    ):
        player.in_ground = True
        player.in_air = False

    if player.in_air:
        player.py += player.vel_y
        player.py2 = player.py + AIR_HEIGHT


def collide_with_platforms(player: Player, platforms: Iterable[Platform]) -> None:
    """Push the player out of platforms it hits from below or from the sides."""
    for platform in platforms:
        if (
            player.px2 > platform.px
            and player.px < platform.px2
            and platform.py2 < player.py < platform.py2 + DOWN_MARGIN
        ):
            player.py = platform.py2 + DOWN_MARGIN
            player.py2 = player.py + AIR_HEIGHT

        if (
            player.px2 < platform.px < player.px2 + LEFT_MARGIN
            and player.py < platform.py2
            and player.py2 > platform.py
        ):
            player.px = platform.px - LEFT_MARGIN - AIR_WIDTH
            player.px2 = player.px + AIR_WIDTH

        if (
            player.px - RIGHT_MARGIN < platform.px2 < player.px
            and player.py < platform.py2
            and player.py2 > platform.py
        ):
            player.px = platform.px2 + RIGHT_MARGIN
            player.px2 = player.px + AIR_WIDTH


def move_player(player: Player, keys: Keys, platforms: Iterable[Platform]) -> None:
    """Walk and fly from the arrow keys, then apply gravity."""
    if not player.alive:
        return
    if keys.is_pressed(KEY_RIGHT):
        player.px += player.vel_x
        player.px2 = player.px + GROUND_WIDTH
        player.direction = 1
        animate_player(player)
    if keys.is_pressed(KEY_LEFT):
        player.px -= player.vel_x
        player.px2 = player.px + GROUND_WIDTH
        player.direction = 0
        animate_player(player)
    if keys.is_pressed(KEY_UP):
        player.py -= player.vel_y + FLY_BOOST
        player.py2 = player.py + AIR_HEIGHT
        if player.in_ground:
            player.exploding = True
        animate_player(player)
    apply_gravity(player, platforms)


def wrap_player(player: Player) -> None:
    """Wrap around the sides of the screen and keep below the score line."""
    if player.px > WINDOW_WIDTH and (player.in_ground or player.in_air):
        player.px = -GROUND_WIDTH
    if player.px2 < 0:
        player.px = WINDOW_WIDTH
    top = BITSIZE * 2 + 5
    if player.py < top:
        player.py = top


def update_death(player: Player) -> None:
    """Count a dead player's waiting time and bring it back when it is over."""
    if player.alive:
        return
    if player.death_timer < FPS:
        player.death_timer += 1
    if player.death_timer >= FPS:
        player.death_timer = 0
        restart_player_position(player)


def draw_player(player: Player, surface: pygame.Surface, sprites: SpriteSet) -> None:
    """Draw the jetman and advance its take-off smoke."""
    if not player.alive:
        return
    if player.in_ground:
        frames = sprites.ground_left if player.direction == 0 else sprites.ground_right
    else:
        frames = sprites.air_left if player.direction == 0 else sprites.air_right
    surface.blit(frames[player.animation], (player.px, player.py))

    if player.exploding:
        surface.blit(sprites.explosion[player.explosion_timer], (player.px, player.py + SMOKE_OFFSET))
        if player.explosion_timer < EXPLOSION_FRAMES - 1:
            player.explosion_timer += 1
        else:
            player.explosion_timer = 0
            player.exploding = False