"""The jetman's laser shots."""

from __future__ import annotations

import random
from typing import Iterable

import pygame

from .state import KEY_SPACE, MAX_SHOTS, WINDOW_WIDTH, Color, Keys, Player, PlayerShot

SHOT_SPEED = 30
SHOT_MAX_WIDTH = 400
SHOT_MARGIN = 15
PLAYER_WIDTH = 42
PLAYER_HEIGHT = 66

WHITE = (255, 255, 255)
PINK = (255, 51, 224)
CYAN = (51, 255, 255)


def initialize_shots(shots: Iterable[PlayerShot]) -> None:
    for shot in shots:
        shot.shooting = False
        shot.border = False
        shot.speed = SHOT_SPEED
        shot.max_width = SHOT_MAX_WIDTH


def _shot_color(roll: int) -> Color:
    if roll < 20:
        return Color(*WHITE)
    if 20 < roll < 25:
        return Color(*PINK)
    return Color(*CYAN)


def detect_shot(shots: list[PlayerShot], player: Player, keys: Keys, rng: random.Random) -> None:
    """Fire while space is held, as long as the player has shots left."""
    if not keys.is_pressed(KEY_SPACE) or player.count_shoots >= MAX_SHOTS:
        return
    player.count_shoots += 1

    for shot in shots[: player.count_shoots]:
        if shot.shooting:
            continue
        if player.direction == 0:
            shot.px = player.px - SHOT_MARGIN
            shot.second_px = shot.px + WINDOW_WIDTH
            shot.px2 = shot.px - SHOT_MARGIN
            shot.second_px2 = shot.px2 + WINDOW_WIDTH
            shot.direction = 0
        else:
            shot.px = player.px + PLAYER_WIDTH + SHOT_MARGIN
            shot.second_px = shot.px - WINDOW_WIDTH
            shot.px2 = shot.px + SHOT_MARGIN
            shot.second_px2 = shot.px2 - WINDOW_WIDTH
            shot.direction = 1
        shot.aux_px = shot.px
        shot.py = player.py + PLAYER_HEIGHT // 2
        shot.shooting = True
        shot.color = _shot_color(rng.randrange(30))


def update_shots(shots: Iterable[PlayerShot], player: Player) -> None:
    """Stretch each shot to its full length, then pull its tail after it."""
    for shot in shots:
        if not shot.shooting:
            continue
        if shot.direction == 0:
            if shot.aux_px - shot.px2 < shot.max_width:
                shot.px2 -= shot.speed
                shot.second_px2 -= shot.speed
            else:
                shot.px -= shot.speed
                shot.second_px -= shot.speed

            if shot.px - shot.px2 < 1:
                shot.shooting = False
                shot.border = False
                player.count_shoots -= 1
            if shot.px < WINDOW_WIDTH:
                shot.border = True

            shot.width = shot.px - shot.px2
            shot.second_width = shot.second_px - shot.second_px2
        elif shot.direction == 1:
            if shot.px2 - shot.aux_px < shot.max_width:
                shot.px2 += shot.speed
                shot.second_px2 += shot.speed
            else:
                shot.px += shot.speed
                shot.second_px += shot.speed

            if shot.px2 - shot.px < 1:
                shot.shooting = False
                player.count_shoots -= 1
            if shot.px > WINDOW_WIDTH:
                shot.border = True

            shot.width = shot.px2 - shot.px
            shot.second_width = shot.second_px2 - shot.second_px


def draw_shots(shots: Iterable[PlayerShot], surface: pygame.Surface) -> None:
    for shot in shots:
        if not shot.shooting:
            continue
        color = shot.color.rgb()
        if shot.border:
            pygame.draw.line(surface, color, (shot.second_px, shot.py), (shot.second_px2, shot.py))
        pygame.draw.line(surface, color, (shot.px, shot.py), (shot.px2, shot.py))