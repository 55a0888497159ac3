"""Bonus items and the fuel cans that fill the rocket."""

from __future__ import annotations

import random

import pygame

from .sprites import SpriteSet
from .state import GROUND_Y, WINDOW_WIDTH, GameState, Powerup

FUEL = 5
DIAMOND = 0
BONUS_POINTS = 250
FULL_TANK = 6

# Width and height of each powerup image, fuel last.
POWERUP_SIZES = ((46, 36), (48, 27), (48, 24), (45, 39), (45, 33), (49, 33))

DIAMOND_FRAMES = 12
SHIP_FUEL_X = 528
CARRY_OFFSET = 20
DROP_SPEED = 3
FALL_SPEED = 5
SPAWN_HEIGHT = 70
FUEL_SPAWN_Y = 50

_APPEARANCE_COLORS = {
    1: (57, 221, 67),
    2: (189, 221, 46),
    3: (86, 211, 247),
    4: (86, 211, 247),
    FUEL: (216, 46, 221),
}


def _size(appearance: int) -> tuple[int, int]:
    return POWERUP_SIZES[appearance]


def _fit(powerup: Powerup) -> None:
    width, height = _size(powerup.appearance)
    powerup.px2 = powerup.px + width
    powerup.py2 = powerup.py + height


def appear_powerup(state: GameState, rng: random.Random) -> None:
    """Now and then drop a bonus item, or a fuel can while the rocket needs one."""
    powerup = state.powerup
    ship = state.ship

    if rng.randrange(200) == 0 and not powerup.alive:
        powerup.alive = True
        powerup.air = True
        powerup.carry = False
        powerup.destination = False
        powerup.appearance = rng.randrange(4)
        powerup.platform = rng.randrange(4)
        powerup.animation = 0
        if powerup.platform == 0:
            powerup.px = rng.randrange(state.platforms[0].px) + 24 * 4
            powerup.py = 24 * 10 - SPAWN_HEIGHT
        elif powerup.platform == 1:
            powerup.px = rng.randrange(24) * 4 + 24 * 15
            powerup.py = 24 * 13 - SPAWN_HEIGHT
        elif powerup.platform == 2:
            powerup.px = rng.randrange(24) * 6 + 24 * 24
            powerup.py = 24 * 7 - SPAWN_HEIGHT
        else:
            powerup.px = rng.randrange(576) - _size(powerup.appearance)[1]
            powerup.py = GROUND_Y - SPAWN_HEIGHT
        _fit(powerup)

    if (
        rng.randrange(75) == 0
        and not powerup.alive
        and ship.head_y == ship.py
        and ship.fill < FULL_TANK
    ):
        powerup.fuel = True
        powerup.alive = True
        powerup.air = True
        powerup.carry = False
        powerup.destination = False
        powerup.appearance = FUEL
        powerup.animation = 0
        powerup.px = rng.randrange(WINDOW_WIDTH)
        powerup.py = FUEL_SPAWN_Y
        _fit(powerup)


def animate_diamond(powerup: Powerup) -> None:
    powerup.animation = powerup.animation + 1 if powerup.animation < DIAMOND_FRAMES else 0


def update_fuel(state: GameState) -> None:
    """Carry, drop and deliver fuel; let fresh items fall onto platforms."""
    powerup = state.powerup
    player = state.player()
    fuel_width, fuel_height = _size(FUEL)

    if powerup.appearance == FUEL and powerup.carry:
        powerup.px = player.px
        powerup.px2 = powerup.px + fuel_width
        powerup.py = player.py + CARRY_OFFSET
        powerup.py2 = powerup.py + fuel_height

    if powerup.appearance == FUEL and powerup.carry and powerup.px2 > 545 and powerup.px < 550:
        powerup.destination = True
        powerup.carry = False
        powerup.px = SHIP_FUEL_X
        powerup.px2 = powerup.px + fuel_width

    if powerup.appearance == FUEL and powerup.destination:
        powerup.py += DROP_SPEED
        powerup.py2 = powerup.py + fuel_height

    if powerup.py2 > GROUND_Y and powerup.destination:
        state.ship.fill += 1
        powerup.alive = False
        powerup.fuel = False
        powerup.destination = False

    if powerup.air:
        powerup.py += FALL_SPEED
        powerup.py2 = powerup.py + _size(powerup.appearance)[1]

    if any(
        powerup.py2 >= GROUND_Y
        or (
            platform.py <= powerup.py2 < platform.py2
            and powerup.px2 > platform.px
            and powerup.px < platform.px2
        )
        for platform in state.platforms
    ):
        powerup.air = False

    if not player.alive and powerup.appearance == FUEL and not powerup.destination:
        powerup.alive = False
        powerup.carry = False


def collide_powerup(state: GameState) -> None:
    """Pick up a fuel can, or collect a bonus item for points."""
    powerup = state.powerup
    player = state.player()
    if not (
        player.px < powerup.px2
        and player.px2 > powerup.px
        and player.py < powerup.py2
        and player.py2 > powerup.py
        and powerup.alive
    ):
        return
    if powerup.appearance == FUEL and not powerup.carry and not powerup.destination:
        powerup.carry = True
    if powerup.appearance < FUEL:
        powerup.alive = False
        player.score += BONUS_POINTS


def _diamond_color(animation: int) -> tuple[int, int, int] | None:
    if animation < 3:
        return (86, 211, 247)
    if 3 < animation < 6:
        return (189, 221, 46)
    if 6 < animation < 9:
        return (57, 221, 67)
    if 9 < animation < 12:
        return (216, 46, 221)
    return None


def draw_powerup(powerup: Powerup, surface: pygame.Surface, sprites: SpriteSet) -> None:
    """Draw the item on its coloured backdrop; diamonds change colour."""
    if not powerup.alive:
        return
    if powerup.appearance == DIAMOND:
        color = _diamond_color(powerup.animation)
        animate_diamond(powerup)
    else:
        color = _APPEARANCE_COLORS.get(powerup.appearance)
    if color is not None:
        rect = pygame.Rect(powerup.px, powerup.py, powerup.px2 - powerup.px, powerup.py2 - powerup.py)
        pygame.draw.rect(surface, color, rect)
    surface.blit(sprites.powerups[powerup.appearance], (powerup.px, powerup.py))