"""The scene: platforms, the stage rectangles and the rocket's assembly, fuelling and flight."""

from __future__ import annotations

import pygame

from .player import AIR_HEIGHT, AIR_WIDTH, GROUND_HEIGHT, GROUND_WIDTH, restart_player_position
from .sprites import SpriteSet
from .state import GROUND_Y, WINDOW_WIDTH, Color, GameState, Platform, StageItem, Vec2

TILE = 24
SHIP_PART = 49
SHIP_HEIGHT = SHIP_PART * 3
LANDED_Y = 353
TOP_Y = 10
FULL_TANK = 6
FLIGHT_SPEED = 2
PART_FALL_SPEED = 2
CARRY_OFFSET = 20
COMBUSTION_PERIOD = 100
COMBUSTION_SWITCH = 50
COMBUSTION_OFFSET = 12
FLAME_HEIGHT = 45
STAGE_ITEMS = 11

# Levels on which the rocket starts in pieces and has to be built.
ASSEMBLY_LEVELS = (1, 5, 9, 13)

# Height of the fuel gauge for each fuel level; it grows upwards.
_FUEL_HEIGHTS = (0, -25, -49, -73, -98, -122, -147)

PLATFORM_COLOR = (7, 127, 15)
GROUND_COLOR = (149, 145, 13)
WHITE = (255, 255, 255)
FUEL_COLOR = (213, 46, 113)
FLAME_COLOR = (188, 31, 29)

# Stage item slots.
HEAD = 4
BODY = 5
SHELL = 6
HEAD_COVER = 7
FLAME = 8
PLAYER_MASK = 9
FUEL_GAUGE = 10


def initialize_platforms() -> list[Platform]:
    """The three floating platforms."""
    return [
        Platform(px=TILE * 5, py=TILE * 10, px2=TILE * 4 + TILE * 7, py2=TILE * 10 + TILE),
        Platform(px=TILE * 16, py=TILE * 13, px2=TILE * 15 + TILE * 5, py2=TILE * 13 + TILE),
        Platform(px=TILE * 25, py=TILE * 7, px2=TILE * 24 + TILE * 7, py2=TILE * 7 + TILE),
    ]


def build_stage(state: GameState) -> list[StageItem]:
    """Lay out the coloured rectangles of the scene, indexed by slot, and store them in the state."""
    ship = state.ship
    player = state.player()

    def item(index, x, y, width, height, color) -> StageItem:
        return StageItem(index=index, position=Vec2(x, y), color=Color(*color), width=width, height=height)

    items = [
        item(0, TILE * 5, TILE * 10, TILE * 6, TILE, PLATFORM_COLOR),
        item(1, TILE * 16, TILE * 13, TILE * 4, TILE, PLATFORM_COLOR),
        item(2, TILE * 25, TILE * 7, TILE * 6, TILE, PLATFORM_COLOR),
        item(3, 0, GROUND_Y, WINDOW_WIDTH, TILE, GROUND_COLOR),
        item(HEAD, ship.px, ship.py, SHIP_PART, SHIP_PART, WHITE),
        item(BODY, ship.px, ship.py + SHIP_PART * 2, SHIP_PART, SHIP_PART, WHITE),
        item(SHELL, ship.px, ship.py + SHIP_HEIGHT, SHIP_PART, -SHIP_PART, WHITE),
        item(HEAD_COVER, ship.px, ship.py + SHIP_HEIGHT, SHIP_PART, 0, WHITE),
        item(FLAME, ship.px, ship.py + SHIP_PART * 4 + 10, SHIP_PART, 0, FLAME_COLOR),
        item(PLAYER_MASK, player.px, player.py, GROUND_WIDTH, GROUND_HEIGHT, WHITE),
        item(FUEL_GAUGE, ship.px, ship.py + SHIP_HEIGHT, SHIP_PART, 0, FUEL_COLOR),
    ]
    state.stage = items
    return items


def _kill_enemies(state: GameState) -> None:
    for enemy in state.enemies:
        enemy.alive = False


def player_entered(state: GameState) -> None:
    """Put the player inside a fully fuelled rocket when it walks into it."""
    ship = state.ship
    player = state.player()
    if (
        ship.fill == FULL_TANK
        and player.px < ship.px + SHIP_PART
        and player.px2 > ship.px
        and player.py > ship.py
    ):
        ship.player_in = True
        player.py = 800
        _kill_enemies(state)


def lift_off(state: GameState) -> None:
    """Fly the loaded rocket up; at the top, move on to the next level."""
    ship = state.ship
    stage = state.stage
    if ship.fill == FULL_TANK and not ship.stop and ship.player_in:
        ship.py -= FLIGHT_SPEED
        stage[SHELL].position.y = ship.py + SHIP_HEIGHT + 1
        stage[HEAD_COVER].position.y = ship.py + SHIP_HEIGHT + 1
        stage[HEAD].position.y = ship.py + 1
        stage[BODY].position.y = ship.py + SHIP_PART * 2
        stage[FLAME].position.y = ship.py + SHIP_HEIGHT + 10
        stage[FUEL_GAUGE].position.y = ship.py + SHIP_HEIGHT

    if ship.py < TOP_Y and not ship.stop:
        ship.stop = True
        ship.level += 1
        ship.fill = 0
        ship.in_position = True
        _kill_enemies(state)
        state.level += 1
        if state.level > 16:
            state.level = 1
            state.difficulty += 1
        if ship.level in ASSEMBLY_LEVELS:
            restart_player_position(state.player())


def _reset_parts(state: GameState) -> None:
    ship = state.ship
    ship.first_part = False
    ship.second_part = False
    ship.body_taken = False
    ship.head_taken = False
    ship.player_in = False


def land(state: GameState) -> None:
    """Bring the rocket back down after a flight, in pieces on assembly levels."""
    ship = state.ship
    stage = state.stage

    if ship.stop and not ship.in_position:
        ship.fill = 0
        ship.py = LANDED_Y
        ship.stop = False
        ship.head_x = TILE * 7
        ship.head_y = TILE * 10 - SHIP_PART
        ship.body_x = TILE * 17
        ship.body_y = TILE * 13 - SHIP_PART
        stage[HEAD_COVER].height = 0
        stage[SHELL].position.y = ship.py + SHIP_HEIGHT
        stage[HEAD_COVER].position.y = ship.py + SHIP_HEIGHT
        stage[FUEL_GAUGE].position.y = ship.py + SHIP_HEIGHT

    if ship.stop and ship.in_position:
        ship.py += FLIGHT_SPEED
        stage[SHELL].position.y = ship.py + SHIP_HEIGHT + 2
        stage[HEAD_COVER].position.y = ship.py + SHIP_HEIGHT + 2
        stage[HEAD].position.y = ship.py + 2
        stage[BODY].position.y = ship.py + SHIP_PART * 2
        stage[FLAME].position.y = ship.py + SHIP_HEIGHT + 10
        stage[FUEL_GAUGE].position.y = ship.py + SHIP_HEIGHT
        _reset_parts(state)

    if ship.stop and ship.py > LANDED_Y:
        ship.py = LANDED_Y
        ship.stop = False
        _reset_parts(state)
        restart_player_position(state.player())


def mask_follow_player(state: GameState) -> None:
    """Keep the white backdrop behind the current player."""
    player = state.player()
    mask = state.stage[PLAYER_MASK]
    mask.position.x = player.px
    mask.position.y = player.py
    if not player.alive:
        mask.width = 0
        mask.height = 0
    elif player.in_ground:
        mask.width = GROUND_WIDTH - 3
        mask.height = GROUND_HEIGHT
    else:
        mask.width = AIR_WIDTH
        mask.height = AIR_HEIGHT


def take_pieces(state: GameState) -> None:
    """Let the player pick up the loose rocket parts and carry them."""
    ship = state.ship
    player = state.player()
    stage = state.stage
    if ship.in_position:
        return

    if not ship.first_part:
        if (
            TILE * 16 < player.px < TILE * 16 + SHIP_PART
            and ship.body_y - 40 < player.py < ship.body_y
        ):
            ship.body_taken = True
        if ship.body_taken:
            ship.body_x = player.px + CARRY_OFFSET
            ship.body_y = player.py + CARRY_OFFSET
            stage[HEAD].position.x = player.px
            stage[HEAD].position.y = player.py + CARRY_OFFSET
            stage[FLAME].position.y = ship.py + SHIP_PART * 4 + 10

    if ship.second_part:
        if (
            ship.head_x < player.px < ship.head_x + SHIP_PART
            and ship.head_y - 40 < player.py < ship.head_y
        ):
            ship.head_taken = True
        if ship.head_taken:
            ship.head_x = player.px + CARRY_OFFSET
            ship.head_y = player.py + CARRY_OFFSET
            stage[BODY].position.x = player.px
            stage[BODY].position.y = player.py + CARRY_OFFSET


def drop_pieces(state: GameState) -> None:
    """Let a part carried over the rocket fall into place."""
    ship = state.ship

    if ship.px - 6 < ship.body_x < ship.px + 55:
        ship.body_x = ship.px
        ship.body_taken = False
        ship.first_part = True
        ship.second_part = True
        if ship.body_y < ship.py + SHIP_PART:
            ship.body_y += PART_FALL_SPEED
        if ship.body_y > ship.py + SHIP_PART:
            ship.body_y = ship.py + SHIP_PART

    if ship.px - 6 < ship.head_x < ship.px + 55:
        ship.head_x = ship.px
        ship.head_taken = False
        ship.second_part = False
        if ship.head_y < ship.py:
            ship.head_y += PART_FALL_SPEED
        if ship.head_y > ship.py:
            ship.head_y = ship.py
            state.stage[HEAD_COVER].height = -SHIP_HEIGHT


def in_position(state: GameState) -> None:
    """Move the backdrops of the loose parts along with them."""
    ship = state.ship
    stage = state.stage
    if ship.in_position:
        return
    stage[BODY].position.x = ship.head_x
    stage[BODY].position.y = ship.head_y
    if not ship.body_taken:
        stage[HEAD].position.x = ship.body_x
        stage[HEAD].position.y = ship.body_y


def fill_fuel(state: GameState) -> None:
    """Size the fuel gauge to the rocket's fuel level."""
    fill = state.ship.fill
    if 0 <= fill < len(_FUEL_HEIGHTS):
        state.stage[FUEL_GAUGE].height = _FUEL_HEIGHTS[fill]


def _flame_on(state: GameState) -> bool:
    ship = state.ship
    return (ship.fill == FULL_TANK and ship.py < 300) or (ship.stop and ship.py < 304)


def full_fuel(state: GameState) -> None:
    """Show the exhaust flame while the rocket flies."""
    state.stage[FLAME].height = FLAME_HEIGHT if _flame_on(state) else 0


def update_ship(state: GameState, now: float) -> int | None:
    """Advance the rocket for one frame; return the combustion frame to show, if any.

    ``now`` is the current time in milliseconds.
    """
    land(state)
    ship = state.ship
    for sprite, first_level in enumerate((1, 5, 9, 13)):
        if first_level <= ship.level < first_level + 4:
            ship.sprite = sprite

    if ship.level not in ASSEMBLY_LEVELS:
        ship.in_position = True
        state.stage[HEAD_COVER].height = -SHIP_HEIGHT
    else:
        ship.in_position = False

    if not _flame_on(state):
        return None
    if ship.time < now:
        ship.time = now + COMBUSTION_PERIOD
    return 0 if ship.time >= now + COMBUSTION_SWITCH else 1


def draw_ship(state: GameState, surface: pygame.Surface, sprites: SpriteSet, now: float) -> None:
    """Advance and draw the rocket, whole or in pieces, with its flame."""
    frame = update_ship(state, now)
    ship = state.ship
    surface.blit(sprites.ship_propeller[ship.sprite], (ship.px, ship.py + SHIP_PART * 2))
    if ship.in_position:
        surface.blit(sprites.ship_body[ship.sprite], (ship.px, ship.py + SHIP_PART))
        surface.blit(sprites.ship_head[ship.sprite], (ship.px, ship.py))
    else:
        surface.blit(sprites.ship_body[ship.sprite], (ship.body_x, ship.body_y))
        surface.blit(sprites.ship_head[ship.sprite], (ship.head_x, ship.head_y))
    if frame is not None:
        surface.blit(
            sprites.combustion[frame],
            (ship.px, ship.py + SHIP_HEIGHT + COMBUSTION_OFFSET),
        )


def _draw_tiles(item: StageItem, surface: pygame.Surface, sprites: SpriteSet) -> None:
    count = item.width // TILE
    x, y = int(item.position.x), int(item.position.y)
    for tile in range(count):
        if tile == 0:
            surface.blit(sprites.platform[0], (x, y))
        if 0 < tile < count - 1:
            surface.blit(sprites.platform[1], (x + tile * TILE, y))
        if tile == count - 1:
            surface.blit(sprites.platform[2], (x + count * TILE - TILE, y))


def draw_stage(state: GameState, surface: pygame.Surface, sprites: SpriteSet) -> None:
    """Draw every stage rectangle; platforms and ground get their tiles on top."""
    for item in state.stage:
        rect = pygame.Rect(int(item.position.x), int(item.position.y), int(item.width), int(item.height))
        rect.normalize()
        if rect.width and rect.height:
            pygame.draw.rect(surface, item.color.rgb(), rect)
        if item.index < 4:
            _draw_tiles(item, surface, sprites)