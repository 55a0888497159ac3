"""Menu screen, score line and the order in which one frame of the game runs."""

from __future__ import annotations

import random

import pygame

from .enemies import update_enemies
from .player import collide_with_platforms, draw_player, move_player, update_death, wrap_player
from .powerups import appear_powerup, collide_powerup, draw_powerup, update_fuel
from .savegame import handle_save_keys
from .scenery import (
    build_stage,
    draw_ship,
    draw_stage,
    drop_pieces,
    fill_fuel,
    full_fuel,
    in_position,
    initialize_platforms,
    land,
    lift_off,
    mask_follow_player,
    player_entered,
    take_pieces,
)
from .shoot import detect_shot, draw_shots, update_shots
from .sprites import SpriteSet
from .state import BITSIZE, KEY_SPACE, REDIMENSION, GameState, Keys, Mode

TEXT_SIZE = 20 * REDIMENSION
SCORE_DIGITS = 6
MAX_SCORE = 10**SCORE_DIGITS
LIVES_MASK_WIDTH = 18
LIVES_MASK_Y = 3
START_KEY = "5"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BLUE = (0, 195, 217)
YELLOW = (255, 240, 0)

HEADER = "1UP                      2UP"

# Menu entries: the selection they belong to, its value, the text, the text row
# and the width of the highlight in characters.
_OPTIONS = (
    ("player_selection", 1, "1   1 PLAYER GAME", 8, 17),
    ("player_selection", 2, "2   2 PLAYER GAME", 10, 17),
    ("move_selection", 1, "3   KEYBOARD", 12, 12),
    ("move_selection", 2, "4   KEMPSTON JOYSTICK", 14, 21),
)

_SELECTION_KEYS = {
    "1": ("player_selection", 1),
    "2": ("player_selection", 2),
    "3": ("move_selection", 1),
    "4": ("move_selection", 2),
}

# (players, controls) -> mode started by the start key.
_START_MODES = {
    (1, 1): Mode.ONE_PLAYER,
    (2, 1): Mode.TWO_PLAYERS,
    (1, 2): Mode.ONE_PLAYER_JOYSTICK,
    (2, 2): Mode.TWO_PLAYERS_JOYSTICK,
}


def padded_score(score: int) -> str:
    """A score as shown on the score line: six digits with leading zeros.

    Scores of a million or more are not shown.
    """
    if score >= MAX_SCORE:
        return ""
    if score < 10:
        return "0" * (SCORE_DIGITS - 1) + str(score)
    return str(score).zfill(SCORE_DIGITS)


def game_selection(state: GameState, keys: Keys) -> None:
    """Handle the menu keys and advance the blinking of the selected entries."""
    for key, (attribute, value) in _SELECTION_KEYS.items():
        if keys.is_down(key):
            setattr(state, attribute, value)

    if keys.is_down(START_KEY) and state.mode == Mode.MENU:
        state.mode = _START_MODES[(state.player_selection, state.move_selection)]

    if state.blink >= state.fps * 2:
        state.blink = 0
    state.blink += 1


def not_available(state: GameState, keys: Keys) -> None:
    """Go back to the menu, with the keyboard selected, when space goes down."""
    if keys.is_down(KEY_SPACE):
        state.mode = Mode.MENU
        state.move_selection = 1


def draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    x: float,
    y: float,
    color: tuple[int, int, int],
) -> pygame.Rect:
    """Draw text whose baseline is at ``y``; return the area it covers."""
    image = font.render(text, False, color)
    rect = image.get_rect(left=int(x), top=int(y) - font.get_ascent())
    surface.blit(image, rect)
    return rect


def draw_introduction(state: GameState, surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw the menu screen; the selected entries blink."""
    draw_text(surface, font, HEADER, BITSIZE * 2, BITSIZE, WHITE)
    draw_text(surface, font, "JETPAC GAME SELECTION", BITSIZE * 6, BITSIZE * 5, WHITE)

    for attribute, value, text, row, width in _OPTIONS:
        selected = getattr(state, attribute) == value
        if not selected or state.blink <= state.fps:
            draw_text(surface, font, text, BITSIZE * 6, BITSIZE * row, WHITE)
        if selected and state.blink >= state.fps:
            mask = pygame.Rect(BITSIZE * 6, BITSIZE * (row - 1), BITSIZE * width, BITSIZE)
            pygame.draw.rect(surface, WHITE, mask)
            draw_text(surface, font, text, BITSIZE * 6, BITSIZE * row, BLACK)

    draw_text(surface, font, "5   START GAME", BITSIZE * 6, BITSIZE * 19, WHITE)
    draw_text(surface, font, "000000      000000      000000", BITSIZE, BITSIZE * 2, YELLOW)
    draw_text(surface, font, "HI", BITSIZE * 15, BITSIZE, BLUE)


def _draw_lives(
    surface: pygame.Surface,
    font: pygame.font.Font,
    sprites: SpriteSet,
    lives: int,
    column: int,
) -> None:
    mask = pygame.Rect(BITSIZE * column, LIVES_MASK_Y, LIVES_MASK_WIDTH, BITSIZE)
    pygame.draw.rect(surface, WHITE, mask)
    draw_text(surface, font, str(lives), BITSIZE * (column - 1), BITSIZE, WHITE)
    surface.blit(sprites.life_icon, (BITSIZE * column, LIVES_MASK_Y))


def draw_score(
    state: GameState, surface: pygame.Surface, font: pygame.font.Font, sprites: SpriteSet
) -> None:
    """Draw lives, both scores and the higher of the two during a game."""
    first, second = state.players[0], state.players[1]
    high = max(first.score, second.score)

    if state.player_selection == 2:
        _draw_lives(surface, font, sprites, second.lives, 21)

    draw_text(surface, font, HEADER, BITSIZE * 2, BITSIZE, WHITE)
    _draw_lives(surface, font, sprites, first.lives, 9)
    draw_text(surface, font, "HI", BITSIZE * 15, BITSIZE, BLUE)

    for score, column in ((first.score, 1), (high, 13), (second.score, 25)):
        draw_text(surface, font, padded_score(score), BITSIZE * column, BITSIZE * 2, YELLOW)


def _prepare(state: GameState) -> None:
    if not state.platforms:
        state.platforms = initialize_platforms()
    if not state.stage:
        build_stage(state)


def _play_frame(
    state: GameState,
    keys: Keys,
    surface: pygame.Surface,
    font: pygame.font.Font,
    sprites: SpriteSet,
    rng: random.Random,
    now: float,
) -> None:
    _prepare(state)

    detect_shot(state.shots, state.player(), keys, rng)
    move_player(state.player(), keys, state.platforms)

    draw_score(state, surface, font, sprites)
    update_shots(state.shots, state.player())
    wrap_player(state.player())
    appear_powerup(state, rng)
    collide_powerup(state)
    full_fuel(state)
    fill_fuel(state)
    collide_with_platforms(state.player(), state.platforms)
    mask_follow_player(state)
    update_enemies(state, rng, surface, sprites)
    update_death(state.player())

    land(state)
    update_fuel(state)
    lift_off(state)
    take_pieces(state)
    drop_pieces(state)
    in_position(state)
    player_entered(state)

    draw_stage(state, surface, sprites)
    draw_ship(state, surface, sprites, now)
    draw_powerup(state.powerup, surface, sprites)
    draw_shots(state.shots, surface)
    draw_player(state.player(), surface, sprites)

    handle_save_keys(state, keys)


def run_frame(
    state: GameState,
    keys: Keys,
    surface: pygame.Surface,
    font: pygame.font.Font,
    sprites: SpriteSet,
    rng: random.Random,
    now: float,
) -> None:
    """Run and draw one frame of whatever screen the game is on.

    ``now`` is the current time in milliseconds.
    """
    if state.mode == Mode.MENU:
        draw_introduction(state, surface, font)
        game_selection(state, keys)
    elif state.mode in (Mode.ONE_PLAYER, Mode.TWO_PLAYERS):
        _play_frame(state, keys, surface, font, sprites, rng, now)
    else:
        draw_text(surface, font, "    JOYSTICK IS NOT AVAILIBLE   ", 0, BITSIZE * 11, WHITE)
        draw_text(surface, font, "      PRESS SPACE TO RETURN     ", 0, BITSIZE * 13, WHITE)
        not_available(state, keys)