"""The game window and its main loop."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

import pygame

from .interface import TEXT_SIZE, run_frame
from .player import initialize_players
from .scenery import build_stage, initialize_platforms
from .shoot import initialize_shots
from .sprites import DEFAULT_SHEET, SpriteSet
from .state import (
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameState,
    Keys,
)

DEFAULT_FONT = Path("recursos/font/zx-spectrum-7/zx_spectrum-7.ttf")

_SPECIAL_KEYS = {
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_UP: KEY_UP,
    pygame.K_SPACE: KEY_SPACE,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def _key_name(key: int) -> str | None:
    """The name the game uses for a pygame key, or None for keys it ignores."""
    if key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[key]
    if 33 <= key < 127:
        return chr(key).upper()
    return None


def _held_keys() -> set[str]:
    pressed = pygame.key.get_pressed()
    return {name for key, name in _SPECIAL_KEYS.items() if pressed[key]}


def _load_font(path: Path) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), TEXT_SIZE)
    except (FileNotFoundError, OSError):
        return pygame.font.Font(None, TEXT_SIZE)


def _new_game() -> GameState:
    state = GameState()
    state.platforms = initialize_platforms()
    initialize_players(state)
    initialize_shots(state.shots)
    build_stage(state)
    return state


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="jetpac", description="Play Jetpac.")
    parser.add_argument("--sheet", type=Path, default=DEFAULT_SHEET, help="sprite sheet image")
    parser.add_argument("--font", type=Path, default=DEFAULT_FONT, help="font file")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until it is closed or escape is pressed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Jetpac")
        pygame.mouse.set_visible(True)
        sprites = SpriteSet.load(args.sheet)
        font = _load_font(args.font)
        state = _new_game()
        rng = random.Random()
        clock = pygame.time.Clock()

        frame = 0
        while args.frames is None or frame < args.frames:
            down: set[str] = set()
            closed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    closed = True
                elif event.type == pygame.KEYDOWN:
                    name = _key_name(event.key)
                    if name is not None:
                        down.add(name)
            keys = Keys(_held_keys(), down)
            if closed or keys.is_down(KEY_ESCAPE):
                break

            screen.fill((0, 0, 0))
            run_frame(state, keys, screen, font, sprites, rng, pygame.time.get_ticks())
            pygame.display.flip()
            clock.tick(state.fps)
            frame += 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())