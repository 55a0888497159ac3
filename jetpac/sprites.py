"""Sprites cut out of the game's sprite sheet."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

DEFAULT_SHEET = Path("recursos/sprites/jetpac_spritesheet.png")


@dataclass
class SpriteSet:
    """Every image the game draws."""

    ground_left: list[pygame.Surface]
    ground_right: list[pygame.Surface]
    air_left: list[pygame.Surface]
    air_right: list[pygame.Surface]
    explosion: list[pygame.Surface]
    asteroid_left: pygame.Surface
    asteroid_left_alt: pygame.Surface
    asteroid_right: pygame.Surface
    asteroid_right_alt: pygame.Surface
    fluff: pygame.Surface
    fluff_alt: pygame.Surface
    bubble: pygame.Surface
    bubble_alt: pygame.Surface
    fighter_right: pygame.Surface
    fighter_left: pygame.Surface
    ufo: pygame.Surface
    cross: pygame.Surface
    falcon_right: pygame.Surface
    falcon_left: pygame.Surface
    pou: pygame.Surface
    ship_head: list[pygame.Surface]
    ship_body: list[pygame.Surface]
    ship_propeller: list[pygame.Surface]
    combustion: list[pygame.Surface]
    powerups: list[pygame.Surface]
    platform: list[pygame.Surface]
    life_icon: pygame.Surface

    @classmethod
    def from_sheet(cls, sheet: pygame.Surface) -> SpriteSet:
        """Cut all sprites from a sheet; raises ValueError if the sheet is too small."""

        def cut(x: int, y: int, width: int, height: int) -> pygame.Surface:
            return sheet.subsurface(pygame.Rect(x, y, width, height))

        def enemy(x: int, y: int) -> pygame.Surface:
            return cut(x, y, 50, 50)

        ground_left = [cut(x, 102, 42, 66) for x in (69, 135, 207, 276)]
        # Only the first frame of these animations is ever shown.
        ground_right = [cut(75, 195, 42, 66)] * 4
        air_left = [cut(576, 102, 48, 72)] * 4
        air_right = [cut(576, 186, 48, 72)] * 4
        explosion = [cut(414, y, 72, 48) for y in (219, 165, 102)]

        ship_columns = (239, 332, 461, 587)
        propeller_rows = (558, 558, 561, 558)

        return cls(
            ground_left=ground_left,
            ground_right=ground_right,
            air_left=air_left,
            air_right=air_right,
            explosion=explosion,
            asteroid_left=enemy(743, 265),
            asteroid_left_alt=enemy(815, 265),
            asteroid_right=enemy(743, 320),
            asteroid_right_alt=enemy(815, 320),
            fluff=enemy(746, 375),
            fluff_alt=enemy(818, 375),
            bubble=enemy(746, 437),
            bubble_alt=enemy(818, 437),
            fighter_right=enemy(746, 500),
            fighter_left=enemy(818, 500),
            ufo=enemy(746, 550),
            cross=enemy(746, 610),
            falcon_right=enemy(746, 668),
            falcon_left=enemy(818, 668),
            pou=enemy(746, 735),
            ship_head=[cut(x, 422, 49, 49) for x in ship_columns],
            ship_body=[cut(x, 492, 49, 49) for x in ship_columns],
            ship_propeller=[cut(x, y, 49, 49) for x, y in zip(ship_columns, propeller_rows)],
            combustion=[cut(350, 638, 49, 46), cut(440, 638, 49, 46)],
            powerups=[
                cut(67, 384, 46, 36),
                cut(63, 450, 48, 27),
                cut(63, 507, 48, 24),
                cut(63, 567, 45, 39),
                cut(63, 639, 45, 33),
                cut(69, 321, 49, 33),
            ],
            platform=[cut(x, 321, 24, 24) for x in (396, 435, 474)],
            life_icon=cut(441, 48, 18, 24),
        )

    @classmethod
    def load(cls, path: str | Path = DEFAULT_SHEET) -> SpriteSet:
        return cls.from_sheet(pygame.image.load(str(path)))

    def enemy(self, enemy_type: int, facing_left: bool, alt_frame: bool) -> pygame.Surface:
        """The image of an enemy of the given type, direction and animation frame."""
        if enemy_type == 1:
            if facing_left:
                return self.asteroid_left_alt if alt_frame else self.asteroid_left
            return self.asteroid_right_alt if alt_frame else self.asteroid_right
        if enemy_type == 2:
            return self.fluff_alt if alt_frame else self.fluff
        if enemy_type == 3:
            return self.bubble_alt if alt_frame else self.bubble
        if enemy_type == 4:
            return self.fighter_left if facing_left else self.fighter_right
        if enemy_type == 5:
            return self.ufo
        if enemy_type == 6:
            return self.cross
        if enemy_type == 7:
            return self.falcon_left if facing_left else self.falcon_right
        if enemy_type == 8:
            return self.pou
        raise ValueError(f"unknown enemy type {enemy_type}")