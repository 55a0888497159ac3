import pygame
import pytest

from jetpac.player import GROUND_WIDTH, START_X, START_Y
from jetpac.scenery import (
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
    update_ship,
)
from jetpac.sprites import SpriteSet
from jetpac.state import Enemy, GameState, Ship


@pytest.fixture
def state():
    game = GameState()
    game.platforms = initialize_platforms()
    build_stage(game)
    return game


def _sprites(fill=None):
    sheet = pygame.Surface((900, 800), pygame.SRCALPHA)
    if fill is not None:
        sheet.fill(fill)
    return SpriteSet.from_sheet(sheet)


def test_initialize_platforms_matches_layout():
    platforms = initialize_platforms()
    assert [(p.px, p.py) for p in platforms] == [(24 * 5, 24 * 10), (24 * 16, 24 * 13), (24 * 25, 24 * 7)]
    assert all(p.py2 - p.py == 24 for p in platforms)
    assert all(p.px2 > p.px for p in platforms)


def test_build_stage_items_are_indexed_by_slot(state):
    assert len(state.stage) == 11
    assert [item.index for item in state.stage] == list(range(11))
    assert state.stage[9].position.x == state.player().px
    assert state.stage[4].position.x == state.ship.px
    assert state.stage[3].width == 768


def test_fill_fuel_gauge_grows_with_fuel(state):
    heights = []
    for fill in range(7):
        state.ship.fill = fill
        fill_fuel(state)
        heights.append(state.stage[10].height)
    assert heights[0] == 0
    assert heights[-1] == -147
    assert heights == sorted(heights, reverse=True)


def test_full_fuel_shows_flame_only_in_flight(state):
    state.ship.fill = 6
    state.ship.py = 250
    full_fuel(state)
    assert state.stage[8].height == 45
    state.ship.py = 353
    full_fuel(state)
    assert state.stage[8].height == 0


def test_player_entered_full_rocket(state):
    state.enemies = [Enemy(), Enemy()]
    state.ship.fill = 6
    player = state.player()
    player.px = state.ship.px + 5
    player.px2 = player.px + GROUND_WIDTH
    player.py = state.ship.py + 10
    player_entered(state)
    assert state.ship.player_in
    assert player.py == 800
    assert not any(enemy.alive for enemy in state.enemies)


def test_player_entered_needs_full_tank(state):
    state.ship.fill = 5
    player = state.player()
    player.px = state.ship.px + 5
    player.px2 = player.px + GROUND_WIDTH
    player.py = state.ship.py + 10
    player_entered(state)
    assert not state.ship.player_in
    assert player.py == state.ship.py + 10


def test_lift_off_moves_rocket_up(state):
    state.ship.fill = 6
    state.ship.player_in = True
    start = state.ship.py
    lift_off(state)
    assert state.ship.py == start - 2
    assert state.stage[4].position.y == state.ship.py + 1


def test_lift_off_at_top_advances_level(state):
    state.ship.py = 5
    state.ship.fill = 6
    lift_off(state)
    assert state.ship.stop
    assert state.ship.level == 2
    assert state.ship.fill == 0
    assert state.level == 2


def test_lift_off_after_last_level_raises_difficulty(state):
    state.ship.py = 5
    state.level = 16
    lift_off(state)
    assert state.level == 1
    assert state.difficulty == 1


def test_land_in_position_descends_and_resets_parts(state):
    ship = state.ship
    ship.stop = True
    ship.in_position = True
    ship.py = 100
    ship.player_in = True
    ship.first_part = True
    land(state)
    assert ship.py == 102
    assert not ship.player_in
    assert not ship.first_part


def test_land_in_pieces_resets_part_positions(state):
    ship = state.ship
    ship.stop = True
    ship.in_position = False
    ship.head_x = ship.body_x = 1
    land(state)
    fresh = Ship()
    assert (ship.head_x, ship.head_y, ship.body_x, ship.body_y) == (
        fresh.head_x, fresh.head_y, fresh.body_x, fresh.body_y,
    )
    assert ship.py == 353
    assert not ship.stop


def test_land_below_ground_stops_and_restarts_player(state):
    ship = state.ship
    ship.stop = True
    ship.in_position = True
    ship.py = 353
    state.player().alive = False
    land(state)
    assert ship.py == 353
    assert not ship.stop
    assert state.player().alive
    assert (state.player().px, state.player().py) == (START_X, START_Y)


def test_mask_follow_player(state):
    player = state.player()
    player.alive = False
    mask_follow_player(state)
    assert (state.stage[9].width, state.stage[9].height) == (0, 0)
    player.alive = True
    player.in_ground = True
    mask_follow_player(state)
    assert state.stage[9].width == GROUND_WIDTH - 3
    assert state.stage[9].position.x == player.px


def test_take_pieces_carries_body(state):
    ship = state.ship
    ship.in_position = False
    player = state.player()
    player.px = 24 * 16 + 10
    player.py = ship.body_y - 20
    take_pieces(state)
    assert ship.body_taken
    assert ship.body_x == player.px + 20
    assert ship.body_y == player.py + 20
    assert state.stage[4].position.x == player.px


def test_take_pieces_ignored_when_assembled(state):
    ship = state.ship
    ship.in_position = True
    player = state.player()
    player.px = 24 * 16 + 10
    player.py = ship.body_y - 20
    take_pieces(state)
    assert not ship.body_taken


def test_drop_pieces_body_snaps_over_rocket(state):
    ship = state.ship
    ship.body_x = ship.px + 3
    ship.body_y = ship.py
    ship.body_taken = True
    drop_pieces(state)
    assert ship.body_x == ship.px
    assert not ship.body_taken
    assert ship.first_part and ship.second_part
    assert ship.body_y == ship.py + 2


def test_drop_pieces_head_settles_on_top(state):
    ship = state.ship
    ship.head_x = ship.px
    ship.head_y = ship.py + 1
    drop_pieces(state)
    assert ship.head_y == ship.py
    assert state.stage[7].height == -147


def test_in_position_moves_backdrops_with_parts(state):
    ship = state.ship
    ship.in_position = False
    in_position(state)
    assert (state.stage[5].position.x, state.stage[5].position.y) == (ship.head_x, ship.head_y)
    assert (state.stage[4].position.x, state.stage[4].position.y) == (ship.body_x, ship.body_y)


def test_update_ship_assembly_level_and_sprite(state):
    state.ship.level = 1
    assert update_ship(state, 0.0) is None
    assert not state.ship.in_position
    assert state.ship.sprite == 0
    state.ship.level = 6
    update_ship(state, 0.0)
    assert state.ship.in_position
    assert state.ship.sprite == 1
    assert state.stage[7].height == -147


def test_update_ship_combustion_alternates(state):
    state.ship.fill = 6
    state.ship.py = 200
    state.ship.time = 0.0
    assert update_ship(state, 1000.0) == 0
    assert state.ship.time == 1100.0
    assert update_ship(state, 1060.0) == 1


def test_draw_stage_paints_platforms_and_ground(state):
    surface = pygame.Surface((768, 576))
    draw_stage(state, surface, _sprites())
    assert surface.get_at((24 * 5 + 10, 24 * 10 + 10))[:3] == (7, 127, 15)
    assert surface.get_at((10, 510))[:3] == (149, 145, 13)
    assert surface.get_at((state.ship.px + 5, state.ship.py + 5))[:3] == (255, 255, 255)


def test_draw_ship_assembled_draws_head_at_rocket(state):
    state.ship.level = 2
    surface = pygame.Surface((768, 576))
    draw_ship(state, surface, _sprites((10, 20, 30, 255)), 0.0)
    assert surface.get_at((state.ship.px + 5, state.ship.py + 5))[:3] == (10, 20, 30)
    assert state.ship.in_position