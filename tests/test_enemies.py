import random

import pygame
import pytest

from jetpac.enemies import (
    ENEMY_COLORS,
    EnemyList,
    collide,
    collides_with_platform,
    draw_enemy,
    enemy_behaviour,
    enemy_bouncing,
    enemy_bullet_collision,
    enemy_exploding,
    enemy_following,
    enemy_player_collision,
    enemy_type_and_points,
    generate_enemies,
    hits_screen_border,
    move_enemy,
    new_enemy,
    select_color,
    side_collision,
    update_enemies,
    wrap_enemy,
)
from jetpac.sprites import SpriteSet
from jetpac.state import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Enemy,
    GameState,
    Mode,
    Platform,
    Player,
    PlayerShot,
    Vec2,
)


def make_enemy(x=100.0, y=100.0, **kwargs):
    return Enemy(pos=Vec2(x, y), **kwargs)


def alive_player():
    return Player(alive=True)


@pytest.fixture
def sprites():
    return SpriteSet.from_sheet(pygame.Surface((1000, 1000)))


@pytest.fixture
def surface():
    return pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))


@pytest.mark.parametrize(
    "level, expected",
    [
        (1, (1, 25)), (2, (2, 80)), (3, (3, 40)), (4, (4, 55)),
        (5, (5, 50)), (6, (6, 60)), (7, (7, 25)), (8, (8, 50)),
        (9, (1, 25)), (10, (2, 80)), (11, (3, 40)), (12, (4, 55)),
        (13, (5, 50)), (14, (6, 60)), (15, (7, 25)), (16, (8, 50)),
    ],
)
def test_enemy_type_and_points(level, expected):
    assert enemy_type_and_points(level) == expected


@pytest.mark.parametrize("level", [0, 17, -1])
def test_enemy_type_and_points_rejects_unknown_levels(level):
    with pytest.raises(ValueError):
        enemy_type_and_points(level)


def test_select_color_uses_only_the_four_colors():
    rng = random.Random(1)
    seen = {select_color(rng).rgb() for _ in range(200)}
    assert seen == set(ENEMY_COLORS)


def test_new_enemy_starts_off_the_left_edge():
    rng = random.Random(7)
    for _ in range(50):
        enemy = new_enemy(3, rng)
        assert enemy.pos.x == -50
        assert 0 <= enemy.pos.y < WINDOW_HEIGHT - 250 + 100
        assert (enemy.type, enemy.points) == enemy_type_and_points(3)
        assert enemy.alive
        assert enemy.death_counter == 0
        assert enemy.hori in (0, 1)
        assert enemy.vert in (0, 1, 2)


def test_new_enemy_is_reproducible_from_the_seed():
    first = new_enemy(5, random.Random(42))
    second = new_enemy(5, random.Random(42))
    assert first.pos.x == -50
    assert (first.type, first.points) == (5, 50)
    assert first.color.rgb() in ENEMY_COLORS
    assert first == second


def test_enemy_list_inserts_at_the_front():
    enemies = EnemyList()
    first, second = make_enemy(1), make_enemy(2)
    enemies.insert(first)
    enemies.insert(second)
    assert list(enemies) == [second, first]
    assert len(enemies) == 2


def test_remove_first_dead_removes_dead_head():
    dead, alive = make_enemy(1, alive=False), make_enemy(2)
    enemies = EnemyList([dead, alive])
    assert enemies.remove_first_dead() is dead
    assert list(enemies) == [alive]


def test_remove_first_dead_removes_only_one():
    a, b, c = make_enemy(1), make_enemy(2, alive=False), make_enemy(3, alive=False)
    enemies = EnemyList([a, b, c])
    assert enemies.remove_first_dead() is b
    assert list(enemies) == [a, c]


def test_remove_first_dead_with_all_alive():
    enemies = EnemyList([make_enemy(1), make_enemy(2)])
    assert enemies.remove_first_dead() is None
    assert len(enemies) == 2


def test_kill_all():
    enemies = EnemyList([make_enemy(1), make_enemy(2)])
    enemies.kill_all()
    assert not any(enemy.alive for enemy in enemies)


def test_describe_lists_every_enemy():
    enemies = EnemyList([make_enemy(1.5, 2.0, type=3, points=40, hori=1, vert=2, alive=True)])
    assert enemies.describe() == "1.500000,\t2.000000,\t3,\t40\t1\t2\t1\n\n"


def test_describe_empty_list():
    assert EnemyList().describe() == "\n"


def test_generate_enemies_spawns_on_the_second_boundary():
    state = GameState()
    generate_enemies(state, random.Random(0))
    assert len(state.enemies) == 1
    assert state.frame_count == 1
    generate_enemies(state, random.Random(0))
    assert len(state.enemies) == 1
    assert state.frame_count == 2


def test_generate_enemies_respects_the_limit():
    state = GameState(enemies=[make_enemy(i) for i in range(5)])
    generate_enemies(state, random.Random(0))
    assert len(state.enemies) == 5
    state.difficulty = 1
    state.frame_count = state.fps
    generate_enemies(state, random.Random(0))
    assert len(state.enemies) == 6


def test_move_enemy_slow_vertical_types():
    enemy = make_enemy(100, 200, type=1, hori=1, vert=1)
    move_enemy(enemy, 5)
    assert enemy.pos.x == 105
    assert enemy.pos.y == 200.5


def test_move_enemy_fast_vertical_types():
    enemy = make_enemy(100, 200, type=2, hori=0, vert=2)
    move_enemy(enemy, 5)
    assert (enemy.pos.x, enemy.pos.y) == (95, 195)


def test_move_enemy_without_vertical_heading():
    enemy = make_enemy(100, 200, type=5, hori=1, vert=0)
    move_enemy(enemy, 5)
    assert (enemy.pos.x, enemy.pos.y) == (105, 200)


@pytest.mark.parametrize(
    "x, expected",
    [(-71, WINDOW_WIDTH), (WINDOW_WIDTH + 51, 0), (-10, WINDOW_WIDTH), (-30, WINDOW_WIDTH), (-40, -40), (-3, -3)],
)
def test_wrap_enemy(x, expected):
    enemy = make_enemy(x)
    wrap_enemy(enemy)
    assert enemy.pos.x == expected


def test_collide_overlapping_corners():
    assert collide(0, 0, 10, 10, 5, 5, 10, 10)
    assert collide(5, 5, 10, 10, 0, 0, 10, 10)


def test_collide_apart():
    assert not collide(0, 0, 10, 10, 20, 20, 10, 10)


def test_collide_only_checks_corners_of_the_first():
    assert not collide(0, 0, 100, 100, 10, 10, 5, 5)
    assert collide(10, 10, 5, 5, 0, 0, 100, 100)


def test_bullet_kills_enemy_and_scores():
    enemy = make_enemy(100, 100, points=25)
    player = alive_player()
    player.count_shoots = 1
    shot = PlayerShot(px=90, px2=130, py=120, second_px=-2000, direction=1, width=40, shooting=True)
    enemy_bullet_collision(enemy, [shot], player)
    assert not enemy.alive
    assert player.score == 25


def test_bullet_ignored_beyond_count_shoots():
    enemy = make_enemy(100, 100, points=25)
    player = alive_player()
    shot = PlayerShot(px=90, px2=130, py=120, second_px=-2000, direction=1, width=40, shooting=True)
    enemy_bullet_collision(enemy, [shot], player)
    assert enemy.alive
    assert player.score == 0


def test_player_collision_costs_a_life_and_kills_everything():
    other = make_enemy(10, 10)
    enemy = make_enemy(410, 410)
    state = GameState(mode=Mode.ONE_PLAYER, enemies=EnemyList([enemy, other]))
    state.players[0].alive = True
    assert enemy_player_collision(state, enemy)
    assert state.players[0].lives == 3
    assert not state.players[0].alive
    assert not any(e.alive for e in state.enemies)
    assert state.mode == Mode.ONE_PLAYER


def test_player_collision_without_contact():
    enemy = make_enemy(10, 10)
    state = GameState(mode=Mode.ONE_PLAYER, enemies=EnemyList([enemy]))
    state.players[0].alive = True
    assert not enemy_player_collision(state, enemy)
    assert enemy.alive
    assert state.players[0].lives == 4


def test_last_life_returns_to_menu():
    enemy = make_enemy(410, 410)
    state = GameState(mode=Mode.ONE_PLAYER, enemies=EnemyList([enemy]))
    state.players[0].alive = True
    state.players[0].lives = 0
    state.ship.level = 5
    enemy_player_collision(state, enemy)
    assert state.mode == Mode.MENU
    assert state.players[0].lives == 4
    assert state.ship.level == 1


def test_two_players_take_turns():
    enemy = make_enemy(410, 410)
    state = GameState(mode=Mode.TWO_PLAYERS, enemies=EnemyList([enemy]))
    state.players[0].alive = True
    enemy_player_collision(state, enemy)
    assert state.current_player == 1
    assert state.mode == Mode.TWO_PLAYERS


def test_sides_of_platform():
    assert side_collision(make_enemy(92, 100), Platform(140, 90, 300, 200)) == 1
    assert side_collision(make_enemy(92, 100), Platform(0, 90, 95, 200)) == 2
    assert side_collision(make_enemy(100, 92), Platform(0, 140, 300, 200)) == 3
    assert side_collision(make_enemy(100, 92), Platform(0, 50, 300, 95)) == 4
    assert side_collision(make_enemy(100, 92), Platform(400, 400, 500, 450)) == 0


def test_collides_with_platform():
    platform = Platform(140, 90, 300, 200)
    assert collides_with_platform(make_enemy(92, 100), platform)
    assert not collides_with_platform(make_enemy(500, 500), platform)


@pytest.mark.parametrize("y, expected", [(72, True), (502, True), (300, False)])
def test_hits_screen_border(y, expected):
    assert hits_screen_border(make_enemy(100, y)) is expected


def test_enemy_exploding_on_platform():
    enemy = make_enemy(92, 100, type=1)
    enemy_exploding(enemy, [Platform(140, 90, 300, 200)])
    assert not enemy.alive


def test_enemy_exploding_in_open_space():
    enemy = make_enemy(100, 300, type=1)
    enemy_exploding(enemy, [Platform(400, 100, 500, 120)])
    assert enemy.alive


def test_enemy_bouncing_off_platform_and_top():
    enemy = make_enemy(92, 100, hori=1)
    enemy_bouncing(enemy, [Platform(140, 90, 300, 200)])
    assert enemy.hori == 0
    top = make_enemy(300, 70, vert=2)
    enemy_bouncing(top, [])
    assert top.vert == 1
    bottom = make_enemy(300, 510, vert=1)
    enemy_bouncing(bottom, [])
    assert bottom.vert == 2


def test_enemy_following_heads_to_player():
    player = alive_player()
    enemy = make_enemy(player.px - 100, player.py - 100, type=5)
    enemy_following(enemy, player)
    assert (enemy.hori, enemy.vert) == (1, 1)
    level = make_enemy(player.px + 100, player.py, type=5, vert=2)
    enemy_following(level, player)
    assert (level.hori, level.vert) == (0, 0)


def test_fighter_keeps_horizontal_heading():
    player = alive_player()
    enemy = make_enemy(player.px - 100, player.py + 100, type=4, hori=0)
    enemy_following(enemy, player)
    assert (enemy.hori, enemy.vert) == (0, 2)


def test_behaviour_follows_for_ufo():
    player = alive_player()
    enemy = make_enemy(player.px + 100, player.py + 100, type=5, hori=1, vert=1)
    enemy_behaviour(enemy, player, [])
    assert (enemy.hori, enemy.vert) == (0, 2)


def test_dead_enemy_explosion_runs_out(surface, sprites):
    state = GameState()
    enemy = make_enemy(alive=False)
    for _ in range(20):
        draw_enemy(state, enemy, surface, sprites)
    assert enemy.death_counter == 11
    assert state.enemy_animation_index == 20


def test_live_enemy_drawn_on_its_color(surface, sprites):
    state = GameState()
    enemy = make_enemy(100, 100, type=5, color=select_color(random.Random(3)))
    draw_enemy(state, enemy, surface, sprites)
    assert state.enemy_animation_index == 1
    assert enemy.death_counter == 0
    # The blank sheet gives transparent-black sprites; the backdrop colour stays visible.
    assert surface.get_at((101, 101))[:3] in {(0, 0, 0), enemy.color.rgb()}


def test_update_enemies_spawns_and_draws(surface, sprites):
    state = GameState(level=1)
    update_enemies(state, random.Random(0), surface, sprites)
    assert len(state.enemies) == 1
    assert state.frame_count == 1
    assert state.enemy_animation_index == 1


def test_update_enemies_clears_away_the_dead(surface, sprites):
    dead = make_enemy(300, 300, alive=False)
    alive = make_enemy(300, 300, type=5)
    state = GameState(frame_count=1, enemies=[alive, dead])
    update_enemies(state, random.Random(0), surface, sprites)
    assert list(state.enemies) == [alive]
    assert dead.death_counter == 1