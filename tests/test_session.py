import math

import pytest

from craftorio.controls import Controls
from craftorio.entities import Player
from craftorio.enums import BlockType, Season
from craftorio.gametime import GameTime
from craftorio.geometry import Vec3, Vector3i
from craftorio.saves import SaveManager
from craftorio.session import (
    LIGHTGRAY,
    SKY_DAY,
    SKY_NIGHT,
    SUN_RADIUS,
    GameSession,
    season_color,
    sky_color,
    sun_position,
)
from craftorio.settings import SettingsData


def _block_at(session, x, y, z):
    cell = Vector3i(x, y, z)
    for chunk in session.blocks.chunks.values():
        for block in chunk.blocks:
            if block.position.floored() == cell:
                return block
    return None


@pytest.fixture
def saves(tmp_path):
    manager = SaveManager(tmp_path / "saves")
    manager.create_world("w", 1)
    return manager


@pytest.fixture
def session(saves):
    game = GameSession(SettingsData(), "w", saves)
    game.start()
    return game


def test_start_builds_terrain_layers(session):
    assert _block_at(session, 0, -1, 0).block_type is BlockType.GRASS
    assert _block_at(session, 7, -2, 7).block_type is BlockType.DIRT
    assert _block_at(session, 3, -6, 3).block_type is BlockType.STONE
    assert _block_at(session, 0, -7, 0) is None


def test_start_places_tree(session):
    for y in range(5):
        assert _block_at(session, 4, y, 4).block_type is BlockType.WOOD
    assert _block_at(session, 4, 5, 4).block_type is BlockType.LEAVES


def test_update_before_start_only_advances_time(saves):
    game = GameSession(SettingsData(), "w", saves)
    game.update(0.5, Controls())
    assert game.player is None
    assert game.time.real_time == pytest.approx(0.5)


def test_player_stands_on_grass(session):
    session.update(0.016, Controls())
    assert session.player.is_on_ground
    assert session.player.position.y == 0.0


def test_hotbar_and_inventory_follow_controls(session):
    session.update(0.016, Controls(digits_down=frozenset({3}), inventory_toggle=True))
    assert session.hotbar.selected_slot == 2
    assert session.inventory.is_open


def test_mining_looking_down_breaks_grass(session):
    controls = Controls(use_left_hand=True)
    for _ in range(100):
        session.update(0.02, controls, (0.0, 1000.0))
    assert _block_at(session, 0, -1, 0) is None
    assert session.camera.pitch < 0


def test_visible_blocks_within_render_distance(session):
    visible = session.visible_blocks()
    limit = session.settings.video.render_distance
    assert visible
    assert all(b.position.distance_to(session.player.position) <= limit for b in visible)


def test_close_saves_player_and_time(session, saves):
    session.player.position = Vec3(1.0, 2.0, 3.0)
    session.time.game_time = 120
    session.close()

    player = Player()
    clock = GameTime()
    saves.load_world("w", player, clock)
    assert player.position == Vec3(1.0, 2.0, 3.0)
    assert clock.game_time == 120


def test_context_manager_starts_and_saves(saves):
    with GameSession(SettingsData(), "w", saves) as game:
        assert game.player is not None
        game.player.position = Vec3(2.0, 0.0, 5.0)

    player = Player()
    saves.load_player("w", player)
    assert player.position == Vec3(2.0, 0.0, 5.0)


def test_start_loads_saved_player(saves):
    stored = Player()
    stored.position = Vec3(3.0, 4.0, 5.0)
    saves.save_player("w", stored)
    game = GameSession(SettingsData(), "w", saves)
    game.start()
    assert game.player.position == Vec3(3.0, 4.0, 5.0)


@pytest.mark.parametrize("season", list(Season))
@pytest.mark.parametrize("hour", [6.0, 9.0, 12.0, 15.0, 18.0])
def test_sun_stays_on_sphere(season, hour):
    origin = Vec3(10.0, 2.0, -4.0)
    assert sun_position(origin, hour, season).distance_to(origin) == pytest.approx(SUN_RADIUS)


def test_sunrise_in_spring_is_on_horizon():
    sun = sun_position(Vec3(), 6.0, Season.SPRING)
    assert sun.x == pytest.approx(-SUN_RADIUS)
    assert sun.y == pytest.approx(0.0, abs=1e-9)
    assert math.isclose(sun.z, 0.0, abs_tol=1e-9)


def test_summer_sun_is_higher_than_winter_sun():
    origin = Vec3()
    summer = sun_position(origin, 12.0, Season.SUMMER)
    spring = sun_position(origin, 12.0, Season.SPRING)
    winter = sun_position(origin, 12.0, Season.WINTER)
    assert summer.y > spring.y > winter.y


def test_season_colors():
    assert season_color(Season.SPRING) == (250, 50, 100, 255)
    assert season_color(Season.SUMMER) == (20, 170, 0, 255)
    assert season_color(Season.AUTUMN) == (255, 165, 0, 255)
    assert season_color(Season.WINTER) == (160, 245, 250, 255)
    assert LIGHTGRAY not in {season_color(s) for s in Season}


@pytest.mark.parametrize("hour,expected", [
    (6.0, SKY_DAY),
    (12.0, SKY_DAY),
    (18.0, SKY_DAY),
    (5.9, SKY_NIGHT),
    (18.5, SKY_NIGHT),
])
def test_sky_color(hour, expected):
    assert sky_color(hour) == expected