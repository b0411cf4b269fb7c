import json

import pytest

from craftorio.entities import Player
from craftorio.gametime import GameTime
from craftorio.geometry import Vec3
from craftorio.saves import SaveManager, WorldExistsError, WorldNotFoundError


@pytest.fixture
def manager(tmp_path):
    return SaveManager(tmp_path / "saves")


def test_list_without_root_is_empty(manager):
    assert manager.list_worlds() == []


def test_create_and_list(manager):
    manager.create_world("alpha", 42)
    manager.create_world("beta", 7)
    assert sorted(manager.list_worlds()) == ["alpha", "beta"]


def test_create_writes_initial_files(manager):
    path = manager.create_world("alpha", 42)
    meta = json.loads((path / "meta.json").read_text())
    world = json.loads((path / "world.json").read_text())
    player = json.loads((path / "player.json").read_text())
    assert meta["worldName"] == "alpha"
    assert meta["seed"] == 42
    assert meta["version"] == 1
    assert world == {"name": "alpha", "seed": 42, "difficulty": 0, "time": 0}
    assert player == {"position": {"x": 0, "y": 0, "z": 0}, "hp": 100, "mp": 50}


def test_create_twice_raises(manager):
    manager.create_world("alpha", 1)
    with pytest.raises(WorldExistsError):
        manager.create_world("alpha", 2)


def test_list_ignores_directories_without_meta(manager):
    manager.create_world("alpha", 1)
    (manager.root / "junk").mkdir()
    assert manager.list_worlds() == ["alpha"]


def test_delete_world(manager):
    manager.create_world("alpha", 1)
    manager.delete_world("alpha")
    assert manager.list_worlds() == []
    assert not (manager.root / "alpha").exists()


def test_delete_missing_raises(manager):
    with pytest.raises(WorldNotFoundError):
        manager.delete_world("ghost")


def test_player_round_trip(manager):
    manager.create_world("alpha", 1)
    player = Player()
    player.position = Vec3(1.5, 2.0, -3.25)
    manager.save_player("alpha", player)
    restored = Player()
    manager.load_player("alpha", restored)
    assert restored.position == Vec3(1.5, 2.0, -3.25)


def test_load_player_missing_file_leaves_player(manager):
    player = Player()
    player.position = Vec3(4.0, 5.0, 6.0)
    manager.load_player("ghost", player)
    assert player.position == Vec3(4.0, 5.0, 6.0)


def test_time_round_trip(manager):
    manager.create_world("alpha", 1)
    clock = GameTime()
    clock.game_time = 3600
    manager.save_time("alpha", clock)
    restored = GameTime()
    manager.load_time("alpha", restored)
    assert restored.game_time == 3600


def test_new_world_starts_at_time_zero(manager):
    manager.create_world("alpha", 1)
    clock = GameTime()
    clock.update(30.0)
    manager.load_time("alpha", clock)
    assert clock.game_time == 0


def test_world_round_trip(manager):
    manager.create_world("alpha", 1)
    player = Player()
    player.position = Vec3(8.0, 1.0, 2.0)
    player.take_damage(25.0)
    clock = GameTime()
    clock.game_time = 7200
    manager.save_world("alpha", player, clock)

    data = json.loads((manager.root / "alpha" / "player.json").read_text())
    assert data["hp"] == player.health

    restored_player, restored_clock = Player(), GameTime()
    manager.load_world("alpha", restored_player, restored_clock)
    assert restored_player.position == player.position
    assert restored_clock.game_time == clock.game_time