"""World saves on disk: one directory of JSON files per world."""

from __future__ import annotations

import json
import logging
import shutil
import time as _clock
from pathlib import Path
from typing import Any

from craftorio.entities import Player
from craftorio.gametime import GameTime
from craftorio.geometry import Vec3

log = logging.getLogger(__name__)

SAVE_ROOT = Path("saves")
META_FILE = "meta.json"
WORLD_FILE = "world.json"
PLAYER_FILE = "player.json"
SAVE_VERSION = 1
DEFAULT_MP = 50


class WorldExistsError(FileExistsError):
    """A world with this name already exists."""


class WorldNotFoundError(FileNotFoundError):
    """No world with this name exists."""


def _write_json(path: Path, data: dict[str, Any]) -> None:
    path.write_text(json.dumps(data, indent=4), encoding="utf-8")


def _read_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


class SaveManager:
    """Creates, lists, deletes, saves and loads worlds under ``root``."""

    def __init__(self, root: str | Path = SAVE_ROOT) -> None:
        self.root = Path(root)

    def _world_dir(self, name: str) -> Path:
        return self.root / name

    def create_world(self, name: str, seed: int) -> Path:
        """Create a new world directory with its initial files."""
        log.info("Creating world %s", name)
        path = self._world_dir(name)
        if path.exists():
            raise WorldExistsError(f"a world named {name!r} already exists")
        path.mkdir(parents=True)

        _write_json(path / META_FILE, {
            "worldName": name,
            "createdAt": int(_clock.time()),
            "version": SAVE_VERSION,
            "seed": seed,
        })
        _write_json(path / WORLD_FILE, {
            "name": name,
            "seed": seed,
            "difficulty": 0,
            "time": 0,
        })
        _write_json(path / PLAYER_FILE, {
            "position": {"x": 0, "y": 0, "z": 0},
            "hp": 100,
            "mp": DEFAULT_MP,
        })
        log.info("World %s created", name)
        return path

    def list_worlds(self) -> list[str]:
        """Names of the directories under the root that hold a meta file."""
        if not self.root.exists():
            return []
        worlds = [
            entry.name
            for entry in self.root.iterdir()
            if entry.is_dir() and (entry / META_FILE).exists()
        ]
        log.info("Listed %d worlds", len(worlds))
        return worlds

    def delete_world(self, name: str) -> None:
        """Remove a world and everything in it."""
        log.info("Deleting world %s", name)
        path = self._world_dir(name)
        if not path.exists():
            raise WorldNotFoundError(f"no world named {name!r}")
        shutil.rmtree(path)
        log.info("World %s deleted", name)

    def save_player(self, world_name: str, player: Player) -> None:
        """Write the player's position and health."""
        position = player.position
        _write_json(self._world_dir(world_name) / PLAYER_FILE, {
            "position": {"x": position.x, "y": position.y, "z": position.z},
            "hp": player.health,
            "mp": DEFAULT_MP,
        })
        log.info("Player saved")

    def load_player(self, world_name: str, player: Player) -> None:
        """Restore the player's position; a missing file leaves the player unchanged."""
        path = self._world_dir(world_name) / PLAYER_FILE
        if not path.exists():
            return
        position = _read_json(path).get("position", {})
        player.position = Vec3(
            float(position.get("x", 0.0)),
            float(position.get("y", 0.0)),
            float(position.get("z", 0.0)),
        )
        log.info("Player loaded")

    def save_time(self, world_name: str, time: GameTime) -> None:
        """Write the in-game time; the world file holds only the time afterwards."""
        _write_json(self._world_dir(world_name) / WORLD_FILE, {"time": time.game_time})
        log.info("Time saved")

    def load_time(self, world_name: str, time: GameTime) -> None:
        """Restore the in-game time; a missing file leaves the clock unchanged."""
        path = self._world_dir(world_name) / WORLD_FILE
        if not path.exists():
            return
        time.game_time = int(_read_json(path).get("time", 0))
        log.info("Time loaded")

    def save_world(self, world_name: str, player: Player, time: GameTime) -> None:
        """Save both the player and the clock."""
        log.debug("Saving world %s", world_name)
        self.save_player(world_name, player)
        self.save_time(world_name, time)

    def load_world(self, world_name: str, player: Player, time: GameTime) -> None:
        """Load both the player and the clock."""
        log.debug("Loading world %s", world_name)
        self.load_player(world_name, player)
        self.load_time(world_name, time)