"""A running game on one world: terrain, entities, clock and HUD state."""

from __future__ import annotations

import math
from types import TracebackType

from craftorio.blocks import Block
from craftorio.camera import EYE_HEIGHT, CameraManager
from craftorio.controls import Controls
from craftorio.entities import Player, Zombie
from craftorio.enums import BlockType, Color, Season
from craftorio.gametime import GameTime
from craftorio.geometry import Vec3
from craftorio.lighting import DayNightCycle
from craftorio.saves import SaveManager
from craftorio.settings import SettingsData
from craftorio.structures import Tree
from craftorio.ui import Hotbar, Hud, Inventory
from craftorio.world import BlockManager

SKY_DAY: Color = (0, 121, 241, 255)
SKY_NIGHT: Color = (0, 0, 0, 255)
LIGHTGRAY: Color = (200, 200, 200, 255)

SUN_RADIUS = 300.0
LATITUDE = math.radians(30.0)
NEARBY_RADIUS = 5.0
REACH = 5.0
TERRAIN_SIZE = 8
TREE_SPOT = (4, 0, 4)

_TERRAIN_LAYERS: tuple[tuple[range, BlockType], ...] = (
    (range(-1, -2, -1), BlockType.GRASS),
    (range(-2, -3, -1), BlockType.DIRT),
    (range(-3, -7, -1), BlockType.STONE),
)

_SEASON_COLORS: dict[Season, Color] = {
    Season.SPRING: (250, 50, 100, 255),
    Season.SUMMER: (20, 170, 0, 255),
    Season.AUTUMN: (255, 165, 0, 255),
    Season.WINTER: (160, 245, 250, 255),
}


def sun_position(origin: Vec3, hour: float, season: Season) -> Vec3:
    """Where the sun stands, seen from ``origin``, at ``hour`` in ``season``.

    The sun rises in the east at 06:00, peaks at noon and sets at 18:00;
    summer raises and winter lowers its path.
    """
    day_progress = (hour - 6.0) / 12.0
    if season is Season.SUMMER:
        declination = LATITUDE
    elif season is Season.WINTER:
        declination = -LATITUDE
    else:
        declination = 0.0

    start, end = 3.0 * math.pi / 2.0, math.pi / 2.0
    azimuth = start + (end - start) * day_progress
    elevation = math.sin(day_progress * math.pi) * (math.pi / 4.0) + declination

    return origin + Vec3(
        math.sin(azimuth) * math.cos(elevation) * SUN_RADIUS,
        math.sin(elevation) * SUN_RADIUS,
        math.cos(azimuth) * math.cos(elevation) * SUN_RADIUS,
    )


def season_color(season: Season) -> Color:
    """Colour the season's name is drawn in."""
    return _SEASON_COLORS.get(season, LIGHTGRAY)


def sky_color(hour: float) -> Color:
    """Background colour: blue from 06:00 to 18:00, black otherwise."""
    return SKY_DAY if 6.0 <= hour <= 18.0 else SKY_NIGHT


class GameSession:
    """One world being played; saves the world when closed."""

    def __init__(
        self,
        settings: SettingsData,
        world_name: str,
        saves: SaveManager | None = None,
    ) -> None:
        self.settings = settings
        self.world_name = world_name
        self.saves = saves if saves is not None else SaveManager()
        self.camera = CameraManager()
        self.player: Player | None = None
        self.zombie: Zombie | None = None
        self.hud: Hud | None = None
        self.hotbar = Hotbar()
        self.inventory = Inventory()
        self.time = GameTime()
        self.day_night = DayNightCycle(self.time)
        self.blocks = BlockManager()

    def start(self) -> None:
        """Create the entities, load the saved world and build the terrain."""
        self.player = Player()
        self.zombie = Zombie()
        self.hud = Hud(self.player)
        self.saves.load_world(self.world_name, self.player, self.time)

        for heights, block_type in _TERRAIN_LAYERS:
            for x in range(TERRAIN_SIZE):
                for z in range(TERRAIN_SIZE):
                    for y in heights:
                        self.blocks.add_block_at(Vec3(float(x), float(y), float(z)), block_type)

        Tree().generate(self.blocks, *TREE_SPOT)

    @property
    def hour(self) -> float:
        """Current time of day in fractional hours."""
        date = self.time.calendar().date
        return date.hour + date.minute / 60.0

    def update(
        self,
        delta_time: float,
        controls: Controls | None = None,
        mouse_delta: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        """Advance the game by one frame of ``delta_time`` seconds."""
        controls = controls or Controls()
        self.day_night.update()

        if self.player is not None and self.zombie is not None and self.hud is not None:
            nearby = self.blocks.nearby_blocks(self.player.position, NEARBY_RADIUS)
            self.player.update(delta_time, self.camera.camera, nearby, controls)
            self.zombie.update(delta_time, nearby)
            self.camera.update(self.player.position, mouse_delta, controls.camera_toggle)
            self.hud.update()
            self.hotbar.update(controls)
            self.inventory.update(controls)
            if controls.use_left_hand:
                eye = self.player.position + Vec3(0.0, EYE_HEIGHT, 0.0)
                self.blocks.interact(delta_time, eye, self.camera.forward(), REACH)

        self.time.update(delta_time)

    def visible_blocks(self) -> list[Block]:
        """Blocks within the configured render distance of the player."""
        if self.player is None:
            return []
        return self.blocks.visible_blocks(
            self.player.position, float(self.settings.video.render_distance)
        )

    def close(self) -> None:
        """Save the player and the clock, if the game was started."""
        if self.player is not None:
            self.saves.save_world(self.world_name, self.player, self.time)

    def __enter__(self) -> GameSession:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()