"""Multi-block structures placed into the world."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from craftorio.enums import BlockType
from craftorio.geometry import Vec3
from craftorio.world import BlockManager

TRUNK_HEIGHT = 5
CANOPY_RADIUS = 2.5


class Structure(ABC):
    """Something that places a group of blocks at a given spot."""

    @abstractmethod
    def generate(self, manager: BlockManager, x: int, y: int, z: int) -> None:
        """Place the structure's blocks with its base at ``(x, y, z)``."""


class Tree(Structure):
    """Oak tree: a wooden trunk under a rounded canopy of leaves."""

    def generate(self, manager: BlockManager, x: int, y: int, z: int) -> None:
        for i in range(TRUNK_HEIGHT):
            manager.add_block_at(Vec3(float(x), float(y + i), float(z)), BlockType.WOOD)

        top_y = y + TRUNK_HEIGHT
        for dx in range(-2, 3):
            for dz in range(-2, 3):
                for dy in range(3):
                    if math.sqrt(dx * dx + dz * dz + dy * dy) <= CANOPY_RADIUS:
                        manager.add_block_at(
                            Vec3(float(x + dx), float(top_y + dy), float(z + dz)),
                            BlockType.LEAVES,
                        )