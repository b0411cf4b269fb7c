"""World blocks: solid cubes that wear down while being mined."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from craftorio.enums import BlockType, Color, DirtType, LeafType, WoodType, color_for_block
from craftorio.geometry import BoundingBox, Vec3

TICK = 1.0 / 60.0
_HALF = Vec3(0.5, 0.5, 0.5)
_UNIT = Vec3(1.0, 1.0, 1.0)


class Block(ABC):
    """A unit cube whose minimum corner sits at ``position``.

    Mining a block with ``interact`` removes one point of durability per
    sixtieth of a second; at zero the block turns into air.
    """

    durability_ticks: ClassVar[int] = 0

    def __init__(self, position: Vec3, block_type: BlockType) -> None:
        self.position = position
        self.block_type = block_type
        self.durability = self.durability_ticks
        self.interaction_accumulator = 0.0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.position!r}, {self.block_type.name})"

    def update(self) -> bool:
        """Advance the block by one frame; return whether it still stands."""
        return self.block_type is not BlockType.AIR

    def interact(self, delta_time: float) -> None:
        """Mine the block for ``delta_time`` seconds."""
        self.interaction_accumulator += delta_time
        while self.interaction_accumulator >= TICK:
            self.interaction_accumulator -= TICK
            self.durability -= 1
        if self.durability <= 0:
            self.block_type = BlockType.AIR

    def origin(self) -> Vec3:
        """Centre of the cube."""
        return self.position + _HALF

    def bounding_box(self) -> BoundingBox:
        """Box covering the whole cube."""
        return BoundingBox(self.position, self.position + _UNIT)

    @abstractmethod
    def is_solid(self) -> bool:
        """Whether entities collide with this block."""

    def color(self) -> Color:
        """RGBA colour the block is drawn with."""
        return color_for_block(self.block_type)


class GrassBlock(Block):
    """Grass-topped ground block."""

    durability_ticks = int(60 * 0.75)

    def __init__(self, position: Vec3) -> None:
        super().__init__(position, BlockType.GRASS)

    def is_solid(self) -> bool:
        return True


class DirtBlock(Block):
    """Plain dirt block."""

    durability_ticks = int(60 * 0.75)

    def __init__(self, position: Vec3, dirt_type: DirtType = DirtType.DRY) -> None:
        super().__init__(position, BlockType.DIRT)
        self.dirt_type = dirt_type

    def is_solid(self) -> bool:
        return True


class StoneBlock(Block):
    """Hard stone block."""

    durability_ticks = 60 * 30

    def __init__(self, position: Vec3) -> None:
        super().__init__(position, BlockType.STONE)

    def is_solid(self) -> bool:
        return True


class WoodBlock(Block):
    """Tree trunk block."""

    durability_ticks = 60 * 10

    def __init__(self, position: Vec3, wood_type: WoodType = WoodType.OAK) -> None:
        super().__init__(position, BlockType.WOOD)
        self.wood_type = wood_type

    def is_solid(self) -> bool:
        return True


class LeafBlock(Block):
    """Foliage block that entities pass through."""

    durability_ticks = int(60 * 0.5)

    def __init__(self, position: Vec3, leaf_type: LeafType = LeafType.OAK) -> None:
        super().__init__(position, BlockType.LEAVES)
        self.leaf_type = leaf_type

    def is_solid(self) -> bool:
        return False


def create_block(position: Vec3, block_type: BlockType) -> Block | None:
    """Build the default block for ``block_type``; air yields None."""
    if block_type is BlockType.GRASS:
        return GrassBlock(position)
    if block_type is BlockType.STONE:
        return StoneBlock(position)
    if block_type is BlockType.DIRT:
        return DirtBlock(position, DirtType.DRY)
    if block_type is BlockType.WOOD:
        return WoodBlock(position, WoodType.OAK)
    if block_type is BlockType.LEAVES:
        return LeafBlock(position, LeafType.OAK)
    return None