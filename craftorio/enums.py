"""Enumerations for block kinds, materials, seasons and moon phases."""

from __future__ import annotations

from enum import Enum

Color = tuple[int, int, int, int]

GREEN: Color = (0, 228, 48, 255)
BROWN: Color = (127, 106, 79, 255)
GRAY: Color = (130, 130, 130, 255)
DARKBROWN: Color = (76, 63, 47, 255)
DARKGREEN: Color = (0, 117, 44, 255)
BLANK: Color = (0, 0, 0, 0)


class BlockType(Enum):
    """Kind of a block in the world."""

    AIR = 0
    GRASS = 1
    DIRT = 2
    STONE = 3
    WOOD = 4
    LEAVES = 5


class DirtType(Enum):
    """Variant of a dirt block."""

    DRY = 0
    WET = 1
    FERTILE = 2
    INFERTILE = 3


class LeafType(Enum):
    """Variant of a leaf block."""

    OAK = 0
    SPRUCE = 1


class WoodType(Enum):
    """Variant of a wood block."""

    OAK = 0
    SPRUCE = 1


class Season(Enum):
    """Season of the in-game year."""

    SPRING = 0
    SUMMER = 1
    AUTUMN = 2
    WINTER = 3

    def __str__(self) -> str:
        return self.name.title()


class LunarPhase(Enum):
    """Phase of the moon, one per in-game day over an eight day cycle."""

    NEW_MOON = 0
    WAXING_CRESCENT = 1
    FIRST_QUARTER = 2
    WAXING_GIBBOUS = 3
    FULL_MOON = 4
    WANING_GIBBOUS = 5
    LAST_QUARTER = 6
    WANING_CRESCENT = 7

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


_BLOCK_COLORS: dict[BlockType, Color] = {
    BlockType.GRASS: GREEN,
    BlockType.DIRT: BROWN,
    BlockType.STONE: GRAY,
    BlockType.WOOD: DARKBROWN,
    BlockType.LEAVES: DARKGREEN,
}


def color_for_block(block_type: BlockType) -> Color:
    """Return the RGBA colour used to draw a block of the given type."""
    return _BLOCK_COLORS.get(block_type, BLANK)


def is_walkable(block_type: BlockType) -> bool:
    """Return whether an entity can pass through a block of the given type."""
    return block_type in (BlockType.LEAVES, BlockType.AIR)