"""Chunks of blocks and the manager that keeps the world's blocks."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar

from craftorio.blocks import Block, create_block
from craftorio.enums import BlockType
from craftorio.geometry import Vec3, Vector2i, Vector3i

RENDER_RADIUS_CHUNKS = 3
RAY_STEP = 0.1


@dataclass
class Chunk:
    """A column of the world, ``SIZE`` blocks wide on each horizontal axis."""

    SIZE: ClassVar[int] = 16

    origin: Vec3
    blocks: list[Block] = field(default_factory=list)

    def add_block(self, block: Block) -> None:
        """Add a block to the chunk."""
        self.blocks.append(block)

    def remove_block_at(self, position: Vector3i) -> None:
        """Remove every block whose cell is ``position``."""
        self.blocks = [b for b in self.blocks if b.position.floored() != position]

    def blocks_within(self, player_position: Vec3, max_distance: float) -> Iterator[Block]:
        """Blocks no further than ``max_distance`` from ``player_position``."""
        return (
            b for b in self.blocks if b.position.distance_to(player_position) <= max_distance
        )


class BlockManager:
    """Holds all blocks of a world, grouped into chunks."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.chunks: dict[Vector2i, Chunk] = {}

    @staticmethod
    def chunk_coords(position: Vec3) -> Vector2i:
        """Coordinates of the chunk that contains ``position``."""
        return Vector2i(
            math.floor(position.x / Chunk.SIZE), math.floor(position.z / Chunk.SIZE)
        )

    def add_block(self, block: Block) -> None:
        """Add a free-standing block that is updated every frame."""
        self.blocks.append(block)

    def add_block_at(self, position: Vec3, block_type: BlockType) -> None:
        """Place a new block of ``block_type`` in the chunk containing ``position``."""
        coords = self.chunk_coords(position)
        chunk = self.chunks.get(coords)
        if chunk is None:
            chunk = Chunk(Vec3(float(coords.x * Chunk.SIZE), 0.0, float(coords.z * Chunk.SIZE)))
            self.chunks[coords] = chunk
        block = create_block(position, block_type)
        if block is not None:
            chunk.add_block(block)

    def load_chunk_at(self, chunk_x: int, chunk_z: int) -> None:
        """Fill a chunk with a flat layer of grass at height zero."""
        start_x = chunk_x * Chunk.SIZE
        start_z = chunk_z * Chunk.SIZE
        for x in range(start_x, start_x + Chunk.SIZE):
            for z in range(start_z, start_z + Chunk.SIZE):
                self.add_block_at(Vec3(float(x), 0.0, float(z)), BlockType.GRASS)

    def update(self) -> None:
        """Update every free-standing block."""
        for block in self.blocks:
            block.update()

    def visible_blocks(self, player_position: Vec3, max_render_distance: float) -> list[Block]:
        """Blocks in nearby chunks that are within render distance."""
        player_chunk = self.chunk_coords(player_position)
        visible: list[Block] = []
        for coords, chunk in self.chunks.items():
            if (
                abs(coords.x - player_chunk.x) <= RENDER_RADIUS_CHUNKS
                and abs(coords.z - player_chunk.z) <= RENDER_RADIUS_CHUNKS
            ):
                visible.extend(chunk.blocks_within(player_position, max_render_distance))
        return visible

    def interact(
        self, delta_time: float, origin: Vec3, direction: Vec3, max_distance: float
    ) -> Block | None:
        """Mine the first block hit by a ray; broken blocks are removed.

        Returns the block that was hit, or None when nothing was in reach.
        """
        t = 0.0
        while t <= max_distance:
            cell = (origin + direction * t).floored()
            chunk = self.chunks.get(self.chunk_coords(Vec3(cell.x, cell.y, cell.z)))
            if chunk is not None:
                for block in chunk.blocks:
                    pos = block.position
                    if (int(pos.x), int(pos.y), int(pos.z)) == (cell.x, cell.y, cell.z):
                        block.interact(delta_time)
                        if block.block_type is BlockType.AIR:
                            chunk.remove_block_at(cell)
                        return block
            t += RAY_STEP
        return None

    def nearby_blocks(self, player_position: Vec3, radius: float) -> list[Block]:
        """Blocks within ``radius`` of ``player_position``."""
        player_chunk = self.chunk_coords(player_position)
        chunk_radius = math.ceil(radius / Chunk.SIZE)
        nearby: list[Block] = []
        for dx in range(-chunk_radius, chunk_radius + 1):
            for dz in range(-chunk_radius, chunk_radius + 1):
                chunk = self.chunks.get(Vector2i(player_chunk.x + dx, player_chunk.z + dz))
                if chunk is not None:
                    nearby.extend(chunk.blocks_within(player_position, radius))
        return nearby