import pytest

from craftorio.enums import BlockType
from craftorio.geometry import Vec3
from craftorio.structures import Structure, Tree
from craftorio.world import BlockManager


def all_blocks(manager):
    return [b for chunk in manager.chunks.values() for b in chunk.blocks]


@pytest.fixture
def tree_blocks():
    manager = BlockManager()
    Tree().generate(manager, 4, 0, 4)
    return all_blocks(manager)


def test_structure_is_abstract():
    with pytest.raises(TypeError):
        Structure()


def test_trunk_is_five_wood_blocks(tree_blocks):
    wood = sorted(
        (b.position for b in tree_blocks if b.block_type is BlockType.WOOD),
        key=lambda p: p.y,
    )
    assert wood == [Vec3(4.0, float(i), 4.0) for i in range(5)]


def test_canopy_leaf_count(tree_blocks):
    leaves = [b for b in tree_blocks if b.block_type is BlockType.LEAVES]
    assert len(leaves) == 51


def test_leaves_stay_within_canopy_radius(tree_blocks):
    top = Vec3(4.0, 5.0, 4.0)
    leaves = [b for b in tree_blocks if b.block_type is BlockType.LEAVES]
    assert all(b.position.distance_to(top) <= 2.5 for b in leaves)
    assert all(b.position.y >= top.y for b in leaves)
    assert Vec3(4.0, 5.0, 4.0) in {b.position for b in leaves}


def test_tree_spanning_chunk_border():
    manager = BlockManager()
    Tree().generate(manager, 0, 0, 0)
    assert len(manager.chunks) == 4
    assert len(all_blocks(manager)) == 5 + 51