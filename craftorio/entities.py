"""Moving things in the world: the player and zombies."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import replace

from craftorio.blocks import Block
from craftorio.camera import Camera3D
from craftorio.controls import Controls
from craftorio.geometry import BoundingBox, Vec3

PLAYER_HALF_WIDTH = 0.3
PLAYER_HEIGHT = 1.8

PLAYER_GRAVITY = 24.0
ZOMBIE_GRAVITY = 25.0
JUMP_STRENGTH = 10.0
SPRINT_FACTOR = 1.5
BOX_Y_OFFSET = 0.00001
UP = Vec3(0.0, 1.0, 0.0)


def _body_box(x: float, y_bottom: float, z: float, y_top: float) -> BoundingBox:
    return BoundingBox(
        Vec3(x - PLAYER_HALF_WIDTH, y_bottom, z - PLAYER_HALF_WIDTH),
        Vec3(x + PLAYER_HALF_WIDTH, y_top, z + PLAYER_HALF_WIDTH),
    )


def _hits_solid(box: BoundingBox, blocks: Iterable[Block]) -> bool:
    return any(b.is_solid() and box.collides(b.bounding_box()) for b in blocks)


class Entity(ABC):
    """Anything that lives in the world and advances every frame."""

    position: Vec3

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the entity by ``delta_time`` seconds."""


class _Falling:
    """Shared vertical physics: gravity and landing on solid blocks."""

    position: Vec3
    velocity_y: float
    is_on_ground: bool

    def _fall(self, delta_time: float, gravity: float, blocks: list[Block], jump: bool) -> Vec3:
        self.velocity_y -= gravity * delta_time
        if jump and self.is_on_ground:
            self.velocity_y = JUMP_STRENGTH
            self.is_on_ground = False

        next_y = self.position.y + self.velocity_y * delta_time
        box = _body_box(self.position.x, next_y, self.position.z, next_y + PLAYER_HEIGHT)
        blocked = _hits_solid(box, blocks)
        if blocked:
            next_y = float(math.floor(self.position.y))
            self.velocity_y = 0.0
        self.is_on_ground = blocked
        return replace(self.position, y=next_y)


class Player(_Falling, Entity):
    """The player: walks relative to the camera, jumps, sprints and takes damage."""

    def __init__(self) -> None:
        self.position = Vec3(0.0, 0.0, 0.0)
        self.is_on_ground = False
        self.move_speed = 5.0
        self.velocity_y = 0.0
        self.health = 100.0
        self.max_health = 100.0

    def update(
        self,
        delta_time: float,
        camera: Camera3D | None = None,
        nearby_blocks: Iterable[Block] = (),
        controls: Controls | None = None,
    ) -> None:
        """Apply gravity, jumping and walking against ``nearby_blocks``.

        Without a camera there is no frame of reference and nothing moves.
        """
        if camera is None:
            return
        controls = controls or Controls()
        blocks = list(nearby_blocks)
        sprint = SPRINT_FACTOR if controls.run else 1.0

        next_pos = self._fall(delta_time, PLAYER_GRAVITY, blocks, controls.jump)

        forward = replace((camera.target - camera.position).normalized(), y=0.0)
        right = forward.cross(UP).normalized()

        direction = Vec3()
        if controls.move_forward:
            direction = direction + forward
        if controls.move_backward:
            direction = direction - forward
        if controls.move_left:
            direction = direction - right
        if controls.move_right:
            direction = direction + right
        direction = direction.normalized()

        step = self.move_speed * delta_time * sprint
        new_x = next_pos.x + direction.x * step
        new_z = next_pos.z + direction.z * step
        box = _body_box(new_x, next_pos.y + BOX_Y_OFFSET, new_z, next_pos.y + PLAYER_HEIGHT)
        if not _hits_solid(box, blocks):
            next_pos = Vec3(new_x, next_pos.y, new_z)

        self.position = next_pos

    def take_damage(self, amount: float) -> None:
        """Lose health, never dropping below zero."""
        self.health = max(0.0, self.health - amount)

    def heal(self, amount: float) -> None:
        """Regain health, never exceeding the maximum."""
        self.health = min(self.max_health, self.health + amount)


class Zombie(_Falling, Entity):
    """A hostile creature that, for now, only falls and lands."""

    def __init__(self) -> None:
        self.position = Vec3(7.0, 1.0, 7.0)
        self.is_on_ground = False
        self.move_speed = 5.0
        self.velocity_y = 0.0
        self.max_hp = 200.0
        self.hp = 200.0

    def update(self, delta_time: float, nearby_blocks: Iterable[Block] | None = None) -> None:
        """Apply gravity against ``nearby_blocks``; without blocks nothing moves."""
        if nearby_blocks is None:
            return
        self.position = self._fall(delta_time, ZOMBIE_GRAVITY, list(nearby_blocks), False)

    def take_damage(self, amount: float) -> None:
        """Lose hit points, never dropping below zero."""
        self.hp = max(0.0, self.hp - amount)

    def heal(self, amount: float) -> None:
        """Regain hit points, never exceeding the maximum."""
        self.hp = min(self.max_hp, self.hp + amount)