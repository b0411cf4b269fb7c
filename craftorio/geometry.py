"""Small vector and box types used for positions and collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2i:
    """Integer coordinates on the horizontal plane, used as chunk keys."""

    x: int
    z: int


@dataclass(frozen=True)
class Vector3i:
    """Integer coordinates of a block cell."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class Vec3:
    """A three-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return self
        return self * (1.0 / length)

    def cross(self, other: Vec3) -> Vec3:
        """Cross product with another vector."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance_to(self, other: Vec3) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()

    def floored(self) -> Vector3i:
        """The integer cell that contains this point."""
        return Vector3i(math.floor(self.x), math.floor(self.y), math.floor(self.z))


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box spanning from ``min`` to ``max``."""

    min: Vec3
    max: Vec3

    def collides(self, other: BoundingBox) -> bool:
        """Whether the two boxes overlap or touch."""
        return (
            self.max.x >= other.min.x
            and self.min.x <= other.max.x
            and self.max.y >= other.min.y
            and self.min.y <= other.max.y
            and self.max.z >= other.min.z
            and self.min.z <= other.max.z
        )