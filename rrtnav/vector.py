"""Immutable three-component vectors used by the planner and the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vec3:
        return self.scaled(factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return self
        return Vec3(self.x / size, self.y / size, self.z / size)

    def scaled(self, factor: float) -> Vec3:
        """Vector multiplied by a scalar."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def lerp(self, other: Vec3, t: float) -> Vec3:
        """Linear interpolation towards ``other``; ``t`` of 0 gives self, 1 gives other."""
        return Vec3(
            self.x + t * (other.x - self.x),
            self.y + t * (other.y - self.y),
            self.z + t * (other.z - self.z),
        )

    def distance_to(self, other: Vec3) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()