"""Keyboard-driven motion of a free-flying sphere."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from enum import Enum, auto

from rrtnav.vector import Vec3


class Key(Enum):
    """Keys the controller responds to."""

    W = auto()
    S = auto()
    A = auto()
    D = auto()
    E = auto()
    Q = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    Z = auto()
    X = auto()


_LINEAR_KEYS: dict[Key, Vec3] = {
    Key.W: Vec3(0.0, 0.0, -1.0),
    Key.S: Vec3(0.0, 0.0, 1.0),
    Key.A: Vec3(-1.0, 0.0, 0.0),
    Key.D: Vec3(1.0, 0.0, 0.0),
    Key.E: Vec3(0.0, 1.0, 0.0),
    Key.Q: Vec3(0.0, -1.0, 0.0),
}

_ANGULAR_KEYS: dict[Key, Vec3] = {
    Key.UP: Vec3(-1.0, 0.0, 0.0),
    Key.DOWN: Vec3(1.0, 0.0, 0.0),
    Key.LEFT: Vec3(0.0, -1.0, 0.0),
    Key.RIGHT: Vec3(0.0, 1.0, 0.0),
    Key.Z: Vec3(0.0, 0.0, -1.0),
    Key.X: Vec3(0.0, 0.0, 1.0),
}


def _input_direction(pressed: Collection[Key], mapping: dict[Key, Vec3], magnitude: float) -> Vec3:
    total = Vec3()
    for key, direction in mapping.items():
        if key in pressed:
            total = total + direction
    if total.length() > 0:
        return total.normalized().scaled(magnitude)
    return total


@dataclass
class SphereController:
    """Sphere state integrated from held keys each frame."""

    position: Vec3 = field(default_factory=lambda: Vec3(5.0, 1.0, -3.0))
    velocity: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)
    angular_velocity: Vec3 = field(default_factory=Vec3)
    radius: float = 1.0
    max_acceleration: float = 2.0
    max_velocity: float = 5.0
    max_angular_velocity: float = 0.5

    def update(self, delta_time: float, pressed: Collection[Key] = ()) -> None:
        """Advance the sphere by ``delta_time`` seconds given the keys held down."""
        self.acceleration = _input_direction(pressed, _LINEAR_KEYS, self.max_acceleration)
        self.velocity = self.velocity + self.acceleration.scaled(delta_time)
        if self.velocity.length() > self.max_velocity:
            self.velocity = self.velocity.normalized().scaled(self.max_velocity)
        self.position = self.position + self.velocity.scaled(delta_time)

        self.angular_velocity = _input_direction(
            pressed, _ANGULAR_KEYS, self.max_angular_velocity
        )
        self.rotation = self.rotation + self.angular_velocity.scaled(delta_time)