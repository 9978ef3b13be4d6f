"""The navigation arena: a checkerboard floor and cylindrical obstacles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rrtnav.vector import Vec3

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 800

GRID_SIZE = 10
TILE_SIZE = 2.0
TILE_THICKNESS = 0.1

OBSTACLE_RADIUS = 0.5
OBSTACLE_HEIGHT = 2.0

ENV_MIN_X = -10.0
ENV_MAX_X = 10.0
ENV_MIN_Z = -10.0
ENV_MAX_Z = 10.0

# Obstacle locations in tile units on the X/Z plane.
_OBSTACLE_CELLS: tuple[tuple[int, int], ...] = (
    (2, 3),
    (-1, -4),
    (0, 0),
    (4, -2),
    (-3, 1),
    (1, -6),
    (-5, -1),
    (3, 4),
    (-8, 4),
    (8, 5),
    (3, -9),
    (7, -7),
    (6, 6),
)


class TileColor(Enum):
    """Colour of a floor tile."""

    LIGHT = "lightgray"
    DARK = "gray"


@dataclass(frozen=True)
class Obstacle:
    """A vertical cylinder centred at ``position``."""

    position: Vec3
    radius: float
    height: float = OBSTACLE_HEIGHT


@dataclass(frozen=True)
class Tile:
    """One square of the checkerboard floor."""

    position: Vec3
    size: float
    color: TileColor
    thickness: float = TILE_THICKNESS


def default_obstacles(
    tile_size: float = TILE_SIZE,
    height: float = OBSTACLE_HEIGHT,
    radius: float = OBSTACLE_RADIUS,
) -> list[Obstacle]:
    """The fixed set of obstacles, standing on the floor at their mid-height."""
    return [
        Obstacle(Vec3(cx * tile_size, height / 2.0, cz * tile_size), radius, height)
        for cx, cz in _OBSTACLE_CELLS
    ]


def checkerboard_tiles(grid_size: int = GRID_SIZE, tile_size: float = TILE_SIZE) -> list[Tile]:
    """Floor tiles covering cells ``-grid_size`` up to ``grid_size - 1`` on both axes."""
    return [
        Tile(
            Vec3(x * tile_size, 0.0, z * tile_size),
            tile_size,
            TileColor.LIGHT if (x + z) % 2 == 0 else TileColor.DARK,
        )
        for x in range(-grid_size, grid_size)
        for z in range(-grid_size, grid_size)
    ]