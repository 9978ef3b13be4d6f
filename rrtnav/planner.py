"""Rapidly-exploring random tree planner with Catmull-Rom path smoothing."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from rrtnav.environment import OBSTACLE_HEIGHT, TILE_SIZE, Obstacle, default_obstacles
from rrtnav.vector import Vec3

log = logging.getLogger(__name__)

SEGMENT_CHECK_STEPS = 10
SAMPLE_RANGE = 1000
GOAL_SUBDIVISIONS = 15


class _IntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Node:
    """A tree vertex; ``parent`` is the index of its parent, ``None`` for the root."""

    position: Vec3
    parent: int | None = None


def catmull_rom(p0: Vec3, p1: Vec3, p2: Vec3, p3: Vec3, t: float) -> Vec3:
    """Point on the Catmull-Rom segment between ``p1`` and ``p2`` at ``t`` in [0, 1]."""
    t2 = t * t
    t3 = t2 * t

    def axis(a: float, b: float, c: float, d: float) -> float:
        return 0.5 * (
            2.0 * b
            + (-a + c) * t
            + (2.0 * a - 5.0 * b + 4.0 * c - d) * t2
            + (-a + 3.0 * b - 3.0 * c + d) * t3
        )

    return Vec3(*(axis(a, b, c, d) for a, b, c, d in zip(p0, p1, p2, p3)))


def smooth_path(raw_path: Sequence[Vec3], subdivisions: int = 10) -> list[Vec3]:
    """Densify a polyline with Catmull-Rom interpolation, keeping both ends."""
    points = list(raw_path)
    if len(points) < 2:
        return points

    smoothed: list[Vec3] = []
    last = len(points) - 1
    for i, (p1, p2) in enumerate(zip(points, points[1:])):
        p0 = points[i - 1] if i > 0 else p1
        p3 = points[i + 2] if i + 2 <= last else p2
        smoothed.extend(
            catmull_rom(p0, p1, p2, p3, j / subdivisions) for j in range(subdivisions)
        )
    smoothed.append(points[-1])
    return smoothed


class RRTPlanner:
    """Grows a tree from the start, one sample per step, until the goal is joined."""

    def __init__(
        self,
        obstacles: Iterable[Obstacle] | None = None,
        robot_radius: float = 1.0,
        tile_size: float = TILE_SIZE,
        obstacle_height: float = OBSTACLE_HEIGHT,
        rng: _IntSource | None = None,
    ) -> None:
        self.obstacles: list[Obstacle] = (
            list(obstacles) if obstacles is not None else default_obstacles()
        )
        self.robot_radius = robot_radius
        self.tile_size = tile_size
        self.obstacle_height = obstacle_height
        self.rng: _IntSource = rng if rng is not None else random.Random()
        self.tree: list[Node] = []
        self.start = Vec3()
        self.goal = Vec3()
        self.complete = False
        self._path: list[Vec3] = []
        self._path_index = 0

    @property
    def step_size(self) -> float:
        """Distance a new node is placed from its nearest neighbour."""
        return self.tile_size * 0.9

    def initialize(self, start: Vec3, goal: Vec3) -> None:
        """Reset the tree to a single root at ``start`` aiming for ``goal``."""
        self.start = start
        self.goal = goal
        self.tree = [Node(start)]
        self._path = [start]
        self._path_index = 0

    def sample_random_point(self) -> Vec3:
        """Uniform sample over the floor at obstacle mid-height."""

        def coordinate() -> float:
            return self.rng.randint(-SAMPLE_RANGE, SAMPLE_RANGE) / 100.0 * self.tile_size

        x = coordinate()
        z = coordinate()
        return Vec3(x, self.obstacle_height / 2.0, z)

    def nearest_node_index(self, point: Vec3) -> int:
        """Index of the tree node closest to ``point``; the first wins ties."""
        if not self.tree:
            raise ValueError("the tree is empty")
        return min(range(len(self.tree)), key=lambda i: self.tree[i].position.distance_to(point))

    def is_point_in_collision(self, point: Vec3) -> bool:
        """True if ``point`` lies inside any obstacle inflated by the robot radius."""
        return any(
            point.distance_to(obs.position) < obs.radius + self.robot_radius
            for obs in self.obstacles
        )

    def is_segment_in_collision(self, a: Vec3, b: Vec3) -> bool:
        """Check evenly spaced points along ``a``-``b``, both ends included."""
        return any(
            self.is_point_in_collision(a.lerp(b, i / SEGMENT_CHECK_STEPS))
            for i in range(SEGMENT_CHECK_STEPS + 1)
        )

    def plan_step(self) -> bool:
        """Try to extend the tree once; return True if a node was added."""
        if self.complete:
            log.debug("Planning already complete.")
            return False
        if not self.tree:
            log.debug("Tree is empty.")
            return False

        sample = self.sample_random_point()
        log.debug("Sampled point: %s", sample)
        nearest = self.nearest_node_index(sample)
        nearest_pos = self.tree[nearest].position
        log.debug("Nearest node: %s", nearest_pos)

        direction = sample - nearest_pos
        if direction.length() == 0:
            return False

        new_point = nearest_pos + direction.normalized().scaled(self.step_size)
        log.debug("New point: %s", new_point)

        if self.is_point_in_collision(new_point):
            log.debug("Collision at new point.")
            return False
        if self.is_segment_in_collision(nearest_pos, new_point):
            log.debug("Collision along segment.")
            return False

        self.tree.append(Node(new_point, nearest))
        log.debug("Added new node. Tree size: %d", len(self.tree))

        if (
            new_point.distance_to(self.goal) < self.step_size
            and not self.is_point_in_collision(self.goal)
            and not self.is_segment_in_collision(new_point, self.goal)
        ):
            self.tree.append(Node(self.goal, len(self.tree) - 1))
            log.debug("Goal reached!")
            self._path = smooth_path(self._trace_back(len(self.tree) - 1), GOAL_SUBDIVISIONS)
            self._path_index = 0
            self.complete = True
        return True

    def _trace_back(self, index: int | None) -> list[Vec3]:
        points: list[Vec3] = []
        while index is not None:
            node = self.tree[index]
            points.append(node.position)
            index = node.parent
        points.reverse()
        return points

    def next_path_point(self) -> Vec3:
        """Hand out path points in order, repeating the last once exhausted."""
        if not self._path:
            return self.start
        if self._path_index >= len(self._path):
            return self._path[-1]
        point = self._path[self._path_index]
        self._path_index += 1
        return point

    def full_path(self) -> list[Vec3]:
        """A copy of the current smoothed path."""
        return list(self._path)

    def edges(self) -> list[tuple[Vec3, Vec3]]:
        """Tree edges as (child, parent) position pairs."""
        return [
            (node.position, self.tree[node.parent].position)
            for node in self.tree
            if node.parent is not None
        ]