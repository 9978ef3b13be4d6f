"""Headless frame loop: grow the planner tree and drive a robot along its path."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from rrtnav.planner import RRTPlanner
from rrtnav.vector import Vec3

START = Vec3(5.0, 1.0, -3.0)
GOAL = Vec3(-8.0, 1.0, -5.0)
TARGET_FPS = 60
ZOOM_SPEED = 2.0


@dataclass
class Camera:
    """Perspective camera looking at ``target``."""

    position: Vec3 = field(default_factory=lambda: Vec3(20.0, 20.0, 20.0))
    target: Vec3 = field(default_factory=Vec3)
    up: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    fovy: float = 60.0

    def zoom(self, wheel: float) -> None:
        """Move along the view direction by the mouse-wheel amount."""
        if wheel == 0.0:
            return
        forward = (self.target - self.position).normalized()
        self.position = self.position + forward.scaled(wheel * ZOOM_SPEED)


@dataclass
class PathFollower:
    """A robot that walks through path points in order."""

    position: Vec3 = field(default_factory=Vec3)
    index: int = 0
    speed: float = 2.0
    reach_threshold: float = 0.5

    def update(self, path: Sequence[Vec3], delta_time: float) -> None:
        """Advance to the next point when close, otherwise step towards the current one."""
        if not path or self.index >= len(path):
            return
        to_target = path[self.index] - self.position
        if to_target.length() < self.reach_threshold and self.index < len(path) - 1:
            self.index += 1
        else:
            step = to_target.normalized().scaled(self.speed * delta_time)
            self.position = self.position + step


def run(
    frames: int, delta_time: float = 1.0 / TARGET_FPS, seed: int | None = None
) -> tuple[RRTPlanner, PathFollower]:
    """Simulate ``frames`` frames and return the planner and the robot."""
    planner = RRTPlanner(rng=random.Random(seed))
    planner.initialize(START, GOAL)
    follower = PathFollower()
    for _ in range(frames):
        planner.plan_step()
        follower.update(planner.full_path(), delta_time)
    return planner, follower


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation without a window and report the path size."""
    parser = argparse.ArgumentParser(description="RRT path planning in 3D with collision avoidance")
    parser.add_argument("--frames", type=int, default=600, help="number of frames to simulate")
    parser.add_argument("--dt", type=float, default=1.0 / TARGET_FPS, help="seconds per frame")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")

    planner, _ = run(args.frames, args.dt, args.seed)
    print(f"Path size: {len(planner.full_path())}")
    return 0