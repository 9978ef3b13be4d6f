# rrtnav

Rapidly-exploring random tree (RRT) path planning on a flat 3D field with
cylindrical obstacles. Once the planner joins the tree to the goal, it
smooths the path with a Catmull-Rom spline. A point robot then follows that
path in a simple fixed-step simulation.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rrtnav
```

This runs the simulation without a window. Each frame, the planner tries to
grow its tree by one step and the robot moves along the current path. At the
end of the run it prints the size of the final path (`Path size: N`).

Options:

- `--frames N`: number of frames to simulate (default 600; must not be negative)
- `--dt SECONDS`: seconds per frame (default 1/60)
- `--seed N`: seed for the random sampler (default: unseeded)

## Library use

```python
from rrtnav.vector import Vec3
from rrtnav.planner import RRTPlanner

planner = RRTPlanner()
planner.initialize(Vec3(5.0, 1.0, -3.0), Vec3(-8.0, 1.0, -5.0))
while not planner.complete:
    planner.plan_step()

path = planner.full_path()
print(len(path), path[-1])
```

Main building blocks:

- `rrtnav.vector.Vec3` is an immutable 3D vector. It supports `+`, `-`,
  unary `-`, scalar `*` and iteration, and provides `length`, `normalized`,
  `scaled`, `lerp` and `distance_to`.
- `rrtnav.environment` holds `Obstacle` and `Tile`. `default_obstacles`
  returns the fixed obstacle layout and `checkerboard_tiles` returns the
  checkerboard floor.
- `rrtnav.planner` holds `RRTPlanner` and `Node`, plus the spline helpers
  `catmull_rom` and `smooth_path`. `RRTPlanner` takes optional obstacles, a
  robot radius, a tile size, an obstacle height and a random source. Its
  methods are `initialize`, `plan_step`, `full_path`, `next_path_point` and
  `edges`, and its collision checks are `is_point_in_collision` and
  `is_segment_in_collision`. Each step is logged at debug level through the
  `rrtnav.planner` logger.
- `rrtnav.controller` holds `SphereController`. It turns a collection of
  pressed `Key` values into motion and rotation, with acceleration and
  velocity limits.
- `rrtnav.simulation` holds `Camera` (with `zoom`), `PathFollower` and `run`.
  `run` drives the planning and following loop and returns the planner and
  the robot.

## What it does not do

The package draws nothing and opens no window. It reads no keyboard or mouse
input of its own. `SphereController` and `Camera.zoom` only change state
from the key sets and wheel amounts you pass to them. The floor tiles and
tree edges are returned as data for you to render however you like. The
planner grows a plain RRT and does not rewire the tree to shorten paths.