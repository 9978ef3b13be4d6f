[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rrtnav"
version = "0.1.0"
description = "RRT path planning in 3D with obstacle collision checking, Catmull-Rom path smoothing and a headless path-following simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["rrt", "path-planning", "motion-planning", "robotics", "catmull-rom", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rrtnav = "rrtnav.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["rrtnav"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
