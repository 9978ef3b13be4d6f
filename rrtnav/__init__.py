"""RRT path planning, path smoothing and headless path following in a 3D obstacle field."""

__version__ = "0.1.0"