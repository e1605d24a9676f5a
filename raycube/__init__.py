"""Raycasting maze explorer: .cub scene parsing, a camera, a software renderer and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]