"""Core of a small 2D game engine: vectors, transformations, scene objects, collisions and key events."""

__version__ = "0.1.0"