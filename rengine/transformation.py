"""Position, size and rotation of an object in the 2D world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rengine.vector2d import DEG2RAD, Vector2D


@dataclass(eq=False)
class Transformation2D:
    """Absolute and parent-relative placement of an object."""

    position: Vector2D = field(default_factory=Vector2D)
    size: Vector2D = field(default_factory=Vector2D)
    relative_position: Vector2D = field(default_factory=Vector2D)
    relative_size: Vector2D = field(default_factory=Vector2D)
    rotation: float = 0.0
    relative_rotation: float = 0.0

    @classmethod
    def create(
        cls,
        posx: float = 0.0,
        posy: float = 0.0,
        sizex: float = 0.0,
        sizey: float = 0.0,
        rot: float = 0.0,
    ) -> Transformation2D:
        """Build a transformation whose relative values equal the absolute ones."""
        return cls(
            position=Vector2D(posx, posy),
            size=Vector2D(sizex, sizey),
            relative_position=Vector2D(posx, posy),
            relative_size=Vector2D(sizex, sizey),
            rotation=float(rot),
            relative_rotation=float(rot),
        )

    def matrix(self) -> list[float]:
        """Column-major 4x4 model matrix: scale, rotate (degrees), translate."""
        radians = DEG2RAD * self.rotation
        cos, sin = math.cos(radians), math.sin(radians)
        sx, sy = self.size.x, self.size.y
        return [
            sx * cos, sx * sin, 0.0, 0.0,
            sy * -sin, sy * cos, 0.0, 0.0,
            0.0, 0.0, 0.0, 0.0,
            self.position.x, self.position.y, 0.0, 1.0,
        ]

    def assign(self, other: Transformation2D) -> None:
        """Copy position, size and rotation from another transformation."""
        self.position = Vector2D(other.position.x, other.position.y)
        self.size = Vector2D(other.size.x, other.size.y)
        self.rotation = other.rotation

    def __eq__(self, other: object) -> bool:
        # Equal when any one of position, size or rotation matches.
        if not isinstance(other, Transformation2D):
            return NotImplemented
        return (
            other.position == self.position
            or other.size == self.size
            or other.rotation == self.rotation
        )

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Transformation2D):
            return NotImplemented
        return (
            other.position != self.position
            or other.size != self.size
            or other.rotation != self.rotation
        )

    __hash__ = None  # type: ignore[assignment]