"""Collision shapes and the pairwise collision pass."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rengine.objects import Component, WorldObject
from rengine.vector2d import Vector2D

logger = logging.getLogger(__name__)

HitListener = Callable[["WorldObject | None"], None]


class Shape(enum.Enum):
    CIRCLE = 0
    RECTANGLE = 1


@dataclass
class Extent:
    """Size of a shape and the point it is centred on.

    For a circle, size.x is the radius.
    """

    size: Vector2D = field(default_factory=Vector2D)
    reference_point: Vector2D = field(default_factory=Vector2D)


class CollisionShape2D(Component):
    """Component that takes part in collision tests for its parent object.

    Each collision hook calls, in order, the listeners stored in the
    matching list attribute, passing the object that was hit.
    """

    def __init__(self) -> None:
        super().__init__()
        self.shape = Shape.CIRCLE
        self.show_debug = False
        self.trigger = False
        self.extent = Extent()
        self.layer = 0
        self.mask = 0
        self.collision_enter_listeners: list[HitListener] = []
        self.trigger_enter_listeners: list[HitListener] = []
        self.collision_exit_listeners: list[HitListener] = []
        self.trigger_exit_listeners: list[HitListener] = []

    @staticmethod
    def _notify(listeners: list[HitListener], hit: WorldObject | None) -> None:
        for listener in list(listeners):
            listener(hit)

    def on_collision_enter(self, hit: WorldObject | None) -> None:
        """Called when this solid shape is hit."""
        self._notify(self.collision_enter_listeners, hit)

    def on_trigger_enter(self, hit: WorldObject | None) -> None:
        """Called when something enters this trigger."""
        self._notify(self.trigger_enter_listeners, hit)

    def on_collision_exit(self, hit: WorldObject | None) -> None:
        """Called when a collision ends."""
        self._notify(self.collision_exit_listeners, hit)

    def on_trigger_exit(self, hit: WorldObject | None) -> None:
        """Called when something leaves this trigger."""
        self._notify(self.trigger_exit_listeners, hit)

    def init(self) -> None:
        super().init()
        self.mask = self.layer = 1

    def start(self) -> None:
        Physics.instance().register_collider(self)

    def loop(self, delta_time: float) -> None:
        parent = self.get_parent()
        if not isinstance(parent, WorldObject):
            raise RuntimeError("collision shape is not attached to a world object")
        self.extent.reference_point = Vector2D(parent.position.x, parent.position.y)


class Physics:
    """Holds registered colliders and reports collisions between them."""

    _instance: Physics | None = None

    def __init__(self) -> None:
        self._colliders: list[CollisionShape2D] = []

    @classmethod
    def instance(cls) -> Physics:
        """The shared physics system, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def colliders(self) -> list[CollisionShape2D]:
        """A copy of the registered colliders in registration order."""
        return list(self._colliders)

    def register_collider(self, collider: CollisionShape2D) -> None:
        self._colliders.append(collider)

    def unregister_collider(self, collider: CollisionShape2D) -> None:
        """Remove a collider; unknown colliders are ignored."""
        self._colliders = [c for c in self._colliders if c is not collider]

    def loop(self) -> None:
        """Test every pair of one trigger and one solid shape."""
        colliders = list(self._colliders)
        for i, first in enumerate(colliders):
            for second in colliders[i + 1:]:
                if first.trigger == second.trigger:
                    continue
                if not self.test_collision(first, second):
                    continue
                if not self.handle_collision(first, second):
                    continue
                hit = second.get_parent()
                if first.trigger:
                    second.on_collision_enter(hit)
                    first.on_trigger_enter(hit)
                else:
                    first.on_collision_enter(hit)
                    second.on_trigger_enter(hit)

    def test_collision(self, a: CollisionShape2D, b: CollisionShape2D) -> bool:
        """Broad-phase test along the x axis."""
        ax, asx = a.extent.reference_point.x, a.extent.size.x
        bx, bsx = b.extent.reference_point.x, b.extent.size.x
        min_x = (ax - asx) - (bx + bsx)
        max_x = (ax + asx) - (bx - bsx)
        logger.debug("%s %s", min_x, max_x)
        return min_x >= 0 or max_x >= 0

    def handle_collision(self, a: CollisionShape2D, b: CollisionShape2D) -> bool:
        """Narrow-phase test chosen by the two shapes; layers must match."""
        if a.mask != b.layer:
            return False
        if a.shape == b.shape:
            if a.shape is Shape.RECTANGLE:
                return self._rect_rect(a, b)
            return self._circle_circle(a, b)
        if a.shape is Shape.RECTANGLE:
            return self._rect_circle(a, b)
        return self._rect_circle(b, a)

    @staticmethod
    def _rect_rect(a: CollisionShape2D, b: CollisionShape2D) -> bool:
        ay, ah = a.extent.reference_point.y, a.extent.size.y / 2
        by, bh = b.extent.reference_point.y, b.extent.size.y / 2
        min_y = (ay - ah) - (by + bh)
        max_y = (ay + ah) - (by - bh)
        return min_y >= 0 or max_y >= 0

    @staticmethod
    def _rect_circle(rect: CollisionShape2D, circle: CollisionShape2D) -> bool:
        diff_x = abs(rect.extent.reference_point.x - circle.extent.reference_point.x)
        diff_y = abs(rect.extent.reference_point.y - circle.extent.reference_point.y)
        half_w = rect.extent.size.x / 2
        half_h = rect.extent.size.y / 2
        if diff_x > half_w + circle.extent.size.x:
            return False
        if diff_y > half_h + circle.extent.size.y:
            return False
        if diff_x <= half_w or diff_y <= half_h:
            return True
        corner = (diff_x - half_w) ** 2 + (diff_y - half_h) ** 2
        return corner <= circle.extent.size.x * circle.extent.size.x

    @staticmethod
    def _circle_circle(a: CollisionShape2D, b: CollisionShape2D) -> bool:
        dist = a.extent.reference_point.distance(b.extent.reference_point)
        return dist <= a.extent.size.x + b.extent.size.x