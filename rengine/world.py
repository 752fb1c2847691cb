"""The world that owns objects, its camera and the engine loop."""

from __future__ import annotations

import enum
from typing import TypeVar

from rengine.mathutil import make_projection_matrix
from rengine.objects import EmptyWorldObject, WorldObject
from rengine.settings import Window

T = TypeVar("T", bound=EmptyWorldObject)


class ProjectionMode(enum.Enum):
    ORTHOGRAPHIC = 0
    PERSPECTIVE = 1


class Camera(WorldObject):
    """World object that supplies the projection matrix."""

    def __init__(self) -> None:
        super().__init__()
        self.projection_type = ProjectionMode.ORTHOGRAPHIC
        self._projection: list[float] | None = None

    def projection_matrix(self, width: int, height: int) -> list[float] | None:
        """Projection for a viewport, computed once and then reused."""
        if self._projection is None and self.projection_type is ProjectionMode.ORTHOGRAPHIC:
            self._projection = make_projection_matrix(0, width, 0, height)
        return self._projection


class World:
    """Owns every instantiated object and hands out their ids."""

    _instance: World | None = None

    def __init__(self) -> None:
        self._objects: list[EmptyWorldObject] = []
        self._camera: Camera | None = None
        self._next_id = 0

    @classmethod
    def instance(cls) -> World:
        """The shared world, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def instantiate(self, object_type: type[T]) -> T:
        """Create an object, initialise it, give it an id and register it."""
        obj = object_type()
        if not isinstance(obj, EmptyWorldObject):
            raise TypeError(f"{object_type.__name__} is not a world object")
        obj.init()
        obj.id = self._next_id
        self._next_id += 1
        self._objects.append(obj)
        return obj

    def objects(self) -> list[EmptyWorldObject]:
        """A copy of the registered objects in creation order."""
        return list(self._objects)

    def camera(self) -> Camera:
        """The main camera, instantiated on first use."""
        if self._camera is None:
            self._camera = self.instantiate(Camera)
        return self._camera


class Engine:
    """Starts and ticks the world's objects."""

    def __init__(self, world: World | None = None, window: Window | None = None) -> None:
        self.world = world if world is not None else World.instance()
        self.window = window

    def init(self) -> None:
        """Start every object in the world."""
        for obj in self.world.objects():
            obj.start()

    def loop(self, delta_time: float) -> None:
        """Advance every processing object by one frame."""
        for obj in self.world.objects():
            if obj.processing:
                obj.loop(delta_time)

    def end(self) -> None:
        """Stop the main window's loop."""
        if self.window is None:
            raise RuntimeError("no window attached to the engine")
        self.window.running = False