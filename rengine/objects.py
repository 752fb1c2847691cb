"""Game objects, their components and the world-object hierarchy."""

from __future__ import annotations

from typing import TypeVar

from rengine.transformation import Transformation2D
from rengine.vector2d import Vector2D

C = TypeVar("C", bound="Component")


class GameObject:
    """Base of everything that lives in the world and takes part in the loop."""

    def __init__(self) -> None:
        self.id = 0
        self.processing = True
        self.alive = True
        self.initialised = False

    def init(self) -> None:
        """Called once when the object is created by the world."""
        self.initialised = True

    def start(self) -> None:
        """Called once when the engine starts."""

    def loop(self, delta_time: float) -> None:
        """Called every frame while the object is processing."""

    def destroy(self, time: float = 0.0) -> None:
        """Destroy the object now; a non-zero delay leaves it alive."""
        if time == 0.0:
            self.alive = False
            self.processing = False


class Component(GameObject):
    """Behaviour attached to an EmptyWorldObject."""

    def __init__(self) -> None:
        super().__init__()
        self.parent: EmptyWorldObject | None = None

    def loop(self, delta_time: float) -> None:
        """Components do nothing per frame unless they override this."""

    def get_parent(self) -> EmptyWorldObject | None:
        """The object this component is attached to, if any."""
        return self.parent


class EmptyWorldObject(GameObject):
    """A world object with children and components but no placement."""

    def __init__(self) -> None:
        super().__init__()
        self._children: list[EmptyWorldObject] = []
        self._components: list[Component] = []
        self._parent: EmptyWorldObject | None = None
        self.name: str | None = None

    def start(self) -> None:
        for component in self._components:
            component.start()

    def loop(self, delta_time: float) -> None:
        for child in self._children:
            if child.processing:
                child.loop(delta_time)
        for component in self._components:
            if component.processing:
                component.loop(delta_time)

    def add_component(self, component_type: type[C]) -> C:
        """Create, attach and initialise a component of the given type."""
        component = component_type()
        component.parent = self
        component.init()
        self._components.append(component)
        return component

    def remove_component(self, component: Component) -> None:
        """Detach a component; unknown components are ignored."""
        for attached in self._components:
            if attached is component:
                attached.parent = None
                self._components.remove(attached)
                break

    def get_component(self, component_type: type[C]) -> C | None:
        """First component whose type is exactly the given type."""
        return next(
            (c for c in self._components if type(c) is component_type), None
        )

    def add_child(self, child: EmptyWorldObject) -> None:
        """Make another object a child of this one."""
        if not any(existing is child for existing in self._children):
            self._children.append(child)
        child.set_parent(self)

    def remove_child(self, child: EmptyWorldObject) -> None:
        """Remove a child and clear its parent."""
        for existing in self._children:
            if existing is child:
                self._children.remove(existing)
                break
        child.set_parent(None)

    def children(self) -> list[EmptyWorldObject]:
        """A copy of the list of children."""
        return list(self._children)

    def child_by_name(self, name: str) -> EmptyWorldObject | None:
        """First child with the given name, or None."""
        return next((c for c in self._children if c.name == name), None)

    def child_by_index(self, index: int) -> EmptyWorldObject | None:
        """Child at a position counted from 0, or None when out of range."""
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    def set_parent(self, parent: EmptyWorldObject | None) -> None:
        self._parent = parent

    def get_parent(self) -> EmptyWorldObject | None:
        return self._parent


class WorldObject(EmptyWorldObject):
    """An object with a position, size and rotation in the world."""

    def __init__(self) -> None:
        super().__init__()
        self.updated = True
        self.transformation = Transformation2D()

    def init(self) -> None:
        super().init()
        self.transformation = Transformation2D.create(0, 0, 100, 100, 0)

    def _world_parent(self) -> WorldObject | None:
        parent = self.get_parent()
        return parent if isinstance(parent, WorldObject) else None

    def _world_children(self) -> list[WorldObject]:
        return [c for c in self.children() if isinstance(c, WorldObject)]

    @property
    def position(self) -> Vector2D:
        return self.transformation.position

    @position.setter
    def position(self, translation: Vector2D) -> None:
        translation = Vector2D(translation.x, translation.y)
        self.transformation.position = translation
        self.updated = True
        parent = self._world_parent()
        if parent is not None:
            self.transformation.relative_position = parent.position - translation
        for child in self._world_children():
            child.position = translation + child.relative_position

    @property
    def size(self) -> Vector2D:
        return self.transformation.size

    @size.setter
    def size(self, scale: Vector2D) -> None:
        scale = Vector2D(scale.x, scale.y)
        self.transformation.size = scale
        self.updated = True
        parent = self._world_parent()
        if parent is not None:
            self.transformation.relative_size = parent.size - scale
        for child in self._world_children():
            child.size = scale + child.relative_size

    @property
    def rotation(self) -> float:
        return self.transformation.rotation

    @rotation.setter
    def rotation(self, rotation: float) -> None:
        rotation = float(rotation)
        self.transformation.rotation = rotation
        self.updated = True
        parent = self._world_parent()
        if parent is not None:
            self.transformation.relative_rotation = parent.rotation - rotation
        for child in self._world_children():
            child.rotation = rotation + child.relative_rotation

    @property
    def relative_position(self) -> Vector2D:
        return self.transformation.relative_position

    @property
    def relative_size(self) -> Vector2D:
        return self.transformation.relative_size

    @property
    def relative_rotation(self) -> float:
        return self.transformation.relative_rotation