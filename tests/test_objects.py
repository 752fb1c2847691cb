import pytest

from rengine.objects import Component, EmptyWorldObject, GameObject, WorldObject
from rengine.vector2d import Vector2D


class RecordingComponent(Component):
    def __init__(self):
        super().__init__()
        self.events = []

    def init(self):
        self.events.append("init")

    def start(self):
        self.events.append("start")

    def loop(self, delta_time):
        self.events.append(("loop", delta_time))


class DerivedComponent(RecordingComponent):
    pass


class RecordingObject(EmptyWorldObject):
    def __init__(self):
        super().__init__()
        self.ticks = []

    def loop(self, delta_time):
        super().loop(delta_time)
        self.ticks.append(delta_time)


def make_world_object():
    obj = WorldObject()
    obj.init()
    return obj


def test_destroy_immediately_kills_object():
    obj = GameObject()
    obj.destroy()
    assert obj.alive is False
    assert obj.processing is False


def test_destroy_with_delay_keeps_object():
    obj = GameObject()
    obj.destroy(2.5)
    assert obj.alive is True


def test_add_component_attaches_and_initialises():
    owner = EmptyWorldObject()
    component = owner.add_component(RecordingComponent)
    assert component.get_parent() is owner
    assert component.events == ["init"]
    assert owner.get_component(RecordingComponent) is component


def test_get_component_matches_exact_type_only():
    owner = EmptyWorldObject()
    owner.add_component(DerivedComponent)
    assert owner.get_component(RecordingComponent) is None


def test_remove_component_detaches():
    owner = EmptyWorldObject()
    component = owner.add_component(RecordingComponent)
    owner.remove_component(component)
    assert component.get_parent() is None
    assert owner.get_component(RecordingComponent) is None


def test_start_starts_components():
    owner = EmptyWorldObject()
    component = owner.add_component(RecordingComponent)
    owner.start()
    assert component.events == ["init", "start"]


def test_loop_skips_non_processing_members():
    owner = EmptyWorldObject()
    active = owner.add_component(RecordingComponent)
    idle = owner.add_component(DerivedComponent)
    idle.processing = False
    child = RecordingObject()
    paused = RecordingObject()
    paused.processing = False
    owner.add_child(child)
    owner.add_child(paused)
    owner.loop(0.5)
    assert active.events == ["init", ("loop", 0.5)]
    assert idle.events == ["init"]
    assert child.ticks == [0.5]
    assert paused.ticks == []


def test_children_lookup_and_removal():
    owner = EmptyWorldObject()
    first, second = EmptyWorldObject(), EmptyWorldObject()
    first.name, second.name = "left", "right"
    owner.add_child(first)
    owner.add_child(second)
    assert owner.children() == [first, second]
    assert owner.child_by_name("right") is second
    assert owner.child_by_index(0) is first
    assert owner.child_by_index(5) is None
    assert first.get_parent() is owner
    owner.remove_child(first)
    assert owner.children() == [second]
    assert first.get_parent() is None
    assert owner.child_by_name("left") is None


def test_world_object_init_sets_default_size():
    obj = make_world_object()
    assert obj.size == Vector2D(100, 100)
    assert obj.position == Vector2D(0, 0)
    assert obj.rotation == 0.0


def test_setting_position_marks_updated():
    obj = make_world_object()
    obj.updated = False
    obj.position = Vector2D(3, 4)
    assert obj.updated is True
    assert obj.position == Vector2D(3, 4)


def test_child_follows_parent_position():
    parent = make_world_object()
    child = make_world_object()
    parent.add_child(child)
    child.position = Vector2D(5, 7)
    offset = Vector2D(child.relative_position.x, child.relative_position.y)
    parent.position = Vector2D(10, 20)
    assert child.position == parent.position + offset
    assert child.relative_position == offset


def test_child_follows_parent_size():
    parent = make_world_object()
    child = make_world_object()
    parent.add_child(child)
    child.size = Vector2D(30, 40)
    offset = Vector2D(child.relative_size.x, child.relative_size.y)
    parent.size = Vector2D(200, 300)
    assert child.size == parent.size + offset


def test_child_rotation_uses_relative_rotation():
    parent = make_world_object()
    child = make_world_object()
    parent.add_child(child)
    child.rotation = 30
    assert child.relative_rotation == parent.rotation - 30
    relative = child.relative_rotation
    parent.rotation = 10
    assert child.rotation == pytest.approx(10 + relative)