from dataclasses import dataclass, field

import pytest

from arpg.collision import CollisionSystem
from arpg.geometry import BoundingBox, Vector3
from arpg.triggers import TriggerSystem


def box(x0, y0, z0, x1, y1, z1):
    return BoundingBox(Vector3(x0, y0, z0), Vector3(x1, y1, z1))


@dataclass(eq=False)
class MockCollidable:
    box: BoundingBox = field(default_factory=BoundingBox)
    tags: list = field(default_factory=list)
    active: bool = True
    calls: list = field(default_factory=list)

    def bounding_box(self):
        return self.box

    def collision_tags(self):
        return self.tags

    def on_collision(self, other):
        self.calls.append(other)

    def is_active(self):
        return self.active


@dataclass(eq=False)
class MockTriggerable:
    bounds: BoundingBox = field(default_factory=BoundingBox)
    tags: list = field(default_factory=list)
    active: bool = True
    entered: list = field(default_factory=list)

    def trigger_bounds(self):
        return self.bounds

    def trigger_tags(self):
        return self.tags

    def on_trigger_enter(self, other):
        self.entered.append(other)

    def is_active(self):
        return self.active


@dataclass(eq=False)
class DualObject:
    box: BoundingBox
    collision: list
    trigger: list
    active: bool = True
    collided_with: list = field(default_factory=list)
    entered: list = field(default_factory=list)

    def bounding_box(self):
        return self.box

    def collision_tags(self):
        return self.collision

    def on_collision(self, other):
        self.collided_with.append(other)

    def is_active(self):
        return self.active

    def trigger_bounds(self):
        return self.box

    def trigger_tags(self):
        return self.trigger

    def on_trigger_enter(self, other):
        self.entered.append(other)


@pytest.fixture
def triggers():
    return TriggerSystem()


@pytest.fixture
def collision():
    return CollisionSystem()


def test_new_system_is_empty(triggers):
    assert triggers.triggers == ()
    assert triggers.collidables == ()


def test_registration(triggers):
    trigger = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    triggers.register_trigger(trigger)
    assert len(triggers.triggers) == 1
    assert triggers.triggers[0] is trigger


def test_unregistration(triggers):
    first = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    second = MockTriggerable(box(2, 0, 0, 3, 1, 1), ["damage_zone"])
    triggers.register_trigger(first)
    triggers.register_trigger(second)
    triggers.unregister_trigger(first)
    assert len(triggers.triggers) == 1
    assert triggers.triggers[0] is second


def test_collidable_unregistration(triggers):
    first = MockCollidable(tags=["player"])
    second = MockCollidable(tags=["player"])
    triggers.register_collidable(first)
    triggers.register_collidable(second)
    triggers.unregister_collidable(first)
    triggers.unregister_collidable(MockCollidable(tags=["enemy"]))
    assert len(triggers.collidables) == 1
    assert triggers.collidables[0] is second


def test_clear(triggers):
    triggers.register_trigger(MockTriggerable(tags=["health_pickup"]))
    triggers.register_trigger(MockTriggerable(tags=["damage_zone"]))
    triggers.register_collidable(MockCollidable(tags=["player"]))
    triggers.clear()
    assert triggers.triggers == ()
    assert triggers.collidables == ()


def test_trigger_rules(triggers):
    pickup = MockTriggerable(tags=["health_pickup"])
    player = MockCollidable(tags=["player"])
    enemy = MockCollidable(tags=["enemy"])
    unknown = MockTriggerable(tags=["unknown_trigger"])
    assert triggers.should_trigger(pickup, player) is True
    assert triggers.should_trigger(pickup, enemy) is False
    assert triggers.should_trigger(unknown, player) is False


def test_activation(triggers, collision):
    pickup = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    player = MockCollidable(box(0.5, 0, 0, 1.5, 1, 1), ["player"])
    triggers.register_trigger(pickup)
    collision.register(player)
    triggers.register_collidable(player)
    triggers.update()
    assert len(pickup.entered) == 1
    assert pickup.entered[0] is player


def test_no_activation_when_apart(triggers):
    trigger = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    player = MockCollidable(box(5, 0, 0, 6, 1, 1), ["player"])
    triggers.register_trigger(trigger)
    triggers.register_collidable(player)
    triggers.update()
    assert trigger.entered == []


def test_inactive_objects(triggers):
    inactive_trigger = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"], active=False)
    player = MockCollidable(box(0.5, 0, 0, 1.5, 1, 1), ["player"])
    triggers.register_trigger(inactive_trigger)
    triggers.register_collidable(player)
    triggers.update()
    assert inactive_trigger.entered == []

    active_trigger = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    inactive_player = MockCollidable(box(0.5, 0, 0, 1.5, 1, 1), ["player"], active=False)
    triggers.clear()
    triggers.register_trigger(active_trigger)
    triggers.register_collidable(inactive_player)
    triggers.update()
    assert active_trigger.entered == []


def test_fires_on_every_update(triggers):
    trigger = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    player = MockCollidable(box(0.5, 0, 0, 1.5, 1, 1), ["player"])
    triggers.register_trigger(trigger)
    triggers.register_collidable(player)
    for _ in range(3):
        triggers.update()
    assert len(trigger.entered) == 3


def test_check_trigger_collision(triggers):
    base = box(0, 0, 0, 1, 1, 1)
    assert triggers.check_trigger_collision(base, box(0, 0, 0, 1, 1, 1)) is True
    assert triggers.check_trigger_collision(base, box(0.5, 0, 0, 1.5, 1, 1)) is True
    assert triggers.check_trigger_collision(base, box(2, 0, 0, 3, 1, 1)) is False


def test_edge_cases(triggers):
    triggers.update()
    trigger = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    triggers.register_trigger(trigger)
    triggers.update()
    assert trigger.entered == []

    second = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    player = MockCollidable(box(0.5, 0, 0, 1.5, 1, 1), ["player"])
    triggers.register_trigger(second)
    triggers.register_collidable(player)
    triggers.update()
    assert trigger.entered == [player]
    assert second.entered == [player]


def test_collision_and_trigger_together(triggers, collision):
    obstacle = MockCollidable(box(5, 0, 0, 6, 1, 1), ["obstacle"])
    pickup = MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"])
    player = MockCollidable(box(0, 0, 0, 1, 1, 1), ["player"])
    collision.register(obstacle)
    collision.register(player)
    triggers.register_collidable(player)
    triggers.register_trigger(pickup)

    assert collision.check_movement(player, Vector3(0.5, 0.5, 0.5)) is True
    triggers.update()
    assert pickup.entered == [player]
    assert collision.check_movement(player, Vector3(5.5, 0.5, 0.5)) is False


def test_systems_are_independent(triggers, collision):
    collision.register(MockCollidable(box(0, 0, 0, 1, 1, 1), ["player"]))
    triggers.register_trigger(MockTriggerable(box(0, 0, 0, 1, 1, 1), ["health_pickup"]))
    assert len(collision) == 1
    assert len(triggers.triggers) == 1
    collision.clear()
    assert len(collision) == 0
    assert len(triggers.triggers) == 1
    triggers.clear()
    assert len(triggers.triggers) == 0


def test_realistic_game_scenario(triggers, collision):
    player = MockCollidable(box(0, 0, 0, 1, 1, 1), ["player"])
    wall = MockCollidable(box(3, 0, 0, 4, 1, 1), ["obstacle"])
    enemy = MockCollidable(box(6, 0, 0, 7, 1, 1), ["enemy"])
    pickup = MockTriggerable(box(1, 0, 0, 2, 1, 1), ["health_pickup"])
    collision.register(player)
    triggers.register_collidable(player)
    collision.register(wall)
    collision.register(enemy)
    triggers.register_trigger(pickup)

    assert collision.check_movement(player, Vector3(1, 0.5, 0.5)) is True
    assert collision.check_movement(player, Vector3(1.5, 0.5, 0.5)) is True
    assert collision.check_movement(player, Vector3(3.5, 0.5, 0.5)) is False
    assert collision.check_movement(player, Vector3(6.5, 0.5, 0.5)) is False

    player.box = box(1, 0, 0, 2, 1, 1)
    triggers.update()
    assert pickup.entered == [player]

    player.box = box(6, 0, 0, 7, 1, 1)
    collision.update()
    assert player.calls == [enemy]
    assert enemy.calls == [player]


def test_object_in_both_systems(triggers, collision):
    dual = DualObject(box(0, 0, 0, 1, 1, 1), ["obstacle"], ["health_pickup"])
    player = MockCollidable(box(0.5, 0, 0, 1.5, 1, 1), ["player"])
    collision.register(dual)
    triggers.register_trigger(dual)
    collision.register(player)
    triggers.register_collidable(player)
    collision.update()
    triggers.update()
    assert dual.collided_with == [player]
    assert dual.entered == [player]