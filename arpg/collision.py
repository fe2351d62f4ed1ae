"""Collision detection between registered game objects."""

from itertools import combinations
from typing import Iterator, Protocol

from .geometry import (
    BoundingBox,
    Vector3,
    check_collision_box_sphere,
    check_collision_boxes,
)

COLLISION_RULES: dict[str, frozenset[str]] = {
    "player": frozenset({"obstacle", "enemy", "health_pickup"}),
    "bullet": frozenset({"obstacle", "enemy"}),
    "enemy": frozenset({"player", "bullet", "obstacle"}),
    "obstacle": frozenset({"player", "bullet", "enemy", "obstacle"}),
    "health_pickup": frozenset({"player"}),
}


class Collidable(Protocol):
    """An object that takes part in collision detection."""

    def bounding_box(self) -> BoundingBox:
        ...

    def collision_tags(self) -> list[str]:
        ...

    def on_collision(self, other: "Collidable") -> None:
        ...

    def is_active(self) -> bool:
        ...


def is_spherelike(box: BoundingBox) -> bool:
    """True when the box is smaller than one unit along every axis."""
    width = box.max.x - box.min.x
    height = box.max.y - box.min.y
    depth = box.max.z - box.min.z
    return width < 1.0 and height < 1.0 and depth < 1.0


def penetration_depth(min1: float, max1: float, min2: float, max2: float) -> float:
    """Length of the overlap of two intervals, zero when they are apart."""
    if min1 > max2 or max1 < min2:
        return 0.0
    return min(max1, max2) - max(min1, min2)


def _increases_penetration(
    original: BoundingBox, moved: BoundingBox, target: BoundingBox
) -> bool:
    before_x = penetration_depth(original.min.x, original.max.x, target.min.x, target.max.x)
    before_z = penetration_depth(original.min.z, original.max.z, target.min.z, target.max.z)
    after_x = penetration_depth(moved.min.x, moved.max.x, target.min.x, target.max.x)
    after_z = penetration_depth(moved.min.z, moved.max.z, target.min.z, target.max.z)
    return after_x > before_x or after_z > before_z


class CollisionSystem:
    """Keeps the collidable objects and reports collisions between them."""

    def __init__(self) -> None:
        self._collidables: list[Collidable] = []

    @property
    def collidables(self) -> tuple:
        """The registered objects in registration order."""
        return tuple(self._collidables)

    def __len__(self) -> int:
        return len(self._collidables)

    def __iter__(self) -> Iterator[Collidable]:
        return iter(list(self._collidables))

    def __contains__(self, obj: object) -> bool:
        return any(candidate is obj for candidate in self._collidables)

    def register(self, obj: Collidable) -> None:
        """Add an object to the system."""
        self._collidables.append(obj)

    def unregister(self, obj: Collidable) -> None:
        """Remove an object; objects not registered are ignored."""
        for index, candidate in enumerate(self._collidables):
            if candidate is obj:
                del self._collidables[index]
                return

    def clear(self) -> None:
        """Remove every object."""
        self._collidables = []

    def update(self) -> None:
        """Call ``on_collision`` on both objects of every colliding pair."""
        for first, second in combinations(list(self._collidables), 2):
            if self.should_collide(first, second) and self.check_collision(first, second):
                first.on_collision(second)
                second.on_collision(first)

    def should_collide(self, a: Collidable, b: Collidable) -> bool:
        """True when the collision rules let the two objects interact."""
        if a is b:
            return False
        if not a.is_active() or not b.is_active():
            return False
        tags_b = b.collision_tags()
        for tag in a.collision_tags():
            allowed = COLLISION_RULES.get(tag)
            if allowed is not None and any(other in allowed for other in tags_b):
                return True
        return False

    def check_collision(self, a: Collidable, b: Collidable) -> bool:
        """True when the shapes of the two objects touch.

        Small boxes are treated as spheres inscribed in their width.
        """
        box_a = a.bounding_box()
        box_b = b.bounding_box()
        if is_spherelike(box_a):
            radius = (box_a.max.x - box_a.min.x) / 2
            return check_collision_box_sphere(box_b, box_a.center(), radius)
        if is_spherelike(box_b):
            radius = (box_b.max.x - box_b.min.x) / 2
            return check_collision_box_sphere(box_a, box_b.center(), radius)
        return check_collision_boxes(box_a, box_b)

    def check_movement(self, obj: Collidable, new_position: Vector3) -> bool:
        """True when ``obj`` may move so that its box is centred on ``new_position``.

        An object already touching an enemy may still move as long as the
        move does not push it further into that enemy.
        """
        original = obj.bounding_box()
        offset = new_position - original.center()
        moved = BoundingBox(original.min + offset, original.max + offset)

        for other in list(self._collidables):
            if other is obj or not other.is_active():
                continue
            if not self.should_collide(obj, other):
                continue
            other_box = other.bounding_box()
            if not check_collision_boxes(moved, other_box):
                continue
            if (
                "enemy" in other.collision_tags()
                and check_collision_boxes(original, other_box)
                and not _increases_penetration(original, moved, other_box)
            ):
                continue
            return False
        return True