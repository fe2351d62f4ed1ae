"""Vectors, rays and axis-aligned bounding boxes used across the game."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector2:
    """A point or direction on the screen."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vector3:
    """A point or direction in world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vector3":
        """Unit vector in the same direction; a zero vector stays zero."""
        length = self.length()
        if length == 0:
            return self
        return Vector3(self.x / length, self.y / length, self.z / length)


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned box given by its two opposite corners."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)

    def center(self) -> Vector3:
        """Midpoint of the box."""
        return Vector3(
            (self.min.x + self.max.x) / 2,
            (self.min.y + self.max.y) / 2,
            (self.min.z + self.max.z) / 2,
        )


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``position`` heading along ``direction``."""

    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)


def check_collision_boxes(a: BoundingBox, b: BoundingBox) -> bool:
    """True when the boxes overlap or touch."""
    return (
        a.max.x >= b.min.x
        and a.min.x <= b.max.x
        and a.max.y >= b.min.y
        and a.min.y <= b.max.y
        and a.max.z >= b.min.z
        and a.min.z <= b.max.z
    )


def check_collision_box_sphere(box: BoundingBox, center: Vector3, radius: float) -> bool:
    """True when the sphere reaches the box."""
    distance_sq = 0.0
    for value, low, high in (
        (center.x, box.min.x, box.max.x),
        (center.y, box.min.y, box.max.y),
        (center.z, box.min.z, box.max.z),
    ):
        if value < low:
            distance_sq += (value - low) ** 2
        elif value > high:
            distance_sq += (value - high) ** 2
    return distance_sq <= radius * radius