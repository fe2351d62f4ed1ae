"""Top-down camera that follows the player and maps the mouse onto the ground."""

import math

from .geometry import Ray, Vector2, Vector3

DEFAULT_OFFSET = Vector3(0.0, 10.0, 8.0)
TOP_DOWN_UP = Vector3(0.0, 0.0, -1.0)
PERSPECTIVE = "perspective"


def _cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


class Camera:
    """A perspective camera kept at a fixed offset from the player."""

    def __init__(self, config) -> None:
        self.config = config
        self.offset = DEFAULT_OFFSET
        self.position = Vector3()
        self.target = Vector3()
        self.up = Vector3()
        self.fovy = 0.0
        self.projection = PERSPECTIVE

    def initialize(self, player) -> None:
        """Place the camera above the player, looking down at it."""
        self.position = player.position + self.offset
        self.target = player.position
        self.up = TOP_DOWN_UP
        self.fovy = self.config.graphics.fov
        self.projection = PERSPECTIVE

    def update(self, player) -> None:
        """Follow the player."""
        self.position = player.position + self.offset
        self.target = player.position

    def mouse_ray(self, mouse_position: Vector2) -> Ray:
        """The ray from the camera through a point on the screen."""
        width = self.config.window.width
        height = self.config.window.height
        ndc_x = (2.0 * mouse_position.x) / width - 1.0 if width else 0.0
        ndc_y = 1.0 - (2.0 * mouse_position.y) / height if height else 0.0
        aspect = width / height if height else 1.0

        forward = (self.target - self.position).normalized()
        right = _cross(forward, self.up).normalized()
        true_up = _cross(right, forward)
        tan_half = math.tan(math.radians(self.fovy) / 2.0)

        direction = (
            forward
            + right * (ndc_x * tan_half * aspect)
            + true_up * (ndc_y * tan_half)
        ).normalized()
        return Ray(self.position, direction)

    def world_position_from_mouse(self, mouse_position: Vector2) -> Vector3:
        """Where the mouse ray meets the ground plane y = 0; the origin if it never does."""
        ray = self.mouse_ray(mouse_position)
        if ray.direction.y != 0:
            t = -ray.position.y / ray.direction.y
            return Vector3(
                ray.position.x + t * ray.direction.x,
                0.0,
                ray.position.z + t * ray.direction.z,
            )
        return Vector3()

    def set_fov(self, fov: float) -> None:
        """Change the field of view, keeping the configuration in step."""
        self.fovy = fov
        self.config.graphics.fov = fov