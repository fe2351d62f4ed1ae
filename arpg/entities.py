"""Game entities: the player, enemies, bullets, obstacles and pickups."""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional, Protocol, Sequence

from .collision import Collidable, CollisionSystem
from .controls import Input
from .events import bullet_spawn_event, game_over_event, player_damaged_event
from .geometry import BoundingBox, Vector2, Vector3

log = logging.getLogger(__name__)

PLAYER_CONTACT_DAMAGE = 10.0
ENEMY_ATTACK_COOLDOWN = 1.0
GUN_LENGTH = 0.8
SHOT_SPEED = 15.0
SHOT_LIFETIME = 3.0
SHOT_DAMAGE = 25.0


class ActionType(Enum):
    """Kinds of action an entity can ask the game to perform."""

    SPAWN_BULLET = auto()


@dataclass(frozen=True)
class Action:
    """A request from an entity, with a payload matching its type."""

    type: ActionType
    data: Any = None


@dataclass(frozen=True)
class SpawnBulletData:
    """Payload of a bullet spawn request."""

    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)
    speed: float = 0.0
    lifetime: float = 0.0
    damage: float = 0.0


class ObstacleType(Enum):
    """Shape of an obstacle."""

    BOX = auto()
    CYLINDER = auto()


def _cube_around(center: Vector3, half: float) -> BoundingBox:
    offset = Vector3(half, half, half)
    return BoundingBox(center - offset, center + offset)


def _upright_box(base: Vector3, radius: float, height: float) -> BoundingBox:
    return BoundingBox(
        Vector3(base.x - radius, base.y, base.z - radius),
        Vector3(base.x + radius, base.y + height, base.z + radius),
    )


@dataclass(eq=False)
class Bullet:
    """A projectile flying across the ground plane."""

    position: Vector3
    velocity: Vector3
    speed: float
    lifetime: float
    damage: float
    radius: float = 0.1
    active: bool = True

    def update(self, delta_time: float) -> None:
        """Age the bullet and move it; it deactivates when its lifetime runs out."""
        if not self.active:
            return
        self.lifetime -= delta_time
        if self.lifetime <= 0:
            self.active = False
            return
        step = self.speed * delta_time
        self.position = Vector3(
            self.position.x + self.velocity.x * step,
            self.position.y,
            self.position.z + self.velocity.z * step,
        )

    def is_expired(self) -> bool:
        return not self.active or self.lifetime <= 0

    def deactivate(self) -> None:
        self.active = False

    def bounding_box(self) -> BoundingBox:
        return _cube_around(self.position, self.radius)

    def collision_tags(self) -> list[str]:
        return ["bullet"]

    def on_collision(self, other: Collidable) -> None:
        """Damage enemies that are hit; stop at enemies and obstacles."""
        for tag in other.collision_tags():
            if tag == "enemy":
                if not isinstance(other, Enemy):
                    raise TypeError("bullet collided with a non-enemy entity tagged 'enemy'")
                other.take_damage(self.damage)
                self.deactivate()
            elif tag == "obstacle":
                self.deactivate()

    def is_active(self) -> bool:
        return self.active


@dataclass(eq=False)
class Enemy:
    """A hostile that walks towards the player and hurts it on contact."""

    position: Vector3
    health: float
    speed: float
    max_health: Optional[float] = None
    radius: float = 0.6
    height: float = 1.5
    active: bool = True
    target: Optional["Player"] = None
    attack_cooldown: float = 0.0

    def __post_init__(self) -> None:
        if self.max_health is None:
            self.max_health = self.health

    def update(self, delta_time: float, player: Optional["Player"]) -> None:
        """Cool down the attack and step towards the player unless already close."""
        if not self.active or player is None:
            return
        if self.attack_cooldown > 0:
            self.attack_cooldown -= delta_time
        dx = player.position.x - self.position.x
        dz = player.position.z - self.position.z
        distance = math.sqrt(dx * dx + dz * dz)
        if distance > 1.0:
            step = self.speed * delta_time
            self.position = Vector3(
                self.position.x + dx / distance * step,
                self.position.y,
                self.position.z + dz / distance * step,
            )

    def bounding_box(self) -> BoundingBox:
        return _upright_box(self.position, self.radius, self.height)

    def take_damage(self, damage: float) -> None:
        self.health -= damage
        if self.health <= 0:
            self.health = 0.0
            self.active = False

    def is_alive(self) -> bool:
        return self.active and self.health > 0

    def health_percent(self) -> float:
        if not self.max_health:
            return 0.0
        return self.health / self.max_health

    def head_position(self) -> Vector3:
        return Vector3(self.position.x, self.position.y + 1.0, self.position.z)

    def health_bar_position(self) -> Vector3:
        return Vector3(self.position.x, self.position.y + 2.0, self.position.z)

    def collision_tags(self) -> list[str]:
        return ["enemy"]

    def on_collision(self, other: Collidable) -> None:
        """Hit the player when the attack is ready."""
        for tag in other.collision_tags():
            if tag == "player" and self.attack_cooldown <= 0:
                if not isinstance(other, Player):
                    raise TypeError("enemy collided with a non-player entity tagged 'player'")
                other.take_damage(PLAYER_CONTACT_DAMAGE)
                self.attack_cooldown = ENEMY_ATTACK_COOLDOWN

    def is_active(self) -> bool:
        return self.is_alive()


@dataclass(eq=False)
class HealthPickup:
    """A trigger that heals the player once."""

    position: Vector3
    heal_amount: float = 25.0
    radius: float = 0.3
    active: bool = True

    def update(self, delta_time: float) -> None:
        """Pickups are static."""

    def bounding_box(self) -> BoundingBox:
        return _cube_around(self.position, self.radius)

    def collision_tags(self) -> list[str]:
        return ["health_pickup"]

    def trigger_bounds(self) -> BoundingBox:
        return self.bounding_box()

    def trigger_tags(self) -> list[str]:
        return ["health_pickup"]

    def on_trigger_enter(self, other: Collidable) -> None:
        """Heal a player that enters and use the pickup up."""
        if not self.active:
            return
        for tag in other.collision_tags():
            if tag == "player" and isinstance(other, Player):
                other.heal(self.heal_amount)
                self.active = False
                log.info("Player healed for %.0f health!", self.heal_amount)

    def is_active(self) -> bool:
        return self.active


@dataclass(eq=False)
class Obstacle:
    """A solid box or cylinder in the world."""

    position: Vector3
    type: ObstacleType
    color: Any = None
    size: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0
    height: float = 0.0
    active: bool = True

    @classmethod
    def box(cls, position: Vector3, size: Vector3, color: Any) -> "Obstacle":
        """A box centred on ``position``."""
        return cls(position=position, type=ObstacleType.BOX, color=color, size=size)

    @classmethod
    def cylinder(cls, position: Vector3, radius: float, height: float, color: Any) -> "Obstacle":
        """An upright cylinder standing on ``position``."""
        return cls(
            position=position,
            type=ObstacleType.CYLINDER,
            color=color,
            radius=radius,
            height=height,
        )

    def bounding_box(self) -> BoundingBox:
        if self.type is ObstacleType.BOX:
            half = self.size * 0.5
            return BoundingBox(self.position - half, self.position + half)
        if self.type is ObstacleType.CYLINDER:
            return _upright_box(self.position, self.radius, self.height)
        return BoundingBox()

    def is_box(self) -> bool:
        return self.type is ObstacleType.BOX

    def is_cylinder(self) -> bool:
        return self.type is ObstacleType.CYLINDER

    def collision_tags(self) -> list[str]:
        return ["obstacle"]

    def on_collision(self, other: Collidable) -> None:
        """An obstacle touched by the player is knocked out of play."""
        tags = other.collision_tags()
        if "player" in tags:
            self.active = False
            log.info("Collision with obstacle detected: %s", tags)

    def is_active(self) -> bool:
        return self.active


class CameraLike(Protocol):
    """What the player needs from a camera: mapping the mouse to the ground."""

    def world_position_from_mouse(self, mouse_position: Vector2) -> Vector3:
        ...


@dataclass(eq=False)
class Player:
    """The player character; events are published on ``event_bus`` when set."""

    speed: float
    event_bus: Any = field(default=None, repr=False)
    position: Vector3 = field(default_factory=Vector3)
    rotation: float = 0.0
    radius: float = 0.5
    height: float = 1.0
    health: float = 100.0
    max_health: float = 100.0

    def update(
        self,
        delta_time: float,
        obstacles: Sequence[Obstacle],
        camera: CameraLike,
        controls: Input,
        collision: CollisionSystem,
    ) -> None:
        """Aim at the mouse, move as the keys say, and shoot on click."""
        self._update_rotation(camera, controls)
        self._update_movement(delta_time, controls, collision)
        if controls.is_mouse_left_pressed():
            self._shoot(camera, controls)

    def _notify(self, event: Any, what: str) -> None:
        try:
            self.event_bus.notify(event)
        except Exception as exc:
            log.error("Error notifying %s: %s", what, exc)

    def _shoot(self, camera: CameraLike, controls: Input) -> None:
        if self.event_bus is None:
            return
        tip = self.gun_tip()
        target = camera.world_position_from_mouse(controls.mouse_position())
        direction = Vector3(target.x - tip.x, 0.0, target.z - tip.z).normalized()
        event = bullet_spawn_event(tip, direction, SHOT_SPEED, SHOT_LIFETIME, SHOT_DAMAGE)
        self._notify(event, "bullet spawn")

    def _update_rotation(self, camera: CameraLike, controls: Input) -> None:
        target = camera.world_position_from_mouse(controls.mouse_position())
        self.rotation = math.atan2(target.z - self.position.z, target.x - self.position.x)

    def _update_movement(
        self, delta_time: float, controls: Input, collision: CollisionSystem
    ) -> None:
        step = self.speed * delta_time
        moves = (
            (controls.is_up_down(), Vector3(0.0, 0.0, -step)),
            (controls.is_down_down(), Vector3(0.0, 0.0, step)),
            (controls.is_left_down(), Vector3(-step, 0.0, 0.0)),
            (controls.is_right_down(), Vector3(step, 0.0, 0.0)),
        )
        for held, delta in moves:
            if held:
                candidate = self.position + delta
                if collision.check_movement(self, candidate):
                    self.position = candidate

    def bounding_box(self) -> BoundingBox:
        return _upright_box(self.position, self.radius, self.height)

    def collision_tags(self) -> list[str]:
        return ["player"]

    def on_collision(self, other: Collidable) -> None:
        """The player reacts to nothing by itself."""

    def is_active(self) -> bool:
        return self.is_alive()

    def gun_tip(self) -> Vector3:
        return Vector3(
            self.position.x + GUN_LENGTH * math.cos(self.rotation),
            self.position.y + 1.0,
            self.position.z + GUN_LENGTH * math.sin(self.rotation),
        )

    def direction(self) -> Vector3:
        return Vector3(math.cos(self.rotation), 0.0, math.sin(self.rotation))

    def take_damage(self, damage: float) -> None:
        """Lose health, announcing the hit and, on death, the game over."""
        old_health = self.health
        self.health = max(self.health - damage, 0.0)
        if self.event_bus is None:
            return
        self._notify(
            player_damaged_event(damage, "enemy", self.health, self.position), "player damage"
        )
        if old_health > 0 and self.health <= 0:
            self._notify(game_over_event("player_died", 0, 0), "game over")

    def is_alive(self) -> bool:
        return self.health > 0

    def heal(self, amount: float) -> None:
        self.health = min(self.health + amount, self.max_health)