"""Turns scene descriptions into game entities and checks them first."""

import logging

from .entities import Enemy, HealthPickup, Obstacle, Player
from .scene_data import (
    EnemyData,
    HealthPickupData,
    ObstacleData,
    PlayerData,
    SceneData,
    parse_color,
)

log = logging.getLogger(__name__)


class SceneValidationError(ValueError):
    """Raised when a scene description is inconsistent."""


class SceneBuilder:
    """Builds entities from scene data."""

    def build_player(self, data: PlayerData, event_bus) -> Player:
        """The player at its spawn point with the described stats."""
        return Player(
            speed=data.speed,
            event_bus=event_bus,
            position=data.spawn_point,
            health=data.health,
            max_health=data.max_health,
        )

    def build_enemies(self, data: "list[EnemyData]") -> "list[Enemy]":
        return [Enemy(position=e.position, health=e.health, speed=e.speed) for e in data]

    def build_obstacles(self, data: "list[ObstacleData]") -> "list[Obstacle]":
        """Boxes and cylinders; obstacles of other types are skipped."""
        obstacles = []
        for item in data:
            color = parse_color(item.color)
            if item.type == "box":
                obstacles.append(Obstacle.box(item.position, item.size, color))
            elif item.type == "cylinder":
                obstacles.append(Obstacle.cylinder(item.position, item.radius, item.height, color))
            else:
                log.warning("Unknown obstacle type: %s, skipping", item.type)
        return obstacles

    def build_health_pickups(self, data: "list[HealthPickupData]") -> "list[HealthPickup]":
        return [
            HealthPickup(position=p.position, heal_amount=p.heal_amount, radius=p.radius)
            for p in data
        ]

    def validate(self, data: SceneData) -> None:
        """Raise :class:`SceneValidationError` at the first inconsistent value."""
        player = data.player
        if player.speed <= 0:
            raise SceneValidationError(f"player speed must be positive, got {player.speed:f}")
        if player.health <= 0:
            raise SceneValidationError(f"player health must be positive, got {player.health:f}")
        if player.max_health <= 0:
            raise SceneValidationError(
                f"player max health must be positive, got {player.max_health:f}"
            )
        if player.health > player.max_health:
            raise SceneValidationError(
                f"player health ({player.health:f}) cannot exceed max health "
                f"({player.max_health:f})"
            )

        for index, enemy in enumerate(data.entities.enemies):
            if enemy.id == "":
                raise SceneValidationError(f"enemy {index}: ID cannot be empty")
            if enemy.health <= 0:
                raise SceneValidationError(
                    f"enemy {enemy.id}: health must be positive, got {enemy.health:f}"
                )
            if enemy.speed <= 0:
                raise SceneValidationError(
                    f"enemy {enemy.id}: speed must be positive, got {enemy.speed:f}"
                )

        for index, obstacle in enumerate(data.entities.obstacles):
            if obstacle.id == "":
                raise SceneValidationError(f"obstacle {index}: ID cannot be empty")
            if obstacle.type not in ("box", "cylinder"):
                raise SceneValidationError(
                    f"obstacle {obstacle.id}: type must be 'box' or 'cylinder', "
                    f"got {obstacle.type}"
                )
            if obstacle.type == "box":
                size = obstacle.size
                if size.x <= 0 or size.y <= 0 or size.z <= 0:
                    raise SceneValidationError(
                        f"obstacle {obstacle.id}: box size must be positive, "
                        f"got ({size.x:f}, {size.y:f}, {size.z:f})"
                    )
            else:
                if obstacle.radius <= 0:
                    raise SceneValidationError(
                        f"obstacle {obstacle.id}: cylinder radius must be positive, "
                        f"got {obstacle.radius:f}"
                    )
                if obstacle.height <= 0:
                    raise SceneValidationError(
                        f"obstacle {obstacle.id}: cylinder height must be positive, "
                        f"got {obstacle.height:f}"
                    )

        for index, pickup in enumerate(data.entities.health_pickups):
            if pickup.id == "":
                raise SceneValidationError(f"health pickup {index}: ID cannot be empty")
            if pickup.heal_amount <= 0:
                raise SceneValidationError(
                    f"health pickup {pickup.id}: heal amount must be positive, "
                    f"got {pickup.heal_amount:f}"
                )
            if pickup.radius <= 0:
                raise SceneValidationError(
                    f"health pickup {pickup.id}: radius must be positive, got {pickup.radius:f}"
                )

    def check_id_uniqueness(self, data: SceneData) -> None:
        """Raise :class:`SceneValidationError` if any entity ID is used twice."""
        seen: set = set()
        entities = data.entities
        for item in (*entities.enemies, *entities.obstacles, *entities.health_pickups):
            if item.id in seen:
                raise SceneValidationError(f"duplicate ID found: {item.id}")
            seen.add(item.id)