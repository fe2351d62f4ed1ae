"""Scene descriptions and their JSON form."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .geometry import Vector3


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255


BROWN = Color(127, 106, 79, 255)
GREEN = Color(0, 228, 48, 255)
DARK_GREEN = Color(0, 117, 44, 255)
RED = Color(230, 41, 55, 255)
BLUE = Color(0, 121, 241, 255)
YELLOW = Color(253, 249, 0, 255)
WHITE = Color(255, 255, 255, 255)
GRAY = Color(130, 130, 130, 255)
BLACK = Color(0, 0, 0, 255)

_COLORS = {
    "brown": BROWN,
    "green": GREEN,
    "darkgreen": DARK_GREEN,
    "red": RED,
    "blue": BLUE,
    "yellow": YELLOW,
    "white": WHITE,
    "gray": GRAY,
    "black": BLACK,
}


def parse_color(name: str) -> Color:
    """The colour with the given name; gray for unknown names."""
    return _COLORS.get(name, GRAY)


@dataclass
class PlayerData:
    spawn_point: Vector3 = field(default_factory=Vector3)
    speed: float = 0.0
    health: float = 0.0
    max_health: float = 0.0


@dataclass
class EnemyData:
    id: str = ""
    position: Vector3 = field(default_factory=Vector3)
    health: float = 0.0
    speed: float = 0.0


@dataclass
class ObstacleData:
    id: str = ""
    type: str = ""
    position: Vector3 = field(default_factory=Vector3)
    size: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0
    height: float = 0.0
    color: str = ""


@dataclass
class HealthPickupData:
    id: str = ""
    position: Vector3 = field(default_factory=Vector3)
    heal_amount: float = 0.0
    radius: float = 0.0


@dataclass
class SceneMetadata:
    name: str = ""
    version: str = ""
    description: str = ""


@dataclass
class SceneEntities:
    enemies: list = field(default_factory=list)
    obstacles: list = field(default_factory=list)
    health_pickups: list = field(default_factory=list)


def _get(data: dict, key: str) -> Any:
    if key in data:
        return data[key]
    wanted = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == wanted:
            return value
    return None


def _number(value: Any, where: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ValueError(f"{where}: expected a number, got {value!r}")


def _string(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ValueError(f"{where}: expected a string, got {value!r}")


def _object(value: Any, where: str) -> dict:
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise ValueError(f"{where}: expected an object, got {value!r}")


def _array(value: Any, where: str) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    raise ValueError(f"{where}: expected an array, got {value!r}")


def _vector(value: Any, where: str) -> Vector3:
    obj = _object(value, where)
    return Vector3(
        _number(_get(obj, "x"), f"{where}.x"),
        _number(_get(obj, "y"), f"{where}.y"),
        _number(_get(obj, "z"), f"{where}.z"),
    )


def _vector_dict(v: Vector3) -> dict:
    return {"x": v.x, "y": v.y, "z": v.z}


def _player(value: Any) -> PlayerData:
    obj = _object(value, "player")
    return PlayerData(
        spawn_point=_vector(_get(obj, "spawn_point"), "player.spawn_point"),
        speed=_number(_get(obj, "speed"), "player.speed"),
        health=_number(_get(obj, "health"), "player.health"),
        max_health=_number(_get(obj, "max_health"), "player.max_health"),
    )


def _enemy(value: Any, where: str) -> EnemyData:
    obj = _object(value, where)
    return EnemyData(
        id=_string(_get(obj, "id"), f"{where}.id"),
        position=_vector(_get(obj, "position"), f"{where}.position"),
        health=_number(_get(obj, "health"), f"{where}.health"),
        speed=_number(_get(obj, "speed"), f"{where}.speed"),
    )


def _obstacle(value: Any, where: str) -> ObstacleData:
    obj = _object(value, where)
    return ObstacleData(
        id=_string(_get(obj, "id"), f"{where}.id"),
        type=_string(_get(obj, "type"), f"{where}.type"),
        position=_vector(_get(obj, "position"), f"{where}.position"),
        size=_vector(_get(obj, "size"), f"{where}.size"),
        radius=_number(_get(obj, "radius"), f"{where}.radius"),
        height=_number(_get(obj, "height"), f"{where}.height"),
        color=_string(_get(obj, "color"), f"{where}.color"),
    )


def _pickup(value: Any, where: str) -> HealthPickupData:
    obj = _object(value, where)
    return HealthPickupData(
        id=_string(_get(obj, "id"), f"{where}.id"),
        position=_vector(_get(obj, "position"), f"{where}.position"),
        heal_amount=_number(_get(obj, "heal_amount"), f"{where}.heal_amount"),
        radius=_number(_get(obj, "radius"), f"{where}.radius"),
    )


def _obstacle_dict(obstacle: ObstacleData) -> dict:
    result = {
        "id": obstacle.id,
        "type": obstacle.type,
        "position": _vector_dict(obstacle.position),
        "size": _vector_dict(obstacle.size),
    }
    if obstacle.radius:
        result["radius"] = obstacle.radius
    if obstacle.height:
        result["height"] = obstacle.height
    result["color"] = obstacle.color
    return result


@dataclass
class SceneData:
    """A complete scene: metadata, the player and the world's entities."""

    metadata: SceneMetadata = field(default_factory=SceneMetadata)
    player: PlayerData = field(default_factory=PlayerData)
    entities: SceneEntities = field(default_factory=SceneEntities)

    @classmethod
    def from_dict(cls, data: Any) -> "SceneData":
        """Build a scene from a decoded JSON document; absent values are zero or empty."""
        if not isinstance(data, dict):
            raise ValueError("scene must be a JSON object")
        meta = _object(_get(data, "metadata"), "metadata")
        entities = _object(_get(data, "entities"), "entities")
        return cls(
            metadata=SceneMetadata(
                name=_string(_get(meta, "name"), "metadata.name"),
                version=_string(_get(meta, "version"), "metadata.version"),
                description=_string(_get(meta, "description"), "metadata.description"),
            ),
            player=_player(_get(data, "player")),
            entities=SceneEntities(
                enemies=[
                    _enemy(item, f"entities.enemies[{i}]")
                    for i, item in enumerate(_array(_get(entities, "enemies"), "entities.enemies"))
                ],
                obstacles=[
                    _obstacle(item, f"entities.obstacles[{i}]")
                    for i, item in enumerate(
                        _array(_get(entities, "obstacles"), "entities.obstacles")
                    )
                ],
                health_pickups=[
                    _pickup(item, f"entities.health_pickups[{i}]")
                    for i, item in enumerate(
                        _array(_get(entities, "health_pickups"), "entities.health_pickups")
                    )
                ],
            ),
        )

    def to_dict(self) -> dict:
        """The scene as the JSON document it is stored as."""
        return {
            "metadata": {
                "name": self.metadata.name,
                "version": self.metadata.version,
                "description": self.metadata.description,
            },
            "player": {
                "spawn_point": _vector_dict(self.player.spawn_point),
                "speed": self.player.speed,
                "health": self.player.health,
                "max_health": self.player.max_health,
            },
            "entities": {
                "enemies": [
                    {
                        "id": e.id,
                        "position": _vector_dict(e.position),
                        "health": e.health,
                        "speed": e.speed,
                    }
                    for e in self.entities.enemies
                ],
                "obstacles": [_obstacle_dict(o) for o in self.entities.obstacles],
                "health_pickups": [
                    {
                        "id": p.id,
                        "position": _vector_dict(p.position),
                        "heal_amount": p.heal_amount,
                        "radius": p.radius,
                    }
                    for p in self.entities.health_pickups
                ],
            },
        }


def load_scene(path: "str | os.PathLike[str]") -> SceneData:
    """Read a scene from a JSON file."""
    return SceneData.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))


def save_scene(scene: SceneData, path: "str | os.PathLike[str]") -> None:
    """Write a scene as indented JSON."""
    Path(path).write_text(json.dumps(scene.to_dict(), indent=2), encoding="utf-8")