"""Game configuration stored as JSON."""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

DEFAULT_PATH = "config.json"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _setting(default: Any, key: str) -> Any:
    return field(default=default, metadata={"json": key})


@dataclass
class WindowConfig:
    """Window settings."""

    width: int = _setting(1024, "width")
    height: int = _setting(768, "height")
    title: str = _setting("ARPG - 3D Scene", "title")
    fullscreen: bool = _setting(False, "fullscreen")
    vsync: bool = _setting(True, "vsync")
    target_fps: int = _setting(60, "target_fps")


@dataclass
class GraphicsConfig:
    """Graphics settings."""

    fov: float = _setting(45.0, "fov")
    draw_wires: bool = _setting(False, "draw_wires")
    draw_grid: bool = _setting(True, "draw_grid")
    anti_alias: bool = _setting(True, "anti_alias")


@dataclass
class AudioConfig:
    """Audio settings."""

    master_volume: float = _setting(1.0, "master_volume")
    sfx_volume: float = _setting(1.0, "sfx_volume")
    music_volume: float = _setting(0.7, "music_volume")


@dataclass
class GameplayConfig:
    """Gameplay tuning values."""

    player_speed: float = _setting(5.0, "player_speed")
    bullet_speed: float = _setting(15.0, "bullet_speed")
    bullet_life: float = _setting(10.0, "bullet_lifetime")
    enemy_speed: float = _setting(2.0, "enemy_speed")
    enemy_health: float = _setting(100.0, "enemy_health")
    bullet_damage: float = _setting(25.0, "bullet_damage")


@dataclass
class DebugConfig:
    """Debug display switches."""

    show_fps: bool = _setting(True, "show_fps")
    show_collision: bool = _setting(False, "show_collision")
    show_health_bars: bool = _setting(True, "show_health_bars")


def _lookup(data: dict, key: str) -> Any:
    if key in data:
        return data[key]
    wanted = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == wanted:
            return value
    return None


def _coerce(value: Any, kind: type, key: str) -> Any:
    if kind is bool:
        if isinstance(value, bool):
            return value
    elif kind is int:
        if isinstance(value, int) and not isinstance(value, bool):
            if not _INT32_MIN <= value <= _INT32_MAX:
                raise ValueError(f"value {value} for {key!r} is out of range")
            return value
    elif kind is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif kind is str:
        if isinstance(value, str):
            return value
    raise ValueError(f"cannot use {value!r} as {kind.__name__} for {key!r}")


def _section_from_dict(section_type: type, data: Any, section_key: str) -> Any:
    values = {f.name: f.type() for f in fields(section_type)}
    if data is None:
        return section_type(**values)
    if not isinstance(data, dict):
        raise ValueError(f"section {section_key!r} must be an object")
    for f in fields(section_type):
        key = f.metadata.get("json", f.name)
        raw = _lookup(data, key)
        if raw is not None:
            values[f.name] = _coerce(raw, f.type, f"{section_key}.{key}")
    return section_type(**values)


def _section_to_dict(section: Any) -> dict:
    return {f.metadata.get("json", f.name): getattr(section, f.name) for f in fields(section)}


@dataclass
class Config:
    """All game settings; a fresh instance holds the defaults."""

    window: WindowConfig = field(default_factory=WindowConfig)
    graphics: GraphicsConfig = field(default_factory=GraphicsConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    gameplay: GameplayConfig = field(default_factory=GameplayConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)

    def to_dict(self) -> dict:
        """The configuration as the JSON document it is stored as."""
        return {f.name: _section_to_dict(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a configuration from a decoded JSON document.

        Settings absent from the document are zero, false or empty.
        """
        if not isinstance(data, dict):
            raise ValueError("configuration must be a JSON object")
        sections = {
            f.name: _section_from_dict(f.type, _lookup(data, f.name), f.name)
            for f in fields(cls)
        }
        return cls(**sections)

    def save(self, path: "str | os.PathLike[str]") -> None:
        """Write the configuration as indented JSON, creating directories."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")


def load(path: "str | os.PathLike[str]" = DEFAULT_PATH) -> Config:
    """Read the configuration; write and return the defaults if the file is missing."""
    target = Path(path)
    if not target.exists():
        config = Config()
        config.save(target)
        return config
    data = json.loads(target.read_text(encoding="utf-8"))
    return Config.from_dict(data)