"""The playable world: the player, enemies, bullets, obstacles and pickups."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from .camera import Camera
from .collision import CollisionSystem
from .config import Config
from .controls import Input, InputSnapshot
from .entities import Bullet, Enemy, HealthPickup, Obstacle, Player
from .events import (
    BulletSpawnEvent,
    Event,
    EventBus,
    GameOverEvent,
    PlayerDamagedEvent,
)
from .scene_builder import SceneBuilder
from .scene_data import BLUE, GREEN, RED, WHITE, YELLOW, Color, load_scene
from .triggers import TriggerSystem

log = logging.getLogger(__name__)

DEFAULT_SCENE_PATH = "scenes/game_scene.json"
DARK_GRAY = Color(80, 80, 80, 255)

BULLET_SPAWN = "bullet_spawn"
PLAYER_DAMAGED = "player_damaged"
GAME_OVER = "game_over"


@dataclass(frozen=True)
class HudText:
    """One line of on-screen text; centred lines ignore ``x``."""

    text: str
    x: int
    y: int
    size: int
    color: Color
    centered: bool = False


class WorldScene:
    """The game world scene, loaded from a JSON scene description."""

    def __init__(
        self,
        config: Config,
        controls: Optional[Input] = None,
        scene_path: "str | os.PathLike[str]" = DEFAULT_SCENE_PATH,
    ) -> None:
        self.config = config
        self.controls: Input = controls if controls is not None else InputSnapshot()
        self.scene_path = scene_path
        self.scene_builder = SceneBuilder()
        self.event_bus = EventBus()
        self.collision = CollisionSystem()
        self.triggers = TriggerSystem()
        self.camera = Camera(config)

        self.player: Optional[Player] = None
        self.enemies: list[Enemy] = []
        self.bullets: list[Bullet] = []
        self.obstacles: list[Obstacle] = []
        self.health_pickups: list[HealthPickup] = []

        self._should_transition = False
        self._next_scene = ""
        self.paused = False

    def initialize(self) -> None:
        """Subscribe to game events and load the scene file."""
        self.event_bus.clear()
        for event_type in (BULLET_SPAWN, PLAYER_DAMAGED, GAME_OVER):
            self.event_bus.subscribe(event_type, self)
        self.initialize_from_json(self.scene_path)

    def on_notify(self, event: Event) -> None:
        """React to events published by the entities."""
        if event.type == BULLET_SPAWN:
            if not isinstance(event.data, BulletSpawnEvent):
                raise ValueError("invalid bullet spawn event data")
            self._spawn_bullet(event.data)
        elif event.type == PLAYER_DAMAGED:
            data = event.data
            if isinstance(data, PlayerDamagedEvent):
                log.info(
                    "Player took %.1f damage from %s, health: %.1f",
                    data.damage,
                    data.source,
                    data.new_health,
                )
        elif event.type == GAME_OVER:
            data = event.data
            if isinstance(data, GameOverEvent):
                log.info("Game over: %s", data.reason)

    def initialize_from_json(self, path: "str | os.PathLike[str]") -> None:
        """Rebuild the world from a scene file, raising if it is invalid."""
        self.collision.clear()
        self.triggers.clear()

        scene = load_scene(path)
        self.scene_builder.validate(scene)
        self.scene_builder.check_id_uniqueness(scene)

        builder = self.scene_builder
        self.player = builder.build_player(scene.player, self.event_bus)
        self.enemies = builder.build_enemies(scene.entities.enemies)
        self.obstacles = builder.build_obstacles(scene.entities.obstacles)
        self.health_pickups = builder.build_health_pickups(scene.entities.health_pickups)
        self.bullets = []

        self.collision.register(self.player)
        self.triggers.register_collidable(self.player)
        for enemy in self.enemies:
            self.collision.register(enemy)
        for obstacle in self.obstacles:
            self.collision.register(obstacle)
        for pickup in self.health_pickups:
            self.triggers.register_trigger(pickup)

        self.camera.initialize(self.player)

        self._should_transition = False
        self._next_scene = ""
        self.paused = False
        log.info("Scene loaded successfully: %s", scene.metadata.name)

    def update(self, delta_time: float) -> None:
        """Advance the world by one frame unless paused."""
        if self.paused:
            return
        self._update_entities(delta_time)
        self.collision.update()
        self.triggers.update()
        self._cleanup_entities()
        self.camera.update(self.player)

    def render(self, renderer: Any) -> None:
        """Draw the world and the HUD with the given renderer."""
        renderer.begin_frame()
        renderer.begin_mode_3d(self.camera)
        renderer.draw_ground()
        renderer.draw_obstacles(self.obstacles)
        renderer.draw_player(self.player)
        renderer.draw_enemies(self.enemies)
        renderer.draw_bullets(self.bullets)
        renderer.draw_health_pickups(self.health_pickups)
        renderer.draw_grid()
        renderer.end_mode_3d()

        renderer.draw_enemy_health_bars(self.enemies, self.camera)
        width = self.config.window.width
        for line in self.hud_lines():
            x = line.x
            if line.centered:
                x = (width - renderer.measure_text(line.text, line.size)) // 2
            renderer.draw_text(line.text, x, line.y, line.size, line.color)
        if self.config.debug.show_fps:
            renderer.draw_fps(10, 110)
        renderer.end_frame()

    def hud_lines(self) -> list:
        """The HUD text for the current state."""
        height = self.config.window.height
        lines = [
            HudText("WASD to move", 10, 10, 20, DARK_GRAY),
            HudText("Mouse to aim", 10, 35, 20, DARK_GRAY),
            HudText("Left click to shoot", 10, 60, 20, DARK_GRAY),
            HudText("ESC to return to menu", 10, 85, 20, DARK_GRAY),
            HudText(f"Health: {self.player.health:.0f}", 10, height - 60, 20, RED),
        ]
        alive_enemies = sum(1 for enemy in self.enemies if enemy.is_alive())
        lines.append(HudText(f"Enemies: {alive_enemies}", 10, height - 35, 20, BLUE))
        active_bullets = sum(1 for bullet in self.bullets if bullet.active)
        lines.append(HudText(f"Bullets: {active_bullets}", 10, height - 10, 20, YELLOW))

        middle = height // 2
        if self.paused:
            lines.append(HudText("PAUSED - Press P to resume", 0, middle, 32, WHITE, True))
        if not self.player.is_alive():
            lines.append(
                HudText(
                    "GAME OVER - Press R to restart or ESC for menu", 0, middle, 24, RED, True
                )
            )
        if alive_enemies == 0:
            lines.append(
                HudText(
                    "VICTORY! - Press R to restart or ESC for menu", 0, middle, 24, GREEN, True
                )
            )
        return lines

    def handle_input(self, delta_time: float) -> None:
        """Pause, leave for the menu, restart or toggle the FPS counter."""
        controls = self.controls
        if controls.is_pause_pressed():
            self.paused = not self.paused
        if controls.is_space_pressed():
            self._should_transition = True
            self._next_scene = "menu"
            return
        if controls.is_restart_pressed():
            self.initialize()
            return
        if controls.is_debug_pressed():
            self.config.debug.show_fps = not self.config.debug.show_fps

    def cleanup(self) -> None:
        """Drop every entity."""
        self.enemies = []
        self.bullets = []
        self.obstacles = []
        self.health_pickups = []
        self.player = None

    def name(self) -> str:
        return "game"

    def should_transition(self) -> bool:
        return self._should_transition

    def next_scene(self) -> str:
        return self._next_scene

    def _spawn_bullet(self, data: BulletSpawnEvent) -> None:
        bullet = Bullet(
            position=data.position,
            velocity=data.direction,
            speed=data.speed,
            lifetime=data.lifetime,
            damage=data.damage,
        )
        self.bullets.append(bullet)
        self.collision.register(bullet)

    def _update_entities(self, delta_time: float) -> None:
        for enemy in self.enemies:
            enemy.update(delta_time, self.player)
        for bullet in list(self.bullets):
            bullet.update(delta_time)
        for pickup in self.health_pickups:
            pickup.update(delta_time)
        if self.player.is_alive():
            self.player.update(
                delta_time, self.obstacles, self.camera, self.controls, self.collision
            )

    def _cleanup_entities(self) -> None:
        kept_bullets = []
        for bullet in self.bullets:
            if bullet.is_expired():
                self.collision.unregister(bullet)
            else:
                kept_bullets.append(bullet)
        self.bullets = kept_bullets

        kept_enemies = []
        for enemy in self.enemies:
            if enemy.is_alive():
                kept_enemies.append(enemy)
            else:
                self.collision.unregister(enemy)
        self.enemies = kept_enemies

        kept_pickups = []
        for pickup in self.health_pickups:
            if pickup.is_active():
                kept_pickups.append(pickup)
            else:
                self.triggers.unregister_trigger(pickup)
        self.health_pickups = kept_pickups