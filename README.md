# arpg

The game logic of a top-down 3D action RPG, kept apart from any window or
graphics layer: a player who moves and shoots, enemies that chase and attack,
obstacles, health pickups, a collision system, a trigger system, an event bus,
JSON scene files, a JSON configuration file and a scene manager.

The package has no runtime dependencies.

## What the package does not do

There is no command that starts a game, no window, no drawing and no reading
of the keyboard or mouse. The caller supplies these:

- **Input** comes as an `arpg.controls.InputSnapshot` (or any object with the
  same methods, described by the `arpg.controls.Input` protocol), one per
  frame.
- **Drawing** is done by a renderer object passed to the scenes' `render`
  methods. `WorldScene.render` calls `begin_frame`, `begin_mode_3d`,
  `draw_ground`, `draw_obstacles`, `draw_player`, `draw_enemies`,
  `draw_bullets`, `draw_health_pickups`, `draw_grid`, `end_mode_3d`,
  `draw_enemy_health_bars`, `measure_text`, `draw_text`, `draw_fps` and
  `end_frame` on it; `MenuScene.render` calls `begin_frame`,
  `clear_background`, `measure_text`, `draw_text`, `draw_rectangle`,
  `draw_rectangle_lines` and `end_frame`.
- **Scene files** are not shipped. `WorldScene` reads
  `scenes/game_scene.json` unless given another `scene_path`.

## Geometry

`arpg.geometry` holds the frozen value types `Vector2`, `Vector3` (with `+`,
`-`, scaling, `length()` and `normalized()`), `BoundingBox` (with `center()`)
and `Ray`, and the tests `check_collision_boxes` and
`check_collision_box_sphere`. Touching boxes count as colliding.

## Configuration

`arpg.config.load` reads a configuration file (`config.json` by default),
first writing one with default values if it does not exist yet.

```python
from arpg.config import load

cfg = load("config.json")
cfg.graphics.fov = 60.0
cfg.save("backup/config.json")  # creates the directory if needed
```

Settings are grouped into window, graphics, audio, gameplay and debug
sections (`WindowConfig`, `GraphicsConfig`, `AudioConfig`, `GameplayConfig`,
`DebugConfig`), all held by a `Config`; `Config()` holds the defaults.
`Config.to_dict` and `Config.from_dict` convert to and from plain
dictionaries. Settings missing from a loaded file are zero, false or empty
rather than their defaults; values of the wrong type raise `ValueError`.

## Events

Game objects talk to each other through an `arpg.events.EventBus`. An
observer is any object with an `on_notify(event)` method.

```python
from arpg.events import EventBus, bullet_spawn_event
from arpg.geometry import Vector3


class Logger:
    def on_notify(self, event):
        print(event.type, event.data)


bus = EventBus()
bus.subscribe("bullet_spawn", Logger())
bus.notify(bullet_spawn_event(Vector3(1, 0, 1), Vector3(0, 0, 1), 10.0, 5.0, 25.0))
```

Every subscribed observer is called, even when an earlier one fails; the
failures are gathered and raised afterwards as a `NotificationError`.
`observer_count`, `event_types`, `unsubscribe` and `clear` manage the
subscriptions. Other events are built with `enemy_killed_event`,
`player_damaged_event`, `health_pickup_event`, `game_over_event` and
`victory_event`.

`arpg.dispatch.EventDispatcher` is a simpler registry of plain callables:
`register_handler(event_type, handler)` and `emit(event_type, data)`.

## Entities

`arpg.entities` provides `Player`, `Enemy`, `Bullet`, `Obstacle` (built with
`Obstacle.box` or `Obstacle.cylinder`) and `HealthPickup`.

- A `Player` given an event bus announces each hit with a `player_damaged`
  event and its death with a `game_over` event. `Player.update` aims at the
  mouse through a camera, moves as the held keys say (checking each step with
  the collision system) and publishes a `bullet_spawn` event on a left click.
- An `Enemy` walks towards the player until within one unit, and on contact
  deals 10 damage with a one-second cooldown.
- A `Bullet` moves along its velocity until its lifetime runs out, damages
  enemies it hits and stops at enemies and obstacles.
- A `HealthPickup` heals a player that enters it once, up to its maximum.

## Collision and triggers

`arpg.collision.CollisionSystem` finds overlaps between registered objects by
their tags (player, enemy, bullet, obstacle, health_pickup) and decides
whether a move is allowed. An object touching an enemy can still move away
from it or slide along it, but not push further in; other objects block any
move that would overlap them. Boxes smaller than one unit along every axis
are treated as spheres in `check_collision`.

```python
from arpg.collision import CollisionSystem
from arpg.entities import Obstacle, Player
from arpg.geometry import Vector3
from arpg.scene_data import parse_color

player = Player(speed=5.0)
wall = Obstacle.box(Vector3(3, 0.5, 0), Vector3(1, 1, 1), parse_color("brown"))

collision = CollisionSystem()
collision.register(player)
collision.register(wall)
collision.check_movement(player, Vector3(1.0, 0.5, 0.0))  # True: clear of the wall
collision.update()  # calls on_collision on both sides of each overlap
```

`arpg.triggers.TriggerSystem` handles volumes that react to being entered
without blocking, such as health pickups. Triggers are registered with
`register_trigger` and the objects that set them off with
`register_collidable`; `update` calls `on_trigger_enter` on every active
trigger for each allowed collidable overlapping it, every time it runs.

## Camera

`arpg.camera.Camera` keeps a fixed offset above the player, looking down.
`world_position_from_mouse` casts a ray through a screen point, using the
window size and field of view from the configuration, and returns where it
meets the ground plane.

## Scenes

A scene file describes the player, enemies, obstacles and health pickups.

```python
from arpg.events import EventBus
from arpg.scene_builder import SceneBuilder
from arpg.scene_data import load_scene

data = load_scene("scenes/game_scene.json")
builder = SceneBuilder()
builder.validate(data)             # raises SceneValidationError
builder.check_id_uniqueness(data)  # raises SceneValidationError

player = builder.build_player(data.player, EventBus())
enemies = builder.build_enemies(data.entities.enemies)
obstacles = builder.build_obstacles(data.entities.obstacles)
pickups = builder.build_health_pickups(data.entities.health_pickups)
```

`SceneData.from_dict`, `SceneData.to_dict` and `save_scene` handle the JSON
form; `parse_color` maps colour names to `Color` values, gray for unknown
names.

`arpg.scene.SceneManager` registers named scenes, switches between them with
`set_current` and drives the current one with `update` and `render`,
following a transition when the scene asks for one. Failures are raised as
`SceneError`, whose `type` is `scene_not_found`, `cleanup_failed`,
`init_failed` or `no_scene`.

Two scenes are provided:

- `arpg.world_scene.WorldScene` is the playing field. It loads its scene
  file on `initialize`, steps entities, collisions and triggers on `update`,
  and lists its on-screen text through `hud_lines`. In `handle_input`, P
  toggles pause, Space switches to the menu, R restarts and F3 toggles the
  FPS counter.
- `arpg.menu_scene.MenuScene` is the title menu. A click on the start button
  or Enter switches to the game; Escape raises `MenuExit`.

```python
from arpg.config import Config
from arpg.controls import InputSnapshot, Key
from arpg.menu_scene import MenuScene
from arpg.scene import SceneManager
from arpg.world_scene import WorldScene

cfg = Config()
menu = MenuScene(cfg)
world = WorldScene(cfg, scene_path="scenes/game_scene.json")

manager = SceneManager(cfg)
manager.register("menu", menu)
manager.register("game", world)
manager.set_current("menu")

menu.controls = InputSnapshot(pressed={Key.ENTER})
manager.update(1 / 60)
manager.current_scene_name()  # "game"
```