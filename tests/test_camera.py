import math

import pytest

from arpg.camera import Camera
from arpg.config import Config
from arpg.entities import Player
from arpg.geometry import Vector2, Vector3


def _setup(position=Vector3(2.0, 0.0, 3.0)):
    config = Config()
    camera = Camera(config)
    player = Player(speed=5.0, position=position)
    camera.initialize(player)
    return config, camera, player


def _center(config):
    return Vector2(config.window.width / 2, config.window.height / 2)


def test_default_offset_from_source():
    camera = Camera(Config())
    assert camera.offset == Vector3(0, 10, 8)


def test_initialize_places_camera_above_player():
    config, camera, player = _setup()
    assert camera.position == player.position + camera.offset
    assert camera.target == player.position
    assert camera.up == Vector3(0, 0, -1)
    assert camera.fovy == config.graphics.fov


def test_update_follows_player():
    _, camera, player = _setup()
    player.position = Vector3(-4.0, 0.0, 7.0)
    camera.update(player)
    assert camera.target == player.position
    assert camera.position == player.position + camera.offset


def test_custom_offset_is_used():
    config = Config()
    camera = Camera(config)
    camera.offset = Vector3(1.0, 5.0, 2.0)
    player = Player(speed=1.0, position=Vector3(3.0, 0.0, 3.0))
    camera.initialize(player)
    assert camera.position == player.position + camera.offset


def test_screen_center_maps_to_player():
    config, camera, player = _setup()
    world = camera.world_position_from_mouse(_center(config))
    assert world.x == pytest.approx(player.position.x, abs=1e-6)
    assert world.y == 0.0
    assert world.z == pytest.approx(player.position.z, abs=1e-6)


def test_mouse_right_of_center_maps_to_larger_x():
    config, camera, player = _setup()
    center = _center(config)
    world = camera.world_position_from_mouse(Vector2(center.x + 100, center.y))
    assert world.x > player.position.x
    assert world.z == pytest.approx(player.position.z, abs=1e-6)


def test_mouse_below_center_maps_to_larger_z():
    config, camera, player = _setup()
    center = _center(config)
    world = camera.world_position_from_mouse(Vector2(center.x, center.y + 100))
    assert world.z > player.position.z


def test_mouse_ray_starts_at_camera_and_is_unit_length():
    config, camera, _ = _setup()
    ray = camera.mouse_ray(Vector2(100, 200))
    assert ray.position == camera.position
    assert ray.direction.length() == pytest.approx(1.0)


def test_ground_point_lies_on_mouse_ray():
    _, camera, _ = _setup()
    mouse = Vector2(300, 150)
    ray = camera.mouse_ray(mouse)
    world = camera.world_position_from_mouse(mouse)
    along = world - ray.position
    cross = Vector3(
        along.y * ray.direction.z - along.z * ray.direction.y,
        along.z * ray.direction.x - along.x * ray.direction.z,
        along.x * ray.direction.y - along.y * ray.direction.x,
    )
    assert cross.length() == pytest.approx(0.0, abs=1e-6)


def test_uninitialized_camera_maps_to_origin():
    camera = Camera(Config())
    assert camera.world_position_from_mouse(Vector2(10, 10)) == Vector3()


def test_set_fov_updates_camera_and_config():
    config, camera, _ = _setup()
    camera.set_fov(60.0)
    assert camera.fovy == 60.0
    assert config.graphics.fov == 60.0


def test_wider_fov_spreads_the_same_mouse_offset_further():
    config, camera, player = _setup()
    mouse = Vector2(_center(config).x + 200, _center(config).y)
    narrow = camera.world_position_from_mouse(mouse)
    camera.set_fov(90.0)
    wide = camera.world_position_from_mouse(mouse)
    assert math.fabs(wide.x - player.position.x) > math.fabs(narrow.x - player.position.x)