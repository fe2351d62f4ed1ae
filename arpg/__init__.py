"""Game logic for a top-down 3D action RPG: geometry, configuration, events,
collision and triggers, entities, camera, scene files and scenes."""

__version__ = "0.1.0"