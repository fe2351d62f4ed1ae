"""Scenes and the manager that switches between them."""

from typing import Any, Optional, Protocol


class Scene(Protocol):
    """One screen of the game, such as the menu or the world."""

    def initialize(self) -> None: ...
    def update(self, delta_time: float) -> None: ...
    def render(self, renderer: Any) -> None: ...
    def handle_input(self, delta_time: float) -> None: ...
    def cleanup(self) -> None: ...
    def name(self) -> str: ...
    def should_transition(self) -> bool: ...
    def next_scene(self) -> str: ...


class SceneError(Exception):
    """A failure of the scene manager, classified by ``type``."""

    def __init__(self, type: str, message: str) -> None:
        super().__init__(message)
        self.type = type
        self.message = message


class SceneManager:
    """Holds the registered scenes and runs the current one."""

    def __init__(self, config=None) -> None:
        self.config = config
        self._scenes: dict = {}
        self._current: Optional[Scene] = None
        self.next_scene_name = ""
        self.transitioning = False

    @property
    def current_scene(self) -> Optional[Scene]:
        return self._current

    def register(self, name: str, scene: Scene) -> None:
        """Register a scene under a name, replacing any earlier one."""
        self._scenes[name] = scene

    def set_current(self, name: str) -> None:
        """Clean up the current scene and initialise and switch to another."""
        scene = self._scenes.get(name)
        if scene is None:
            raise SceneError("scene_not_found", f"Scene not found: {name}")
        if self._current is not None:
            try:
                self._current.cleanup()
            except Exception as exc:
                raise SceneError(
                    "cleanup_failed", f"Failed to cleanup current scene: {exc}"
                ) from exc
        try:
            scene.initialize()
        except Exception as exc:
            raise SceneError("init_failed", f"Failed to initialize scene: {exc}") from exc
        self._current = scene
        self.transitioning = False

    def _require_current(self) -> Scene:
        if self._current is None:
            raise SceneError("no_scene", "No current scene set")
        return self._current

    def update(self, delta_time: float) -> None:
        """Update the current scene, let it read input, and follow a requested switch."""
        scene = self._require_current()
        scene.update(delta_time)
        scene.handle_input(delta_time)
        if scene.should_transition() and not self.transitioning:
            self.next_scene_name = scene.next_scene()
            self.transitioning = True
            self.set_current(self.next_scene_name)

    def render(self, renderer: Any) -> None:
        """Draw the current scene."""
        self._require_current().render(renderer)

    def current_scene_name(self) -> str:
        """Name of the current scene, or an empty string."""
        if self._current is None:
            return ""
        return self._current.name()

    def cleanup(self) -> None:
        """Clean up the current scene, if any."""
        if self._current is not None:
            self._current.cleanup()