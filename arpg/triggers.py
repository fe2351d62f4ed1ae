"""Trigger volumes that react when matching objects enter them."""

from typing import Protocol

from .collision import Collidable
from .geometry import BoundingBox, check_collision_boxes

TRIGGER_RULES: dict[str, frozenset[str]] = {
    "health_pickup": frozenset({"player"}),
}


class Triggerable(Protocol):
    """A volume that fires when an allowed collidable overlaps it."""

    def trigger_bounds(self) -> BoundingBox:
        ...

    def trigger_tags(self) -> list[str]:
        ...

    def on_trigger_enter(self, other: Collidable) -> None:
        ...

    def is_active(self) -> bool:
        ...


def _remove(items: list, obj: object) -> None:
    for index, candidate in enumerate(items):
        if candidate is obj:
            del items[index]
            return


class TriggerSystem:
    """Checks registered triggers against registered collidables."""

    def __init__(self) -> None:
        self._triggers: list[Triggerable] = []
        self._collidables: list[Collidable] = []

    @property
    def triggers(self) -> tuple:
        """The registered triggers in registration order."""
        return tuple(self._triggers)

    @property
    def collidables(self) -> tuple:
        """The registered collidables in registration order."""
        return tuple(self._collidables)

    def register_trigger(self, trigger: Triggerable) -> None:
        """Add a trigger."""
        self._triggers.append(trigger)

    def unregister_trigger(self, trigger: Triggerable) -> None:
        """Remove a trigger; unknown ones are ignored."""
        _remove(self._triggers, trigger)

    def register_collidable(self, collidable: Collidable) -> None:
        """Add an object that can set off triggers."""
        self._collidables.append(collidable)

    def unregister_collidable(self, collidable: Collidable) -> None:
        """Remove a collidable; unknown ones are ignored."""
        _remove(self._collidables, collidable)

    def clear(self) -> None:
        """Remove every trigger and collidable."""
        self._triggers = []
        self._collidables = []

    def update(self) -> None:
        """Fire every active trigger for each allowed collidable overlapping it."""
        collidables = list(self._collidables)
        for trigger in list(self._triggers):
            if not trigger.is_active():
                continue
            bounds = trigger.trigger_bounds()
            for collidable in collidables:
                if not collidable.is_active():
                    continue
                if self.should_trigger(trigger, collidable) and self.check_trigger_collision(
                    bounds, collidable.bounding_box()
                ):
                    trigger.on_trigger_enter(collidable)

    def should_trigger(self, trigger: Triggerable, collidable: Collidable) -> bool:
        """True when the trigger rules let the collidable set off the trigger."""
        collidable_tags = collidable.collision_tags()
        for tag in trigger.trigger_tags():
            allowed = TRIGGER_RULES.get(tag)
            if allowed is not None and any(other in allowed for other in collidable_tags):
                return True
        return False

    def check_trigger_collision(
        self, trigger_bounds: BoundingBox, collidable_bounds: BoundingBox
    ) -> bool:
        """True when the two boxes overlap or touch."""
        return check_collision_boxes(trigger_bounds, collidable_bounds)