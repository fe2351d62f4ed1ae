"""Observer-style event bus and the game's event payloads."""

import threading
from dataclasses import dataclass, field
from typing import Any, Protocol

from .geometry import Vector3

EVENT_BULLET_SPAWN = "bullet_spawn"
EVENT_ENEMY_KILLED = "enemy_killed"
EVENT_PLAYER_DAMAGED = "player_damaged"
EVENT_HEALTH_PICKUP = "health_pickup"
EVENT_GAME_OVER = "game_over"
EVENT_VICTORY = "victory"


@dataclass(frozen=True)
class Event:
    """A named event with an arbitrary payload."""

    type: str
    data: Any = None


class Observer(Protocol):
    """Anything that can receive events from an :class:`EventBus`."""

    def on_notify(self, event: Event) -> None:
        """Handle one delivered event."""


class NotificationError(Exception):
    """Raised after notifying when one or more observers failed."""

    def __init__(self, errors: list) -> None:
        self.errors = list(errors)
        details = "; ".join(
            f"observer notification failed: {error}" for error in self.errors
        )
        super().__init__(f"notification errors occurred: {details}")


class EventBus:
    """Routes events to the observers subscribed to their type. Thread safe."""

    def __init__(self) -> None:
        self._observers: dict = {}
        self._lock = threading.RLock()

    def subscribe(self, event_type: str, observer: Observer) -> None:
        """Add an observer for an event type."""
        if observer is None:
            raise ValueError("cannot subscribe a missing observer")
        with self._lock:
            self._observers.setdefault(event_type, []).append(observer)

    def unsubscribe(self, event_type: str, observer: Observer) -> None:
        """Remove one subscription of an observer; unknown ones are ignored."""
        with self._lock:
            observers = self._observers.get(event_type)
            if observers is None:
                return
            for index, candidate in enumerate(observers):
                if candidate is observer:
                    del observers[index]
                    break
            if not observers:
                del self._observers[event_type]

    def notify(self, event: Event) -> None:
        """Deliver an event to every subscriber of its type.

        Every observer is called even if some fail; failures are then
        raised together as a :class:`NotificationError`.
        """
        with self._lock:
            observers = list(self._observers.get(event.type, ()))
        errors = []
        for observer in observers:
            try:
                observer.on_notify(event)
            except Exception as exc:
                errors.append(exc)
        if errors:
            raise NotificationError(errors)

    def observer_count(self, event_type: str) -> int:
        """Number of observers subscribed to an event type."""
        with self._lock:
            return len(self._observers.get(event_type, ()))

    def clear(self) -> None:
        """Remove every subscription."""
        with self._lock:
            self._observers = {}

    def event_types(self) -> list:
        """Event types that currently have observers."""
        with self._lock:
            return list(self._observers)


@dataclass(frozen=True)
class BulletSpawnEvent:
    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)
    speed: float = 0.0
    lifetime: float = 0.0
    damage: float = 0.0


@dataclass(frozen=True)
class EnemyKilledEvent:
    enemy_id: str = ""
    position: Vector3 = field(default_factory=Vector3)
    killer: str = ""


@dataclass(frozen=True)
class PlayerDamagedEvent:
    damage: float = 0.0
    source: str = ""
    new_health: float = 0.0
    position: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class HealthPickupEvent:
    heal_amount: float = 0.0
    pickup_id: str = ""
    position: Vector3 = field(default_factory=Vector3)
    new_health: float = 0.0


@dataclass(frozen=True)
class GameOverEvent:
    reason: str = ""
    final_score: int = 0
    playtime: float = 0.0


@dataclass(frozen=True)
class VictoryEvent:
    enemies_killed: int = 0
    time_elapsed: float = 0.0
    score: int = 0


def bullet_spawn_event(position, direction, speed, lifetime, damage) -> Event:
    """Event asking for a bullet to be spawned."""
    payload = BulletSpawnEvent(position, direction, speed, lifetime, damage)
    return Event(EVENT_BULLET_SPAWN, payload)


def enemy_killed_event(enemy_id, position, killer) -> Event:
    """Event announcing that an enemy was defeated."""
    payload = EnemyKilledEvent(enemy_id, position, killer)
    return Event(EVENT_ENEMY_KILLED, payload)


def player_damaged_event(damage, source, new_health, position) -> Event:
    """Event announcing that the player took damage."""
    payload = PlayerDamagedEvent(damage, source, new_health, position)
    return Event(EVENT_PLAYER_DAMAGED, payload)


def health_pickup_event(heal_amount, pickup_id, position, new_health) -> Event:
    """Event announcing that the player picked up health."""
    payload = HealthPickupEvent(heal_amount, pickup_id, position, new_health)
    return Event(EVENT_HEALTH_PICKUP, payload)


def game_over_event(reason, final_score, playtime) -> Event:
    """Event announcing the end of the game."""
    payload = GameOverEvent(reason, final_score, playtime)
    return Event(EVENT_GAME_OVER, payload)


def victory_event(enemies_killed, time_elapsed, score) -> Event:
    """Event announcing a victory."""
    payload = VictoryEvent(enemies_killed, time_elapsed, score)
    return Event(EVENT_VICTORY, payload)