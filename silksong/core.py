"""Game objects and the core execution loop: growing activators and collisions."""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from silksong.color import ColorPalette
from silksong.music_model import Scale
from silksong.state import GameState, GameStateMachine

Position = tuple[float, float]


class ObjectKind(Enum):
    """What a game object is."""

    NOTE = "note"
    ACTIVATOR = "activator"


class ActivatorType(Enum):
    """The main activator starts an execution; passive ones are started by others."""

    MAIN = "main"
    PASSIVE = "passive"


class ActivatorState(Enum):
    """Whether an activator is currently growing."""

    DISABLED = "disabled"
    ENABLED = "enabled"


@dataclass(eq=False)
class GameObject:
    """A note or an activator placed in the level."""

    id: int
    kind: ObjectKind
    position: Position
    manually_placed: bool = False
    activator_type: ActivatorType | None = None
    state: ActivatorState = ActivatorState.DISABLED
    size: float = 0.0
    color: ColorPalette = ColorPalette.BLUE_VIOLET
    inactivated: list[int] | None = None

    def is_active(self) -> bool:
        """True if this is an enabled activator."""
        return self.state is ActivatorState.ENABLED


@dataclass
class LevelConfig:
    """Settings of a level."""

    grow_factor: float
    scale: Scale


@dataclass(frozen=True)
class NotePlayedEvent:
    """An activator reached a note."""

    source: int
    note: int


@dataclass(frozen=True)
class ActivatorEnabledEvent:
    """An activator was enabled, by another activator or (source None) at start."""

    source: int | None
    target: int


def _distance(a: Position, b: Position) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


class CoreGame:
    """Holds the level's objects and runs the execution of a built setup."""

    def __init__(self, config: LevelConfig, states: GameStateMachine) -> None:
        self.config = config
        self.states = states
        self.objects: dict[int, GameObject] = {}
        self._ids = itertools.count(1)

    def _add(self, obj: GameObject) -> GameObject:
        self.objects[obj.id] = obj
        return obj

    def spawn_note(self, position: Sequence[float], manually_placed: bool = False) -> GameObject:
        """Place a note at ``position``."""
        x, y = position
        return self._add(
            GameObject(next(self._ids), ObjectKind.NOTE, (float(x), float(y)), manually_placed)
        )

    def spawn_activator(
        self,
        position: Sequence[float],
        activator_type: ActivatorType = ActivatorType.PASSIVE,
        color: ColorPalette = ColorPalette.BLUE_VIOLET,
        manually_placed: bool = False,
    ) -> GameObject:
        """Place a disabled activator at ``position``."""
        x, y = position
        return self._add(
            GameObject(
                next(self._ids),
                ObjectKind.ACTIVATOR,
                (float(x), float(y)),
                manually_placed,
                activator_type=activator_type,
                color=color,
            )
        )

    def despawn(self, object_id: int) -> None:
        """Remove an object from the level."""
        self.get(object_id)
        del self.objects[object_id]

    def get(self, object_id: int) -> GameObject:
        """Return the object with ``object_id``; raises KeyError if there is none."""
        try:
            return self.objects[object_id]
        except KeyError:
            raise KeyError(f"no object with id {object_id}") from None

    def _activators(self) -> list[GameObject]:
        return [o for o in self.objects.values() if o.kind is ObjectKind.ACTIVATOR]

    def _notes(self) -> list[GameObject]:
        return [o for o in self.objects.values() if o.kind is ObjectKind.NOTE]

    def enter_execution(self) -> list[ActivatorEnabledEvent]:
        """Enable every main activator; returns the enable events."""
        events = [
            ActivatorEnabledEvent(source=None, target=obj.id)
            for obj in self._activators()
            if obj.activator_type is ActivatorType.MAIN
        ]
        for event in events:
            self.activate_activator(event)
        return events

    def exit_execution(self) -> None:
        """Disable all activators."""
        for obj in self._activators():
            self.disable_activator(obj.id)

    def update(self, delta: float) -> list[NotePlayedEvent]:
        """Advance the execution by ``delta`` seconds; returns the notes played."""
        if self.states.game_state is not GameState.EXECUTE:
            return []
        played, enabled = self._grow_and_collide(delta)
        for event in enabled:
            self.activate_activator(event)
        self._handle_object_activated(played, enabled)
        self._check_all_played()
        return played

    def _grow_and_collide(
        self, delta: float
    ) -> tuple[list[NotePlayedEvent], list[ActivatorEnabledEvent]]:
        played: list[NotePlayedEvent] = []
        enabled: list[ActivatorEnabledEvent] = []
        for activator in self._activators():
            if not activator.is_active():
                continue
            activator.size += delta * self.config.grow_factor
            if activator.inactivated is None:
                continue
            # the list is sorted by distance, so the first miss ends the search
            for other_id in activator.inactivated:
                other = self.objects.get(other_id)
                if other is None:
                    continue
                if _distance(other.position, activator.position) >= activator.size:
                    break
                if other.kind is ObjectKind.NOTE:
                    played.append(NotePlayedEvent(source=activator.id, note=other_id))
                else:
                    enabled.append(ActivatorEnabledEvent(source=activator.id, target=other_id))
        return played, enabled

    def _handle_object_activated(
        self, played: list[NotePlayedEvent], enabled: list[ActivatorEnabledEvent]
    ) -> None:
        pairs = [(e.source, e.note) for e in played] + [(e.source, e.target) for e in enabled]
        for source, target in pairs:
            if source is None:
                continue
            activator = self.objects.get(source)
            if activator is not None and activator.inactivated is not None:
                activator.inactivated = [i for i in activator.inactivated if i != target]

    def _check_all_played(self) -> None:
        all_done = True
        for obj in list(self.objects.values()):
            if obj.inactivated is None:
                continue
            if obj.inactivated:
                all_done = False
            else:
                self.disable_activator(obj.id)
        if all_done:
            self.states.set_next(GameState.BUILD)

    def activate_activator(self, event: ActivatorEnabledEvent) -> None:
        """Enable the event's target and give it every other object, nearest first."""
        if self.states.game_state is not GameState.EXECUTE:
            return
        target = self.objects.get(event.target)
        if target is None or target.kind is not ObjectKind.ACTIVATOR:
            return
        others = [o for o in self._notes() + self._activators() if o.id != target.id]
        others.sort(key=lambda o: _distance(o.position, target.position))
        target.state = ActivatorState.ENABLED
        target.size = 0.0
        target.inactivated = [o.id for o in others]

    def disable_activator(self, object_id: int) -> None:
        """Stop an activator and clear its remaining objects."""
        obj = self.get(object_id)
        obj.inactivated = None
        obj.state = ActivatorState.DISABLED
        obj.size = 0.0