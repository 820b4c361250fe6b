"""Placing, deleting and choosing objects with the mouse and keyboard."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from silksong.color import ColorPalette
from silksong.core import ActivatorType, CoreGame, GameObject, ObjectKind

INPUT_BACKOFF = 0.25
DELETE_RADIUS = 10.0


class SelectedItem(Enum):
    """The kind of object the next click places."""

    ACTIVATOR = "activator"
    NOTE = "note"

    def switch(self) -> SelectedItem:
        """The other item."""
        return SelectedItem.NOTE if self is SelectedItem.ACTIVATOR else SelectedItem.ACTIVATOR

    def label(self) -> str:
        """The name shown in the picker."""
        return "Activator" if self is SelectedItem.ACTIVATOR else "Note"


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass
class InputTimer:
    """A one-shot timer that blocks mouse input for a short time after a click."""

    duration: float = INPUT_BACKOFF
    elapsed: float = 0.0
    finished: bool = False

    def tick(self, delta: float) -> bool:
        """Advance by ``delta`` seconds; True only on the tick on which the timer finishes."""
        if delta < 0:
            raise ValueError("delta must not be negative")
        if self.finished:
            return False
        self.elapsed = min(self.elapsed + delta, self.duration)
        if self.elapsed >= self.duration:
            self.finished = True
            return True
        return False


class Picker:
    """Turns mouse clicks and keys into objects placed in or removed from a game."""

    def __init__(self, game: CoreGame) -> None:
        self.game = game
        self.selected = SelectedItem.NOTE
        self.timer: InputTimer | None = None

    def handle_mouse(
        self,
        delta: float,
        button: MouseButton | None,
        position: Sequence[float] | None,
    ) -> GameObject | list[int] | None:
        """Handle at most one click, with a back-off between clicks.

        ``button`` is None when there was no click; ``position`` is None when the
        click could not be mapped to the world. Returns the placed object, the ids
        of deleted objects, or None.
        """
        if self.timer is not None:
            if self.timer.tick(delta):
                self.timer = None
            else:
                return None

        if button is None:
            return None

        result: GameObject | list[int] | None = None
        if position is not None:
            if button is MouseButton.LEFT:
                result = self.place_object(position)
            elif button is MouseButton.RIGHT:
                result = self.delete_object(position)

        self.timer = InputTimer()
        return result

    def place_object(self, position: Sequence[float]) -> GameObject:
        """Place the selected item at ``position``."""
        if self.selected is SelectedItem.ACTIVATOR:
            color = ColorPalette.get_random(position)
            return self.game.spawn_activator(
                position, ActivatorType.PASSIVE, color, manually_placed=True
            )
        return self.game.spawn_note(position, manually_placed=True)

    def delete_object(self, position: Sequence[float]) -> list[int]:
        """Remove placed objects near ``position``; the main activator stays."""
        x, y = position
        removed = []
        for obj in list(self.game.objects.values()):
            if not obj.manually_placed:
                continue
            if math.hypot(obj.position[0] - x, obj.position[1] - y) >= DELETE_RADIUS:
                continue
            if obj.kind is ObjectKind.ACTIVATOR and obj.activator_type is ActivatorType.MAIN:
                continue
            self.game.despawn(obj.id)
            removed.append(obj.id)
        return removed

    def clear(self) -> list[int]:
        """Remove every placed object; returns their ids."""
        removed = [obj.id for obj in self.game.objects.values() if obj.manually_placed]
        for object_id in removed:
            self.game.despawn(object_id)
        return removed

    def switch_item(self) -> str:
        """Select the other item; returns its label."""
        self.selected = self.selected.switch()
        return self.selected.label()