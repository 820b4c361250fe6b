"""Plays piano notes when activators reach notes."""

from __future__ import annotations

from typing import Any, Protocol

from silksong.audio import piano_sample_path
from silksong.core import CoreGame, NotePlayedEvent, ObjectKind
from silksong.geometry import calculate_scale_position_by_angle
from silksong.music_model import Note

NOTE_VOLUME = 0.3


class AudioBackend(Protocol):
    def play(self, path: str, volume: float) -> Any: ...

    def set_volume(self, handle: Any, volume: float) -> None: ...


class NotePlayer:
    """Turns played notes into piano sounds, one active sound per pitch."""

    def __init__(self, backend: AudioBackend) -> None:
        self.backend = backend
        self.active: dict[Note, Any] = {}

    def handle(self, event: NotePlayedEvent, game: CoreGame) -> Note | None:
        """Play the pitch selected by the note's angle around its activator.

        Returns the pitch played, or None if the event's objects are gone.
        """
        activator = game.objects.get(event.source)
        note = game.objects.get(event.note)
        if activator is None or activator.kind is not ObjectKind.ACTIVATOR:
            return None
        if note is None or note.kind is not ObjectKind.NOTE:
            return None

        scale = game.config.scale
        index = calculate_scale_position_by_angle(activator.position, note.position, scale)
        played = scale.get(index)

        previous = self.active.get(played)
        if previous is not None:
            self.backend.set_volume(previous, 0.0)
        self.active[played] = self.backend.play(piano_sample_path(played), NOTE_VOLUME)
        return played