"""Audio assets and background music timing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from silksong.music_model import Note

BACKGROUND_INTERVAL = 15.0
STRINGS_1 = "audio/strings_Am_1_I_iv_VI_v.wav"
STRINGS_2 = "audio/strings_Am_2_I_iidim_v_VII.wav"


@dataclass
class BackgroundRepetition:
    """Counts repetitions of the background strings, cycling through 0..3."""

    count: int = 0

    def proceed(self) -> None:
        self.count = (self.count + 1) % 4


@dataclass
class BackgroundTimer:
    """A repeating timer that advances the background repetition when it fires."""

    duration: float = BACKGROUND_INTERVAL
    elapsed: float = 0.0
    repetition: BackgroundRepetition = field(default_factory=BackgroundRepetition)

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("duration must be positive")

    def tick(self, delta: float) -> int | None:
        """Advance by ``delta`` seconds; returns the new repetition if the timer fired."""
        if delta < 0:
            raise ValueError("delta must not be negative")
        self.elapsed += delta
        if self.elapsed < self.duration:
            return None
        self.elapsed %= self.duration
        self.repetition.proceed()
        return self.repetition.count


def background_track(repeat: int) -> str:
    """The background track to start for a repetition."""
    return STRINGS_2 if repeat == 3 else STRINGS_1


def piano_sample_path(note: Note) -> str:
    """The piano sample file for ``note``."""
    return f"audio/piano_{note.name.lower()}.wav"


class PygameAudioBackend:
    """Plays audio files through the pygame mixer."""

    def __init__(self) -> None:
        import pygame

        self._pygame = pygame
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        self._sounds: dict[str, Any] = {}

    def play(self, path: str, volume: float) -> Any:
        """Start ``path`` at ``volume``; returns the playing channel, or None."""
        sound = self._sounds.get(path)
        if sound is None:
            sound = self._sounds[path] = self._pygame.mixer.Sound(path)
        channel = sound.play()
        if channel is not None:
            channel.set_volume(volume)
        return channel

    def set_volume(self, handle: Any, volume: float) -> None:
        if handle is not None:
            handle.set_volume(volume)