"""Notes, steps and musical scales."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Step(Enum):
    """An interval between two neighbouring notes of a scale."""

    HALF = 1
    WHOLE = 2

    @property
    def semitones(self) -> int:
        return self.value


class Note(Enum):
    """The twelve notes of the chromatic scale, starting at A."""

    A = "A"
    AS = "A#"
    B = "B"
    C = "C"
    CS = "C#"
    D = "D"
    DS = "D#"
    E = "E"
    F = "F"
    FS = "F#"
    G = "G"
    GS = "G#"

    def next(self, step: Step) -> Note:
        """Return the note one ``step`` above this one, wrapping at the octave."""
        notes = tuple(type(self))
        return notes[(notes.index(self) + step.semitones) % len(notes)]


class Scale(ABC):
    """A scale built from a root note and a sequence of steps."""

    def __init__(self, root: Note) -> None:
        self.root = root

    def size(self) -> int:
        """Number of distinct notes in the scale."""
        return len(self.steps()) + 1

    @abstractmethod
    def steps(self) -> list[Step]:
        """The steps from the root upwards, not including the step back to the root."""

    def get(self, index: int) -> Note:
        """Return the note at a 1-based ``index``; 0 also means the root.

        Indexes wrap around the scale, so any non-negative index is accepted.
        """
        position = max(index - 1, 0) % self.size()
        result = self.root
        for step in self.steps()[:position]:
            result = result.next(step)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.root!r})"


class NaturalMinorScale(Scale):
    """The natural minor (aeolian) scale."""

    def steps(self) -> list[Step]:
        return [Step.WHOLE, Step.HALF, Step.WHOLE, Step.WHOLE, Step.HALF, Step.WHOLE]