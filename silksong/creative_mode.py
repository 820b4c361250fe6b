"""Creative mode: a free level where anything can be placed and played at any time."""

from __future__ import annotations

from enum import Enum

from silksong.core import ActivatorType, CoreGame, GameObject, LevelConfig
from silksong.music_model import NaturalMinorScale, Note
from silksong.state import GameState

GROW_FACTOR = 100.0


class CreativeModeState(Enum):
    """Whether creative mode is being set up, running or off."""

    OFF = "off"
    SETUP = "setup"
    ON = "on"

    @classmethod
    def compute(cls, source: GameState) -> CreativeModeState:
        """Derive the creative mode state from the game state."""
        if source in (GameState.SETUP_RESOURCES, GameState.SETUP_GAME_OBJECTS):
            return cls.SETUP
        if source in (GameState.BUILD, GameState.EXECUTE):
            return cls.ON
        return cls.OFF


def setup_config() -> LevelConfig:
    """The level settings for creative mode."""
    return LevelConfig(grow_factor=GROW_FACTOR, scale=NaturalMinorScale(Note.A))


def setup_entities(game: CoreGame) -> GameObject:
    """Place the main activator at the origin; returns it."""
    return game.spawn_activator((0.0, 0.0), ActivatorType.MAIN)