"""Application and game states and their transitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class AppState(Enum):
    """State of the whole application."""

    GAME = "game"


class GameState(Enum):
    """In-game state."""

    SETUP_RESOURCES = "setup_resources"
    SETUP_GAME_OBJECTS = "setup_game_objects"
    BUILD = "build"
    EXECUTE = "execute"
    OVER = "over"


class MinimalGameState(Enum):
    """Coarse view of the game state: setting up or running."""

    SETUP = "setup"
    RUNNING = "running"

    @classmethod
    def compute(cls, source: GameState) -> MinimalGameState:
        if source in (GameState.SETUP_RESOURCES, GameState.SETUP_GAME_OBJECTS):
            return cls.SETUP
        return cls.RUNNING


@dataclass(frozen=True)
class Transition:
    """A change from one game state to another."""

    exited: GameState
    entered: GameState


class GameStateMachine:
    """Holds the current game state and a pending next state."""

    def __init__(self) -> None:
        self.app_state = AppState.GAME
        self.game_state = GameState.SETUP_RESOURCES
        self.pending: GameState | None = None

    def set_next(self, state: GameState) -> None:
        """Request a change to ``state`` at the next transition point."""
        if not isinstance(state, GameState):
            raise TypeError(f"expected a GameState, got {state!r}")
        self.pending = state

    def apply_transitions(self) -> Transition | None:
        """Apply a pending change; returns the transition, or None if nothing changed."""
        pending, self.pending = self.pending, None
        if pending is None or pending == self.game_state:
            return None
        transition = Transition(exited=self.game_state, entered=pending)
        self.game_state = pending
        return transition

    def post_update(self) -> None:
        """Advance through the set-up states once their work is done."""
        if self.game_state == GameState.SETUP_RESOURCES:
            self.set_next(GameState.SETUP_GAME_OBJECTS)
            logger.info("resources are setup")
        elif self.game_state == GameState.SETUP_GAME_OBJECTS:
            self.set_next(GameState.BUILD)
            logger.info("game objects are setup")

    def minimal(self) -> MinimalGameState:
        """The coarse state derived from the current game state."""
        return MinimalGameState.compute(self.game_state)