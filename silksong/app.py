"""The game session and the window that runs it."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import Any

from silksong.audio import STRINGS_1, BackgroundTimer, PygameAudioBackend, background_track
from silksong.color import ColorPalette
from silksong.core import ActivatorType, CoreGame, ObjectKind
from silksong.creative_mode import CreativeModeState, setup_config, setup_entities
from silksong.music_player import NotePlayer
from silksong.picker import MouseButton, Picker, SelectedItem
from silksong.state import GameState, GameStateMachine, MinimalGameState, Transition

logger = logging.getLogger(__name__)

KEY_SPACE = "space"
KEY_BACKSPACE = "backspace"
KEY_CONTROL = "control"
KEY_ESCAPE = "escape"

BACKGROUND_VOLUME = 1.0


class Session:
    """One running game: states, level objects, input and audio.

    Before each ``update`` the caller puts the keys pressed in this frame into
    ``pressed`` and at most one click, as ``(button, world_position)``, into ``mouse``.
    """

    def __init__(self) -> None:
        self.states = GameStateMachine()
        self.game = CoreGame(setup_config(), self.states)
        self.picker = Picker(self.game)
        self.audio: Any = None
        self.note_player: NotePlayer | None = None
        self.background_timer: BackgroundTimer | None = None
        self.pressed: set[str] = set()
        self.mouse: tuple[MouseButton, Sequence[float] | None] | None = None
        self.running = True

    def handle_game_loop_input(self) -> None:
        """Toggle between building and executing on space, once something is placed."""
        if not any(obj.manually_placed for obj in self.game.objects.values()):
            return
        if KEY_SPACE not in self.pressed:
            return
        if self.states.game_state is GameState.BUILD:
            self.states.set_next(GameState.EXECUTE)
        elif self.states.game_state is GameState.EXECUTE:
            self.states.set_next(GameState.BUILD)

    def update(self, delta: float) -> None:
        """Run one frame of ``delta`` seconds."""
        transition = self.states.apply_transitions()
        if transition is not None:
            self._on_transition(transition)

        if KEY_ESCAPE in self.pressed:
            self.running = False
        self.handle_game_loop_input()

        if self.states.game_state is GameState.BUILD:
            button, position = self.mouse if self.mouse is not None else (None, None)
            self.picker.handle_mouse(delta, button, position)
            if KEY_BACKSPACE in self.pressed:
                self.picker.clear()

        if self.states.minimal() is MinimalGameState.RUNNING and KEY_CONTROL in self.pressed:
            self.picker.switch_item()

        for event in self.game.update(delta):
            if self.note_player is not None:
                self.note_player.handle(event, self.game)

        self._background(delta)
        self.states.post_update()
        self.pressed.clear()
        self.mouse = None

    def _on_transition(self, transition: Transition) -> None:
        if transition.exited is GameState.EXECUTE:
            self.game.exit_execution()
        if transition.entered is GameState.SETUP_GAME_OBJECTS:
            if CreativeModeState.compute(transition.entered) is CreativeModeState.SETUP:
                setup_entities(self.game)
            self.picker.selected = SelectedItem.NOTE
            self.background_timer = BackgroundTimer()
        if transition.entered is GameState.EXECUTE:
            self.game.enter_execution()
        before = MinimalGameState.compute(transition.exited)
        after = MinimalGameState.compute(transition.entered)
        if before is MinimalGameState.SETUP and after is MinimalGameState.RUNNING:
            self._play_background(STRINGS_1)

    def _background(self, delta: float) -> None:
        if self.states.minimal() is not MinimalGameState.RUNNING:
            return
        if self.background_timer is None:
            return
        repeat = self.background_timer.tick(delta)
        if repeat is not None:
            self._play_background(background_track(repeat))

    def _play_background(self, path: str) -> None:
        if self.audio is not None:
            self.audio.play(path, BACKGROUND_VOLUME)


def _to_world(pos: Sequence[int], size: Sequence[int]) -> tuple[float, float]:
    return pos[0] - size[0] / 2.0, size[1] / 2.0 - pos[1]


def _to_screen(pos: Sequence[float], size: Sequence[int]) -> tuple[int, int]:
    return round(pos[0] + size[0] / 2.0), round(size[1] / 2.0 - pos[1])


def _rgb(color: ColorPalette) -> tuple[int, int, int]:
    rgba = color.as_rgba()
    return round(rgba.red * 255), round(rgba.green * 255), round(rgba.blue * 255)


def _draw(pygame: Any, screen: Any, font: Any, session: Session) -> None:
    screen.fill((0, 0, 0))
    size = screen.get_size()
    for obj in session.game.objects.values():
        center = _to_screen(obj.position, size)
        if obj.kind is ObjectKind.NOTE:
            pygame.draw.circle(screen, (255, 255, 255), center, 6)
            continue
        color = _rgb(obj.color)
        radius = 14 if obj.activator_type is ActivatorType.MAIN else 9
        pygame.draw.circle(screen, color, center, radius, width=0 if obj.is_active() else 3)
        if obj.is_active() and obj.size >= 1.0:
            pygame.draw.circle(screen, color, center, int(obj.size), width=2)

    if session.states.minimal() is MinimalGameState.RUNNING:
        label = font.render(session.picker.selected.label(), True, (0, 0, 0))
        box = pygame.Rect(10, 10, max(120, label.get_width() + 20), label.get_height() + 16)
        pygame.draw.rect(screen, (255, 255, 255), box, border_radius=10)
        screen.blit(label, (box.x + 10, box.y + 8))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="silksong", description="Arrange notes and play them.")
    parser.add_argument("--width", type=int, default=1280, help="window width in pixels")
    parser.add_argument("--height", type=int, default=720, help="window height in pixels")
    parser.add_argument("--mute", action="store_true", help="start without sound")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Silksong")
    font = pygame.font.Font(None, 28)
    clock = pygame.time.Clock()

    session = Session()
    if not args.mute:
        try:
            backend = PygameAudioBackend()
        except pygame.error as error:
            logger.warning("audio unavailable: %s", error)
        else:
            session.audio = backend
            session.note_player = NotePlayer(backend)

    keys = {
        pygame.K_SPACE: KEY_SPACE,
        pygame.K_BACKSPACE: KEY_BACKSPACE,
        pygame.K_LCTRL: KEY_CONTROL,
        pygame.K_RCTRL: KEY_CONTROL,
        pygame.K_ESCAPE: KEY_ESCAPE,
    }
    buttons = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}

    try:
        while session.running:
            delta = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.running = False
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    session.pressed.add(keys[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and session.mouse is None:
                    button = buttons.get(event.button)
                    if button is not None:
                        session.mouse = (button, _to_world(event.pos, screen.get_size()))
            session.update(delta)
            _draw(pygame, screen, font, session)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0