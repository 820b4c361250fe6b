import pytest

from silksong.core import ActivatorType, CoreGame, LevelConfig, NotePlayedEvent
from silksong.music_model import NaturalMinorScale, Note
from silksong.music_player import NOTE_VOLUME, NotePlayer
from silksong.state import GameStateMachine


class FakeBackend:
    def __init__(self):
        self.played = []
        self.volumes = []

    def play(self, path, volume):
        self.played.append((path, volume))
        return len(self.played)

    def set_volume(self, handle, volume):
        self.volumes.append((handle, volume))


@pytest.fixture
def game():
    return CoreGame(
        LevelConfig(grow_factor=100.0, scale=NaturalMinorScale(Note.A)), GameStateMachine()
    )


def test_plays_note_by_angle(game):
    backend = FakeBackend()
    player = NotePlayer(backend)
    activator = game.spawn_activator((1.0, 1.0), ActivatorType.MAIN)
    note = game.spawn_note((1.0, 2.0))
    assert player.handle(NotePlayedEvent(activator.id, note.id), game) is Note.B
    assert backend.played == [("audio/piano_b.wav", NOTE_VOLUME)]
    assert backend.volumes == []


def test_silences_previous_player_of_same_pitch(game):
    backend = FakeBackend()
    player = NotePlayer(backend)
    activator = game.spawn_activator((0.0, 0.0))
    note = game.spawn_note((0.0, 1.0))
    event = NotePlayedEvent(activator.id, note.id)
    player.handle(event, game)
    player.handle(event, game)
    assert backend.volumes == [(1, 0.0)]
    assert player.active[Note.B] == 2


def test_center_point_plays_root(game):
    backend = FakeBackend()
    player = NotePlayer(backend)
    activator = game.spawn_activator((3.0, 3.0))
    note = game.spawn_note((3.0, 3.0))
    assert player.handle(NotePlayedEvent(activator.id, note.id), game) is Note.A


def test_missing_objects_are_ignored(game):
    backend = FakeBackend()
    player = NotePlayer(backend)
    note = game.spawn_note((1.0, 0.0))
    assert player.handle(NotePlayedEvent(999, note.id), game) is None
    assert player.handle(NotePlayedEvent(note.id, note.id), game) is None
    assert backend.played == []