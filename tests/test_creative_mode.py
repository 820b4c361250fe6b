import pytest

from silksong.core import ActivatorState, ActivatorType, CoreGame, ObjectKind
from silksong.creative_mode import CreativeModeState, setup_config, setup_entities
from silksong.music_model import NaturalMinorScale, Note
from silksong.state import GameState, GameStateMachine


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        (GameState.SETUP_RESOURCES, CreativeModeState.SETUP),
        (GameState.SETUP_GAME_OBJECTS, CreativeModeState.SETUP),
        (GameState.BUILD, CreativeModeState.ON),
        (GameState.EXECUTE, CreativeModeState.ON),
        (GameState.OVER, CreativeModeState.OFF),
    ],
)
def test_compute(source, expected):
    assert CreativeModeState.compute(source) is expected


def test_setup_config():
    config = setup_config()
    assert config.grow_factor == 100.0
    assert isinstance(config.scale, NaturalMinorScale)
    assert config.scale.get(1) is Note.A


def test_setup_entities_places_main_activator():
    game = CoreGame(setup_config(), GameStateMachine())
    main = setup_entities(game)
    assert game.get(main.id) is main
    assert main.kind is ObjectKind.ACTIVATOR
    assert main.activator_type is ActivatorType.MAIN
    assert main.position == (0.0, 0.0)
    assert main.manually_placed is False
    assert main.state is ActivatorState.DISABLED