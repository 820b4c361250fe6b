import pytest

from silksong.audio import (
    STRINGS_1,
    STRINGS_2,
    BackgroundRepetition,
    BackgroundTimer,
    background_track,
    piano_sample_path,
)
from silksong.music_model import Note


def test_repetition_cycles_through_four():
    repetition = BackgroundRepetition()
    seen = []
    for _ in range(5):
        repetition.proceed()
        seen.append(repetition.count)
    assert seen == [1, 2, 3, 0, 1]


def test_timer_fires_after_interval():
    timer = BackgroundTimer()
    assert timer.tick(14.9) is None
    assert timer.tick(0.2) == 1
    assert timer.elapsed < timer.duration


def test_timer_fires_once_for_long_delta():
    timer = BackgroundTimer()
    assert timer.tick(40.0) == 1
    assert timer.repetition.count == 1


def test_timer_sequence_reaches_second_track():
    timer = BackgroundTimer()
    repeats = [timer.tick(15.0) for _ in range(4)]
    assert repeats == [1, 2, 3, 0]
    assert [background_track(r) for r in repeats] == [STRINGS_1, STRINGS_1, STRINGS_2, STRINGS_1]


def test_timer_rejects_negative_delta():
    with pytest.raises(ValueError):
        BackgroundTimer().tick(-1.0)


def test_piano_sample_paths():
    assert piano_sample_path(Note.A) == "audio/piano_a.wav"
    assert piano_sample_path(Note.AS) == "audio/piano_as.wav"
    assert piano_sample_path(Note.GS) == "audio/piano_gs.wav"
    assert len({piano_sample_path(n) for n in Note}) == len(Note)