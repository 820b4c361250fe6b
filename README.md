# silksong

A small musical puzzle game. You put notes and activators on a board and then
start playback. Each active activator grows as a circle. When the circle
reaches a note, the note plays. When it reaches another activator, that
activator switches on and starts to grow as well.

The pitch of a note depends on the angle from the activator that reaches it to
the note. The full circle is split into as many parts as the level's scale has
notes. In creative mode the scale is A natural minor.

## Installation

```
pip install .
```

This also installs `pygame`, which the game uses for its window and its sound.

## Playing

```
silksong
```

Options:

- `--width`, `--height`: the window size in pixels. The default is 1280×720.
  You can resize the window while the game runs.
- `--mute`: start without sound.

Controls, while building:

- **Left click**: place the selected item, either a note or an activator. A
  new activator gets a colour chosen from its position.
- **Right click**: remove every object you placed within 10 units of the
  cursor. You cannot remove the main activator at the centre.
- **Backspace**: remove everything you placed.

Controls at any time after setup:

- **Ctrl**: switch the selected item between note and activator. A box in the
  top-left corner shows the current choice.
- **Space**: start playback, or return to building. This key does nothing
  until you have placed at least one object.
- **Escape**: close the game.

Playback ends by itself when every active activator has reached all of its
objects. The game then returns to building.

### Sound files

The package does not include any audio. When sound is on, the game loads WAV
files from an `audio/` directory in the current working directory:

- the piano notes `audio/piano_a.wav`, `audio/piano_as.wav`, …,
  `audio/piano_gs.wav`
- the background strings `audio/strings_Am_1_I_iv_VI_v.wav` and
  `audio/strings_Am_2_I_iidim_v_VII.wav`

The background track repeats every 15 seconds. Every fourth repetition uses the
second track. If these files are missing, run the game with `--mute`.

## Using the pieces in code

The game logic does not need a window, so you can use it and test it on its own.

```python
from silksong.music_model import NaturalMinorScale, Note
from silksong.geometry import calculate_scale_position_by_angle

scale = NaturalMinorScale(Note.A)
index = calculate_scale_position_by_angle((0.0, 0.0), (0.0, 1.0), scale)
print(index, scale.get(index))  # 2 Note.B
```

`Scale.get` counts indexes from 1 and wraps them around the scale. A natural
minor has seven notes, so 0 and 1 both give the root, and 8 gives the root
again.

Other modules:

- `silksong.core`: `CoreGame` holds the board's `GameObject`s, spawns notes
  and activators, and runs playback with `enter_execution`, `update` and
  `exit_execution`.
- `silksong.state`: `GameStateMachine` steps through the game states
  (`GameState`).
- `silksong.picker`: `Picker` places, deletes and clears objects.
- `silksong.music_player`: `NotePlayer` turns the note events from `update`
  into piano sounds through an audio backend.
- `silksong.audio`: the background timer and the sample file paths.
- `silksong.color`: `ColorPalette`, the colours that activators use.
- `silksong.creative_mode`: the level settings and the starting main
  activator.
- `silksong.app`: `Session` ties these together frame by frame, and `main`
  runs the window.

## What it does not do

The game has only creative mode: a free board with no puzzles, goals or saved
layouts. It draws notes and activators as plain circles on a black background.
There are no icons or animated backgrounds.