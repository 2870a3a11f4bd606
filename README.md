# moodterm

A small graphical "terminal" toy. You type commands at a `MoodTerminal>`
prompt and the window's colours change with the terminal's mood. It can
also play pong, launch fireworks and draw a rolling ASCII wave.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and plays the sounds.

## Running

```
moodterm
```

A 1200×600 window opens, plays a boot-up splash with a progress bar and a
diagonal screen wipe, and then leaves you at the prompt. Sounds and the
font are loaded from an `Assets/` directory in the working directory
(`Assets/Sounds/*.wav`, `Assets/Fonts/consolas.ttf`). When a sound is
missing it is logged and stays silent; when the font is missing pygame's
default font is used.

## Commands

| Command     | What it does                                              |
|-------------|-----------------------------------------------------------|
| `help`      | Lists the available commands.                             |
| `clear`     | Clears the output and plays a diagonal wipe animation.    |
| `exit`      | Closes the terminal.                                      |
| `mood`      | Shows the current mood; `mood <name>` changes it.         |
| `moodvirus` | Toggles random mood changes after random delays.          |
| `moodlist`  | Lists the moods: Happy, Sad, Angry, Excited, Crazy, None. |
| `print`     | Prints its arguments back to the terminal.                |
| `time`      | Shows the current date and time as `d-m-yyyy h:m:s`.      |
| `pong`      | Starts a two-player pong game.                            |
| `asciiwave` | Starts the ASCII wave animation.                          |
| `fireworks` | Starts the fireworks animation.                           |

Command names are case-insensitive, and so are mood names. The Crazy
mood cycles its colours continuously. Wrong arguments, an unknown
command or `print` with nothing to print write an `Error:` line and play
the error sound.

## Keys

- **Enter** runs the typed line; **Backspace** removes the last character.
- **Left / Right** move the cursor within the input line.
- **Up / Down** walk through previously entered commands.
- **Escape** leaves an animation or the pong game; at the prompt it
  closes the window.
- In pong, **W / S** move the left paddle and **Up / Down** the right one.

Only ASCII characters are accepted on the input line.

## Using it from Python

Most pieces work without a window, which makes them easy to script or
test (pygame still has to be installed):

```python
from moodterm.history import History
from moodterm.mood import MoodManager

history = History()
moods = MoodManager()
moods.set_mood("happy")
history.add("mood is now " + moods.mood)
```

Other building blocks are `moodterm.pong.Pong`,
`moodterm.fireworks.Fireworks`, `moodterm.animation.AnimationManager`,
`moodterm.commands.CommandManager` and `moodterm.terminal.Terminal`;
`moodterm.terminal.main()` starts the full application.

## Limitations

`help` with a command name prints nothing: there is no per-command help
text, only the list that plain `help` shows.

## Tests

```
pip install .[test]
pytest
```